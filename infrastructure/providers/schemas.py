from typing import Annotated

from pydantic import BaseModel, Field, RootModel, StrictInt, StrictStr

FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]

# A fiat rate may come back as a JSON number or as a numeric string.
FiatRateValue = StrictInt | FiniteFloat | StrictStr

Price = StrictInt | FiniteFloat


class FiatRatesPayload(BaseModel):
    """Body of ``GET /latest/{base}`` on exchangerate-api."""

    rates: dict[str, FiatRateValue]


class SimplePricePayload(RootModel[dict[str, dict[str, Price]]]):
    """Body of CoinGecko ``GET /simple/price``: coin id -> vs currency -> price."""

    def price(self, coin_id: str, vs_currency: str) -> float | None:
        quotes = self.root.get(coin_id)
        if quotes is None or vs_currency not in quotes:
            return None
        return float(quotes[vs_currency])
