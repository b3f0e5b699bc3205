import math

from domain.exceptions.currency import NotFoundError, ParseError, ZeroRateError
from infrastructure.providers.base import BaseJSONProvider
from infrastructure.providers.schemas import SimplePricePayload


class CoinGeckoProvider(BaseJSONProvider):
    BASE_URL = "https://api.coingecko.com/api/v3"

    @property
    def name(self) -> str:
        return "coingecko"

    async def _simple_price(self, ids: list[str], vs_currency: str) -> SimplePricePayload:
        data = await self._request(
            "simple/price",
            {"ids": ",".join(ids), "vs_currencies": vs_currency},
        )
        return self._parse(SimplePricePayload, data)


class CryptoPairProvider(CoinGeckoProvider):
    """Crypto-to-crypto cross rate through both coins' USD prices."""

    async def fetch_rate(self, from_id: str, to_id: str) -> float:
        prices = await self._simple_price([from_id, to_id], "usd")

        from_usd = prices.price(from_id, "usd")
        to_usd = prices.price(to_id, "usd")
        if from_usd is None or to_usd is None:
            raise NotFoundError(f"Crypto rate not found for {from_id}/{to_id}")
        if to_usd == 0:
            raise ZeroRateError(f"USD price of {to_id} is zero")

        rate = from_usd / to_usd
        if not math.isfinite(rate):
            raise ParseError(f"Non-finite cross rate for {from_id}/{to_id}")
        if rate <= 0:
            raise ZeroRateError(f"Non-positive cross rate for {from_id}/{to_id}")
        return rate


class CryptoFiatProvider(CoinGeckoProvider):
    """Price of one coin quoted in a fiat currency."""

    async def fetch_price(self, crypto_id: str, fiat_code: str) -> float:
        fiat_lower = fiat_code.lower()
        prices = await self._simple_price([crypto_id], fiat_lower)

        price = prices.price(crypto_id, fiat_lower)
        if price is None:
            raise NotFoundError(f"Rate not found for {crypto_id} in {fiat_code}")
        if not math.isfinite(price):
            raise ParseError(f"Non-finite price for {crypto_id} in {fiat_code}")
        if price <= 0:
            raise ZeroRateError(f"Non-positive price for {crypto_id} in {fiat_code}")
        return price
