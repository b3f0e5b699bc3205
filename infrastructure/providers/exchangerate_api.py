import math

from domain.exceptions.currency import NotFoundError, ParseError, ZeroRateError
from infrastructure.providers.base import BaseJSONProvider
from infrastructure.providers.schemas import FiatRatesPayload


class FiatRateProvider(BaseJSONProvider):
	"""Fiat-to-fiat rates from the exchangerate-api.com base-currency table."""

	BASE_URL = 'https://api.exchangerate-api.com/v4'

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def fetch_rate(self, from_currency: str, to_currency: str) -> float:
		data = await self._request(f'latest/{from_currency}')
		payload = self._parse(FiatRatesPayload, data)

		try:
			value = payload.rates[to_currency]
		except KeyError as e:
			raise NotFoundError(f'Currency {to_currency} not found') from e

		if isinstance(value, str):
			try:
				rate = float(value)
			except ValueError as e:
				raise ParseError(f'Invalid rate format for {to_currency}: {value!r}') from e
		else:
			rate = float(value)

		if not math.isfinite(rate):
			raise ParseError(f'Non-finite rate for {to_currency}: {value!r}')

		if rate <= 0:
			raise ZeroRateError(f'{self.name} returned non-positive rate for {to_currency}')
		return rate
