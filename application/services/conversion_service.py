import logging
import math
from collections.abc import Callable
from datetime import datetime

from application.services.rate_service import RateService
from domain.exceptions.currency import CurrencyException, ValidationError
from domain.models.currency import ConversionResult, RateRow

logger = logging.getLogger(__name__)

TABLE_MULTIPLIERS = (1, 10, 100, 1000)


class ConversionService:
	def __init__(self, rate_service: RateService, clock: Callable[[], datetime] = datetime.now):
		self.rate_service = rate_service
		self.clock = clock

	async def convert(self, amount: float, from_currency: str, to_currency: str) -> ConversionResult:
		"""Convert an amount, reporting failures in the result instead of raising."""
		try:
			if not math.isfinite(amount) or amount <= 0:
				raise ValidationError('Amount must be greater than 0')
			rate = await self.rate_service.get_rate(from_currency, to_currency)
		except CurrencyException as e:
			return ConversionResult(success=False, error_message=str(e))

		return ConversionResult(
			success=True,
			amount=amount,
			from_currency=from_currency,
			to_currency=to_currency,
			result=amount * rate,
			rate=rate,
			last_update=self.clock().strftime('%H:%M:%S'),
		)

	async def rates_table(self, from_currency: str, to_currency: str) -> list[RateRow]:
		try:
			rate = await self.rate_service.get_rate(from_currency, to_currency)
		except CurrencyException as e:
			logger.error(f'Rates table for {from_currency}-{to_currency} unavailable: {e}')
			return []

		return [
			RateRow(multiplier=m, from_amount=float(m), to_amount=m * rate)
			for m in TABLE_MULTIPLIERS
		]
