from .requests import SettingsRequest
from .responses import (
	ConversionResponse,
	CurrencyListResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	RateRowResponse,
	RatesTableResponse,
	SettingsResponse,
)

__all__ = [
	'ConversionResponse',
	'CurrencyListResponse',
	'CurrencyResponse',
	'ExchangeRateResponse',
	'RateRowResponse',
	'RatesTableResponse',
	'SettingsRequest',
	'SettingsResponse',
]
