from pydantic import BaseModel, Field


class ConversionResponse(BaseModel):
	success: bool = Field(..., description='Whether the conversion succeeded')
	amount: float = Field(0.0, description='Original amount requested')
	from_currency: str = Field('', description='Source currency code')
	to_currency: str = Field('', description='Target currency code')
	result: float = Field(0.0, description='Converted amount')
	rate: float = Field(0.0, description='Exchange rate used for conversion')
	last_update: str = Field('', description='Local time of the conversion, HH:MM:SS')
	error_message: str | None = Field(None, description='Why the conversion failed')

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'success': True,
				'amount': 100.0,
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'result': 85.5,
				'rate': 0.855,
				'last_update': '10:30:00',
			}
		}


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: float = Field(..., description='Units of to_currency per one from_currency')


class RateRowResponse(BaseModel):
	multiplier: int
	from_amount: float
	to_amount: float


class RatesTableResponse(BaseModel):
	from_currency: str
	to_currency: str
	rows: list[RateRowResponse] = Field(description='Empty when no rate is available')


class CurrencyResponse(BaseModel):
	code: str
	name: str
	type: str = Field(..., description='"fiat" or "crypto"')
	symbol: str | None = None
	flag: str | None = None
	icon: str | None = None


class CurrencyListResponse(BaseModel):
	currencies: list[CurrencyResponse]


class SettingsResponse(BaseModel):
	theme: str
	language: str

	class ConfigDict:
		json_schema_extra = {'examples': [{'theme': 'dark', 'language': 'ru'}]}
