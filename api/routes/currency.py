from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import (
	get_conversion_service,
	get_currency_service,
	get_rate_service,
)
from api.schemas import (
	ConversionResponse,
	CurrencyListResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	RateRowResponse,
	RatesTableResponse,
)
from application.services import (
	ConversionService,
	CurrencyService,
	RateService,
)

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=2, max_length=10)]


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: float,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = await service.convert(amount, from_currency.upper(), to_currency.upper())
	return ConversionResponse(
		success=result.success,
		amount=result.amount,
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		result=result.result,
		rate=result.rate,
		last_update=result.last_update,
		error_message=result.error_message,
	)


@router.get(
	'/rate/{from_currency}/{to_currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current exchange rate',
)
async def get_exchange_rate(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> ExchangeRateResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()

	rate = await service.get_rate(from_currency, to_currency)
	return ExchangeRateResponse(from_currency=from_currency, to_currency=to_currency, rate=rate)


@router.get(
	'/rates/{from_currency}/{to_currency}',
	response_model=RatesTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Get rate table for fixed amounts',
)
async def get_rates_table(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> RatesTableResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()

	rows = await service.rates_table(from_currency, to_currency)
	return RatesTableResponse(
		from_currency=from_currency,
		to_currency=to_currency,
		rows=[
			RateRowResponse(
				multiplier=row.multiplier, from_amount=row.from_amount, to_amount=row.to_amount
			)
			for row in rows
		],
	)


@router.get(
	'/currencies',
	response_model=CurrencyListResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_currency_list(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyListResponse:
	return CurrencyListResponse(
		currencies=[
			CurrencyResponse(
				code=c.code,
				name=c.name,
				type=c.type.value,
				symbol=c.symbol,
				flag=c.flag,
				icon=c.icon,
			)
			for c in service.get_currency_list()
		]
	)
