import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, CurrencyService, RateService
from config.settings import get_settings
from domain.catalog import CurrencyCatalog
from infrastructure.cache.memory_cache import RateCache
from infrastructure.persistence.settings_store import SettingsStore
from infrastructure.providers import (
	CryptoFiatProvider,
	CryptoPairProvider,
	FiatRateProvider,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	catalog: CurrencyCatalog | None = None
	rate_cache: RateCache | None = None
	fiat_provider: FiatRateProvider | None = None
	crypto_pair_provider: CryptoPairProvider | None = None
	crypto_fiat_provider: CryptoFiatProvider | None = None
	settings_store: SettingsStore | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.catalog = CurrencyCatalog()
	deps.rate_cache = RateCache(rate_ttl=timedelta(seconds=settings.RATE_TTL_SECONDS))
	deps.fiat_provider = FiatRateProvider(
		base_url=settings.FIAT_API_URL, timeout=settings.HTTP_TIMEOUT
	)
	deps.crypto_pair_provider = CryptoPairProvider(
		base_url=settings.CRYPTO_API_URL, timeout=settings.HTTP_TIMEOUT
	)
	deps.crypto_fiat_provider = CryptoFiatProvider(
		base_url=settings.CRYPTO_API_URL, timeout=settings.HTTP_TIMEOUT
	)
	deps.settings_store = SettingsStore(settings.USER_SETTINGS_PATH)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	for provider in (deps.fiat_provider, deps.crypto_pair_provider, deps.crypto_fiat_provider):
		if provider:
			await provider.close()

	logger.info('Cleanup complete')


def get_catalog() -> CurrencyCatalog:
	if deps.catalog is None:
		raise RuntimeError('Currency catalog not initialized')
	return deps.catalog


def get_settings_store() -> SettingsStore:
	if deps.settings_store is None:
		raise RuntimeError('Settings store not initialized')
	return deps.settings_store


def get_rate_service(
	catalog: Annotated[CurrencyCatalog, Depends(get_catalog)],
) -> RateService:
	if (
		deps.rate_cache is None
		or deps.fiat_provider is None
		or deps.crypto_pair_provider is None
		or deps.crypto_fiat_provider is None
	):
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	return RateService(
		catalog=catalog,
		cache=deps.rate_cache,
		fiat_provider=deps.fiat_provider,
		crypto_pair_provider=deps.crypto_pair_provider,
		crypto_fiat_provider=deps.crypto_fiat_provider,
		resolve_timeout=get_settings().RESOLVE_TIMEOUT,
	)


def get_currency_service(
	catalog: Annotated[CurrencyCatalog, Depends(get_catalog)],
) -> CurrencyService:
	return CurrencyService(catalog=catalog)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service)
