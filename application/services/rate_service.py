import asyncio
import logging
import math
from collections.abc import Awaitable, Callable
from datetime import datetime

from domain.catalog import CurrencyCatalog
from domain.exceptions.currency import NetworkError, ParseError, ProviderError, ZeroRateError
from domain.models.currency import CurrencyType
from infrastructure.cache.memory_cache import RateCache
from infrastructure.providers import CryptoFiatProvider, CryptoPairProvider, FiatRateProvider

logger = logging.getLogger(__name__)


class RateService:
    def __init__(
        self,
        catalog: CurrencyCatalog,
        cache: RateCache,
        fiat_provider: FiatRateProvider,
        crypto_pair_provider: CryptoPairProvider,
        crypto_fiat_provider: CryptoFiatProvider,
        resolve_timeout: float | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.catalog = catalog
        self.cache = cache
        self.fiat_provider = fiat_provider
        self.crypto_pair_provider = crypto_pair_provider
        self.crypto_fiat_provider = crypto_fiat_provider
        self.resolve_timeout = resolve_timeout
        self.clock = clock

    async def get_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Resolve the rate for one unit of from_currency in to_currency:
        1. Identity pairs are 1.0 without touching cache or network
        2. A fresh cached rate is returned as is
        3. Otherwise ask the provider matching the pair's currency types
        4. Cache and return the fetched rate
        5. If the provider fails, fall back to any cached rate, however old
        """
        if from_currency == to_currency:
            return 1.0

        key = self.cache.make_key(from_currency, to_currency)
        cached = await self.cache.get_fresh(key, self.clock())
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return cached.rate

        try:
            rate = await self._with_timeout(self._fetch(from_currency, to_currency), key)
        except ProviderError as e:
            logger.error(f"Rate lookup failed for {key}: {e}")
            stale = await self.cache.get(key)
            if stale is None:
                raise
            logger.warning(
                f"Using cached rate for {key} observed at {stale.observed_at.isoformat()}"
            )
            return stale.rate

        await self.cache.put(key, rate, self.clock())
        return rate

    async def _with_timeout(self, call: Awaitable[float], key: str) -> float:
        if self.resolve_timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self.resolve_timeout)
        except TimeoutError as e:
            raise NetworkError(
                f"Rate lookup for {key} timed out after {self.resolve_timeout}s"
            ) from e

    async def _fetch(self, from_currency: str, to_currency: str) -> float:
        from_type = self.catalog.type_of(from_currency)
        to_type = self.catalog.type_of(to_currency)

        if from_type is CurrencyType.CRYPTO and to_type is CurrencyType.CRYPTO:
            return await self.crypto_pair_provider.fetch_rate(
                self.catalog.provider_id(from_currency),
                self.catalog.provider_id(to_currency),
            )

        if from_type is CurrencyType.CRYPTO:
            return await self.crypto_fiat_provider.fetch_price(
                self.catalog.provider_id(from_currency), to_currency
            )

        if to_type is CurrencyType.CRYPTO:
            price = await self.crypto_fiat_provider.fetch_price(
                self.catalog.provider_id(to_currency), from_currency
            )
            if price == 0:
                raise ZeroRateError(f"Cannot invert zero price of {to_currency} in {from_currency}")
            rate = 1.0 / price
            if not math.isfinite(rate):
                raise ParseError(f"Non-finite inverse of {to_currency} price in {from_currency}")
            return rate

        return await self.fiat_provider.fetch_rate(from_currency, to_currency)
