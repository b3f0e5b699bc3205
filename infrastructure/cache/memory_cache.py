import asyncio
from datetime import datetime, timedelta

from domain.models.currency import CachedRate


class RateCache:
    """Process-wide store of the last observed rate per ordered currency pair."""

    def __init__(self, rate_ttl: timedelta = timedelta(minutes=5)):
        self.rate_ttl = rate_ttl
        self._rates: dict[str, CachedRate] = {}
        self._lock = asyncio.Lock()

    @staticmethod
    def make_key(from_currency: str, to_currency: str) -> str:
        return f"{from_currency}-{to_currency}"

    def is_fresh(self, observed_at: datetime, now: datetime) -> bool:
        return now - observed_at < self.rate_ttl

    async def get(self, pair_key: str) -> CachedRate | None:
        async with self._lock:
            return self._rates.get(pair_key)

    async def get_fresh(self, pair_key: str, now: datetime) -> CachedRate | None:
        cached = await self.get(pair_key)
        if cached is None or not self.is_fresh(cached.observed_at, now):
            return None
        return cached

    async def put(self, pair_key: str, rate: float, now: datetime) -> None:
        async with self._lock:
            self._rates[pair_key] = CachedRate(rate=rate, observed_at=now)

    def __len__(self) -> int:
        return len(self._rates)
