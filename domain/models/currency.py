from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CurrencyType(str, Enum):
    FIAT = "fiat"
    CRYPTO = "crypto"


@dataclass(frozen=True)
class CurrencyDescriptor:
    code: str
    name: str
    type: CurrencyType
    provider_id: str
    symbol: str | None = None
    flag: str | None = None  # flag image URL, fiat only
    icon: str | None = None  # logo URL, crypto only


@dataclass(frozen=True)
class CachedRate:
    rate: float
    observed_at: datetime


@dataclass(frozen=True)
class RateRow:
    multiplier: int
    from_amount: float
    to_amount: float


@dataclass
class ConversionResult:
    success: bool
    amount: float = 0.0
    from_currency: str = ""
    to_currency: str = ""
    result: float = 0.0
    rate: float = 0.0
    last_update: str = ""
    error_message: str | None = None


@dataclass
class UserSettings:
    theme: str = "dark"  # "dark" | "light" | "auto"
    language: str = "ru"  # "ru" | "en" | "auto"
