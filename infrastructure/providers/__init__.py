from .base import BaseJSONProvider
from .coingecko import CoinGeckoProvider, CryptoFiatProvider, CryptoPairProvider
from .exchangerate_api import FiatRateProvider

__all__ = [
    'BaseJSONProvider',
    'CoinGeckoProvider',
    'CryptoFiatProvider',
    'CryptoPairProvider',
    'FiatRateProvider',
]
