from domain.models.currency import CurrencyDescriptor, CurrencyType

# CoinGecko coin ids for the supported cryptocurrencies.
CRYPTO_PROVIDER_IDS: dict[str, str] = {
    "BTC": "bitcoin",
    "ETH": "ethereum",
    "USDT": "tether",
    "TON": "the-open-network",
    "SOL": "solana",
    "XRP": "ripple",
    "BNB": "binancecoin",
    "DOGE": "dogecoin",
}


def _fiat(code: str, name: str, symbol: str, country: str) -> CurrencyDescriptor:
    return CurrencyDescriptor(
        code=code,
        name=name,
        type=CurrencyType.FIAT,
        provider_id=code,
        symbol=symbol,
        flag=f"https://flagcdn.com/w40/{country}.png",
    )


def _crypto(code: str, name: str, symbol: str, logo: str) -> CurrencyDescriptor:
    return CurrencyDescriptor(
        code=code,
        name=name,
        type=CurrencyType.CRYPTO,
        provider_id=CRYPTO_PROVIDER_IDS.get(code, code),
        symbol=symbol,
        icon=f"https://cryptologos.cc/logos/{logo}-logo.png",
    )


SUPPORTED_CURRENCIES: tuple[CurrencyDescriptor, ...] = (
    _fiat("USD", "US Dollar", "$", "us"),
    _fiat("EUR", "Euro", "€", "eu"),
    _fiat("RUB", "Russian Ruble", "₽", "ru"),
    _fiat("KZT", "Kazakhstani Tenge", "₸", "kz"),
    _fiat("CNY", "Chinese Yuan", "¥", "cn"),
    _fiat("GBP", "British Pound", "£", "gb"),
    _fiat("JPY", "Japanese Yen", "¥", "jp"),
    _fiat("CHF", "Swiss Franc", "Fr", "ch"),
    _fiat("CAD", "Canadian Dollar", "$", "ca"),
    _fiat("AUD", "Australian Dollar", "$", "au"),
    _crypto("BTC", "Bitcoin", "₿", "bitcoin-btc"),
    _crypto("ETH", "Ethereum", "Ξ", "ethereum-eth"),
    _crypto("USDT", "Tether", "₮", "tether-usdt"),
    _crypto("TON", "Toncoin", "💎", "toncoin-ton"),
    _crypto("SOL", "Solana", "◎", "solana-sol"),
    _crypto("XRP", "Ripple", "✕", "xrp-xrp"),
    _crypto("BNB", "Binance Coin", "BNB", "bnb-bnb"),
    _crypto("DOGE", "Dogecoin", "Ð", "dogecoin-doge"),
)


class CurrencyCatalog:
    """
    Static lookup of the currencies the converter knows about.

    Two lookups never fail on unknown input:
    - ``type_of`` treats any unknown code as fiat.
    - ``provider_id`` passes unmapped codes through unchanged, so an unknown
      crypto-like code is sent to the price API as-is.
    """

    def __init__(self, currencies: tuple[CurrencyDescriptor, ...] = SUPPORTED_CURRENCIES):
        self._currencies = {c.code: c for c in currencies}

    def get(self, code: str) -> CurrencyDescriptor | None:
        return self._currencies.get(code)

    def type_of(self, code: str) -> CurrencyType:
        descriptor = self._currencies.get(code)
        if descriptor is None:
            return CurrencyType.FIAT
        return descriptor.type

    def provider_id(self, code: str) -> str:
        return CRYPTO_PROVIDER_IDS.get(code, code)

    def list_currencies(self) -> list[CurrencyDescriptor]:
        return list(self._currencies.values())
