class CurrencyException(Exception):
    pass


class ValidationError(CurrencyException):
    pass


class SettingsError(CurrencyException):
    pass


class ProviderError(CurrencyException):
    pass


class NetworkError(ProviderError):
    pass


class ParseError(ProviderError):
    pass


class NotFoundError(ProviderError):
    pass


class ZeroRateError(ProviderError):
    pass
