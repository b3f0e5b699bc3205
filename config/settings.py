from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	FIAT_API_URL: str = 'https://api.exchangerate-api.com/v4'
	CRYPTO_API_URL: str = 'https://api.coingecko.com/api/v3'

	HTTP_TIMEOUT: float = 10.0
	RESOLVE_TIMEOUT: float = 15.0
	RATE_TTL_SECONDS: int = 300

	USER_SETTINGS_PATH: Path = Path.home() / '.skyventor' / 'settings.json'

	# Application
	APP_NAME: str = 'Currency Converter API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
