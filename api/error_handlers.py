import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import ProviderError, SettingsError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': 'Exchange rate service unavailable'}
		)

	@app.exception_handler(SettingsError)
	async def settings_error_handler(request: Request, exc: SettingsError):
		logger.error(f'Settings error: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'Could not save settings'})
