from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_settings_store
from api.schemas import SettingsRequest, SettingsResponse
from domain.models.currency import UserSettings
from infrastructure.persistence.settings_store import SettingsStore

router = APIRouter(prefix='/api/settings', tags=['settings'])


@router.get(
	'',
	response_model=SettingsResponse,
	status_code=status.HTTP_200_OK,
	summary='Load user settings',
)
async def load_settings(
	store: Annotated[SettingsStore, Depends(get_settings_store)],
) -> SettingsResponse:
	settings = store.load()
	return SettingsResponse(theme=settings.theme, language=settings.language)


@router.put(
	'',
	response_model=SettingsResponse,
	status_code=status.HTTP_200_OK,
	summary='Save user settings',
)
async def save_settings(
	request: SettingsRequest,
	store: Annotated[SettingsStore, Depends(get_settings_store)],
) -> SettingsResponse:
	settings = UserSettings(theme=request.theme, language=request.language)
	store.save(settings)
	return SettingsResponse(theme=settings.theme, language=settings.language)


@router.get(
	'/system',
	response_model=SettingsResponse,
	status_code=status.HTTP_200_OK,
	summary='System theme and language',
)
async def system_settings(
	store: Annotated[SettingsStore, Depends(get_settings_store)],
) -> SettingsResponse:
	return SettingsResponse(theme=store.system_theme(), language=store.system_language())
