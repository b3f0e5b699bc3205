from typing import Literal

from pydantic import BaseModel


class SettingsRequest(BaseModel):
	theme: Literal['dark', 'light', 'auto']
	language: Literal['ru', 'en', 'auto']

	class ConfigDict:
		json_schema_extra = {'example': {'theme': 'light', 'language': 'en'}}
