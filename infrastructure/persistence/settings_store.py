import json
import logging
from dataclasses import asdict
from pathlib import Path

from domain.exceptions.currency import SettingsError
from domain.models.currency import UserSettings

logger = logging.getLogger(__name__)


class SettingsStore:
	"""Per-user theme/language preferences kept in a small JSON file."""

	def __init__(self, path: Path):
		self.path = Path(path).expanduser()

	def load(self) -> UserSettings:
		settings = UserSettings()
		try:
			data = json.loads(self.path.read_text(encoding='utf-8'))
		except FileNotFoundError:
			return settings
		except (OSError, ValueError) as e:
			logger.warning(f'Could not read settings from {self.path}, using defaults: {e}')
			return settings

		if not isinstance(data, dict):
			logger.warning(f'Settings file {self.path} is not a JSON object, using defaults')
			return settings

		if isinstance(data.get('theme'), str):
			settings.theme = data['theme']
		if isinstance(data.get('language'), str):
			settings.language = data['language']
		return settings

	def save(self, settings: UserSettings) -> None:
		try:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			self.path.write_text(json.dumps(asdict(settings), indent=2), encoding='utf-8')
		except OSError as e:
			raise SettingsError(f'Failed to save settings to {self.path}: {e}') from e
		logger.info(f'Settings saved to {self.path}')

	def system_theme(self) -> str:
		# OS theme detection is not wired up; report the default.
		return UserSettings.theme

	def system_language(self) -> str:
		return UserSettings.language
