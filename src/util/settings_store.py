from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Mapping

from util.config_reader import ConfigReader

logger = logging.getLogger(__name__)

SETTINGS_FILE_ENV = "WHITELABEL_SETTINGS_FILE"
DEFAULT_SETTINGS_FILE = "settings.json"


class SettingsStore:
	"""
	Read-only view over the application settings file.

	The file is a JSON object keyed by flat dotted setting names, e.g.
	{"appearance.whitelabel": {"visibility_config": {...}}}. It is read once on
	construction and again only when reload() is called. An unreadable file
	leaves the store empty so nothing downstream gets hidden by accident.
	"""
	def __init__(self, path: str | Path):
		self.path = Path(path)
		self._lock = threading.RLock()
		self._settings: dict[str, Any] = {}
		self.reload()

	@classmethod
	def from_env(cls, env: Mapping[str, str] | None = None) -> SettingsStore:
		env_vars = env if env is not None else os.environ
		override = (env_vars.get(SETTINGS_FILE_ENV) or "").strip()
		if override:
			return cls(Path(override))
		return cls(ConfigReader().config_dir.base / DEFAULT_SETTINGS_FILE)

	def _read(self) -> dict[str, Any]:
		try:
			raw = json.loads(self.path.read_text(encoding="utf-8"))
		except FileNotFoundError:
			logger.warning(f"Settings file {self.path} not found; using empty settings.")
			return {}
		except (OSError, ValueError) as e:
			logger.warning(f"Could not read settings file {self.path}: {e}")
			return {}

		if not isinstance(raw, dict):
			logger.warning(f"Settings file {self.path} does not hold a JSON object; using empty settings.")
			return {}
		return raw

	def reload(self) -> None:
		settings = self._read()
		with self._lock:
			self._settings = settings
		logger.debug(f"Loaded {len(settings)} setting(s) from {self.path}")

	def get(self, key: str, default: Any = None) -> Any:
		with self._lock:
			return self._settings.get(key, default)
