from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
	sys.path.insert(0, str(SRC_ROOT))


USERS_BY_TOKEN = {
	"superadmin-token": {"username": "root", "user_role": {"id": 1, "name": "Super Admin"}},
	"admin-token": {"username": "alice", "user_role": {"id": "admin", "name": "Admin"}},
	"editor-token": {"username": "bob", "user_role": {"id": "editor", "name": "Editor"}},
}


@pytest.fixture
def settings_file(tmp_path: Path):
	def _write(settings: object, name: str = "settings.json") -> Path:
		path = tmp_path / name
		path.write_text(json.dumps(settings), encoding="utf-8")
		return path

	return _write


@pytest.fixture
def whitelabel_settings():
	return {
		"appearance.whitelabel": {
			"visibility_config": {
				"menu": {
					"subscribers.import": {"visible": False},
					"campaigns": {"label": "  Newsletters  "},
					"settings": {"require_role": "admin"},
				},
				"settings": {
					"billing": {"require_role": "admin", "label": "Plans & Billing"},
				},
			}
		}
	}


@pytest.fixture
def app_factory(settings_file, whitelabel_settings):
	from app import create_app
	from util.settings_store import SettingsStore

	def _build(settings: object = None, menu_items: list | None = None):
		store = SettingsStore(settings_file(whitelabel_settings if settings is None else settings))
		app = create_app(
			settings_store=store,
			user_loader=USERS_BY_TOKEN.get,
			menu_items=menu_items,
		)
		app.config["TESTING"] = True
		return app

	return _build
