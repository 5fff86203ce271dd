from __future__ import annotations

from collections.abc import Mapping

import flask

from util.whitelabel import visibility
from util.whitelabel.menu import filter_menu_items

SETTINGS_EXTENSION_KEY = "settings_store"
WHITELABEL_SETTING = "appearance.whitelabel"


def current_visibility_config() -> Mapping | None:
	"""The visibility_config block of the whitelabel setting, if any."""
	if not flask.has_app_context():
		return None
	store = flask.current_app.extensions.get(SETTINGS_EXTENSION_KEY)
	if store is None:
		return None
	whitelabel = store.get(WHITELABEL_SETTING)
	if not isinstance(whitelabel, Mapping):
		return None
	return whitelabel.get("visibility_config")


def current_user_role() -> object:
	"""Role id of the user loaded for this request: g.user["user_role"]["id"]."""
	if not flask.has_app_context():
		return None
	user = getattr(flask.g, "user", None)
	if not isinstance(user, Mapping):
		return None
	user_role = user.get("user_role")
	if not isinstance(user_role, Mapping):
		return None
	return user_role.get("id")


def is_visible(path: str) -> bool:
	return visibility.is_visible(current_visibility_config(), path, current_user_role())


def get_label(path: str, fallback_label: str) -> str:
	return visibility.get_label(current_visibility_config(), path, fallback_label)


def should_show_separator(path_a: str, path_b: str) -> bool:
	return visibility.should_show_separator(current_visibility_config(), path_a, path_b, current_user_role())


def visible_menu(items: list[dict]) -> list[dict]:
	return filter_menu_items(items, current_visibility_config(), current_user_role())


def init_app(app: flask.Flask) -> None:
	@app.context_processor
	def inject_visibility_helpers():
		# Templates call these at render time, so each lookup sees the current request.
		return {
			"is_visible": is_visible,
			"get_label": get_label,
			"should_show_separator": should_show_separator,
		}
