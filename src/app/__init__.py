# __init__.py
import os
import logging
from typing import Callable, Optional

from flask import Flask, request, g

from app import visibility_context
from app.routes import main
from util.config_reader import ConfigReader
from util.settings_store import SettingsStore


def _resolve_log_level(value: Optional[str]) -> int:
	# Unknown names fall back to DEBUG instead of failing the import.
	level = logging.getLevelName((value or "DEBUG").strip().upper())
	return level if isinstance(level, int) else logging.DEBUG


# Configure root logger at module import time (can be customized via app.config later)
logging.basicConfig(level=_resolve_log_level(os.environ.get("LOG_LEVEL")))
logger = logging.getLogger(__name__)

UserLoader = Callable[[str], Optional[dict]]


def _load_menu_items() -> list:
	try:
		items = ConfigReader.get_json("menu.json")
	except (FileNotFoundError, ValueError) as e:
		logger.warning(f"Could not load menu.json: {e}")
		return []
	return items if isinstance(items, list) else []


def create_app(
	settings_store: Optional[SettingsStore] = None,
	user_loader: Optional[UserLoader] = None,
	menu_items: Optional[list] = None,
):
	# Standard Flask application factory
	app = Flask(
		__name__,
		template_folder="templates",
	)
	app.config.setdefault("AUTH_TOKEN_NAME", "auth_token")
	app.config["MENU_ITEMS"] = menu_items if menu_items is not None else _load_menu_items()

	if settings_store is None:
		settings_store = SettingsStore.from_env()
	app.extensions[visibility_context.SETTINGS_EXTENSION_KEY] = settings_store

	visibility_context.init_app(app)
	app.register_blueprint(main)

	@app.before_request
	def load_auth_token():
		"""
		Before each request, check for the auth token in cookies. If valid, set g.user.
		"""
		token = request.cookies.get(app.config["AUTH_TOKEN_NAME"])
		if not token:
			g.user = None
			g.clear_token = False
			logger.debug("No auth token found in cookies.")
			return

		user = user_loader(token) if user_loader is not None else None
		if not user:
			# Token was invalid or expired
			g.user = None
			g.clear_token = True
			logger.debug("Invalid or expired auth token found in cookies.")
		else:
			g.user = user
			g.clear_token = False
			logger.debug(f"Auth token valid; user loaded: {user.get('username')}")

	@app.after_request
	def clear_auth_token(response):
		"""
		After each request, if we flagged clear_token, flush the cookie from the client.
		"""
		if getattr(g, "clear_token", False):
			response.set_cookie(
				app.config["AUTH_TOKEN_NAME"],
				"",
				expires=0,
				secure=True,
				httponly=True,
				samesite="Lax"
			)
			logger.debug("Cleared invalid auth token from cookies.")
		return response

	return app
