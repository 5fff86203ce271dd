import logging
import flask

from app.visibility_context import visible_menu

logger = logging.getLogger(__name__)
main = flask.Blueprint("main", __name__)


@main.route("/")
def landing_page():
	items = visible_menu(flask.current_app.config.get("MENU_ITEMS") or [])
	return flask.render_template("menu.html", menu_items=items)


@main.route("/api/menu")
def api_menu():
	items = visible_menu(flask.current_app.config.get("MENU_ITEMS") or [])
	logger.debug(f"Serving {len(items)} visible top-level menu item(s).")
	return flask.jsonify({"ok": True, "items": items})


@main.route("/api/ping")
def api_ping():
	return flask.jsonify({"message": "pong"})
