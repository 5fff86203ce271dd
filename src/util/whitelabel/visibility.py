from __future__ import annotations

from collections.abc import Mapping

from util.whitelabel.roles import is_superadmin, roles_match


def split_path(path: str) -> tuple[str, str]:
	"""
	"menu.subscribers.import" -> ("menu", "subscribers.import")
	"menu.subscribers"        -> ("menu", "subscribers")
	"""
	section, _, item_key = path.partition(".")
	return section, item_key


def _lookup_item(config: Mapping, path: str) -> object:
	section, item_key = split_path(path)
	section_map = config.get(section)
	if not isinstance(section_map, Mapping):
		return None
	return section_map.get(item_key)


def is_visible(config: Mapping | None, path: str | None, role: object = None) -> bool:
	"""
	Decide whether the element at `path` is shown to a user holding `role`.

	Anything missing or malformed leaves the element visible. An explicit
	`"visible": false` hides the element for every role, superadmin included;
	the superadmin bypass only applies to `require_role`.
	"""
	if not config or not isinstance(config, Mapping):
		return True
	if not path or not isinstance(path, str):
		return True

	item = _lookup_item(config, path)
	if not item or not isinstance(item, Mapping):
		return True

	if item.get("visible") is False:
		return False

	required_role = item.get("require_role")
	if required_role:
		if is_superadmin(role):
			return True
		if not roles_match(role, required_role):
			return False

	return True


def should_show_separator(config: Mapping | None, path_a: str | None, path_b: str | None, role: object = None) -> bool:
	# A divider between two sections only renders when both neighbours do.
	return is_visible(config, path_a, role) and is_visible(config, path_b, role)


def get_label(config: Mapping | None, path: str | None, fallback_label: str | None) -> str | None:
	"""
	Return the configured label override for `path`, or `fallback_label`.
	Overrides are stripped; empty or whitespace-only overrides are ignored.
	"""
	if not config or not isinstance(config, Mapping):
		return fallback_label
	if not path or not isinstance(path, str) or not fallback_label:
		return fallback_label

	item = _lookup_item(config, path)
	if not isinstance(item, Mapping):
		return fallback_label

	label = item.get("label")
	if isinstance(label, str) and label.strip():
		return label.strip()
	return fallback_label
