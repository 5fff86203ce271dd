from __future__ import annotations

from collections.abc import Mapping

from util.whitelabel.visibility import get_label, is_visible, should_show_separator


def _separator_visible(entry: dict, config: Mapping | None, role: object) -> bool:
	between = entry.get("between")
	if not isinstance(between, (list, tuple)) or len(between) != 2:
		return True
	path_a, path_b = between
	return should_show_separator(config, path_a, path_b, role)


def filter_menu_items(items: list[dict], config: Mapping | None, role: object = None) -> list[dict]:
	"""
	Return a copy of a menu tree with hidden entries removed and labels resolved.
	Entries are dicts with optional "path", "label", "href" and "children";
	{"type": "separator", "between": [a, b]} renders only if both a and b do.
	"""
	filtered: list[dict] = []
	for item in items or []:
		if not isinstance(item, dict):
			continue

		if item.get("type") == "separator":
			if _separator_visible(item, config, role):
				filtered.append(dict(item))
			continue

		path = item.get("path")
		if not is_visible(config, path, role):
			continue

		item_copy = dict(item)
		if "label" in item:
			item_copy["label"] = get_label(config, path, item.get("label"))

		children = item.get("children")
		if isinstance(children, list):
			visible_children = filter_menu_items(children, config, role)
			# A pure group with nothing left to show is dropped.
			if children and not visible_children and not item.get("href"):
				continue
			item_copy["children"] = visible_children

		filtered.append(item_copy)
	return filtered
