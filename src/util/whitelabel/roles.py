from __future__ import annotations

from dataclasses import dataclass

SUPERADMIN_ROLE_ID = "1"


def _canonical(raw: object) -> str:
	if isinstance(raw, str):
		return raw
	if isinstance(raw, bool):
		return "true" if raw else "false"
	if isinstance(raw, int):
		return str(raw)
	if isinstance(raw, float):
		if raw.is_integer():
			return str(int(raw))
		return repr(raw)
	return str(raw)


@dataclass(frozen=True)
class RoleId:
	"""
	A role identifier normalized to its canonical string form.
	Roles arrive as names ("admin") or numeric ids (7 or "7"); both sides of a
	comparison go through parse() so 7, 7.0 and "7" are the same role.
	"""
	value: str

	@classmethod
	def parse(cls, raw: object) -> RoleId | None:
		if raw is None:
			return None
		if isinstance(raw, RoleId):
			return raw
		return cls(_canonical(raw))

	@property
	def is_superadmin(self) -> bool:
		return self.value == SUPERADMIN_ROLE_ID

	def __str__(self) -> str:
		return self.value


def is_superadmin(raw: object) -> bool:
	role = RoleId.parse(raw)
	return role is not None and role.is_superadmin


def roles_match(user_role: object, required_role: object) -> bool:
	user = RoleId.parse(user_role)
	required = RoleId.parse(required_role)
	if user is None or required is None:
		return False
	return user == required
