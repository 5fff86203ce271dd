import json
from pathlib import Path
from typing import Any, Dict


class _DirNS:
	"""
	A directory namespace with a uniform API:
	- get_raw(filename)
	- get_json(filename)
	- resolve(filename)           # path in this namespace
	"""
	def __init__(self, base: Path):
		self.base = base

	def _resolve(self, filename: str) -> Path:
		# exact path first
		p = self.base / filename
		if p.exists():
			return p
		# fallback: match by stem if no suffix was given
		if not Path(filename).suffix and self.base.is_dir():
			candidates = [f for f in self.base.iterdir() if f.stem == filename]
			if len(candidates) == 1:
				return candidates[0]
			if not candidates:
				raise FileNotFoundError(f"No file matching '{filename}' in {self.base}")
			raise FileNotFoundError(f"Multiple files match stem '{filename}' in {self.base}")
		raise FileNotFoundError(f"File '{filename}' not found in {self.base}")

	def get_raw(self, filename: str) -> str:
		return self._resolve(filename).read_text(encoding="utf-8")

	def get_json(self, filename: str) -> Dict[str, Any]:
		return json.loads(self.get_raw(filename))

	def resolve(self, filename: str) -> Path:
		return self._resolve(filename)


class ConfigReader:
	"""
	Reader for the data files shipped inside the util package (util/config).
	Usage:
		ConfigReader().config_dir.get_json("settings.json")
		ConfigReader.get_json("menu")
	"""
	@staticmethod
	def _base_dir() -> Path:
		return Path(__file__).resolve().parent

	_NAMESPACES = {
		"config_dir": "config",
	}

	@classmethod
	def _ns(cls, name: str) -> _DirNS:
		sub = cls._NAMESPACES.get(name)
		if sub is None:
			raise KeyError(f"Unknown namespace '{name}'")
		return _DirNS(cls._base_dir() / sub)

	@property
	def config_dir(self) -> _DirNS: return self._ns("config_dir")

	_singleton = None

	def __new__(cls, *a, **kw):
		if cls._singleton is None:
			cls._singleton = super().__new__(cls)
		return cls._singleton

	@classmethod
	def get_json(cls, filename: str) -> dict:
		return cls().config_dir.get_json(filename)
