# src/gnufig/config/settings.py
"""Process-wide figure defaults, optionally loaded from an INI file."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..logutil import get_logger
from .loader import ConfigError, load_ini_files

LOG = get_logger(__name__)

PathLike = Union[str, Path]

SECTION = "gnufig"
ENV_VAR = "GNUFIG_CONFIG"


@dataclass(frozen=True)
class FigureSettings:
	"""
	Defaults every :class:`~gnufig.figure.Figure` falls back to.

	Sizes are in points (1 inch = 72 points).
	"""
	palette: str = "dark2"
	width: int = 360
	height: int = 200
	font_name: str = "Georgia"
	font_size: int = 10
	box_width_relative: float = 0.9
	gnuplot: str = "gnuplot"
	show_terminal: str = "qt"
	save_format: str = "pdf"
	workdir: str = "."

	@classmethod
	def from_mapping(cls, values: Mapping[str, Any]) -> "FigureSettings":
		"""
		Build settings from a ``{key: value}`` mapping, e.g. one INI section.

		Values are converted to the type of the field's default, so
		``workdir = 2024`` becomes the string ``"2024"``.

		:raises ConfigError: On keys that are not settings or values that do
							 not convert to the field type.
		"""
		known = {f.name for f in fields(cls)}
		unknown = sorted(set(values) - known)
		if unknown:
			raise ConfigError(f"Unknown [{SECTION}] key(s): {', '.join(unknown)}")

		defaults = cls()
		typed: Dict[str, Any] = {}
		for key, value in values.items():
			typed[key] = _coerce(key, value, type(getattr(defaults, key)))
		return replace(defaults, **typed)

	def font(self) -> str:
		return f"{self.font_name},{self.font_size}"


def _coerce(key: str, value: Any, expected: type) -> Any:
	if value is None or isinstance(value, (bool, list, dict)):
		raise ConfigError(f"[{SECTION}] {key} = {value!r} is not a valid {expected.__name__}")
	if expected is str:
		return str(value)
	if expected is int and isinstance(value, float) and not value.is_integer():
		raise ConfigError(f"[{SECTION}] {key} = {value!r} is not a whole number")
	try:
		return expected(value)
	except (TypeError, ValueError) as exc:
		raise ConfigError(f"[{SECTION}] {key} = {value!r} is not a valid {expected.__name__}") from exc


_current = FigureSettings()


def load_settings(files: Optional[Iterable[PathLike]] = None) -> FigureSettings:
	"""
	Read the ``[gnufig]`` section from INI files.

	When *files* is None the path in ``$GNUFIG_CONFIG`` is used; without it
	the built-in defaults are returned.

	:param files: INI files, later ones override earlier ones.
	:return: The loaded settings (not installed; see :func:`set_settings`).
	:raises ConfigError: On unreadable files or unknown keys.
	"""
	if files is None:
		env_path = os.environ.get(ENV_VAR)
		if not env_path:
			return FigureSettings()
		files = [env_path]

	data, loaded = load_ini_files(files)
	section: Dict[str, Any] = data.get(SECTION, {})
	if not section:
		LOG.warning("No [%s] section in %s; using defaults.", SECTION, ", ".join(map(str, loaded)))
	return FigureSettings.from_mapping(section)


def get_settings() -> FigureSettings:
	return _current


def set_settings(settings: Optional[FigureSettings] = None, **overrides: Any) -> FigureSettings:
	"""
	Install new process defaults and return them.

	:param settings: Base settings; defaults to the currently installed ones.
	:param overrides: Individual fields to change, e.g. ``palette="viridis"``.
	"""
	global _current
	base = settings if settings is not None else _current
	_current = replace(base, **overrides) if overrides else base
	return _current
