# src/gnufig/config/loader.py

from __future__ import annotations

import ast
import configparser
from pathlib import Path
from typing import Any, Dict, Iterable, List, MutableMapping, Optional, Tuple, Union

from ..logutil import get_logger

LOG = get_logger(__name__)

PathLike = Union[str, Path]


class ConfigError(Exception):
	"""Raised when a configuration file cannot be read or does not fit the settings."""


def choose_interpolation(interpolation: Optional[str]) -> Optional[configparser.Interpolation]:
	"""
	Return an interpolation object for configparser based on a textual flag.

	``"none"``, ``"no"``, ``"off"``, ``"false"`` and ``"raw"`` disable
	interpolation; anything else selects ExtendedInterpolation.
	"""
	if interpolation is None:
		return configparser.ExtendedInterpolation()
	flag = str(interpolation).lower().strip()
	if flag in {"none", "no", "off", "false", "raw"}:
		return None
	return configparser.ExtendedInterpolation()


def parse_value(raw: str) -> Any:
	"""
	Parse a raw INI string into a typed Python value.

	The parser attempts, in order:
	  1) ``ast.literal_eval`` for safe Python literals (numbers, quoted strings, lists, booleans).
	  2) None markers: ``none``, ``null``.
	  3) Booleans: ``true/yes/on`` and ``false/no/off``.
	  4) Otherwise the stripped string (palette names, paths, terminal names).

	:param raw: Source text as read from ConfigParser.
	:return: Best-effort typed value.
	"""
	s = raw.strip()

	try:
		value = ast.literal_eval(s)
		if isinstance(value, tuple):
			return list(value)
		return value
	except (ValueError, SyntaxError):
		pass

	lower = s.lower()
	if lower in {"none", "null"}:
		return None
	if lower in {"true", "yes", "on"}:
		return True
	if lower in {"false", "no", "off"}:
		return False
	return s


def _cp_to_typed_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
	"""Project a ConfigParser into ``{section: {key: typed value}}`` with lowercased names."""
	out: Dict[str, Dict[str, Any]] = {}
	for section in cp.sections():
		out[section.lower()] = {key.lower(): parse_value(value) for key, value in cp.items(section)}
	return out


def _resolve_inheritance(data: MutableMapping[str, Dict[str, Any]]) -> None:
	"""
	Support an ``extends`` key that mixes parent section keys into a section.

	Example::

		[paper]
		width = 504

		[gnufig]
		extends = paper

	:param data: Dict of sections to resolve (modified in place).
	:raises ConfigError: When a referenced parent section does not exist.
	"""
	visited: Dict[str, bool] = {}

	def merge_chain(section: str) -> Dict[str, Any]:
		if section in visited:
			return data.get(section, {})
		visited[section] = True

		current = data.get(section, {})
		parents_raw = current.get("extends")
		if not parents_raw:
			return current

		parents = parents_raw if isinstance(parents_raw, list) else [parents_raw]
		merged: Dict[str, Any] = {}
		for parent in parents:
			parent_name = str(parent).lower()
			if parent_name not in data:
				raise ConfigError(f"[{section}] extends unknown section '{parent_name}'")
			merged.update(merge_chain(parent_name))
		merged.update({k: v for k, v in current.items() if k != "extends"})
		data[section] = merged
		return merged

	for sec in list(data.keys()):
		merge_chain(sec)


def load_ini_files(
		files: Iterable[PathLike],
		*,
		interpolation: Optional[str] = "extended"
) -> Tuple[Dict[str, Dict[str, Any]], List[Path]]:
	"""
	Load one or more INI files and return a typed, merged mapping of sections.

	Later files override earlier ones. Values are parsed with :func:`parse_value`
	and ``extends`` inheritance is resolved after all files are read.

	:param files: Iterable of INI file paths.
	:param interpolation: Text flag to control interpolation ('extended' or 'none' etc.).
	:return: ``(data, loaded_files)``.
	:raises ConfigError: On missing file(s) or read errors.
	"""
	paths = [Path(p) for p in files]
	missing = [str(p) for p in paths if not p.exists()]
	if missing:
		raise ConfigError(f"Missing config file(s): {', '.join(missing)}")

	cp = configparser.ConfigParser(interpolation=choose_interpolation(interpolation))
	loaded: List[Path] = []

	for p in paths:
		try:
			with p.open("r", encoding="utf-8") as fh:
				cp.read_file(fh)
		except (OSError, configparser.Error) as exc:
			raise ConfigError(f"Failed reading '{p}': {exc}") from exc
		loaded.append(p)
		LOG.debug("Loaded INI file: %s", p)

	data = _cp_to_typed_dict(cp)
	_resolve_inheritance(data)
	return data, loaded


__all__ = ["ConfigError", "choose_interpolation", "parse_value", "load_ini_files"]
