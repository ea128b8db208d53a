# src/gnufig/gnuplot/util.py
"""Text helpers shared by every command producer."""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Optional

__all__ = [
	"BANNER",
	"banner",
	"command_value_str",
	"format_number",
	"format_value",
	"join_options",
	"option_value_str",
	"quote",
]

BANNER = "#" + "=" * 78


def format_number(value: Any) -> str:
	"""
	Serialize a number the way every gnufig command expects it.

	Integral values (including floats such as ``2.0``) are written without a
	decimal point; other reals use the shortest round-tripping ``repr``.
	Booleans become ``0``/``1``.
	"""
	if isinstance(value, bool):
		return str(int(value))
	if isinstance(value, numbers.Integral):
		return str(int(value))
	if isinstance(value, numbers.Real):
		f = float(value)
		if math.isnan(f):
			return "NaN"
		if math.isinf(f):
			return "Inf" if f > 0 else "-Inf"
		if f.is_integer() and abs(f) < 1e15:
			return str(int(f))
		return repr(f)
	return str(value)


def format_value(value: Any) -> str:
	"""Format one data entry: numbers via :func:`format_number`, text double-quoted."""
	if isinstance(value, bytes):
		value = value.decode("utf-8")
	if isinstance(value, str):
		escaped = value.replace("\\", "\\\\").replace('"', '\\"')
		return f'"{escaped}"'
	return format_number(value)


def quote(text: str) -> str:
	"""Wrap *text* in gnuplot single quotes; embedded quotes are doubled."""
	return "'" + str(text).replace("'", "''") + "'"


def command_value_str(command: str, value: str) -> str:
	"""Return ``"<command> <value>\\n"`` or an empty string when *value* is empty."""
	return f"{command} {value}\n" if value else ""


def option_value_str(option: str, value: Optional[Any]) -> str:
	"""Return ``"<option> <value>"`` or an empty string when *value* is None or empty."""
	if value is None or value == "":
		return ""
	if isinstance(value, numbers.Real) and not isinstance(value, bool):
		value = format_number(value)
	return f"{option} {value}"


def join_options(*parts: Optional[str]) -> str:
	"""Join non-empty option fragments with single spaces."""
	return " ".join(p for p in parts if p)


def banner(title: str, lines: Iterable[str] = ()) -> str:
	"""Return a comment block framed by ``#====`` rules."""
	out = [BANNER, f"# {title}"]
	extra = list(lines)
	if extra:
		out.append("#" + "-" * 78)
		out.extend(f"# {line}" for line in extra)
	out.append(BANNER)
	return "\n".join(out) + "\n"
