# src/gnufig/gnuplot/commands.py
"""Terminal, output and palette directives plus the gnuplot process runner."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path, PurePath
from typing import Dict, Union

from ..logutil import get_logger
from .palettes import palette_commands
from .util import banner, format_number, quote

LOG = get_logger(__name__)

PathLike = Union[str, PurePath]

__all__ = [
	"INVALID_PATH_CHARS",
	"TERMINALS",
	"clean_path",
	"extension_of",
	"output_cmd",
	"palette_cmd",
	"run_script",
	"save_terminal_cmd",
	"show_terminal_cmd",
	"size_str",
	"terminal_for",
]

POINTS_PER_INCH = 72

INVALID_PATH_CHARS = ':*?!"<>|'

TERMINALS: Dict[str, str] = {
	"pdf": "pdfcairo",
	"eps": "epscairo",
	"png": "pngcairo",
	"svg": "svg",
	"jpeg": "jpeg",
	"jpg": "jpeg",
	"gif": "gif",
	"tex": "epslatex",
}

_DRIVE = re.compile(r"^[A-Za-z]:(?=[\\/])")


def palette_cmd(name: str) -> str:
	"""Return the commented palette block for *name*."""
	return banner(
		f"GNUPLOT-palette ({name})",
		["see more at https://github.com/Gnuplotting/gnuplot-palettes"],
	) + palette_commands(name)


def size_str(width: int, height: int, inches: bool = False) -> str:
	"""
	Return the ``size`` option of a terminal directive.

	Sizes are given in points; with *inches* they are converted
	(72 points per inch) and suffixed with ``in``, as the PDF terminal expects.
	"""
	if not inches:
		return f"size {format_number(width)},{format_number(height)}"
	w = float(f"{width / POINTS_PER_INCH:.6g}")
	h = float(f"{height / POINTS_PER_INCH:.6g}")
	return f"size {format_number(w)}in,{format_number(h)}in"


def show_terminal_cmd(terminal: str, size: str, font: str) -> str:
	"""Terminal block for an on-screen window."""
	return banner("TERMINAL") + f"set terminal {terminal} {size} enhanced font {quote(font)}\n"


def terminal_for(extension: str) -> str:
	"""Map a file extension to a gnuplot terminal; unknown extensions pass through."""
	return TERMINALS.get(extension.lower(), extension)


def save_terminal_cmd(extension: str, size: str, font: str) -> str:
	"""Terminal block for writing a figure file of type *extension*."""
	return banner("TERMINAL") + f"set terminal {terminal_for(extension)} {size} enhanced font {quote(font)}\n"


def output_cmd(filename: str) -> str:
	"""Block redirecting the terminal output to *filename*."""
	return banner("OUTPUT") + f"set output {quote(filename)}\n"


def clean_path(path: PathLike) -> str:
	"""
	Remove characters gnuplot cannot take in an output file name.

	Every character of :data:`INVALID_PATH_CHARS` is dropped, except the colon
	of a leading Windows drive prefix followed by a separator (``C:/``, ``C:\\``).
	"""
	text = str(path)
	drive = ""
	match = _DRIVE.match(text)
	if match:
		drive, text = match.group(0), text[match.end():]
	return drive + "".join(ch for ch in text if ch not in INVALID_PATH_CHARS)


def extension_of(filename: str) -> str:
	"""Lower-cased text after the last dot of the file name, or ``""``."""
	return PurePath(filename).suffix[1:].lower()


def run_script(script: PathLike, *, persistent: bool, executable: str = "gnuplot") -> bool:
	"""
	Run gnuplot on *script* and wait for it.

	A non-zero exit status is logged and reported as ``False``; a missing
	executable raises :class:`FileNotFoundError` from :mod:`subprocess`.

	:param script: Script file handed to gnuplot as its only file argument.
	:param persistent: Keep the plot window open after gnuplot exits.
	:param executable: gnuplot binary name or path.
	:return: ``True`` when gnuplot exited with status 0.
	"""
	cmd = [executable]
	if persistent:
		cmd.append("-persistent")
	cmd.append(str(Path(script)))

	LOG.info("Running %s", " ".join(cmd))
	proc = subprocess.run(cmd, check=False)
	if proc.returncode != 0:
		LOG.warning("gnuplot exited with status %d for %s", proc.returncode, script)
		return False
	return True
