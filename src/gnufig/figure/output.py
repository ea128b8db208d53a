# src/gnufig/figure/output.py
"""Script rendering and the gnuplot round trip."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from ..gnuplot.commands import (
	clean_path,
	extension_of,
	output_cmd,
	palette_cmd,
	run_script,
	save_terminal_cmd,
	show_terminal_cmd,
	size_str,
)
from ..gnuplot.palettes import DEFAULT_PALETTE, PALETTES
from ..gnuplot.util import banner, command_value_str
from ..logutil import get_logger
from ..specs import render_elements
from .base import BaseFigure

LOG = get_logger(__name__)

PathLike = Union[str, Path]


class Output(BaseFigure):
	"""Turn the figure into gnuplot text and run gnuplot on it."""

	# --- Rendering ---
	def render(self) -> str:
		"""
		Return the full gnuplot script of the figure.

		Sections come in a fixed order: palette, ranges, axis labels, border,
		grid, fill and histogram styles, general tics, the twelve per-axis tics,
		legend, box width and samples, custom commands, and the plot command.
		Rendering has no side effects.
		"""
		return self._palette_block() + self._body()

	def repr_script(self) -> str:
		return self.render()

	def _palette_block(self) -> str:
		name = self.palette_name
		if name not in PALETTES:
			fallback = self.settings.palette if self.settings.palette in PALETTES else DEFAULT_PALETTE
			LOG.warning("Unknown palette %r for figure %d; using %r.", name, self.id, fallback)
			name = fallback
		return palette_cmd(name)

	def _body(self) -> str:
		specs = [
			self._xlabel, self._ylabel, self._zlabel, self._rlabel,
			self._border, self._grid, self._style_fill, self._style_histogram,
			self._tics,
			self._xtics_major_bottom, self._xtics_major_top,
			self._xtics_minor_bottom, self._xtics_minor_top,
			self._ytics_major_left, self._ytics_major_right,
			self._ytics_minor_left, self._ytics_minor_right,
			self._ztics_major, self._ztics_minor,
			self._rtics_major, self._rtics_minor,
			self._legend,
		]

		parts: List[str] = [banner("SETUP COMMANDS")]
		parts.append(command_value_str("set xrange", self._xrange))
		parts.append(command_value_str("set yrange", self._yrange))
		parts.extend(spec.render() + "\n" for spec in specs)
		parts.append(command_value_str("set boxwidth", self._boxwidth))
		parts.append(command_value_str("set samples", self._samples))

		if self._custom_cmds:
			parts.append(banner("CUSTOM EXPLICIT GNUPLOT COMMANDS"))
			parts.extend(cmd + "\n" for cmd in self._custom_cmds)

		parts.append(banner("PLOT COMMANDS"))
		parts.append("plot " + render_elements(self._plot_specs) + "\n")
		return "".join(parts)

	# --- Files ---
	def save_plot_data(self) -> None:
		"""Write the accumulated datasets to the data file (skipped when there are none)."""
		if not self._data:
			return
		self.data_path.write_text(self._data, encoding="utf-8")
		LOG.debug("Wrote %d dataset(s) to %s", self._num_datasets, self.data_path)

	def _write_script(self, text: str) -> None:
		self.script_path.write_text(text, encoding="utf-8")
		LOG.debug("Wrote script %s", self.script_path)

	def show_script(self) -> str:
		"""Script text :meth:`show` writes."""
		size = size_str(self.width, self.height)
		return (
			self._palette_block()
			+ show_terminal_cmd(self.settings.show_terminal, size, self.settings.font())
			+ self._body()
			+ "\n"
		)

	def save_script(self, filename: PathLike) -> str:
		"""Script text :meth:`save` writes for *filename*."""
		cleaned = clean_path(filename)
		extension = extension_of(cleaned) or self.settings.save_format
		size = size_str(self.width, self.height, inches=extension == "pdf")
		return (
			self._palette_block()
			+ save_terminal_cmd(extension, size, self.settings.font())
			+ output_cmd(cleaned)
			+ self._body()
			+ "\nset output\n"
		)

	# --- gnuplot round trip ---
	def show(self) -> None:
		"""Open the figure in a gnuplot window and wait for gnuplot to return."""
		self._write_script(self.show_script())
		self.save_plot_data()
		run_script(self.script_path, persistent=True, executable=self.settings.gnuplot)
		if self._autoclean:
			self.cleanup()

	def save(self, filename: PathLike) -> str:
		"""
		Write the figure to *filename*; its extension selects the format.

		Supported formats are pdf, eps, png, svg, jpeg/jpg, gif and tex. Other
		extensions are handed to gnuplot as the terminal name.

		:param filename: Output path. Characters gnuplot cannot take are removed.
		:return: The cleaned output path.
		"""
		cleaned = clean_path(filename)
		self._write_script(self.save_script(filename))
		self.save_plot_data()
		run_script(self.script_path, persistent=False, executable=self.settings.gnuplot)
		LOG.info("Saved figure %d to %s", self.id, cleaned)
		if self._autoclean:
			self.cleanup()
		return cleaned
