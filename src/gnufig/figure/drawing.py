# src/gnufig/figure/drawing.py

from __future__ import annotations

from typing import Any, Sequence, Tuple

from ..gnuplot.data import write_dataset
from ..gnuplot.util import quote
from ..logutil import get_logger
from ..specs import PlotSpecs
from .base import BaseFigure

LOG = get_logger(__name__)

Column = Sequence[Any]


def _error_columns(name: str, errors: Tuple[Column, ...], allowed: Tuple[int, ...]) -> Tuple[Column, ...]:
	if len(errors) not in allowed:
		counts = " or ".join(str(n) for n in allowed)
		raise ValueError(f"{name} expects {counts} error column(s); got {len(errors)}.")
	return errors


class Drawing(BaseFigure):
	"""
	Series accumulation.

	Every ``draw_*`` helper is a named shortcut for :meth:`draw` with a fixed
	gnuplot style; all of them return the new :class:`~gnufig.specs.PlotSpecs`.
	"""

	def draw(self, first: str, *args: Any) -> PlotSpecs:
		"""
		Add a plot element.

		Two call forms:

		* ``draw("sin(x)", "lines")`` plots a gnuplot expression;
		* ``draw("lines", x, y, ...)`` writes the columns as a new dataset in
		  the data file and plots that dataset.

		:param first: Expression (first form) or style keyword (second form).
		:param args: The style keyword, or the data columns.
		:return: The new element; its line style defaults to its 1-based position.
		"""
		if len(args) == 1 and isinstance(args[0], str):
			return self._append(first, args[0])
		return self._draw_data(first, args)

	def _append(self, what: str, with_: str) -> PlotSpecs:
		spec = PlotSpecs(what, with_)
		self._plot_specs.append(spec)
		spec.line_style(len(self._plot_specs))
		return spec

	def _draw_data(self, with_: str, columns: Sequence[Column]) -> PlotSpecs:
		index = self._num_datasets
		self._data += write_dataset(index, columns)
		self._num_datasets += 1
		LOG.debug("Figure %d: dataset #%d with %d column(s) as %r", self.id, index, len(columns), with_)
		return self._append(f"{quote(str(self.data_path))} index {index}", with_)

	# --- Curves ---
	def draw_curve(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("lines", x, y)

	def draw_curve_with_points(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("linespoints", x, y)

	def draw_curve_with_error_bars_x(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, xdelta)`` or ``(x, y, xlow, xhigh)``."""
		return self.draw("xerrorlines", x, y, *_error_columns("draw_curve_with_error_bars_x", errors, (1, 2)))

	def draw_curve_with_error_bars_y(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, ydelta)`` or ``(x, y, ylow, yhigh)``."""
		return self.draw("yerrorlines", x, y, *_error_columns("draw_curve_with_error_bars_y", errors, (1, 2)))

	def draw_curve_with_error_bars_xy(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, xdelta, ydelta)`` or ``(x, y, xlow, xhigh, ylow, yhigh)``."""
		return self.draw("xyerrorlines", x, y, *_error_columns("draw_curve_with_error_bars_xy", errors, (2, 4)))

	# --- Boxes ---
	def draw_boxes(self, x: Column, y: Column, *xwidth: Column) -> PlotSpecs:
		"""``(x, y)`` or ``(x, y, xwidth)``."""
		return self.draw("boxes", x, y, *_error_columns("draw_boxes", xwidth, (0, 1)))

	def draw_boxes_with_error_bars_y(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, ydelta)`` or ``(x, y, ylow, yhigh)``."""
		return self.draw("boxerrorbars", x, y, *_error_columns("draw_boxes_with_error_bars_y", errors, (1, 2)))

	# --- Error bars ---
	def draw_error_bars_x(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, xdelta)`` or ``(x, y, xlow, xhigh)``."""
		return self.draw("xerrorbars", x, y, *_error_columns("draw_error_bars_x", errors, (1, 2)))

	def draw_error_bars_y(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, ydelta)`` or ``(x, y, ylow, yhigh)``."""
		return self.draw("yerrorbars", x, y, *_error_columns("draw_error_bars_y", errors, (1, 2)))

	def draw_error_bars_xy(self, x: Column, y: Column, *errors: Column) -> PlotSpecs:
		"""``(x, y, xdelta, ydelta)`` or ``(x, y, xlow, xhigh, ylow, yhigh)``."""
		return self.draw("xyerrorbars", x, y, *_error_columns("draw_error_bars_xy", errors, (2, 4)))

	# --- Steps ---
	def draw_steps(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw_steps_change_first_x(x, y)

	def draw_steps_change_first_x(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("steps", x, y)

	def draw_steps_change_first_y(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("fsteps", x, y)

	def draw_steps_histogram(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("histeps", x, y)

	def draw_steps_filled(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("fillsteps", x, y)

	# --- Markers ---
	def draw_dots(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("dots", x, y)

	def draw_points(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("points", x, y)

	def draw_impulses(self, x: Column, y: Column) -> PlotSpecs:
		return self.draw("impulses", x, y)

	def draw_histogram(self, y: Column) -> PlotSpecs:
		# empty style: relies on the figure-wide "set style data histogram"
		return self.draw("", y)
