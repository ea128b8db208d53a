# src/gnufig/figure/decor.py
"""Axis labels, frame, grid, legend and style accessors."""

from __future__ import annotations

from ..specs import AxisLabelSpecs, BorderSpecs, FillStyleSpecs, GridSpecs, HistogramStyleSpecs, LegendSpecs
from .base import BaseFigure


class Decor(BaseFigure):
	"""Each method returns the owned spec, ready for chained customization."""

	def xlabel(self, text: str) -> AxisLabelSpecs:
		return self._xlabel.text(text)

	def ylabel(self, text: str) -> AxisLabelSpecs:
		return self._ylabel.text(text)

	def zlabel(self, text: str) -> AxisLabelSpecs:
		return self._zlabel.text(text)

	def rlabel(self, text: str) -> AxisLabelSpecs:
		return self._rlabel.text(text)

	def border(self) -> BorderSpecs:
		return self._border

	def grid(self) -> GridSpecs:
		return self._grid

	def style_fill(self) -> FillStyleSpecs:
		return self._style_fill

	def style_histogram(self) -> HistogramStyleSpecs:
		return self._style_histogram

	def legend(self) -> LegendSpecs:
		return self._legend
