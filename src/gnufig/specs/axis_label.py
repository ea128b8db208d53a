# src/gnufig/specs/axis_label.py

from __future__ import annotations

from ..gnuplot.util import format_number, join_options, quote
from .base import FontSpecsMixin, OffsetSpecsMixin, Specs, TextSpecsMixin


class AxisLabelSpecs(Specs, OffsetSpecsMixin, FontSpecsMixin, TextSpecsMixin):
	"""Label of one axis (``x``, ``y``, ``z`` or ``r``)."""

	def __init__(self, axis: str) -> None:
		self.axis = axis
		self._text = ""
		self._rotate = ""

	def text(self, text: str) -> "AxisLabelSpecs":
		self._text = text
		return self

	def rotate_by(self, degrees: float) -> "AxisLabelSpecs":
		self._rotate = f"rotate by {format_number(degrees)}"
		return self

	def rotate_axis_parallel(self) -> "AxisLabelSpecs":
		self._rotate = "rotate parallel"
		return self

	def rotate_none(self) -> "AxisLabelSpecs":
		self._rotate = "norotate"
		return self

	def render(self) -> str:
		return join_options(
			f"set {self.axis}label {quote(self._text)}",
			self._offset_options(),
			self._font_options(),
			self._text_options(),
			self._rotate,
		)
