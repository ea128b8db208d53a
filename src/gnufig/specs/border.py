# src/gnufig/specs/border.py

from __future__ import annotations

from typing import Dict

from ..gnuplot.util import join_options
from .base import DepthSpecsMixin, LineSpecsMixin, ShowSpecsMixin, Specs

# Bit values of ``set border <mask>``.
EDGES: Dict[str, int] = {
	"bottom": 1,
	"left": 2,
	"top": 4,
	"right": 8,
	"bottom_left_front": 1,
	"bottom_left_back": 2,
	"bottom_right_front": 4,
	"bottom_right_back": 8,
	"left_vertical": 16,
	"back_vertical": 32,
	"right_vertical": 64,
	"front_vertical": 128,
	"top_left_back": 256,
	"top_right_back": 512,
	"top_left_front": 1024,
	"top_right_front": 2048,
	"polar": 2048,
}


class BorderSpecs(Specs, ShowSpecsMixin, LineSpecsMixin, DepthSpecsMixin):
	"""
	Frame around the plot area.

	Edges are accumulated into gnuplot's bit mask; the 2D edges and the 3D
	bottom edges share bits, as they do in gnuplot itself.
	"""

	def __init__(self) -> None:
		self._mask = 0
		self.left().bottom().top().right().front()
		self.line_type(1).line_width(1).line_color("#404040")

	def clear(self) -> "BorderSpecs":
		self._mask = 0
		return self

	def edge(self, name: str) -> "BorderSpecs":
		"""Add the edge *name* (a key of :data:`EDGES`)."""
		self._mask |= EDGES[name]
		return self

	def none(self) -> "BorderSpecs":
		return self.clear()

	def bottom(self) -> "BorderSpecs":
		return self.edge("bottom")

	def left(self) -> "BorderSpecs":
		return self.edge("left")

	def top(self) -> "BorderSpecs":
		return self.edge("top")

	def right(self) -> "BorderSpecs":
		return self.edge("right")

	def polar(self) -> "BorderSpecs":
		return self.edge("polar")

	@property
	def mask(self) -> int:
		return self._mask

	def render(self) -> str:
		if not self.is_shown:
			return "unset border"
		return join_options(f"set border {self._mask}", self._depth, self._line_options())
