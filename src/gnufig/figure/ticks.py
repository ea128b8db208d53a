# src/gnufig/figure/ticks.py
"""Accessors for the general tics and the twelve per-axis tics specs."""

from __future__ import annotations

from ..specs import TicsSpecs, TicsSpecsMajor, TicsSpecsMinor
from .base import BaseFigure


class Ticks(BaseFigure):
	"""
	Tics accessors.

	Only the bottom x and left y tics (major and minor) are shown on a new
	figure; show the others explicitly, e.g. ``fig.xtics_major_top().show()``.
	"""

	def tics(self) -> TicsSpecs:
		return self._tics

	def xtics(self) -> TicsSpecsMajor:
		return self._xtics_major_bottom

	def ytics(self) -> TicsSpecsMajor:
		return self._ytics_major_left

	def ztics(self) -> TicsSpecsMajor:
		return self._ztics_major

	def rtics(self) -> TicsSpecsMajor:
		return self._rtics_major

	def xtics_major_bottom(self) -> TicsSpecsMajor:
		return self._xtics_major_bottom

	def xtics_major_top(self) -> TicsSpecsMajor:
		return self._xtics_major_top

	def xtics_minor_bottom(self) -> TicsSpecsMinor:
		return self._xtics_minor_bottom

	def xtics_minor_top(self) -> TicsSpecsMinor:
		return self._xtics_minor_top

	def ytics_major_left(self) -> TicsSpecsMajor:
		return self._ytics_major_left

	def ytics_major_right(self) -> TicsSpecsMajor:
		return self._ytics_major_right

	def ytics_minor_left(self) -> TicsSpecsMinor:
		return self._ytics_minor_left

	def ytics_minor_right(self) -> TicsSpecsMinor:
		return self._ytics_minor_right

	def ztics_major(self) -> TicsSpecsMajor:
		return self._ztics_major

	def ztics_minor(self) -> TicsSpecsMinor:
		return self._ztics_minor

	def rtics_major(self) -> TicsSpecsMajor:
		return self._rtics_major

	def rtics_minor(self) -> TicsSpecsMinor:
		return self._rtics_minor
