# src/gnufig/figure/figure.py

from __future__ import annotations

from .decor import Decor
from .drawing import Drawing
from .output import Output
from .ticks import Ticks


class Figure(Decor, Drawing, Ticks, Output):
	"""A gnuplot figure: configuration, accumulated datasets and their script."""

	__slots__ = ()
