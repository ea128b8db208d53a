# src/gnufig/figure/base.py
"""Shared state and plain setters for :class:`~gnufig.figure.Figure`."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import List, Optional, Union

from ..config import FigureSettings, get_settings
from ..gnuplot.util import format_number
from ..logutil import get_logger
from ..specs import (
	AxisLabelSpecs,
	BorderSpecs,
	FillStyleSpecs,
	GridSpecs,
	HistogramStyleSpecs,
	LegendSpecs,
	PlotSpecs,
	TicsSpecs,
	TicsSpecsMajor,
	TicsSpecsMinor,
)
from .registry import REGISTRY

LOG = get_logger(__name__)

PathLike = Union[str, Path]
Bound = Optional[float]

HISTOGRAM_DATA_STYLE = "set style data histogram"


def _range_str(lower: Bound, upper: Bound) -> str:
	lo = "*" if lower is None else format_number(lower)
	hi = "*" if upper is None else format_number(upper)
	return f"[{lo}:{hi}]"


class BaseFigure:
	"""Own the configuration of one figure and the names of its temporary files."""

	def __init__(
			self,
			*,
			workdir: Optional[PathLike] = None,
			settings: Optional[FigureSettings] = None
	) -> None:
		self.settings = settings or get_settings()
		self.id = REGISTRY.next_id()
		self.workdir = Path(workdir if workdir is not None else self.settings.workdir)
		self.script_path = self.workdir / f"show{self.id}.plt"
		self.data_path = self.workdir / f"plot{self.id}.dat"

		self._autoclean = True
		self._palette = ""
		self._width = 0
		self._height = 0
		self._xrange = ""
		self._yrange = ""
		self._boxwidth = ""
		self._samples = ""
		self._data = ""
		self._num_datasets = 0
		self._plot_specs: List[PlotSpecs] = []
		self._custom_cmds: List[str] = []

		self._xlabel = AxisLabelSpecs("x")
		self._ylabel = AxisLabelSpecs("y")
		self._zlabel = AxisLabelSpecs("z")
		self._rlabel = AxisLabelSpecs("r")
		self._border = BorderSpecs()
		self._grid = GridSpecs()
		self._style_fill = FillStyleSpecs()
		self._style_histogram = HistogramStyleSpecs()
		self._legend = LegendSpecs()
		self._tics = TicsSpecs()
		self._xtics_major_bottom = TicsSpecsMajor("x")
		self._xtics_major_top = TicsSpecsMajor("x2").hide()
		self._xtics_minor_bottom = TicsSpecsMinor("x")
		self._xtics_minor_top = TicsSpecsMinor("x2").hide()
		self._ytics_major_left = TicsSpecsMajor("y")
		self._ytics_major_right = TicsSpecsMajor("y2").hide()
		self._ytics_minor_left = TicsSpecsMinor("y")
		self._ytics_minor_right = TicsSpecsMinor("y2").hide()
		self._ztics_major = TicsSpecsMajor("z").hide()
		self._ztics_minor = TicsSpecsMinor("z").hide()
		self._rtics_major = TicsSpecsMajor("r").hide()
		self._rtics_minor = TicsSpecsMinor("r").hide()

		self._style_fill.fill_solid().border_hide()
		self.box_width_relative(self.settings.box_width_relative)

		# Histograms are drawn with an empty `with`, so the data style must be
		# set for every figure, before the plot command.
		self.gnuplot(HISTOGRAM_DATA_STYLE)

		LOG.debug("Initialized figure %d (script=%s, data=%s)", self.id, self.script_path, self.data_path)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(id={self.id}, elements={len(self._plot_specs)}, datasets={self._num_datasets})"

	def __enter__(self):
		return self

	def __exit__(
			self,
			exc_type: Optional[type[BaseException]],
			exc_val: Optional[BaseException],
			exc_tb: Optional[TracebackType]
	) -> bool:
		"""Remove the temporary files when autoclean is on; never suppress exceptions."""
		if self._autoclean:
			self.cleanup()
		return False

	def cleanup(self) -> None:
		"""Delete the script and data files; missing files are fine."""
		for path in (self.script_path, self.data_path):
			try:
				path.unlink()
			except OSError as exc:
				LOG.debug("cleanup skipped %s: %s", path, exc)

	# --- Plain setters ---
	def palette(self, name: str) -> None:
		"""Select a palette by name (see :func:`gnufig.gnuplot.palette_names`)."""
		self._palette = name

	def size(self, width: int, height: int) -> None:
		"""Set the figure size in points (1 inch = 72 points); 0 keeps the default."""
		self._width = width
		self._height = height

	def xrange(self, lower: Bound, upper: Bound) -> None:
		"""Set the x-range; ``None`` leaves that end autoscaled."""
		self._xrange = _range_str(lower, upper)

	def yrange(self, lower: Bound, upper: Bound) -> None:
		"""Set the y-range; ``None`` leaves that end autoscaled."""
		self._yrange = _range_str(lower, upper)

	def box_width_absolute(self, value: float) -> None:
		"""Default box width in x-axis units."""
		self._boxwidth = f"{format_number(value)} absolute"

	def box_width_relative(self, value: float) -> None:
		"""Default box width as a fraction of the space between neighbouring boxes."""
		self._boxwidth = f"{format_number(value)} relative"

	def samples(self, value: int) -> None:
		"""Number of sample points used for function expressions."""
		self._samples = format_number(value)

	def gnuplot(self, command: str) -> None:
		"""Append a raw gnuplot command, emitted before the plot command."""
		self._custom_cmds.append(command)

	def autoclean(self, enable: bool = True) -> None:
		"""Toggle removal of the script and data files after :meth:`show`/:meth:`save`."""
		self._autoclean = enable

	# --- Read-only views ---
	@property
	def width(self) -> int:
		return self._width or self.settings.width

	@property
	def height(self) -> int:
		return self._height or self.settings.height

	@property
	def palette_name(self) -> str:
		return self._palette or self.settings.palette

	@property
	def box_width(self) -> str:
		return self._boxwidth

	@property
	def elements(self) -> List[PlotSpecs]:
		return list(self._plot_specs)

	@property
	def num_datasets(self) -> int:
		return self._num_datasets

	@property
	def data(self) -> str:
		return self._data

	@property
	def custom_commands(self) -> List[str]:
		return list(self._custom_cmds)
