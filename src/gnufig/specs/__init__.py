from .axis_label import AxisLabelSpecs
from .base import Specs
from .border import BorderSpecs
from .grid import GridLineSpecs, GridSpecs
from .legend import LegendSpecs
from .plot_specs import PlotSpecs, render_elements
from .styles import FillStyleSpecs, HistogramStyleSpecs
from .tics import TicsSpecs, TicsSpecsMajor, TicsSpecsMinor

__all__ = [
	"AxisLabelSpecs",
	"BorderSpecs",
	"FillStyleSpecs",
	"GridLineSpecs",
	"GridSpecs",
	"HistogramStyleSpecs",
	"LegendSpecs",
	"PlotSpecs",
	"Specs",
	"TicsSpecs",
	"TicsSpecsMajor",
	"TicsSpecsMinor",
	"render_elements",
]
