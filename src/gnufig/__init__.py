"""
gnufig: build gnuplot figures from Python.

Top-level API keeps imports lazy:

    from gnufig import Figure
    fig = Figure()
    fig.draw_curve([0, 1, 2], [0, 1, 4]).label("x^2")
    fig.xlabel("x")
    fig.save("square.pdf")

    # settings and logging
    from gnufig import configure_logging, set_settings
    configure_logging(console_level="DEBUG")
    set_settings(palette="viridis", width=504)
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("gnufig")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# main facade
	"Figure",
	# settings and logging
	"FigureSettings", "get_settings", "set_settings", "load_settings", "configure_logging",
	# namespaces
	"config", "figure", "gnuplot", "imports", "logutil", "specs",
]

_CONFIG_EXPORTS = {"FigureSettings", "get_settings", "set_settings", "load_settings"}
_NAMESPACES = {"config", "figure", "gnuplot", "imports", "logutil", "specs"}


def __getattr__(name: str):
	if name == "Figure":
		return import_module("gnufig.figure").Figure
	if name == "configure_logging":
		return import_module("gnufig.logutil").configure_logging
	if name in _CONFIG_EXPORTS:
		return getattr(import_module("gnufig.config"), name)
	if name in _NAMESPACES:
		return import_module(f"gnufig.{name}")

	raise AttributeError(f"module 'gnufig' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import config, figure, gnuplot, imports, logutil, specs  # noqa: F401
	from .config import FigureSettings, get_settings, load_settings, set_settings  # noqa: F401
	from .figure import Figure  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
