from .base import HISTOGRAM_DATA_STYLE, BaseFigure
from .figure import Figure
from .registry import REGISTRY, FigureRegistry

__all__ = ["BaseFigure", "Figure", "FigureRegistry", "HISTOGRAM_DATA_STYLE", "REGISTRY"]
