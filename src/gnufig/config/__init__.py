from .loader import ConfigError, load_ini_files, parse_value
from .settings import FigureSettings, get_settings, load_settings, set_settings

__all__ = [
	"ConfigError",
	"FigureSettings",
	"get_settings",
	"load_ini_files",
	"load_settings",
	"parse_value",
	"set_settings",
]
