# src/gnufig/logutil.py

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

ConsoleLevelName = Literal[
	"CRITICAL",
	"ERROR",
	"WARNING",
	"INFO",
	"DEBUG",
	"NOTSET",
]

LevelLike = Union[int, ConsoleLevelName]

_PLAIN_FORMAT = "[%(levelname)s] %(message)s"
_FULL_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _normalize_level(value: LevelLike, *, param_name: str) -> int:
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(value.upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = "gnufig") -> logging.Logger:
	"""
	Return a package logger.

	Only the root ``gnufig`` logger owns a console handler; module loggers
	(``gnufig.figure.base`` etc.) propagate to it, so records are printed once.

	:param name: Logger name.
	:return: The logger.
	"""
	root = logging.getLogger("gnufig")
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
		root.addHandler(handler)
		root.setLevel(logging.WARNING)
		root.propagate = False
	return logging.getLogger(name)


def configure_logging(
		*,
		console_level: ConsoleLevelName = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "a",
		rotate: bool = False,
		max_bytes: int = 1_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
	"""
	Configure the ``gnufig`` logger for console and optional file output.

	:param console_level: Console handler level.
	:param file_path: Optional log file path to add a file handler.
	:param file_level: File handler level (int or level name,
					   defaults to console-level if None).
	:param mode: 'w' for overwriting or 'a' for appending.
	:param rotate: Use RotatingFileHandler when True.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups.
	:param formatter: Custom formatter; default includes timestamp.
	:return: The configured logger.
	"""
	console_level_value = _normalize_level(console_level, param_name="console_level")
	file_level_value = (
		_normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else console_level_value
	)

	log = get_logger()
	log.setLevel(min(console_level_value, file_level_value) if file_path else console_level_value)

	fmt = formatter or logging.Formatter(_FULL_FORMAT)

	for handler in log.handlers:
		if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
			handler.setLevel(console_level_value)
			handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		path.parent.mkdir(parents=True, exist_ok=True)
		if any(getattr(handler, "baseFilename", None) == str(path.resolve()) for handler in log.handlers):
			return log

		file_handler: logging.Handler
		if rotate:
			file_handler = RotatingFileHandler(
				path,
				mode=mode,
				maxBytes=max_bytes,
				backupCount=backup_count,
				encoding="utf-8"
			)
		else:
			file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
		file_handler.setLevel(file_level_value)
		file_handler.setFormatter(fmt)
		log.addHandler(file_handler)

	return log
