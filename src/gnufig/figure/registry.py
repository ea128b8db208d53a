# src/gnufig/figure/registry.py
"""Process-wide source of figure ids."""

from __future__ import annotations

import threading

__all__ = ["FigureRegistry", "REGISTRY"]


class FigureRegistry:
	"""
	Hands out monotonically increasing figure ids.

	The ids name the temporary script and data files, so two figures living in
	the same process never write to the same files. ``next_id`` is safe to call
	from several threads.
	"""

	def __init__(self, start: int = 0) -> None:
		self._lock = threading.Lock()
		self._next = start

	def next_id(self) -> int:
		with self._lock:
			value = self._next
			self._next += 1
		return value

	def peek(self) -> int:
		"""Id the next figure will receive."""
		with self._lock:
			return self._next

	def reset(self, start: int = 0) -> None:
		with self._lock:
			self._next = start


REGISTRY = FigureRegistry()
