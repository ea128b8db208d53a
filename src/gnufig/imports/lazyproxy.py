# src/gnufig/imports/lazyproxy.py

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Proxy that defers ``import <name>`` until an attribute is first requested.

	A missing dependency surfaces as :class:`ImportError` naming the module,
	what it is used for and how to install it.
	"""
	def __init__(
			self,
			name: str,
			*,
			install: Optional[str] = None,
			reason: Optional[str] = None
	) -> None:
		self._name = name
		self._mod: Optional[ModuleType] = None
		self._install = install
		self._reason = reason

	@property
	def is_loaded(self) -> bool:
		return self._mod is not None

	def _load(self) -> ModuleType:
		if self._mod is not None:
			return self._mod
		try:
			self._mod = importlib.import_module(self._name)
		except ImportError as exc:
			message = f"gnufig needs '{self._name}'"
			if self._reason:
				message += f" for {self._reason}"
			message += "."
			if self._install:
				message += f" Install it with '{self._install}'."
			raise ImportError(message) from exc
		return self._mod

	def __getattr__(self, item: str) -> Any:
		return getattr(self._load(), item)

	def __repr__(self) -> str:
		state = "loaded" if self.is_loaded else "not loaded"
		return f"<LazyModule {self._name!r} ({state})>"


def lazy_module(
		name: str, *, install: Optional[str] = None, reason: Optional[str] = None
) -> LazyModule:
	"""
	Create a lazy module proxy.

	:param name: Fully qualified module name.
	:param install: Optional installation hint for the ImportError message.
	:param reason: Optional context why the dependency is needed.
	:return: :class:`LazyModule` instance.
	"""
	return LazyModule(name, install=install, reason=reason)
