# src/gnufig/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

np = numpy = lazy_module("numpy", install="pip install numpy", reason="coercing plot data columns")

__all__ = ["LazyModule", "lazy_module", "np", "numpy"]
