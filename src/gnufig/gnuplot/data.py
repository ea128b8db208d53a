# src/gnufig/gnuplot/data.py
"""Serialization of plot columns into indexed gnuplot data blocks."""

from __future__ import annotations

from typing import Any, List, Sequence

from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger
from .util import banner, format_value

LOG = get_logger(__name__)

__all__ = ["coerce_column", "write_dataset"]


def coerce_column(column: Any) -> "np.ndarray":  # type: ignore[name-defined]
	"""
	Turn a 1-D array-like (list, tuple, ndarray, pandas Series) into an ndarray.

	:raises ValueError: For scalars and arrays with more than one dimension.
	"""
	arr = np.asarray(column)
	if arr.ndim == 0:
		raise ValueError("Scalar is not valid; expected a 1D array-like column.")
	if arr.ndim > 1:
		raise ValueError(f"Expected a 1D array-like column; got ndim={arr.ndim}.")
	return arr


def write_dataset(index: int, columns: Sequence[Any]) -> str:
	"""
	Render one data block addressable as ``index <index>``.

	Rows are written column by column separated by spaces. Ragged columns are
	cut to the shortest one. The block ends with two blank lines, which gnuplot
	reads as the boundary between indexed datasets.

	:param index: Dataset index announced in the block header.
	:param columns: One or more 1-D columns.
	:return: The block text.
	:raises ValueError: If no column is given or a column is not 1-D.
	"""
	if not columns:
		raise ValueError("At least one data column is required.")

	arrays = [coerce_column(c) for c in columns]
	lengths = [len(a) for a in arrays]
	rows = min(lengths)
	if len(set(lengths)) > 1:
		LOG.warning("Dataset #%d has columns of unequal length %s; writing %d rows.", index, lengths, rows)

	lines: List[str] = []
	for i in range(rows):
		lines.append(" ".join(format_value(a[i].item() if hasattr(a[i], "item") else a[i]) for a in arrays))

	body = "\n".join(lines) + ("\n" if lines else "")
	return banner(f"DATASET #{index}") + body + "\n\n"
