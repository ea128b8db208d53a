"""Series accumulation: datasets, plot elements and the draw_* shortcuts."""

from __future__ import annotations

import logging
import re

import pytest

np = pytest.importorskip("numpy")

from gnufig.gnuplot import write_dataset  # noqa: E402
from gnufig.specs import PlotSpecs  # noqa: E402


def _rows(block: str):
	return [line for line in block.splitlines() if line and not line.startswith("#")]


def test_each_vector_draw_appends_an_indexed_dataset(fig):
	fig.draw_curve([0, 1], [0, 1])
	fig.draw_points(np.array([2.0, 3.0]), np.array([4.0, 9.0]))
	fig.draw_impulses((5, 6), (1, 1))

	headers = re.findall(r"^# DATASET #(\d+)$", fig.data, flags=re.MULTILINE)
	assert headers == ["0", "1", "2"]
	assert fig.num_datasets == 3
	assert [e.what for e in fig.elements] == [f"'{fig.data_path}' index {i}" for i in range(3)]


def test_dataset_blocks_are_separated_by_two_blank_lines(fig):
	fig.draw_curve([0, 1], [2, 3])
	fig.draw_curve([0, 1], [4, 5])
	first, second = fig.data.split("\n\n\n")[:2]
	assert _rows(first) == ["0 2", "1 3"]
	assert _rows(second) == ["0 4", "1 5"]
	assert fig.data.endswith("\n\n\n")


def test_numbers_are_written_canonically(fig):
	fig.draw_curve([0, 1, 2], [0.5, 1.0, 2.25])
	assert _rows(fig.data) == ["0 0.5", "1 1", "2 2.25"]


def test_text_columns_are_quoted(fig):
	fig.draw("boxes", ["Mon", "Tue"], [3, 4]).using(2, "xtic(1)")
	assert _rows(fig.data) == ['"Mon" 3', '"Tue" 4']
	assert fig.elements[0].render().startswith(f"'{fig.data_path}' index 0 using 2:xtic(1) notitle with boxes")


def test_default_line_style_follows_position(fig):
	fig.draw("sin(x)", "lines")
	fig.draw_curve([0, 1], [1, 0])
	fig.draw_histogram([3, 1, 2])

	assert [e.render().split(" ls ")[1].split()[0] for e in fig.elements] == ["1", "2", "3"]


def test_overriding_one_element_leaves_neighbours_alone(fig):
	first = fig.draw_curve([0, 1], [0, 1])
	second = fig.draw_curve([0, 1], [1, 2])
	third = fig.draw_curve([0, 1], [2, 3])

	second.line_width(4).line_color("red").dash_type(2).label("middle")

	assert first.render().endswith("notitle with lines ls 1")
	assert second.render().endswith("title 'middle' with lines ls 2 lw 4 lc rgb 'red' dt 2")
	assert third.render().endswith("notitle with lines ls 3")


def test_expression_form_writes_no_data(fig):
	spec = fig.draw("sin(x)*cos(x)", "linespoints")
	assert isinstance(spec, PlotSpecs)
	assert spec.render() == "sin(x)*cos(x) notitle with linespoints ls 1"
	assert fig.data == ""
	assert fig.num_datasets == 0


def test_dataset_index_ignores_expression_elements(fig):
	fig.draw("x**2", "lines")
	spec = fig.draw_curve([0, 1], [0, 1])
	assert spec.what.endswith("index 0")
	assert "ls 2" in spec.render()


def test_histogram_has_no_with_clause(fig):
	spec = fig.draw_histogram([4, 2, 7])
	assert spec.with_ == ""
	assert " with " not in spec.render()
	assert _rows(fig.data) == ["4", "2", "7"]


def test_ragged_columns_are_cut_to_the_shortest(fig, gnufig_log):
	fig.draw_curve([0, 1, 2, 3], [5, 6])
	assert _rows(fig.data) == ["0 5", "1 6"]
	warnings = [r for r in gnufig_log.records if r.levelno == logging.WARNING]
	assert warnings and "unequal length" in warnings[0].getMessage()


def test_vector_draw_without_columns_is_rejected(fig):
	with pytest.raises(ValueError):
		fig.draw("lines")
	assert fig.num_datasets == 0
	assert fig.elements == []


def test_two_dimensional_column_is_rejected():
	with pytest.raises(ValueError):
		write_dataset(0, [np.zeros((2, 2))])


@pytest.mark.parametrize(
	"method, ncols, style",
	[
		("draw_curve", 2, "lines"),
		("draw_curve_with_points", 2, "linespoints"),
		("draw_curve_with_error_bars_x", 3, "xerrorlines"),
		("draw_curve_with_error_bars_x", 4, "xerrorlines"),
		("draw_curve_with_error_bars_y", 3, "yerrorlines"),
		("draw_curve_with_error_bars_y", 4, "yerrorlines"),
		("draw_curve_with_error_bars_xy", 4, "xyerrorlines"),
		("draw_curve_with_error_bars_xy", 6, "xyerrorlines"),
		("draw_boxes", 2, "boxes"),
		("draw_boxes", 3, "boxes"),
		("draw_boxes_with_error_bars_y", 3, "boxerrorbars"),
		("draw_boxes_with_error_bars_y", 4, "boxerrorbars"),
		("draw_error_bars_x", 3, "xerrorbars"),
		("draw_error_bars_x", 4, "xerrorbars"),
		("draw_error_bars_y", 3, "yerrorbars"),
		("draw_error_bars_y", 4, "yerrorbars"),
		("draw_error_bars_xy", 4, "xyerrorbars"),
		("draw_error_bars_xy", 6, "xyerrorbars"),
		("draw_steps", 2, "steps"),
		("draw_steps_change_first_x", 2, "steps"),
		("draw_steps_change_first_y", 2, "fsteps"),
		("draw_steps_histogram", 2, "histeps"),
		("draw_steps_filled", 2, "fillsteps"),
		("draw_dots", 2, "dots"),
		("draw_points", 2, "points"),
		("draw_impulses", 2, "impulses"),
	],
)
def test_shortcuts_use_fixed_style_and_column_order(fig, method, ncols, style):
	columns = [[float(c), float(c) + 0.5] for c in range(ncols)]
	spec = getattr(fig, method)(*columns)

	assert spec.with_ == style
	rows = _rows(fig.data)
	assert rows == [
		" ".join(_fmt(c) for c in range(ncols)),
		" ".join(_fmt(c + 0.5) for c in range(ncols)),
	]


def _fmt(value: float) -> str:
	return str(int(value)) if float(value).is_integer() else repr(float(value))


@pytest.mark.parametrize(
	"method, nerrors",
	[
		("draw_error_bars_y", 0),
		("draw_error_bars_y", 3),
		("draw_curve_with_error_bars_xy", 1),
		("draw_curve_with_error_bars_xy", 3),
		("draw_boxes", 2),
	],
)
def test_shortcuts_reject_wrong_error_column_counts(fig, method, nerrors):
	with pytest.raises(ValueError):
		getattr(fig, method)([0, 1], [1, 2], *([[0.1, 0.1]] * nerrors))
	assert fig.num_datasets == 0
