# src/gnufig/gnuplot/palettes.py
"""
Static palette table.

Each palette sets eight numbered line styles (used by ``ls N`` on plot
elements) and a matching continuous ``set palette``. Colours follow the
ColorBrewer / matplotlib palettes published at
https://github.com/Gnuplotting/gnuplot-palettes.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

__all__ = ["DEFAULT_PALETTE", "PALETTES", "palette_names", "palette_commands"]

DEFAULT_PALETTE = "dark2"

PALETTES: Dict[str, Tuple[str, ...]] = {
	"dark2": ("#1B9E77", "#D95F02", "#7570B3", "#E7298A", "#66A61E", "#E6AB02", "#A6761D", "#666666"),
	"set1": ("#E41A1C", "#377EB8", "#4DAF4A", "#984EA3", "#FF7F00", "#FFFF33", "#A65628", "#F781BF"),
	"set2": ("#66C2A5", "#FC8D62", "#8DA0CB", "#E78AC3", "#A6D854", "#FFD92F", "#E5C494", "#B3B3B3"),
	"paired": ("#A6CEE3", "#1F78B4", "#B2DF8A", "#33A02C", "#FB9A99", "#E31A1C", "#FDBF6F", "#FF7F00"),
	"accent": ("#7FC97F", "#BEAED4", "#FDC086", "#FFFF99", "#386CB0", "#F0027F", "#BF5B17", "#666666"),
	"viridis": ("#440154", "#472C7A", "#3B518B", "#2C718E", "#21908D", "#27AD81", "#5CC863", "#FDE725"),
	"magma": ("#000004", "#1C1044", "#4F127B", "#812581", "#B5367A", "#E55964", "#FB8761", "#FCFDBF"),
	"plasma": ("#0D0887", "#5302A3", "#8B0AA5", "#B83289", "#DB5C68", "#F48849", "#FEBD2A", "#F0F921"),
	"jet": ("#0000AA", "#0000FF", "#0080FF", "#00FFFF", "#80FF80", "#FFFF00", "#FF8000", "#AA0000"),
	"greys": ("#FFFFFF", "#F0F0F0", "#D9D9D9", "#BDBDBD", "#969696", "#737373", "#525252", "#252525"),
}


def palette_names() -> List[str]:
	return sorted(PALETTES)


def palette_commands(name: str) -> str:
	"""
	Return the gnuplot commands defining palette *name*.

	:raises KeyError: If *name* is not a known palette.
	"""
	try:
		colors = PALETTES[name]
	except KeyError:
		raise KeyError(f"Unknown palette {name!r}; choose one of {', '.join(palette_names())}.") from None

	lines = ["# line styles"]
	lines.extend(
		f"set style line {i} lt 1 lc rgb '{color}' lw 2 pt 7 ps 1"
		for i, color in enumerate(colors, start=1)
	)
	lines.append("# palette")
	lines.append(f"set palette maxcolors {len(colors)}")
	stops = ", ".join(f"{i} '{color}'" for i, color in enumerate(colors))
	lines.append(f"set palette defined ( {stops} )")
	return "\n".join(lines) + "\n"
