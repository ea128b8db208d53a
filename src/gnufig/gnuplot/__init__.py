from .commands import (
	TERMINALS,
	clean_path,
	extension_of,
	output_cmd,
	palette_cmd,
	run_script,
	save_terminal_cmd,
	show_terminal_cmd,
	size_str,
	terminal_for,
)
from .data import coerce_column, write_dataset
from .palettes import DEFAULT_PALETTE, PALETTES, palette_commands, palette_names
from .util import (
	BANNER,
	banner,
	command_value_str,
	format_number,
	format_value,
	join_options,
	option_value_str,
	quote,
)

__all__ = [
	"BANNER",
	"DEFAULT_PALETTE",
	"PALETTES",
	"TERMINALS",
	"banner",
	"clean_path",
	"coerce_column",
	"command_value_str",
	"extension_of",
	"format_number",
	"format_value",
	"join_options",
	"option_value_str",
	"output_cmd",
	"palette_cmd",
	"palette_commands",
	"palette_names",
	"quote",
	"run_script",
	"save_terminal_cmd",
	"show_terminal_cmd",
	"size_str",
	"terminal_for",
	"write_dataset",
]
