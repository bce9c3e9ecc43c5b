"""Rich/JSON output for ServiceResult.

Human output is rendered through a Rich console writing to a buffer so
``format_result`` stays a pure ``-> str`` function; Rich drops color
codes automatically when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from brandmark.services.result import ServiceResult

BRAND_THEME = Theme(
    {
        "bm.ok": "bold green",
        "bm.error": "bold red",
        "bm.warning": "bold yellow",
        "bm.op": "bold cyan",
        "bm.key": "dim",
        "bm.path": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=BRAND_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def _data_table(data: dict[str, Any]) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bm.key")
    table.add_column()
    for key, value in data.items():
        style = "bm.path" if key == "path" else ""
        table.add_row(key, f"[{style}]{escape(str(value))}[/]" if style else escape(str(value)))
    return table


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[bm.ok]OK[/] [bm.op]{result.op}[/]")
        if result.data:
            console.print(_data_table(result.data))
        for warning in result.warnings:
            console.print(f"[bm.warning]WARNING[/] {escape(warning)}")
        telemetry = (result.meta or {}).get("telemetry")
        if telemetry:
            console.print(f"[bm.key]took {telemetry['duration_ms']} ms[/]")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[bm.error]ERROR[/] [bm.op]{result.op}[/] {escape(message)}")
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")
