"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML dumps
- Rich tables, one per section of a result dictionary
"""

import io
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(_to_plain(data), default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format a result dictionary as a series of tables."""
    if not isinstance(data, dict):
        return json.dumps(data, indent=2, default=str)

    console = Console(file=io.StringIO(), width=160, color_system=None)
    for section, value in data.items():
        if isinstance(value, list) and all(isinstance(item, dict) for item in value):
            console.print(_records_table(section, value))
        elif isinstance(value, dict):
            console.print(_fields_table(section, value))
        else:
            console.print(f"{section}: {value}")
    return console.file.getvalue().rstrip("\n")


def _records_table(title: str, records: List[Dict[str, Any]]) -> Table:
    """Build a table with one row per record."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    if not records:
        table.add_column("(empty)")
        return table

    columns: List[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)
    for column in columns:
        table.add_column(column)
    for record in records:
        table.add_row(*(str(record.get(column, "")) for column in columns))
    return table


def _fields_table(title: str, fields: Dict[str, Any]) -> Table:
    """Build a two column field/value table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in fields.items():
        table.add_row(str(key), str(value))
    return table


def _to_plain(data: Any) -> Any:
    """Convert values YAML cannot represent safely (datetimes included) to strings."""
    if isinstance(data, dict):
        return {str(key): _to_plain(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_to_plain(value) for value in data]
    if data is None or isinstance(data, (str, int, float, bool)):
        return data
    return str(data)
