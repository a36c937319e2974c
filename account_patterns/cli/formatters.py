"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML serialization
- Rich tables for the pattern listing
- Key/value tables for demo results
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict):
        return format_result_table(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict[str, str]]) -> str:
    """Format registered patterns as a table."""
    if not patterns:
        return "No patterns registered."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Description")

    for pattern in patterns:
        table.add_row(pattern["name"], pattern["category"], pattern["description"])

    return _render(table)


def format_result_table(result: Dict[str, Any]) -> str:
    """Format a demo result as a two column key/value table."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in result.items():
        rendered = value if isinstance(value, str) else json.dumps(value, indent=2, default=str)
        table.add_row(str(key), rendered)

    return _render(table)


def _render(table: Table) -> str:
    console = Console(width=120)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
