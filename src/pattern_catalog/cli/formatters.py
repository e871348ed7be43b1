"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for pattern listings
- List formatting for detailed views
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
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data and "output" not in data:
        return format_patterns_table([data["pattern"]])
    elif isinstance(data, dict) and "output" in data:
        return format_run_list(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data and "output" not in data:
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict) and "output" in data:
        return format_run_list(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format patterns as a table using the Rich library."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Description", style="white")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("description", "")),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format patterns as a detailed list."""
    if not patterns:
        return "No patterns found."

    lines = []
    for i, pattern in enumerate(patterns):
        if i > 0:
            lines.append("")  # Blank line between patterns
        lines.append(f"Pattern: {pattern.get('name', 'N/A')}")
        lines.append(f"  Category: {pattern.get('category', 'N/A')}")
        description = pattern.get("description")
        if description:
            lines.append(f"  Description: {description}")

    return "\n".join(lines)


def format_run_list(data: Dict[str, Any]) -> str:
    """Format a run result as the captured console text followed by the value."""
    output = data.get("output", {})
    lines = [f"Pattern: {data.get('pattern', 'N/A')}"]
    text = output.get("text")
    if text:
        lines.append("")
        lines.append(text)
    if output.get("value") is not None:
        lines.append("")
        lines.append("Value:")
        lines.append(json.dumps(output["value"], indent=2, default=str))
    return "\n".join(lines)
