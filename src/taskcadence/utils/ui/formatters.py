"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

FREQUENCY_ICONS = {
    "daily": "📅",
    "weekly": "🔄",
    "monthly": "🗓️",
    "yearly": "🎂",
    "custom": "⚙️",
}


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "pretty":
        format_pretty(data)
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if data is None or data == [] or data == {}:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(str(item))
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(str(data))


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list | tuple):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_format_value(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _format_value(value))

    console.print(table)


def format_pretty(data: Any) -> None:
    """Format occurrences as a compact, icon-decorated list."""
    if isinstance(data, list):
        if not data:
            console.print("[yellow]No occurrences[/yellow]")
            return
        for item in data:
            if isinstance(item, dict) and "due_date" in item:
                console.print(
                    f"  [dim]#{item.get('occurrence_number', '?'):>3}[/dim]  "
                    f"[bold]{item['due_date']}[/bold]"
                )
            else:
                console.print(f"  • {item}")
    elif isinstance(data, dict):
        icon = FREQUENCY_ICONS.get(str(data.get("frequency", "")), "🔁")
        console.print(f"{icon} [bold]{data.get('description', 'Recurrence')}[/bold]")
        for key, value in data.items():
            if key == "description":
                continue
            console.print(f"   [cyan]{key.replace('_', ' ').title()}:[/cyan] {_format_value(value)}")
    else:
        console.print(str(data))


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
