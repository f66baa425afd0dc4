"""CLI entry point for semval.

Invoked as::

    semval [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m semval.cli.main

Commands
--------
version         Show version information
types           List the known datatypes
type-id         Resolve a type label to its type id
value           Build a value from a type id and raw input
property-value  Build a value for a property from raw input
cache-key       Derive a cache key from a seed
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from semval.datavalues.base import DataValue

console = Console()
err_console = Console(stderr=True)


def _load_context(config: str | None) -> None:
    """Install the process context, reading ``config`` when given."""
    from semval.config import load_settings
    from semval.context import configure
    from semval.errors import ConfigurationError

    if config is None:
        return
    try:
        configure(load_settings(config))
    except ConfigurationError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)


def _print_value(value: "DataValue", output_format: str) -> None:
    """Render a value and exit 1 if it carries errors."""
    from semval.dataitems.serializer import DataItemSerializer

    if value.get_errors():
        table = Table(title=f"Errors for {type(value).__name__}", show_lines=True)
        table.add_column("Code", min_width=8)
        table.add_column("Kind", style="bold", min_width=12)
        table.add_column("Message")
        for issue in value.issues:
            table.add_row(issue.code, f"[red]{issue.kind.name}[/red]", escape(issue.message))
        console.print(table)
        sys.exit(1)

    if output_format == "text":
        console.print(escape(value.get_wiki_value()), highlight=False)
        return

    item = value.get_data_item()
    if item is None:
        console.print("[dim](empty)[/dim]")
        return
    serializer = DataItemSerializer()
    if output_format == "yaml":
        text, lang = serializer.to_yaml(item), "yaml"
    else:
        text, lang = serializer.to_json(item), "json"
    console.print(Syntax(text, lang))


_FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Print the wiki value (text) or the data item (json/yaml)",
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="semval")
@click.option(
    "--config",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML settings file",
)
def cli(config: str | None) -> None:
    """Typed value construction and key-scoped caching."""
    _load_context(config)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from semval import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]semval[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# types command
# ---------------------------------------------------------------------------


@cli.command(name="types")
@click.option("--all", "show_all", is_flag=True, default=False, help="Include internal types")
def types_command(show_all: bool) -> None:
    """List the known datatypes."""
    from semval.context import get_context

    registry = get_context().registry
    table = Table(title="Datatypes")
    table.add_column("Type id", style="bold")
    table.add_column("Label")
    table.add_column("Aliases")
    table.add_column("Data item")
    for type_id in registry.type_ids():
        label = registry.find_type_label(type_id)
        if not label and not show_all:
            continue
        definition = registry.get_definition(type_id)
        assert definition is not None
        table.add_row(
            type_id,
            label or "[dim]-[/dim]",
            ", ".join(registry.aliases.aliases_of(type_id)),
            definition.data_item_type.name,
        )
    console.print(table)


# ---------------------------------------------------------------------------
# type-id command
# ---------------------------------------------------------------------------


@cli.command(name="type-id")
@click.argument("label")
def type_id_command(label: str) -> None:
    """Resolve a type LABEL such as "Text" to its type id."""
    from semval.context import get_context

    type_id = get_context().registry.find_type_id(label)
    if not type_id:
        err_console.print(f"[red]Unknown type label:[/red] {escape(label)}")
        sys.exit(1)
    console.print(type_id, highlight=False)


# ---------------------------------------------------------------------------
# value command
# ---------------------------------------------------------------------------


@cli.command(name="value")
@click.argument("type_id")
@click.argument("raw")
@click.option("--caption", default=None, help="Caption to attach")
@_FORMAT_OPTION
def value_command(type_id: str, raw: str, caption: str | None, output_format: str) -> None:
    """Build a value of TYPE_ID from RAW input.

    TYPE_ID may be a type id ("_num") or a type label ("Number").
    """
    from semval.context import get_context

    value = get_context().factory.new_type_id_value(type_id, raw, caption)
    _print_value(value, output_format.lower())


# ---------------------------------------------------------------------------
# property-value command
# ---------------------------------------------------------------------------


@cli.command(name="property-value")
@click.argument("prop")
@click.argument("raw")
@click.option("--caption", default=None, help="Caption to attach")
@_FORMAT_OPTION
def property_value_command(prop: str, raw: str, caption: str | None, output_format: str) -> None:
    """Build a value for the property PROP from RAW input."""
    from semval.context import get_context

    value = get_context().factory.new_property_value(prop, raw, caption)
    _print_value(value, output_format.lower())


# ---------------------------------------------------------------------------
# cache-key command
# ---------------------------------------------------------------------------


@cli.command(name="cache-key")
@click.argument("seed")
@click.option("--prefix", default=None, help="Key prefix")
def cache_key_command(seed: str, prefix: str | None) -> None:
    """Derive the cache key for SEED."""
    from semval.context import get_context

    generator = get_context().caches.new_key_generator(seed, prefix)
    console.print(generator.generate_id(), highlight=False)


if __name__ == "__main__":
    cli()
