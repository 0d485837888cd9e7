"""Output formatting for saidify CLI commands.

Commands print one pydantic result model per run:
- json: Compact JSON (default, for piping)
- pretty: Indented JSON for human reading
- table: Rich field/value table

Errors are always JSON on stderr.
"""

import json
import sys
from enum import Enum
from typing import Optional

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from saidify.cli.utils import EXIT_PARSE_ERROR
from saidify.exceptions import SAIDError


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    pretty = "pretty"
    table = "table"


def output_json(result: BaseModel, pretty: bool = False) -> None:
    """Print *result* as JSON to stdout."""
    indent = 2 if pretty else None
    typer.echo(json.dumps(result.model_dump(mode="json"), indent=indent, ensure_ascii=False))


def output_table(result: BaseModel, title: Optional[str] = None) -> None:
    """Print *result* as a two-column rich table."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("field")
    table.add_column("value")

    for name, value in result.model_dump(mode="json").items():
        table.add_row(name, "" if value is None else str(value))

    Console().print(table)


def output(
    result: BaseModel,
    format: OutputFormat = OutputFormat.json,
    table_title: Optional[str] = None,
) -> None:
    """Print *result* in the requested format."""
    if format == OutputFormat.table:
        output_table(result, title=table_title)
    else:
        output_json(result, pretty=format == OutputFormat.pretty)


def output_error(error: SAIDError, exit_code: int = EXIT_PARSE_ERROR) -> None:
    """Print *error* as JSON to stderr and exit.

    Args:
        error: The failure raised by the library
        exit_code: Process exit status
    """
    error_data = {
        "error": True,
        "code": error.code,
        "message": error.message,
    }
    print(json.dumps(error_data), file=sys.stderr)
    raise typer.Exit(exit_code)
