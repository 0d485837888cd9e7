"""Shared utilities for saidify CLI commands.

This module provides common functionality for:
- Reading input from stdin, files, or arguments
- Exit codes
"""

import json
import sys
from pathlib import Path
from typing import Any

import typer

# Exit codes
EXIT_SUCCESS = 0
EXIT_VALIDATION_FAILURE = 1
EXIT_PARSE_ERROR = 2
EXIT_IO_ERROR = 3


def is_json_string(value: str) -> bool:
    """Check if a string appears to be JSON (starts with { or [).

    Args:
        value: String to check

    Returns:
        True if the string looks like JSON
    """
    stripped = value.strip()
    return stripped.startswith("{") or stripped.startswith("[")


def read_input(source: str, encoding: str = "utf-8") -> str:
    """Read input from stdin, file, or argument.

    Args:
        source: Input source - "-" for stdin, file path, or literal value
        encoding: Text encoding for files

    Returns:
        Content as string

    Raises:
        typer.Exit: On I/O errors with appropriate exit code
    """
    if is_json_string(source):
        return source

    try:
        if source == "-":
            return sys.stdin.read()

        path = Path(source)
        if path.exists() and path.is_file():
            return path.read_text(encoding=encoding)

        # Treat as literal value (inline JSON)
        return source

    except OSError as e:
        typer.echo(f"Error reading input: {e}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def read_json_input(source: str) -> dict[str, Any]:
    """Read a JSON object from stdin, file, or argument.

    Key order is preserved as read; it is part of the SAID.

    Args:
        source: Input source - "-" for stdin, file path, or JSON string

    Returns:
        Parsed JSON object

    Raises:
        typer.Exit: On I/O or parse errors, or when the JSON is not an object
    """
    content = read_input(source)

    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        typer.echo(f"Invalid JSON: {e}", err=True)
        raise typer.Exit(EXIT_PARSE_ERROR) from e

    if not isinstance(data, dict):
        typer.echo("Input must be a JSON object", err=True)
        raise typer.Exit(EXIT_PARSE_ERROR)
    return data
