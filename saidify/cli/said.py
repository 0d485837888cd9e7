"""SAID computation and validation commands.

Commands:
    saidify said compute <input>   Compute SAID for a structure
    saidify said verify <input>    Verify an existing SAID
    saidify said inject <input>    Inject computed SAID into structure
"""

import json
import logging
from typing import Any, Optional

import typer

from saidify.cli.output import OutputFormat, output, output_error
from saidify.cli.utils import EXIT_VALIDATION_FAILURE, read_json_input
from saidify.config import DEFAULT_CODE, DEFAULT_LABEL
from saidify.digests import DIGESTS
from saidify.exceptions import SAIDError
from saidify.models import SaidResult, VerifyResult
from saidify.said import check, saidify
from saidify.versioning import Serials, deversify

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="said",
    help="Compute and validate SAIDs (Self-Addressing Identifiers).",
    no_args_is_help=True,
)


def _resolved_kind(sad: dict[str, Any], kind: Optional[Serials]) -> Serials:
    """Kind that was digested: the version string's, else *kind*, else JSON."""
    if "v" in sad:
        return deversify(sad["v"]).kind
    return kind or Serials.JSON


def _algorithm(code: str) -> str:
    digestage = DIGESTS.get(code)
    return digestage.name if digestage else code


@app.command("compute")
def compute_cmd(
    source: str = typer.Argument(
        ...,
        help="JSON file path, inline JSON, or '-' for stdin",
    ),
    label: str = typer.Option(
        DEFAULT_LABEL,
        "--label",
        "-l",
        help="SAID field name",
    ),
    code: str = typer.Option(
        DEFAULT_CODE,
        "--code",
        "-c",
        help="Derivation code: E blake3, F blake2b, H sha3, I sha2",
    ),
    kind: Optional[Serials] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Serialization to digest (default: from 'v' field, else JSON)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Compute the SAID of a JSON structure.

    Examples:
        saidify said compute credential.json
        cat event.json | saidify said compute - --code I
        saidify said compute '{"d": "", "a": 1}'
    """
    data = read_json_input(source)

    try:
        said, sad = saidify(data, label=label, code=code, kind=kind)
        result = SaidResult(
            said=said,
            code=code,
            algorithm=_algorithm(code),
            kind=_resolved_kind(sad, kind).value,
            label=label,
        )
    except SAIDError as e:
        output_error(e)
        return

    output(result, format)


@app.command("verify")
def verify_cmd(
    source: str = typer.Argument(
        ...,
        help="JSON file path, inline JSON, or '-' for stdin",
    ),
    said: Optional[str] = typer.Option(
        None,
        "--said",
        "-s",
        help="Expected SAID (default: the value in the label field)",
    ),
    label: str = typer.Option(
        DEFAULT_LABEL,
        "--label",
        "-l",
        help="SAID field name",
    ),
    code: str = typer.Option(
        DEFAULT_CODE,
        "--code",
        "-c",
        help="Derivation code",
    ),
    kind: Optional[Serials] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Serialization to digest (default: from 'v' field, else JSON)",
    ),
    prefixed: bool = typer.Option(
        False,
        "--prefixed",
        help="Also require the label field to equal --said",
    ),
    versioned: bool = typer.Option(
        False,
        "--versioned",
        help="Also require the 'v' field size to be correct",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Verify that a structure is self-addressed.

    Exits with status 1 when the SAID does not match.

    Examples:
        saidify said verify credential.json
        saidify said verify event.json --said EHSOlNZz... --prefixed
    """
    data = read_json_input(source)

    try:
        valid, computed, sad = check(
            data,
            said=said,
            label=label,
            code=code,
            kind=kind,
            prefixed=prefixed,
            versioned=versioned,
        )
        result = VerifyResult(
            valid=valid,
            expected=said if said is not None else data.get(label),
            computed=computed,
            code=code,
            kind=_resolved_kind(sad, kind).value,
            label=label,
        )
    except SAIDError as e:
        output_error(e)
        return

    output(result, format)

    if not valid:
        raise typer.Exit(EXIT_VALIDATION_FAILURE)


@app.command("inject")
def inject_cmd(
    source: str = typer.Argument(
        ...,
        help="JSON file path, inline JSON, or '-' for stdin",
    ),
    label: str = typer.Option(
        DEFAULT_LABEL,
        "--label",
        "-l",
        help="SAID field name",
    ),
    code: str = typer.Option(
        DEFAULT_CODE,
        "--code",
        "-c",
        help="Derivation code",
    ),
    kind: Optional[Serials] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Serialization to digest (default: from 'v' field, else JSON)",
    ),
) -> None:
    """Compute the SAID and inject it into the structure.

    Outputs the modified JSON with the SAID in the label field and, when
    present, a sized 'v' field.

    Examples:
        saidify said inject draft-acdc.json > acdc.json
    """
    data = read_json_input(source)

    try:
        said, sad = saidify(data, label=label, code=code, kind=kind)
    except SAIDError as e:
        output_error(e)
        return

    logger.debug("injected SAID %s at %r", said, label)
    typer.echo(json.dumps(sad, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
