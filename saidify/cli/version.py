"""Version string commands.

Commands:
    saidify version make    Generate a version string
    saidify version parse   Parse a version string
"""

import typer

from saidify.cli.output import OutputFormat, output, output_error
from saidify.exceptions import SAIDError
from saidify.models import VersionResult
from saidify.versioning import (
    VEREX,
    VER2_TERM,
    Protocols,
    Serials,
    Version,
    deversify,
    versify,
)

app = typer.Typer(
    name="version",
    help="Generate and parse version strings.",
    no_args_is_help=True,
)


def _result(vs: str) -> VersionResult:
    proto, vrsn, kind, size = deversify(vs)
    matched = VEREX.search(vs).group(0)
    return VersionResult(
        version_string=matched,
        protocol=proto.value,
        major=vrsn.major,
        minor=vrsn.minor,
        kind=kind.value,
        size=size,
        dialect=2 if matched.endswith(VER2_TERM) else 1,
    )


@app.command("make")
def make_cmd(
    protocol: Protocols = typer.Option(Protocols.KERI, "--protocol", "-p", help="Protocol"),
    major: int = typer.Option(1, "--major", help="Major version (>= 2 selects dialect 2)"),
    minor: int = typer.Option(0, "--minor", help="Minor version"),
    kind: Serials = typer.Option(Serials.JSON, "--kind", "-k", help="Serialization kind"),
    size: int = typer.Option(0, "--size", "-s", help="Serialized byte size"),
    format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Generate a version string.

    Examples:
        saidify version make --size 65
        saidify version make --protocol ACDC --major 2 --kind CBOR --size 86
    """
    try:
        vs = versify(protocol, Version(major, minor), kind, size)
        result = _result(vs)
    except SAIDError as e:
        output_error(e)
        return

    output(result, format)


@app.command("parse")
def parse_cmd(
    version_string: str = typer.Argument(..., help="Version string, e.g. KERI10JSON000041_"),
    format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Parse a version string into its fields.

    Examples:
        saidify version parse KERI10JSON000041_
        saidify version parse KERICAAJSONAABB.
    """
    try:
        result = _result(version_string)
    except SAIDError as e:
        output_error(e)
        return

    output(result, format)


if __name__ == "__main__":
    app()
