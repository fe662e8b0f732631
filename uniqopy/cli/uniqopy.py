import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from uniqopy.core.errors import UniqopyError, UsageError
from uniqopy.core.naming import display_name
from uniqopy.core.pipeline import execute_plan, plan_copy
from uniqopy.settings import APP_NAME, USAGE, VERSION


app = typer.Typer(add_completion=False)


# ----------------------------
# Helpers
# ----------------------------

def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


def _single_operand(operands: Optional[List[str]]) -> Path:
    if not operands or len(operands) != 1:
        raise UsageError(f"{APP_NAME} version {VERSION}\n{USAGE}")
    return Path(operands[0])


# ----------------------------
# CLI
# ----------------------------

@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        # Stray options are treated as operands so they fail as usage errors
        "ignore_unknown_options": True,
    },
    help="Copy FILE to FILE-STEM.<timestamp>.<md5>[.EXT] in the current directory.",
)
def main(
    operands: Optional[List[str]] = typer.Argument(
        None, metavar="FILE", show_default=False
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each step to stderr."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    configure_logging(verbose)

    try:
        source = _single_operand(operands)
        plan = plan_copy(source)
        typer.echo(
            f"Copying {display_name(plan.source)} to "
            f"{display_name(plan.destination_name)}"
        )
        result = execute_plan(plan)
    except UniqopyError as err:
        typer.echo(str(err), err=True)
        raise typer.Exit(code=int(err.kind))

    typer.echo(f"Copied {result.bytes_copied} bytes")
