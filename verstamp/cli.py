"""CLI interface for VERSTAMP.

This module provides the Typer-based command-line interface. Run with no
arguments from a project root to regenerate src/version/RevolutionVersion.sol
from package.json.
"""

from pathlib import Path
from typing import Annotated

import typer

from verstamp.config.manager import ConfigManager
from verstamp.stamper.pipeline import stamp
from verstamp.utils.console import print_error, print_info, print_success, show_version
from verstamp.utils.errors import ExitCode, VerstampError
from verstamp.utils.logging import log_message, setup_logging

app = typer.Typer(
    name="verstamp",
    help="Stamp the package version into the generated version contract",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.command()
def main(
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-r",
            help="Project root holding the manifest (default: current directory)",
            file_okay=False,
        ),
    ] = None,
    manifest: Annotated[
        Path | None,
        typer.Option(
            "--manifest",
            "-m",
            help="Manifest path relative to the root (default: package.json)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Artifact path relative to the root (default: src/version/RevolutionVersion.sol)",
            dir_okay=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Print the generated contract instead of writing it",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Regenerate the version contract from the package manifest.

    Reads the manifest's version field and overwrites the generated
    contract with a fresh copy returning that version.
    """
    setup_logging()

    try:
        project_root = root or Path.cwd()
        config = ConfigManager(project_root)
        settings = config.load()

        if manifest is not None:
            settings.manifest_path = str(manifest)
        if output is not None:
            settings.output_path = str(output)

        result = stamp(project_root, settings, dry_run=dry_run)

        if dry_run:
            typer.echo(result.text, nl=False)
            log_message(f"Dry run: {result.path} not written")
        else:
            print_success(f"Contract version {result.version} written to {result.path}")
            log_message(f"Stamped version {result.version} into {result.path}")

    except VerstampError as e:
        log_message(f"Stamping failed: {e}")
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from None


if __name__ == "__main__":
    app()
