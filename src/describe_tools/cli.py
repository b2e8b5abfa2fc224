"""Command-line interface for describe-tools.

Commands:
    - inspect: Import describe files and summarise them
    - copy: Import describe files and write them back with canonical names
    - fetch: Describe every object of a remote instance into a directory
"""

import asyncio
from typing import Annotated, Any, Optional, Sequence

import typer

from . import __version__
from .cli_params import (
    AccessTokenOption,
    ApiVersionOption,
    InstanceUrlOption,
    OutputDirectoryOption,
    PathsArgument,
)
from .describe import DescribeDocument, import_describe_files, write_describe_files
from .remote import SalesforceConnection, describe_remote_objects
from .schemas import SalesforceConnectionConfig

app = typer.Typer(
    name="describe-tools",
    help="Import, export and fetch describe metadata documents.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"describe-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Describe-Tools: move describe documents between files and remote instances.
    """
    pass


def _split_results(
    results: Sequence[Any],
) -> tuple[list[Any], list[BaseException]]:
    values = [r for r in results if not isinstance(r, BaseException)]
    errors = [r for r in results if isinstance(r, BaseException)]
    return values, errors


def _report_errors(errors: Sequence[BaseException]) -> None:
    for error in errors:
        typer.echo(f"Failed: {error}", err=True)


async def _import(paths: Sequence[str]) -> list[Any]:
    tasks = await import_describe_files(*paths)
    return await asyncio.gather(*tasks, return_exceptions=True)


async def _export(
    describes: Sequence[DescribeDocument], directory: str
) -> list[Any]:
    tasks = await write_describe_files(describes, directory)
    return await asyncio.gather(*tasks, return_exceptions=True)


async def _fetch(config: SalesforceConnectionConfig) -> list[Any]:
    async with SalesforceConnection(config) as connection:
        tasks = await describe_remote_objects(connection)
        return await asyncio.gather(*tasks, return_exceptions=True)


@app.command("inspect")
def inspect_cmd(paths: PathsArgument) -> None:
    """
    Import describe files and print one line per document.

    Examples:
        describe-tools inspect describes/ extra/Account.desc.json
    """
    try:
        results = asyncio.run(_import(paths))
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    describes, errors = _split_results(results)
    for describe in describes:
        name = describe.get("name", "<unnamed>") if isinstance(describe, dict) else "?"
        fields = describe.get("fields", []) if isinstance(describe, dict) else []
        typer.echo(f"{name}: {len(fields)} fields")

    typer.echo(f"Imported {len(describes)} of {len(results)} describe files.")
    if errors:
        _report_errors(errors)
        raise typer.Exit(1)


@app.command("copy")
def copy_cmd(paths: PathsArgument, out: OutputDirectoryOption) -> None:
    """
    Import describe files and write them to a directory as <name>.desc.json.

    Examples:
        describe-tools copy describes/ --out normalised/
    """
    try:
        describes, import_errors = _split_results(asyncio.run(_import(paths)))
        written, write_errors = _split_results(asyncio.run(_export(describes, out)))
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for path in written:
        typer.echo(path)

    errors = import_errors + write_errors
    if errors:
        _report_errors(errors)
        raise typer.Exit(1)


@app.command("fetch")
def fetch_cmd(
    directory: Annotated[str, typer.Argument(help="Directory to write to")],
    instance_url: InstanceUrlOption,
    access_token: AccessTokenOption,
    api_version: ApiVersionOption = None,
) -> None:
    """
    Describe every object of a remote instance and write the results.

    Examples:
        describe-tools fetch describes/ \
            --instance-url https://example.my.salesforce.com --access-token TOKEN
    """
    try:
        options = {"instance_url": instance_url, "access_token": access_token}
        if api_version:
            options["api_version"] = api_version
        config = SalesforceConnectionConfig(**options)

        describes, fetch_errors = _split_results(asyncio.run(_fetch(config)))
        written, write_errors = _split_results(
            asyncio.run(_export(describes, directory))
        )
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Wrote {len(written)} describe files to {directory}")

    errors = fetch_errors + write_errors
    if errors:
        _report_errors(errors)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
