"""Shared CLI parameter definitions.

Reusable ``Annotated`` parameter types for the CLI commands, so option
names, environment variables and help text stay consistent.
"""

from typing import Annotated, Optional

import typer

PathsArgument = Annotated[
    list[str],
    typer.Argument(help="Describe JSON files or directories containing them"),
]

OutputDirectoryOption = Annotated[
    str,
    typer.Option("--out", "-o", help="Directory to write describe files to"),
]

InstanceUrlOption = Annotated[
    str,
    typer.Option(
        "--instance-url",
        envvar="SALESFORCE_INSTANCE_URL",
        help="Instance base URL, e.g. https://example.my.salesforce.com",
    ),
]

AccessTokenOption = Annotated[
    str,
    typer.Option(
        "--access-token",
        envvar="SALESFORCE_ACCESS_TOKEN",
        help="OAuth access token for the instance",
    ),
]

ApiVersionOption = Annotated[
    Optional[str],
    typer.Option("--api-version", help="REST API version (defaults to settings)"),
]
