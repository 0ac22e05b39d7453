"""
Command line launcher for the item and greeting services.

Options given on the command line override values loaded from
ITEM_SERVICE_* environment variables and the .env file.
"""

from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from .api.config import Config
from .api.server import create_app, create_greeting_app, serve

app = typer.Typer(
    name="item-service",
    help="Run the item CRUD API or the greeting API",
    no_args_is_help=True,
    add_completion=False,
)

HostOption = Annotated[
    Optional[str], typer.Option("--host", help="Bind address [default: 127.0.0.1]")
]
PortOption = Annotated[
    Optional[int], typer.Option("--port", "-p", help="Bind port [default: 3000]")
]
LogLevelOption = Annotated[
    Optional[str], typer.Option("--log-level", "-l", help="Logging level [default: INFO]")
]


def load_config(
    host: Optional[str] = None, port: Optional[int] = None, log_level: Optional[str] = None
) -> Config:
    """Load configuration, applying command line overrides."""
    overrides = {"host": host, "port": port, "log_level": log_level}
    try:
        return Config(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(2)


@app.command()
def items(host: HostOption = None, port: PortOption = None, log_level: LogLevelOption = None):
    """Serve the item CRUD API (docs at /api-docs)."""
    config = load_config(host, port, log_level)
    serve(create_app(config), config)


@app.command()
def greeting(host: HostOption = None, port: PortOption = None, log_level: LogLevelOption = None):
    """Serve the greeting API (GET / and GET /hello)."""
    config = load_config(host, port, log_level)
    serve(create_greeting_app(config), config)


def main():
    """Entry point for the item-service command."""
    app()


if __name__ == "__main__":
    main()
