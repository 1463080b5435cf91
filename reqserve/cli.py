from __future__ import annotations

import logging

import click

from . import __version__
from .config import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_RETURN_CODE, ServerConfig
from .errors import BindError, ConfigurationError
from .server import Server

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command(name="serve", help="Starts a local server and prints incoming requests")
@click.version_option(__version__, prog_name="serve")
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Address to bind.")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=DEFAULT_PORT,
    show_default=True,
    help="Port to listen on.",
)
@click.option(
    "--return-code",
    type=click.IntRange(0, 65535),
    default=DEFAULT_RETURN_CODE,
    show_default=True,
    help="Status code sent back for every request.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log connection events.")
def main(host: str, port: int, return_code: int, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )
    try:
        config = ServerConfig.from_values(host, port, return_code)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    server = Server(config)
    try:
        server.bind()
    except BindError as exc:
        raise click.ClickException(str(exc)) from exc

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        click.echo("Stopping server.")
    finally:
        server.close()
