import signal
from typing import Optional

import click

from ghostty_lsp.cli.utils import configure_logging, output_error, resolve_debug, resolve_schema_path
from ghostty_lsp.lsp.server import DEFAULT_PORT, GhosttyLSPServer
from ghostty_lsp.schema import load_schema
from ghostty_lsp.version import PACKAGE_VERSION


@click.command(name="ghostty-lsp")
@click.option("--port", type=int, help=f"Port number for TCP mode (defaults to {DEFAULT_PORT})")
@click.option("--host", default="localhost", help="Host to bind to when using TCP mode (defaults to localhost)")
@click.option("--tcp", is_flag=True, help="Use TCP instead of stdio for LSP communication")
@click.option("--schema", "schema_path", type=click.Path(dir_okay=False), help="Use an alternative schema resource")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
@click.version_option(PACKAGE_VERSION, prog_name="ghostty-lsp")
def lsp(port: Optional[int], host: str, tcp: bool, schema_path: Optional[str], debug: bool):
    """Start the Ghostty configuration language server.

    The server offers completions for Ghostty config files: option keys,
    and values for booleans, enums, colors, keybinds and themes.

    By default the server uses stdio for communication (suitable for editor
    integration). Use --tcp for testing or when stdio is not suitable.

    Examples:
        ghostty-lsp                        # Start LSP server using stdio
        ghostty-lsp --tcp                  # Start LSP server using TCP on localhost:3000
        ghostty-lsp --tcp --port 4000      # Start LSP server using TCP on localhost:4000
        ghostty-lsp --schema my.json       # Complete from a custom schema resource
        ghostty-lsp --debug                # Start with detailed debug logging
    """
    debug = resolve_debug(debug)
    schema_path = resolve_schema_path(schema_path)

    configure_logging(debug)

    try:
        # A schema that fails to load is fatal: never start serving without one
        schema = load_schema(schema_path)
        final_port = port or DEFAULT_PORT

        def signal_handler(signum, frame):
            raise KeyboardInterrupt()

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        server = GhosttyLSPServer(schema=schema, port=final_port)

        if tcp:
            click.echo(f"Starting Ghostty LSP server on {host}:{final_port}", err=True)
        server.start(host=host, use_tcp=tcp)

    except KeyboardInterrupt:
        click.echo("\nLSP server stopped", err=True)
    except Exception as e:
        output_error(e, debug=debug)
