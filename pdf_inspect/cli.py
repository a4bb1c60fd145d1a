"""
Command-line interface for PDF Inspect.
"""

import json
import os
import sys

import anyio
import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdf_inspect.dispatcher import Dispatcher
from pdf_inspect.server import ServerInfo, create_server, run_stdio
from pdf_inspect.utils import configure_logging

SERVER_INFO = ServerInfo()

console = Console()
error_console = Console(stderr=True)


def _parse_assignments(assignments):
    """Turn ``key=value`` pairs into an argument dictionary."""
    arguments = {}
    for item in assignments:
        key, separator, value = item.partition("=")
        if not separator or not key:
            raise click.BadParameter(f"Expected key=value, got '{item}'", param_hint="--arg")
        arguments[key] = value
    return arguments


@click.group()
@click.version_option(version=SERVER_INFO.version, prog_name=SERVER_INFO.name)
@click.option(
    '--log-level',
    default='WARNING',
    envvar='PDF_INSPECT_LOG_LEVEL',
    show_default=True,
    help='Logging level (logs are written to stderr)',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False)
)
def cli(log_level):
    """
    PDF Inspect - read-only PDF text, metadata and page count operations.
    """
    configure_logging(log_level)


@cli.command(name="serve")
def serve():
    """
    Run the MCP server on stdin/stdout.

    Example:

        pdf-inspect serve
    """
    anyio.run(run_stdio, create_server(Dispatcher(), info=SERVER_INFO))


@cli.command(name="tools")
def list_tools():
    """
    List the available operations and their parameters.
    """
    table = Table(title="Available Tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Description", style="green")
    table.add_column("Parameters")

    for tool in Dispatcher().list_tools():
        schema = tool["inputSchema"]
        required = set(schema["required"])
        params = ", ".join(
            f"{name}{'*' if name in required else ''}:{spec['type']}"
            for name, spec in schema["properties"].items()
        )
        table.add_row(tool["name"], tool["description"], params)

    console.print()
    console.print(table)
    console.print("[dim]* required[/dim]")


@cli.command(name="call")
@click.argument('tool_name')
@click.option(
    '--arg', '-a', 'assignments',
    multiple=True,
    help='Tool argument as key=value (repeatable)'
)
@click.option(
    '--json', 'json_arguments',
    default=None,
    help='Tool arguments as a JSON object'
)
def call_tool(tool_name, assignments, json_arguments):
    """
    Invoke a single tool and print its result.

    Examples:

        pdf-inspect call get_page_count -a file_path=input.pdf

        pdf-inspect call extract_text -a file_path=input.pdf -a page_range=2-4

        pdf-inspect call extract_text --json '{"file_path": "input.pdf", "start_page": 2}'
    """
    arguments = {}
    if json_arguments:
        try:
            arguments = json.loads(json_arguments)
        except json.JSONDecodeError as e:
            error_console.print(f"[bold red]✗ Error:[/bold red] --json must be valid JSON: {e.msg}")
            sys.exit(2)
        if not isinstance(arguments, dict):
            error_console.print("[bold red]✗ Error:[/bold red] --json must be a JSON object")
            sys.exit(2)
    arguments.update(_parse_assignments(assignments))

    result = Dispatcher().call(tool_name, arguments)
    if result.is_error:
        error_console.print(f"[bold red]✗ Error:[/bold red] {escape(result.content)}", highlight=False, soft_wrap=True)
        sys.exit(1)

    click.echo(result.content)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path())
def show_info(input_pdf):
    """
    Display metadata and page count of a PDF file.

    Example:

        pdf-inspect info input.pdf
    """
    result = Dispatcher().call("get_metadata", {"file_path": input_pdf})
    if result.is_error:
        error_console.print(f"[bold red]✗ Error:[/bold red] {escape(result.content)}", highlight=False, soft_wrap=True)
        sys.exit(1)

    metadata = json.loads(result.content)
    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("Number of Pages", str(metadata["page_count"]))
    for key in ("title", "author", "subject", "keywords", "creator", "producer",
                "creation_date", "modification_date"):
        if metadata.get(key):
            table.add_row(key.replace("_", " ").title(), metadata[key])

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
