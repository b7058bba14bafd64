"""Command-line interface for agent-yaml-extractor."""

import os
import sys
from typing import List

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from agent_yaml_extractor import __version__
from agent_yaml_extractor.loader import AgentYaml, load_agent_directories, load_agent_file
from agent_yaml_extractor.server import run_server
from agent_yaml_extractor.utils.logging import setup_logger

app = typer.Typer(
    help="Extract embedded YAML from agent Markdown files",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)
logger = setup_logger()


@app.command()
def version():
    """Show version information."""
    console.print(f"agent-yaml-extractor version [bold]{__version__}[/bold]")


@app.command()
def extract(
    file: str = typer.Argument(
        ...,
        help="Agent Markdown file to extract YAML from",
    ),
    clean_commands: bool = typer.Option(
        False,
        "--clean-commands",
        "-c",
        help="Remove descriptions from quoted command list items",
    ),
):
    """Print the YAML block embedded in an agent file."""
    try:
        if not os.path.isfile(file):
            err_console.print(f"[red]Error: {file} is not a file[/red]")
            sys.exit(1)

        agent = load_agent_file(file, clean_commands=clean_commands)

        if not agent.found:
            err_console.print(f"[red]Error: No YAML block found in {file}[/red]")
            sys.exit(1)

        # Raw output so the YAML can be piped to other tools
        typer.echo(agent.yaml_content)

    except Exception as e:
        err_console.print(f"[red]Error during extraction: {str(e)}[/red]")
        sys.exit(1)


def print_summary(agents: List[AgentYaml], console: Console) -> None:
    """Print a summary table of loaded agents.

    Args:
        agents: Loaded agents
        console: Rich console for output
    """
    if not agents:
        console.print("[yellow]No agent files found[/yellow]")
        return

    table = Table(title="Agents")
    table.add_column("Agent", style="bold")
    table.add_column("Path")
    table.add_column("YAML")
    table.add_column("Lines", justify="right")

    for agent in agents:
        if agent.found:
            status = "[green]found[/green]"
            lines = str(len(agent.yaml_content.splitlines()))
        else:
            status = "[red]missing[/red]"
            lines = "-"
        table.add_row(agent.name, agent.file_path, status, lines)

    console.print(table)

    found = sum(1 for agent in agents if agent.found)
    console.print(f"[bold]{found}/{len(agents)}[/bold] agent files contain a YAML block")


@app.command()
def scan(
    directories: List[str] = typer.Argument(
        ...,
        help="Directories containing agent Markdown files",
    ),
    clean_commands: bool = typer.Option(
        False,
        "--clean-commands",
        "-c",
        help="Remove descriptions from quoted command list items",
    ),
    workers: int = typer.Option(
        1,
        "--workers",
        "-w",
        help="Number of worker processes for parallel loading",
        min=1,
        max=os.cpu_count() or 8,
    ),
    extension: str = typer.Option(
        ".md",
        "--extension",
        "-e",
        help="File extension of agent files",
    ),
):
    """Extract YAML from every agent file in directories and show a summary."""
    try:
        for directory in directories:
            if not os.path.isdir(directory):
                console.print(f"[red]Error: {directory} is not a directory[/red]")
                sys.exit(1)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Scanning directories...", total=None)

            def update_progress(completed, total):
                if progress.tasks[task_id].total is None and total > 0:
                    progress.update(task_id, total=total)

                if total > 0:
                    progress.update(task_id, completed=completed,
                                    description=f"Loading agent files... [{completed}/{total}]")

            agents = load_agent_directories(
                directories,
                clean_commands=clean_commands,
                workers=workers,
                file_extension=extension,
                progress_callback=update_progress,
            )

        print_summary(agents, console)

    except Exception as e:
        console.print(f"[red]Error during scan: {str(e)}[/red]")
        sys.exit(1)


@app.command()
def serve(
    directories: List[str] = typer.Argument(
        ...,
        help="Directories containing agent Markdown files",
    ),
    clean_commands: bool = typer.Option(
        False,
        "--clean-commands",
        "-c",
        help="Remove descriptions from quoted command list items",
    ),
    transport: str = typer.Option(
        "stdio",
        "--transport",
        "-t",
        help="Transport protocol to use (stdio, streamable-http)",
    ),
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Host to bind to for HTTP transport",
    ),
    port: int = typer.Option(
        8765,
        "--port",
        help="Port to bind to for HTTP transport",
    ),
    path: str = typer.Option(
        "/mcp",
        "--path",
        help="Path for streamable-http transport",
    ),
):
    """Start MCP server exposing agent YAML with specified transport."""
    try:
        for directory in directories:
            if not os.path.isdir(directory):
                err_console.print(f"[red]Error: {directory} is not a directory[/red]")
                sys.exit(1)

        valid_transports = ["stdio", "streamable-http"]
        if transport not in valid_transports:
            err_console.print(f"[red]Error: Invalid transport '{transport}'. Must be one of: {', '.join(valid_transports)}[/red]")
            sys.exit(1)

        run_server(
            directories=directories,
            clean_commands=clean_commands,
            transport=transport,
            host=host,
            port=port,
            path=path,
        )

    except Exception as e:
        err_console.print(f"[red]Error starting server: {str(e)}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    app()
