"""Main CLI application using Typer."""
import asyncio
import json
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from ..actions import compose_action_prompt
from ..components import UIComponentNode
from ..forms import FieldState
from .providers import get_agent_client, get_connection_settings, get_log_level

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="genui",
    help="Generative UI conversation engine with a terminal renderer",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


def _add_branch(parent: Tree, node: UIComponentNode) -> None:
    props = ", ".join(f"{k}={v!r}" for k, v in node.props.items())
    tag = node.type if node.kind.value != "unknown" else f"{node.type} [yellow](unknown)[/yellow]"
    branch = parent.add(f"[bold cyan]{tag}[/bold cyan] [dim]{props}[/dim]")
    for child in node.children or []:
        _add_branch(branch, child)


def build_tree(node: UIComponentNode) -> Tree:
    """Rich tree view of a UI component tree."""
    root = Tree("[bold]UI[/bold]")
    _add_branch(root, node)
    return root


@app.command()
def chat(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    ),
    connect: bool = typer.Option(
        False,
        "--connect/--no-connect",
        help="Connect at startup using AZURE_OPENAI_* environment variables"
    ),
):
    """Start an interactive generative UI session in the terminal."""
    from ..ui import run_textual_tui

    asyncio.run(run_textual_tui(
        client=get_agent_client(),
        log_level=log_level or get_log_level(),
        initial_settings=get_connection_settings(),
        auto_connect=connect,
    ))


@app.command()
def inspect(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON file holding a UI component tree"
    ),
):
    """Validate a UI tree file and show its structure and canonical JSON."""
    try:
        node = UIComponentNode.from_json(file.read_text(encoding="utf-8"))
    except ValidationError as e:
        console.print(f"[red]Error: not a valid UI tree: {e.error_count()} problem(s)[/red]")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "<root>"
            console.print(f"[red]  {location}: {error['msg']}[/red]")
        raise typer.Exit(code=1)
    except UnicodeDecodeError:
        console.print(f"[red]Error: not UTF-8 text: {file}[/red]")
        raise typer.Exit(code=1)

    console.print(build_tree(node))
    fields = node.field_ids()
    if fields:
        console.print(f"[dim]Fields: {', '.join(fields)}[/dim]")
    console.print(Panel(node.to_canonical_json(), title="Canonical JSON", border_style="cyan"))


@app.command()
def compose(
    action_id: str = typer.Argument(..., help="Action identifier, e.g. submit_order"),
    field: list[str] = typer.Option(
        [],
        "--field",
        "-f",
        help="Submitted field as id=value (repeatable)"
    ),
    invalid: list[str] = typer.Option(
        [],
        "--invalid",
        "-i",
        help="Mark a field id as failing validation (repeatable)"
    ),
):
    """Show the prompt and display text an action would produce."""
    form_data: dict[str, FieldState] = {}
    for item in field:
        if "=" not in item:
            console.print(f"[red]Error: expected id=value, got {item!r}[/red]")
            raise typer.Exit(code=1)
        field_id, value = item.split("=", 1)
        form_data[field_id] = FieldState(id=field_id, value=value, is_valid=field_id not in invalid)

    composed = compose_action_prompt(action_id, form_data)
    console.print(Panel(composed.display, title="Display", border_style="green"))
    console.print(Panel(composed.prompt, title="Prompt", border_style="magenta"))
    console.print_json(json.dumps(composed.model_dump()))


if __name__ == "__main__":
    app()
