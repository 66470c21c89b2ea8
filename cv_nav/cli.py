from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from .content import root
from .logging import setup_logging
from .settings import load_settings
from .tui.entries import Branch, Node

app = typer.Typer(
    add_completion=False,
    help="cv_nav: browse a résumé as nested terminal menus",
    rich_markup_mode="rich",
)
console = Console()
logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def render_error(title: str, cause: str, action: str | None = None) -> None:
    """Render a friendly error panel with 3-part structure."""
    content = f"[bold red]✗ {title}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {cause}\n"

    if action:
        content += f"\n[dim]→ {action}[/dim]"

    console.print(Panel.fit(content, border_style="red", title="Error"))


def _outline(node: Node, tree: Tree) -> Tree:
    for entry in node.entries:
        if isinstance(entry, Branch):
            child = entry.child()
            sub = tree.add(f"[bold]{entry.label}[/bold] [dim]{entry.summary}[/dim]")
            _outline(child, sub.add(f"[cyan]{child.title}[/cyan]"))
        else:
            tree.add(f"{entry.label}: [dim]{entry.text}[/dim]")
    return tree


def _interactive_menu() -> int:
    """Launch the full-screen navigator; returns its exit code."""
    from .tui.app import run_app

    settings = load_settings()
    log_file = setup_logging(settings)

    try:
        return run_app(settings)
    except KeyboardInterrupt:
        return 0
    except OSError as e:
        logger.exception("terminal I/O failure")
        render_error(
            "Could not start the navigator",
            str(e) or type(e).__name__,
            f"Run it from an interactive terminal. Details in {log_file}",
        )
        return 1


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]cv_nav[/bold]: an interactive résumé.

    [dim]Run without arguments to launch the navigator.[/dim]

    [bold]Keys:[/bold]
      ↑/k ↓/j     Move
      Enter       Open a section or show a long entry in full
      Esc         Back (quits at the top level)
      q, Ctrl+C   Quit
    """
    if ctx.invoked_subcommand is None:
        code = _interactive_menu()
        raise typer.Exit(code=code)


@app.command("outline", help="Print the whole résumé as a tree")
def outline():
    """Print every section without entering full-screen mode."""
    top = root()
    console.print(_outline(top, Tree(f"[bold cyan]{top.title}[/bold cyan]")))


def main():
    app()
