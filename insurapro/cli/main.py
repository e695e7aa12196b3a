"""
InsuraPro CLI - Main Entry Point

Unified Typer CLI. With no sub-command it starts the interactive menu.

Usage:
    insurapro [--file customers.csv]
    insurapro version
    insurapro customers [command]
"""

from pathlib import Path
from typing import Optional

import typer

import insurapro

app = typer.Typer(
    name="insurapro",
    help="InsuraPro Solutions customer relationship management.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Customer file (default: storage.customers_file in config.yaml)"
    ),
):
    """Run the interactive CRM menu when no command is given."""
    ctx.obj = {"file": file}
    if ctx.invoked_subcommand is not None:
        return

    from insurapro.customers.menu import run_menu

    run_menu(file)


@app.command()
def version():
    """Show InsuraPro version."""
    typer.echo(f"insurapro {insurapro.__version__}")


def _register_modules():
    """Register module CLI sub-apps."""
    from insurapro.customers.cli import app as customers_app

    app.add_typer(customers_app, name="customers", help="Customer records & interactions")


_register_modules()


if __name__ == "__main__":
    app()
