"""
Customer CLI commands.

Usage:
    insurapro customers list [--format json]
    insurapro customers search <name>
    insurapro customers add --first-name Jane --last-name Doe --email jane@x.com --phone +12345678901
    insurapro customers add-interaction <id> <type> <date>
    insurapro customers interactions <id>
    insurapro customers delete <id>
"""

from pathlib import Path
from typing import Optional

import typer

from insurapro.core.output import OutputFormat

app = typer.Typer(no_args_is_help=True)

FILE_HELP = "Customer file (default: storage.customers_file in config.yaml)"


def _open_store(ctx: typer.Context, file: Optional[Path]):
    """Load the store from --file, the top-level --file, or config."""
    from insurapro.customers.store import CustomerStore

    if file is None:
        root = ctx.find_root().obj or {}
        file = root.get("file")
    return CustomerStore(file).load()


@app.command("list")
def list_customers(
    ctx: typer.Context,
    fmt: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", help="Output format"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """List all customers with their interactions."""
    from insurapro.core.output import format_records
    from insurapro.customers.display import customer_record, format_table

    store = _open_store(ctx, file)
    customers = store.all()

    if not customers and fmt == OutputFormat.HUMAN:
        typer.echo("No customers found.")
        raise typer.Exit()

    records = [customer_record(c) for c in customers]
    typer.echo(format_records(records, human=lambda _: format_table(customers), fmt=fmt))


@app.command("search")
def search(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Exact first or last name"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Find customers by exact first or last name."""
    from insurapro.customers.display import format_search_results

    store = _open_store(ctx, file)
    matches = store.find_by_name(name)
    typer.echo(format_search_results(matches))
    if not matches:
        raise typer.Exit(1)


@app.command("add")
def add(
    ctx: typer.Context,
    first_name: str = typer.Option(..., "--first-name", help="First name"),
    last_name: str = typer.Option(..., "--last-name", help="Last name"),
    email: str = typer.Option(..., "--email", help="Email address"),
    phone: str = typer.Option(..., "--phone", help="Phone (10-15 digits, optional +)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Add a customer after validating every field."""
    from insurapro.customers.models import Customer
    from insurapro.customers.validation import validate_customer_fields

    errors = validate_customer_fields(first_name, last_name, email, phone)
    if errors:
        typer.echo("Customer NOT added:")
        for err in errors:
            typer.echo(f"  - {err}")
        raise typer.Exit(1)

    store = _open_store(ctx, file)
    customer = Customer(first_name, last_name, email, phone)
    if not store.add(customer):
        typer.echo(f"Customer already exists: {customer.full_name}")
        raise typer.Exit(1)

    typer.echo(f"Added: {customer.full_name} (ID {customer.customer_id})")


@app.command("add-interaction")
def add_interaction(
    ctx: typer.Context,
    customer_id: int = typer.Argument(..., help="Customer ID"),
    interaction_type: str = typer.Argument(..., help="Meeting, Contact, Contract..."),
    date: str = typer.Argument(..., help="Date (dd/mm/yyyy)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Record an interaction with a customer."""
    store = _open_store(ctx, file)
    if not store.add_interaction(customer_id, interaction_type, date):
        typer.echo(f"Customer {customer_id} not found.")
        raise typer.Exit(1)

    typer.echo(f"Interaction added to customer {customer_id}.")


@app.command("interactions")
def interactions(
    ctx: typer.Context,
    customer_id: int = typer.Argument(..., help="Customer ID"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Show a customer's interaction history."""
    from insurapro.customers.display import interaction_lines

    store = _open_store(ctx, file)
    customer = store.find_by_id(customer_id)
    if customer is None:
        typer.echo(f"Customer {customer_id} not found.")
        raise typer.Exit(1)

    typer.echo(f"{customer.full_name} (ID {customer.customer_id})")
    for line in interaction_lines(customer):
        typer.echo(f"  {line}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    customer_id: int = typer.Argument(..., help="Customer ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Delete a customer by ID."""
    store = _open_store(ctx, file)
    customer = store.find_by_id(customer_id)
    if customer is None:
        typer.echo(f"Customer {customer_id} not found.")
        raise typer.Exit(1)

    if not yes and not typer.confirm(f"Delete {customer.full_name} (ID {customer_id})?"):
        typer.echo("Cancelled.")
        raise typer.Exit()

    store.delete(customer)
    typer.echo(f"Deleted: {customer.full_name} (ID {customer_id})")
