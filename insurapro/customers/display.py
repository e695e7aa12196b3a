"""
Fixed-width rendering of customers and their interactions.
"""

from typing import Iterable, List, Sequence

from insurapro.customers.models import PLACEHOLDER_TYPE, Customer, Interaction

# (label, width); all columns right-aligned
COLUMNS = (
    ("ID", 10),
    ("First Name", 20),
    ("Last Name", 20),
    ("Email", 30),
    ("Phone", 15),
    ("Interactions", 50),
)

LIST_PLACEHOLDER = "No Interaction, Date: N/A"
SEARCH_PLACEHOLDER = "Type: No Interaction, Date: N/A"
NO_MATCHES = "No customers found!"


def format_interaction(interaction: Interaction) -> str:
    return f"Type: {interaction.type}, Date: {interaction.date}"


def interaction_summary(customer: Customer, placeholder: str = LIST_PLACEHOLDER) -> str:
    """
    Interactions joined with ' | ', or *placeholder* if none.

    Any interaction typed "No Interaction" is left out here, whatever its
    date; storage only drops the exact placeholder pair.
    """
    shown = [i for i in customer.interactions if i.type != PLACEHOLDER_TYPE]
    if not shown:
        return placeholder
    return " | ".join(format_interaction(i) for i in shown)


def _row(values: Sequence[str]) -> str:
    return "".join(f"{value:>{width}}" for value, (_, width) in zip(values, COLUMNS))


def header_row() -> str:
    return _row([label for label, _ in COLUMNS])


def customer_row(customer: Customer, placeholder: str = LIST_PLACEHOLDER) -> str:
    return _row([
        str(customer.customer_id),
        customer.first_name,
        customer.last_name,
        customer.email,
        customer.phone,
        interaction_summary(customer, placeholder),
    ])


def format_table(customers: Iterable[Customer], placeholder: str = LIST_PLACEHOLDER) -> str:
    """Header row plus one row per customer."""
    lines = [header_row()]
    lines.extend(customer_row(c, placeholder) for c in customers)
    return "\n".join(lines)


def format_search_results(matches: Sequence[Customer]) -> str:
    """Table of search matches, or the header followed by the no-match message."""
    if not matches:
        return "\n".join([header_row(), NO_MATCHES])
    return format_table(matches, placeholder=SEARCH_PLACEHOLDER)


def interaction_lines(customer: Customer) -> List[str]:
    """One line per entry of the customer's interaction history."""
    return [format_interaction(i) for i in customer.interaction_history]


def choice_lines(matches: Sequence[Customer]) -> List[str]:
    """Numbered '1. First Last' lines for disambiguating a name match."""
    return [f"{i}. {c.full_name}" for i, c in enumerate(matches, start=1)]


def customer_record(customer: Customer) -> dict:
    """Plain dict for JSON / markdown output."""
    return {
        "customer_id": customer.customer_id,
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "email": customer.email,
        "phone": customer.phone,
        "interactions": [
            {"type": i.type, "date": i.date} for i in customer.recorded_interactions
        ],
    }
