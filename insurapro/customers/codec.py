"""
Customer record codec.

One customer per line, with the whole interaction history packed into the
trailing field:

    First,Last,email,phone,ID,Type:<t1>,Date:<d1>|Type:<t2>,Date:<d2>

Fields are not quoted. Names, email and phone never contain commas (see
insurapro.customers.validation), so the first five commas are always field
separators and everything after the ID belongs to the interactions blob.
"""

import re
from typing import Iterable, Iterator, List

from insurapro.core import get_logger
from insurapro.customers.models import Customer, Interaction, NO_INTERACTION

logger = get_logger("insurapro.customers.codec")

HEADER = "First Name,Last Name,Email,Phone,Customer ID,Interactions"

ENTRY_SEPARATOR = "|"
TYPE_MARKER = "Type:"
DATE_MARKER = "Date:"

# Leading integer of the ID field; the rest of the line follows it
_ID_PATTERN = re.compile(r"\s*(\d+)(.*)$", re.DOTALL)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def encode_interaction(interaction: Interaction) -> str:
    return f"{TYPE_MARKER}{interaction.type},{DATE_MARKER}{interaction.date}"


def encode_interactions(customer: Customer) -> str:
    """
    Encode the interactions field.

    The placeholder is written only when nothing has been recorded, so every
    line carries at least one Type:/Date: entry.
    """
    entries = customer.recorded_interactions or [NO_INTERACTION]
    return ENTRY_SEPARATOR.join(encode_interaction(i) for i in entries)


def encode_customer(customer: Customer) -> str:
    """Encode a customer as one line (no trailing newline)."""
    return ",".join([
        customer.first_name,
        customer.last_name,
        customer.email,
        customer.phone,
        str(customer.customer_id),
        encode_interactions(customer),
    ])


def encode_lines(customers: Iterable[Customer]) -> Iterator[str]:
    """Yield the header followed by one line per customer."""
    yield HEADER
    for customer in customers:
        yield encode_customer(customer)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_interaction(piece: str) -> Interaction:
    """
    Decode one 'Type:<t>,Date:<d>' entry.

    The type is the text between 'Type:' and the following ',Date:'; the
    date is everything after 'Date:'.

    Raises:
        ValueError: if either marker is missing
    """
    type_pos = piece.find(TYPE_MARKER)
    if type_pos == -1:
        raise ValueError(f"Missing {TYPE_MARKER!r} in {piece!r}")

    type_start = type_pos + len(TYPE_MARKER)
    date_pos = piece.find(DATE_MARKER, type_start)
    if date_pos == -1:
        raise ValueError(f"Missing {DATE_MARKER!r} in {piece!r}")

    type_end = date_pos - 1 if piece[date_pos - 1] == "," else date_pos
    return Interaction(
        type=piece[type_start:type_end],
        date=piece[date_pos + len(DATE_MARKER):],
    )


def decode_interactions(blob: str) -> List[Interaction]:
    """
    Decode the interactions field.

    Malformed entries are dropped and the placeholder decodes to nothing.
    """
    interactions: List[Interaction] = []
    for piece in blob.split(ENTRY_SEPARATOR):
        if not piece:
            continue
        try:
            interaction = decode_interaction(piece)
        except ValueError as exc:
            logger.debug("Dropping interaction fragment: %s", exc)
            continue
        if not interaction.is_placeholder:
            interactions.append(interaction)
    return interactions


def decode_customer(line: str) -> Customer:
    """
    Decode one line into a Customer (ID taken verbatim).

    Raises:
        ValueError: fewer than five fields, or no leading integer ID
    """
    line = line.rstrip("\r\n")
    parts = line.split(",", 4)
    if len(parts) < 5:
        raise ValueError(f"Expected at least 5 fields, got {len(parts)}: {line!r}")

    first_name, last_name, email, phone, rest = parts
    m = _ID_PATTERN.match(rest)
    if not m:
        raise ValueError(f"Cannot parse customer ID: {line!r}")

    return Customer(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        customer_id=int(m.group(1)),
        interactions=decode_interactions(m.group(2).lstrip(", ")),
    )
