"""
Customer store. Pure Python, no CLI imports.

Keeps the customer list in memory, in insertion order, and rewrites the
whole backing file after every change. Lookups are linear scans; the
collection is small and single-user.

Usage:
    store = CustomerStore()          # storage.customers_file from config.yaml
    store.load()
    customer = Customer("Jane", "Doe", "jane@x.com", "+12345678901")
    if store.add(customer):
        store.add_interaction(customer.customer_id, "Meeting", "01/02/2023")
"""

from pathlib import Path
from typing import Iterator, List, Optional, Union

from insurapro.core import CRM_PATHS, get_logger
from insurapro.core.paths import ensure_directory, resolve_customers_file
from insurapro.customers.codec import decode_customer, encode_lines
from insurapro.customers.models import Customer, Interaction

logger = get_logger("insurapro.customers.store")

EDITABLE_FIELDS = ("first_name", "last_name", "email", "phone")


class CustomerStore:
    """In-memory customer collection persisted to a single flat file."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        encoding: Optional[str] = None,
    ):
        self.path = resolve_customers_file(path)
        self.encoding = encoding or CRM_PATHS.encoding
        self.next_customer_id = 1
        self._customers: List[Customer] = []

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self._customers))

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> "CustomerStore":
        """
        Read the backing file from the start, replacing the in-memory list.

        A missing file leaves the store empty. The header line is skipped
        without checking its content, and lines that cannot be decoded are
        skipped with a warning.
        """
        self._customers = []
        self.next_customer_id = 1

        if not self.path.exists():
            logger.info("No customer file at %s, starting empty", self.path)
            return self

        with open(self.path, "r", encoding=self.encoding, newline="") as f:
            header = f.readline()
            if header:
                logger.debug("Header: %s", header.rstrip("\r\n"))

            for line_no, line in enumerate(f, start=2):
                if not line.strip():
                    continue
                try:
                    customer = decode_customer(line)
                except ValueError as exc:
                    logger.warning("Skipping line %d of %s: %s", line_no, self.path, exc)
                    continue
                self._customers.append(customer)
                self.next_customer_id = max(self.next_customer_id, customer.customer_id + 1)

        logger.info("Loaded %d customers from %s", len(self._customers), self.path)
        return self

    def save(self) -> None:
        """Truncate and rewrite the backing file: header plus one line per customer."""
        ensure_directory(self.path.parent)
        with open(self.path, "w", encoding=self.encoding, newline="\n") as f:
            for line in encode_lines(self._customers):
                f.write(line + "\n")
        logger.info("Saved %d customers to %s", len(self._customers), self.path)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def all(self) -> List[Customer]:
        """All customers in insertion order."""
        return list(self._customers)

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        for customer in self._customers:
            if customer.customer_id == customer_id:
                return customer
        return None

    def find_by_name(self, name: str) -> List[Customer]:
        """Customers whose first or last name equals *name* exactly."""
        return [c for c in self._customers if c.matches_name(name)]

    def exists(self, first_name: str, last_name: str) -> bool:
        """True if a customer with this exact (first, last) pair is stored."""
        return any(
            c.first_name == first_name and c.last_name == last_name
            for c in self._customers
        )

    # -------------------------------------------------------------------------
    # Mutations (each one rewrites the file)
    # -------------------------------------------------------------------------

    def add(self, customer: Customer) -> bool:
        """
        Add a new customer and assign its ID.

        Returns:
            False if a customer with the same first and last name already
            exists (nothing changes and no ID is used), True otherwise
        """
        if self.exists(customer.first_name, customer.last_name):
            logger.info("Duplicate customer rejected: %s", customer.full_name)
            return False

        customer.customer_id = self.next_customer_id
        self.next_customer_id += 1
        self._customers.append(customer)
        self.save()
        logger.info("Added customer %d: %s", customer.customer_id, customer.full_name)
        return True

    def modify(self, customer: Customer, **fields) -> bool:
        """
        Partial update of a customer's contact fields.

        Only first_name, last_name, email and phone are accepted; None
        values are ignored. New values are stored as given.
        """
        updates = {
            k: v for k, v in fields.items()
            if k in EDITABLE_FIELDS and v is not None
        }
        if not updates:
            return False

        for key, value in updates.items():
            setattr(customer, key, value)
        self.save()
        logger.info("Updated customer %d: %s", customer.customer_id, ", ".join(updates))
        return True

    def delete(self, customer: Customer) -> bool:
        """Remove a customer (matched by ID)."""
        remaining = [c for c in self._customers if c != customer]
        if len(remaining) == len(self._customers):
            return False

        self._customers = remaining
        self.save()
        logger.info("Deleted customer %d", customer.customer_id)
        return True

    def add_interaction(self, customer_id: int, interaction_type: str, date: str) -> bool:
        """Append an interaction to a customer's history. False if the ID is unknown."""
        customer = self.find_by_id(customer_id)
        if customer is None:
            return False

        customer.interactions.append(Interaction(interaction_type, date))
        self.save()
        logger.info("Added %s interaction to customer %d", interaction_type, customer_id)
        return True
