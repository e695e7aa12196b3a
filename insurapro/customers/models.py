"""
Customer and interaction records.

A customer with nothing recorded carries an empty interaction list; the
"No Interaction" placeholder is produced on demand for display and storage
instead of being stored.
"""

from dataclasses import dataclass, field
from typing import List

PLACEHOLDER_TYPE = "No Interaction"
PLACEHOLDER_DATE = "N/A"


@dataclass(frozen=True)
class Interaction:
    """A single contact with a customer (meeting, call, contract...)."""
    type: str
    date: str  # conventionally dd/mm/yyyy, not enforced

    @property
    def is_placeholder(self) -> bool:
        return self.type == PLACEHOLDER_TYPE and self.date == PLACEHOLDER_DATE


NO_INTERACTION = Interaction(PLACEHOLDER_TYPE, PLACEHOLDER_DATE)


@dataclass(eq=False)
class Customer:
    """A customer record. Identity is the store-assigned customer_id."""
    first_name: str
    last_name: str
    email: str
    phone: str
    customer_id: int = 0
    interactions: List[Interaction] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.customer_id == other.customer_id

    def __hash__(self) -> int:
        return hash(self.customer_id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def recorded_interactions(self) -> List[Interaction]:
        """Interactions excluding the placeholder."""
        return [i for i in self.interactions if not i.is_placeholder]

    @property
    def interaction_history(self) -> List[Interaction]:
        """Recorded interactions, or just the placeholder when there are none."""
        return self.recorded_interactions or [NO_INTERACTION]

    def matches_name(self, name: str) -> bool:
        """Exact, case-sensitive match on first or last name."""
        return self.first_name == name or self.last_name == name
