"""
Interactive CRM menu.

Numbered menu loop over a CustomerStore. Every reply is reduced to its
first whitespace-delimited token, so no field ever contains a space.

Usage:
    insurapro                       # default customer file
    insurapro --file other.csv
"""

from pathlib import Path
from typing import Callable, Dict, Optional, Union

from insurapro.core import get_logger
from insurapro.customers.display import (
    choice_lines,
    format_search_results,
    format_table,
    interaction_lines,
)
from insurapro.customers.models import Customer
from insurapro.customers.prompts import ConsolePrompt, PromptSource
from insurapro.customers.store import CustomerStore
from insurapro.customers.validation import (
    is_valid_email,
    is_valid_first_name,
    is_valid_last_name,
    is_valid_phone,
)

logger = get_logger("insurapro.customers.menu")

TITLE = "InsuraPro Solutions - CRM System Menu:"
RULE = "-" * 40

MENU_OPTIONS = [
    "Add Customer",
    "Display All Customers",
    "Search Customer",
    "Modify Customer",
    "Delete Customer",
    "Add Interaction",
    "Display Interactions",
    "Exit",
]
EXIT_CHOICE = len(MENU_OPTIONS)

NAME_HINT = "(blanks not allowed, use ' . - or _ instead)"

# (field, label) pairs in prompt order
CONTACT_FIELDS = [
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("email", "Email"),
    ("phone", "Phone"),
]


def first_token(reply: str) -> str:
    """First whitespace-delimited token of *reply* ('' if blank)."""
    parts = reply.split()
    return parts[0] if parts else ""


class CRMMenu:
    """Menu controller: prompts the user and drives the store."""

    def __init__(self, store: CustomerStore, prompt: Optional[PromptSource] = None):
        self.store = store
        self.prompt = prompt or ConsolePrompt()
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_customer,
            2: self.display_customers,
            3: self.search_customers,
            4: self.modify_customer,
            5: self.delete_customer,
            6: self.add_interaction,
            7: self.display_interactions,
            8: self.exit,
        }

    # -------------------------------------------------------------------------
    # Input helpers
    # -------------------------------------------------------------------------

    def _token(self, text: str) -> str:
        return first_token(self.prompt.ask(text))

    def _ask_valid(self, text: str, is_valid: Callable[[str], bool], error: str) -> str:
        """Re-prompt until *is_valid* accepts the reply."""
        while True:
            value = self._token(text)
            if is_valid(value):
                return value
            self.prompt.say(error)

    def _ask_int(self, text: str) -> Optional[int]:
        try:
            return int(self._token(text))
        except ValueError:
            return None

    def _choose_customer(self, name_text: str, choice_text: str) -> Optional[Customer]:
        """
        Find customers by first or last name and let the user pick one.

        Returns None (after telling the user) when nothing matches or the
        choice is out of range.
        """
        name = self._token(name_text)
        matches = self.store.find_by_name(name)
        if not matches:
            self.prompt.say("No customer found with that name.")
            return None

        self.prompt.say("Found the following customers:")
        for line in choice_lines(matches):
            self.prompt.say(line)

        choice = self._ask_int(f"{choice_text} (1 of {len(matches)}):")
        if choice is None or not 1 <= choice <= len(matches):
            self.prompt.say("Invalid choice!")
            return None
        return matches[choice - 1]

    # -------------------------------------------------------------------------
    # Menu loop
    # -------------------------------------------------------------------------

    def show_menu(self) -> None:
        self.prompt.say()
        self.prompt.say(RULE)
        self.prompt.say(TITLE)
        self.prompt.say(RULE)
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.prompt.say(f"{number}. {label}")

    def read_choice(self) -> int:
        """Prompt until an integer from 1 to 8 is entered."""
        while True:
            choice = self._ask_int(f"Enter your choice (from 1 to {EXIT_CHOICE}):")
            if choice is not None and 1 <= choice <= EXIT_CHOICE:
                return choice
            self.prompt.say(
                f"Invalid choice! Please enter a number between 1 and {EXIT_CHOICE}."
            )

    def run(self) -> None:
        while True:
            self.show_menu()
            choice = self.read_choice()
            self._actions[choice]()
            if choice == EXIT_CHOICE:
                break

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def add_customer(self) -> None:
        first_name = self._ask_valid(
            f"Enter First Name {NAME_HINT}:", is_valid_first_name, "Invalid first name format!"
        )
        last_name = self._ask_valid(
            f"Enter Last Name {NAME_HINT}:", is_valid_last_name, "Invalid last name format!"
        )
        email = self._ask_valid("Enter Email:", is_valid_email, "Invalid email format!")
        phone = self._ask_valid(
            "Enter Phone:",
            is_valid_phone,
            "Invalid phone number format! It should be 10-15 digits.",
        )

        customer = Customer(first_name, last_name, email, phone)
        if not self.store.add(customer):
            self.prompt.say("Customer already exists!")
            return
        self.prompt.say("Customer added successfully!")

    def display_customers(self) -> None:
        self.prompt.say(format_table(self.store.all()))

    def search_customers(self) -> None:
        name = self._token("Enter name to search (first name or last name):")
        self.prompt.say(format_search_results(self.store.find_by_name(name)))

    def modify_customer(self) -> None:
        customer = self._choose_customer(
            f"Enter first name or last name of the customer to modify {NAME_HINT}:",
            "Choose the correct index to modify the customer",
        )
        if customer is None:
            return

        answer = self._token(
            "Do you want to modify all fields (First Name, Last Name, Email, Phone)? (yes/no):"
        )
        updates: Dict[str, str] = {}
        # exactly "yes" / "y"; anything else means no
        if answer == "yes":
            for field, label in CONTACT_FIELDS:
                updates[field] = self._token(f"Enter new {label}:")
        else:
            for field, label in CONTACT_FIELDS:
                if self._token(f"Do you want to modify {label}? (y/n):") == "y":
                    updates[field] = self._token(f"Enter new {label}:")

        self.store.modify(customer, **updates)
        self.prompt.say("Customer details updated!")

    def delete_customer(self) -> None:
        customer = self._choose_customer(
            "Enter first name or last name of the customer to delete:",
            "Choose the index of the customer to delete",
        )
        if customer is None:
            return

        self.store.delete(customer)
        self.prompt.say("Customer deleted!")

    def add_interaction(self) -> None:
        customer_id = self._ask_int("Enter Customer ID to add Interaction:")
        interaction_type = self._token(
            "Enter Interaction Type (Meeting/Contact/Contract) - no blanks allowed:"
        )
        date = self._token("Enter Interaction Date (dd/mm/yyyy):")

        if customer_id is not None and self.store.add_interaction(customer_id, interaction_type, date):
            self.prompt.say("Interaction added!")
        else:
            self.prompt.say("Customer not found!")

    def display_interactions(self) -> None:
        customer_id = self._ask_int("Enter Customer ID to display interactions:")
        customer = self.store.find_by_id(customer_id) if customer_id is not None else None
        if customer is None:
            self.prompt.say("Customer not found!")
            return

        for line in interaction_lines(customer):
            self.prompt.say(line)

    def exit(self) -> None:
        self.prompt.say("Exiting CRM system. Goodbye!")


def run_menu(
    path: Optional[Union[str, Path]] = None,
    prompt: Optional[PromptSource] = None,
) -> CustomerStore:
    """Load the customer file and run the menu until the user exits."""
    store = CustomerStore(path).load()
    logger.info("Starting menu on %s (%d customers)", store.path, len(store))
    CRMMenu(store, prompt).run()
    return store
