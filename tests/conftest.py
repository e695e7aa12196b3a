"""
Shared test fixtures for InsuraPro.

Provides temporary customer files, loaded stores with seed customers, a
scripted prompt source for the menu, and a CLI runner.
"""

from typing import List

import pytest

from insurapro.customers.codec import HEADER
from insurapro.customers.models import Customer
from insurapro.customers.store import CustomerStore


class ScriptedPrompt:
    """PromptSource that replays canned replies and records everything shown."""

    def __init__(self, replies: List[str]):
        self.replies = list(replies)
        self.asked: List[str] = []
        self.output: List[str] = []

    def ask(self, text: str) -> str:
        self.asked.append(text)
        if not self.replies:
            raise AssertionError(f"No scripted reply left for prompt: {text!r}")
        return self.replies.pop(0)

    def say(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def scripted():
    """Factory: scripted("1", "Jane", ...) -> ScriptedPrompt."""

    def _make(*replies: str) -> ScriptedPrompt:
        return ScriptedPrompt(list(replies))

    return _make


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def customers_file(tmp_path):
    """Path to a not-yet-existing customer file in a temp directory."""
    return tmp_path / "customers.csv"


@pytest.fixture
def store(customers_file):
    """Empty store backed by customers_file."""
    return CustomerStore(customers_file).load()


@pytest.fixture
def seeded_file(customers_file):
    """Customer file with three customers; two share the last name Doe."""
    customers_file.write_text(
        "\n".join([
            HEADER,
            "Jane,Doe,jane@x.com,+12345678901,3,Type:No Interaction,Date:N/A",
            "John,Doe,john@x.com,12345678901,7,Type:Meeting,Date:01/02/2023|Type:Contract,Date:05/03/2023",
            "Mary,O'Neil,mary.o@agency.co.uk,5551234567,2,Type:Contact,Date:10/10/2022",
        ]) + "\n",
        encoding="utf-8",
    )
    return customers_file


@pytest.fixture
def seeded_store(seeded_file):
    """Store loaded from seeded_file."""
    return CustomerStore(seeded_file).load()


@pytest.fixture
def jane():
    """An unsaved customer."""
    return Customer("Jane", "Doe", "jane@x.com", "+12345678901")
