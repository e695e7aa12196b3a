"""Tests for customer CLI commands via Typer CliRunner."""

import json

from insurapro.customers.cli import app as customers_app
from insurapro.customers.store import CustomerStore


def test_list(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["list", "--file", str(seeded_file)])
    assert result.exit_code == 0, result.output
    assert "First Name" in result.output
    assert "john@x.com" in result.output
    assert "Type: Meeting, Date: 01/02/2023 | Type: Contract, Date: 05/03/2023" in result.output


def test_list_empty(cli_runner, customers_file):
    result = cli_runner.invoke(customers_app, ["list", "--file", str(customers_file)])
    assert result.exit_code == 0
    assert "No customers found." in result.output


def test_list_json(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["list", "--format", "json", "--file", str(seeded_file)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [row["customer_id"] for row in data] == [3, 7, 2]
    assert data[0]["interactions"] == []


def test_list_markdown(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["list", "--format", "markdown", "-f", str(seeded_file)])
    assert result.exit_code == 0, result.output
    assert "| Customer Id |" in result.output


def test_search(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["search", "Doe", "--file", str(seeded_file)])
    assert result.exit_code == 0
    assert "jane@x.com" in result.output


def test_search_no_match(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["search", "Zed", "--file", str(seeded_file)])
    assert result.exit_code == 1
    assert "No customers found!" in result.output


def test_add(cli_runner, customers_file):
    result = cli_runner.invoke(customers_app, [
        "add", "--first-name", "Jane", "--last-name", "Doe",
        "--email", "jane@x.com", "--phone", "+12345678901",
        "--file", str(customers_file),
    ])
    assert result.exit_code == 0, result.output
    assert "ID 1" in result.output
    assert CustomerStore(customers_file).load().find_by_id(1).email == "jane@x.com"


def test_add_invalid(cli_runner, customers_file):
    result = cli_runner.invoke(customers_app, [
        "add", "--first-name", "J4ne", "--last-name", "Doe",
        "--email", "jane@x.com", "--phone", "12",
        "--file", str(customers_file),
    ])
    assert result.exit_code == 1
    assert "NOT added" in result.output
    assert not customers_file.exists()


def test_add_duplicate(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, [
        "add", "--first-name", "Jane", "--last-name", "Doe",
        "--email", "other@x.com", "--phone", "1234567890",
        "--file", str(seeded_file),
    ])
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_add_interaction(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, [
        "add-interaction", "3", "Meeting", "01/02/2023", "--file", str(seeded_file),
    ])
    assert result.exit_code == 0, result.output
    line = seeded_file.read_text(encoding="utf-8").splitlines()[1]
    assert line.endswith(",3,Type:Meeting,Date:01/02/2023")


def test_add_interaction_unknown(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, [
        "add-interaction", "99", "Meeting", "01/02/2023", "--file", str(seeded_file),
    ])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_interactions(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["interactions", "7", "--file", str(seeded_file)])
    assert result.exit_code == 0
    assert "Type: Contract, Date: 05/03/2023" in result.output


def test_delete(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["delete", "7", "--yes", "--file", str(seeded_file)])
    assert result.exit_code == 0, result.output
    assert CustomerStore(seeded_file).load().find_by_id(7) is None


def test_delete_cancelled(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["delete", "7", "--file", str(seeded_file)], input="n\n")
    assert result.exit_code == 0
    assert "Cancelled." in result.output
    assert CustomerStore(seeded_file).load().find_by_id(7) is not None


def test_delete_unknown(cli_runner, seeded_file):
    result = cli_runner.invoke(customers_app, ["delete", "99", "--yes", "--file", str(seeded_file)])
    assert result.exit_code == 1
