"""Tests for customer and interaction records."""

from insurapro.customers.models import Customer, Interaction, NO_INTERACTION


def test_placeholder_detection():
    assert NO_INTERACTION.is_placeholder
    assert Interaction("No Interaction", "N/A").is_placeholder
    assert not Interaction("No Interaction", "01/01/2020").is_placeholder
    assert not Interaction("Meeting", "N/A").is_placeholder


def test_new_customer_has_empty_interactions():
    c = Customer("Jane", "Doe", "jane@x.com", "+12345678901")
    assert c.interactions == []
    assert c.recorded_interactions == []
    assert c.interaction_history == [NO_INTERACTION]


def test_interaction_lists_not_shared():
    a = Customer("A", "B", "a@x.com", "1234567890")
    b = Customer("C", "D", "c@x.com", "1234567890")
    a.interactions.append(Interaction("Meeting", "x"))
    assert b.interactions == []


def test_equality_by_id_only():
    a = Customer("Jane", "Doe", "jane@x.com", "1234567890", customer_id=5)
    b = Customer("Other", "Person", "o@x.com", "0987654321", customer_id=5)
    c = Customer("Jane", "Doe", "jane@x.com", "1234567890", customer_id=6)
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_matches_name():
    c = Customer("Jane", "Doe", "jane@x.com", "1234567890")
    assert c.matches_name("Jane")
    assert c.matches_name("Doe")
    assert not c.matches_name("jane")
    assert not c.matches_name("Jane Doe")
