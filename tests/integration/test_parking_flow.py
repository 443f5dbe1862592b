"""Integration tests for the save and purchase flow."""
from datetime import date

from src.services.parking_service import (
    ALREADY_PURCHASED_MESSAGE,
    HAS_PASS_MESSAGE,
    NO_PASS_MESSAGE,
    get_parking_pass_status,
    load_example_person,
    purchase_parking_pass,
    save_person,
)


class TestParkingFlow:
    """Integration tests for the complete parking pass flow."""

    def test_save_then_buy_pass_twice(self):
        """Saved person can buy exactly one pass."""
        # Step 1: save
        person, _ = save_person("Jane Doe", date(1995, 6, 30), "jane@example.com")
        assert get_parking_pass_status(person)[0] == NO_PASS_MESSAGE

        # Step 2: first purchase
        success, _ = purchase_parking_pass(person)
        assert success is True
        assert get_parking_pass_status(person)[0] == HAS_PASS_MESSAGE

        # Step 3: second purchase is rejected
        success, message = purchase_parking_pass(person)
        assert success is False
        assert message == ALREADY_PURCHASED_MESSAGE
        assert get_parking_pass_status(person)[0] == HAS_PASS_MESSAGE

    def test_invalid_save_keeps_current_person(self):
        """Failed save should not replace or alter the current person."""
        current = load_example_person()
        purchase_parking_pass(current)

        replacement, _ = save_person("John Doe", date(2000, 1, 1), "not-an-email")

        assert replacement is None
        assert current.has_parking_pass is True

    def test_new_person_replaces_pass_state(self):
        """Saving a new person starts over without a pass."""
        first = load_example_person()
        purchase_parking_pass(first)

        second, _ = save_person(first.name, first.date_of_birth, first.email_address)

        assert second.has_parking_pass is False
