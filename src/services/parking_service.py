"""Parking service for saving people and selling parking passes."""
import logging
from datetime import date
from typing import Optional, Tuple

from src.models.person import Person
from src.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

EXAMPLE_NAME = "John Doe"
EXAMPLE_DATE_OF_BIRTH = date(2000, 1, 1)
EXAMPLE_EMAIL_ADDRESS = "john@gmail.com"

HAS_PASS_MESSAGE = "This person has a parking pass!"
NO_PASS_MESSAGE = "This person does not have a parking pass!"
HAS_PASS_COLOR = "#00ff00"
NO_PASS_COLOR = "#ff0000"

NO_PERSON_MESSAGE = "No person has been saved yet."
ALREADY_PURCHASED_MESSAGE = "This person already had a parking pass! Don't waste my money!"
PURCHASED_MESSAGE = "Parking pass purchased!"


def save_person(name: str, date_of_birth: Optional[date], email_address: str) -> Tuple[Optional[Person], str]:
    """
    Create a person from raw form input.

    Args:
        name: Name as typed
        date_of_birth: Selected date, or None if nothing was picked
        email_address: Email address as typed

    Returns:
        Tuple of (person: Optional[Person], message: str)
        - (person, "<summary> saved successfully!") on success
        - (None, "Entered data invalid: <reason>") on validation failure
    """
    try:
        person = Person(name, date_of_birth, email_address)
    except InvalidInputError as e:
        logger.warning("Rejected person input (%s): %s", e.field, e)
        return None, f"Entered data invalid: {e}"

    logger.info("Saved person: %s", person.describe())
    return person, f"{person.describe()} saved successfully!"


def load_example_person() -> Person:
    """Build the example person used to prefill the form."""
    person = Person(EXAMPLE_NAME, EXAMPLE_DATE_OF_BIRTH, EXAMPLE_EMAIL_ADDRESS)
    logger.info("Loaded example person: %s", person.describe())
    return person


def purchase_parking_pass(person: Optional[Person]) -> Tuple[bool, str]:
    """
    Purchase a parking pass for the current person.

    Args:
        person: Person currently shown in the form, or None

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "Parking pass purchased!") on success
        - (False, "No person has been saved yet.") if there is no person
        - (False, "This person already had a parking pass! ...") if already owned
    """
    if person is None:
        return False, NO_PERSON_MESSAGE

    if not person.purchase_parking_pass():
        logger.warning("Duplicate parking pass purchase for %s", person.name)
        return False, ALREADY_PURCHASED_MESSAGE

    logger.info("Parking pass purchased for %s", person.name)
    return True, PURCHASED_MESSAGE


def get_parking_pass_status(person: Person) -> Tuple[str, str]:
    """
    Get the status label for a person's parking pass.

    Returns:
        Tuple of (message: str, color: str)
    """
    if person.has_parking_pass:
        return HAS_PASS_MESSAGE, HAS_PASS_COLOR
    return NO_PASS_MESSAGE, NO_PASS_COLOR
