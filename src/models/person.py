"""Person data model for parking pass registration."""
from dataclasses import dataclass, field
from datetime import date

from src.utils.exceptions import InvalidInputError
from src.utils.validation import (
    validate_date_of_birth,
    validate_email_address,
    validate_name,
)


@dataclass(frozen=True)
class Person:
    """Individual registering for a parking pass."""

    name: str
    date_of_birth: date
    email_address: str
    _has_parking_pass: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate person data."""
        # Order matters: only the first failing field is reported
        checks = (
            ("name", validate_name, self.name),
            ("date_of_birth", validate_date_of_birth, self.date_of_birth),
            ("email_address", validate_email_address, self.email_address),
        )
        for field_name, validator, value in checks:
            is_valid, error_msg = validator(value)
            if not is_valid:
                raise InvalidInputError(error_msg, field_name)

    @property
    def has_parking_pass(self) -> bool:
        """Check if the person holds a parking pass."""
        return self._has_parking_pass

    def purchase_parking_pass(self) -> bool:
        """
        Purchase a parking pass for this person.

        Returns:
            True if the pass was purchased, False if one was already held
        """
        if self._has_parking_pass:
            return False
        object.__setattr__(self, "_has_parking_pass", True)
        return True

    def describe(self) -> str:
        """Get a one-line summary for display and logging."""
        return (
            f"Name: {self.name}, "
            f"Local Date: {self.date_of_birth.isoformat()}, "
            f"Email: {self.email_address}"
        )

    def __str__(self) -> str:
        return self.describe()
