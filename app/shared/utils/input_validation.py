# app/shared/utils/input_validation.py

import re
from typing import Iterable, Optional, Tuple


class InputValidator:
    """
    Validation of user input, complementing the Pydantic schemas.

    Every method returns a (valid, error_message) tuple.
    """

    # Length limits (match the column sizes)
    MAX_NAME_LENGTH = 100
    MAX_EMAIL_LENGTH = 256
    MAX_PHONE_LENGTH = 20

    # Largest value of a 32-bit INTEGER primary key
    MAX_ID = 2**31 - 1

    # Regex patterns
    EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
    # Digits, spaces, dashes, dots, parentheses and an optional leading +
    PHONE_PATTERN = re.compile(r'^\+?[0-9\s\-\.\(\)]{3,}$')

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a first or last name.

        Args:
            name: String to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not name or not name.strip():
            return False, "Name cannot be empty"

        if len(name.strip()) > cls.MAX_NAME_LENGTH:
            return False, f"Name is too long (maximum {cls.MAX_NAME_LENGTH} characters)"

        return True, None

    @classmethod
    def validate_email(cls, email: str) -> Tuple[bool, Optional[str]]:
        """
        Validate email format and length.

        Args:
            email: Email to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not email:
            return False, "Email cannot be empty"

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email is too long (maximum {cls.MAX_EMAIL_LENGTH} characters)"

        if not cls.EMAIL_PATTERN.match(email):
            return False, "Invalid email format"

        return True, None

    @classmethod
    def validate_phone(cls, phone: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a phone number.

        Args:
            phone: Phone number to validate

        Returns:
            Tuple (valid, error_message)
        """
        if len(phone) > cls.MAX_PHONE_LENGTH:
            return False, f"Phone number is too long (maximum {cls.MAX_PHONE_LENGTH} characters)"

        if not cls.PHONE_PATTERN.match(phone):
            return False, "Invalid phone number format"

        return True, None

    @classmethod
    def validate_ids(cls, ids: Iterable[int]) -> Tuple[bool, Optional[str]]:
        """
        Validate a list of entity IDs.

        Returns:
            Tuple (valid, error_message)
        """
        invalid = [value for value in ids if value <= 0 or value > cls.MAX_ID]
        if invalid:
            return False, f"IDs must be integers between 1 and {cls.MAX_ID}: {invalid}"

        return True, None
