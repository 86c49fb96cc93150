"""Password strength validation utilities."""

import re


def validate_password_strength(password: str, min_length: int = 8) -> tuple[bool, str]:
    """
    Validate password meets the signup requirements.

    Requirements:
    - At least ``min_length`` characters
    - At least one letter
    - At least one digit

    Returns:
        (is_valid, error_message)
    """
    if len(password) < min_length:
        return False, f"Password must be at least {min_length} characters long"

    if not re.search(r"[A-Za-z]", password):
        return False, "Password must contain at least one letter"

    if not re.search(r"\d", password):
        return False, "Password must contain at least one digit"

    return True, ""
