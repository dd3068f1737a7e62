"""Password policy shared by signup, admin user creation and password change."""

import re

MIN_LENGTH = 8
MAX_LENGTH = 16

# At least one upper-case letter and one non-alphanumeric character, 8-16 long
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[^A-Za-z0-9]).{8,16}$")

PASSWORD_POLICY_MESSAGE = (
    "Password must be 8-16 chars and include at least one uppercase letter "
    "and one special character"
)


def satisfies_password_policy(password: str) -> bool:
    return bool(password) and PASSWORD_PATTERN.match(password) is not None
