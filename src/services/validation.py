"""Declarative request validation.

A rule set maps each field to an ordered list of rules. ``validate`` runs every
rule of every field and collects all violations instead of stopping at the first.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email

from domain.model.errors import FieldError


@dataclass(frozen=True)
class Rule:
    check: Callable[[str], bool]
    message: str


RuleSet = dict[str, list[Rule]]


def required(message: str) -> Rule:
    return Rule(lambda value: value != "", message)


def min_length(length: int, message: str) -> Rule:
    return Rule(lambda value: len(value) >= length, message)


def matches(pattern: str, message: str) -> Rule:
    compiled = re.compile(pattern)
    return Rule(lambda value: compiled.search(value) is not None, message)


def _is_email(value: str) -> bool:
    try:
        # grammar only: no DNS lookup, reserved test domains allowed
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def is_email(message: str) -> Rule:
    return Rule(_is_email, message)


REGISTER_RULES: RuleSet = {
    "name": [required("Name is required")],
    "email": [is_email("Invalid email format")],
    "password": [
        min_length(8, "Password must be at least 8 characters"),
        matches(r"[A-Z]", "Password must contain at least one uppercase letter"),
        matches(r"[0-9]", "Password must contain at least one number"),
    ],
}

# Strength is enforced at registration only; login just needs a password to compare.
LOGIN_RULES: RuleSet = {
    "email": [is_email("Invalid email format")],
    "password": [required("Password is required")],
}


def validate(body: Any, rules: RuleSet) -> list[FieldError]:
    """Return every violated rule, in declaration order. Empty list means valid.

    A body that is not a mapping is treated as empty, and a value that is not a
    string fails every rule of its field.
    """
    if not isinstance(body, dict):
        body = {}

    errors: list[FieldError] = []
    for field, field_rules in rules.items():
        value = body.get(field)
        for rule in field_rules:
            if not isinstance(value, str) or not rule.check(value):
                errors.append(FieldError(field=field, message=rule.message))
    return errors
