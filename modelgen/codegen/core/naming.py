"""
Naming utilities for accessor generation.

Turns raw column names into the name fragments used for getters, setters
and setter parameters.
"""

import re

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _capitalize(fragment: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    if not fragment:
        return fragment
    return fragment[0].upper() + fragment[1:]


def to_pascal_case(raw_name: str) -> str:
    """
    Convert a raw column name to PascalCase.

    The name is split on underscores and the first character of every
    fragment is upper-cased. Empty fragments (from leading, trailing or
    repeated underscores) disappear.

    Args:
        raw_name: Column name as reported by the database

    Returns:
        PascalCase name fragment, '' for ''
    """
    return "".join(_capitalize(part) for part in raw_name.split("_"))


def to_camel_case(raw_name: str) -> str:
    """
    Convert a raw column name to the setter parameter name.

    Identical to ``to_pascal_case``: the first fragment is capitalized too.
    Generated setter parameters depend on this, so it must not be changed
    to a true camelCase.
    """
    return to_pascal_case(raw_name)


def is_valid_identifier(name: str) -> bool:
    """Check that a name is usable as an identifier in the target languages."""
    return bool(_IDENTIFIER.match(name))
