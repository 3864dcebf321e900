"""Expected-name generation and validation: {Prefix}{TypeName}."""

from __future__ import annotations


def capitalize_type_name(type_name: str) -> str:
    """Uppercase the first letter, keep the rest: "orderForClient" -> "OrderForClient"."""
    return type_name[:1].upper() + type_name[1:]


def generate_expected_name(prefix: str, type_name: str) -> str:
    """e.g. ("UsersUserCard", "User") -> "UsersUserCardUser"."""
    return prefix + capitalize_type_name(type_name)


def is_valid_name(actual_name: str, prefix: str, type_name: str) -> bool:
    """Whether *actual_name* starts with the expected name.

    Any trailing suffix is accepted, so "UsersUserCardUserWithDetails" is a
    valid name for prefix "UsersUserCard" and type "User".
    """
    return actual_name.startswith(generate_expected_name(prefix, type_name))
