# core/utils.py

"""
Repository for program-wide utilities.
"""

from typing import Any, Iterable


def require_all_present(owner: str, **fields: Any) -> None:
    """
    Checks that every keyword argument is present (not None).

    Args:
        owner (str): The name of the record being built, used in the error message.
        **fields: The field values keyed by field name.

    Raises:
        TypeError: Naming every absent field, if any field is None.
    """
    missing = [name for name, value in fields.items() if value is None]
    if missing:
        raise TypeError(f"{owner} is missing required fields: {', '.join(missing)}.")


def require_all_instances(
    owner: str, field: str, items: Iterable[Any], item_type: type
) -> frozenset:
    """
    Collects `items` into a frozenset, checking every element is an `item_type`.

    Raises:
        TypeError: If any element is of another type, e.g. a raw string in place of a value type.
    """
    collected = frozenset(items)
    strays = [item for item in collected if not isinstance(item, item_type)]
    if strays:
        raise TypeError(
            f"{owner} {field} must all be {item_type.__name__}, got {type(strays[0]).__name__}."
        )

    return collected
