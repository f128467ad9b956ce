# core/formatters.py

# pure text helpers for record summaries
# must never import from models!

from typing import Any, Iterable


def format_labeled_fields(head: Any, fields: list[tuple[str, Any]]) -> str:
    """
    Joins a leading value and labelled fields into a one-line summary.

    Args:
        head (Any): The value shown first, without a label (usually the record name).
        fields (list[tuple[str, Any]]): Ordered (label, value) pairs.

    Returns:
        A string of the form "<head>; <label>: <value>; ...".
    """
    parts = [str(head)]
    parts.extend(f"{label}: {value}" for label, value in fields)

    return "; ".join(parts)


def format_tags(tags: Iterable[Any]) -> str:
    # sorted so that equal tag sets always render the same way
    return "".join(f"[{tag}]" for tag in sorted(str(t) for t in tags))
