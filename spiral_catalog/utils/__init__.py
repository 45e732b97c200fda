"""Small helpers shared by the routers."""

import re

_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_id(value: str) -> int:
    """
    Parse a record identifier taken from a URL path segment.

    Args:
        value: The raw path segment

    Returns:
        The identifier as an int

    Raises:
        ValueError: If the segment is not a plain base-10 integer
    """
    if not _INTEGER_RE.fullmatch(value or ""):
        raise ValueError(f"Invalid identifier: {value!r}")
    return int(value)
