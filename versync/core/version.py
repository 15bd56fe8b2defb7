import re
from typing import Optional

from versync.core.exceptions import InvalidVersionError

# ASCII digits only; a plain str pattern would let \d match fullwidth or Arabic-Indic digits
VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$", re.ASCII)


def is_valid_version(value: Optional[str]) -> bool:
    # fullmatch so that a trailing newline is rejected too ("$" alone would accept it)
    return bool(value) and VERSION_PATTERN.fullmatch(value) is not None


def validate_version(value: Optional[str]) -> str:
    """Return the version unchanged, or raise InvalidVersionError if it is absent or malformed."""
    if not is_valid_version(value):
        raise InvalidVersionError(value)
    return value
