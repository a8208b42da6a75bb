"""
Account name encoding

Account names are up to 13 characters packed 5 bits per character into a
uint64 (the 13th character gets the 4 remaining bits).
"""

import re

from .exceptions import InvalidNameError

CHARMAP = '.12345abcdefghijklmnopqrstuvwxyz'
NAME_PATTERN = re.compile(r'[.1-5a-z]{0,12}[.1-5a-j]?')


def name_to_number(name: str) -> int:
    """
    Encode an account name to its uint64 value.

    Args:
        name: Account name (e.g. 'eosio.token')

    Returns:
        Integer in [0, 2**64)

    Raises:
        InvalidNameError: if the name has invalid characters or length,
            or ends with a dot (not normalized)
    """
    if not isinstance(name, str) or not NAME_PATTERN.fullmatch(name) or name.endswith('.'):
        raise InvalidNameError(f"Invalid account name: {name!r}")

    value = 0
    for i in range(13):
        c = CHARMAP.index(name[i]) if i < len(name) else 0
        if i < 12:
            value |= (c & 0x1f) << (64 - 5 * (i + 1))
        else:
            value |= c & 0x0f
    return value


def number_to_name(value: int) -> str:
    """Decode a uint64 back to its account name, trailing dots removed."""
    if value < 0 or value >= 1 << 64:
        raise InvalidNameError(f"Name value out of range: {value}")

    chars = ['.'] * 13
    tmp = value
    for i in range(13):
        if i == 0:
            chars[12] = CHARMAP[tmp & 0x0f]
            tmp >>= 4
        else:
            chars[12 - i] = CHARMAP[tmp & 0x1f]
            tmp >>= 5
    return ''.join(chars).rstrip('.')


def numeric_from_name(name: str) -> str:
    """Decimal string of the name's uint64 value."""
    return str(name_to_number(name))
