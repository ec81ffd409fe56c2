import string
from .errors import DecodeError

MIN_BASE = 2
MAX_BASE = 36

# '0'->0 ... '9'->9, 'a'->10 ... 'z'->35
DIGIT_VALUES = {c: i for i, c in enumerate(string.digits + string.ascii_lowercase)}


def digit_value(char):
    """
    returns the numeral value of a single character, or None if it is not a digit in any base up to 36
    """
    return DIGIT_VALUES.get(char.lower())


def decode(digits: str, base: int, strict: bool = False) -> int:
    """
    Convert a digit string in the given base to an integer, most significant digit first.

    Characters that are not valid digits for the base (whitespace, quotes, '9' in base 2, ...) are skipped.
    This leniency is kept from older inputs; pass strict=True to reject them instead.

    Args:
        digits: string over 0-9 / a-z (case-insensitive)
        base: radix between 2 and 36 inclusive
        strict: if True, any skipped character raises DecodeError

    Returns:
        the decoded integer (unbounded, so values beyond 64 bits stay exact)
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise DecodeError(f"base must be an integer (currently {base!r})")
    if not MIN_BASE <= base <= MAX_BASE:
        raise DecodeError(f"base {base} not supported - must be between {MIN_BASE} and {MAX_BASE} inclusive")
    if not isinstance(digits, str):
        raise DecodeError(f"digits must be a string (currently {digits!r})")

    result = 0
    used = 0
    for char in digits:
        value = digit_value(char)
        if value is None or value >= base:
            if strict:
                raise DecodeError(f"invalid digit {char!r} for base {base} in {digits!r}")
            continue
        result = result * base + value
        used += 1

    if used == 0:
        raise DecodeError(f"no valid base {base} digits in {digits!r}")

    return result
