"""Numbers in lispr are signed 64-bit integers. Literals are parsed here and arithmetic results are wrapped around the
way two's-complement hardware does it.
"""

from lispr.lang.error import GenericException

BITS = 64
MIN = -(1 << (BITS - 1))
MAX = (1 << (BITS - 1)) - 1

DIGITS = "0123456789"


def number(digits, negative=False):
    """Returns the int denoted by the digit run of a number literal. Underscores are separators and are dropped before
    conversion. Raises GenericException if the (possibly negated) value does not fit in 64 bits.
    """
    literal = "-" + digits if negative else digits
    stripped = digits.replace("_", "")

    if not stripped or any(char not in DIGITS for char in stripped):
        raise GenericException("'{}' is not a valid number literal", literal)

    num = int(stripped, 10)
    if negative:
        num = -num

    if not MIN <= num <= MAX:
        raise GenericException("'{}' does not fit in a signed 64-bit integer", literal)
    return num


def wrap(num):
    """Wraps an arbitrary int into the signed 64-bit range."""
    return ((num - MIN) % (1 << BITS)) + MIN


def add(left, right):
    return wrap(left + right)


def mul(left, right):
    return wrap(left * right)
