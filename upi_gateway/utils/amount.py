"""Major-to-minor currency unit conversion."""

import re
from typing import Union

from upi_gateway.error_handler import InvalidAmount

# Two decimal places for INR: 1 rupee == 100 paise.
MINOR_UNITS_PER_MAJOR = 100

_WHOLE_NUMBER = re.compile(r"[0-9]+")


def normalize_amount(amount: Union[str, int]) -> int:
    """
    Convert a whole-number amount in major units (rupees) to minor units (paise).

    Only unsigned ASCII digit strings (or non-negative ints) are accepted. The
    gateway decides the maximum payable amount, so no upper bound is applied.
    """
    if isinstance(amount, bool):
        raise InvalidAmount()
    if isinstance(amount, int):
        if amount < 0:
            raise InvalidAmount()
        return amount * MINOR_UNITS_PER_MAJOR
    if not isinstance(amount, str) or not _WHOLE_NUMBER.fullmatch(amount):
        raise InvalidAmount()
    try:
        rupees = int(amount)
    except ValueError as exc:
        # Past the interpreter's int digit limit.
        raise InvalidAmount() from exc
    return rupees * MINOR_UNITS_PER_MAJOR
