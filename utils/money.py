"""
utils/money.py
--------------
Currency unit helpers. Prices arrive in major units (dollars) and are
persisted in minor units (cents).
"""

from decimal import Decimal
from typing import Union

Amount = Union[int, float, str, Decimal]

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Amount) -> Decimal:
    """
    Scale a major-unit amount to minor units.

    Goes through ``str`` so that binary floats such as ``19.99`` scale to
    exactly ``1999`` instead of ``1998.9999999999998``.

    Raises:
        decimal.InvalidOperation: If ``amount`` is not numeric.
    """
    return Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR
