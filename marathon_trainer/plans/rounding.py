"""Half-up rounding used for every distance and pace value.

Python's built-in round() rounds halves to even, which would make 4.25 km
become 4.2. Plan values always round halves away from zero.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round value to ndigits decimals, halves rounding up.

    Args:
        value: Value to round
        ndigits: Number of decimals to keep

    Returns:
        Rounded value
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor
