LP_TOKEN_DECIMALS = 18


def format_units(raw: int, decimals: int) -> str:
    """Render ``raw / 10 ** decimals`` as an exact decimal string.

    Integer arithmetic only, so uint112/uint256 values keep every digit.
    Trailing fractional zeros are dropped: ``format_units(10**18, 18)``
    is ``"1"``, ``format_units(1234500, 6)`` is ``"1.2345"``.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    sign = "-" if raw < 0 else ""
    whole, fraction = divmod(abs(raw), 10 ** decimals)

    if decimals == 0 or fraction == 0:
        return f"{sign}{whole}"

    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{sign}{whole}.{fraction_str}"
