"""Fixed-point money helpers.

Amounts are persisted as two-decimal strings and handled as `Decimal`
in code, so prices and order totals never pick up floating point drift.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bakeandtaste.shared.errors import InvalidInput

CENT = Decimal("0.01")

# Matches a DECIMAL(10, 2) column
MAX_AMOUNT = Decimal("99999999.99")


def parse_amount(value, field: str = "price") -> Decimal:
    """Parse a user supplied amount into a two-decimal `Decimal`."""
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        raise InvalidInput({field: ["Amount is required"]})

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidInput({field: [f"'{value}' is not a valid amount"]}) from None

    if not amount.is_finite():
        raise InvalidInput({field: [f"'{value}' is not a valid amount"]})
    if amount.as_tuple().exponent < -2:
        raise InvalidInput({field: ["Amount must have at most two decimal places"]})
    if amount > MAX_AMOUNT:
        raise InvalidInput({field: [f"Amount must not exceed {MAX_AMOUNT}"]})

    return amount.quantize(CENT)


def positive_amount(value, field: str = "price") -> Decimal:
    amount = parse_amount(value, field)
    if amount <= 0:
        raise InvalidInput({field: ["Amount must be greater than zero"]})
    return amount


def to_decimal(stored: str | None) -> Decimal:
    """Read a persisted amount back. Empty values count as zero."""
    return Decimal(stored).quantize(CENT) if stored else Decimal("0.00")


def format_amount(amount: Decimal) -> str:
    return str(Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP))
