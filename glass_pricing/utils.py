from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .errors import InvalidMoneyError


ROUND_SCALE = 2
MM_PER_METER = Decimal(1000)
MM2_PER_SQM = Decimal(1_000_000)
PERCENT = Decimal(100)


def to_decimal(x) -> Decimal:
    """Coerce a number, numeric string or Decimal into a finite Decimal.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.
    """
    if isinstance(x, Decimal):
        value = x
    elif x is None or isinstance(x, bool):
        raise InvalidMoneyError(f"Expected a numeric value, got {x!r}")
    elif isinstance(x, (int, float, str)):
        try:
            value = Decimal(str(x).strip())
        except InvalidOperation:
            raise InvalidMoneyError(f"Not a number: {x!r}") from None
    else:
        raise InvalidMoneyError(f"Expected a numeric value, got {type(x).__name__}")
    if not value.is_finite():
        raise InvalidMoneyError(f"Amount must be finite, got {x!r}")
    return value


def round_half_up(value: Decimal, places: int = ROUND_SCALE) -> Decimal:
    q = Decimal(10) ** -places
    return value.quantize(q, rounding=ROUND_HALF_UP)


def money(amount: Decimal, symbol: str = "$", places: int = 2) -> str:
    val = round_half_up(amount, places)
    parts = f"{val:.{places}f}".split(".")
    whole = parts[0]
    frac = parts[1] if len(parts) > 1 else "00"
    sign = ""
    if whole.startswith("-"):
        sign = "-"
        whole = whole[1:]
    whole_with_commas = "{:,}".format(int(whole))
    return f"{sign}{symbol}{whole_with_commas}.{frac}"
