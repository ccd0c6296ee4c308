# apps/api/ticket/billing.py
"""
Parking charge rules.

Elapsed time is measured in whole minutes (seconds are dropped) and billed by
the started hour, so 59 and 60 minutes are one hour and 61 minutes are two.
Amounts are kept as ``Decimal`` with two decimal places.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def elapsed_minutes(start: datetime, end: datetime) -> int:
    seconds = (end - start).total_seconds()
    return max(int(seconds // 60), 0)


def billable_hours(minutes: int) -> int:
    return math.ceil(minutes / 60)


def amount_due(hours: int, price_per_hour) -> Decimal:
    return to_money(Decimal(hours) * Decimal(price_per_hour))


def change_due(tendered, expected) -> Decimal:
    """Overpayment returned to the customer, zero when nothing is owed back."""
    diff = to_money(Decimal(tendered) - Decimal(expected))
    return diff if diff > 0 else to_money(0)


@dataclass(frozen=True)
class Charge:
    minutos_totales: int
    horas_cobrar: int
    monto_total: Decimal


def compute_charge(start: datetime, end: datetime, price_per_hour) -> Charge:
    minutes = elapsed_minutes(start, end)
    hours = billable_hours(minutes)
    return Charge(
        minutos_totales=minutes,
        horas_cobrar=hours,
        monto_total=amount_due(hours, price_per_hour),
    )
