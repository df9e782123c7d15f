"""
Reservation Pricing Engine

Turns a stay request into the authoritative price of a reservation.
Pure and deterministic: no database access, no I/O.

    nights       = ceil(check_out - check_in, in days)
    base_price   = nightly_rate * nights
    service_fee  = round(base_price * service_fee_pct / 100)
    subtotal     = base_price + cleaning_fee + service_fee
    tax          = round(subtotal * 18%)
    total        = subtotal + tax

Rounding is half-up to a whole currency unit and happens at each stage,
not only on the total; stored reservations depend on that exact sequence.
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidPricingInput
from shared.domain.value_objects import DateRange

TAX_RATE = Decimal('0.18')
DEFAULT_SERVICE_FEE_PCT = Decimal('3')
WHOLE_UNIT = Decimal('1')
HUNDRED = Decimal('100')


def round_half_up(amount: Decimal) -> Decimal:
    """Round to a whole currency unit, halves away from zero"""
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def _to_decimal(value, name: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        return Decimal(str(value))
    try:
        return Decimal(value)
    except (TypeError, ArithmeticError, ValueError):
        raise InvalidPricingInput(f"{name} must be a number, got {value!r}")


@dataclass(frozen=True)
class PriceQuote(ValueObject):
    """Priced stay with its full breakdown"""
    nights: int
    nightly_rate: Decimal
    base_price: Decimal
    cleaning_fee: Decimal
    service_fee: Decimal
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def as_dict(self) -> dict:
        return {
            'nights': self.nights,
            'nightly_rate': self.nightly_rate,
            'base_price': self.base_price,
            'cleaning_fee': self.cleaning_fee,
            'service_fee': self.service_fee,
            'subtotal': self.subtotal,
            'tax': self.tax,
            'total': self.total,
        }


def compute_reservation_total(
    check_in: date,
    check_out: date,
    nightly_rate,
    cleaning_fee=0,
    service_fee_pct=DEFAULT_SERVICE_FEE_PCT,
) -> PriceQuote:
    """
    Price a stay

    Raises:
        InvalidDateRange: check_out is not strictly after check_in
        InvalidPricingInput: negative rate or fee, percentage outside 0-100
    """
    nights = DateRange(check_in, check_out).nights

    rate = _to_decimal(nightly_rate, 'nightly_rate')
    cleaning = _to_decimal(cleaning_fee, 'cleaning_fee')
    pct = _to_decimal(service_fee_pct, 'service_fee_pct')

    if rate < 0:
        raise InvalidPricingInput("Nightly rate cannot be negative")
    if cleaning < 0:
        raise InvalidPricingInput("Cleaning fee cannot be negative")
    if not (0 <= pct <= HUNDRED):
        raise InvalidPricingInput("Service fee percentage must be between 0 and 100")

    base_price = rate * nights
    service_fee = round_half_up(base_price * pct / HUNDRED)
    subtotal = base_price + cleaning + service_fee
    tax = round_half_up(subtotal * TAX_RATE)

    return PriceQuote(
        nights=nights,
        nightly_rate=rate,
        base_price=base_price,
        cleaning_fee=cleaning,
        service_fee=service_fee,
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
    )


def quote_for_listing(listing, check_in: date, check_out: date) -> PriceQuote:
    """Price a stay at a listing's current rate and fees"""
    return compute_reservation_total(
        check_in,
        check_out,
        nightly_rate=listing.price,
        cleaning_fee=listing.cleaning_fee,
        service_fee_pct=listing.service_fee_pct,
    )
