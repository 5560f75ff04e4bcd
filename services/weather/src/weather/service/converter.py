"""Celsius to Fahrenheit/Kelvin conversion."""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")
_FAHRENHEIT_FACTOR = Decimal("1.8")
_FAHRENHEIT_OFFSET = Decimal("32")
_KELVIN_OFFSET = Decimal("273.15")


@dataclass(frozen=True)
class TemperatureReport:
    locality: str
    celsius: float
    fahrenheit: float
    kelvin: float


def round_half_away(value: Decimal) -> float:
    """Round to 2 places, ties away from zero (2.675 -> 2.68, -0.125 -> -0.13)."""
    return float(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def convert(celsius: float, locality: str = "") -> TemperatureReport:
    # repr() is the shortest string that round-trips, so 28.5 stays 28.5 in Decimal.
    c = Decimal(repr(float(celsius)))
    return TemperatureReport(
        locality=locality,
        celsius=round_half_away(c),
        fahrenheit=round_half_away(c * _FAHRENHEIT_FACTOR + _FAHRENHEIT_OFFSET),
        kelvin=round_half_away(c + _KELVIN_OFFSET),
    )
