"""Tests for Celsius conversion and rounding."""
import pytest

from weather.service.converter import convert


def test_reference_value() -> None:
    report = convert(28.5, locality="São Paulo")
    assert report.locality == "São Paulo"
    assert report.celsius == 28.5
    assert report.fahrenheit == 83.3
    assert report.kelvin == 301.65


@pytest.mark.parametrize(
    ("celsius", "fahrenheit", "kelvin"),
    [
        (0, 32.0, 273.15),
        (100, 212.0, 373.15),
        (-40, -40.0, 233.15),
        (-273.15, -459.67, 0.0),
        (21.37, 70.47, 294.52),
    ],
)
def test_known_points(celsius: float, fahrenheit: float, kelvin: float) -> None:
    report = convert(celsius)
    assert report.fahrenheit == fahrenheit
    assert report.kelvin == kelvin


def test_ties_round_away_from_zero() -> None:
    report = convert(0.125)
    assert report.celsius == 0.13
    assert report.fahrenheit == 32.23
    assert report.kelvin == 273.28
    assert convert(-0.125).celsius == -0.13
    assert convert(2.675).celsius == 2.68


def test_integer_input_gives_floats() -> None:
    report = convert(25)
    assert isinstance(report.celsius, float)
    assert report.celsius == 25.0
    assert report.fahrenheit == 77.0
    assert report.kelvin == 298.15
