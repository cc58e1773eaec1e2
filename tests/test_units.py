import pytest

from ptvnet.units import parse_length_value, parse_speed_value, split_value


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.081km", 81.0),
        ("500", 500.0),
        ("500m", 500.0),
        ("12,5km", 12500.0),
        ("250cm", 2.5),
        ("1500mm", 1.5),
        ("2mi", 3218.68),
        ("100ft", 30.48),
        ("3 KM", 3000.0),
        ("42furlong", 42.0),
    ],
)
def test_parse_length_value(text, expected):
    assert parse_length_value(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("50km/h", 50.0),
        ("50", 50.0),
        ("10m/s", 36.0),
        ("30mph", 48.2802),
        ("30mi/h", 48.2802),
        ("1km/min", 60.0),
        ("1000m/min", 60.0),
        ("10ft/s", 10.9728),
        ("7,5 km/h", 7.5),
        ("80knots", 80.0),
    ],
)
def test_parse_speed_value(text, expected):
    assert parse_speed_value(text) == pytest.approx(expected)


@pytest.mark.parametrize("parser", [parse_length_value, parse_speed_value])
def test_empty_string_is_zero(parser):
    assert parser("") == 0.0
    assert parser("   ") == 0.0


@pytest.mark.parametrize("text", ["km", "abc", "1.2.3km", "-5m"])
def test_malformed_values_raise(text):
    with pytest.raises(ValueError):
        parse_length_value(text)


def test_split_value_lowercases_unit():
    assert split_value("10 KM/H") == (10.0, "km/h")
    assert split_value("10") == (10.0, "")
