import pytest

from localisation_calc.validations import amortization_year_choices, interest_rate_errors


@pytest.mark.parametrize("value", [0, "0", 4.25, "5.5", 100])
def test_valid_interest_rates(value):
    assert interest_rate_errors(value) == []


@pytest.mark.parametrize(
    "value, message",
    [
        (None, "Interest rate is required."),
        ("  ", "Interest rate is required."),
        ("five", "Interest rate is invalid."),
        ("nan", "Interest rate is invalid."),
        (-1, "Interest rate must be at least 0%."),
        ("101", "Interest rate must be at most 100%."),
    ],
)
def test_invalid_interest_rates(value, message):
    assert interest_rate_errors(value) == [message]


def test_amortization_choices():
    choices = amortization_year_choices()
    assert choices[0] == "1"
    assert choices[-1] == "30"
    assert len(choices) == 30
