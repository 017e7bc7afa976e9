import pytest

from fund_selector.utils.formatting import format_inr, format_pct, format_ratio


@pytest.mark.parametrize("amount,expected", [
    (0, "₹0"),
    (999, "₹999"),
    (1000, "₹1,000"),
    (100000, "₹1,00,000"),
    (12345678.6, "₹1,23,45,679"),
    (-2500, "-₹2,500"),
    (-0.4, "₹0"),
])
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected

@pytest.mark.parametrize("bad", [float("nan"), None, "abc"])
def test_format_inr_non_numeric(bad):
    assert format_inr(bad) == "n/a"

def test_percent_helpers():
    assert format_pct(42.4) == "42%"
    assert format_pct(42.45, places=1) == "42.5%"
    assert format_ratio(0.125) == "13%"
