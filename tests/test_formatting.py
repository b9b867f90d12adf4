"""
Display helper tests.
"""

import pytest

from gloverse_hq.services.formatting import (
    format_inr,
    format_usd,
    initials,
    matches_handle,
    parse_amount,
    upi_payment_link,
)


@pytest.mark.parametrize(
    "name, fallback, expected",
    [
        ("Ravi Kumar", "", "RK"),
        ("ravi", "", "R"),
        ("Ravi  Kumar ", "", "RK"),
        (None, "", ""),
        ("", "AD", "AD"),
        (None, "C", "C"),
    ],
)
def test_initials(name, fallback, expected):
    assert initials(name, fallback) == expected


def test_matches_handle():
    assert matches_handle("GloStar_99", "star")
    assert matches_handle("GloStar_99", "@glo")
    assert matches_handle(None, "")
    assert not matches_handle(None, "glo")
    assert not matches_handle("ravi", "kumar")


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0.00"),
        (999, "₹999.00"),
        (1000, "₹1,000.00"),
        (100000, "₹1,00,000.00"),
        (12345678.5, "₹1,23,45,678.50"),
        (-2500, "-₹2,500.00"),
    ],
)
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_format_usd():
    assert format_usd(1234.5) == "$1,234.50"
    assert format_usd(0) == "$0.00"


def test_upi_payment_link_encodes_name():
    link = upi_payment_link("ravi@okaxis", "Ravi Kumar & Sons", 10250)
    assert link == "upi://pay?pa=ravi@okaxis&pn=Ravi%20Kumar%20%26%20Sons&am=10250.00&cu=INR"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("250", 250.0),
        (" 12.5 ", 12.5),
        (7, 7.0),
        ("", None),
        ("   ", None),
        (None, None),
        ("abc", None),
        ("nan", None),
        ("inf", None),
        (True, None),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected
