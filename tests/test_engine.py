"""Tests for the directional mask scanning engine."""

from __future__ import annotations

import logging

import pytest
from prometheus_client import REGISTRY

from stringmask.engine import MaskEngine
from stringmask.models import MaskToken, ProcessingDirection

FORWARD = ProcessingDirection.FORWARD
REVERSE = ProcessingDirection.REVERSE


def run(pattern, value, direction=FORWARD, use_defaults=False, registry=None):
    outcome = MaskEngine(pattern, direction, use_defaults, registry).process(value)
    return outcome.result, outcome.valid


@pytest.mark.parametrize(
    ("pattern", "value", "expected"),
    [
        ("000-0000", "1234567", "123-4567"),
        ("(000) 000-0000", "1234567890", "(123) 456-7890"),
        ("000.000.000-00", "12345678901", "123.456.789-01"),
        ("00.000.000/0000-00", "12345678000199", "12.345.678/0001-99"),
        ("00/00/0000", "25122025", "25/12/2025"),
        ("00000-000", "01310100", "01310-100"),
    ],
)
def test_required_digits_fill_in_order(pattern, value, expected):
    assert run(pattern, value) == (expected, True)


def test_excess_input_is_ignored():
    assert run("(00) 0000-0000", "11987654321") == ("(11) 9876-5432", True)


def test_short_input_is_invalid():
    result, valid = run("000-0000", "12345")

    assert valid is False
    assert result == "123-45"


def test_defaults_backfill_forward():
    assert run("000-0000", "123", use_defaults=True) == ("123-0000", True)


def test_without_defaults_anchored_literals_survive():
    assert run("000-0000", "123") == ("123-", False)
    assert run("000-00", "1") == ("1-", False)


def test_reverse_backfills_leading_digits():
    assert run("000.000,00", "123456", REVERSE, use_defaults=True) == ("001.234,56", True)
    assert run("000,00", "1", REVERSE, use_defaults=True) == ("000,01", True)


def test_forward_without_defaults_keeps_partial_result():
    assert run("000.000,00", "123456") == ("123.456,", False)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1234567", "12.345,67"),
        ("123456789", "1.234.567,89"),
        ("100", "1,00"),
    ],
)
def test_reverse_currency_drops_decorative_prefix(value, expected):
    assert run("R$ #.###.###,00", value, REVERSE, use_defaults=True) == (expected, True)


def test_mismatched_character_halts_as_invalid():
    assert run("0000", "abcd") == ("", False)
    assert run("00-00", "12a4") == ("12-", False)


def test_empty_value_is_invalid():
    assert run("000-0000", "") == ("", False)
    assert run("000,00", "", REVERSE, use_defaults=True) == ("", False)


def test_optional_digits_use_budget():
    assert run("0009999", "12345") == ("12345", True)
    assert run("0009999", "1234567") == ("1234567", True)
    assert run("0009999", "123") == ("123", True)


def test_optional_budget_exhaustion_stops_scan_without_invalidating():
    # Two required digits leave no budget for the optional slots.
    assert run("90-00", "12") == ("", True)
    assert run("990-0", "123") == ("1", True)


def test_trailing_literal_without_tokens_is_dropped():
    assert run("000-", "123") == ("123", True)
    assert run("(000)", "123") == ("(123", True)
    assert run("R$ 0", "5", REVERSE, use_defaults=True) == ("5", True)


def test_escaped_token_is_literal():
    assert run(r"0$0-0", "12") == ("10-2", True)
    assert run("0$$0", "12") == ("1$2", True)


def test_escape_only_marker_is_silent():
    assert run("$A0", "5") == ("A5", True)


def test_case_transforms():
    assert run("UUU-LLL", "abcDEF") == ("ABC-def", True)
    assert run("SSS", "ab1") == ("ab", False)
    assert run("AAA", "a1B") == ("a1B", True)


def test_custom_registry():
    registry = {"X": MaskToken(pattern=r"[0-9A-F]")}

    assert run("XX-XX", "12AB", registry=registry) == ("12-AB", True)
    assert run("XXXX", "12GH", registry=registry)[1] is False


def test_empty_registry_yields_no_output():
    assert run("000-0000", "1234567", registry={}) == ("", True)


def test_custom_default_value():
    registry = {"x": MaskToken(pattern=r"[a-z]", default_value="_")}

    assert run("xxx", "ab", use_defaults=True, registry=registry) == ("ab_", True)
    assert run("xxx", "a", REVERSE, use_defaults=True, registry=registry) == ("__a", True)


def test_scan_is_counted():
    labels = {"direction": "reverse", "valid": "true"}
    before = REGISTRY.get_sample_value("stringmask_scans_total", labels) or 0.0

    run("000,00", "1", REVERSE, use_defaults=True)

    assert REGISTRY.get_sample_value("stringmask_scans_total", labels) == before + 1


def test_halt_is_logged_without_value(caplog):
    with caplog.at_level(logging.DEBUG, logger="stringmask.engine"):
        run("0000", "12ab")

    messages = " ".join(record.getMessage() for record in caplog.records)
    assert "halted" in messages
    assert "12ab" not in messages


def test_recursive_only_token_draws_from_budget():
    registry = {
        "0": MaskToken(pattern=r"[0-9]", default_value="0"),
        "Z": MaskToken(pattern=r"[0-9]", recursive=True),
    }

    assert run("Z0", "5", registry=registry) == ("", True)
    assert run("Z0", "56", registry=registry) == ("56", True)
    assert run("0Z", "5", registry=registry) == ("5", True)


def test_empty_value_without_required_tokens_stays_valid():
    assert run("999", "") == ("", True)
    assert run("##.9", "", REVERSE, use_defaults=True) == ("", True)
    assert run("", "") == ("", True)
    assert run("000", "", registry={}) == ("", True)
    assert run("$0", "") == ("", True)
