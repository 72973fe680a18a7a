from __future__ import annotations

"""
Unit tests for Component Name Conversions.
"""

import pytest

from verif.core.analysis.naming import candidate_keys, to_kebab_case, to_upper_camel_case


@pytest.mark.parametrize("name, expected", [
    ("app", "App"),
    ("add-card-button", "AddCardButton"),
    ("AddCardButton", "AddCardButton"),
    ("addCard", "AddCard"),
    ("", ""),
])
def test_to_upper_camel_case(name: str, expected: str) -> None:
    assert to_upper_camel_case(name) == expected


@pytest.mark.parametrize("name, expected", [
    ("App", "app"),
    ("AddCardButton", "add-card-button"),
    ("add-card-button", "add-card-button"),
    ("addCard", "add-card"),
    ("", ""),
])
def test_to_kebab_case(name: str, expected: str) -> None:
    assert to_kebab_case(name) == expected


@pytest.mark.parametrize("name", ["app", "card-list", "add-card-button", "x-y-z"])
def test_kebab_round_trip(name: str) -> None:
    assert to_kebab_case(to_upper_camel_case(name)) == to_kebab_case(name)


@pytest.mark.parametrize("name", ["Card", "card-list", "AddCardButton"])
def test_conversions_are_idempotent(name: str) -> None:
    camel = to_upper_camel_case(name)
    kebab = to_kebab_case(name)

    assert to_upper_camel_case(camel) == camel
    assert to_kebab_case(kebab) == kebab


def test_candidate_keys_order_and_dedup() -> None:
    assert candidate_keys("card-list") == ["CardList", "card-list"]
    assert candidate_keys("App") == ["App", "app"]
    assert candidate_keys("app") == ["App", "app"]
    assert candidate_keys("myButton") == ["MyButton", "my-button", "myButton"]
