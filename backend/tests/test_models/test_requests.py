"""Tests for query parsing."""

import pytest
from starlette.datastructures import QueryParams

from identicon.models.requests import IdenticonRequest, parse_leading_int


@pytest.mark.parametrize(
    "raw, expected",
    [("80", 80), ("  64", 64), ("48px", 48), ("+12", 12), ("-5", -5), ("abc", 0), ("", 0), (None, 0)],
)
def test_parse_leading_int(raw, expected):
    assert parse_leading_int(raw) == expected


def test_from_query_defaults():
    req = IdenticonRequest.from_query(QueryParams(""))
    assert req.hash is None
    assert req.size == 0
    assert req.transparent is False


def test_from_query():
    req = IdenticonRequest.from_query(QueryParams("u=abc&s=32&t"))
    assert req.hash == "abc"
    assert req.size == 32
    assert req.transparent is True


def test_repeated_values_joined_with_comma():
    req = IdenticonRequest.from_query(QueryParams("u=ab&u=cd&s=80&s=90"))
    assert req.hash == "ab, cd"
    assert req.size == 80


def test_keys_are_case_insensitive():
    req = IdenticonRequest.from_query(QueryParams("U=abc&S=32&T"))
    assert req.hash == "abc"
    assert req.size == 32
    assert req.transparent is True


def test_mixed_case_repeats_keep_order():
    req = IdenticonRequest.from_query(QueryParams("u=ab&U=cd"))
    assert req.hash == "ab, cd"


def test_plain_mapping():
    req = IdenticonRequest.from_query({"u": "abc", "t": ""})
    assert req.hash == "abc"
    assert req.transparent is True
