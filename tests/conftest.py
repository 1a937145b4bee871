"""Shared test fixtures for JSON Healer."""

from __future__ import annotations

import pytest

from jsonhealer.healer.pipeline import JSONHealer
from jsonhealer.models.options import HealerOptions
from jsonhealer.parser.scanner import TolerantParser


@pytest.fixture
def parser() -> TolerantParser:
    return TolerantParser()


@pytest.fixture
def healer() -> JSONHealer:
    return JSONHealer()


@pytest.fixture
def conservative_healer() -> JSONHealer:
    return JSONHealer(HealerOptions.conservative())


@pytest.fixture
def aggressive_healer() -> JSONHealer:
    return JSONHealer(HealerOptions.aggressive())


VALID_DOCUMENT = """\
{
    "name": "Test",
    "age": 25,
    "isStudent": true,
    "nickname": null,
    "scores": [85, 92.5, -78, 1e3, 2.5E-2],
    "address": {
        "city": "Beijing",
        "zipCode": "100000"
    },
    "tags": [],
    "extra": {}
}"""

TRAILING_COMMA_OBJECT = """\
{
    "name": "Test",
    "age": 25,
}"""

TRAILING_COMMA_ARRAY = """\
[
    "apple",
    "banana",
    "orange",
]"""

SINGLE_QUOTED_OBJECT = """\
{
    'name': 'John'
}"""

UNQUOTED_KEY_OBJECT = """\
{
    name: "John"
}"""

LINE_COMMENT_OBJECT = """\
{
    "name": "John", // the user's name
    "age": 30
}"""

BLOCK_COMMENT_OBJECT = """\
{
    "name": "John" /* inline note */,
    "age": 30
}"""

MULTILINE_BLOCK_COMMENT_OBJECT = """\
{
    "name": "John", /* spans
                       two lines */
    "age": 30
}"""

UNCLOSED_ARRAY_OBJECT = """\
{
    "name": "John",
    "scores": [85, 92, 78
}"""
