"""Shared test fixtures for the text_converter test suite.

WHY: Several test modules exercise the same sample strings. Defining them
once keeps the expectations consistent across modules.

HOW: Pytest fixtures provide an ASCII sample, "café 😀" as UTF-8 bytes,
and the wide character width this process was configured with, so wide
string tests can stay width-agnostic.

RULES:
- Expected byte values are written out literally, never computed with the
  code under test
- Wide string expectations must hold for both widths 2 and 4
"""

import pytest

from text_converter import config


@pytest.fixture
def ascii_text():
    return "Hello, World!"


@pytest.fixture
def mixed_utf8():
    """'café 😀' as UTF-8 without a terminator."""
    return b"caf\xc3\xa9 \xf0\x9f\x98\x80"


@pytest.fixture
def wchar_width():
    """The wide character width this test process was configured with."""
    return config.WCHAR_WIDTH
