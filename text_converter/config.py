"""Configuration constants and .env loading.

WHY: The width of a platform wide character (``wchar_t``) is 2 bytes on
Windows and 4 bytes on most other platforms. Every wide conversion depends
on it, and mixing widths within one process would corrupt data, so the
value is settled once, here, and never looked up again per call.

HOW: python-dotenv loads the .env file on import. WCHAR_WIDTH is taken from
the TEXT_CONVERTER_WCHAR_WIDTH environment variable when set, otherwise
from the size of ``ctypes.c_wchar`` on the running interpreter.

RULES:
- Only widths 2 and 4 are supported
- An invalid override fails loudly on import, it never falls back
- WCHAR_WIDTH is read once; changing the environment later has no effect
"""

from __future__ import annotations

import ctypes
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Wide character width
# ---------------------------------------------------------------------------

WCHAR_WIDTH_ENV = "TEXT_CONVERTER_WCHAR_WIDTH"
"""Environment variable overriding the native wide character width."""

SUPPORTED_WCHAR_WIDTHS = (2, 4)


def native_wchar_width() -> int:
    """Size in bytes of the platform ``wchar_t``."""
    return ctypes.sizeof(ctypes.c_wchar)


def load_wchar_width() -> int:
    """Resolve the wide character width for this process.

    WHY: Tests and cross-platform tooling sometimes need to emulate the
    other platform's width (e.g. produce Windows-style UTF-16 wide strings
    on Linux).

    HOW: Reads TEXT_CONVERTER_WCHAR_WIDTH from os.environ (populated by
    python-dotenv). Falls back to native_wchar_width() when unset or blank.

    RULES:
    - Raises ValueError if the override is not an integer
    - Raises ValueError if the width is not 2 or 4
    """
    raw = os.getenv(WCHAR_WIDTH_ENV, "").strip()
    if not raw:
        width = native_wchar_width()
    else:
        try:
            width = int(raw)
        except ValueError:
            raise ValueError(
                "{} must be an integer, got {!r}.".format(WCHAR_WIDTH_ENV, raw)
            ) from None

    if width not in SUPPORTED_WCHAR_WIDTHS:
        raise ValueError(
            "Unsupported wide character width {}. Supported: {}.".format(
                width, ", ".join(str(w) for w in SUPPORTED_WCHAR_WIDTHS)
            )
        )
    return width


WCHAR_WIDTH = load_wchar_width()
logger.debug("Wide character width resolved to %d bytes", WCHAR_WIDTH)
