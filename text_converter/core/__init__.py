"""Codec primitives, width dispatch and generic conversion drivers.

WHY: Every public conversion is a composition of the same few pieces:
decode a source into code points, encode code points into a destination,
and post-process the result. Keeping these pieces here lets the public
matrix stay a set of one-line compositions.

HOW: errors.py defines the exception types, codecs.py the pure per-unit
encode/decode functions, drivers.py the generic algorithms built on them,
width.py the wide character routing, and representations.py the typed
code unit containers handed to callers.

RULES:
- Nothing in core keeps state between calls
- Codecs work on plain integer unit sequences, not on Python str
"""
