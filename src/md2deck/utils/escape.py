#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/utils/escape.py
"""Escaping for deck markup.

Deck files are XML. Text placed in attribute values or element content goes
through :func:`escape_xml_attribute`, which is safe in both positions.

"""

from __future__ import annotations

import re

# Ampersand first so the entities produced below are not escaped again.
_XML_ATTRIBUTE_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)

CHARACTER_REFERENCE_PATTERN = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")


def escape_xml_attribute(text: str) -> str:
    """Escape text for use inside a double-quoted XML attribute or element.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with ``&``, ``<``, ``>`` and ``"`` replaced by entities

    Examples
    --------
        >>> escape_xml_attribute('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'

    """
    if not text:
        return text

    result = text
    for char, entity in _XML_ATTRIBUTE_ESCAPES:
        result = result.replace(char, entity)
    return result


def split_character_references(text: str) -> list[tuple[bool, str]]:
    """Split text into plain runs and HTML character references.

    Parameters
    ----------
    text : str
        Text that may contain references such as ``&copy;`` or ``&#169;``

    Returns
    -------
    list of tuple[bool, str]
        ``(is_reference, fragment)`` pairs in source order; empty fragments
        are omitted

    Examples
    --------
        >>> split_character_references("a &amp; b")
        [(False, 'a '), (True, '&amp;'), (False, ' b')]

    """
    parts: list[tuple[bool, str]] = []
    position = 0
    for match in CHARACTER_REFERENCE_PATTERN.finditer(text):
        if match.start() > position:
            parts.append((False, text[position : match.start()]))
        parts.append((True, match.group(0)))
        position = match.end()
    if position < len(text):
        parts.append((False, text[position:]))
    return parts
