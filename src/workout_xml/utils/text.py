"""Text helpers for values stored in the regimen file."""

import re

# Characters outside the XML 1.0 Char production
XML_ILLEGAL_CHARS = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def find_xml_illegal_chars(value: str) -> list[str]:
    """Get the characters in value that cannot be stored in an XML document."""
    return XML_ILLEGAL_CHARS.findall(value)


def strip_xml_illegal_chars(value: str) -> str:
    """Remove characters that cannot be stored in an XML document.

    Stray control characters (e.g. the ESC of an arrow key pressed at a
    plain prompt) are dropped; everything else is kept as typed.
    """
    return XML_ILLEGAL_CHARS.sub("", value)
