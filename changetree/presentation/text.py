"""Escaping of arbitrary file names for single-line terminal display."""

from __future__ import annotations

import re

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_NAMED_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def escape_special_chars(text: str) -> str:
    """Make control characters visible so a name never breaks its row."""
    if _CONTROL_RE.search(text) is None:
        return text

    out: list[str] = []
    for ch in text:
        named = _NAMED_ESCAPES.get(ch)
        if named is not None:
            out.append(named)
            continue
        code = ord(ch)
        # C0 controls + DEL + C1 controls.
        if code < 32 or 0x7F <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


__all__ = ["escape_special_chars"]
