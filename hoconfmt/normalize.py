"""
Core whitespace normalization lives here.

Responsibilities:
- classify the leading whitespace run of a document
- replace the first code line's indentation with tabs
- build the report envelope returned by the HTTP API
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any, Dict, Optional, Tuple

from charset_normalizer import from_bytes

from .diff import unified_diff
from .rules import TAB, WHITESPACE


def is_space(b: int) -> bool:
    return b in WHITESPACE


def leading_indent(src: bytes) -> Tuple[int, int, int]:
    """
    Classify the leading whitespace run of src.

    Returns (line_start, scan_end, indent):
    - line_start: offset just after the last newline in the run (0 if none)
    - scan_end: offset of the first non-whitespace byte (len(src) if none)
    - indent: number of tabs to emit for the first code line.
      Spaces are ignored unless there are no tabs,
      in which case spaces count as one tab.
    """
    line_start, scan_end = 0, 0
    while scan_end < len(src) and is_space(src[scan_end]):
        if src[scan_end] == ord("\n"):
            line_start = scan_end + 1
        scan_end += 1

    indent = 0
    has_space = False
    for b in src[line_start:scan_end]:
        if b == ord(" "):
            has_space = True
        elif b == ord("\t"):
            indent += 1
    if indent == 0 and has_space:
        indent = 1

    return line_start, scan_end, indent


def format_source(src: bytes) -> bytes:
    """Return src with the first code line's indentation normalized to tabs."""
    line_start, scan_end, indent = leading_indent(src)
    return src[:line_start] + TAB * indent + src[scan_end:]


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def detect_encoding(raw: bytes) -> Optional[str]:
    match = from_bytes(raw).best()
    if match is None:
        return None
    return match.encoding


def decode_for_display(raw: bytes, encoding: Optional[str]) -> str:
    # Last resort: decode with replacement so the report is always renderable
    try:
        return raw.decode(encoding or "utf-8")
    except (LookupError, UnicodeDecodeError):
        return raw.decode("utf-8", errors="replace")


def normalize_conf_bytes(raw: bytes, filename: str, with_diff: bool = False) -> Dict[str, Any]:
    """
    Format one uploaded document.
    Returns a dict matching the API's response envelope.
    """
    formatted = format_source(raw)
    line_start, _, indent = leading_indent(raw)
    encoding = detect_encoding(raw)

    diff_text = None
    if with_diff:
        diff_text = decode_for_display(unified_diff(raw, formatted, filename), encoding)

    return {
        "formatted": {
            "sha256": _sha256_hex(formatted),
            "content_b64": base64.b64encode(formatted).decode("ascii"),
        },
        "report": {
            "changed": formatted != raw,
            "indent_tabs": indent,
            "leading_blank_bytes": line_start,
            "encoding": encoding,
        },
        "diff": diff_text,
    }
