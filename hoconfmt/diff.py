from __future__ import annotations

import difflib
import os

from .rules import DIFF_CONTEXT_LINES


def unified_diff(a: bytes, b: bytes, name: str) -> bytes:
    """
    Unified diff of a against b, labelled a/name and b/name.

    Lines keep their original endings, so CR bytes show up in the output
    exactly as they are in the inputs. Returns b"" when a == b.
    """
    if a == b:
        return b""

    lines = difflib.diff_bytes(
        difflib.unified_diff,
        a.splitlines(keepends=True),
        b.splitlines(keepends=True),
        fromfile=b"a/" + os.fsencode(name),
        tofile=b"b/" + os.fsencode(name),
        lineterm=b"\n",
        n=DIFF_CONTEXT_LINES,
    )

    out = bytearray()
    for line in lines:
        out += line
        # a last line without a newline would run into the next hunk line
        if not line.endswith(b"\n"):
            out += b"\n\\ No newline at end of file\n"
    return bytes(out)
