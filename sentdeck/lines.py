"""
Line splitting and trimming for presentation source text.

Only ``\\n`` (optionally preceded by ``\\r``) ends a line. ``str.splitlines``
also breaks on form feeds, ``\\x1c``-``\\x1e``, ``\\x85`` and U+2028/U+2029,
which are ordinary characters here, and a bare ``str.strip()`` removes
``\\x1c``-``\\x1f``, which aren't whitespace.
"""
from typing import List

# Characters with the Unicode White_Space property
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_lines(text: str) -> List[str]:
    """
    Split on ``\\n``, dropping one ``\\r`` before each break.

    A trailing newline does not produce a final empty line.
    """
    pieces = text.split("\n")
    # Every piece but the last was followed by a newline
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def trim_end(text: str) -> str:
    return text.rstrip(WHITESPACE)


def trim(text: str) -> str:
    return text.strip(WHITESPACE)
