"""Count lines, words and characters."""

import sys
from dataclasses import dataclass

# A NUL byte also ends a word.
_SPACE = frozenset(" \r\t\n\v\0")
_CHUNK = 512


@dataclass
class Counts:
    """Line, word and character totals of one input."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def count(stream):
    """Count the lines, words and characters read from stream.

    Bytes are counted one character per byte.
    """
    counts = Counts()
    inword = False
    while chunk := stream.read(_CHUNK):
        if isinstance(chunk, (bytes, bytearray)):
            chunk = bytes(chunk).decode("latin-1")
        for ch in chunk:
            counts.chars += 1
            if ch == "\n":
                counts.lines += 1
            if ch in _SPACE:
                inword = False
            elif not inword:
                counts.words += 1
                inword = True
    return counts


def _report(stream, name):
    try:
        counts = count(stream)
    except OSError:
        print("wc: read error")
        return False
    print(f"{counts.lines} {counts.words} {counts.chars} {name}")
    return True


def main(argv=None):
    """Report counts for each named file, or for standard input."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        return 0 if _report(stdin, "") else 1
    for path in argv:
        try:
            stream = open(path, "rb")
        except OSError:
            print(f"wc: cannot open {path}")
            return 1
        with stream:
            if not _report(stream, path):
                return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())