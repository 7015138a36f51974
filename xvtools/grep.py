"""A simple grep supporting the ^ . * $ operators."""

import sys


def _cstr(s):
    return s.split("\0", 1)[0]


def _matchhere(pat, pi, text, ti):
    while True:
        if pi == len(pat):
            return True
        if pi + 1 < len(pat) and pat[pi + 1] == "*":
            return _matchstar(pat[pi], pat, pi + 2, text, ti)
        if pat[pi] == "$" and pi + 1 == len(pat):
            return ti == len(text)
        if ti < len(text) and pat[pi] in (".", text[ti]):
            pi += 1
            ti += 1
            continue
        return False


def _matchstar(c, pat, pi, text, ti):
    while True:
        if _matchhere(pat, pi, text, ti):
            return True
        if ti < len(text) and (text[ti] == c or c == "."):
            ti += 1
        else:
            return False


def match(pattern, text):
    """Return True if pattern matches somewhere in text."""
    pat, text = _cstr(pattern), _cstr(text)
    if pat.startswith("^"):
        return _matchhere(pat, 1, text, 0)
    return any(_matchhere(pat, 0, text, start) for start in range(len(text) + 1))


def grep(pattern, stream):
    """Yield the newline-terminated lines of stream that match pattern.

    The stream may yield text or bytes; bytes are matched as Latin-1.
    A final line with no newline is not examined.
    """
    if isinstance(pattern, (bytes, bytearray)):
        pattern = bytes(pattern).decode("latin-1")
    for line in stream:
        binary = isinstance(line, (bytes, bytearray))
        newline = b"\n" if binary else "\n"
        if not line.endswith(newline):
            continue
        body = line[:-1]
        if binary:
            body = bytes(body).decode("latin-1")
        if match(pattern, body):
            yield line


def _emit(lines):
    sys.stdout.flush()
    out = getattr(sys.stdout, "buffer", None)
    for line in lines:
        if out is None:
            sys.stdout.write(line.decode("latin-1"))
        else:
            out.write(line)
    if out is not None:
        out.flush()


def main(argv=None):
    """Search files, or standard input, for lines matching a pattern."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, *paths = argv
    if not paths:
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        _emit(grep(pattern, stdin))
        return 0
    for path in paths:
        try:
            stream = open(path, "rb")
        except OSError:
            print(f"grep: cannot open {path}")
            return 1
        with stream:
            _emit(grep(pattern, stream))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())