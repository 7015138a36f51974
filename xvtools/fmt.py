"""A small printf understanding %d %l %x %p %s %c and %%."""

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _to_base(value, base):
    out = []
    while True:
        value, digit = divmod(value, base)
        out.append(_DIGITS[digit])
        if value == 0:
            break
    return "".join(reversed(out))


def _int32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _signed_decimal(value):
    value = _int32(value)
    if value < 0:
        return "-" + _to_base(-value, 10)
    return _to_base(value, 10)


def _string(value):
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).split(b"\0", 1)[0].decode("latin-1")
    return str(value)


def _char(value):
    if isinstance(value, str):
        return value[:1]
    return chr(value & 0xFF)


_CONVERSIONS = {
    "d": _signed_decimal,
    "l": lambda v: _to_base(v & _MASK64, 10),
    "x": lambda v: _to_base(v & _MASK32, 16),
    "p": lambda v: "0x" + _to_base(v & _MASK64, 16).rjust(16, "0"),
    "s": _string,
    "c": _char,
}


def format(fmt, *args):
    """Render fmt with args and return the resulting text."""
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    out = []
    pending = False
    for ch in fmt:
        if not pending:
            if ch == "%":
                pending = True
            else:
                out.append(ch)
            continue
        pending = False
        convert = _CONVERSIONS.get(ch)
        if convert is not None:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{ch}") from None
            out.append(convert(value))
        elif ch == "%":
            out.append("%")
        else:
            # Unknown conversion: echo it so it stands out.
            out.append("%" + ch)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Render fmt with args and write the text to stream."""
    stream.write(format(fmt, *args))