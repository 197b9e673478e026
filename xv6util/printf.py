"""A minimal printf understanding %d, %l, %x, %p, %s, %c and %%."""

import sys

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _printint(xx, base, sgn):
    value = xx & _MASK32
    neg = sgn and value >= 1 << 31
    x = (1 << 32) - value if neg else value
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    if neg:
        digits.append("-")
    return "".join(reversed(digits))


def _printptr(x):
    return "0x" + format(x & _MASK64, "016X")


def _string(s):
    if s is None:
        return "(null)"
    if isinstance(s, (bytes, bytearray)):
        s = bytes(s).decode("latin-1")
    return str(s).split("\0", 1)[0]


def _char(c):
    if isinstance(c, str):
        return c
    return chr(c & 0xFF)


def format_string(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the text.

    Integers are taken as 32-bit values, as the conversions do; an unknown
    conversion is printed as is, percent sign included.
    """
    values = iter(args)

    def arg():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        pending = False
        if c == "d":
            out.append(_printint(arg(), 10, True))
        elif c == "l":
            out.append(_printint(arg(), 10, False))
        elif c == "x":
            out.append(_printint(arg(), 16, False))
        elif c == "p":
            out.append(_printptr(arg()))
        elif c == "s":
            out.append(_string(arg()))
        elif c == "c":
            out.append(_char(arg()))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write formatted text to ``stream``."""
    stream.write(format_string(fmt, *args))


def printf(fmt, *args):
    """Write formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)