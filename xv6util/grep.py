"""A simple grep supporting the ^ . * $ operators."""

import sys


def _here(re, i, text, j):
    while True:
        if i == len(re):
            return True
        if i + 1 < len(re) and re[i + 1] == "*":
            return _star(re[i], re, i + 2, text, j)
        if re[i] == "$" and i + 1 == len(re):
            return j == len(text)
        if j < len(text) and (re[i] == "." or re[i] == text[j]):
            i += 1
            j += 1
            continue
        return False


def _star(c, re, i, text, j):
    while True:
        if _here(re, i, text, j):
            return True
        if not (j < len(text) and (text[j] == c or c == ".")):
            return False
        j += 1


def match(re, text):
    """True if ``re`` matches anywhere in ``text``."""
    if re.startswith("^"):
        return _here(re, 1, text, 0)
    return any(_here(re, 0, text, j) for j in range(len(text) + 1))


def matchhere(re, text):
    """True if ``re`` matches at the beginning of ``text``."""
    return _here(re, 0, text, 0)


def matchstar(c, re, text):
    """True if ``c*`` followed by ``re`` matches at the beginning of ``text``."""
    return _star(c, re, 0, text, 0)


def grep(pattern, stream, out):
    """Write each newline-terminated line of ``stream`` matching ``pattern`` to ``out``.

    A final line without a newline is not examined.
    """
    for line in stream:
        if not line.endswith("\n"):
            break
        if match(pattern, line[:-1]):
            out.write(line)


def main(argv=None):
    """Run grep with ``argv`` (arguments after the program name); return the status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, files = args[0], args[1:]
    if not files:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for path in files:
        try:
            f = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            return 1
        with f:
            grep(pattern, f, sys.stdout)
    return 0