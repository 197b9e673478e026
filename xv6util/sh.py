"""Command-line parser for a small shell: pipes, lists, background, redirection."""

import os
from dataclasses import dataclass, field
from typing import List, Union

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"


class ShellSyntaxError(ValueError):
    """The command line could not be parsed."""


@dataclass
class ExecCmd:
    """Run a program with arguments."""

    argv: List[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run ``cmd`` with descriptor ``fd`` opened on ``file`` with ``mode``."""

    cmd: "Command"
    file: str
    mode: int
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of ``left`` to the input of ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run ``left`` then ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run ``cmd`` in the background."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]

_READ = os.O_RDONLY
_WRITE = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_APPEND = os.O_WRONLY | os.O_CREAT


class _Parser:
    def __init__(self, s):
        self.s = s
        self.pos = 0

    def _skip_space(self):
        while self.pos < len(self.s) and self.s[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        self._skip_space()
        return self.pos < len(self.s) and self.s[self.pos] in toks

    def gettoken(self):
        """Return (kind, text); kind is '' at the end, 'a' for a word, '+' for >>."""
        self._skip_space()
        s = self.s
        start = self.pos
        if self.pos >= len(s):
            kind = ""
        else:
            c = s[self.pos]
            if c in "|();&<":
                kind = c
                self.pos += 1
            elif c == ">":
                kind = ">"
                self.pos += 1
                if self.pos < len(s) and s[self.pos] == ">":
                    kind = "+"
                    self.pos += 1
            else:
                kind = "a"
                while (
                    self.pos < len(s)
                    and s[self.pos] not in WHITESPACE
                    and s[self.pos] not in SYMBOLS
                ):
                    self.pos += 1
        text = s[start:self.pos]
        self._skip_space()
        return kind, text

    def parseline(self):
        cmd = self.parsepipe()
        while self.peek("&"):
            self.gettoken()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.gettoken()
            cmd = ListCmd(cmd, self.parseline())
        return cmd

    def parsepipe(self):
        cmd = self.parseexec()
        if self.peek("|"):
            self.gettoken()
            cmd = PipeCmd(cmd, self.parsepipe())
        return cmd

    def parseredirs(self, cmd):
        while self.peek("<>"):
            tok, _ = self.gettoken()
            kind, word = self.gettoken()
            if kind != "a":
                raise ShellSyntaxError("missing file for redirection")
            if tok == "<":
                cmd = RedirCmd(cmd, word, _READ, 0)
            elif tok == ">":
                cmd = RedirCmd(cmd, word, _WRITE, 1)
            else:
                cmd = RedirCmd(cmd, word, _APPEND, 1)
        return cmd

    def parseblock(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.gettoken()
        cmd = self.parseline()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.gettoken()
        return self.parseredirs(cmd)

    def parseexec(self):
        if self.peek("("):
            return self.parseblock()
        exe = ExecCmd()
        ret = self.parseredirs(exe)
        while not self.peek("|)&;"):
            kind, word = self.gettoken()
            if kind == "":
                break
            if kind != "a":
                raise ShellSyntaxError("syntax")
            exe.argv.append(word)
            if len(exe.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.parseredirs(ret)
        return ret


def parse_cmd(s):
    """Parse a command line into a command tree."""
    parser = _Parser(s)
    cmd = parser.parseline()
    parser.peek("")
    if parser.pos != len(s):
        raise ShellSyntaxError(f"syntax: leftovers: {s[parser.pos:]}")
    return cmd