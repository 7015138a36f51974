"""Tokenizer and parser for the shell's command language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

MAXARGS = 10
WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"
WORD = "word"

_SINGLE = "|();&<"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message, leftovers=None):
        super().__init__(message)
        self.leftovers = leftovers


class RedirMode(Enum):
    """How a redirected file is opened."""

    READ = "<"
    WRITE = ">"
    APPEND = ">>"


@dataclass
class ExecCmd:
    """Run a program with arguments."""

    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run cmd with file descriptor fd redirected to file."""

    cmd: Command
    file: str
    mode: RedirMode
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of left to the input of right."""

    left: Command
    right: Command


@dataclass
class ListCmd:
    """Run left, wait for it, then run right."""

    left: Command
    right: Command


@dataclass
class BackCmd:
    """Run cmd in the background."""

    cmd: Command


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]

_MODES = {"<": RedirMode.READ, ">": RedirMode.WRITE, ">>": RedirMode.APPEND}


class _Parser:
    def __init__(self, line):
        self.text = line.split("\0", 1)[0]
        self.pos = 0

    def _skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self):
        self._skip_space()
        return self.pos >= len(self.text)

    def peek(self, toks):
        self._skip_space()
        return self.pos < len(self.text) and self.text[self.pos] in toks

    def next_token(self):
        """Consume and return (kind, text), or None at the end of the line."""
        self._skip_space()
        text = self.text
        if self.pos >= len(text):
            return None
        c = text[self.pos]
        if c in _SINGLE:
            self.pos += 1
            token = (c, c)
        elif c == ">":
            self.pos += 1
            if self.pos < len(text) and text[self.pos] == ">":
                self.pos += 1
                token = (">>", ">>")
            else:
                token = (">", ">")
        else:
            start = self.pos
            while self.pos < len(text) and text[self.pos] not in WHITESPACE + SYMBOLS:
                self.pos += 1
            token = (WORD, text[start:self.pos])
        self._skip_space()
        return token

    def parse_line(self):
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.next_token()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.next_token()
            cmd = ListCmd(cmd, self.parse_line())
        return cmd

    def parse_pipe(self):
        cmd = self.parse_exec()
        if self.peek("|"):
            self.next_token()
            cmd = PipeCmd(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self, cmd):
        while self.peek("<>"):
            kind, _ = self.next_token()
            target = self.next_token()
            if target is None or target[0] != WORD:
                raise ShellSyntaxError("missing file for redirection")
            mode = _MODES[kind]
            cmd = RedirCmd(cmd, target[1], mode, 0 if mode is RedirMode.READ else 1)
        return cmd

    def parse_block(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.next_token()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.next_token()
        return self.parse_redirs(cmd)

    def parse_exec(self):
        if self.peek("("):
            return self.parse_block()
        exec_cmd = ExecCmd()
        result = self.parse_redirs(exec_cmd)
        while not self.peek("|)&;"):
            token = self.next_token()
            if token is None:
                break
            if token[0] != WORD:
                raise ShellSyntaxError("syntax")
            exec_cmd.argv.append(token[1])
            if len(exec_cmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            result = self.parse_redirs(result)
        return result


def tokenize(line):
    """Split a command line into (kind, text) tokens.

    kind is "word" for words and the symbol itself otherwise
    ("|", "(", ")", ";", "&", "<", ">" or ">>").
    """
    parser = _Parser(line)
    tokens = []
    while (token := parser.next_token()) is not None:
        tokens.append(token)
    return tokens


def parse_command(line):
    """Parse a command line into a command tree."""
    parser = _Parser(line)
    cmd = parser.parse_line()
    if not parser.at_end():
        raise ShellSyntaxError("syntax", leftovers=parser.text[parser.pos:])
    return cmd