"""Command-line parsing for the shell: tokens and the command tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple, Union

from fogos.params import OpenFlag

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"
MAXARGS = 10


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message: str, leftover: str | None = None) -> None:
        super().__init__(message)
        self.leftover = leftover


class TokenKind(str, enum.Enum):
    """Kinds of lexical token on a command line."""

    PIPE = "|"
    LPAREN = "("
    RPAREN = ")"
    SEMI = ";"
    AMP = "&"
    IN = "<"
    OUT = ">"
    APPEND = ">>"
    WORD = "word"


class Token(NamedTuple):
    kind: TokenKind
    text: str


@dataclass
class ExecCmd:
    """Run a program with arguments; ``argv[0]`` names the program."""

    argv: list[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run ``cmd`` with descriptor ``fd`` reopened on ``file``."""

    cmd: "Command"
    file: str
    mode: OpenFlag
    fd: int


@dataclass
class PipeCmd:
    """Run ``left`` with its output piped into ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run ``left`` to completion, then ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run ``cmd`` in the background."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]

_SINGLE = {"|", "(", ")", ";", "&", "<"}

_REDIRECTIONS = {
    TokenKind.IN: (OpenFlag.RDONLY, 0),
    TokenKind.OUT: (OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC, 1),
    TokenKind.APPEND: (OpenFlag.WRONLY | OpenFlag.CREATE, 1),
}


def _terminate(s: str) -> str:
    return s.split("\0", 1)[0]


class _Lexer:
    def __init__(self, s: str) -> None:
        self.s = s
        self.pos = 0

    def _skip(self) -> None:
        while self.pos < len(self.s) and self.s[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks: str) -> bool:
        """Skip blanks; true if the next character is one of ``toks``."""
        self._skip()
        return self.pos < len(self.s) and self.s[self.pos] in toks

    def next(self) -> Token | None:
        self._skip()
        if self.pos >= len(self.s):
            return None
        start = self.pos
        c = self.s[self.pos]
        if c in _SINGLE:
            self.pos += 1
            kind = TokenKind(c)
        elif c == ">":
            self.pos += 1
            if self.pos < len(self.s) and self.s[self.pos] == ">":
                self.pos += 1
                kind = TokenKind.APPEND
            else:
                kind = TokenKind.OUT
        else:
            while (
                self.pos < len(self.s)
                and self.s[self.pos] not in WHITESPACE
                and self.s[self.pos] not in SYMBOLS
            ):
                self.pos += 1
            kind = TokenKind.WORD
        text = self.s[start:self.pos]
        self._skip()
        return Token(kind, text)

    def rest(self) -> str:
        return self.s[self.pos:]


def tokenize(s: str) -> list[Token]:
    """Split a command line into tokens."""
    lexer = _Lexer(_terminate(s))
    tokens = []
    while (tok := lexer.next()) is not None:
        tokens.append(tok)
    return tokens


class _Parser:
    def __init__(self, s: str) -> None:
        self.lex = _Lexer(s)

    def line(self) -> Command:
        cmd = self.pipe()
        while self.lex.peek("&"):
            self.lex.next()
            cmd = BackCmd(cmd)
        if self.lex.peek(";"):
            self.lex.next()
            cmd = ListCmd(cmd, self.line())
        return cmd

    def pipe(self) -> Command:
        cmd = self.exec()
        if self.lex.peek("|"):
            self.lex.next()
            cmd = PipeCmd(cmd, self.pipe())
        return cmd

    def redirs(self, cmd: Command) -> Command:
        while self.lex.peek("<>"):
            tok = self.lex.next()
            target = self.lex.next()
            if target is None or target.kind is not TokenKind.WORD:
                raise ShellSyntaxError("missing file for redirection")
            assert tok is not None
            mode, fd = _REDIRECTIONS[tok.kind]
            cmd = RedirCmd(cmd, target.text, mode, fd)
        return cmd

    def block(self) -> Command:
        if not self.lex.peek("("):
            raise ShellSyntaxError("parseblock")
        self.lex.next()
        cmd = self.line()
        if not self.lex.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.lex.next()
        return self.redirs(cmd)

    def exec(self) -> Command:
        if self.lex.peek("("):
            return self.block()
        node = ExecCmd()
        cmd = self.redirs(node)
        while not self.lex.peek("|)&;"):
            tok = self.lex.next()
            if tok is None:
                break
            if tok.kind is not TokenKind.WORD:
                raise ShellSyntaxError("syntax")
            node.argv.append(tok.text)
            if len(node.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            cmd = self.redirs(cmd)
        return cmd


def parse_command(s: str) -> Command:
    """Parse a whole command line into a command tree."""
    parser = _Parser(_terminate(s))
    cmd = parser.line()
    parser.lex.peek("")
    rest = parser.lex.rest()
    if rest:
        raise ShellSyntaxError("syntax", leftover=rest)
    return cmd