from __future__ import annotations
from typing import Iterator
import logging
import math
import re

from maxcalc.frontend.errors import LexError
from maxcalc.frontend.utils import Token, TokenId, symbol_map

log = logging.getLogger(__name__)

whitespace = set('\t\n\r ')

# Every delimiter is kept as its own piece, runs of anything else are grouped
delimiter_pattern = re.compile(r'([\t\n\r #+\-*/^()])')
number_pattern = re.compile(r'[0-9]+\.?[0-9]*|\.[0-9]+')
numeric_chars_pattern = re.compile(r'[0-9.]+')

def split_source(src: str) -> Iterator[str]:
    for part in delimiter_pattern.split(src):
        if part:
            yield part

def classify(part: str) -> Token:
    if part in symbol_map:
        return Token(symbol_map[part], part)
    if number_pattern.fullmatch(part):
        value = float(part)
        if math.isinf(value):
            raise LexError("Lexer error: Number out of range")
        return Token(TokenId.NUMBER, value)
    if numeric_chars_pattern.fullmatch(part):
        raise LexError("Lexer error: Illegal format for a number")
    raise LexError(f"Lexer error: Illegal character in '{part}'")

class Lexer:
    """One-token lookahead over an expression string.

    The first token is read on construction, so a bad first token raises
    from the constructor.
    """

    def __init__(self, src: str) -> None:
        self.parts = split_source(src)
        self.token = Token(TokenId.EOLN)
        self.advance()

    def current(self) -> Token:
        return self.token

    def advance(self) -> None:
        for part in self.parts:
            if part in whitespace:
                continue
            self.token = classify(part)
            log.debug("next token = %s", self.token)
            return
        self.token = Token(TokenId.EOLN)
        log.debug("end of input")
