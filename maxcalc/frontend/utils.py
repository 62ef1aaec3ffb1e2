from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto

class TokenId(Enum):
    NUMBER = auto()
    OP_MAX = auto()
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    OP_POW = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()

    # End of input, never backed by source text
    EOLN = auto()

symbol_map = {
    '#': TokenId.OP_MAX,
    '+': TokenId.OP_PLUS,
    '-': TokenId.OP_MINUS,
    '*': TokenId.OP_MUL,
    '/': TokenId.OP_DIV,
    '^': TokenId.OP_POW,
    '(': TokenId.RBRACE_LEFT,
    ')': TokenId.RBRACE_RIGHT,
}

# Inverse of symbol_map, used to report what the parser expected
token_chars = {token_id: char for char, token_id in symbol_map.items()}

class Token:
    def __init__(self, token_id: TokenId, value=None) -> None:
        self.token_id = token_id
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.token_id == other.token_id and self.value == other.value

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value})'

    def __str__(self) -> str:
        return f'({self.token_id}, {self.value})'

@dataclass(frozen=True)
class TreeNode:
    symbol: str
    left: TreeNode|None = None
    right: TreeNode|None = None

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            raise ValueError(f"Node '{self.symbol}' must have zero or two children")

    def __str__(self) -> str:
        ret = ""
        stack = [(self, 0)]

        while stack:
            node, level = stack.pop()
            ret += "\t" * level + node.symbol + "\n"
            if not node.is_leaf():
                stack.append((node.right, level + 1))
                stack.append((node.left, level + 1))
        return ret

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

class ParseTree:
    """Successful parse of a whole input string."""

    def __init__(self, root: TreeNode) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f'ParseTree({self.root!r})'

    def __str__(self) -> str:
        return str(self.root)
