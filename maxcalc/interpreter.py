from __future__ import annotations
import math

from maxcalc.frontend.parser import parse
from maxcalc.frontend.utils import ParseTree, TreeNode

# Python floats raise where IEEE-754 doubles don't (x/0, pow overflow,
# negative base with fractional exponent); these helpers return the IEEE result.

def divide(x: float, y: float) -> float:
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y

def is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1

def power(x: float, y: float) -> float:
    if x == 0 and y < 0:
        negative = math.copysign(1.0, x) < 0 and is_odd_integer(y)
        return -math.inf if negative else math.inf
    if abs(x) == 1 and math.isinf(y): # java.lang.Math.pow, not C99 pow
        return math.nan
    try:
        return math.pow(x, y)
    except OverflowError:
        negative = x < 0 and is_odd_integer(y)
        return -math.inf if negative else math.inf
    except ValueError: # negative base, fractional exponent
        return math.nan

def maximum(x: float, y: float) -> float:
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == y == 0:
        return x if math.copysign(1.0, x) > 0 else y
    return x if x > y else y

op_map = {
    '^': power,
    '*': lambda x, y: x * y,
    '/': divide,
    '+': lambda x, y: x + y,
    '-': lambda x, y: x - y,
    '#': maximum,
}

def evaluate(tree: ParseTree|TreeNode) -> float:
    if isinstance(tree, ParseTree):
        tree = tree.root
    values = []
    stack = [(tree, False)]

    # Post-order walk; operands are visited left first so lhs is pushed first
    while stack:
        node, operands_done = stack.pop()
        if node.is_leaf():
            values.append(float(node.symbol))
        elif operands_done:
            rhs = values.pop()
            lhs = values.pop()
            values.append(op_map[node.symbol](lhs, rhs))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return values.pop()

def interpret(src: str) -> float:
    return evaluate(parse(src))
