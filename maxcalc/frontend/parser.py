from __future__ import annotations
import logging

from maxcalc.frontend.errors import ParseError
from maxcalc.frontend.lexer import Lexer
from maxcalc.frontend.utils import ParseTree, Token, TokenId, TreeNode, token_chars

log = logging.getLogger(__name__)

# Grammar:
# expression  = addexp, { "#", addexp } ;
# addexp      = mulexp, { add_op, mulexp } ;
# mulexp      = exponentexp, { mul_op, exponentexp } ;
# exponentexp = rootexp, [ "^", exponentexp ] ;
# rootexp     = number | "(", expression, ")" ;
# add_op      = "+" | "-" ;
# mul_op      = "*" | "/" ;
# number      = digit, { digit }, [ ".", { digit } ] | ".", digit, { digit } ;

max_ops = [TokenId.OP_MAX]
add_ops = [TokenId.OP_PLUS, TokenId.OP_MINUS]
mul_ops = [TokenId.OP_MUL, TokenId.OP_DIV]

def look(lexer: Lexer) -> TokenId:
    return lexer.current().token_id

def match(lexer: Lexer, token_id: TokenId) -> Token:
    tok = lexer.current()
    if tok.token_id != token_id:
        if token_id == TokenId.EOLN:
            raise ParseError("Unexpected text after the expression.")
        elif token_id == TokenId.NUMBER:
            raise ParseError("Parse error: Expected a number.")
        raise ParseError(f"Parse error: Expected a {token_chars[token_id]}.")
    lexer.advance()
    return tok

def expression(lexer: Lexer) -> TreeNode:
    tree = addexp(lexer)
    while look(lexer) in max_ops:
        op = match(lexer, look(lexer))
        rhs = addexp(lexer)
        tree = TreeNode(op.value, tree, rhs)
    return tree

def addexp(lexer: Lexer) -> TreeNode:
    tree = mulexp(lexer)
    while look(lexer) in add_ops:
        op = match(lexer, look(lexer))
        rhs = mulexp(lexer)
        tree = TreeNode(op.value, tree, rhs) # LHS of '-' in (a-b)-c is (a-b)
    return tree

def mulexp(lexer: Lexer) -> TreeNode:
    tree = exponentexp(lexer)
    while look(lexer) in mul_ops:
        op = match(lexer, look(lexer))
        rhs = exponentexp(lexer)
        tree = TreeNode(op.value, tree, rhs)
    return tree

def exponentexp(lexer: Lexer) -> TreeNode:
    operands = [rootexp(lexer)]
    ops = []
    while look(lexer) == TokenId.OP_POW:
        ops.append(match(lexer, TokenId.OP_POW))
        operands.append(rootexp(lexer))
    # Fold from the right: RHS of '^' in a^b^c is b^c
    tree = operands.pop()
    while ops:
        tree = TreeNode(ops.pop().value, operands.pop(), tree)
    return tree

def rootexp(lexer: Lexer) -> TreeNode:
    if look(lexer) == TokenId.RBRACE_LEFT:
        match(lexer, TokenId.RBRACE_LEFT)
        tree = expression(lexer)
        match(lexer, TokenId.RBRACE_RIGHT)
    elif look(lexer) == TokenId.NUMBER:
        number = match(lexer, TokenId.NUMBER)
        tree = TreeNode(repr(number.value))
    else:
        raise ParseError("Parse Error: Expected a number or a parenthesis.")
    return tree

def parse(src: str) -> ParseTree:
    """Parse a whole expression string.

    Raises a CalcError (LexError or ParseError) on the first problem; no
    partial tree is ever returned. Parentheses nested deeper than the
    interpreter's recursion limit allows are reported as a ParseError.
    """
    lexer = Lexer(src)
    try:
        tree = ParseTree(expression(lexer))
    except RecursionError:
        raise ParseError("Parse error: Expression nested too deeply.") from None
    match(lexer, TokenId.EOLN)
    log.debug("parsed %r", src)
    return tree
