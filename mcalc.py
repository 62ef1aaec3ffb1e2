#!/usr/bin/env python3

import argparse as arg
import logging
import sys
from maxcalc.frontend.errors import CalcError
from maxcalc.frontend.parser import parse
from maxcalc.interpreter import evaluate

log = logging.getLogger('mcalc')

def run(src: str, args) -> bool:
    try:
        tree = parse(src)
    except CalcError as err:
        print(err.message, file=sys.stderr)
        return False

    if args.tree:
        print(tree, end='')
    print(evaluate(tree))
    return True

def repl(args) -> None:
    try:
        while (src := input("expr: ")):
            run(src, args)
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='mcalc',
        description='Evaluates arithmetic expressions with + - * / ^ and the # (maximum) operator',
        epilog='Version 0.1.0')

    parser.add_argument('expressions', metavar='EXPR', nargs='*',
                        help='expressions to evaluate; reads from stdin when omitted')
    parser.add_argument('-t', '--tree', dest='tree', action='store_true', default=False,
                        help='print the parse tree before each result')
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False,
                        help='log the token stream and parser progress')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    if not args.expressions:
        repl(args)
        return 0

    failures = [src for src in args.expressions if not run(src, args)]
    if failures:
        log.debug("%d of %d expressions failed", len(failures), len(args.expressions))
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
