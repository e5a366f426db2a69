# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Command line front end. Expressions are written in Python syntax and
# read with the ast module so that I don't have to write my own
# parser. Only the construction functions and operators of Expression
# are used to build them.
"""Symbolic algebra

Usage:
    symexpr [options] simplify <expr>
    symexpr [options] diff <expr> <var>
    symexpr [options] eval <expr> [<binding>...]

Options:
    -h --help               show this screen
    -v --verbose            print every rewrite step
"""
from ast import (Add, BinOp, Call, Constant, Div, Mult, Name, Pow, Sub,
                 UAdd, UnaryOp, USub, parse)
from docopt import docopt
from symexpr import (ConsistencyError, ConvergenceError,
                     DifferentiationError, simplify)
from symexpr.expression import const, log, variable
import sys

BINOPS = {
    Add : lambda l, r: l + r,
    Sub : lambda l, r: l - r,
    Mult : lambda l, r: l * r,
    Div : lambda l, r: l / r,
    Pow : lambda l, r: l ** r
}

def parse_expr(expr):
    return parse(expr, mode = 'eval').body

def build(tree, names):
    '''Builds an expression from a Python ast. names maps variable
    names to the variables already created so that each name is one
    variable.'''
    tp = type(tree)
    if tp == BinOp:
        fun = BINOPS.get(type(tree.op))
        if not fun:
            err = f'Unsupported operator: {type(tree.op).__name__}'
            raise ValueError(err)
        return fun(build(tree.left, names), build(tree.right, names))
    elif tp == UnaryOp:
        operand = build(tree.operand, names)
        if type(tree.op) == USub:
            return -operand
        elif type(tree.op) == UAdd:
            return operand
        raise ValueError(f'Unsupported operator: {type(tree.op).__name__}')
    elif tp == Constant:
        v = tree.value
        if type(v) not in (int, float):
            raise ValueError(f'Unsupported constant: {v!r}')
        return const(v)
    elif tp == Name:
        if tree.id not in names:
            names[tree.id] = variable(tree.id)
        return names[tree.id]
    elif tp == Call:
        if type(tree.func) != Name or tree.func.id != 'log':
            raise ValueError('Only log() can be called.')
        if len(tree.args) != 1 or tree.keywords:
            raise ValueError('log() takes exactly one argument.')
        return log(build(tree.args[0], names))
    raise ValueError(f'Unsupported syntax: {tp.__name__}')

def parse_binding(binding):
    name, sep, value = binding.partition('=')
    if not sep or not name.strip():
        err = f'Bindings must look like name=value, not {binding!r}.'
        raise ValueError(err)
    return name.strip(), float(value)

def run(args):
    names = {}
    expr = build(parse_expr(args['<expr>']), names)
    if args['diff']:
        x = build(parse_expr(args['<var>']), names)
        return expr.differentiate(x)
    elif args['eval']:
        for name, value in map(parse_binding, args['<binding>']):
            if name not in names:
                raise ValueError(f'Unknown variable: {name}')
            names[name].assign(value)
        return expr.evaluate()
    return expr

def main(argv = None):
    args = docopt(__doc__, argv = argv)
    simplify.VERBOSE = args['--verbose']
    try:
        print('==>', run(args))
    except (ValueError, SyntaxError, ConsistencyError,
            ConvergenceError, DifferentiationError) as e:
        print('error: %s' % e)
        sys.exit(1)

if __name__ == '__main__':
    main()
