# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Symbolic differentiation. The rules build raw trees which are
# simplified once at the end.
from symexpr.exp import (ADD, CONST, LOG, MULTIPLY, NEGATE, POWER, VARIABLE,
                         construct_add, construct_inverse, construct_log,
                         construct_multiply, construct_negate,
                         construct_one, construct_power, construct_zero)
from symexpr.simplify import simplify

class DifferentiationError(Exception):
    def __init__(self, message):
        super().__init__(message)

def is_same(y, x):
    return simplify(construct_add([y, construct_negate(x)])).is_zero()

def diff_multiply(y, x):
    fs = y.operands
    terms = []
    for i, f in enumerate(fs):
        operands = fs[:i] + [diff(f, x)] + fs[i + 1:]
        terms.append(construct_multiply(operands))
    return construct_add(terms)

def diff_power(y, x):
    # (f^g)' = f^g * (f' * g / f + g' * log(f))
    f, g = y.operands
    fp = simplify(diff(f, x))
    gp = simplify(diff(g, x))
    terms = []
    if not fp.is_zero():
        terms.append(construct_multiply([fp, g, construct_inverse(f)]))
    if not gp.is_zero():
        terms.append(construct_multiply([gp, construct_log(f)]))
    return construct_multiply([construct_power(f, g), construct_add(terms)])

def diff(y, x):
    if is_same(y, x):
        return construct_one()
    op = y.op
    if op in (CONST, VARIABLE):
        return construct_zero()
    elif op == NEGATE:
        return construct_negate(diff(y.operands[0], x))
    elif op == ADD:
        return construct_add([diff(o, x) for o in y.operands])
    elif op == MULTIPLY:
        return diff_multiply(y, x)
    elif op == POWER:
        return diff_power(y, x)
    elif op == LOG:
        f = y.operands[0]
        return construct_multiply([diff(f, x), construct_inverse(f)])
    assert False

def differentiate(y, x):
    '''Derivative of y with respect to x, simplified.'''
    if x.is_const():
        err = 'Cannot differentiate with respect to the constant %s.'
        raise DifferentiationError(err % x)
    return simplify(diff(y, x))
