# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Factorizations used by the merge stage of the simplifier. They are
# not generally applicable, only good enough for collecting like terms
# and like factors.
from symexpr.exp import (ADD, CONST, LOG, MULTIPLY, NEGATE, POWER, VARIABLE,
                         construct_const, construct_multiply, construct_one,
                         construct_zero)

def split_constants(operands):
    coeff = 1.0
    non_consts = []
    for o in operands:
        if o.is_const():
            coeff *= o.value
        else:
            non_consts.append(o)
    return coeff, non_consts

def decompose2(e):
    '''Splits e into (coeff, base) such that e == coeff * base.'''
    op = e.op
    if op == CONST:
        return e, construct_one()
    elif op in (ADD, POWER, VARIABLE, LOG):
        return construct_one(), e
    elif op == NEGATE:
        coeff, base = decompose2(e.operands[0])
        return construct_const(-coeff.value), base
    elif op == MULTIPLY:
        coeff, non_consts = split_constants(e.operands)
        return construct_const(coeff), construct_multiply(non_consts)
    assert False

def decompose3(e):
    '''Splits e into (coeff, base, expo) such that e == coeff * base ^
    expo.'''
    op = e.op
    if op == CONST:
        return e, construct_zero(), construct_zero()
    elif op in (VARIABLE, LOG, ADD):
        return construct_one(), e, construct_one()
    elif op == NEGATE:
        coeff, base, expo = decompose3(e.operands[0])
        return construct_const(-coeff.value), base, expo
    elif op == MULTIPLY:
        coeff, non_consts = split_constants(e.operands)
        return (construct_const(coeff),
                construct_multiply(non_consts),
                construct_one())
    elif op == POWER:
        base, expo = e.operands
        return construct_one(), base, expo
    assert False
