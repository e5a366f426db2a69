# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Numeric evaluation and assignment of leaf values. Evaluation is
# total: domain errors give NaN or inf like in C, never exceptions.
from functools import reduce
from symexpr.exp import (ADD, CONST, LOG, MULTIPLY, NEGATE, POWER, VARIABLE)
import numpy as np

class AssignmentError(Exception):
    def __init__(self, message):
        super().__init__(message)

def leaf_value(e, bindings):
    if e.op == VARIABLE and e.name in bindings:
        return np.asarray(bindings[e.name], dtype = np.float64)
    if e.value is None:
        return np.float64(np.nan)
    return np.float64(e.value)

def eval_exp(e, bindings):
    op = e.op
    if op in (CONST, VARIABLE):
        return leaf_value(e, bindings)
    vals = [eval_exp(o, bindings) for o in e.operands]
    if op == NEGATE:
        return np.negative(vals[0])
    elif op == ADD:
        return reduce(np.add, vals)
    elif op == MULTIPLY:
        return reduce(np.multiply, vals)
    elif op == POWER:
        return np.power(vals[0], vals[1])
    elif op == LOG:
        return np.log(vals[0])
    assert False

def evaluate(e):
    with np.errstate(all = 'ignore'):
        return float(eval_exp(e, {}))

def evaluate_array(e, bindings):
    '''Evaluates e elementwise. The bindings map variable names to
    scalars or arrays and take precedence over the values stored in
    the variables. Arrays are broadcast against each other.'''
    with np.errstate(all = 'ignore'):
        return np.asarray(eval_exp(e, bindings))

def assign(e, value):
    if e.op not in (CONST, VARIABLE):
        raise AssignmentError('Cannot assign value to compound expressions.')
    e.value = float(value)

def variables(e):
    names = []
    def visit(e):
        if e.op == VARIABLE:
            if e.name not in names:
                names.append(e.name)
        for o in e.operands:
            visit(o)
    visit(e)
    return names
