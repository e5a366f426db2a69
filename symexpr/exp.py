# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Expression nodes. Nodes form a DAG: the same node may be the operand
# of several parents. Compound nodes are never changed after
# construction, only the value of a constant or variable leaf is.
from symexpr.numeric import is_nearly_equal

CONST = 'const'
VARIABLE = 'var'
NEGATE = 'neg'
ADD = 'add'
MULTIPLY = 'mul'
POWER = 'pow'
LOG = 'log'

OPERATORS = (CONST, VARIABLE, NEGATE, ADD, MULTIPLY, POWER, LOG)

class ConsistencyError(Exception):
    def __init__(self, message):
        super().__init__(message)

class Exp:
    def __init__(self, op, operands = (), name = None, value = None):
        self.op = op
        self.operands = list(operands)
        self.name = name
        self.value = value
        self.check_consistency()

    def check_consistency(self):
        op = self.op
        n_operands = len(self.operands)
        if op not in OPERATORS:
            raise ConsistencyError('Unknown operator `%s`.' % op)
        if any(o is None for o in self.operands):
            raise ConsistencyError('NULL operand was given.')
        if op in (CONST, VARIABLE):
            if n_operands:
                err = '%s expression must not have operands.'
                raise ConsistencyError(err % op.upper())
            if op == CONST and self.value is None:
                raise ConsistencyError('CONST expression must have a value.')
            if op == VARIABLE and not self.name:
                raise ConsistencyError('VARIABLE expression must have a name.')
            return
        if self.value is not None:
            err = '%s expression must not have a value.'
            raise ConsistencyError(err % op.upper())
        if op in (NEGATE, LOG) and n_operands != 1:
            err = '%s expression must have exactly one operand.'
            raise ConsistencyError(err % op.upper())
        if op == POWER and n_operands != 2:
            raise ConsistencyError('POW expression must have two operands.')
        if op in (ADD, MULTIPLY) and n_operands < 2:
            err = '%s expression must have at least two operands.'
            raise ConsistencyError(err % op.upper())
        if op == LOG:
            o = self.operands[0]
            if o.is_const() and not o.is_positive():
                err = 'Operand of LOG expression must be greater than zero.'
                raise ConsistencyError(err)

    def is_const(self):
        return self.op == CONST

    def is_zero(self):
        return self.is_const() and is_nearly_equal(self.value, 0.0)

    def is_one(self):
        return self.is_const() and is_nearly_equal(self.value, 1.0)

    def is_positive(self):
        return self.is_const() and not self.is_zero() and self.value > 0.0

    def is_negative(self):
        return self.is_const() and not self.is_zero() and self.value < 0.0

    def __str__(self):
        from symexpr.printer import format
        return format(self)

    def __repr__(self):
        if self.op == CONST:
            return 'Exp(%s, %r)' % (self.op, self.value)
        if self.op == VARIABLE:
            return 'Exp(%s, %r, %r)' % (self.op, self.name, self.value)
        return 'Exp(%s, %s)' % (self.op, self.operands)

def construct_const(c):
    return Exp(CONST, value = float(c))

def construct_zero():
    return construct_const(0)

def construct_one():
    return construct_const(1)

def construct_variable(name, c = None):
    return Exp(VARIABLE, name = name, value = None if c is None else float(c))

def construct_negate(o):
    return Exp(NEGATE, [o])

def construct_add(ops):
    ops = list(ops)
    if not ops:
        return construct_zero()
    elif len(ops) == 1:
        return ops[0]
    return Exp(ADD, ops)

def construct_multiply(ops):
    ops = list(ops)
    if not ops:
        return construct_one()
    elif len(ops) == 1:
        return ops[0]
    return Exp(MULTIPLY, ops)

def construct_power(base, expo):
    return Exp(POWER, [base, expo])

def construct_inverse(o):
    return construct_power(o, construct_const(-1))

def construct_log(o):
    return Exp(LOG, [o])

def rebuild(e, operands):
    '''Same operator as e but new operands. Leaves are returned as is.'''
    if not e.operands:
        return e
    if all(a is b for a, b in zip(e.operands, operands)) \
       and len(operands) == len(e.operands):
        return e
    return Exp(e.op, operands)
