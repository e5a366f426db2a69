# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# User facing expressions. Every operator builds a raw node and
# simplifies it right away, so an Expression always holds a canonical
# node.
from math import isnan
from numbers import Number
from symexpr.diff import differentiate
from symexpr.evaluate import assign, evaluate, evaluate_array, variables
from symexpr.exp import (construct_add, construct_const, construct_inverse,
                         construct_log, construct_multiply, construct_negate,
                         construct_power, construct_variable)
from symexpr.numeric import is_nearly_equal
from symexpr.printer import format
from symexpr.simplify import simplify

def to_exp(o):
    if isinstance(o, Expression):
        return o.exp
    return construct_const(o)

class Expression:
    def __init__(self, exp):
        self.exp = exp

    # Arithmetic
    def __neg__(self):
        return Expression(simplify(construct_negate(self.exp)))

    def __pos__(self):
        return self

    def __add__(self, o):
        if not isinstance(o, (Expression, Number)):
            return NotImplemented
        return Expression(simplify(construct_add([self.exp, to_exp(o)])))

    def __radd__(self, o):
        if not isinstance(o, Number):
            return NotImplemented
        return const(o) + self

    def __sub__(self, o):
        if not isinstance(o, (Expression, Number)):
            return NotImplemented
        return self + (-as_expression(o))

    def __rsub__(self, o):
        if not isinstance(o, Number):
            return NotImplemented
        return const(o) - self

    def __mul__(self, o):
        if not isinstance(o, (Expression, Number)):
            return NotImplemented
        exp = construct_multiply([self.exp, to_exp(o)])
        return Expression(simplify(exp))

    def __rmul__(self, o):
        if not isinstance(o, Number):
            return NotImplemented
        return const(o) * self

    def __truediv__(self, o):
        if not isinstance(o, (Expression, Number)):
            return NotImplemented
        exp = construct_multiply([self.exp, construct_inverse(to_exp(o))])
        return Expression(simplify(exp))

    def __rtruediv__(self, o):
        if not isinstance(o, Number):
            return NotImplemented
        return const(o) / self

    def __pow__(self, o):
        if not isinstance(o, (Expression, Number)):
            return NotImplemented
        return Expression(simplify(construct_power(self.exp, to_exp(o))))

    def __rpow__(self, o):
        if not isinstance(o, Number):
            return NotImplemented
        return const(o) ** self

    # Comparisons
    def __eq__(self, o):
        if isinstance(o, Expression):
            return (self - o).exp.is_zero()
        elif isinstance(o, str):
            return format(self.exp) == o
        elif isinstance(o, Number):
            v = self.evaluate()
            if isnan(o):
                return isnan(v)
            return is_nearly_equal(v, o)
        return NotImplemented

    def __ne__(self, o):
        ret = self.__eq__(o)
        if ret is NotImplemented:
            return ret
        return not ret

    __hash__ = None

    # Values
    def assign(self, value):
        assign(self.exp, value)
        return self

    def evaluate(self):
        return evaluate(self.exp)

    def evaluate_array(self, **bindings):
        return evaluate_array(self.exp, bindings)

    def variables(self):
        return variables(self.exp)

    def differentiate(self, x):
        return Expression(differentiate(self.exp, as_expression(x).exp))

    def __float__(self):
        return self.evaluate()

    def __str__(self):
        return format(self.exp)

    def __repr__(self):
        return 'Expression(%r)' % format(self.exp)

def as_expression(o):
    return o if isinstance(o, Expression) else const(o)

def const(value):
    return Expression(construct_const(value))

def variable(name, value = None):
    return Expression(construct_variable(name, value))

def log(o):
    return Expression(simplify(construct_log(as_expression(o).exp)))
