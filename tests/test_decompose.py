# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
from symexpr.decompose import decompose2, decompose3
from symexpr.exp import (construct_add, construct_const, construct_log,
                         construct_multiply, construct_negate,
                         construct_power, construct_variable)

x = construct_variable('x')
y = construct_variable('y')

def c(v):
    return construct_const(v)

def test_decompose2():
    three = c(3)
    coeff, base = decompose2(three)
    assert coeff is three and base.is_one()

    for e in [x, construct_add([x, y]), construct_power(x, y),
              construct_log(x)]:
        coeff, base = decompose2(e)
        assert coeff.is_one() and base is e

    e = construct_negate(construct_multiply([c(2), x, y]))
    coeff, base = decompose2(e)
    assert coeff.value == -2
    assert str(base) == 'x * y'

    coeff, base = decompose2(construct_multiply([c(2), x, c(3)]))
    assert coeff.value == 6
    assert base is x

    coeff, base = decompose2(construct_negate(construct_negate(x)))
    assert coeff.value == 1
    assert base is x

def test_decompose3():
    three = c(3)
    coeff, base, expo = decompose3(three)
    assert coeff is three and base.is_zero() and expo.is_zero()

    for e in [x, construct_add([x, y]), construct_log(x)]:
        coeff, base, expo = decompose3(e)
        assert coeff.is_one() and base is e and expo.is_one()

    coeff, base, expo = decompose3(construct_power(x, y))
    assert coeff.is_one() and base is x and expo is y

    two = c(2)
    coeff, base, expo = decompose3(construct_negate(construct_power(x, two)))
    assert coeff.value == -1 and base is x and expo is two

    coeff, base, expo = decompose3(construct_multiply([c(2), x, y]))
    assert coeff.value == 2
    assert str(base) == 'x * y'
    assert expo.is_one()

def test_inputs_are_not_mutated():
    three = c(3)
    coeff, base = decompose2(construct_negate(three))
    assert coeff.value == -3
    assert three.value == 3

    coeff, base, expo = decompose3(construct_negate(three))
    assert coeff.value == -3
    assert three.value == 3
