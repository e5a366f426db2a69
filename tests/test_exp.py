# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
from math import isnan
from symexpr.exp import (ADD, CONST, LOG, MULTIPLY, NEGATE, POWER, VARIABLE,
                         ConsistencyError, Exp,
                         construct_add, construct_const, construct_inverse,
                         construct_log, construct_multiply, construct_negate,
                         construct_one, construct_power, construct_variable,
                         construct_zero, rebuild)
from symexpr.printer import format

def check_inconsistent(fun, *args):
    try:
        fun(*args)
        assert False
    except ConsistencyError:
        pass

def test_constant_construction():
    one = construct_one()
    zero = construct_zero()
    three = construct_const(3)
    assert one.value == 1 and str(one) == '1'
    assert zero.value == 0 and str(zero) == '0'
    assert three.value == 3 and str(three) == '3'
    assert three.op == CONST and three.operands == []
    assert str(construct_const(2.5)) == '2.500'

def test_variable_construction():
    v = construct_variable('v')
    assert v.op == VARIABLE
    assert v.name == 'v'
    assert str(v) == 'v'
    assert v.value is None

    x = construct_variable('x', 1)
    assert x.name == 'x'
    assert x.value == 1

def test_negation_construction():
    x = construct_variable('x', 0)
    ten = construct_const(10)
    n_x = construct_negate(x)
    n_ten = construct_negate(ten)

    assert str(n_x) == ' - x'
    assert n_x.op == NEGATE
    assert n_x.operands[0] is x

    assert str(n_ten) == ' - 10'
    assert n_ten.operands[0] is ten

def test_polynomial_construction():
    x = construct_variable('x', 1)
    y = construct_variable('y', 2)
    z = construct_variable('z', 3)
    three = construct_const(3)

    add_xxx = construct_add([x, x, x])
    assert add_xxx.op == ADD
    assert str(add_xxx) == 'x + x + x'
    assert all(o is x for o in add_xxx.operands)

    add_xyz = construct_add([x, y, z])
    add_zyx = construct_add([z, y, x])
    assert str(add_xyz) == 'x + y + z'
    assert str(add_zyx) == 'z + y + x'

    nested = construct_add([add_xyz, add_xxx, add_zyx])
    assert str(nested) == '(x + y + z) + (x + x + x) + (z + y + x)'
    assert nested.operands[1] is add_xxx

    mul_xyz = construct_multiply([x, y, z])
    mul_xxx = construct_multiply([x, x, x])
    mul_zyx = construct_multiply([z, y, x])
    assert mul_xyz.op == MULTIPLY
    assert str(mul_xyz) == 'x * y * z'
    nested = construct_multiply([mul_xyz, mul_xxx, mul_zyx])
    assert str(nested) == '(x * y * z) * (x * x * x) * (z * y * x)'

    examples = [
        (construct_power(x, three), 'x ^ 3'),
        (construct_power(x, y), 'x ^ y'),
        (construct_power(x, add_xyz), 'x ^ (x + y + z)'),
        (construct_power(mul_zyx, construct_power(x, three)),
         '(z * y * x) ^ (x ^ 3)'),
        (construct_inverse(x), 'x ^ ( - 1)'),
        (construct_inverse(add_xyz), '(x + y + z) ^ ( - 1)'),
        (construct_log(x), 'log(x)')
    ]
    for e, expected in examples:
        assert format(e) == expected

def test_degenerate_add_and_multiply():
    x = construct_variable('x')
    assert construct_add([]).is_zero()
    assert construct_multiply([]).is_one()
    assert construct_add([x]) is x
    assert construct_multiply([x]) is x

def test_arity():
    x = construct_variable('x')
    y = construct_variable('y')
    check_inconsistent(Exp, POWER, [])
    check_inconsistent(Exp, POWER, [x])
    check_inconsistent(Exp, POWER, [x, x, y])
    check_inconsistent(Exp, ADD, [x])
    check_inconsistent(Exp, MULTIPLY, [])
    check_inconsistent(Exp, NEGATE, [x, y])
    check_inconsistent(Exp, LOG, [])
    check_inconsistent(Exp, CONST, [x], None, 1.0)
    check_inconsistent(Exp, 'sin', [x])

def test_missing_parts():
    x = construct_variable('x')
    check_inconsistent(Exp, CONST)
    check_inconsistent(Exp, VARIABLE)
    check_inconsistent(construct_negate, None)
    check_inconsistent(construct_add, [x, None])
    check_inconsistent(Exp, ADD, [x, x], None, 3.0)

def test_log_domain():
    x = construct_variable('x')
    check_inconsistent(construct_log, construct_zero())
    check_inconsistent(construct_log, construct_const(-0.0))
    check_inconsistent(construct_log, construct_const(-1))
    check_inconsistent(construct_log, construct_const(1e-7))
    assert str(construct_log(construct_negate(x))) == 'log( - x)'
    assert str(construct_log(construct_const(2))) == 'log(2)'

def test_predicates():
    examples = [
        (0, True, False, False, False),
        (1e-6, True, False, False, False),
        (1, False, True, True, False),
        (0.999999, False, True, True, False),
        (-3, False, False, False, True),
        (2, False, False, True, False)
    ]
    for v, zero, one, positive, negative in examples:
        c = construct_const(v)
        assert c.is_zero() == zero
        assert c.is_one() == one
        assert c.is_positive() == positive
        assert c.is_negative() == negative
    x = construct_variable('x', 0)
    assert not x.is_zero()
    assert not x.is_const()
    assert isnan(construct_const(float('nan')).value)

def test_rebuild():
    x = construct_variable('x')
    y = construct_variable('y')
    e = construct_add([x, y])
    assert rebuild(e, [x, y]) is e
    e2 = rebuild(e, [y, x])
    assert e2 is not e
    assert str(e2) == 'y + x'
    assert str(e) == 'x + y'
    assert rebuild(x, []) is x
