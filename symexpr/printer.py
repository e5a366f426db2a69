# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Canonical string form of expressions. The strings double as sort
# keys, merge keys and the "did anything change" probe of the
# simplifier, so the spacing and bracketing below must never change.
from symexpr.exp import ADD, CONST, LOG, MULTIPLY, NEGATE, POWER, VARIABLE
from symexpr.numeric import is_integer

def format_const(e, bracket):
    if e.is_zero():
        return '0'
    elif e.is_one():
        return '1'
    v = e.value
    fmt = '%.0f' if is_integer(v) else '%.3f'
    s = fmt % abs(v)
    if not e.is_negative():
        return s
    s = ' - ' + s
    return '(%s)' % s if bracket else s

def format_add(operands):
    s = ''
    for o in operands:
        if o.is_negative() or o.op == NEGATE:
            s += format(o)
        else:
            if s:
                s += ' + '
            s += format(o, True)
    return s

def format(e, bracket = False):
    op = e.op
    if op == CONST:
        return format_const(e, bracket)
    elif op == VARIABLE:
        return e.name
    elif op == LOG:
        return 'log(%s)' % format(e.operands[0])
    elif op == NEGATE:
        s = ' - ' + format(e.operands[0], True)
    elif op == ADD:
        s = format_add(e.operands)
    elif op == MULTIPLY:
        s = ' * '.join(format(o, True) for o in e.operands)
    elif op == POWER:
        base, expo = e.operands
        s = '%s ^ %s' % (format(base, True), format(expo, True))
    else:
        assert False
    return '(%s)' % s if bracket else s
