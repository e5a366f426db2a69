# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# The simplifier rewrites expressions into a canonical form. Each pass
# simplifies the operands first, then
#
#     1. flattens and expands until nothing changes,
#     2. merges until nothing changes,
#     3. sorts the operands.
#
# Passes are repeated until the canonical string stops changing. The
# string is the only measure of progress, so every loop is capped and
# gives up with a ConvergenceError rather than spinning forever.
from collections import defaultdict
from symexpr.decompose import decompose2, decompose3
from symexpr.exp import (ADD, CONST, LOG, MULTIPLY, NEGATE, POWER,
                         construct_add, construct_const, construct_log,
                         construct_multiply, construct_negate,
                         construct_one, construct_power, construct_zero,
                         rebuild)
from symexpr.numeric import is_integer, is_nearly_equal, real_pow
from symexpr.printer import format

MAX_ITERATIONS = 100

# Print every rewrite that changes something.
VERBOSE = False

class ConvergenceError(Exception):
    def __init__(self, stage, form):
        fmt = '%s did not converge after %d iterations, last form: %s'
        super().__init__(fmt % (stage, MAX_ITERATIONS, form))
        self.stage = stage
        self.form = form

def trace(stage, before, after):
    if VERBOSE and before != after:
        print('%-8s %-40s => %s' % (stage, before, after))

def factors(e):
    return e.operands if e.op == MULTIPLY else [e]

def product(*args):
    return construct_multiply([f for a in args for f in factors(a)])

########################################################################
# Flattening
########################################################################
def flatten_negate(e):
    inner = e.operands[0]
    if inner.op == NEGATE:
        return inner.operands[0]
    elif inner.op == CONST:
        return construct_const(-inner.value)
    return e

def flatten_multi_operands(e):
    operands = []
    for o in e.operands:
        if o.op == e.op:
            operands.extend(o.operands)
        else:
            operands.append(o)
    return rebuild(e, operands)

FLATTENERS = {
    NEGATE : flatten_negate,
    ADD : flatten_multi_operands,
    MULTIPLY : flatten_multi_operands
}

def flatten(e):
    flattener = FLATTENERS.get(e.op)
    return flattener(e) if flattener else e

########################################################################
# Expansion
########################################################################
def expand_negate(e):
    inner = e.operands[0]
    if inner.op == ADD:
        return construct_add([construct_negate(o) for o in inner.operands])
    return e

def expand_multiply(e):
    add_groups = [o.operands for o in e.operands if o.op == ADD]
    if not add_groups:
        return e
    non_adds = [o for o in e.operands if o.op != ADD]

    # When all factors are sums, one of them seeds the terms.
    terms = [construct_multiply(non_adds)] if non_adds else add_groups.pop()
    for group in add_groups:
        terms = [product(t, a) for t in terms for a in group]
    return construct_add(terms)

def expand_power(e):
    base, expo = e.operands
    if base.op == MULTIPLY:
        return construct_multiply([construct_power(o, expo)
                                   for o in base.operands])
    # Constant bases are left for merge_power to fold.
    if expo.is_const() and not base.is_const():
        v = expo.value
        if v > 0 and is_integer(v):
            return construct_multiply([base] * int(round(v)))
    return e

def is_loggable(o):
    return not o.is_const() or o.is_positive()

def expand_log(e):
    inner = e.operands[0]
    if inner.op == MULTIPLY:
        if all(is_loggable(o) for o in inner.operands):
            return construct_add([construct_log(o) for o in inner.operands])
    elif inner.op == POWER:
        base, expo = inner.operands
        if is_loggable(base):
            return construct_multiply([expo, construct_log(base)])
    return e

EXPANDERS = {
    NEGATE : expand_negate,
    MULTIPLY : expand_multiply,
    POWER : expand_power,
    LOG : expand_log
}

def expand(e):
    expander = EXPANDERS.get(e.op)
    return expander(e) if expander else e

########################################################################
# Merging
########################################################################
def merge_add(e):
    const_term = 0.0
    coeffs = defaultdict(float)
    bases = {}
    for o in e.operands:
        if o.is_const():
            const_term += o.value
            continue
        coeff, base = decompose2(o)
        if base.is_const():
            const_term += coeff.value * base.value
            continue
        key = format(base)
        coeffs[key] += coeff.value
        bases.setdefault(key, base)

    terms = []
    if not is_nearly_equal(const_term, 0.0):
        terms.append(construct_const(const_term))
    for key, base in bases.items():
        coeff = coeffs[key]
        if is_nearly_equal(coeff, 0.0):
            continue
        elif is_nearly_equal(coeff, 1.0):
            terms.append(base)
        elif is_nearly_equal(coeff, -1.0):
            terms.append(construct_negate(base))
        else:
            terms.append(product(construct_const(coeff), base))
    return construct_add(terms)

def merge_multiply(e):
    coeff = 1.0
    expos = {}
    bases = {}
    for o in e.operands:
        c, base, expo = decompose3(o)
        coeff *= c.value
        key = format(base)
        if key in expos:
            expos[key] = simplify(construct_add([expos[key], expo]))
        else:
            expos[key] = expo
            bases[key] = base

    if is_nearly_equal(coeff, 0.0):
        return construct_zero()
    operands = []
    if not is_nearly_equal(coeff, 1.0):
        operands.append(construct_const(coeff))
    for key, base in bases.items():
        expo = expos[key]
        if expo.is_zero():
            continue
        elif expo.is_one():
            operands.append(base)
        else:
            operands.append(construct_power(base, expo))
    return construct_multiply(operands)

def merge_power(e):
    base, expo = e.operands
    if base.is_const() and expo.is_const():
        return construct_const(real_pow(base.value, expo.value))
    if base.is_one() or expo.is_zero():
        return construct_one()
    if expo.is_one():
        return base
    return e

def merge_log(e):
    if e.operands[0].is_one():
        return construct_zero()
    return e

MERGERS = {
    ADD : merge_add,
    MULTIPLY : merge_multiply,
    POWER : merge_power,
    LOG : merge_log
}

def merge(e):
    merger = MERGERS.get(e.op)
    return merger(e) if merger else e

########################################################################
# Sorting
########################################################################
def sort_key(e):
    return not e.is_const(), format(e)

def sort(e):
    '''Constants first, then by canonical string. Powers are not
    commutative and keep their order.'''
    if e.op == POWER or len(e.operands) < 2:
        return e
    return rebuild(e, sorted(e.operands, key = sort_key))

########################################################################
# Driver
########################################################################
def fixed_point(e, fun, stage):
    before = format(e)
    for _ in range(MAX_ITERATIONS):
        e = fun(e)
        after = format(e)
        trace(stage, before, after)
        if after == before:
            return e
        before = after
    raise ConvergenceError(stage, before)

def flatten_and_expand(e):
    return expand(flatten(e))

def simplify_pass(e):
    e = rebuild(e, [simplify_pass(o) for o in e.operands])
    e = fixed_point(e, flatten_and_expand, 'expand')
    e = fixed_point(e, merge, 'merge')
    return sort(e)

def simplify(e):
    return fixed_point(e, simplify_pass, 'simplify')
