# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Numeric helpers shared by the whole package. There is exactly one
# fuzziness policy: an absolute epsilon.
import numpy as np

EPSILON = 1e-5

def is_nearly_equal(x, y, epsilon = EPSILON):
    return abs(x - y) <= epsilon

def is_integer(v):
    if not np.isfinite(v):
        return False
    return is_nearly_equal(v, round(v))

def real_pow(base, expo):
    '''Real power with IEEE semantics, NaN or inf instead of errors.'''
    with np.errstate(all = 'ignore'):
        return float(np.power(np.float64(base), np.float64(expo)))
