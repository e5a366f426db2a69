# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# A small computer algebra core. Expressions over constants, variables,
# negation, addition, multiplication, powers and natural logarithms
# are kept in a canonical form, can be differentiated and evaluated:
#
#     >>> x = variable('x')
#     >>> str((x + 1) ** 2)
#     '1 + (2 * x) + (x ^ 2)'
#     >>> str(((x + 1) ** 2).differentiate(x))
#     '2 + (2 * x)'
#
# From the command line:
#
#     symexpr diff '(x + 1)**2' x
#
from symexpr.diff import DifferentiationError
from symexpr.evaluate import AssignmentError
from symexpr.exp import ConsistencyError
from symexpr.expression import Expression, const, log, variable
from symexpr.simplify import ConvergenceError
