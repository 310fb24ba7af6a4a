'''
Saturating 32-bit arithmetic.

Every result is clamped into the signed 32-bit range instead of wrapping
around. Operands are always assumed to already lie within that range.
'''

import math

from .util import DivideByZero


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def saturate(value):
    '''
    Clamp an arbitrarily wide integer into [INT32_MIN, INT32_MAX].
    '''
    if value > INT32_MAX:
        return INT32_MAX
    elif value < INT32_MIN:
        return INT32_MIN
    else:
        return value


def add(left, right):
    return saturate(left + right)


def subtract(left, right):
    return saturate(left - right)


def multiply(left, right):
    return saturate(left * right)


def divide(left, right):
    '''
    Divide, truncating toward zero.

    Only INT32_MIN / -1 can leave the range, and saturates.
    '''
    if right == 0:
        raise DivideByZero
    # Floor division rounds toward negative infinity; work on magnitudes.
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return saturate(quotient)


def modulo(left, right):
    '''
    Truncating remainder: the result takes the sign of the dividend.

    Never saturated, its magnitude is below that of the divisor.
    '''
    if right == 0:
        raise DivideByZero
    remainder = abs(left) % abs(right)
    return -remainder if left < 0 else remainder


def power(base, exponent):
    '''
    Raise base to exponent through a float, then truncate and saturate.

    Goes through floating point, so large magnitudes round exactly like the
    legacy calculator did.
    '''
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        # Only positive exponents overflow, so parity gives the sign.
        result = -math.inf if base < 0 and exponent % 2 else math.inf
    except ValueError:
        # 0 to a negative power
        result = math.inf
    if math.isinf(result):
        return INT32_MAX if result > 0 else INT32_MIN
    return saturate(int(result))
