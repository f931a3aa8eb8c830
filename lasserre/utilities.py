"""
lasserre/utilities.py

Depository for generic python utility snippets.
"""


from functools import wraps
import math


memoized_attr_bucket = '_memoized_attrs'


def memoized_property(fget):
    attr_name = f'_{fget.__name__}'

    @wraps(fget)
    def fget_memoized(self):
        if not hasattr(self, attr_name):
            setattr(self, attr_name, fget(self))
            if hasattr(self, memoized_attr_bucket):
                getattr(self, memoized_attr_bucket).append(attr_name)
            else:
                setattr(self, memoized_attr_bucket, [attr_name])
        return getattr(self, attr_name)

    return property(fget_memoized)


def clear_memoization(obj):
    if hasattr(obj, memoized_attr_bucket):
        for field in getattr(obj, memoized_attr_bucket):
            delattr(obj, field)
        delattr(obj, memoized_attr_bucket)
    return obj


def lcm(*numbers):
    assert 1 <= len(numbers)
    ret = numbers[0]
    for number in numbers[1:]:
        ret = ret * number // math.gcd(ret, number)
    return ret


def argmax_abs(values):
    """
    Returns the index of the entry of largest absolute value, preferring the
    earliest index on ties.
    """
    best_index = 0
    for index, value in enumerate(values):
        if abs(value) > abs(values[best_index]):
            best_index = index
    return best_index
