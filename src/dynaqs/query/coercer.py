import math
from typing import Optional, Union

from dynaqs.constant import RX_NUMBER

CoercedValue = Union[bool, int, float, str]

BOOLEAN_VALUES = {'true': True, 'false': False}


def parse_number(value: str) -> Optional[Union[int, float]]:
    ''' Returns the number a whole-string decimal literal represents, otherwise None.
        Integer literals give an int, literals with a fraction or exponent a float.
    '''
    match = RX_NUMBER.match(value)
    if match is None:
        return None

    if match.group('fraction') is None and match.group('exponent') is None:
        try:
            return int(value)
        except ValueError:
            # Beyond the interpreter's int conversion digit limit
            pass

    number = float(value)
    if math.isinf(number):
        return None

    return number


def coerce_value(value: str, to_boolean: bool = True, to_number: bool = True) -> CoercedValue:
    if to_boolean and value.lower() in BOOLEAN_VALUES:
        return BOOLEAN_VALUES[value.lower()]

    if to_number:
        number = parse_number(value)
        if number is not None:
            return number

    return value


class ValueCoercer(object):
    ''' Coercion bound to a set of flags, used by the parser components. '''

    def __init__(self, to_boolean=True, to_number=True):
        self.to_boolean = to_boolean
        self.to_number = to_number

    def __call__(self, value: str) -> CoercedValue:
        return coerce_value(value, self.to_boolean, self.to_number)

    def __repr__(self):
        return f"ValueCoercer(to_boolean={self.to_boolean}, to_number={self.to_number})"
