from typing import Any, Dict, Sequence

from dynaqs.constant import SENTINEL_IN

from . import logger
from .coercer import coerce_value
from .operator import OperatorKind
from .parser import parse_token


def aggregate_values(values: Sequence[str], ops: Sequence[str], coerce=coerce_value) -> Dict[str, Any]:
    '''
    Combine the elements of an array parameter into one condition.

        ["a", "!b", ">3", "c"] => {"in": ["a", "c"], "not_contains": ["b"], "gt": 3}

    Returns an empty dict when membership queries are disabled (no "in" in ops)
    or there are no values.
    '''
    condition: Dict[str, Any] = {}

    if SENTINEL_IN not in ops or not values:
        return condition

    for value in values:
        if not isinstance(value, str):
            logger.debug('Ignored non-string array element: %r', value)
            continue

        if value[:1] not in ops:
            condition.setdefault(OperatorKind.IN.value, []).append(coerce(value))
            continue

        parsed = parse_token(value, array=True, coerce=coerce)
        if parsed.kind.is_list:
            condition.setdefault(parsed.field, []).append(parsed.value)
        else:
            condition[parsed.field] = parsed.value

    return condition
