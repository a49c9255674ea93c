'''
Custom hooks replace the default handling of a query key.

A hook is a callable receiving the raw value of its key (a string, or a list
for array parameters) and returning the output entries it produces as a
mapping, or None to produce nothing. The returned entries are merged into the
filter by the assembler.

    def owner_hook(value):
        return {'owner_id': {'eq': value.lower()}}

    QueryStringParser(custom={'owner': owner_hook})
'''
from typing import Any, Callable, Dict, Mapping, Optional

from dynaqs import constant
from dynaqs.error import ConfigurationError
from dynaqs.helper.timeutil import parse_date, datetime_to_isostring

from .operator import OperatorKind

CustomHook = Callable[[Any], Optional[Mapping[str, Any]]]


class DateRangeHook(object):
    ''' Base class of the built-in date hooks. Invalid dates produce nothing. '''

    name = None

    def __init__(self, field: str):
        self.field = field

    def __call__(self, value) -> Optional[Dict[str, Any]]:
        condition = self.condition(value)
        if condition is None:
            return None

        return {self.field: condition}

    def condition(self, value) -> Optional[Dict[str, str]]:
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}({self.field!r})"


class AfterHook(DateRangeHook):
    name = constant.HOOK_AFTER

    def condition(self, value):
        date = parse_date(value)
        if date is None:
            return None

        return {OperatorKind.GE.value: datetime_to_isostring(date)}


class BeforeHook(DateRangeHook):
    name = constant.HOOK_BEFORE

    def condition(self, value):
        date = parse_date(value)
        if date is None:
            return None

        return {OperatorKind.LT.value: datetime_to_isostring(date)}


class BetweenHook(DateRangeHook):
    ''' "start|end" => ge start, lt end. Both dates must be valid. '''

    name = constant.HOOK_BETWEEN

    def condition(self, value):
        if not isinstance(value, str):
            return None

        start, _, end = value.partition(constant.RANGE_SEPARATOR)
        start, end = parse_date(start), parse_date(end)
        if start is None or end is None:
            return None

        return {
            OperatorKind.GE.value: datetime_to_isostring(start),
            OperatorKind.LT.value: datetime_to_isostring(end),
        }


def after(field: str) -> AfterHook:
    return AfterHook(field)


def before(field: str) -> BeforeHook:
    return BeforeHook(field)


def between(field: str) -> BetweenHook:
    return BetweenHook(field)


BUILTIN_HOOKS = {
    constant.HOOK_AFTER: after,
    constant.HOOK_BEFORE: before,
    constant.HOOK_BETWEEN: between,
}


def build_hooks(custom: Optional[Mapping[str, Any]]) -> Dict[str, CustomHook]:
    '''
    Validate a key => hook mapping. Values of the built-in hook names
    (after, before, between) are the output field the date hook writes to.
    '''
    hooks: Dict[str, CustomHook] = {}

    for key, hook in (custom or {}).items():
        if key in BUILTIN_HOOKS and not callable(hook):
            if not isinstance(hook, str) or not hook:
                raise ConfigurationError(
                    'Q00.101', f'Hook [{key}] requires a field name, got: {hook!r}'
                )

            hook = BUILTIN_HOOKS[key](hook)

        if not callable(hook):
            raise ConfigurationError('Q00.102', f'Hook for key [{key}] is not callable: {hook!r}')

        hooks[key] = hook

    return hooks


def dispatch_hook(hook: CustomHook, value) -> Dict[str, Any]:
    ''' Invoke a hook and return the entries it produced. Hook exceptions propagate. '''
    result = hook(value)

    if result is None:
        return {}

    if not isinstance(result, Mapping):
        raise ConfigurationError(
            'Q00.103', f'Hook [{hook!r}] must return a mapping or None, got: {type(result).__name__}'
        )

    return dict(result)
