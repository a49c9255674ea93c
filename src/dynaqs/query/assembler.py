from typing import Any, Dict, Mapping, Optional

from dynaqs.constant import ARRAY_KEY_SUFFIX

from . import logger
from .aggregator import aggregate_values
from .hook import dispatch_hook
from .operator import OperatorKind
from .options import QueryOptions
from .parser import parse_token


def is_array(value) -> bool:
    return isinstance(value, (list, tuple))


class QueryStringParser(object):
    '''
    Translates parsed query string parameters into a filter mapping for the
    document database client.

        >>> QueryStringParser().parse({'age': '>=5', 'tags[]': ['a', '!b']})
        {'age': {'ge': 5}, 'tags': {'in': ['a'], 'not_contains': ['b']}}
    '''

    def __init__(self, options: Optional[QueryOptions | Mapping[str, Any]] = None, **kwargs):
        if isinstance(options, QueryOptions):
            self.options = QueryOptions(**{**dict(options), **kwargs}) if kwargs else options
        else:
            self.options = QueryOptions(**{**(options or {}), **kwargs})

        self.coerce = self.options.coercer

    def __repr__(self):
        return f"{self.__class__.__name__}(ops={self.options.ops!r})"

    def _skip(self, key, reason):
        logger.debug('Skipped query key [%s]: %s', key, reason)

    def resolve_key(self, key: str, value) -> Optional[str]:
        ''' Apply array suffix stripping, the allow / deny lists and the alias map.
            Returns None when the key must be skipped.
        '''
        opts = self.options
        array = is_array(value)

        if array and key.endswith(ARRAY_KEY_SUFFIX):
            key = key[:-len(ARRAY_KEY_SUFFIX)]

        if opts.whitelist and key not in opts.whitelist:
            self._skip(key, 'not whitelisted')
            return None

        if key in opts.blacklist:
            self._skip(key, 'blacklisted')
            return None

        key = opts.alias.get(key) or key

        if isinstance(value, str) and not opts.key_regex.search(key):
            self._skip(key, 'invalid key')
            return None

        if array and not opts.arr_regex.search(key):
            self._skip(key, 'invalid array key')
            return None

        return key

    def parse_value(self, value: str):
        if value == '':
            return {OperatorKind.NOT_NULL.value: True}

        if value[0] in self.options.ops:
            return parse_token(value, coerce=self.coerce).parsed

        return self.coerce(value)

    def parse(self, query: Mapping[str, Any]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        hooks = self.options.custom

        for raw_key, value in query.items():
            key = self.resolve_key(raw_key, value)
            if key is None:
                continue

            if key in hooks:
                result.update(dispatch_hook(hooks[key], value))
                continue

            if is_array(value):
                condition = aggregate_values(value, self.options.ops, self.coerce)
                if condition:
                    result[key] = condition
                elif not self.options.allow_array:
                    self._skip(key, 'array values are disabled')
                continue

            if not isinstance(value, str):
                self._skip(key, f'unsupported value type {type(value).__name__}')
                continue

            result[key] = self.parse_value(value)

        return result


def parse_query(query: Mapping[str, Any], **options) -> Dict[str, Any]:
    return QueryStringParser(**options).parse(query)
