from typing import Dict, Iterable, List, Tuple, Union
from urllib.parse import parse_qsl

from dynaqs.constant import ARRAY_KEY_SUFFIX

QueryValue = Union[str, List[str]]


def group_query_items(items: Iterable[Tuple[str, str]], group_repeated: bool = True) -> Dict[str, QueryValue]:
    '''
    Build the parser input from (key, value) pairs.

        [("a", "1"), ("t[]", "x"), ("b", "1"), ("b", "2")]
        => {"a": "1", "t[]": ["x"], "b": ["1", "2"]}

    Keys ending in "[]" are always lists. Repeated plain keys become lists when
    `group_repeated` is set, otherwise the last value wins.
    '''
    query: Dict[str, QueryValue] = {}

    for key, value in items:
        if key.endswith(ARRAY_KEY_SUFFIX):
            query.setdefault(key, []).append(value)
            continue

        if key not in query or not group_repeated:
            query[key] = value
            continue

        current = query[key]
        if isinstance(current, list):
            current.append(value)
        else:
            query[key] = [current, value]

    return query


def parse_query_string(qs: str, group_repeated: bool = True) -> Dict[str, QueryValue]:
    if qs.startswith('?'):
        qs = qs[1:]

    return group_query_items(parse_qsl(qs, keep_blank_values=True), group_repeated)
