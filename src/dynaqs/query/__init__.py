'''
Query string to document database filter translation.

    ?age=>=18&name=^jo&tags[]=a&tags[]=!b&deleted=!
    => {
        "age": {"ge": 18},
        "name": {"begins_with": "jo"},
        "tags": {"in": ["a"], "not_contains": ["b"]},
        "deleted": {"not_null": False},
    }
'''

from ._meta import config, logger
from .operator import OperatorKind, ParsedCondition
from .coercer import coerce_value, ValueCoercer
from .parser import parse_token
from .aggregator import aggregate_values
from .hook import after, before, between, CustomHook
from .options import QueryOptions
from .assembler import QueryStringParser, parse_query

__all__ = (
    "CustomHook",
    "OperatorKind",
    "ParsedCondition",
    "QueryOptions",
    "QueryStringParser",
    "ValueCoercer",
    "after",
    "aggregate_values",
    "before",
    "between",
    "coerce_value",
    "config",
    "logger",
    "parse_query",
    "parse_token",
)
