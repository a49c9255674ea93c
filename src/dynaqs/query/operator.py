from collections import namedtuple
from enum import Enum

from dynaqs import constant


class OperatorKind(Enum):
    ''' Filter operator names accepted by the document database client. '''

    EQ = 'eq'
    NE = 'ne'
    GT = 'gt'
    GE = 'ge'
    LT = 'lt'
    LE = 'le'
    BEGINS_WITH = 'begins_with'
    CONTAINS = 'contains'
    IN = 'in'
    NOT_CONTAINS = 'not_contains'
    NOT_NULL = 'not_null'

    @property
    def is_list(self):
        return self in LIST_OPERATORS


# Operators accumulating their values across the elements of an array parameter
LIST_OPERATORS = frozenset((OperatorKind.IN, OperatorKind.NOT_CONTAINS))

# (token, followed by "=") => operator, for tokens that resolve independently of the context
TOKEN_OPERATORS = {
    (constant.OPERATOR_GREATER, True): OperatorKind.GE,
    (constant.OPERATOR_GREATER, False): OperatorKind.GT,
    (constant.OPERATOR_LESS, True): OperatorKind.LE,
    (constant.OPERATOR_LESS, False): OperatorKind.LT,
    (constant.OPERATOR_BEGINS_WITH, True): OperatorKind.BEGINS_WITH,
    (constant.OPERATOR_BEGINS_WITH, False): OperatorKind.BEGINS_WITH,
    (constant.OPERATOR_CONTAINS, True): OperatorKind.CONTAINS,
    (constant.OPERATOR_CONTAINS, False): OperatorKind.CONTAINS,
}


class ParsedCondition(namedtuple('ParsedCondition', 'op operand kind value')):
    ''' Result of parsing a single value token.

        op:      the operator token consumed ('' when none)
        operand: the raw text the value was coerced from
        kind:    resolved OperatorKind
        value:   coerced value
    '''

    __slots__ = ()

    @property
    def field(self):
        return self.kind.value

    @property
    def parsed(self):
        return {self.kind.value: self.value}
