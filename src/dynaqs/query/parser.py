from dynaqs.constant import OPERATOR_NOT, OPERATOR_EQUAL_SUFFIX

from .coercer import coerce_value
from .operator import OperatorKind, ParsedCondition, TOKEN_OPERATORS


def split_token(token: str):
    ''' Split a value token into (operator, followed by "=", operand). '''
    op = token[:1]
    eq = token[1:2] == OPERATOR_EQUAL_SUFFIX
    return op, eq, token[2 if eq else 1:]


def parse_token(token: str, array: bool = False, coerce=coerce_value) -> ParsedCondition:
    '''
    Resolve an operator prefixed token to an operator and a coerced value.

        ">=5"  => ge 5              "!foo" => ne "foo"
        "^ab"  => begins_with "ab"  "$ab"  => contains "ab"
        "!"    => not_null False    ""     => not_null True
        "foo"  => eq "foo"

    In array context "!x" resolves to not_contains and unprefixed tokens to in.
    Without a recognized prefix the whole token is the operand.
    '''
    op, eq, operand = split_token(token)

    if op == OPERATOR_NOT:
        if array:
            return ParsedCondition(op, operand, OperatorKind.NOT_CONTAINS, coerce(operand))

        # NOTE: "!" with nothing after it gives not_null False while an
        # empty token gives not_null True.
        if operand == '':
            return ParsedCondition(op, operand, OperatorKind.NOT_NULL, False)

        return ParsedCondition(op, operand, OperatorKind.NE, coerce(operand))

    kind = TOKEN_OPERATORS.get((op, eq))
    if kind is not None:
        return ParsedCondition(op, operand, kind, coerce(operand))

    if array:
        return ParsedCondition('', token, OperatorKind.IN, coerce(token))

    if token == '':
        return ParsedCondition('', token, OperatorKind.NOT_NULL, True)

    return ParsedCondition('', token, OperatorKind.EQ, coerce(token))
