import re

# Operator tokens recognized as the first character of a value
OPERATOR_NOT = "!"
OPERATOR_BEGINS_WITH = "^"
OPERATOR_CONTAINS = "$"
OPERATOR_GREATER = ">"
OPERATOR_LESS = "<"
OPERATOR_EQUAL_SUFFIX = "="

# Sentinel entries of the operator list, never matched as a prefix character
SENTINEL_IN = "in"
SENTINEL_NULL = "null"

DEFAULT_OPS = (
    OPERATOR_NOT,
    OPERATOR_BEGINS_WITH,
    OPERATOR_CONTAINS,
    OPERATOR_GREATER,
    OPERATOR_LESS,
    SENTINEL_IN,
    SENTINEL_NULL,
)

ARRAY_KEY_SUFFIX = "[]"
RANGE_SEPARATOR = "|"

# Built-in custom hook names
HOOK_AFTER = "after"
HOOK_BEFORE = "before"
HOOK_BETWEEN = "between"

# Decimal number literal. A leading digit is required, hence ".5", "nan",
# "inf", "0x1f", "1_000" and non-ASCII digits do not qualify.
RX_NUMBER = re.compile(r'^\s*[+-]?\d+(?P<fraction>\.\d*)?(?P<exponent>[eE][+-]?\d+)?\s*\Z', re.ASCII)
RX_INTEGER_PREFIX = re.compile(r'^\s*[+-]?\d+', re.ASCII)
# Date strings of this shape are only accepted as ISO-8601.
RX_ISO_DATE_PREFIX = re.compile(r"^\s*[0-9]{4}-[0-9]{2}-[0-9]{2}", re.ASCII)

KEY_PATTERN = r'^[a-zæøå0-9\-_.]+\Z'
VAL_PATTERN = r'[^a-zæøå0-9\-_.* ]'
ARR_PATTERN = r'^[a-zæøå0-9\-_.]+(\[\])?\Z'
