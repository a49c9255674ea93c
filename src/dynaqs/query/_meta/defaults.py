from dynaqs import constant

DEFAULT_OPS = constant.DEFAULT_OPS

STRING_TO_BOOLEAN = True
STRING_TO_NUMBER = True

KEY_PATTERN = constant.KEY_PATTERN
VAL_PATTERN = constant.VAL_PATTERN
ARR_PATTERN = constant.ARR_PATTERN
