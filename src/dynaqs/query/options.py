import re
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dynaqs.constant import SENTINEL_IN

from . import config
from .coercer import ValueCoercer
from .hook import build_hooks

# Option spellings of the javascript implementation, e.g. `toBoolean`, are
# accepted through field aliases.
LEGACY_STRING_OPTIONS = {'toBoolean': 'to_boolean', 'toNumber': 'to_number'}


def compile_pattern(pattern):
    if isinstance(pattern, re.Pattern):
        return pattern

    if isinstance(pattern, str):
        return re.compile(pattern, re.IGNORECASE)

    raise ValueError(f'Invalid pattern: {pattern!r}')


def key_set(value):
    ''' Keys of a {key: flag} mapping with a truthy flag, or the items of an iterable. '''
    if value is None:
        return frozenset()

    if isinstance(value, Mapping):
        return frozenset(k for k, v in value.items() if v)

    if isinstance(value, str):
        return frozenset((value,))

    return frozenset(value)


class QueryOptions(BaseModel):
    '''
    Parser configuration. Instances are immutable; the `custom` mapping holds the
    resolved hooks, i.e. built-in hook field names are already wrapped.
    '''

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    ops: Tuple[str, ...] = Field(default_factory=lambda: tuple(config.DEFAULT_OPS))
    alias: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    blacklist: FrozenSet[str] = frozenset()
    whitelist: FrozenSet[str] = frozenset()
    custom: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    to_boolean: bool = Field(default_factory=lambda: config.STRING_TO_BOOLEAN, alias='toBoolean')
    to_number: bool = Field(default_factory=lambda: config.STRING_TO_NUMBER, alias='toNumber')

    key_regex: re.Pattern = Field(default_factory=lambda: compile_pattern(config.KEY_PATTERN), alias='keyRegex')
    val_regex: re.Pattern = Field(default_factory=lambda: compile_pattern(config.VAL_PATTERN), alias='valRegex')
    arr_regex: re.Pattern = Field(default_factory=lambda: compile_pattern(config.ARR_PATTERN), alias='arrRegex')

    @model_validator(mode='before')
    @classmethod
    def flatten_string_options(cls, data):
        if not isinstance(data, Mapping) or 'string' not in data:
            return data

        data = dict(data)
        string_opts = data.pop('string') or {}
        for key, value in string_opts.items():
            name = LEGACY_STRING_OPTIONS.get(key, key)
            if isinstance(value, bool):
                data.setdefault(name, value)

        return data

    @field_validator('blacklist', 'whitelist', mode='before')
    @classmethod
    def validate_key_set(cls, value):
        return key_set(value)

    @field_validator('key_regex', 'val_regex', 'arr_regex', mode='before')
    @classmethod
    def validate_pattern(cls, value):
        return compile_pattern(value)

    @field_validator('alias', mode='after')
    @classmethod
    def freeze_alias(cls, value):
        return MappingProxyType(dict(value))

    @field_validator('custom', mode='after')
    @classmethod
    def resolve_hooks(cls, value):
        return MappingProxyType(build_hooks(value))

    @property
    def allow_array(self) -> bool:
        return SENTINEL_IN in self.ops

    @property
    def coercer(self) -> ValueCoercer:
        return ValueCoercer(self.to_boolean, self.to_number)
