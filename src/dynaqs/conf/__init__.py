'''
Module configuration.

Each module owns one section of the INI files listed in DYNAQS_CONFIG_FILE
(default "base.ini|config.ini"). A value is looked up in that section first,
then in the module's `_meta/defaults.py`, then in `sysdefaults.py`:

    [dynaqs.query]
    string_to_number = no
    default_ops = ["!", ">", "<", "in"]

Only the UPPERCASE names declared in the defaults exist, and the type of the
default decides how the INI text is read.
'''
import configparser
import json
import logging
import os
import re

from typing import Any, Callable, Dict, Iterable

from . import sysdefaults


def env(name: str, defval: Any, coercer: Callable[[Any], Any] = None):
    ''' Extract environment value to use as configuration variable
    '''
    value = os.environ.get(name, defval)
    return coercer(value) if callable(coercer) else value


DYNAQS_SYSTEM_DEFAULTS = env("DYNAQS_SYSTEM_DEFAULTS", "sysdefaults")
DYNAQS_CONFIG_FILES = env("DYNAQS_CONFIG_FILE", "base.ini|config.ini").split('|')
DEBUG_ALL_CONFIG_VALUE = "#ALL"
RX_INVALID_OPTION = re.compile(r"[^A-Za-z\d_]+")


def collect_defaults(*sources) -> Dict[str, Any]:
    ''' UPPERCASE names of the default modules (or namespaces), earlier sources win. '''
    values: Dict[str, Any] = {}
    for source in sources:
        for key, value in vars(source).items():
            if key.isupper():
                values.setdefault(key, value)

    return values


def read_option(parser: configparser.ConfigParser, section: str, key: str, default: Any):
    # NOTE: bool is a subclass of int, therefore it must be checked before int.
    if isinstance(default, bool):
        return parser.getboolean(section, key)
    if isinstance(default, int):
        return parser.getint(section, key)
    if isinstance(default, float):
        return parser.getfloat(section, key)
    if isinstance(default, (dict, list, tuple)):
        return type(default)(json.loads(parser.get(section, key)))
    if isinstance(default, (str, type(None))):
        return parser.get(section, key)

    raise ValueError(f"Not supported config value type [{type(default)}].")


class ModuleConfig(object):
    def __init__(self, module_name: str, values: Dict[str, Any]):
        self.__name__ = module_name
        self._values = values

    def __getattr__(self, name):
        try:
            return self.__dict__['_values'][name]
        except KeyError:
            raise AttributeError(f"Module [{self.__name__}] has no config value [{name}]")

    def __getitem__(self, name):
        return self._values[name]

    def get(self, name, default=None):
        return self._values.get(name, default)

    def items(self):
        yield from self._values.items()

    def as_dict(self):
        return self._values.copy()

    def __repr__(self):
        return f"<ModuleConfig {self.__name__}>"


class ConfigRegistry(object):
    ''' Module configurations resolved against one set of INI files. '''

    def __init__(self, files: Iterable[str] = DYNAQS_CONFIG_FILES):
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = lambda s: RX_INVALID_OPTION.sub("_", s.strip()).upper()
        # Missing files are ignored, later files override earlier ones
        self.files = self._parser.read(list(files))
        self._modules: Dict[str, ModuleConfig] = {}

    def get_config(self, module_name: str, *defaults) -> ModuleConfig:
        if module_name in self._modules:
            return self._modules[module_name]

        values = {}
        for key, default in collect_defaults(*defaults, sysdefaults).items():
            try:
                values[key] = read_option(self._parser, module_name, key, default)
            except (configparser.NoSectionError, configparser.NoOptionError):
                values[key] = default

        if sysdefaults.DEBUG_MODULE_CONFIG in (DEBUG_ALL_CONFIG_VALUE, module_name):
            logging.debug("=== MODULE CONFIG [%s] from %s ===", module_name, self.files)
            for key, value in values.items():
                logging.debug(" - [%s] ::= %r", key, value)

        config = self._modules[module_name] = ModuleConfig(module_name, values)
        return config


registry = ConfigRegistry()
getConfig = registry.get_config
default_config = getConfig(DYNAQS_SYSTEM_DEFAULTS, sysdefaults)
