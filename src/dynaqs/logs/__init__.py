'''
Loggers configured from the module configuration:

    LOG_LEVEL      debug | info | warning | error
    LOG_OUTPUT     "stderr", "stdout" or "file:///path/to.log", several joined by "|"
    LOG_FORMATTER  logging format string, "{hostname}" is substituted
    LOG_DATEFMT    date format of %(asctime)s
    LOG_COLORED    colored console output (root configuration only)
'''
import logging
import platform
import sys
from typing import Dict, Optional

from dynaqs.conf import ModuleConfig, default_config, getConfig

LOG_OUTPUT_SEP = "|"
FILE_OUTPUT_PREFIX = "file://"

_LOGGERS: Dict[Optional[str], logging.Logger] = {}


def getLoggerHandler(output: Optional[str] = None) -> logging.Handler:
    if output is None or output == "stderr":
        return logging.StreamHandler(sys.stderr)

    if output == "stdout":
        return logging.StreamHandler(sys.stdout)

    if output.startswith(FILE_OUTPUT_PREFIX):
        return logging.FileHandler(output[len(FILE_OUTPUT_PREFIX):])

    raise ValueError(f"Unsupported log output: {output}")


def log_level(name) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.NOTSET


def log_format(log_config: ModuleConfig) -> Optional[str]:
    fmt = log_config.get("LOG_FORMATTER")
    if not fmt:
        return None

    return fmt.format(hostname=platform.node().split(".")[0])


def setupLogger(module_name: Optional[str], log_config: ModuleConfig) -> logging.Logger:
    module_logger = logging.getLogger(module_name)
    level = log_level(log_config.get("LOG_LEVEL"))
    module_logger.setLevel(level)

    outputs = log_config.get("LOG_OUTPUT") or ()
    if isinstance(outputs, str):
        outputs = outputs.split(LOG_OUTPUT_SEP)

    fmt = log_format(log_config)
    handlers = [getLoggerHandler(output) for output in outputs if output]
    if fmt:
        for handler in handlers:
            handler.setFormatter(logging.Formatter(fmt, log_config.get("LOG_DATEFMT")))

    if module_name is None:
        logging.basicConfig(handlers=handlers)
    else:
        for handler in handlers:
            module_logger.addHandler(handler)

    if fmt and default_config.LOG_COLORED:
        import coloredlogs
        coloredlogs.install(fmt=fmt, level=level, logger=module_logger)

    _LOGGERS[module_name] = module_logger
    return module_logger


def getLogger(module_name: Optional[str], log_config: Optional[ModuleConfig] = None) -> logging.Logger:
    if module_name in _LOGGERS:
        return _LOGGERS[module_name]

    return setupLogger(module_name, log_config or getConfig(module_name))


default_logger = setupLogger(None, default_config)
