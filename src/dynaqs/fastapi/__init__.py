from ._meta import config, logger
from .query import QueryFilter, collect_query_params
from .setup import setup_error_handler

__all__ = (
    "QueryFilter",
    "collect_query_params",
    "config",
    "logger",
    "setup_error_handler",
)
