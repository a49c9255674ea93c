"""dynaqs command line tool."""
from .main import cli

__all__ = ("cli",)
