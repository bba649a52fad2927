# slicemath/__init__.py
from .config import Settings, settings
from .errors import OperandError
from .logs import configure_logging
from .ops import dot, multiply

__all__ = ["Settings", "settings", "OperandError", "configure_logging", "dot", "multiply"]
