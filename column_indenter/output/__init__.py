"""Report output module"""

from .formatter import OutputFormatter

__all__ = ["OutputFormatter"]
