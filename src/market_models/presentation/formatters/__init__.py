"""
Output formatters for the CLI.
"""

from .console_formatter import ConsoleFormatter

__all__ = [
    'ConsoleFormatter'
]
