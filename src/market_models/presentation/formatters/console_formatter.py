"""
Console formatting utilities for the market-models CLI.
"""

import json
import sys
from typing import Any, List, Optional

from colorama import Fore, Style


class ConsoleFormatter:
    """
    Console output formatter with color support.

    Colors are applied only when stdout is a terminal so that piped output
    (JSON schemas, reports) stays machine readable. Errors go to
    ``error_stream`` (stderr by default) so they never mix into that output.
    """

    def __init__(self, use_colors: bool = True, stream=None, error_stream=None):
        self.stream = stream
        self.error_stream = error_stream
        self.use_colors = use_colors and self._supports_color()

    def _out(self):
        return self.stream or sys.stdout

    def _err(self):
        return self.error_stream or sys.stderr

    def _supports_color(self) -> bool:
        out = self._out()
        return hasattr(out, 'isatty') and out.isatty()

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def print_success(self, message: str):
        print(self._colorize(f"✓ {message}", Fore.GREEN), file=self._out())

    def print_error(self, message: str):
        print(self._colorize(f"✗ {message}", Fore.RED), file=self._err())

    def print_warning(self, message: str):
        print(self._colorize(f"⚠ {message}", Fore.YELLOW), file=self._out())

    def print_info(self, message: str):
        print(self._colorize(f"ℹ {message}", Fore.BLUE), file=self._out())

    def print_key_value(self, key: str, value: Any, indent: int = 0):
        indentation = "  " * indent
        print(f"{indentation}{self._colorize(f'{key}:', Style.BRIGHT)} {value}", file=self._out())

    def print_table_simple(self, headers: List[str], rows: List[List[str]]):
        """Print simple table without borders."""
        if not headers or not rows:
            return

        all_rows = [headers] + rows
        col_widths = [
            max(len(str(row[col])) for row in all_rows if col < len(row))
            for col in range(len(headers))
        ]

        print(" | ".join(
            self._colorize(headers[i].ljust(col_widths[i]), Style.BRIGHT)
            for i in range(len(headers))
        ), file=self._out())
        print("-+-".join("-" * width for width in col_widths), file=self._out())

        for row in rows:
            print(" | ".join(
                str(row[i]).ljust(col_widths[i]) if i < len(row) else "".ljust(col_widths[i])
                for i in range(len(headers))
            ), file=self._out())

    def print_json(self, data: Any, indent: Optional[int] = 2):
        print(json.dumps(data, indent=indent, default=str), file=self._out())
