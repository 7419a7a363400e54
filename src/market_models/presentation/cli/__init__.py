"""
Command line entry points.
"""

from .main import MarketModelsCLI, main

__all__ = ['MarketModelsCLI', 'main']
