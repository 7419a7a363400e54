"""
Presentation layer: CLI and console output.
"""
