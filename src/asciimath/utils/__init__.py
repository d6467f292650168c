"""
asciimath utilities package
"""

from .escaping import escape_text, escape_attribute, escape_latex

__all__ = ["escape_text", "escape_attribute", "escape_latex"]
