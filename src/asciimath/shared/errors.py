"""
Error Types

Parsing never raises: malformed ASCIIMath degrades to a best-effort tree.
The exceptions here cover table construction misuse and internal errors.
"""

from typing import Optional


# ============================================================================
# Exception Classes
# ============================================================================

class AsciiMathError(Exception):
    """Base exception for all asciimath errors"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class SymbolTableError(AsciiMathError):
    """
    Invalid symbol table construction.

    Raised by SymbolTableBuilder.add when:
    - fewer than three positional arguments are given (spelling, value, kind)
    - a spelling is registered twice while overwrites are disallowed
    """
    def __init__(self, message: str, spelling: Optional[str] = None, error_code: str = "E0101"):
        super().__init__(message, error_code)
        self.spelling = spelling


class ColorTableError(AsciiMathError):
    """Invalid color table construction (no names, component out of range)"""
    def __init__(self, message: str, error_code: str = "E0201"):
        super().__init__(message, error_code)

