"""
Markup escaping shared by the MathML and HTML builders
"""

from typing import Mapping

from .config import MAX_UNESCAPED_CODE_POINT, XML_ESCAPES, XML_ATTRIBUTE_ESCAPES, LATEX_SPECIAL_CHARACTERS


def _escape(text: str, table: Mapping[str, str]) -> str:
    out = []
    for c in text:
        if c in table:
            out.append(table[c])
        elif ord(c) > MAX_UNESCAPED_CODE_POINT:
            out.append(f"&#x{ord(c):X};")
        else:
            out.append(c)
    return ''.join(out)


def escape_text(text: str) -> str:
    """Escape element content: & < > and every non-ASCII code point"""
    return _escape(text, XML_ESCAPES)


def escape_attribute(value: str) -> str:
    """Escape a double-quoted attribute value"""
    return _escape(value, XML_ATTRIBUTE_ESCAPES)


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters; non-ASCII passes through"""
    return ''.join(LATEX_SPECIAL_CHARACTERS.get(c, c) for c in text)
