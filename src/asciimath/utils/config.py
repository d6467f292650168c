"""
Configuration constants to replace magic numbers throughout asciimath
"""

# Markup escaping constants
MAX_UNESCAPED_CODE_POINT = 127  # Anything above is written as a hex character reference
XML_ESCAPES = {'&': "&amp;", '<': "&lt;", '>': "&gt;"}
XML_ATTRIBUTE_ESCAPES = {'&': "&amp;", '<': "&lt;", '>': "&gt;", '"': "&quot;"}

# MathML output
DEFAULT_MATHML_PREFIX = ""  # Namespace prefix prepended to every tag name, e.g. "m:"
DEFAULT_MATHML_FENCED = False  # <mrow><mo>(</mo>...<mo>)</mo></mrow> unless set

# HTML output
HTML_CLASS_PREFIX = "math-"
ZERO_WIDTH_JOINER = "\u200d"  # Fills empty script and blank cells
DEFAULT_HTML_INLINE = True

# LaTeX output
LATEX_SPECIAL_CHARACTERS = {
    '&': "\\&",
    '%': "\\%",
    '$': "\\$",
    '#': "\\#",
    '_': "\\_",
    '{': "\\{",
    '}': "\\}",
    '~': "\\textasciitilde{}",
    '^': "\\textasciicircum{}",
    '\\': "\\textbackslash{}",
}
LATEX_MISSING_DELIMITER = "."  # \left. / \right. placeholder
