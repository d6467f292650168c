"""
LaTeX Backend

Writes LaTeX math-mode source. Symbols resolve through a LaTeX display
table: the default display table with every value replaced by the LaTeX
command or character that shows it.
"""

import logging
from typing import Iterable, List, Optional

from ..shared.nodes import ASTNode, Color, Symbol, Identifier, Number, Text
from ..shared.symbol_table import SymbolTable, SymbolTableBuilder
from ..utils.config import LATEX_MISSING_DELIMITER
from ..utils.escaping import escape_latex
from .base import MarkupBuilder, Rows
from .display_symbols import AccentPosition, DEFAULT_DISPLAY_SYMBOL_TABLE

logger = logging.getLogger(__name__)

# Operands written after _ and ^ without braces
_SCRIPT_LEAVES = (Symbol, Identifier, Number, Text)

_OPERATOR_NAMES = (
    'Sin', 'Cos', 'Tan', 'Sinh', 'Cosh', 'Tanh', 'Cot', 'Sec', 'Csc',
    'sech', 'csch', 'Log', 'Ln', 'mod', 'lcm', 'lub', 'glb', 'Lim',
)

_LATEX_VALUES = {
    # Operation symbols
    'minus': '-', 'cdot': '\\cdot', 'ast': '\\ast', 'star': '\\star',
    'backslash': '\\backslash', 'setminus': '\\setminus', 'times': '\\times',
    'ltimes': '\\ltimes', 'rtimes': '\\rtimes', 'bowtie': '\\bowtie', 'div': '\\div',
    'circ': '\\circ', 'oplus': '\\oplus', 'otimes': '\\otimes', 'odot': '\\odot',
    'sum': '\\sum', 'prod': '\\prod', 'wedge': '\\wedge', 'bigwedge': '\\bigwedge',
    'vee': '\\vee', 'bigvee': '\\bigvee', 'cap': '\\cap', 'bigcap': '\\bigcap',
    'cup': '\\cup', 'bigcup': '\\bigcup',

    # Relation symbols
    'ne': '\\neq', 'assign': ':=', 'le': '\\leq', 'ge': '\\geq',
    'prec': '\\prec', 'succ': '\\succ', 'preceq': '\\preceq', 'succeq': '\\succeq',
    'in': '\\in', 'notin': '\\notin', 'subset': '\\subset', 'supset': '\\supset',
    'subseteq': '\\subseteq', 'supseteq': '\\supseteq', 'equiv': '\\equiv',
    'cong': '\\cong', 'approx': '\\approx', 'propto': '\\propto',

    # Logical symbols
    'and': '\\text{and}', 'or': '\\text{or}', 'not': '\\neg', 'implies': '\\implies',
    'if': '\\text{if}', 'iff': '\\iff', 'forall': '\\forall', 'exists': '\\exists',
    'bot': '\\bot', 'top': '\\top', 'vdash': '\\vdash', 'models': '\\models',

    # Grouping brackets
    'lbrace': '\\{', 'rbrace': '\\}', 'langle': '\\langle', 'rangle': '\\rangle',
    'parallel': '\\parallel',

    # Miscellaneous symbols
    'integral': '\\int', 'contourintegral': '\\oint', 'partial': '\\partial',
    'nabla': '\\nabla', 'pm': '\\pm', 'emptyset': '\\emptyset', 'infty': '\\infty',
    'aleph': '\\aleph', 'ellipsis': '\\ldots', 'therefore': '\\therefore',
    'because': '\\because', 'angle': '\\angle', 'triangle': '\\triangle', 'prime': "'",
    'tilde': '\\tilde', 'nbsp': '\\;', 'frown': '\\frown', 'quad': '\\quad',
    'qquad': '\\qquad', 'cdots': '\\cdots', 'vdots': '\\vdots', 'ddots': '\\ddots',
    'diamond': '\\diamond', 'square': '\\square', 'lfloor': '\\lfloor',
    'rfloor': '\\rfloor', 'lceiling': '\\lceil', 'rceiling': '\\rceil',
    'dstruck_captial_c': '\\mathbb{C}', 'dstruck_captial_n': '\\mathbb{N}',
    'dstruck_captial_q': '\\mathbb{Q}', 'dstruck_captial_r': '\\mathbb{R}',
    'dstruck_captial_z': '\\mathbb{Z}',

    # Standard functions
    'lim': '\\lim', 'min': '\\min', 'max': '\\max',
    'sin': '\\sin', 'cos': '\\cos', 'tan': '\\tan', 'sinh': '\\sinh', 'cosh': '\\cosh',
    'tanh': '\\tanh', 'cot': '\\cot', 'sec': '\\sec', 'csc': '\\csc',
    'arcsin': '\\arcsin', 'arccos': '\\arccos', 'arctan': '\\arctan', 'coth': '\\coth',
    'exp': '\\exp', 'log': '\\log', 'ln': '\\ln', 'det': '\\det', 'dim': '\\dim',
    'gcd': '\\gcd',

    # Arrows
    'uparrow': '\\uparrow', 'downarrow': '\\downarrow', 'rightarrow': '\\rightarrow',
    'to': '\\rightarrow', 'rightarrowtail': '\\rightarrowtail',
    'twoheadrightarrow': '\\twoheadrightarrow',
    'twoheadrightarrowtail': '\\twoheadrightarrowtail', 'mapsto': '\\mapsto',
    'leftarrow': '\\leftarrow', 'leftrightarrow': '\\leftrightarrow',
    'Rightarrow': '\\Rightarrow', 'Leftarrow': '\\Leftarrow',
    'Leftrightarrow': '\\Leftrightarrow',

    # Unary and binary tags
    'sqrt': '\\sqrt', 'cancel': '\\cancel', 'root': '\\sqrt', 'frac': '\\frac',
    'stackrel': '\\stackrel', 'overset': '\\overset', 'underset': '\\underset',
    'color': '\\textcolor', 'sub': '\\_', 'sup': '\\textasciicircum{}',

    # Accents
    'hat': '\\hat', 'overline': '\\overline', 'vec': '\\vec', 'dot': '\\dot',
    'ddot': '\\ddot', 'overarc': '\\overparen', 'underline': '\\underline',
    'underbrace': '\\underbrace', 'overbrace': '\\overbrace',

    # Fonts
    'bold': '\\mathbf', 'double_struck': '\\mathbb', 'italic': '\\mathit',
    'bold_italic': '\\boldsymbol', 'script': '\\mathscr', 'bold_script': '\\mathscr',
    'monospace': '\\mathtt', 'fraktur': '\\mathfrak', 'bold_fraktur': '\\mathfrak',
    'sans_serif': '\\mathsf', 'bold_sans_serif': '\\mathsf',
    'sans_serif_italic': '\\mathsf', 'sans_serif_bold_italic': '\\mathsf',

    # Greek letters; capitals without a command are plain Latin look-alikes
    'alpha': '\\alpha', 'Alpha': 'A', 'beta': '\\beta', 'Beta': 'B',
    'gamma': '\\gamma', 'Gamma': '\\Gamma', 'delta': '\\delta', 'Delta': '\\Delta',
    'epsilon': '\\epsilon', 'Epsilon': 'E', 'varepsilon': '\\varepsilon',
    'zeta': '\\zeta', 'Zeta': 'Z', 'eta': '\\eta', 'Eta': 'H',
    'theta': '\\theta', 'Theta': '\\Theta', 'vartheta': '\\vartheta',
    'iota': '\\iota', 'Iota': 'I', 'kappa': '\\kappa', 'Kappa': 'K',
    'lambda': '\\lambda', 'Lambda': '\\Lambda', 'mu': '\\mu', 'Mu': 'M',
    'nu': '\\nu', 'Nu': 'N', 'xi': '\\xi', 'Xi': '\\Xi', 'omicron': 'o', 'Omicron': 'O',
    'pi': '\\pi', 'Pi': '\\Pi', 'rho': '\\rho', 'Rho': 'P', 'sigma': '\\sigma',
    'Sigma': '\\Sigma', 'tau': '\\tau', 'Tau': 'T', 'upsilon': '\\upsilon',
    'Upsilon': '\\Upsilon', 'phi': '\\phi', 'Phi': '\\Phi', 'varphi': '\\varphi',
    'chi': '\\chi', 'Chi': 'X', 'psi': '\\psi', 'Psi': '\\Psi', 'omega': '\\omega',
    'Omega': '\\Omega',
}


def add_default_latex_symbols(b: SymbolTableBuilder,
                              display_table: SymbolTable = DEFAULT_DISPLAY_SYMBOL_TABLE) -> SymbolTableBuilder:
    """Copy a display table, swapping each value for its LaTeX spelling"""
    for key, descriptor in display_table.items():
        if key in _LATEX_VALUES:
            value = _LATEX_VALUES[key]
        elif key in _OPERATOR_NAMES:
            value = f"\\operatorname{{{key}}}"
        else:
            value = descriptor.value
        b.add(key, value, descriptor.kind, **dict(descriptor.extra))
    return b


DEFAULT_LATEX_SYMBOL_TABLE = add_default_latex_symbols(SymbolTableBuilder()).build()


class LatexBuilder(MarkupBuilder):
    """
    Writes LaTeX source for one expression.

    Table values are LaTeX already and are written as is; identifiers and
    text from the input are escaped.
    """

    def __init__(self, symbol_table: Optional[SymbolTable] = None):
        super().__init__(symbol_table if symbol_table is not None else DEFAULT_LATEX_SYMBOL_TABLE)
        self._out: List[str] = []

    def append_expression(self, node: Optional[ASTNode]) -> 'LatexBuilder':
        self.append(node)
        return self

    def __str__(self) -> str:
        return ''.join(self._out)

    def _braced(self, node: Optional[ASTNode]) -> None:
        self._out.append("{")
        self.append(node)
        self._out.append("}")

    def _command(self, command: str, *args: Optional[ASTNode]) -> None:
        self._out.append(command)
        for arg in args:
            self._braced(arg)

    def _script(self, marker: str, node: ASTNode) -> None:
        self._out.append(marker)
        if isinstance(node, _SCRIPT_LEAVES):
            self.append(node)
        else:
            self._braced(node)

    def visit_symbol(self, node: Symbol) -> None:
        descriptor = self.resolve_symbol(node)
        if descriptor is not None:
            self._out.append(descriptor.value)
        elif node.value is not None:
            self._out.append(escape_latex(node.value))

    # ============================================
    # LAYOUT HOOKS
    # ============================================

    def append_row(self, items: Iterable[ASTNode]) -> None:
        for i, item in enumerate(items):
            if i:
                self._out.append(" ")
            self.append(item)

    def append_operator(self, operator: str) -> None:
        self._out.append(operator)

    def append_identifier(self, identifier: str) -> None:
        self._out.append(escape_latex(identifier))

    def append_text(self, text: str) -> None:
        self._out.append(f"\\text{{{escape_latex(text)}}}")

    def append_number(self, number: str) -> None:
        self._out.append(number)

    def append_sqrt(self, expression: Optional[ASTNode]) -> None:
        self._command("\\sqrt", expression)

    def append_cancel(self, expression: Optional[ASTNode]) -> None:
        self._command("\\cancel", expression)

    def append_root(self, base: Optional[ASTNode], index: Optional[ASTNode]) -> None:
        self._out.append("\\sqrt[")
        self.append(index)
        self._out.append("]")
        self._braced(base)

    def append_color(self, color: Color, expression: Optional[ASTNode]) -> None:
        self._out.append(f"\\textcolor[RGB]{{{color.r},{color.g},{color.b}}}")
        self._braced(expression)

    def append_fraction(self, numerator: Optional[ASTNode], denominator: Optional[ASTNode]) -> None:
        self._command("\\frac", numerator, denominator)

    def append_font(self, style: str, expression: Optional[ASTNode]) -> None:
        self._command(style, expression)

    def append_matrix(self, lparen: Optional[str], rows: Rows, rparen: Optional[str]) -> None:
        fenced = lparen is not None or rparen is not None
        if fenced:
            self._out.append(f"\\left {lparen or LATEX_MISSING_DELIMITER} ")
        self._out.append("\\begin{matrix} ")
        for i, row in enumerate(rows):
            if i:
                self._out.append(" \\\\ ")
            for j, cell in enumerate(row):
                if j:
                    self._out.append(" & ")
                self.append(cell)
        self._out.append(" \\end{matrix}")
        if fenced:
            self._out.append(f" \\right {rparen or LATEX_MISSING_DELIMITER}")

    def append_operator_unary(self, operator: str, expression: Optional[ASTNode]) -> None:
        self.append_identifier_unary(operator, expression)

    def append_identifier_unary(self, identifier: str, expression: Optional[ASTNode]) -> None:
        self._out.append(identifier)
        if expression is not None:
            self._out.append(" ")
            self.append(expression)

    def append_paren(self, lparen: Optional[str], expression: Optional[ASTNode], rparen: Optional[str]) -> None:
        if lparen is None and rparen is None:
            self.append(expression)
            return
        self._out.append(f"\\left {lparen or LATEX_MISSING_DELIMITER} ")
        self.append(expression)
        self._out.append(f" \\right {rparen or LATEX_MISSING_DELIMITER}")

    def append_subsup(self, base: Optional[ASTNode], sub: Optional[ASTNode], sup: Optional[ASTNode]) -> None:
        self.append(base)
        if sub is not None:
            self._script("_", sub)
        if sup is not None:
            self._script("^", sup)

    def append_underover(self, base: Optional[ASTNode], under: Optional[ASTNode], over: Optional[ASTNode]) -> None:
        # Limits placement is decided by the LaTeX command itself
        self.append_subsup(base, under, over)

    def append_accent(self, expression: Optional[ASTNode], accent: Symbol, position: AccentPosition) -> None:
        descriptor = self.resolve_symbol(accent)
        self._command(descriptor.value if descriptor is not None else f"\\{accent.value}", expression)

    def append_overset(self, base: Optional[ASTNode], over: Optional[ASTNode]) -> None:
        self._command("\\overset", over, base)

    def append_underset(self, base: Optional[ASTNode], under: Optional[ASTNode]) -> None:
        self._command("\\underset", under, base)


def to_latex(node: Optional[ASTNode]) -> str:
    """Render an AST (or None) to LaTeX source"""
    logger.debug("Rendering LaTeX")
    return str(LatexBuilder().append_expression(node))
