"""
Default Parser Symbol Table

Maps every built-in ASCIIMath spelling to a symbol id and grammar class.
Spellings and ids are a compatibility surface: renderers and custom tables
key on the ids registered here.
"""

from enum import Enum

from ..shared.symbol_table import SymbolTableBuilder


class GrammarClass(Enum):
    """Parser-relevant category of a symbol"""
    SYMBOL = "symbol"
    UNARY = "unary"
    BINARY = "binary"
    INFIX = "infix"
    LPAREN = "lparen"
    RPAREN = "rparen"
    LRPAREN = "lrparen"


class OperandConversion(Enum):
    """Operand rewrite applied by the parser after an operand is parsed"""
    NONE = "none"
    COLOR_TEXT = "color_text"


def add_default_parser_symbols(b: SymbolTableBuilder) -> SymbolTableBuilder:
    S = GrammarClass.SYMBOL
    UNARY = GrammarClass.UNARY
    BINARY = GrammarClass.BINARY
    INFIX = GrammarClass.INFIX

    # Operation symbols
    b.add('+', 'plus', S)
    b.add('-', 'minus', S)
    b.add('*', 'cdot', S)
    b.add('**', 'ast', S)
    b.add('***', 'star', S)
    b.add('//', 'slash', S)
    b.add('\\\\', 'backslash', S)
    b.add('setminus', 'setminus', S)
    b.add('xx', 'times', 'times', S)
    b.add('|><', 'ltimes', S)
    b.add('><|', 'rtimes', S)
    b.add('|><|', 'bowtie', S)
    b.add('-:', 'div', 'divide', 'div', S)
    b.add('@', 'circ', 'circ', S)
    b.add('o+', 'oplus', 'oplus', S)
    b.add('ox', 'otimes', 'otimes', S)
    b.add('o.', 'odot', 'odot', S)
    b.add('sum', 'sum', S)
    b.add('prod', 'prod', S)
    b.add('^^', 'wedge', 'wedge', S)
    b.add('^^^', 'bigwedge', 'bigwedge', S)
    b.add('vv', 'vee', 'vee', S)
    b.add('vvv', 'bigvee', 'bigvee', S)
    b.add('nn', 'cap', 'cap', S)
    b.add('nnn', 'bigcap', 'bigcap', S)
    b.add('uu', 'cup', 'cup', S)
    b.add('uuu', 'bigcup', 'bigcup', S)

    # Relation symbols
    b.add('=', 'eq', S)
    b.add('!=', 'ne', 'ne', S)
    b.add(':=', 'assign', S)
    b.add('<', 'lt', 'lt', S)
    b.add('>', 'gt', 'gt', S)
    b.add('<=', 'le', 'le', S)
    b.add('>=', 'ge', 'ge', S)
    b.add('-<', '-lt', 'prec', 'prec', S)
    b.add('>-', 'succ', 'succ', S)
    b.add('-<=', 'preceq', 'preceq', S)
    b.add('>-=', 'succeq', 'succeq', S)
    b.add('in', 'in', S)
    b.add('!in', 'notin', 'notin', S)
    b.add('sub', 'subset', 'subset', S)
    b.add('sup', 'supset', 'supset', S)
    b.add('sube', 'subseteq', 'subseteq', S)
    b.add('supe', 'supseteq', 'supseteq', S)
    b.add('-=', 'equiv', 'equiv', S)
    b.add('~=', 'cong', 'cong', S)
    b.add('~~', 'approx', 'approx', S)
    b.add('prop', 'propto', 'propto', S)

    # Logical symbols
    b.add('and', 'and', S)
    b.add('or', 'or', S)
    b.add('not', 'neg', 'not', S)
    b.add('=>', 'implies', 'implies', S)
    b.add('if', 'if', S)
    b.add('<=>', 'iff', 'iff', S)
    b.add('AA', 'forall', 'forall', S)
    b.add('EE', 'exists', 'exists', S)
    b.add('_|_', 'bot', 'bot', S)
    b.add('TT', 'top', 'top', S)
    b.add('|--', 'vdash', 'vdash', S)
    b.add('|==', 'models', 'models', S)

    # Grouping brackets
    b.add('(', 'lparen', GrammarClass.LPAREN)
    b.add(')', 'rparen', GrammarClass.RPAREN)
    b.add('[', 'lbracket', GrammarClass.LPAREN)
    b.add(']', 'rbracket', GrammarClass.RPAREN)
    b.add('{', 'lbrace', GrammarClass.LPAREN)
    b.add('}', 'rbrace', GrammarClass.RPAREN)
    b.add('|', 'vbar', GrammarClass.LRPAREN)
    b.add(':|:', 'vbar', S)
    b.add('|:', 'vbar', GrammarClass.LPAREN)
    b.add(':|', 'vbar', GrammarClass.RPAREN)
    b.add('(:', '<<', 'langle', GrammarClass.LPAREN)
    b.add(':)', '>>', 'rangle', GrammarClass.RPAREN)
    b.add('{:', None, GrammarClass.LPAREN)
    b.add(':}', None, GrammarClass.RPAREN)

    # Miscellaneous symbols
    b.add('int', 'integral', 'integral', S)
    b.add('dx', 'dx', S)
    b.add('dy', 'dy', S)
    b.add('dz', 'dz', S)
    b.add('dt', 'dt', S)
    b.add('oint', 'contourintegral', S)
    b.add('del', 'partial', S)
    b.add('grad', 'nabla', S)
    b.add('+-', 'pm', S)
    b.add('O/', 'emptyset', S)
    b.add('oo', 'infty', S)
    b.add('aleph', 'aleph', S)
    b.add('...', 'ellipsis', 'ellipsis', S)
    b.add(':.', 'therefore', S)
    b.add(":'", 'because', S)
    b.add('/_', 'angle', S)
    b.add('/_\\', 'triangle', S)
    b.add("'", 'prime', S)
    b.add('\\ ', 'nbsp', S)
    b.add('frown', 'frown', S)
    b.add('quad', 'quad', S)
    b.add('qquad', 'qquad', S)
    b.add('cdots', 'cdots', S)
    b.add('vdots', 'vdots', S)
    b.add('ddots', 'ddots', S)
    b.add('diamond', 'diamond', S)
    b.add('square', 'square', S)
    b.add('|__', 'lfloor', S)
    b.add('__|', 'rfloor', S)
    b.add('|~', 'lceiling', S)
    b.add('~|', 'rceiling', S)
    b.add('CC', 'dstruck_captial_c', S)
    b.add('NN', 'dstruck_captial_n', S)
    b.add('QQ', 'dstruck_captial_q', S)
    b.add('RR', 'dstruck_captial_r', S)
    b.add('ZZ', 'dstruck_captial_z', S)
    b.add('f', 'f', S)
    b.add('g', 'g', S)

    # Standard functions
    b.add('lim', 'lim', S)
    b.add('Lim', 'Lim', S)
    b.add('min', 'min', S)
    b.add('max', 'max', S)
    for name in (
        'sin', 'Sin', 'cos', 'Cos', 'tan', 'Tan',
        'sinh', 'Sinh', 'cosh', 'Cosh', 'tanh', 'Tanh',
        'cot', 'Cot', 'sec', 'Sec', 'csc', 'Csc',
        'arcsin', 'arccos', 'arctan', 'coth', 'sech', 'csch', 'exp',
        'abs', 'Abs', 'norm', 'floor', 'ceil',
        'log', 'Log', 'ln', 'Ln', 'det', 'dim', 'mod', 'gcd', 'lcm', 'lub', 'glb',
    ):
        b.add(name, name, UNARY)

    # Arrows
    b.add('uarr', 'uparrow', S)
    b.add('darr', 'downarrow', S)
    b.add('rarr', 'rightarrow', S)
    b.add('->', 'to', 'to', S)
    b.add('>->', 'rightarrowtail', S)
    b.add('->>', 'twoheadrightarrow', S)
    b.add('>->>', 'twoheadrightarrowtail', S)
    b.add('|->', 'mapsto', S)
    b.add('larr', 'leftarrow', S)
    b.add('harr', 'leftrightarrow', S)
    b.add('rArr', 'Rightarrow', S)
    b.add('lArr', 'Leftarrow', S)
    b.add('hArr', 'Leftrightarrow', S)

    # Other
    b.add('sqrt', 'sqrt', UNARY)
    b.add('cancel', 'cancel', UNARY)
    b.add('root', 'root', BINARY)
    b.add('frac', 'frac', BINARY)
    b.add('stackrel', 'stackrel', BINARY)
    b.add('overset', 'overset', BINARY)
    b.add('underset', 'underset', BINARY)
    b.add('color', 'color', BINARY, convert_operand1=OperandConversion.COLOR_TEXT)
    b.add('/', 'frac', INFIX)
    b.add('_', 'sub', INFIX)
    b.add('^', 'sup', INFIX)

    # Accents
    b.add('hat', 'hat', UNARY)
    b.add('bar', 'overline', 'overline', UNARY)
    b.add('vec', 'vec', UNARY)
    b.add('tilde', 'tilde', UNARY)
    b.add('dot', 'dot', UNARY)
    b.add('ddot', 'ddot', UNARY)
    b.add('overarc', 'overparen', 'overarc', UNARY)
    b.add('ul', 'underline', 'underline', UNARY)
    b.add('ubrace', 'underbrace', 'underbrace', UNARY)
    b.add('obrace', 'overbrace', 'overbrace', UNARY)

    # Fonts
    b.add('bb', 'mathbf', 'bold', UNARY)
    b.add('bbb', 'mathbb', 'double_struck', UNARY)
    b.add('ii', 'italic', UNARY)
    b.add('bii', 'bold_italic', UNARY)
    b.add('cc', 'mathcal', 'script', UNARY)
    b.add('bcc', 'bold_script', UNARY)
    b.add('tt', 'mathtt', 'monospace', UNARY)
    b.add('fr', 'mathfrak', 'fraktur', UNARY)
    b.add('bfr', 'bold_fraktur', UNARY)
    b.add('sf', 'mathsf', 'sans_serif', UNARY)
    b.add('bsf', 'bold_sans_serif', UNARY)
    b.add('sfi', 'sans_serif_italic', UNARY)
    b.add('sfbi', 'sans_serif_bold_italic', UNARY)

    # Greek letters
    for name in (
        'alpha', 'Alpha', 'beta', 'Beta', 'gamma', 'Gamma', 'delta', 'Delta',
        'epsilon', 'Epsilon', 'varepsilon', 'zeta', 'Zeta', 'eta', 'Eta',
        'theta', 'Theta', 'vartheta', 'iota', 'Iota', 'kappa', 'Kappa',
        'lambda', 'Lambda', 'mu', 'Mu', 'nu', 'Nu', 'xi', 'Xi',
        'omicron', 'Omicron', 'pi', 'Pi', 'rho', 'Rho', 'sigma', 'Sigma',
        'tau', 'Tau', 'upsilon', 'Upsilon', 'phi', 'Phi', 'varphi',
        'chi', 'Chi', 'psi', 'Psi', 'omega', 'Omega',
    ):
        b.add(name, name, S)

    return b


DEFAULT_PARSER_SYMBOL_TABLE = add_default_parser_symbols(SymbolTableBuilder()).build()
