"""
Default Display Symbol Table

Maps parser symbol ids to the character (or tag name) a markup builder
shows and the display class that decides how it is laid out.
"""

from enum import Enum

from ..shared.symbol_table import SymbolTableBuilder


class DisplayClass(Enum):
    """Renderer-relevant category of a symbol id"""
    OPERATOR = "operator"
    IDENTIFIER = "identifier"
    TEXT = "text"
    LPAREN = "lparen"
    RPAREN = "rparen"
    LRPAREN = "lrparen"
    ACCENT = "accent"
    WRAP = "wrap"
    SQRT = "sqrt"
    CANCEL = "cancel"
    ROOT = "root"
    FRAC = "frac"
    OVER = "over"
    UNDER = "under"
    COLOR = "color"
    FONT = "font"


class AccentPosition(Enum):
    OVER = "over"
    UNDER = "under"


def add_default_display_symbols(b: SymbolTableBuilder) -> SymbolTableBuilder:
    OP = DisplayClass.OPERATOR
    ID = DisplayClass.IDENTIFIER
    ACCENT = DisplayClass.ACCENT
    FONT = DisplayClass.FONT
    OVER = AccentPosition.OVER
    UNDER = AccentPosition.UNDER

    # Operation symbols
    b.add('plus', '+', OP)
    b.add('minus', '−', OP)
    b.add('cdot', '⋅', OP)
    b.add('ast', '*', OP)
    b.add('star', '⋆', OP)
    b.add('slash', '/', OP)
    b.add('backslash', '\\', OP)
    b.add('setminus', '\\', OP)
    b.add('times', '×', OP)
    b.add('ltimes', '⋉', OP)
    b.add('rtimes', '⋊', OP)
    b.add('bowtie', '⋈', OP)
    b.add('div', '÷', OP)
    b.add('circ', '⚬', OP)
    b.add('oplus', '⊕', OP)
    b.add('otimes', '⊗', OP)
    b.add('odot', '⊙', OP)
    b.add('sum', '∑', OP, underover=True)
    b.add('prod', '∏', OP, underover=True)
    b.add('wedge', '∧', OP)
    b.add('bigwedge', '⋀', OP, underover=True)
    b.add('vee', '∨', OP)
    b.add('bigvee', '⋁', OP, underover=True)
    b.add('cap', '∩', OP)
    b.add('bigcap', '⋂', OP, underover=True)
    b.add('cup', '∪', OP)
    b.add('bigcup', '⋃', OP, underover=True)

    # Relation symbols
    b.add('eq', '=', OP)
    b.add('ne', '≠', OP)
    b.add('assign', '≔', OP)
    b.add('lt', '<', OP)
    b.add('gt', '>', OP)
    b.add('le', '≤', OP)
    b.add('ge', '≥', OP)
    b.add('prec', '≺', OP)
    b.add('succ', '≻', OP)
    b.add('preceq', '⪯', OP)
    b.add('succeq', '⪰', OP)
    b.add('in', '∈', OP)
    b.add('notin', '∉', OP)
    b.add('subset', '⊂', OP)
    b.add('supset', '⊃', OP)
    b.add('subseteq', '⊆', OP)
    b.add('supseteq', '⊇', OP)
    b.add('equiv', '≡', OP)
    b.add('cong', '≅', OP)
    b.add('approx', '≈', OP)
    b.add('propto', '∝', OP)

    # Logical symbols
    b.add('and', 'and', DisplayClass.TEXT)
    b.add('or', 'or', DisplayClass.TEXT)
    b.add('not', '¬', OP)
    b.add('implies', '⇒', OP)
    b.add('if', 'if', OP)
    b.add('iff', '⇔', OP)
    b.add('forall', '∀', OP)
    b.add('exists', '∃', OP)
    b.add('bot', '⊥', OP)
    b.add('top', '⊤', OP)
    b.add('vdash', '⊢', OP)
    b.add('models', '⊨', OP)

    # Grouping brackets
    b.add('lparen', '(', DisplayClass.LPAREN)
    b.add('rparen', ')', DisplayClass.RPAREN)
    b.add('lbracket', '[', DisplayClass.LPAREN)
    b.add('rbracket', ']', DisplayClass.RPAREN)
    b.add('lbrace', '{', DisplayClass.LPAREN)
    b.add('rbrace', '}', DisplayClass.RPAREN)
    b.add('vbar', '|', DisplayClass.LRPAREN)
    b.add('langle', '〈', DisplayClass.LPAREN)
    b.add('rangle', '〉', DisplayClass.RPAREN)
    b.add('parallel', '∥', DisplayClass.LRPAREN)

    # Miscellaneous symbols
    b.add('integral', '∫', OP)
    b.add('dx', 'dx', ID)
    b.add('dy', 'dy', ID)
    b.add('dz', 'dz', ID)
    b.add('dt', 'dt', ID)
    b.add('contourintegral', '∮', OP)
    b.add('partial', '∂', OP)
    b.add('nabla', '∇', OP)
    b.add('pm', '±', OP)
    b.add('emptyset', '∅', OP)
    b.add('infty', '∞', OP)
    b.add('aleph', 'ℵ', OP)
    b.add('ellipsis', '…', OP)
    b.add('therefore', '∴', OP)
    b.add('because', '∵', OP)
    b.add('angle', '∠', OP)
    b.add('triangle', '△', OP)
    b.add('prime', '′', OP)
    b.add('tilde', '~', ACCENT, position=OVER)
    b.add('nbsp', '\u00a0', OP)
    b.add('frown', '⌢', OP)
    b.add('quad', '\u00a0\u00a0', OP)
    b.add('qquad', '\u00a0\u00a0\u00a0\u00a0', OP)
    b.add('cdots', '⋯', OP)
    b.add('vdots', '⋮', OP)
    b.add('ddots', '⋱', OP)
    b.add('diamond', '⋄', OP)
    b.add('square', '□', OP)
    b.add('lfloor', '⌊', OP)
    b.add('rfloor', '⌋', OP)
    b.add('lceiling', '⌈', OP)
    b.add('rceiling', '⌉', OP)
    b.add('dstruck_captial_c', 'ℂ', OP)
    b.add('dstruck_captial_n', 'ℕ', OP)
    b.add('dstruck_captial_q', 'ℚ', OP)
    b.add('dstruck_captial_r', 'ℝ', OP)
    b.add('dstruck_captial_z', 'ℤ', OP)
    b.add('f', 'f', ID)
    b.add('g', 'g', ID)

    # Standard functions
    b.add('lim', 'lim', OP, underover=True)
    b.add('Lim', 'Lim', OP, underover=True)
    b.add('min', 'min', OP, underover=True)
    b.add('max', 'max', OP, underover=True)
    for name in (
        'sin', 'Sin', 'cos', 'Cos', 'tan', 'Tan',
        'sinh', 'Sinh', 'cosh', 'Cosh', 'tanh', 'Tanh',
        'cot', 'Cot', 'sec', 'Sec', 'csc', 'Csc',
        'arcsin', 'arccos', 'arctan', 'coth', 'sech', 'csch', 'exp',
        'log', 'Log', 'ln', 'Ln', 'det', 'dim', 'mod', 'gcd', 'lcm', 'lub', 'glb',
    ):
        b.add(name, name, ID)
    # Wrap delimiters are symbol ids, resolved through the same table
    b.add('abs', 'abs', DisplayClass.WRAP, lparen='vbar', rparen='vbar')
    b.add('Abs', 'Abs', DisplayClass.WRAP, lparen='vbar', rparen='vbar')
    b.add('norm', 'norm', DisplayClass.WRAP, lparen='parallel', rparen='parallel')
    b.add('floor', 'floor', DisplayClass.WRAP, lparen='lfloor', rparen='rfloor')
    b.add('ceil', 'ceil', DisplayClass.WRAP, lparen='lceiling', rparen='rceiling')

    # Arrows
    b.add('uparrow', '↑', OP)
    b.add('downarrow', '↓', OP)
    b.add('rightarrow', '→', OP)
    b.add('to', '→', OP)
    b.add('rightarrowtail', '↣', OP)
    b.add('twoheadrightarrow', '↠', OP)
    b.add('twoheadrightarrowtail', '⤖', OP)
    b.add('mapsto', '↦', OP)
    b.add('leftarrow', '←', OP)
    b.add('leftrightarrow', '↔', OP)
    b.add('Rightarrow', '⇒', OP)
    b.add('Leftarrow', '⇐', OP)
    b.add('Leftrightarrow', '⇔', OP)

    # Unary tags
    b.add('sqrt', 'sqrt', DisplayClass.SQRT)
    b.add('cancel', 'cancel', DisplayClass.CANCEL)

    # Binary tags
    b.add('root', 'root', DisplayClass.ROOT)
    b.add('frac', 'frac', DisplayClass.FRAC)
    b.add('stackrel', 'stackrel', DisplayClass.OVER)
    b.add('overset', 'overset', DisplayClass.OVER)
    b.add('underset', 'underset', DisplayClass.UNDER)
    b.add('color', 'color', DisplayClass.COLOR)

    # Accents
    b.add('sub', '_', OP)
    b.add('sup', '^', OP)
    b.add('hat', '^', ACCENT, position=OVER)
    b.add('overline', '¯', ACCENT, position=OVER)
    b.add('vec', '→', ACCENT, position=OVER)
    b.add('dot', '.', ACCENT, position=OVER)
    b.add('ddot', '..', ACCENT, position=OVER)
    b.add('overarc', '⏜', ACCENT, position=OVER)
    b.add('underline', '_', ACCENT, position=UNDER)
    b.add('underbrace', '⏟', ACCENT, position=UNDER)
    b.add('overbrace', '⏞', ACCENT, position=OVER)

    # Fonts
    for name in (
        'bold', 'double_struck', 'italic', 'bold_italic', 'script', 'bold_script',
        'monospace', 'fraktur', 'bold_fraktur', 'sans_serif', 'bold_sans_serif',
        'sans_serif_italic', 'sans_serif_bold_italic',
    ):
        b.add(name, name, FONT)

    # Greek letters; capitals with a distinct glyph display as operators
    b.add('alpha', 'α', ID)
    b.add('Alpha', 'Α', ID)
    b.add('beta', 'β', ID)
    b.add('Beta', 'Β', ID)
    b.add('gamma', 'γ', ID)
    b.add('Gamma', 'Γ', OP)
    b.add('delta', 'δ', ID)
    b.add('Delta', 'Δ', OP)
    b.add('epsilon', 'ε', ID)
    b.add('Epsilon', 'Ε', ID)
    b.add('varepsilon', 'ɛ', ID)
    b.add('zeta', 'ζ', ID)
    b.add('Zeta', 'Ζ', ID)
    b.add('eta', 'η', ID)
    b.add('Eta', 'Η', ID)
    b.add('theta', 'θ', ID)
    b.add('Theta', 'Θ', OP)
    b.add('vartheta', 'ϑ', ID)
    b.add('iota', 'ι', ID)
    b.add('Iota', 'Ι', ID)
    b.add('kappa', 'κ', ID)
    b.add('Kappa', 'Κ', ID)
    b.add('lambda', 'λ', ID)
    b.add('Lambda', 'Λ', OP)
    b.add('mu', 'μ', ID)
    b.add('Mu', 'Μ', ID)
    b.add('nu', 'ν', ID)
    b.add('Nu', 'Ν', ID)
    b.add('xi', 'ξ', ID)
    b.add('Xi', 'Ξ', OP)
    b.add('omicron', 'ο', ID)
    b.add('Omicron', 'Ο', ID)
    b.add('pi', 'π', ID)
    b.add('Pi', 'Π', OP)
    b.add('rho', 'ρ', ID)
    b.add('Rho', 'Ρ', ID)
    b.add('sigma', 'σ', ID)
    b.add('Sigma', 'Σ', OP)
    b.add('tau', 'τ', ID)
    b.add('Tau', 'Τ', ID)
    b.add('upsilon', 'υ', ID)
    b.add('Upsilon', 'Υ', ID)
    b.add('phi', 'φ', ID)
    b.add('Phi', 'Φ', ID)
    b.add('varphi', 'ϕ', ID)
    b.add('chi', 'χ', ID)
    b.add('Chi', 'Χ', ID)
    b.add('psi', 'ψ', ID)
    b.add('Psi', 'Ψ', ID)
    b.add('omega', 'ω', ID)
    b.add('Omega', 'Ω', OP)

    return b


DEFAULT_DISPLAY_SYMBOL_TABLE = add_default_display_symbols(SymbolTableBuilder()).build()
