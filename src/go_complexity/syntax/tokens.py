"""Go token vocabulary."""

# Operator and delimiter tokens that can appear as an assignment,
# increment, unary or binary operator.
OPERATORS = frozenset(
    {
        "+", "-", "*", "/", "%",
        "&", "|", "^", "<<", ">>", "&^",
        "+=", "-=", "*=", "/=", "%=",
        "&=", "|=", "^=", "<<=", ">>=", "&^=",
        "&&", "||", "<-", "++", "--",
        "==", "<", ">", "=", "!", "~",
        "!=", "<=", ">=", ":=", "...",
    }
)

# Binary operators that short-circuit; each one is a decision point.
LOGICAL_OPERATORS = frozenset({"&&", "||"})


def is_operator(tok: str) -> bool:
    """Report whether ``tok`` is an operator token rather than a keyword."""
    return tok in OPERATORS
