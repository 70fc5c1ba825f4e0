class EmojiError(Exception):
    """Base class for fatal interpreter errors.

    str(err) is the human-readable message; `kind` names the error category.
    """
    kind = 'EmojiError'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedFunctionLiteral(EmojiError):
    """A function literal has no ▶️ between its parameters and body."""
    kind = 'MalformedFunctionLiteral'


class MalformedConditional(EmojiError):
    """A conditional lacks ▶️, or its condition lacks 🟰."""
    kind = 'MalformedConditional'


class ArityMismatch(EmojiError):
    """A function without parameters was called with arguments."""
    kind = 'ArityMismatch'


class UnresolvedStatement(EmojiError):
    """A line is neither a statement nor a call of a bound function."""
    kind = 'UnresolvedStatement'
