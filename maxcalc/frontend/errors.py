class CalcError(Exception):
    """Failure raised while lexing or parsing an expression.

    Carries a single human-readable message; callers only check whether
    parsing failed and may display the message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class LexError(CalcError):
    pass

class ParseError(CalcError):
    pass
