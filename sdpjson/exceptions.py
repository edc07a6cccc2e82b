class SdpError(ValueError):
    """
    Base class for errors raised while parsing a session description.

    :attr:`line` holds the offending line, if any.
    """

    def __init__(self, message, line=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return '%s in line %r' % (self.message, self.line)


class StructuralError(SdpError):
    """
    A mandatory line is missing from the session description.
    """
    pass


class TokenCountError(SdpError):
    """
    A line does not have the number of tokens its attribute requires.
    """
    pass


class NumericFormatError(SdpError):
    """
    A field which must be an integer could not be parsed as one.
    """
    pass
