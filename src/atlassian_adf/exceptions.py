class ADFError(Exception):
    """Base exception for atlassian-adf errors."""

    pass


class ADFDecodeError(ADFError):
    """Raised when input cannot be read or decoded as JSON."""

    pass
