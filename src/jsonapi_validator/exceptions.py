"""Exceptions raised by the JSON:API validators."""


class InvalidDocument(Exception):
    """Raised when a document violates a structural JSON:API rule.

    The message is one of the fixed sentences in ``messages`` and identifies
    the violated rule on its own.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
