"""Base client exception."""


class MonnifyException(Exception):
    """
    Base exception for all errors raised by the client.

    Every failure path of a gateway operation surfaces as a subclass of
    this exception; no operation returns a partial result on failure.
    """

    def __init__(self, message: str, code: str = "MONNIFY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
