"""Exceptions raised by hookchat."""


class HookchatError(Exception):
    """Base class for all hookchat errors."""


class TransportError(HookchatError):
    """A webhook request did not produce a usable reply.

    Raised for non-2xx status codes, network failures and bodies that cannot
    be parsed. ``status_code`` is set only for the first kind; ``cause`` holds
    the underlying exception for the other two.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def from_status(cls, status_code: int) -> "TransportError":
        return cls(f"HTTP error! status: {status_code}", status_code=status_code)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TransportError":
        detail = str(exc) or type(exc).__name__
        return cls(detail, cause=exc)
