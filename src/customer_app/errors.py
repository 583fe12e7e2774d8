"""Error type raised by the remote collaborator"""

from typing import Optional


class RemoteFailure(Exception):
    """
    Any failure of a remote read or write.

    Network, authorization, validation and not-found errors are not told apart;
    the only payload is a human-readable message, which is never empty.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message or "Remote request failed"
        super().__init__(self.message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "RemoteFailure":
        """Wrap an arbitrary exception, falling back to its class name"""
        if isinstance(exc, RemoteFailure):
            return exc
        message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
        return cls(str(message))


def failure_message(exc: BaseException) -> str:
    """Message to show for a failed load"""
    return RemoteFailure.from_exception(exc).message
