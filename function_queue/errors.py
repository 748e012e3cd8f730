"""
Contextual Errors

Exceptions that carry a namespace naming the component that raised them.
"""

from typing import Type, TypeVar

E = TypeVar("E", bound="ContextualError")


class ContextualError(Exception):
    """An error tagged with the namespace of the component that raised it."""

    def __init__(self, message: str, namespace: str):
        super().__init__(message)
        self.message = message
        self.namespace = namespace

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, namespace={self.namespace!r})"


class QueueValidationError(ContextualError, TypeError):
    """Raised synchronously when enqueue receives a non-callable."""
    pass


class LatchTransitionError(ContextualError):
    """Raised when the execution latch is flipped more than once."""
    pass


def contextual_error(message: str, namespace: str, error_cls: Type[E] = ContextualError) -> E:
    """
    Build an error carrying a namespace.

    The result behaves like a normal exception (``str(err) == message``);
    the namespace is available as ``err.namespace``.
    """
    return error_cls(message, namespace)
