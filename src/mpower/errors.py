from __future__ import annotations


class MpowerError(Exception):
    """Base class for errors raised by the invoice builder."""


class DuplicateNameError(MpowerError, ValueError):
    """Raised when an item or tax with the same name is already on the invoice."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Invoice {kind} with name {name} already exists")


class PreconditionViolation(MpowerError, ValueError):
    """Raised when a setter is called with an empty or zero argument.

    This is a programming error on the caller's side and is not meant to be
    handled; validate the value before calling the setter.
    """
