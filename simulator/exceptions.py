"""Exceptions raised by the dispatcher core and its request intake"""


class DispatchInvariantError(RuntimeError):
    """
    Selection policy reached a state that cannot happen with a correct policy,
    e.g. a selection branch entered with nothing to select.
    """


class InvalidRequestError(ValueError):
    """Request token could not be turned into a hallway or cabin request"""
