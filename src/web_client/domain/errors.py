"""Errors raised by web client classification and its collaborators."""


class WebClientError(Exception):
    """Base class for web client errors."""


class NoResultFoundError(WebClientError):
    """A signature provider found no match for a user-agent string.

    This is an expected outcome, not a fault: the detection engine records it
    as an absent signature result.
    """


class CollaboratorUnavailableError(WebClientError):
    """An external collaborator is malformed or unavailable."""


class SignatureProviderUnavailableError(CollaboratorUnavailableError):
    """The signature provider failed for a reason other than "no match"."""


class HeaderSourceUnavailableError(CollaboratorUnavailableError):
    """The header source could not produce request headers."""
