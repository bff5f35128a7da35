"""Errors raised by the job-listing controller."""


class ListingError(Exception):
    """Base class for listing controller errors."""


class NotReadyError(ListingError):
    """A fetch was requested before the session became ready."""


class ListingClosedError(ListingError):
    """The controller was used after it was torn down."""
