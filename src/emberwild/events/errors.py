class EventError(Exception):
    """Base class for event engine errors. All of them are programmer errors."""
    pass


class EmptySequenceError(EventError):
    """Raised when a weighted draw is asked to pick from nothing."""
    pass


class InvalidChoiceError(EventError):
    """Raised when a choice is resolved against an event it does not belong to."""
    pass


class MalformedEventError(EventError):
    """Raised at registration time for event definitions that can never dispatch cleanly."""
    pass
