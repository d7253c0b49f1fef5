class TallyError(Exception):
    """Base class for errors raised by a run reporter."""


class InvalidCase(TallyError, ValueError):
    """A record call was given a malformed name, outcome or detail."""


class RunFinalized(TallyError, RuntimeError):
    """The run was already summarized and no longer accepts records."""
