"""Exceptions raised by the study core."""


class StudyError(Exception):
    """Base exception for study core errors."""
    pass


class InvalidOperationError(StudyError):
    """Operation not allowed in the current exam phase, or bad arguments."""
    pass


class EmptyCatalogError(StudyError):
    """An exam cannot start without any questions."""
    pass


class UnknownContentError(StudyError):
    """Requested lesson, sign or question does not exist."""
    pass
