class LabelsError(Exception):
    """Base class for errors raised by the label resolvers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LabelsError):
    """An organization, thread or label ID did not resolve to a record."""


class PermissionDeniedError(LabelsError):
    """The caller lacks organization membership or site admin rights."""
