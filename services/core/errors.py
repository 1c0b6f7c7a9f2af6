class ValidationError(Exception):
    """The request shape was rejected before any scoring ran."""


class NotFoundError(Exception):
    def __init__(self, resource: str, identifier):
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier
