class ResourceNotFound(Exception):
    """Raised when a referenced customer, product or order does not exist."""

    def __init__(self, resource, identifier=None, message=None):
        self.resource = resource
        self.identifier = identifier
        if message is None:
            message = f"{resource} not found with id: {identifier}"
        super().__init__(message)


class DuplicateResource(Exception):
    """Raised when a unique attribute (username, email) is already taken."""

    def __init__(self, message):
        super().__init__(message)


class ResourceInUse(Exception):
    """Raised when deleting a record that orders still reference."""

    def __init__(self, resource, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} is referenced by existing orders"
        )
