"""Errors raised while building translate requests."""


class InvalidArgument(ValueError):
    """A request parameter is missing or holds an unsupported value."""


class MissingRequiredField(InvalidArgument):
    """A required parameter was still null when the request was serialized."""

    def __init__(self, field: str, owner: str):
        self.field = field
        self.owner = owner
        super().__init__(f'Missing parameter "{field}" for "{owner}". The value cannot be null.')
