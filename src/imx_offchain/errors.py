"""
Immutable X Errors

Exceptions raised by the Immutable X integration layer.
"""


class ImmutableXError(Exception):
    """Base class for Immutable X integration errors"""
    pass


class MissingConfigurationError(ImmutableXError, ValueError):
    """A value required to address the network is not configured"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Sorry, miss param [{field}]")


class InvalidArgumentError(ImmutableXError, ValueError):
    """A required argument is empty or missing"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Sorry, miss param [{name}]")


class RemoteLookupError(ImmutableXError):
    """A call to the Immutable X API failed or returned unusable data"""
    pass
