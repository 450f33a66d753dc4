"""Errors raised while serving a tool call.

Every failure a tool can hit is a DomainServiceError, so the MCP boundary
only has to handle this one family.
"""


class DomainServiceError(Exception):
    """Base class for tool call failures."""


class MissingArgumentError(DomainServiceError):
    """A required tool argument was empty or absent."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument.capitalize()} is required")


class ServiceRequestError(DomainServiceError):
    """The request failed in transport or came back with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ResponseDecodeError(DomainServiceError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid response from domain service: {detail}")


class InvalidArgumentError(DomainServiceError):
    """A tool argument had a value outside what the service accepts."""
