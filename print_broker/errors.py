"""
Print Broker Errors
===================

Exception hierarchy shared by the router, the label encoder, the driver shim
and the spooler backends.
"""


class PrintBrokerError(Exception):
    """Base class for all print broker errors."""


class BindError(PrintBrokerError):
    """The listening port is unavailable or malformed."""


class ParseError(PrintBrokerError):
    """Malformed JSON or a missing/mistyped field in a request body."""


class DecodeError(PrintBrokerError):
    """Invalid base64 payload."""


class EncodeError(PrintBrokerError):
    """Label text cannot be represented in the label protocol encoding."""


class SpoolerError(PrintBrokerError):
    """A spooler primitive failed. ``code`` is the OS error code."""

    def __init__(self, code: int, message: str = ''):
        self.code = code
        self.message = message
        super().__init__(f'{message} (code {code})' if message else f'code {code}')


# =============================================================================
# Print Failures
# =============================================================================

class PrintError(PrintBrokerError):
    """A raw print submission failed. ``str(error)`` is the caller-facing message."""


class OpenFailed(PrintError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f'Failed to open printer. Error: {code}')


class StartFailed(PrintError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f'Failed to start document. Error: {code}')


class WriteFailed(PrintError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f'Failed to write to printer. Error: {code}')


class Unexpected(PrintError):
    def __init__(self, description: str):
        self.description = description
        super().__init__(f'Exception: {description}')
