"""Definition for all custom exceptions."""


class XrmAutomationError(Exception):
    """Base exception for all errors raised by the XRM automation."""

    def __init__(self, message: str) -> None:
        """Initialize the XrmAutomationError with a message.

        Args:
            message (str):
                The error message.

        """
        super().__init__(message)
        self.message = message


class ElementNotAvailableError(XrmAutomationError):
    """Custom exception if an expected page element (e.g. a dialog) did not show up in time."""

    def __init__(self, message: str, selector: str | None = None, timeout: float | None = None) -> None:
        """Initialize the ElementNotAvailableError.

        Args:
            message (str):
                Human readable description of the element that was expected.
            selector (str | None, optional):
                The selector that has been waited for.
            timeout (float | None, optional):
                The wait time in seconds that has passed.

        """
        super().__init__(message)
        self.selector = selector
        self.timeout = timeout


class BrowserAutomationError(XrmAutomationError):
    """Custom exception if the browser automation cannot be initialized."""
