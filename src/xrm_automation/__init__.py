"""xrm_automation - Page objects to automate UI tests of Dynamics 365."""

from .browser import XrmBrowser
from .browser_automation import BrowserAutomation
from .command import CommandOptions, CommandResult
from .exceptions import BrowserAutomationError, ElementNotAvailableError, XrmAutomationError
from .log import LogCountFilter, setup_logging
from .pages import AssignTo, DialogPage, LoginPage, LookupPage, LookupValue, ReportRecords, XrmPage
from .settings import Settings

__all__ = [
    "AssignTo",
    "BrowserAutomation",
    "BrowserAutomationError",
    "CommandOptions",
    "CommandResult",
    "DialogPage",
    "ElementNotAvailableError",
    "LogCountFilter",
    "LoginPage",
    "LookupPage",
    "LookupValue",
    "ReportRecords",
    "Settings",
    "XrmAutomationError",
    "XrmBrowser",
    "XrmPage",
    "setup_logging",
]
