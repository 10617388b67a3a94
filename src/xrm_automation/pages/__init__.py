"""Page objects for the Dynamics 365 web client."""

from .base import LookupValue, XrmPage
from .dialog import AssignTo, DialogPage, ReportRecords
from .login import LoginPage
from .lookup import LookupPage

__all__ = [
    "AssignTo",
    "DialogPage",
    "LoginPage",
    "LookupPage",
    "LookupValue",
    "ReportRecords",
    "XrmPage",
]
