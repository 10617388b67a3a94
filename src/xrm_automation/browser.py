"""XrmBrowser Module to hold a browser session against a Dynamics 365 organization.

The session owns the browser automation (the driver), the think time used to
simulate human pacing and the dialog depth counter. The depth counter is shared
by reference with all page objects created from the session: a page that opens
a nested dialog increments it, so later pages know which dialog frame is on top.
"""

import logging
import time
from types import TracebackType
from typing import TypeVar

from .browser_automation import BrowserAutomation
from .log import LogCountFilter, setup_logging
from .pages.base import XrmPage
from .pages.dialog import DialogPage
from .pages.login import LoginPage
from .pages.lookup import LookupPage
from .settings import Settings

default_logger = logging.getLogger("xrm_automation.browser")

PageT = TypeVar("PageT", bound=XrmPage)


class XrmBrowser:
    """Class for a browser session against a Dynamics 365 organization."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        settings: Settings | None = None,
        automation: BrowserAutomation | None = None,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the XrmBrowser object.

        Args:
            settings (Settings | None, optional):
                The settings to use. If None, the settings are read from the
                environment and the config.toml file.
            automation (BrowserAutomation | None, optional):
                An existing browser automation. If None, a new one is started
                based on the settings.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        self.settings = settings if settings is not None else Settings()
        if self.settings.configure_logging:
            setup_logging(level=self.settings.log_level, log_file=self.settings.log_file)

        if logger != default_logger:
            self.logger = logger.getChild("xrmbrowser")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.log_count_filter = LogCountFilter()
        self.logger.addFilter(self.log_count_filter)

        self.depth = 0

        if automation is None:
            automation = BrowserAutomation(
                take_screenshots=self.settings.take_screenshots,
                automation_name=self.settings.automation_name,
                headless=self.settings.headless,
                browser=self.settings.browser,
                default_timeout=self.settings.default_timeout,
                logger=self.logger,
            )
        self.automation = automation

    # end method definition

    @property
    def log_counts(self) -> dict:
        """Return the number of log messages of this session by level."""

        return dict(self.log_count_filter.counts)

    # end method definition

    def think_time(self, seconds: float | None = None) -> None:
        """Wait to simulate the reaction time of a human user.

        Args:
            seconds (float | None, optional):
                The time to wait in seconds. None uses the configured
                default think time. Zero or negative values do not wait at all.

        """

        if seconds is None:
            seconds = self.settings.think_time

        if seconds <= 0:
            return

        self.logger.debug("Think time -> %.2f seconds...", seconds)
        time.sleep(seconds)

    # end method definition

    def get_page(self, page_class: type[PageT]) -> PageT:
        """Create a page object of the given class bound to this session.

        Args:
            page_class (type[PageT]):
                A subclass of XrmPage.

        Returns:
            PageT:
                The new page object.

        """

        return page_class(browser=self, logger=self.logger)

    # end method definition

    @property
    def dialogs(self) -> DialogPage:
        """Return a page object for the currently open dialog."""

        return self.get_page(DialogPage)

    # end method definition

    @property
    def lookup(self) -> LookupPage:
        """Return a page object for the currently open lookup dialog."""

        return self.get_page(LookupPage)

    # end method definition

    def login(self, url: str | None = None) -> bool:
        """Sign in to the Dynamics 365 organization.

        Args:
            url (str | None, optional):
                The URL to open. Defaults to the URL in the settings.

        Returns:
            bool:
                True if the sign-in completed, False otherwise.

        """

        url = url or (str(self.settings.url) if self.settings.url else "")
        if not url:
            self.logger.error("No URL of the Dynamics organization configured. Cannot login!")
            return False

        password = self.settings.password.get_secret_value() if self.settings.password else ""

        result = self.get_page(LoginPage).login(url=url, username=self.settings.username, password=password)

        return bool(result)

    # end method definition

    def close(self) -> None:
        """End the browser session."""

        self.logger.info("Closing browser session (dialog depth -> %d)...", self.depth)
        self.automation.end_session()
        self.depth = 0
        self.logger.removeFilter(self.log_count_filter)

    # end method definition

    def __enter__(self) -> "XrmBrowser":
        """Enable use with 'with' statement (context manager block)."""

        return self

    # end method definition

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback_obj: TracebackType | None
    ) -> None:
        """End the browser session when leaving the 'with' block."""

        self.close()

    # end method definition
