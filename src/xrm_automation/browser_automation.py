"""browser_automation Module to drive the Dynamics 365 web client via a browser.

This module uses playwright: https://playwright.dev for browser-based automation
and testing. It is the only module that talks to Playwright directly. The page
objects in xrm_automation.pages only use the methods of BrowserAutomation.

The Dynamics 365 web client renders dialogs in inline iframes (or in popup
windows for older forms). BrowserAutomation therefore keeps a "scope": either
the page itself or a frame locator that all element lookups are relative to.
The scope is changed with switch_to_frame(), switch_to_default_content() and
switch_to_popup().

| Selector type | Example selector                      | Resolved by                      |
| ------------- | ------------------------------------- | -------------------------------- |
| id            | `closedate_id`                        | `locator("[id='closedate_id']")` |
| name          | `crmDialog`                           | `locator("[name='crmDialog']")`  |
| xpath         | `//*[@id='butBegin']`                 | `locator("xpath=...")`           |
| text          | `Account Set Phone Number`            | `get_by_text(...)`               |
| title         | `Search`                              | `get_by_title(...)`              |

"""

import logging
import os
import re
import subprocess
import tempfile
import time
import traceback
from collections.abc import Callable
from http import HTTPStatus
from types import TracebackType

from playwright.sync_api import (
    Browser,
    BrowserContext,
    FrameLocator,
    Locator,
    Page,
    sync_playwright,
)
from playwright.sync_api import Error as PlaywrightError

from .exceptions import BrowserAutomationError, ElementNotAvailableError

default_logger = logging.getLogger("xrm_automation.browser_automation")

# The Dynamics web client keeps background requests open for a long
# time, so "networkidle" would often not be reached. "load" is the
# safest strategy for such pages.
DEFAULT_WAIT_UNTIL_STRATEGY = "load"

REQUEST_TIMEOUT = 30.0
REQUEST_RETRY_DELAY = 4.0
REQUEST_MAX_RETRIES = 3

# browser name -> (playwright browser type, channel)
SUPPORTED_BROWSERS = {
    "chromium": ("chromium", None),
    "chrome": ("chromium", "chrome"),
    "msedge": ("chromium", "msedge"),
    "webkit": ("webkit", None),
    "firefox": ("firefox", None),
}


class BrowserAutomation:
    """Class to drive a web application via a browser."""

    page: Page = None
    browser: Browser = None
    context: BrowserContext = None
    frame: FrameLocator | None = None
    playwright = None
    proxy = None

    logger: logging.Logger = default_logger

    def __init__(
        self,
        base_url: str = "",
        take_screenshots: bool = False,
        automation_name: str = "",
        headless: bool = True,
        logger: logging.Logger = default_logger,
        wait_until: str | None = None,
        browser: str | None = None,
        default_timeout: float | None = None,
    ) -> None:
        """Initialize the object.

        Args:
            base_url (str, optional):
                The base URL of the website to automate. Defaults to "".
            take_screenshots (bool, optional):
                For debugging purposes, screenshots can be taken.
                Defaults to False.
            automation_name (str, optional):
                The name of the automation. Defaults to "".
            headless (bool, optional):
                If True, the browser will be started in headless mode. Defaults to True.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.
            wait_until (str | None, optional):
                Wait until a certain condition. Options are:
                * "commit" - does not wait at all - commit the request and continue
                * "load" - waits for the load event (after all resources like images/scripts load)
                * "networkidle" - waits until there are no network connections for at least 500 ms.
                * "domcontentloaded" - waits for the DOMContentLoaded event (HTML is parsed,
                  but subresources may still load).
            browser (str | None, optional):
                The browser to use. Defaults to None, which takes the ENV "BROWSER" or "chromium".
            default_timeout (float | None, optional):
                Default timeout in seconds for all browser operations. None keeps the
                Playwright default.

        Raises:
            BrowserAutomationError:
                If Playwright or the browser cannot be started.

        """

        if logger != default_logger:
            self.logger = logger.getChild("browserautomation")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.base_url = base_url
        self.headless = headless

        # Screenshot configurations:
        self.take_screenshots = take_screenshots
        self.screenshot_names = self.sanitize_filename(filename=automation_name)
        self.screenshot_counter = 1
        self.screenshot_full_page = True

        self.wait_until = wait_until if wait_until else DEFAULT_WAIT_UNTIL_STRATEGY

        self.screenshot_directory = os.path.join(
            tempfile.gettempdir(),
            "browser_automations",
            self.screenshot_names,
            "screenshots",
        )
        if self.take_screenshots and not os.path.exists(self.screenshot_directory):
            self.logger.debug("Creating screenshot directory... -> %s", self.screenshot_directory)
            os.makedirs(self.screenshot_directory)

        if os.getenv("HTTP_PROXY"):
            self.proxy = {
                "server": os.getenv("HTTP_PROXY"),
            }
            self.logger.info("Using HTTP proxy -> %s", os.getenv("HTTP_PROXY"))

        browser = browser or os.getenv("BROWSER", "chromium")
        self.logger.info("Using browser -> '%s'...", browser)

        if not self.setup_playwright(browser=browser):
            msg = "Failed to initialize Playwright browser automation!"
            self.logger.error(msg)
            raise BrowserAutomationError(msg)

        self.logger.info("Creating browser context...")
        self.context: BrowserContext = self.browser.new_context()

        self.logger.info("Creating page...")
        self.page: Page = self.context.new_page()
        self.main_page = self.page
        self.frame = None

        if default_timeout:
            self.set_timeout(wait_time=default_timeout)

        self.logger.info("Browser automation initialized.")

    # end method definition

    def setup_playwright(self, browser: str) -> bool:
        """Initialize Playwright browser automation.

        Args:
            browser (str):
                Name of the browser engine. Supported:
                * chromium
                * chrome
                * msedge
                * webkit
                * firefox

        Returns:
            bool:
                True = Success, False = Error.

        """

        if browser not in SUPPORTED_BROWSERS:
            self.logger.error("Unknown browser -> '%s'. Cannot install and launch it.", browser)
            return False

        try:
            self.logger.debug("Creating Playwright instance...")
            self.playwright = sync_playwright().start()
        except Exception as e:
            self.logger.error("Failed to start Playwright! Error -> %s", str(e))
            return False

        browser_type_name, channel = SUPPORTED_BROWSERS[browser]
        browser_type = getattr(self.playwright, browser_type_name)

        launch_options = {
            "headless": self.headless,
            "slow_mo": 100 if not self.headless else None,
            "proxy": self.proxy,
        }
        if channel:
            launch_options["channel"] = channel

        try:
            self.browser: Browser = browser_type.launch(**launch_options)
        except PlaywrightError:
            # Browser binaries are not installed yet - install and try once more:
            if not self.install_browser(browser=browser):
                return False
            try:
                self.browser: Browser = browser_type.launch(**launch_options)
            except PlaywrightError as e:
                self.logger.error("Failed to launch browser -> '%s'; error -> %s", browser, str(e))
                return False

        return True

    # end method definition

    def install_browser(self, browser: str) -> bool:
        """Install a browser with a provided name in Playwright.

        Args:
            browser (str):
                Name of the browser to be installed.

        Returns:
            bool: True = installation successful, False = installation failed.

        """

        self.logger.info("Installing Browser -> '%s'...", browser)
        process = subprocess.Popen(
            ["playwright", "install", browser],  # noqa: S607
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            shell=False,
        )
        output, error = process.communicate()
        if process.returncode == 0:  # 0 = success
            self.logger.info("Successfully completed installation of browser -> '%s'.", browser)
            self.logger.debug(output.decode())
        else:
            self.logger.error("Installation of browser -> '%s' failed! Error -> %s", browser, error.decode())
            self.logger.error(output.decode())
            return False

        return True

    # end method definition

    def sanitize_filename(self, filename: str) -> str:
        """Sanitize a string to be safe for use as a filename.

        - Replaces spaces with underscores
        - Removes unsafe characters
        - Converts to lowercase
        - Trims length and dots

        Args:
            filename (str):
                The filename to sanitize.

        """

        filename = filename.lower()
        filename = filename.replace(" ", "_")
        filename = re.sub(r'[<>:"/\\|?*\x00-\x1F]', "", filename)  # Remove unsafe chars
        filename = re.sub(r"\.+$", "", filename)  # Remove trailing dots
        filename = filename.strip()
        if not filename:
            filename = "untitled"

        return filename

    # end method definition

    def take_screenshot(self, suffix: str = "") -> bool:
        """Take a screenshot of the current browser window and save it as PNG file.

        Args:
            suffix (str, optional):
                Optional suffix to append to the screenshot filename.

        Returns:
            bool:
                True if successful, False otherwise

        """

        screenshot_file = "{}/{}-{:02d}{}.png".format(
            self.screenshot_directory, self.screenshot_names, self.screenshot_counter, suffix
        )
        self.logger.debug("Save browser screenshot to -> %s", screenshot_file)

        try:
            self.page.screenshot(path=screenshot_file, full_page=self.screenshot_full_page)
            self.screenshot_counter += 1
        except PlaywrightError as e:
            self.logger.error("Failed to take screenshot; error -> %s", e)
            return False

        return True

    # end method definition

    def get_page(self, url: str = "", wait_until: str | None = None) -> bool:
        """Load a page into the browser based on a given URL.

        Loading a page always resets the element scope to the page itself.

        Args:
            url (str):
                URL to load. If empty just the base URL will be used.
            wait_until (str | None, optional):
                Wait until a certain condition. See __init__() for the options.

        Returns:
            bool:
                True if successful, False otherwise.

        """

        if wait_until is None:
            wait_until = self.wait_until

        page_url = self.base_url + url
        self.frame = None

        try:
            self.logger.debug("Load page -> %s (wait until -> '%s')", page_url, wait_until)

            # The Playwright Response object is different from the requests.response object!
            response = self.page.goto(page_url, wait_until=wait_until)
            if response is None:
                self.logger.warning("Loading of page -> %s completed but no response object was returned.", page_url)
            elif not response.ok:
                try:
                    phrase = HTTPStatus(response.status).phrase
                except ValueError:
                    phrase = "Unknown Status"
                self.logger.error(
                    "Response for page -> %s is not OK. Status -> %s/%s",
                    page_url,
                    response.status,
                    phrase,
                )
                return False

        except PlaywrightError as e:
            self.logger.error("Navigation to page -> %s has failed; error -> %s", page_url, str(e))
            return False

        if self.take_screenshots:
            self.take_screenshot()

        return True

    # end method definition

    def get_title(self, wait_until: str | None = None) -> str | None:
        """Get the browser title.

        Retry-safe way to get the page title, even if there's an in-flight navigation.

        Args:
            wait_until (str | None, optional):
                Wait until a certain load state before reading the title.

        Returns:
            str | None:
                The title of the browser page or None if it cannot be read.

        """

        for attempt in range(REQUEST_MAX_RETRIES):
            try:
                if wait_until:
                    self.page.wait_for_load_state(state=wait_until, timeout=REQUEST_TIMEOUT * 1000)
                title = self.page.title()
                if title:
                    return title
                time.sleep(REQUEST_RETRY_DELAY)
                self.logger.info("Retry attempt %d/%d", attempt + 1, REQUEST_MAX_RETRIES)
            except PlaywrightError as e:
                if "Execution context was destroyed" in str(e):
                    self.logger.info(
                        "Execution context was destroyed, retrying after %s seconds...", REQUEST_RETRY_DELAY
                    )
                    time.sleep(REQUEST_RETRY_DELAY)
                    self.logger.info("Retry attempt %d/%d", attempt + 1, REQUEST_MAX_RETRIES)
                    continue
                self.logger.error("Could not get page title; error -> %s", str(e))
                break

        return None

    # end method definition

    def switch_to_frame(self, frame_id: str) -> None:
        """Make the iframe with the given ID the scope for all following element lookups.

        The frame is resolved relative to the current scope, so nested frames
        can be entered with consecutive calls.

        Args:
            frame_id (str):
                The ID of the iframe element.

        """

        scope = self.frame if self.frame is not None else self.page
        self.logger.debug("Switch to frame -> '%s'...", frame_id)
        self.frame = scope.frame_locator("iframe[id='{}']".format(frame_id))

    # end method definition

    def switch_to_default_content(self) -> None:
        """Make the page itself the scope for all following element lookups."""

        if self.frame is not None:
            self.logger.debug("Switch back to default content of page -> %s", self.page.url)
        self.frame = None

    # end method definition

    def switch_to_popup(self) -> bool:
        """Move the browser automation to the most recently opened window.

        If no popup window is open (anymore), the browser automation moves
        back to the main window.

        Returns:
            bool:
                True if a popup window is active afterwards, False if only the
                main window is open.

        """

        self.frame = None
        pages = self.context.pages
        if len(pages) < 2:
            if self.page is not self.main_page:
                self.logger.info("Popup window has been closed. Move browser automation back to main window...")
                self.page = self.main_page
            else:
                self.logger.debug("No popup window open. Staying on main window -> %s", self.page.url)
            return False

        self.page = pages[-1]
        self.logger.info("Move browser automation to popup window -> %s...", self.page.url)

        return True

    # end method definition

    def scroll_to_element(self, element: Locator) -> None:
        """Scroll an element into view to make it clickable.

        Args:
            element (Locator):
                Web element that has been identified before.

        """

        if not element:
            self.logger.error("Undefined element! Cannot scroll to it.")
            return

        try:
            element.scroll_into_view_if_needed()
        except PlaywrightError as e:
            self.logger.warning("Cannot scroll element -> %s into view; error -> %s", str(element), str(e))

    # end method definition

    def get_locator(self, selector: str, selector_type: str, exact_match: bool | None = None) -> Locator | None:
        """Determine the locator for the given selector type.

        The locator is relative to the current scope (see switch_to_frame()).

        Args:
            selector (str):
                The selector to find the element on the page.
            selector_type (str):
                One of "id", "name", "xpath", "text", "title".
            exact_match (bool | None, optional):
                 Controls whether the text or title must match exactly.
                 Default is None (not set, i.e. using playwrights default).

        Returns:
            Locator | None:
                The locator or None if the selector type is not supported.

        """

        scope = self.frame if self.frame is not None else self.page

        try:
            match selector_type:
                case "id":
                    # Dynamics IDs may contain characters that are invalid in CSS id selectors:
                    locator = scope.locator("[id='{}']".format(selector))
                case "name":
                    locator = scope.locator("[name='{}']".format(selector))
                case "xpath":
                    locator = scope.locator("xpath={}".format(selector))
                case "text":
                    locator = scope.get_by_text(text=selector, exact=exact_match)
                case "title":
                    locator = scope.get_by_title(text=selector, exact=exact_match)
                case _:
                    self.logger.error("Unsupported selector type -> '%s'", selector_type)
                    return None

        except PlaywrightError as e:
            self.logger.error("Failure to determine page locator; error -> %s", str(e))
            return None

        return locator

    # end method definition

    def has_elem(self, selector: str, selector_type: str = "id") -> bool:
        """Check if an element is currently part of the DOM - without waiting.

        Args:
            selector (str):
                The selector of the page element.
            selector_type (str, optional):
                The selector type, see get_locator().

        Returns:
            bool:
                True if at least one matching element exists, False otherwise.

        """

        locator = self.get_locator(selector=selector, selector_type=selector_type)
        if not locator:
            return False

        try:
            return locator.count() > 0
        except PlaywrightError as e:
            self.logger.debug("Cannot count elements for selector -> '%s' (%s); error -> %s", selector, selector_type, e)
            return False

    # end method definition

    def find_elem(
        self,
        selector: str,
        selector_type: str = "id",
        wait_state: str = "visible",
        exact_match: bool | None = None,
        timeout: float | None = None,
        show_error: bool = True,
    ) -> Locator | None:
        """Find a page element.

        If multiple elements match the selector the first one is returned.

        Args:
            selector (str):
                The selector of the page element.
            selector_type (str, optional):
                One of "id", "name", "xpath", "text", "title".
            wait_state (str, optional):
                Possible values are:
                * "attached" - the element is present in the DOM.
                * "detached" - the element is not present in the DOM.
                * "visible" - the element is visible (attached, displayed, and has non-zero size).
                * "hidden" - the element is hidden (attached, but not displayed).
                Default is "visible".
            exact_match (bool | None, optional):
                If an exact matching is required. Default is None (not set).
            timeout (float | None, optional):
                Maximum time in seconds to wait for the element. None uses the
                default timeout of the page.
            show_error (bool, optional):
                Show an error if not found or not visible. Otherwise a warning is logged.

        Returns:
            Locator | None:
                The web element or None in case it was not found in time.

        """

        failure_message = "Cannot find page element with selector -> '{}' ({}), waiting for state -> '{}'".format(
            selector,
            selector_type,
            wait_state,
        )

        locator = self.get_locator(selector=selector, selector_type=selector_type, exact_match=exact_match)
        if not locator:
            if show_error:
                self.logger.error(failure_message)
            else:
                self.logger.warning(failure_message)
            return None

        # Wait for the element to reach the desired state - don't use logic like
        # locator.count() as this does not wait but fails immediately if elements
        # are not yet loaded:
        try:
            self.logger.debug(
                "Wait %sfor locator to find element with selector -> '%s' (selector type -> '%s') and state -> '%s'...",
                "up to {} seconds ".format(timeout) if timeout else "",
                selector,
                selector_type,
                wait_state,
            )
            locator = locator.first
            locator.wait_for(state=wait_state, timeout=timeout * 1000 if timeout else None)
        except PlaywrightError as pe:
            if show_error:
                self.logger.error("%s (%s)", failure_message, str(pe))
            else:
                self.logger.warning("%s", failure_message)
            return None

        self.logger.debug("Found page element with selector -> '%s' (%s)", selector, selector_type)

        return locator

    # end method definition

    def wait_until_available(
        self,
        selector: str,
        selector_type: str = "xpath",
        timeout: float | None = None,
        failure_message: str | None = None,
        on_available: Callable[[Locator], None] | None = None,
        on_unavailable: Callable[[], None] | None = None,
    ) -> Locator | None:
        """Wait until an element is available (visible) on the page.

        Args:
            selector (str):
                The selector of the page element.
            selector_type (str, optional):
                The selector type, see get_locator(). Default is "xpath".
            timeout (float | None, optional):
                Maximum time in seconds to wait. None uses the default timeout of the page.
            failure_message (str | None, optional):
                If given, an ElementNotAvailableError with this message is raised
                if the element does not show up in time.
            on_available (Callable[[Locator], None] | None, optional):
                Called with the element if it shows up in time.
            on_unavailable (Callable[[], None] | None, optional):
                Called if the element does not show up in time (and no
                failure_message is given).

        Returns:
            Locator | None:
                The element or None if it did not show up in time.

        Raises:
            ElementNotAvailableError:
                If the element is not available in time and a failure_message is given.

        """

        elem = self.find_elem(
            selector=selector,
            selector_type=selector_type,
            timeout=timeout,
            show_error=False,
        )

        if elem is None:
            if failure_message:
                self.logger.error("%s (selector -> '%s', timeout -> %s seconds)", failure_message, selector, timeout)
                if self.take_screenshots:
                    self.take_screenshot(suffix="_not_available")
                raise ElementNotAvailableError(failure_message, selector=selector, timeout=timeout)
            if on_unavailable:
                on_unavailable()
            return None

        if on_available:
            on_available(elem)

        return elem

    # end method definition

    def find_elem_and_click(
        self,
        selector: str,
        selector_type: str = "id",
        scroll_to_element: bool = True,
        timeout: float | None = None,
        show_error: bool = True,
    ) -> bool:
        """Find a page element and click it.

        Args:
            selector (str):
                The selector of the page element.
            selector_type (str, optional):
                One of "id", "name", "xpath", "text", "title".
            scroll_to_element (bool, optional):
                Scroll the element into view.
            timeout (float | None, optional):
                Maximum time in seconds to wait for the element.
            show_error (bool, optional):
                Show an error if the element is not found or not clickable.

        Returns:
            bool:
                True if click is successful, False otherwise.

        """

        if not selector:
            failure_message = "Missing element selector! Cannot find page element!"
            if show_error:
                self.logger.error(failure_message)
            else:
                self.logger.warning(failure_message)
            return False

        elem = self.find_elem(
            selector=selector,
            selector_type=selector_type,
            timeout=timeout,
            show_error=show_error,
        )
        if not elem:
            return False

        success = True

        try:
            if scroll_to_element:
                self.scroll_to_element(elem)

            self.logger.debug("Clicking on element -> '%s' (%s)...", selector, selector_type)
            elem.click()
            self.logger.debug("Successfully clicked element -> '%s' (%s)", selector, selector_type)

        except PlaywrightError as e:
            if show_error:
                self.logger.error(
                    "Cannot click page element -> '%s' (%s); error -> %s", selector, selector_type, str(e)
                )
            else:
                self.logger.warning(
                    "Cannot click page element -> '%s' (%s); warning -> %s", selector, selector_type, str(e)
                )
            success = False

        if self.take_screenshots:
            self.take_screenshot()

        return success

    # end method definition

    def click_when_available(self, selector: str, selector_type: str = "xpath", timeout: float | None = None) -> bool:
        """Wait for an element to be available and click it.

        Args:
            selector (str):
                The selector of the page element.
            selector_type (str, optional):
                The selector type, see get_locator(). Default is "xpath".
            timeout (float | None, optional):
                Maximum time in seconds to wait for the element.

        Returns:
            bool:
                True if the element has been clicked, False otherwise.

        """

        return self.find_elem_and_click(selector=selector, selector_type=selector_type, timeout=timeout)

    # end method definition

    def find_elem_and_set(
        self,
        selector: str,
        value: str,
        selector_type: str = "id",
        is_sensitive: bool = False,
        press_enter: bool = False,
        show_error: bool = True,
    ) -> bool:
        """Find a page element and fill it with a new value.

        Args:
            selector (str):
                The selector of the page element.
            value (str):
                The new value (text string) for the page element.
            selector_type (str, optional):
                One of "id", "name", "xpath", "text", "title".
            is_sensitive (bool, optional):
                True for suppressing sensitive information in logging.
            press_enter (bool, optional):
                Whether or not to press "Enter" after entering the value.
            show_error (bool, optional):
                Show an error if the element is not found or cannot be set.

        Returns:
            bool:
                True if successful, False otherwise

        """

        success = False

        elem = self.find_elem(selector=selector, selector_type=selector_type, show_error=show_error)
        if not elem:
            return False

        if not elem.is_enabled():
            message = "Cannot set elem -> '{}' ({}) to value -> '{}'. It is not enabled!".format(
                selector, selector_type, value if not is_sensitive else "<sensitive>"
            )
            if show_error:
                self.logger.error(message)
            else:
                self.logger.warning(message)

            if self.take_screenshots:
                self.take_screenshot()

            return False

        self.logger.info(
            "Set element -> '%s' to value -> '%s'...", selector, value if not is_sensitive else "<sensitive>"
        )

        try:
            elem.fill(value)
            if press_enter:
                self.page.keyboard.press("Enter")
            success = True
        except PlaywrightError as e:
            message = "Cannot set page element selected by -> '{}' ({}) to value -> '{}'; error -> {}".format(
                selector, selector_type, value if not is_sensitive else "<sensitive>", str(e)
            )
            if show_error:
                self.logger.error(message)
            else:
                self.logger.warning(message)

        if self.take_screenshots:
            self.take_screenshot()

        return success

    # end method definition

    def set_timeout(self, wait_time: float) -> None:
        """Set the default timeout of the browser session.

        This setting is valid for the whole browser session and not just
        for a single command.

        Args:
            wait_time (float):
                The time in seconds to wait.

        """

        self.logger.debug("Setting default timeout to -> %.2f seconds...", wait_time)
        self.page.set_default_timeout(wait_time * 1000)
        self.logger.debug("Setting navigation timeout to -> %.2f seconds...", wait_time)
        self.page.set_default_navigation_timeout(wait_time * 1000)

    # end method definition

    def end_session(self) -> None:
        """End the browser session and close the browser."""

        self.logger.info("Close browser context...")
        self.context.close()
        self.logger.info("Close browser...")
        self.browser.close()
        self.logger.info("Stop Playwright instance...")
        self.playwright.stop()
        self.frame = None
        self.logger.info("Browser automation has ended.")

    # end method definition

    def __enter__(self) -> "BrowserAutomation":
        """Enable use with 'with' statement (context manager block)."""

        return self

    # end method definition

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback_obj: TracebackType | None
    ) -> None:
        """Handle cleanup when exiting a context manager block ('with' statement).

        Args:
            exc_type (type[BaseException] | None):
                The class of the raised exception, if any.
            exc_value (BaseException | None):
                The exception instance raised, if any.
            traceback_obj (TracebackType | None):
                The traceback object associated with the exception, if any.

        """

        if exc_type is not None:
            self.logger.error(
                "Unhandled exception in browser automation context -> %s",
                "".join(traceback.format_exception(exc_type, exc_value, traceback_obj)),
            )

        self.end_session()

    # end method definition
