"""Unit tests for the Playwright browser automation.

Playwright itself is patched, so no browser is launched.
"""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError

from xrm_automation.browser_automation import BrowserAutomation
from xrm_automation.exceptions import BrowserAutomationError, ElementNotAvailableError


@pytest.fixture
def playwright() -> Generator[MagicMock, None, None]:
    """Patch sync_playwright() and return the started Playwright mock."""
    with patch("xrm_automation.browser_automation.sync_playwright") as sync_playwright:
        yield sync_playwright.return_value.start.return_value


@pytest.fixture
def automation(playwright: MagicMock, monkeypatch: pytest.MonkeyPatch) -> BrowserAutomation:
    """Browser automation on top of the Playwright mock."""
    monkeypatch.delenv("HTTP_PROXY", raising=False)
    return BrowserAutomation(automation_name="Unit Test", browser="chromium")


class TestSetup:
    """Tests for launching the browser."""

    def test_launches_chromium_headless(self, automation: BrowserAutomation, playwright: MagicMock) -> None:
        """Chromium is launched headless and a page is opened."""
        playwright.chromium.launch.assert_called_once_with(headless=True, slow_mo=None, proxy=None)
        assert automation.page is playwright.chromium.launch.return_value.new_context.return_value.new_page.return_value
        assert automation.main_page is automation.page
        assert automation.frame is None
        playwright.chromium.launch.return_value.new_context.assert_called_once_with()

    def test_chrome_uses_channel(self, playwright: MagicMock) -> None:
        """Branded browsers are launched via a chromium channel."""
        BrowserAutomation(browser="msedge", headless=False)

        playwright.chromium.launch.assert_called_once_with(headless=False, slow_mo=100, proxy=None, channel="msedge")

    def test_unknown_browser_raises(self, playwright: MagicMock) -> None:
        """An unsupported browser name cannot be started."""
        with pytest.raises(BrowserAutomationError, match="Failed to initialize"):
            BrowserAutomation(browser="netscape")

    def test_installs_missing_browser(self, playwright: MagicMock) -> None:
        """A failed launch triggers the installation of the browser."""
        playwright.firefox.launch.side_effect = [PlaywrightError("Executable doesn't exist"), MagicMock()]

        with patch.object(BrowserAutomation, "install_browser", return_value=True) as install_browser:
            BrowserAutomation(browser="firefox")

        install_browser.assert_called_once_with(browser="firefox")
        assert playwright.firefox.launch.call_count == 2

    def test_default_timeout_is_applied(self, playwright: MagicMock) -> None:
        """The default timeout is handed to Playwright in milliseconds."""
        automation = BrowserAutomation(default_timeout=30.0)

        automation.page.set_default_timeout.assert_called_once_with(30000.0)
        automation.page.set_default_navigation_timeout.assert_called_once_with(30000.0)

    def test_sanitize_filename(self, automation: BrowserAutomation) -> None:
        """Names are turned into safe lower case file names."""
        assert automation.sanitize_filename("Close Opportunity: Test?") == "close_opportunity_test"
        assert automation.sanitize_filename("...") == "untitled"


class TestWaitUntilAvailable:
    """Tests for waiting on elements."""

    def test_returns_available_element(self, automation: BrowserAutomation) -> None:
        """The element is returned and handed to the callback."""
        on_available = MagicMock()

        elem = automation.wait_until_available(
            selector="//div[@id='tdDialogHeader']", timeout=10.0, on_available=on_available
        )

        automation.page.locator.assert_called_with("xpath=//div[@id='tdDialogHeader']")
        assert elem is automation.page.locator.return_value.first
        elem.wait_for.assert_called_once_with(state="visible", timeout=10000.0)
        on_available.assert_called_once_with(elem)

    def test_raises_with_failure_message(self, automation: BrowserAutomation) -> None:
        """A timeout surfaces as error with the given description."""
        automation.page.locator.return_value.first.wait_for.side_effect = PlaywrightError("Timeout 10000ms exceeded.")

        with pytest.raises(ElementNotAvailableError) as exc_info:
            automation.wait_until_available(
                selector="//div[@id='tdDialogHeader']",
                timeout=10.0,
                failure_message="The Delete dialog is not available.",
            )

        assert str(exc_info.value) == "The Delete dialog is not available."
        assert exc_info.value.selector == "//div[@id='tdDialogHeader']"
        assert exc_info.value.timeout == 10.0

    def test_tolerates_missing_element_without_message(self, automation: BrowserAutomation) -> None:
        """Without failure message a missing element is not an error."""
        automation.page.locator.return_value.first.wait_for.side_effect = PlaywrightError("Timeout 5000ms exceeded.")
        on_available = MagicMock()
        on_unavailable = MagicMock()

        elem = automation.wait_until_available(
            selector="//div", timeout=5.0, on_available=on_available, on_unavailable=on_unavailable
        )

        assert elem is None
        on_available.assert_not_called()
        on_unavailable.assert_called_once_with()


class TestClickAndSet:
    """Tests for clicking and filling elements."""

    def test_click_when_available_clicks(self, automation: BrowserAutomation) -> None:
        """The element is clicked once it is visible."""
        with patch("xrm_automation.browser_automation.time.sleep"):
            assert automation.click_when_available(selector="//*[@id='butBegin']") is True

        automation.page.locator.return_value.first.click.assert_called_once_with()

    def test_click_when_not_available(self, automation: BrowserAutomation) -> None:
        """A missing element is reported as False."""
        automation.page.locator.return_value.first.wait_for.side_effect = PlaywrightError("Timeout")

        assert automation.click_when_available(selector="//*[@id='butBegin']") is False
        automation.page.locator.return_value.first.click.assert_not_called()

    def test_set_text_field(self, automation: BrowserAutomation) -> None:
        """Text inputs are filled."""
        elem = automation.page.locator.return_value.first
        elem.is_enabled.return_value = True

        assert automation.find_elem_and_set(selector="description_id_i", value="note") is True

        automation.page.locator.assert_called_with("[id='description_id_i']")
        elem.fill.assert_called_once_with("note")

    def test_set_disabled_field_fails(self, automation: BrowserAutomation) -> None:
        """Disabled inputs are not touched."""
        elem = automation.page.locator.return_value.first
        elem.is_enabled.return_value = False

        assert automation.find_elem_and_set(selector="description_id_i", value="note") is False
        elem.fill.assert_not_called()

    def test_set_date_field_presses_enter(self, automation: BrowserAutomation) -> None:
        """Date inputs are confirmed with 'Enter'."""
        elem = automation.page.locator.return_value.first
        elem.is_enabled.return_value = True

        assert automation.find_elem_and_set(selector="closedate_id_iDateInput", value="01/01/2024", press_enter=True)

        elem.fill.assert_called_once_with("01/01/2024")
        automation.page.keyboard.press.assert_called_once_with("Enter")


class TestScope:
    """Tests for switching between page, frames and popups."""

    def test_switch_to_frame_scopes_lookups(self, automation: BrowserAutomation) -> None:
        """After switching, elements are looked up inside the frame."""
        automation.switch_to_frame(frame_id="InlineDialog_Iframe")
        automation.get_locator(selector="ok_id", selector_type="id")

        automation.page.frame_locator.assert_called_once_with("iframe[id='InlineDialog_Iframe']")
        automation.page.frame_locator.return_value.locator.assert_called_once_with("[id='ok_id']")

    def test_switch_to_default_content(self, automation: BrowserAutomation) -> None:
        """Switching back uses the page again."""
        automation.switch_to_frame(frame_id="InlineDialog_Iframe")
        automation.switch_to_default_content()
        automation.get_locator(selector="crmDialog", selector_type="name")

        assert automation.frame is None
        automation.page.locator.assert_called_once_with("[name='crmDialog']")

    def test_has_elem_does_not_wait(self, automation: BrowserAutomation) -> None:
        """Presence is checked by counting."""
        automation.page.locator.return_value.count.return_value = 0

        assert automation.has_elem(selector="//iframe", selector_type="xpath") is False
        automation.page.locator.return_value.wait_for.assert_not_called()

    def test_switch_to_popup(self, automation: BrowserAutomation) -> None:
        """The most recent window becomes the page."""
        main_page = automation.page
        popup = MagicMock()
        automation.context.pages = [main_page, popup]

        assert automation.switch_to_popup() is True
        assert automation.page is popup

    def test_switch_to_popup_without_popup(self, automation: BrowserAutomation) -> None:
        """Without popup the main window stays active."""
        automation.context.pages = [automation.page]

        assert automation.switch_to_popup() is False
        assert automation.page is automation.main_page

    def test_switch_back_after_popup_closed(self, automation: BrowserAutomation) -> None:
        """Once the popup is closed the main window is used again."""
        main_page = automation.main_page
        popup = MagicMock()
        automation.context.pages = [main_page, popup]
        assert automation.switch_to_popup() is True

        automation.context.pages = [main_page]
        automation.switch_to_default_content()

        assert automation.switch_to_popup() is False
        assert automation.page is main_page
        main_page.locator.return_value.count.return_value = 1
        automation.has_elem(selector="//iframe", selector_type="xpath")
        main_page.locator.assert_called_with("xpath=//iframe")
        popup.locator.assert_not_called()

    def test_text_and_title_selectors(self, automation: BrowserAutomation) -> None:
        """Text and title selectors use the Playwright getters."""
        automation.get_locator(selector="Account Set Phone Number", selector_type="text", exact_match=True)
        automation.get_locator(selector="Search", selector_type="title")

        automation.page.get_by_text.assert_called_once_with(text="Account Set Phone Number", exact=True)
        automation.page.get_by_title.assert_called_once_with(text="Search", exact=None)

    def test_unsupported_selector_type(self, automation: BrowserAutomation) -> None:
        """Unknown selector types do not produce a locator."""
        assert automation.get_locator(selector="x", selector_type="magic") is None


class TestSession:
    """Tests for the lifecycle of the browser session."""

    def test_context_manager_ends_session(self, automation: BrowserAutomation, playwright: MagicMock) -> None:
        """Leaving the 'with' block closes everything."""
        with automation:
            pass

        automation.context.close.assert_called_once()
        automation.browser.close.assert_called_once()
        playwright.stop.assert_called_once()
