"""Shared pytest fixtures for the xrm_automation tests.

The browser automation (the Playwright driver) is replaced by a MagicMock with
the interface of BrowserAutomation, so the page objects can be tested without a
browser. The order of driver interactions is checked with driver_actions().
"""

from unittest.mock import MagicMock

import pytest

from xrm_automation.browser import XrmBrowser
from xrm_automation.browser_automation import BrowserAutomation
from xrm_automation.settings import Settings

INTERACTIONS = ("wait_until_available", "click_when_available", "find_elem_and_set", "switch_to_frame")


def driver_actions(automation: MagicMock, names: tuple[str, ...] = INTERACTIONS) -> list[tuple[str, str | None]]:
    """Return the driver interactions in call order as (method, selector or frame id) tuples."""

    actions = []
    for name, _args, kwargs in automation.mock_calls:
        if name in names:
            actions.append((name, kwargs.get("selector", kwargs.get("frame_id"))))
    return actions


def clicks(automation: MagicMock) -> list[str]:
    """Return the selectors of all clicked elements in call order."""

    return [selector for _name, selector in driver_actions(automation, names=("click_when_available",))]


@pytest.fixture
def settings() -> Settings:
    """Settings without think time so tests do not sleep."""

    return Settings(think_time=0, dialog_timeout=10.0, duplicate_detection_timeout=5.0)


@pytest.fixture
def automation() -> MagicMock:
    """Browser automation mock where every element is available and every action succeeds."""

    driver = MagicMock(spec=BrowserAutomation)
    driver.has_elem.return_value = True
    driver.click_when_available.return_value = True
    driver.find_elem_and_set.return_value = True
    driver.get_page.return_value = True
    driver.get_title.return_value = "Dynamics 365"
    return driver


@pytest.fixture
def xrm_browser(settings: Settings, automation: MagicMock) -> XrmBrowser:
    """Browser session bound to the browser automation mock."""

    return XrmBrowser(settings=settings, automation=automation)
