"""Page object for the lookup dialog (search and select records)."""

import logging
from typing import TYPE_CHECKING

from ..browser_automation import BrowserAutomation
from ..command import CommandResult
from ..elements import Reference, resolve
from .base import XrmPage

if TYPE_CHECKING:
    from ..browser import XrmBrowser

default_logger = logging.getLogger("xrm_automation.pages.lookup")


class LookupPage(XrmPage):
    """Page object for the lookup dialog."""

    def __init__(self, browser: "XrmBrowser", logger: logging.Logger = default_logger) -> None:
        """Initialize the lookup page and switch to the topmost dialog."""

        super().__init__(browser=browser, logger=logger)
        self.switch_to_dialog()

    # end method definition

    def search(self, criteria: str, think_time: float | None = None) -> CommandResult[bool]:
        """Search the lookup for records.

        Args:
            criteria (str):
                The search text.
            think_time (float | None, optional):
                Seconds to wait before the interaction. None uses the session default.

        """

        think_time = self.think(think_time)

        def do_search(driver: BrowserAutomation) -> bool:
            search_box = resolve(Reference.LookUp.SEARCH_CRITERIA)
            search_image = resolve(Reference.LookUp.SEARCH_CRITERIA_IMAGE)

            driver.find_elem_and_set(
                selector=search_box.value,
                selector_type=search_box.selector_type,
                value=criteria,
            )
            driver.click_when_available(selector=search_image.value, selector_type=search_image.selector_type)

            return True

        return self.execute(self.get_options("Search", think_time=think_time), do_search)

    # end method definition

    def select_item(self, name: str, think_time: float | None = None) -> CommandResult[bool]:
        """Select the record with the given name in the lookup result grid.

        Args:
            name (str):
                The (displayed) name of the record.
            think_time (float | None, optional):
                Seconds to wait before the interaction. None uses the session default.

        Raises:
            ElementNotAvailableError:
                If no record with the given name is in the result grid.

        """

        think_time = self.think(think_time)

        def do_select(driver: BrowserAutomation) -> bool:
            item = resolve(Reference.LookUp.GRID_ITEM).format(name=name)

            driver.wait_until_available(
                selector=item.value,
                selector_type=item.selector_type,
                timeout=self.browser.settings.dialog_timeout,
                failure_message="The lookup does not have an item -> '{}'.".format(name),
            )
            driver.click_when_available(selector=item.value, selector_type=item.selector_type)

            return True

        return self.execute(self.get_options("Select Item", think_time=think_time), do_select)

    # end method definition

    def add(self, think_time: float | None = None) -> CommandResult[bool]:
        """Add the selected records and close the lookup."""

        think_time = self.think(think_time)

        def do_add(driver: BrowserAutomation) -> bool:
            add_button = resolve(Reference.LookUp.ADD)
            driver.click_when_available(selector=add_button.value, selector_type=add_button.selector_type)
            return True

        return self.execute(self.get_options("Add", think_time=think_time), do_add)

    # end method definition

    def confirm(self, think_time: float | None = None) -> CommandResult[bool]:
        """Confirm the lookup dialog."""

        think_time = self.think(think_time)

        def do_confirm(driver: BrowserAutomation) -> bool:
            begin_button = resolve(Reference.LookUp.BEGIN)
            driver.click_when_available(selector=begin_button.value, selector_type=begin_button.selector_type)
            return True

        return self.execute(self.get_options("Confirm", think_time=think_time), do_confirm)

    # end method definition
