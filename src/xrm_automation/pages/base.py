"""Base class for all page objects of the Dynamics 365 web client."""

import logging
import time
from collections.abc import Callable
from datetime import date, datetime
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel

from ..browser_automation import BrowserAutomation
from ..command import CommandOptions, CommandResult
from ..elements import Reference, resolve

if TYPE_CHECKING:
    from ..browser import XrmBrowser

default_logger = logging.getLogger("xrm_automation.pages")

T = TypeVar("T")


class LookupValue(BaseModel):
    """Define Model for the value of a lookup field."""

    name: str
    value: str | None = None
    index: int = 0


def format_number(number: float) -> str:
    """Render a number the way it is typed into a numeric field (no trailing '.0')."""

    if float(number).is_integer():
        return str(int(number))
    return str(number)


class XrmPage:
    """Base class for page objects bound to a browser session."""

    logger: logging.Logger = default_logger

    def __init__(self, browser: "XrmBrowser", logger: logging.Logger = default_logger) -> None:
        """Initialize the page object.

        Args:
            browser (XrmBrowser):
                The browser session the page is bound to.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild(type(self).__name__.lower())
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.browser = browser

    # end method definition

    @property
    def driver(self) -> BrowserAutomation:
        """Return the browser automation of the session."""

        return self.browser.automation

    # end method definition

    def get_options(self, name: str, think_time: float = 0.0) -> CommandOptions:
        """Return the options for a named command."""

        return CommandOptions(name=name, think_time=think_time)

    # end method definition

    def execute(self, options: CommandOptions, func: Callable[[BrowserAutomation], T]) -> CommandResult[T]:
        """Execute a browser command and wrap its return value into a command result.

        Exceptions raised by the command are logged and re-raised unchanged.
        Commands are not retried.

        Args:
            options (CommandOptions):
                The options of the command.
            func (Callable[[BrowserAutomation], T]):
                The command. It receives the browser automation as its only parameter.

        Returns:
            CommandResult[T]:
                The value returned by the command together with the execution time.

        """

        self.logger.info("Execute command -> '%s'...", options.name)
        start_time = time.perf_counter()

        try:
            value = func(self.driver)
        except Exception as e:
            self.logger.error(
                "Command -> '%s' failed after %.2f seconds; error -> %s",
                options.name,
                time.perf_counter() - start_time,
                str(e),
            )
            raise

        execution_time = time.perf_counter() - start_time
        self.logger.info("Command -> '%s' completed in %.2f seconds.", options.name, execution_time)

        return CommandResult(
            name=options.name,
            value=value,
            execution_time=execution_time,
            think_time=options.think_time,
        )

    # end method definition

    def think(self, think_time: float | None) -> float:
        """Apply the think time of the session and return the seconds waited.

        Negative think times are treated as zero.
        """

        if think_time is None:
            think_time = self.browser.settings.think_time
        think_time = max(think_time, 0.0)
        self.browser.think_time(think_time)

        return think_time

    # end method definition

    def set_value(self, field: str, value: str | float | date | datetime) -> bool:
        """Set the value of a form field.

        Text and number fields are activated by clicking their container
        before the value is filled in. Date fields are filled in with the
        configured date format and confirmed with "Enter".

        Args:
            field (str):
                The ID of the field.
            value (str | float | date | datetime):
                The new value.

        Returns:
            bool:
                True if the value has been set, False otherwise.

        """

        if isinstance(value, (date, datetime)):
            date_input = resolve(Reference.SetValue.DATE_INPUT).format(field=field)
            return self.driver.find_elem_and_set(
                selector=date_input.value,
                selector_type=date_input.selector_type,
                value=value.strftime(self.browser.settings.date_format),
                press_enter=True,
            )

        if isinstance(value, (int, float)):
            value = format_number(value)

        container = resolve(Reference.SetValue.FIELD_CONTAINER).format(field=field)
        text_input = resolve(Reference.SetValue.TEXT_INPUT).format(field=field)

        self.driver.click_when_available(selector=container.value, selector_type=container.selector_type)

        return self.driver.find_elem_and_set(
            selector=text_input.value,
            selector_type=text_input.selector_type,
            value=value,
        )

    # end method definition

    def set_lookup_value(self, lookup: LookupValue) -> bool:
        """Open a lookup field and pick one of its entries.

        Args:
            lookup (LookupValue):
                The lookup field and the entry to pick. If no value is given,
                the entry at the given index is picked.

        Returns:
            bool:
                True if the entry has been clicked, False otherwise.

        Raises:
            ElementNotAvailableError:
                If the lookup list does not have an entry with the given value.

        """

        lookup_field = resolve(Reference.SetValue.LOOKUP_FIELD).format(field=lookup.name)
        lookup_button = resolve(Reference.SetValue.LOOKUP_BUTTON).format(field=lookup.name)

        self.driver.click_when_available(selector=lookup_field.value, selector_type=lookup_field.selector_type)
        self.driver.click_when_available(selector=lookup_button.value, selector_type=lookup_button.selector_type)

        if lookup.value is not None:
            item = resolve(Reference.SetValue.LOOKUP_MENU_ITEM).format(field=lookup.name, name=lookup.value)
            self.driver.wait_until_available(
                selector=item.value,
                selector_type=item.selector_type,
                timeout=self.browser.settings.dialog_timeout,
                failure_message="List does not have {}.".format(lookup.value),
            )
        else:
            # XPath positions are 1-based:
            item = resolve(Reference.SetValue.LOOKUP_MENU_ITEM_BY_INDEX).format(
                field=lookup.name, index=str(lookup.index + 1)
            )

        self.logger.debug("Select entry -> '%s' of lookup -> '%s'", lookup.value or lookup.index, lookup.name)

        return self.driver.click_when_available(selector=item.value, selector_type=item.selector_type)

    # end method definition

    def switch_to_dialog(self, frame_index: int = 0) -> None:
        """Switch the browser automation to a dialog.

        Dialogs are rendered in inline iframes named 'InlineDialog_Iframe',
        'InlineDialog1_Iframe', ... depending on their nesting. If no such
        iframe exists the dialog has been opened as a popup window.

        Args:
            frame_index (int, optional):
                The nesting level of the dialog. Default is 0 (the first dialog).

        """

        index = str(frame_index) if frame_index > 0 else ""

        self.driver.switch_to_default_content()

        dialog_frame = resolve(Reference.Frames.DIALOG_FRAME).format(index=index)
        if self.driver.has_elem(selector=dialog_frame.value, selector_type=dialog_frame.selector_type):
            frame_id = resolve(Reference.Frames.DIALOG_FRAME_ID).format(index=index)
            self.driver.switch_to_frame(frame_id=frame_id.value)
        else:
            self.logger.debug("No inline dialog #%d found. Switching to popup window...", frame_index)
            self.driver.switch_to_popup()

    # end method definition
