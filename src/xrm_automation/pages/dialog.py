"""Page object for the modal dialogs of the Dynamics 365 web client.

Every operation waits for the marker element of its dialog before it touches
any field. If the marker does not show up in time an ElementNotAvailableError
is raised - except for the duplicate detection dialog, which is optional.

Usage:
    xrm_browser.dialogs.close_opportunity(10000, date.today(), "Closed by the UI test")
    xrm_browser.dialogs.assign(AssignTo.USER, "Jane Doe")
    xrm_browser.dialogs.run_workflow("Account Set Phone Number")
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from ..browser_automation import BrowserAutomation
from ..command import CommandResult
from ..elements import Reference, resolve
from .base import LookupValue, XrmPage
from .lookup import LookupPage

if TYPE_CHECKING:
    from ..browser import XrmBrowser

default_logger = logging.getLogger("xrm_automation.pages.dialog")


class AssignTo(Enum):
    """Type of the owner a record is assigned to."""

    ME = "me"
    USER = "user"
    TEAM = "team"


class ReportRecords(Enum):
    """Records a report is run for."""

    ALL_RECORDS = "all_records"
    SELECTED_RECORDS = "selected_records"
    ALL_RECORDS_ON_PAGE = "all_records_on_page"


class DialogPage(XrmPage):
    """Page object for the dialogs."""

    def __init__(self, browser: "XrmBrowser", logger: logging.Logger = default_logger) -> None:
        """Initialize the dialog page and switch to the topmost dialog.

        Args:
            browser (XrmBrowser):
                The browser session the page is bound to.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        super().__init__(browser=browser, logger=logger)
        self.switch_to_dialog()

    # end method definition

    def click(self, driver: BrowserAutomation, reference: str) -> bool:
        """Click the element of a locator table reference once it is available."""

        selector = resolve(reference)
        return driver.click_when_available(selector=selector.value, selector_type=selector.selector_type)

    # end method definition

    def wait_for_dialog(self, driver: BrowserAutomation, reference: str, message: str) -> None:
        """Wait for the marker element of a dialog.

        Raises:
            ElementNotAvailableError:
                If the marker does not show up within the dialog timeout.

        """

        marker = resolve(reference)
        driver.wait_until_available(
            selector=marker.value,
            selector_type=marker.selector_type,
            timeout=self.browser.settings.dialog_timeout,
            failure_message=message,
        )

    # end method definition

    def close_opportunity(
        self,
        revenue: float,
        close_date: date | datetime,
        description: str,
        think_time: float | None = None,
    ) -> CommandResult[bool]:
        """Close the opportunity that is currently open.

        Args:
            revenue (float):
                The actual revenue of the opportunity.
            close_date (date | datetime):
                The close date of the opportunity.
            description (str):
                The description of the closing.
            think_time (float | None, optional):
                Seconds to wait before the interaction to simulate a human user.
                None uses the session default (2 seconds unless configured otherwise).

        Returns:
            CommandResult[bool]:
                Value is True once the dialog has been confirmed.

        Raises:
            ElementNotAvailableError:
                If the Close Opportunity dialog does not show up.

        """

        think_time = self.think(think_time)

        def do_close(driver: BrowserAutomation) -> bool:
            self.wait_for_dialog(driver, Reference.Dialogs.HEADER, "The Close Opportunity dialog is not available.")

            self.set_value(resolve(Reference.Dialogs.CloseOpportunity.ACTUAL_REVENUE_ID).value, revenue)
            self.set_value(resolve(Reference.Dialogs.CloseOpportunity.CLOSE_DATE_ID).value, close_date)
            self.set_value(resolve(Reference.Dialogs.CloseOpportunity.DESCRIPTION_ID).value, description)

            self.click(driver, Reference.Dialogs.CloseOpportunity.OK)

            return True

        return self.execute(self.get_options("Close Opportunity", think_time=think_time), do_close)

    # end method definition

    def assign(self, to: AssignTo, value: str = "", think_time: float | None = None) -> CommandResult[bool]:
        """Assign the record to the current user, another user or a team.

        Args:
            to (AssignTo):
                The type of the new owner.
            value (str, optional):
                The name of the user to pick from the lookup. Only used for AssignTo.USER.
                If empty, the first entry of the lookup is picked (as for teams).
            think_time (float | None, optional):
                Seconds to wait before the interaction. None uses the session default.

        Returns:
            CommandResult[bool]:
                Value is True once the dialog has been confirmed.

        Raises:
            ElementNotAvailableError:
                If the Assign dialog does not show up.
            ValueError:
                If 'to' is not an AssignTo value.

        """

        think_time = self.think(think_time)

        def do_assign(driver: BrowserAutomation) -> bool:
            self.wait_for_dialog(driver, Reference.Dialogs.HEADER, "The Assign dialog is not available.")

            lookup_id = resolve(Reference.Dialogs.Assign.USER_OR_TEAM_LOOKUP_ID).value

            match to:
                case AssignTo.ME:
                    pass
                case AssignTo.USER:
                    # Without a user name the first entry of the lookup is picked:
                    self.set_lookup_value(LookupValue(name=lookup_id, value=value or None))
                case AssignTo.TEAM:
                    self.set_lookup_value(LookupValue(name=lookup_id))
                case _:
                    msg = "Unsupported assignment target -> '{}'".format(to)
                    raise ValueError(msg)

            self.click(driver, Reference.Dialogs.Assign.OK)

            return True

        return self.execute(self.get_options("Assign", think_time=think_time), do_assign)

    # end method definition

    def delete(self, think_time: float | None = None) -> CommandResult[bool]:
        """Confirm the deletion of the selected record.

        Raises:
            ElementNotAvailableError:
                If the Delete dialog does not show up.

        """

        think_time = self.think(think_time)

        def do_delete(driver: BrowserAutomation) -> bool:
            self.wait_for_dialog(driver, Reference.Dialogs.DELETE_HEADER, "The Delete dialog is not available.")
            self.click(driver, Reference.Dialogs.Delete.OK)
            return True

        return self.execute(self.get_options("Delete", think_time=think_time), do_delete)

    # end method definition

    def duplicate_detection(self, save: bool, think_time: float | None = None) -> CommandResult[bool]:
        """Handle the duplicate detection dialog if it shows up.

        Duplicate detection is optional in Dynamics 365. If the dialog does not
        show up within the (shorter) duplicate detection timeout nothing is done.

        Args:
            save (bool):
                If True the record is saved anyway, otherwise the save is cancelled.
            think_time (float | None, optional):
                Seconds to wait before the interaction. None uses the session default.

        Returns:
            CommandResult[bool]:
                Value is always True.

        """

        think_time = self.think(think_time)

        def do_duplicate_detection(driver: BrowserAutomation) -> bool:
            marker = resolve(Reference.Dialogs.HEADER)

            def handle_dialog(elem: object) -> None:  # noqa: ARG001
                if save:
                    self.click(driver, Reference.Dialogs.DuplicateDetection.SAVE)
                else:
                    self.click(driver, Reference.Dialogs.DuplicateDetection.CANCEL)

            driver.wait_until_available(
                selector=marker.value,
                selector_type=marker.selector_type,
                timeout=self.browser.settings.duplicate_detection_timeout,
                on_available=handle_dialog,
                on_unavailable=lambda: self.logger.debug("No duplicate detection dialog. Nothing to do."),
            )

            return True

        return self.execute(
            self.get_options("Duplicate Detection", think_time=think_time),
            do_duplicate_detection,
        )

    # end method definition

    def run_workflow(self, name: str, think_time: float | None = None) -> CommandResult[bool]:
        """Run an on-demand workflow for the current record.

        The workflow is picked in a lookup. Confirming the lookup opens a
        nested confirmation dialog, so the dialog depth of the session is
        incremented.

        Args:
            name (str):
                The name of the workflow.
            think_time (float | None, optional):
                Seconds to wait before the interaction. None uses the session default.

        Returns:
            CommandResult[bool]:
                Value is True once the workflow has been confirmed.

        Raises:
            ElementNotAvailableError:
                If the Run Workflow dialog does not show up or the workflow
                is not in the lookup.

        """

        think_time = self.think(think_time)

        def do_run_workflow(driver: BrowserAutomation) -> bool:
            self.wait_for_dialog(driver, Reference.Dialogs.WORKFLOW_HEADER, "The RunWorkflow dialog is not available.")

            lookup = self.browser.get_page(LookupPage)
            self.browser.depth += 1
            lookup.search(name, think_time=0)
            lookup.select_item(name, think_time=0)
            lookup.add(think_time=0)

            self.switch_to_dialog(self.browser.depth)
            self.click(driver, Reference.Dialogs.RunWorkflow.CONFIRM)

            return True

        return self.execute(self.get_options("Run Workflow", think_time=think_time), do_run_workflow)

    # end method definition

    def run_report(self, records: ReportRecords, think_time: float | None = None) -> CommandResult[bool]:
        """Run a report for a choice of records.

        Args:
            records (ReportRecords):
                The records the report is run for.
            think_time (float | None, optional):
                Seconds to wait before the interaction. None uses the session default.

        Returns:
            CommandResult[bool]:
                Value is True once the report has been confirmed.

        Raises:
            ElementNotAvailableError:
                If the Run Report dialog does not show up.
            ValueError:
                If 'records' is not a ReportRecords value.

        """

        think_time = self.think(think_time)

        def do_run_report(driver: BrowserAutomation) -> bool:
            self.wait_for_dialog(driver, Reference.Dialogs.RunReport.HEADER, "The Run Report dialog is not available.")

            match records:
                case ReportRecords.ALL_RECORDS:
                    self.click(driver, Reference.Dialogs.RunReport.DEFAULT)
                case ReportRecords.SELECTED_RECORDS:
                    self.click(driver, Reference.Dialogs.RunReport.SELECTED)
                case ReportRecords.ALL_RECORDS_ON_PAGE:
                    self.click(driver, Reference.Dialogs.RunReport.VIEW)
                case _:
                    msg = "Unsupported report records -> '{}'".format(records)
                    raise ValueError(msg)

            self.click(driver, Reference.Dialogs.RunReport.CONFIRM)

            return True

        return self.execute(self.get_options("Run Report", think_time=think_time), do_run_report)

    # end method definition
