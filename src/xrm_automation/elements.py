"""Element locator table for the Dynamics 365 web client.

The table maps symbolic references to concrete selectors. It is populated once
at import time and is read-only afterwards. Resolving a reference that is not
in the table raises a KeyError as this is a programming error.

Some selectors are templates with placeholders in square brackets
(e.g. [INDEX], [NAME]) that are replaced by the page objects before use.
"""

from types import MappingProxyType
from typing import NamedTuple


class Selector(NamedTuple):
    """A concrete selector and the strategy the browser automation uses to resolve it."""

    value: str
    selector_type: str = "xpath"

    def format(self, **placeholders: str) -> "Selector":
        """Replace [PLACEHOLDER] tokens in the selector value.

        Args:
            placeholders (str):
                Placeholder names (case-insensitive) and their replacement values.

        Returns:
            Selector:
                New selector with all given placeholders replaced.

        """

        value = self.value
        for key, replacement in placeholders.items():
            value = value.replace("[{}]".format(key.upper()), replacement)

        return Selector(value=value, selector_type=self.selector_type)


class Reference:
    """Symbolic keys of the locator table."""

    class Frames:
        """Frames of the web client."""

        DIALOG_FRAME = "Frame_DialogFrame"
        DIALOG_FRAME_ID = "Frame_DialogFrameId"

    class Login:
        """Sign-in page."""

        USER_ID = "Login_UserId"
        NEXT = "Login_Next"
        PASSWORD = "Login_Password"
        SIGN_IN = "Login_SignIn"
        STAY_SIGNED_IN = "Login_StaySignedIn"

    class SetValue:
        """Generic field handling."""

        FIELD_CONTAINER = "SetValue_FieldContainer"
        TEXT_INPUT = "SetValue_TextInput"
        DATE_INPUT = "SetValue_DateInput"
        LOOKUP_FIELD = "SetValue_LookupField"
        LOOKUP_BUTTON = "SetValue_LookupButton"
        LOOKUP_MENU_ITEM = "SetValue_LookupMenuItem"
        LOOKUP_MENU_ITEM_BY_INDEX = "SetValue_LookupMenuItemByIndex"

    class LookUp:
        """Lookup dialog."""

        SEARCH_CRITERIA = "LookUp_SearchCriteria"
        SEARCH_CRITERIA_IMAGE = "LookUp_SearchCriteriaImage"
        GRID_ITEM = "LookUp_GridItem"
        ADD = "LookUp_Add"
        BEGIN = "LookUp_Begin"

    class Dialogs:
        """Modal dialogs."""

        HEADER = "Dialog_Header"
        DELETE_HEADER = "Dialog_DeleteHeader"
        WORKFLOW_HEADER = "Dialog_WorkflowHeader"

        class CloseOpportunity:
            """Close opportunity dialog."""

            ACTUAL_REVENUE_ID = "Dialog_ActualRevenue"
            CLOSE_DATE_ID = "Dialog_CloseDate"
            DESCRIPTION_ID = "Dialog_Description"
            OK = "Dialog_CloseOpportunityOk"

        class Assign:
            """Assign dialog."""

            OK = "Dialog_AssignOk"
            USER_OR_TEAM_LOOKUP_ID = "Dialog_UserOrTeamLookupId"

        class Delete:
            """Delete dialog."""

            OK = "Dialog_DeleteOk"

        class DuplicateDetection:
            """Duplicate detection dialog."""

            SAVE = "Dialog_DuplicateDetectionIgnoreSave"
            CANCEL = "Dialog_DuplicateDetectionCancel"

        class RunWorkflow:
            """Run workflow dialog."""

            CONFIRM = "Dialog_ConfirmWorkflow"

        class RunReport:
            """Run report dialog."""

            HEADER = "Dialog_ReportHeader"
            CONFIRM = "Dialog_ConfirmReport"
            DEFAULT = "Dialog_ReportDefault"
            SELECTED = "Dialog_ReportSelected"
            VIEW = "Dialog_ReportView"


ELEMENTS = MappingProxyType(
    {
        # Frames
        Reference.Frames.DIALOG_FRAME: Selector("//iframe[contains(@id,'InlineDialog[INDEX]_Iframe')]"),
        Reference.Frames.DIALOG_FRAME_ID: Selector("InlineDialog[INDEX]_Iframe", "id"),
        # Login
        Reference.Login.USER_ID: Selector("i0116", "id"),
        Reference.Login.NEXT: Selector("idSIButton9", "id"),
        Reference.Login.PASSWORD: Selector("i0118", "id"),
        Reference.Login.SIGN_IN: Selector("idSIButton9", "id"),
        Reference.Login.STAY_SIGNED_IN: Selector("idBtn_Back", "id"),
        # SetValue
        Reference.SetValue.FIELD_CONTAINER: Selector("[FIELD]", "id"),
        Reference.SetValue.TEXT_INPUT: Selector("[FIELD]_i", "id"),
        Reference.SetValue.DATE_INPUT: Selector("[FIELD]_iDateInput", "id"),
        Reference.SetValue.LOOKUP_FIELD: Selector("[FIELD]", "id"),
        Reference.SetValue.LOOKUP_BUTTON: Selector("//*[@id='[FIELD]']//*[contains(@class,'Lookup_RenderButton_td')]"),
        Reference.SetValue.LOOKUP_MENU_ITEM: Selector("//*[@id='Dialog_[FIELD]_IMenu']//li[.//*[@title='[NAME]']]"),
        Reference.SetValue.LOOKUP_MENU_ITEM_BY_INDEX: Selector("(//*[@id='Dialog_[FIELD]_IMenu']//li)[[INDEX]]"),
        # Lookup dialog
        Reference.LookUp.SEARCH_CRITERIA: Selector("//*[@id='crmGrid_findCriteria']"),
        Reference.LookUp.SEARCH_CRITERIA_IMAGE: Selector("//*[@id='crmGrid_findCriteriaImg']"),
        Reference.LookUp.GRID_ITEM: Selector(
            "//table[@id='gridBodyTable']//tr[.//*[normalize-space(text())='[NAME]' or @title='[NAME]']]"
        ),
        Reference.LookUp.ADD: Selector("//*[@id='btnAdd']"),
        Reference.LookUp.BEGIN: Selector("//*[@id='butBegin']"),
        # Dialogs
        Reference.Dialogs.HEADER: Selector("//div[contains(@id,'dialogHeaderTitle')]"),
        Reference.Dialogs.DELETE_HEADER: Selector("//div[@id='tdDialogHeader']"),
        Reference.Dialogs.WORKFLOW_HEADER: Selector("//div[@id='DlgHdContainer']"),
        Reference.Dialogs.CloseOpportunity.ACTUAL_REVENUE_ID: Selector("actualrevenue_id", "id"),
        Reference.Dialogs.CloseOpportunity.CLOSE_DATE_ID: Selector("closedate_id", "id"),
        Reference.Dialogs.CloseOpportunity.DESCRIPTION_ID: Selector("description_id", "id"),
        Reference.Dialogs.CloseOpportunity.OK: Selector("//button[contains(@id, 'ok_id')]"),
        Reference.Dialogs.Assign.OK: Selector("//*[@id='ok_id']"),
        Reference.Dialogs.Assign.USER_OR_TEAM_LOOKUP_ID: Selector("systemuserview_id", "id"),
        Reference.Dialogs.Delete.OK: Selector("//*[@id='butBegin']"),
        Reference.Dialogs.DuplicateDetection.SAVE: Selector("//*[@id='butBegin']"),
        Reference.Dialogs.DuplicateDetection.CANCEL: Selector("//*[@id='cmdDialogCancel']"),
        Reference.Dialogs.RunWorkflow.CONFIRM: Selector("//*[@id='butBegin']"),
        Reference.Dialogs.RunReport.HEADER: Selector("crmDialog", "name"),
        Reference.Dialogs.RunReport.CONFIRM: Selector("//*[@id='butBegin']"),
        Reference.Dialogs.RunReport.DEFAULT: Selector("//*[@id='reportDefault']"),
        Reference.Dialogs.RunReport.SELECTED: Selector("//*[@id='reportSelected']"),
        Reference.Dialogs.RunReport.VIEW: Selector("//*[@id='reportView']"),
    }
)


def resolve(reference: str) -> Selector:
    """Resolve a symbolic reference to its selector.

    Args:
        reference (str):
            One of the keys defined in Reference.

    Returns:
        Selector:
            The selector for the reference.

    """

    return ELEMENTS[reference]
