"""Page object for the sign-in page in front of the Dynamics 365 organization."""

from ..browser_automation import BrowserAutomation
from ..command import CommandResult
from ..elements import Reference, resolve
from .base import XrmPage


class LoginPage(XrmPage):
    """Page object for the (Microsoft online) sign-in page."""

    def login(self, url: str, username: str, password: str, stay_signed_in: bool = False) -> CommandResult[bool]:
        """Sign in to the Dynamics 365 organization.

        The sign-in is a two-step flow: the user name is entered and confirmed
        with "Next", then the password is entered and confirmed with "Sign in".
        Afterwards the "Stay signed in?" prompt is answered if it shows up.

        Args:
            url (str):
                The URL of the Dynamics organization.
            username (str):
                The user name.
            password (str):
                The password. It is never logged.
            stay_signed_in (bool, optional):
                Answer the "Stay signed in?" prompt with yes. Default is False.

        Returns:
            CommandResult[bool]:
                Value is True if all steps succeeded, False otherwise.

        """

        def do_login(driver: BrowserAutomation) -> bool:
            user_field = resolve(Reference.Login.USER_ID)
            next_button = resolve(Reference.Login.NEXT)
            password_field = resolve(Reference.Login.PASSWORD)
            sign_in_button = resolve(Reference.Login.SIGN_IN)

            if (
                not driver.get_page(url=url)
                or not driver.find_elem_and_set(
                    selector=user_field.value, selector_type=user_field.selector_type, value=username
                )
                or not driver.click_when_available(selector=next_button.value, selector_type=next_button.selector_type)
                or not driver.find_elem_and_set(
                    selector=password_field.value,
                    selector_type=password_field.selector_type,
                    value=password,
                    is_sensitive=True,
                )
                or not driver.click_when_available(
                    selector=sign_in_button.value, selector_type=sign_in_button.selector_type
                )
            ):
                self.logger.error("Cannot log into -> %s with user -> '%s'!", url, username)
                return False

            # The "Stay signed in?" prompt reuses the ID of the sign in button for "Yes":
            stay_button = sign_in_button if stay_signed_in else resolve(Reference.Login.STAY_SIGNED_IN)
            driver.wait_until_available(
                selector=stay_button.value,
                selector_type=stay_button.selector_type,
                timeout=self.browser.settings.dialog_timeout,
                on_available=lambda elem: elem.click(),
            )

            self.logger.info("Login with user -> '%s' completed. Page title -> '%s'", username, driver.get_title())

            return True

        return self.execute(self.get_options("Login"), do_login)

    # end method definition
