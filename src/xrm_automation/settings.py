"""Settings for the Dynamics 365 UI automation."""

import os
from typing import Literal

from pydantic import Field, HttpUrl, SecretStr, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)


class Settings(BaseSettings):
    """Class for all settings."""

    url: HttpUrl | None = Field(default=None, description="URL of the Dynamics 365 organization")
    username: str = Field(default="", description="User name used to sign in")
    password: SecretStr | None = Field(default=None, description="Password used to sign in")

    browser: Literal["chromium", "chrome", "msedge", "webkit", "firefox"] = Field(
        default="chromium",
        description="Browser engine used by Playwright",
    )
    headless: bool = Field(default=True, description="Headless Browser for the BrowserAutomation")
    take_screenshots: bool = Field(default=False, description="Take a screenshot after each browser interaction")
    automation_name: str = Field(
        default="dynamics",
        description="Name of the automation, used for the screenshot directory",
    )

    think_time: float = Field(
        default=2.0,
        ge=0.0,
        description="Seconds to wait before each dialog interaction to simulate human pacing",
    )
    dialog_timeout: float = Field(default=10.0, gt=0.0, description="Seconds to wait for a dialog to show up")
    duplicate_detection_timeout: float = Field(
        default=5.0,
        gt=0.0,
        description="Seconds to wait for the (optional) duplicate detection dialog",
    )
    default_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Default timeout in seconds for all other browser operations",
    )
    date_format: str = Field(default="%m/%d/%Y", description="Format used to enter dates in date fields")

    configure_logging: bool = Field(
        default=False,
        description="Configure the root logger with log_level and log_file when a session is created",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None, description="Optional log file in addition to stdout")

    model_config = SettingsConfigDict(
        toml_file="config.toml",
        env_prefix="XRM_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def fallback(self) -> "Settings":
        """Fallback implementation to read the credentials from the environment."""

        if self.password is None and os.environ.get("DYNAMICS_PASSWORD"):
            self.password = SecretStr(os.environ["DYNAMICS_PASSWORD"])

        if not self.username:
            self.username = os.environ.get("DYNAMICS_USERNAME", "")

        return self

    @classmethod
    def settings_customise_sources(  # noqa: D102
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
        )
