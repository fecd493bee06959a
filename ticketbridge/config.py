"""Jira backend configuration loaded from the environment."""

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticketbridge.core.exceptions import ConfigurationError


ENV_PREFIX = "JIRA_"


class JiraSettings(BaseSettings):
    """Connection and schema settings for the Jira backend.

    Connection settings have no defaults and must come from the environment
    (or a .env file). Schema settings default to the fields configured on
    the integration project and only need overriding for another project.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Connection
    base_url: str = Field(description="Jira site URL, e.g. https://acme.atlassian.net")
    email: str = Field(description="Account the API token belongs to")
    api_token: SecretStr = Field(description="Jira API token")
    project_key: str = Field(description="Project new tickets are filed in")

    # Issue schema
    issue_type: str = "Integration"
    username_field: str = "customfield_10034"
    collection_field: str = "customfield_10035"
    link_field: str = "customfield_10036"
    list_fields: list[str] = Field(
        default_factory=lambda: ["customfield_10044", "customfield_10035"],
        description="Custom fields returned alongside summary/status/priority/key",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def load_jira_settings() -> JiraSettings:
    """Load Jira settings from the environment.

    Returns:
        Populated JiraSettings.

    Raises:
        ConfigurationError: If any required variable is missing or invalid.
    """
    try:
        return JiraSettings()  # type: ignore[call-arg]
    except ValidationError as e:
        missing = [
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}"
            for err in e.errors()
            if err["type"] == "missing"
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables for Jira: {', '.join(missing)}"
            ) from e
        raise ConfigurationError(f"Invalid Jira configuration: {e}") from e
