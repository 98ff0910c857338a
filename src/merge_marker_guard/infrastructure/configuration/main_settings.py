from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Check configuration, read from the GitHub Actions environment.

    Action inputs arrive as ``INPUT_<NAME>`` variables with the hyphen kept,
    plain names are accepted for local runs.
    """

    # ── Action inputs ──
    github_token: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("INPUT_GITHUB-TOKEN", "GITHUB_TOKEN", "github_token"),
    )
    exclude_patterns: str = Field(
        default="",
        validation_alias=AliasChoices(
            "INPUT_EXCLUDE-PATTERNS", "EXCLUDE_PATTERNS", "exclude_patterns"
        ),
        description="Comma-separated literal substrings; matching files are not scanned.",
    )

    # ── Runner context ──
    github_api_url: str = Field(
        default="https://api.github.com",
        validation_alias=AliasChoices("GITHUB_API_URL", "github_api_url"),
    )
    github_repository: str = Field(
        default="", validation_alias=AliasChoices("GITHUB_REPOSITORY", "github_repository")
    )
    github_event_path: Path | None = Field(
        default=None, validation_alias=AliasChoices("GITHUB_EVENT_PATH", "github_event_path")
    )
    github_output: Path | None = Field(
        default=None, validation_alias=AliasChoices("GITHUB_OUTPUT", "github_output")
    )

    # ── Local overrides ──
    pull_number: int | None = Field(
        default=None, validation_alias=AliasChoices("PULL_NUMBER", "pull_number")
    )
    head_sha: str | None = Field(
        default=None, validation_alias=AliasChoices("HEAD_SHA", "head_sha")
    )

    # ── HTTP behaviour ──
    files_per_page: int = Field(
        default=100, ge=1, le=100, validation_alias=AliasChoices("FILES_PER_PAGE", "files_per_page")
    )
    max_retries: int = Field(
        default=3, ge=0, validation_alias=AliasChoices("MAX_RETRIES", "max_retries")
    )
    request_timeout: float = Field(
        default=10.0, gt=0, validation_alias=AliasChoices("REQUEST_TIMEOUT", "request_timeout")
    )

    log_format: str = Field(default="", validation_alias=AliasChoices("LOG_FORMAT", "log_format"))

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)

    def exclude_pattern_list(self) -> list[str]:
        """Split the raw input on commas, dropping blanks so '' never excludes everything."""
        return [pattern.strip() for pattern in self.exclude_patterns.split(",") if pattern.strip()]

    def validate_github_credentials(self) -> None:
        if not self.github_token.get_secret_value():
            raise ValueError("GitHub token is missing in settings.")
