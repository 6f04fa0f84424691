"""Configuration settings for the Twitter Ads client.

Settings are loaded from environment variables and ``.env`` files. Every
value can also be overridden per client by passing it explicitly to
:class:`twitter_ads.client.TwitterAdsClient`.
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param api_base_url: Scheme and host of the Ads API
    :type api_base_url: str
    :param api_version: Path version segment prepended to every resource
    :type api_version: str
    :param access_token: Pre-issued bearer token sent with every request
    :type access_token: Optional[str]
    :param timeout: Request timeout in seconds
    :type timeout: float
    :param connect_timeout: Connection timeout in seconds
    :type connect_timeout: float
    :param page_size: Default ``count`` applied by paginating helpers
    :type page_size: Optional[int]
    :param user_agent: User agent sent with every request
    :type user_agent: str
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_base_url: str = Field(
        "https://ads-api.twitter.com",
        alias="TWITTER_ADS_API_BASE_URL",
        description="Twitter Ads API base URL",
    )
    api_version: str = Field(
        "0", alias="TWITTER_ADS_API_VERSION", description="Ads API version"
    )
    access_token: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("TWITTER_ADS_ACCESS_TOKEN", "TWITTER_BEARER_TOKEN"),
        description="Bearer token for the Ads API",
    )
    timeout: float = Field(
        30.0, alias="TWITTER_ADS_TIMEOUT", description="Read timeout in seconds"
    )
    connect_timeout: float = Field(
        5.0,
        alias="TWITTER_ADS_CONNECT_TIMEOUT",
        description="Connect timeout in seconds",
    )
    page_size: Optional[int] = Field(
        None,
        alias="TWITTER_ADS_PAGE_SIZE",
        description="Default page size for paginated listings",
    )
    user_agent: str = Field(
        "twitter-ads-client/0.1",
        alias="TWITTER_ADS_USER_AGENT",
        description="User agent header value",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", alias="LOG_LEVEL", description="Logging level"
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be joined with a single slash.

        :param v: The configured base URL
        :type v: str
        :return: Base URL without a trailing slash
        :rtype: str
        """
        return v.rstrip("/")

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("page_size must be positive")
        return v

    @property
    def api_root(self) -> str:
        """Get the versioned API root that resource paths are relative to.

        :return: Base URL joined with the API version
        :rtype: str
        """
        return f"{self.api_base_url}/{self.api_version.strip('/')}/"


settings = Settings()
"""Global settings instance.

Created once on import; clients read their defaults from it.
"""
