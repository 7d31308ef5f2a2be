"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the Moodle connection.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Gateway settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        http_client_log_level: Level of the httpx logger, which reports
            every Moodle call at INFO.
        rate_limit_enabled: Turn the per-client rate limit on or off.
        rate_limit_default: Default rate limit applied to every route.
        moodle_base_url: Root URL of the Moodle site.
        moodle_token: Web-service token of the integration user.
        moodle_rest_path: Path of Moodle's REST server script.
        moodle_timeout_seconds: Timeout for each Moodle call.
        expose_internal_errors: Put the raw text of unclassified errors in
            the envelope data. Diagnostics only.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Moodle Gateway"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    http_client_log_level: str = "WARNING"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    moodle_base_url: str = "http://localhost"
    moodle_token: SecretStr = SecretStr("")
    moodle_rest_path: str = "/webservice/rest/server.php"
    moodle_timeout_seconds: float = 10.0

    expose_internal_errors: bool = False


settings = Settings()
