# clean_api/adapters/configuration/config.py

"""
Application Settings Configuration
"""

from pathlib import Path
from dotenv import load_dotenv

# .env lives at the project root
env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(env_path)

from pydantic import SecretStr, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings
from typing import Optional, List, Union
from logging import getLevelName


class Settings(BaseSettings):
    """
    Application Settings for environment configuration, database, auth, cookies and logging.
    """
    model_config = ConfigDict(
        env_file=str(env_path),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # General Project Info
    PROJECT_NAME: str = Field(default="Clean Auth API", description="Name of the project")
    VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Environment: development, production, testing")
    DEBUG: bool = Field(default=False, description="Enable debug mode (detailed error logs)")
    API_PREFIX: str = Field(default="", description="Prefix mounted in front of every router")
    SCHEMA_VISIBILITY: bool = Field(default=True, description="Show API docs (Swagger UI and Redoc)")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    # Database
    DB_DRIVER: str = Field(default="asyncpg", description="Database driver (asyncpg)")
    POSTGRES_USER: str = Field(default="postgres", description="Database user")
    POSTGRES_PASSWORD: str = Field(default="postgres", description="Database password")
    POSTGRES_DB: str = Field(default="clean_auth", description="Database name")
    POSTGRES_HOST: str = Field(default="localhost", description="Database host")
    POSTGRES_PORT: int = Field(default=5432, description="Database port")
    DATABASE_URL: Optional[str] = Field(default=None, description="Database connection URL")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # Auth Settings
    SECRET_KEY: SecretStr
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_ISSUER: str = Field(default="clean-auth-api", description="Issuer claim of access tokens")
    JWT_AUDIENCE: Optional[str] = Field(default=None, description="Audience claim of access tokens")
    ACCESS_TOKEN_EXPIRES_IN: str = Field(default="15m", description="Access token lifetime (e.g. 15m, 1h)")
    REFRESH_TOKEN_EXPIRES_IN: str = Field(default="7d", description="Refresh token lifetime (e.g. 7d, 12h)")
    REFRESH_REUSE_REVOKES_ALL: bool = Field(
        default=False,
        description="Revoke every refresh token of the user when a rotated token is presented again",
    )

    # Argon2id cost parameters
    ARGON2_MEMORY_COST: int = Field(default=19456, description="Argon2 memory cost (KiB)")
    ARGON2_TIME_COST: int = Field(default=2, description="Argon2 time cost (iterations)")
    ARGON2_PARALLELISM: int = Field(default=1, description="Argon2 parallelism (lanes)")

    # Cookies
    REFRESH_COOKIE_NAME: str = Field(default="refresh_token", description="Name of the refresh token cookie")
    CSRF_COOKIE_NAME: str = Field(default="refresh_token_csrf", description="Name of the CSRF cookie")
    COOKIE_DOMAIN: Optional[str] = Field(default=None, description="Domain for cookies (e.g. example.com)")
    COOKIE_PATH: str = Field(default="/", description="Path for cookies")
    COOKIE_SAMESITE: str = Field(default="lax", description="SameSite policy for cookies: lax, strict, or none")
    COOKIE_SECURE: Optional[bool] = Field(default=None, description="Force the Secure flag (defaults to production)")

    # CSRF protection settings
    CSRF_HEADER_NAME: str = Field(default="x-csrf-token", description="CSRF header name")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:3000", description="Allowed CORS origins (comma separated)")

    def model_post_init(self, __context) -> None:
        """Assemble DATABASE_URL from its parts when it was not given directly."""
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+{self.DB_DRIVER}://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )

    @property
    def cookie_secure(self) -> bool:
        if self.COOKIE_SECURE is not None:
            return self.COOKIE_SECURE
        return self.ENVIRONMENT == "production"

    @property
    def cors_origins(self) -> List[str]:
        """
        CORS origins parsed from the comma-separated setting.
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @field_validator("DEBUG", "SCHEMA_VISIBILITY", "DB_ECHO", "REFRESH_REUSE_REVOKES_ALL", mode="before")
    def parse_boolean(cls, v: Union[str, bool]) -> bool:
        """Convert string boolean values to proper boolean."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "y", "on")
        return bool(v)

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that the log level is a valid level name.
        """
        lvl = v.upper()
        if getLevelName(lvl) == "Level %s" % lvl:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return lvl

    @field_validator("COOKIE_SAMESITE", mode="before")
    def validate_cookie_samesite(cls, v: str) -> str:
        """Validate the cookie SameSite policy."""
        if v.lower() not in ["lax", "strict", "none"]:
            raise ValueError(f"COOKIE_SAMESITE must be 'lax', 'strict' or 'none', got: {v}")
        return v.lower()


# Create settings instance
settings = Settings()
