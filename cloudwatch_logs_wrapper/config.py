import os
import tempfile
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError

# Load environment variables from .env file if it exists
load_dotenv()

# Upper bound accepted by GetLogEvents for a single page
MAX_PAGE_LIMIT = 10000


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {value!r}",
            e,
            {'env_var': name, 'value': value}
        ) from e


class CloudWatchLogsConfig(BaseModel):
    """Configuration for CloudWatch Logs connection, caching and previews."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    aws_session_token: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SESSION_TOKEN"),
        description="AWS session token for temporary credentials"
    )

    profile_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_PROFILE"),
        description="Named AWS profile to load credentials from"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # CloudWatch Logs specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("CLOUDWATCH_LOGS_ENDPOINT_URL"),
        description="CloudWatch Logs endpoint URL (for LocalStack development)"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=50,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of botocore retry attempts for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Connect and read timeout in seconds"
    )

    # Retrieval settings
    page_limit: int = Field(
        default=MAX_PAGE_LIMIT,
        description="Maximum events requested per GetLogEvents page"
    )

    reserved_stream_prefix: str = Field(
        default="/",
        description="Prefix a log stream name must not start with"
    )

    max_enumeration_pages: int = Field(
        default=1000,
        description="Maximum pages fetched while listing log groups or streams"
    )

    # Cache settings
    cache_enabled: bool = Field(
        default_factory=lambda: _env_flag("CLOUDWATCH_LOGS_CACHE_ENABLED", "true"),
        description="Persist fully retrieved streams and reuse them on later runs"
    )

    cache_dir: str = Field(
        default_factory=lambda: os.getenv(
            "CLOUDWATCH_LOGS_CACHE_DIR",
            os.path.join(tempfile.gettempdir(), "aws_log_cache")
        ),
        description="Root directory of the on-disk content cache"
    )

    # Preview settings
    preview_fetch_count: int = Field(
        default_factory=lambda: _env_int("CLOUDWATCH_LOGS_PREVIEW_FETCH_COUNT", 50),
        description="Events fetched from the head of each previewed stream"
    )

    preview_fetch_count_ceiling: int = Field(
        default=MAX_PAGE_LIMIT,
        description="Largest accepted preview fetch count"
    )

    preview_stream_count: int = Field(
        default_factory=lambda: _env_int("CLOUDWATCH_LOGS_PREVIEW_STREAM_COUNT", 5),
        description="Number of most recent streams to preview"
    )

    preview_concurrency: int = Field(
        default_factory=lambda: _env_int("CLOUDWATCH_LOGS_PREVIEW_CONCURRENCY", 8),
        description="Worker pool size for concurrent preview fetches"
    )

    preview_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Maximum seconds to wait for a single preview fetch (None waits forever)"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: _env_flag("CLOUDWATCH_LOGS_DEBUG_LOGGING", "false"),
        description="Enable debug logging for CloudWatch Logs operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator(
        'max_pool_connections', 'max_enumeration_pages', 'preview_fetch_count_ceiling',
        'preview_concurrency'
    )
    @classmethod
    def validate_positive(cls, v, info):
        if v < 1:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v

    @field_validator('retries')
    @classmethod
    def validate_retries(cls, v):
        if v < 0:
            raise ValueError(f"retries must not be negative, got {v}")
        return v

    @field_validator('page_limit')
    @classmethod
    def validate_page_limit(cls, v):
        """GetLogEvents accepts between 1 and 10000 events per page."""
        if not 1 <= v <= MAX_PAGE_LIMIT:
            raise ValueError(f"page_limit must be between 1 and {MAX_PAGE_LIMIT}, got {v}")
        return v

    @classmethod
    def from_env(cls) -> 'CloudWatchLogsConfig':
        """Create configuration from environment variables.

        Returns:
            CloudWatchLogsConfig instance

        Raises:
            ConfigurationError: If an environment value is malformed or out of range
        """
        try:
            return cls()
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid CloudWatch Logs configuration: {e}", e) from e

    @classmethod
    def for_local_development(cls) -> 'CloudWatchLogsConfig':
        """Create configuration for a LocalStack CloudWatch Logs endpoint.

        Returns:
            CloudWatchLogsConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="test",
            aws_secret_access_key="test",
            region_name="us-east-1",
            endpoint_url="http://localhost:4566",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
