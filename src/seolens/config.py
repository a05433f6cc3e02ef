from dotenv import load_dotenv
from dataclasses import dataclass
import os

from seolens.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_RELAY_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

load_dotenv()  # Loads variables from .env file


def _int_from_env(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default  # Keep default if conversion fails


@dataclass
class Config:
    """Configuration for the page analyzer."""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS
    fetch_strategy: str = "direct"  # 'direct' or 'relay'
    relay_url: str = DEFAULT_RELAY_URL
    html_parser: str = DEFAULT_HTML_PARSER
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            timeout=_int_from_env("TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS),
            fetch_strategy=os.getenv("FETCH_STRATEGY", "direct"),
            relay_url=os.getenv("RELAY_URL", DEFAULT_RELAY_URL),
            html_parser=os.getenv("HTML_PARSER", DEFAULT_HTML_PARSER),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }
