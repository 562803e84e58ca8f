"""Configuration loader"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://caniuse.com"
DEFAULT_USER_AGENT = "caniuse-lookup/0.1 (+https://caniuse.com)"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class AppConfig:
    """Runtime configuration for the lookup tool"""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/process/query.php"

    @property
    def feature_data_url(self) -> str:
        return f"{self.base_url}/process/get_feat_data.php"


class ConfigLoader:
    """Loader for application configuration"""

    @staticmethod
    def load_config() -> AppConfig:
        """Load configuration from environment

        Returns:
            AppConfig built from CANIUSE_* variables

        Raises:
            ValueError: If a variable holds a malformed value
        """
        # Load environment variables
        load_dotenv()

        raw_timeout = os.getenv("CANIUSE_TIMEOUT", "10")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"CANIUSE_TIMEOUT must be a number, got {raw_timeout!r}")
        if timeout <= 0:
            raise ValueError("CANIUSE_TIMEOUT must be greater than zero")

        base_url = os.getenv("CANIUSE_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ValueError(f"CANIUSE_BASE_URL is not an http(s) URL: {base_url!r}")

        return AppConfig(
            base_url=base_url,
            timeout=timeout,
            user_agent=os.getenv("CANIUSE_USER_AGENT", DEFAULT_USER_AGENT),
            debug=os.getenv("CANIUSE_DEBUG", "").strip().lower() in _TRUTHY,
        )
