"""
Client Configuration
====================
Connection and credential settings for the Upbit client.
"""

import os
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.upbit.com"


@dataclass
class UpbitConfig:
    """Configuration for an Upbit client, defaulting from the environment."""
    access_key: str = field(default_factory=lambda: os.environ.get("UPBIT_ACCESS_KEY", ""))
    secret_key: str = field(
        default_factory=lambda: os.environ.get("UPBIT_SECRET_KEY", ""),
        repr=False,
    )
    base_url: str = field(default_factory=lambda: os.environ.get("UPBIT_BASE_URL", DEFAULT_BASE_URL))
    timeout: float = field(default_factory=lambda: float(os.environ.get("UPBIT_TIMEOUT", "10.0")))
