"""Configuration settings for the FRED search client."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


FRED_BASE_URL = "https://api.stlouisfed.org/fred"


@dataclass
class Settings:
    """Client settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    base_url: str = field(
        default_factory=lambda: os.getenv("FRED_BASE_URL", FRED_BASE_URL)
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("FRED_TIMEOUT", "30.0"))
    )

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ValueError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
