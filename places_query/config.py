# places_query/config.py
from dataclasses import dataclass
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    api_key: str
    timeout_sec: int = 20

    # Google Maps web service host; endpoint paths are appended per request
    base_url: str = "https://maps.googleapis.com"


def load_settings() -> Settings:
    # Local .env is optional; real environment variables take precedence
    load_dotenv()
    key = os.getenv("GOOGLE_MAPS_API_KEY", "").strip()

    if not key:
        raise ValueError(
            "Missing GOOGLE_MAPS_API_KEY.\n"
            "Add it to a .env file locally or export it in your shell.\n"
            "Example (local): export GOOGLE_MAPS_API_KEY='YOUR_KEY'"
        )

    timeout = os.getenv("PLACES_TIMEOUT_SEC", "").strip()
    if timeout:
        return Settings(api_key=key, timeout_sec=int(timeout))
    return Settings(api_key=key)
