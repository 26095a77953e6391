"""Configuration management for the liftplan training engine."""

import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./liftplan.db")

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_USER_ID: str = os.getenv("DEFAULT_USER_ID", "default")

    # Plan generation defaults (used when a template prescription omits a value)
    DEFAULT_SET_COUNT: int = int(os.getenv("DEFAULT_SET_COUNT", "2"))
    DEFAULT_REST_SECONDS: int = int(os.getenv("DEFAULT_REST_SECONDS", "120"))

    # Muscle activity aggregation
    ACTIVITY_WINDOW_DAYS: int = int(os.getenv("ACTIVITY_WINDOW_DAYS", "7"))
    INTENSITY_SATURATION_DAYS: int = int(os.getenv("INTENSITY_SATURATION_DAYS", "3"))

    # Silhouette colours by number of training days in the window
    INTENSITY_COLORS = {
        0: os.getenv("COLOR_UNTRAINED", "#ffffff"),
        1: os.getenv("COLOR_ONE_DAY", "#ff8080"),
        2: os.getenv("COLOR_TWO_DAYS", "#ff4444"),
        3: os.getenv("COLOR_SATURATED", "#990000"),
    }

    # Rest-time buckets offered by the preferences form (minutes -> seconds)
    REST_TIME_BUCKETS = {
        "1-2": int(os.getenv("REST_BUCKET_1_2", "90")),
        "2-3": int(os.getenv("REST_BUCKET_2_3", "150")),
        "3+": int(os.getenv("REST_BUCKET_3_PLUS", "180")),
    }

    # Users at or above this age get the senior exercise variants
    SENIOR_AGE_THRESHOLD: int = int(os.getenv("SENIOR_AGE_THRESHOLD", "50"))

    @classmethod
    def get_intensity_color(cls, frequency: int) -> str:
        """Get the silhouette colour for a weekly training frequency."""
        if frequency <= 0:
            return cls.INTENSITY_COLORS[0]
        return cls.INTENSITY_COLORS[min(frequency, 3)]

    @classmethod
    def parse_rest_time(cls, value) -> Optional[int]:
        """Parse a rest-time preference into seconds.

        Accepts plain seconds (int or digit string) or one of the form's
        minute buckets ("1-2", "2-3", "3+"). Empty values mean "no override".
        """
        if value is None or value == "":
            return None
        if isinstance(value, int):
            return value
        text = str(value).strip().lower().replace(" minutes", "").replace(" min", "")
        if text in cls.REST_TIME_BUCKETS:
            return cls.REST_TIME_BUCKETS[text]
        if text.isdigit():
            return int(text)
        raise ValueError(f"Unrecognised rest time: {value!r}")

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration values."""
        if cls.ACTIVITY_WINDOW_DAYS < 1:
            raise ValueError("ACTIVITY_WINDOW_DAYS must be at least 1")
        if cls.INTENSITY_SATURATION_DAYS < 1:
            raise ValueError("INTENSITY_SATURATION_DAYS must be at least 1")
        if cls.DEFAULT_SET_COUNT < 1:
            raise ValueError("DEFAULT_SET_COUNT must be at least 1")
        if cls.DEFAULT_REST_SECONDS < 0:
            raise ValueError("DEFAULT_REST_SECONDS cannot be negative")
        return True


# Global config instance
config = Config()
