import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv(".env.local")


@dataclass
class Config:
    """Configuration class for the customer app core"""

    # Database
    supabase_url: str
    supabase_key: str

    # LiveKit (state publishing to remote presentation clients)
    livekit_url: str
    livekit_api_key: str
    livekit_api_secret: str

    # Locale
    timezone: str = "Asia/Ho_Chi_Minh"

    # Pull-to-refresh
    screen_density: float = 1.0
    refresh_trigger_dp: float = 80.0

    # Business Logic
    default_booking_minutes: int = 60

    @classmethod
    def from_env(cls):
        """Create configuration from environment variables"""
        return cls(
            supabase_url=os.getenv("SUPABASE_URL", ""),
            supabase_key=os.getenv("SUPABASE_KEY", ""),
            livekit_url=os.getenv("LIVEKIT_URL", ""),
            livekit_api_key=os.getenv("LIVEKIT_API_KEY", ""),
            livekit_api_secret=os.getenv("LIVEKIT_API_SECRET", ""),
            timezone=os.getenv("APP_TIMEZONE", "Asia/Ho_Chi_Minh"),
            screen_density=float(os.getenv("SCREEN_DENSITY", "1.0")),
            refresh_trigger_dp=float(os.getenv("REFRESH_TRIGGER_DP", "80")),
        )


# Global config instance
config = Config.from_env()
