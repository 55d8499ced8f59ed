"""
Configuration and environment handling for the seatswap engine.

Nothing in here changes classification, scoring or label output; these are
operational knobs only.
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class MatchingConfig(BaseModel):
    """Compatibility matcher configuration."""
    large_pool_warning: int = Field(
        default_factory=lambda: int(os.getenv("SEATSWAP_LARGE_POOL_WARNING", "5000")),
        description="Pool size above which the matcher logs a warning",
    )


class DisplayConfig(BaseModel):
    """Label and pill rendering configuration."""
    max_visible_wants: int = Field(
        default_factory=lambda: int(os.getenv("SEATSWAP_MAX_VISIBLE_WANTS", "2")),
        ge=0,
        description="Wants pills shown before collapsing into an overflow count",
    )


class Config(BaseModel):
    """Main configuration."""
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
