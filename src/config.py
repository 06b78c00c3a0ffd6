"""Configuration module for the Signalist service layer."""

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel
from typing import List

# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
LOGS_DIR = BASE_DIR / "logs"
LOGS_DIR.mkdir(exist_ok=True)


class FinnhubConfig(BaseModel):
    """Finnhub market-data API configuration."""
    api_key: str = os.getenv("FINNHUB_API_KEY", "")
    base_url: str = "https://finnhub.io/api/v1"
    timeout_seconds: float = float(os.getenv("FINNHUB_TIMEOUT", "10"))

    # Cache lifetimes (seconds) per endpoint
    profile_ttl: int = 3600
    search_ttl: int = 1800
    news_ttl: int = 600
    cache_max_entries: int = 1024

    # News aggregation
    news_lookback_days: int = 5
    max_articles: int = 6

    # Search result limits
    popular_limit: int = 10
    search_limit: int = 15


class GeminiConfig(BaseModel):
    """Google Gemini API configuration."""
    api_key: str = os.getenv("GEMINI_API_KEY", "")
    model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")
    temperature: float = 0.7


class EmailConfig(BaseModel):
    """Outgoing email (SendGrid) configuration."""
    sendgrid_api_key: str = os.getenv("SENDGRID_API_KEY", "")
    from_email: str = os.getenv("EMAIL_FROM", "signalist@signalist.app")
    from_name: str = os.getenv("EMAIL_FROM_NAME", "Signalist")
    dashboard_url: str = os.getenv("DASHBOARD_URL", "https://signalist.app")


class Config(BaseModel):
    """Main configuration."""
    finnhub: FinnhubConfig = FinnhubConfig()
    gemini: GeminiConfig = GeminiConfig()
    email: EmailConfig = EmailConfig()

    # Stocks shown when the search box is empty
    popular_symbols: List[str] = [
        # === Mega caps ===
        "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA",
        "META", "NVDA", "NFLX", "ORCL", "CRM",

        # === Semiconductors & software ===
        "AMD", "INTC", "AVGO", "ADBE", "QCOM",
        "TXN", "MU", "NOW", "SNOW", "PLTR",

        # === Growth ===
        "SHOP", "UBER", "ABNB", "COIN", "SQ",
        "PYPL", "ROKU", "SPOT", "ZM", "DDOG",
    ]

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Path = LOGS_DIR / "signalist.log"


# Global config instance
config = Config()


def validate_config() -> bool:
    """Validate that required API keys are set."""
    errors = []

    if not config.finnhub.api_key or config.finnhub.api_key == "your_finnhub_api_key_here":
        errors.append("FINNHUB_API_KEY not set in .env")

    if not config.gemini.api_key or config.gemini.api_key == "your_gemini_api_key_here":
        errors.append("GEMINI_API_KEY not set in .env")

    if not config.email.sendgrid_api_key:
        errors.append("SENDGRID_API_KEY not set in .env")

    if errors:
        print("❌ Configuration errors:")
        for error in errors:
            print(f"   - {error}")
        return False

    return True
