"""Configuration settings for the dashboard."""
import os
from pathlib import Path
from typing import Optional

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# API Configuration
VS_CURRENCY = "usd"

# Single attempt per upstream call; the transport timeout is the only guard
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "20"))

# Logging Configuration
LOG_DIR = PROJECT_ROOT / "logs"
LOG_DIR.mkdir(exist_ok=True)

# Export Configuration (static dashboard)
DOCS_DIR = PROJECT_ROOT / "docs"

# CoinGecko API Configuration
COINGECKO_API_KEY: Optional[str] = os.getenv("COINGECKO_API_KEY", None)
COINGECKO_API_BASE = "https://pro-api.coingecko.com/api/v3" if COINGECKO_API_KEY else "https://api.coingecko.com/api/v3"

# Alert webhook delivery
WEBHOOK_TIMEOUT = float(os.getenv("WEBHOOK_TIMEOUT", "10"))

# JSON query surface
API_CACHE_CONTROL = "public, max-age=60, s-maxage=60, stale-while-revalidate=240"

# Dash App Configuration
AUTO_REFRESH_SECONDS = int(os.getenv("AUTO_REFRESH_SECONDS", "300"))
DASH_PORT = int(os.getenv("PORT", "8052"))  # Use PORT env var for cloud deployment
DASH_DEBUG = os.getenv("DASH_DEBUG", "False").lower() == "true"  # Disable debug in production
