"""Constants and default values for the dashboard."""
from typing import Dict, List, Tuple

from datadash.models import WatchCoin

# Default watchlist: (coin_id, symbol, name, chain)
WATCHLIST: Tuple[WatchCoin, ...] = (
    WatchCoin("dogecoin", "DOGE", "Dogecoin", "Dogecoin"),
    WatchCoin("shiba-inu", "SHIB", "Shiba Inu", "Ethereum"),
    WatchCoin("pepe", "PEPE", "Pepe", "Ethereum"),
    WatchCoin("bonk", "BONK", "Bonk", "Solana"),
    WatchCoin("dogwifcoin", "WIF", "dogwifhat", "Solana"),
    WatchCoin("floki", "FLOKI", "Floki", "Ethereum"),
)

# Intervals
INTERVALS: Tuple[str, ...] = ("1h", "24h", "7d", "30d")
DEFAULT_INTERVAL = "7d"

# market_chart lookback window (days) per interval
INTERVAL_DAYS: Dict[str, int] = {"1h": 1, "24h": 1, "7d": 7, "30d": 30}

# Hourly points kept from the end of the history before resampling
INTERVAL_TAIL: Dict[str, int] = {"1h": 12, "24h": 24}

PERIOD_LABELS: Dict[str, List[str]] = {
    "1h": ["-60m", "-50m", "-40m", "-30m", "-20m", "-10m", "Now"],
    "24h": ["-24h", "-20h", "-16h", "-12h", "-8h", "-4h", "Now"],
    "7d": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
    "30d": ["-30d", "-25d", "-20d", "-15d", "-10d", "-5d", "Now"],
}

# Sizing
SERIES_POINTS = 7
MIN_TOKENS = 3

# Token synthesis tuning constants
SENTIMENT_BASE = 50
SENTIMENT_MOVE_WEIGHT = 2.2
SENTIMENT_CHANGE_WEIGHT = 1.2
SENTIMENT_VELOCITY_WEIGHT = 120
SENTIMENT_BOUNDS = (30, 96)

WHALES_BASE = 24
WHALES_VELOCITY_WEIGHT = 210
WHALES_CHANGE_WEIGHT = 2.2
WHALES_BOUNDS = (10, 96)

HOLDERS_EXPONENT = 0.36
HOLDERS_PRICE_FLOOR = 0.00000001
HOLDERS_BOUNDS = (15000, 450000)

SOCIALS_OFFSET = 14
SOCIALS_STEP = 3
SOCIALS_MOVE_WEIGHT = 1.4
SOCIALS_BOUNDS = (18, 99)

MOMENTUM_BOUNDS = (10, 95)
VELOCITY_SCORE_WEIGHT = 210
VELOCITY_SCORE_BOUNDS = (12, 95)
VELOCITY_SIGNAL_BOUNDS = (10, 95)
HOLDER_STRENGTH_WEIGHT = 15
HOLDER_STRENGTH_BOUNDS = (20, 92)
WHALE_PENALTY_BOUNDS = (10, 95)

# Composite signal score weights: momentum, velocity, holder strength, whale penalty
SIGNAL_SCORE_WEIGHTS = (0.35, 0.3, 0.25, 0.2)

# Weekly comparative series: (divisor, (lo, hi), default when slot empty)
WEEKLY_SERIES = {
    "alpha": (2.1, (8, 48), 30),
    "beta": (2.3, (8, 44), 28),
    "gamma": (2.5, (8, 40), 26),
}

# Heat map
HEAT_MAP_ROWS: Tuple[str, ...] = ("US", "EU", "Asia", "LATAM")
HEAT_MAP_MULTIPLIERS: Tuple[float, ...] = (1.08, 0.98, 1.04, 0.9)
HEAT_BASE_VELOCITY_WEIGHT = 0.2
HEAT_BASE_BOUNDS = (35, 98)
HEAT_DECAY_PER_COLUMN = 2
HEAT_CELL_BOUNDS = (32, 99)

# Wallet flow buckets
WALLET_SMART = "Smart Wallets"
WALLET_NEW = "New Wallets"
WALLET_WAKEUPS = "Dormant Wakeups"
WALLET_EXITS = "Exits"

# Wallet flow coefficients: volume divisor, sentiment weight, bounds
WALLET_SMART_VOLUME_DIVISOR = 45_000_000
WALLET_SMART_SENTIMENT_WEIGHT = 1.4
WALLET_SMART_BOUNDS = (90, 900)
WALLET_NEW_VOLUME_DIVISOR = 34_000_000
WALLET_NEW_SENTIMENT_WEIGHT = 1.9
WALLET_NEW_BOUNDS = (130, 1300)
WALLET_WAKEUPS_VOLUME_DIVISOR = 80_000_000
WALLET_WAKEUPS_BOUNDS = (60, 600)
# exits grow with the sentiment shortfall below 100
WALLET_EXITS_VOLUME_DIVISOR = 100_000_000
WALLET_EXITS_SHORTFALL_WEIGHT = 2.4
WALLET_EXITS_BOUNDS = (70, 650)

# Strategy lab
BATTLE_INDEX_BOUNDS = (45, 95)
RISK_HIGH_WHALES = 60
RISK_MEDIUM_WHALES = 45

# Alert rules
ALERT_METRICS = ("sentiment", "move", "volume")
ALERT_OPERATORS = (">", "<")
DEFAULT_ALERT_TEXT = "Data Dash alert triggered"
