"""Immutable records passed between the fetch, analytics and presentation layers."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class WatchCoin:
    """Identity of a trackable token."""

    id: str
    symbol: str
    name: str
    chain: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "symbol": self.symbol, "name": self.name, "chain": self.chain}


@dataclass(frozen=True)
class SignalFactors:
    momentum: int
    velocity: int
    holder_strength: int
    whale_penalty: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "momentum": self.momentum,
            "velocity": self.velocity,
            "holderStrength": self.holder_strength,
            "whalePenalty": self.whale_penalty,
        }


@dataclass(frozen=True)
class ArenaToken:
    """
    Per-token analytic record.

    `socials` and `price_change` always hold 7 points. Scores are already
    clamped to their bounds by the synthesizer (or hand-authored in range for
    the fallback dataset).
    """

    id: str
    symbol: str
    name: str
    chain: str
    current_price: float
    market_cap: float
    volume_24h: float
    holders: int
    whales: int
    sentiment: int
    socials: Tuple[int, ...]
    price_change: Tuple[float, ...]
    signal: SignalFactors

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase shape consumed by the dashboard front end."""
        return {
            "id": self.id,
            "symbol": self.symbol,
            "name": self.name,
            "chain": self.chain,
            "currentPrice": self.current_price,
            "marketCap": self.market_cap,
            "volume24h": self.volume_24h,
            "holders": self.holders,
            "whales": self.whales,
            "sentiment": self.sentiment,
            "socials": list(self.socials),
            "priceChange": list(self.price_change),
            "signal": self.signal.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArenaToken":
        signal = data["signal"]
        return cls(
            id=data["id"],
            symbol=data["symbol"],
            name=data["name"],
            chain=data["chain"],
            current_price=data["currentPrice"],
            market_cap=data["marketCap"],
            volume_24h=data["volume24h"],
            holders=data["holders"],
            whales=data["whales"],
            sentiment=data["sentiment"],
            socials=tuple(data["socials"]),
            price_change=tuple(data["priceChange"]),
            signal=SignalFactors(
                momentum=signal["momentum"],
                velocity=signal["velocity"],
                holder_strength=signal["holderStrength"],
                whale_penalty=signal["whalePenalty"],
            ),
        )


@dataclass(frozen=True)
class WeeklyPoint:
    day: str
    alpha: int
    beta: int
    gamma: int

    def to_dict(self) -> Dict[str, Any]:
        return {"day": self.day, "alpha": self.alpha, "beta": self.beta, "gamma": self.gamma}


@dataclass(frozen=True)
class WalletFlow:
    label: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class HeatMap:
    rows: Tuple[str, ...]
    cols: Tuple[str, ...]
    matrix: Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class ArenaDashboardData:
    """Single response payload of the dashboard query surface."""

    interval: str
    tokens: Tuple[ArenaToken, ...]
    weekly_wars: Tuple[WeeklyPoint, ...]
    heat_map: HeatMap
    wallet_flows: Tuple[WalletFlow, ...]
    last_updated: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "interval": self.interval,
            "tokens": [token.to_dict() for token in self.tokens],
            "weeklyWars": [point.to_dict() for point in self.weekly_wars],
            "heatMapRows": list(self.heat_map.rows),
            "heatMapCols": list(self.heat_map.cols),
            "heatMap": [list(row) for row in self.heat_map.matrix],
            "walletFlows": [flow.to_dict() for flow in self.wallet_flows],
            "lastUpdated": self.last_updated,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArenaDashboardData":
        """Rebuild a payload from its JSON shape (e.g. a dcc.Store round trip)."""
        return cls(
            interval=data["interval"],
            tokens=tuple(ArenaToken.from_dict(t) for t in data["tokens"]),
            weekly_wars=tuple(WeeklyPoint(**p) for p in data["weeklyWars"]),
            heat_map=HeatMap(
                rows=tuple(data["heatMapRows"]),
                cols=tuple(data["heatMapCols"]),
                matrix=tuple(tuple(row) for row in data["heatMap"]),
            ),
            wallet_flows=tuple(WalletFlow(**f) for f in data["walletFlows"]),
            last_updated=data["lastUpdated"],
            source=data["source"],
        )


@dataclass(frozen=True)
class FetchResult:
    """Outcome of the live fetch stage: either tokens or a failure reason."""

    tokens: Tuple[ArenaToken, ...] = field(default_factory=tuple)
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, tokens) -> "FetchResult":
        return cls(tokens=tuple(tokens))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(reason=reason)
