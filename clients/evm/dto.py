from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class PairQuery:
    pair_address: str


@dataclass(frozen=True)
class TokenInfo:
    address: str
    name: str
    symbol: str
    decimals: int
    # raw reserve scaled by 10 ** decimals, exact
    reserve: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "reserve": self.reserve,
        }


@dataclass(frozen=True)
class ReservesSnapshot:
    reserve0: int
    reserve1: int
    block_timestamp_last: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "reserve0": str(self.reserve0),
            "reserve1": str(self.reserve1),
            "blockTimestampLast": self.block_timestamp_last,
        }


@dataclass(frozen=True)
class PairSnapshot:
    pair_address: str
    token0: TokenInfo
    token1: TokenInfo
    reserves: ReservesSnapshot
    total_supply: str
    block_number: int
    last_updated: datetime

    @property
    def price0(self) -> Decimal | None:
        """Amount of token1 per one token0."""
        reserve0 = Decimal(self.token0.reserve)
        if reserve0 == 0:
            return None
        return Decimal(self.token1.reserve) / reserve0

    @property
    def price1(self) -> Decimal | None:
        """Amount of token0 per one token1."""
        reserve1 = Decimal(self.token1.reserve)
        if reserve1 == 0:
            return None
        return Decimal(self.token0.reserve) / reserve1

    def to_dict(self) -> dict[str, Any]:
        return {
            "pairAddress": self.pair_address,
            "token0": self.token0.to_dict(),
            "token1": self.token1.to_dict(),
            "reserves": self.reserves.to_dict(),
            "totalSupply": self.total_supply,
            "blockNumber": self.block_number,
            "lastUpdated": self.last_updated.isoformat(),
        }
