import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _bool(name: str, default: str) -> bool:
    return _env(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    BOT_TOKEN: str
    RPC_URL: str
    MULTICALL_ADDRESS: str
    RPC_TIMEOUT_SECONDS: float
    PIN_BLOCK: bool
    EXPLORER_URL: str
    LOG_LEVEL: str


def get_settings() -> Settings:
    return Settings(
        BOT_TOKEN=_env("BOT_TOKEN", ""),
        RPC_URL=_env("RPC_URL", "https://eth-mainnet.public.blastapi.io"),
        MULTICALL_ADDRESS=_env(
            "MULTICALL_ADDRESS", "0x5BA1e12693Dc8F9c48aAD8770482f4739bEeD696"
        ),
        RPC_TIMEOUT_SECONDS=float(_env("RPC_TIMEOUT_SECONDS", "15")),
        PIN_BLOCK=_bool("PIN_BLOCK", "true"),
        EXPLORER_URL=_env("EXPLORER_URL", "https://etherscan.io/"),
        LOG_LEVEL=_env("LOG_LEVEL", "INFO"),
    )


settings = get_settings()
