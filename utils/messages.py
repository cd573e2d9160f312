from datetime import datetime, timezone

from aiogram import html

from clients.evm.dto import PairSnapshot
from clients.evm.errors import (
    ContractCallFailed,
    DecodingError,
    InvalidAddressFormat,
    NetworkError,
    NotAContract,
    PairLookupError,
)
from utils.utils import format_amount


ERROR_MESSAGES = {
    InvalidAddressFormat.kind: (
        "Invalid Ethereum address. Please enter a valid Ethereum contract address."
    ),
    NotAContract.kind: (
        "The address provided is not a contract. "
        "Please enter a valid Uniswap V2 pair address."
    ),
    ContractCallFailed.kind: (
        "Contract call failed. This may not be a valid Uniswap V2 pair address."
    ),
    DecodingError.kind: "An error occurred while processing your request.",
    NetworkError.kind: (
        "Network connection issue. Please check your internet connection "
        "or try a different RPC provider."
    ),
}

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred."


def error_message(error: PairLookupError | None) -> str:
    if error is None:
        return UNKNOWN_ERROR_MESSAGE
    return ERROR_MESSAGES.get(error.kind, UNKNOWN_ERROR_MESSAGE)


def _price_line(base: str, quote: str, price) -> str:
    if price is None:
        return f"💱 1 {base} = n/a {quote}"
    return f"💱 1 {base} = <b>{format_amount(price)}</b> {quote}"


def render_snapshot(snapshot: PairSnapshot, explorer: str) -> str:
    token0, token1 = snapshot.token0, snapshot.token1
    symbol0, symbol1 = html.quote(token0.symbol), html.quote(token1.symbol)

    reserves_updated = datetime.fromtimestamp(
        snapshot.reserves.block_timestamp_last, tz=timezone.utc
    ).strftime("%Y-%m-%d %H:%M:%S")
    refresh_time = snapshot.last_updated.astimezone(timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S"
    )

    return (
        f"🦄 <b><a href='{explorer}address/{snapshot.pair_address}'>"
        f"{symbol0}/{symbol1}</a></b> | Uniswap V2 Pair\n\n"
        f"📝 <code>{snapshot.pair_address}</code>\n\n"
        f"🪙 <b>{html.quote(token0.name)}</b> (<code>{symbol0}</code>)\n"
        f"<code>{token0.address}</code>\n"
        f"Reserve: <b>{format_amount(token0.reserve)}</b> | Decimals: {token0.decimals}\n\n"
        f"🪙 <b>{html.quote(token1.name)}</b> (<code>{symbol1}</code>)\n"
        f"<code>{token1.address}</code>\n"
        f"Reserve: <b>{format_amount(token1.reserve)}</b> | Decimals: {token1.decimals}\n\n"
        + _price_line(symbol0, symbol1, snapshot.price0) + "\n"
        + _price_line(symbol1, symbol0, snapshot.price1) + "\n"
        f"🧮 LP supply: <b>{format_amount(snapshot.total_supply)}</b>\n\n"
        "<blockquote expandable>💧 <b>Raw reserves • Click to Expand</b>\n"
        f"<code>reserve0 | {snapshot.reserves.reserve0}\n"
        f"reserve1 | {snapshot.reserves.reserve1}\n"
        f"block    | {snapshot.block_number}</code>\n"
        f"Last sync: {reserves_updated} (UTC+0)</blockquote>\n\n"
        f"🕓 Refresh | <b>{refresh_time} (UTC+0)</b>"
    )
