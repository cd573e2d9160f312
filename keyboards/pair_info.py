from aiogram import types
from aiogram.utils.keyboard import InlineKeyboardBuilder

from clients.evm.dto import PairSnapshot


def pair_info_kb(snapshot: PairSnapshot, explorer: str) -> InlineKeyboardBuilder:
    builder = InlineKeyboardBuilder()

    builder.row(
        types.InlineKeyboardButton(
            text="🔄 Refresh", callback_data=f"refresh_pair:{snapshot.pair_address}"
        ),
    )
    builder.row(
        types.InlineKeyboardButton(
            text="🔍 Pair", url=f"{explorer}address/{snapshot.pair_address}"
        ),
        types.InlineKeyboardButton(
            text=f"🪙 {snapshot.token0.symbol}", url=f"{explorer}token/{snapshot.token0.address}"
        ),
        types.InlineKeyboardButton(
            text=f"🪙 {snapshot.token1.symbol}", url=f"{explorer}token/{snapshot.token1.address}"
        ),
    )

    return builder
