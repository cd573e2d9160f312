import logging

from aiogram import F, Router
from aiogram import types
from aiogram.exceptions import TelegramBadRequest

from chains import ethereum
from clients.evm.dto import PairQuery
from keyboards.pair_info import pair_info_kb
from services.pair_lookup import LookupResult, PairLookupService
from utils.messages import error_message, render_snapshot

router = Router()

module_logger = logging.getLogger(__name__)


async def send_result(message: types.Message, result: LookupResult) -> None:
    if not result.success:
        await message.answer(f"❌ {error_message(result.error)}")
        return

    snapshot = result.value
    await message.answer(
        render_snapshot(snapshot, ethereum.explorer),
        reply_markup=pair_info_kb(snapshot, ethereum.explorer).as_markup(),
        disable_web_page_preview=True,
    )


@router.message(F.text, ~F.text.startswith("/"))
async def lookup_pair(message: types.Message, pair_lookup: PairLookupService) -> None:
    query = PairQuery(pair_address=message.text.strip())
    module_logger.info(f"User {message.from_user.id} requested pair {query.pair_address}")

    result = await pair_lookup.lookup(query)
    await send_result(message, result)


@router.callback_query(F.data.startswith("refresh_pair:"))
async def refresh_pair(callback: types.CallbackQuery, pair_lookup: PairLookupService) -> None:
    address = callback.data.split(":")[-1]

    result = await pair_lookup.lookup(PairQuery(pair_address=address))

    if not result.success:
        await callback.answer(f"❗️ {error_message(result.error)}", show_alert=True)
        return

    snapshot = result.value
    try:
        await callback.message.edit_text(
            render_snapshot(snapshot, ethereum.explorer),
            reply_markup=pair_info_kb(snapshot, ethereum.explorer).as_markup(),
            disable_web_page_preview=True,
        )
    except TelegramBadRequest as e:
        if "message is not modified" not in e.message:
            raise
        module_logger.debug(f"Refresh of {address} left the message unchanged")

    await callback.answer("Updated")
