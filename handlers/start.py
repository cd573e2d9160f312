import logging

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram import types

router = Router()
module_logger = logging.getLogger(__name__)

HELP_TEXT = (
    "🦄 <b>Uniswap V2 Pair Viewer</b>\n\n"
    "Send a Uniswap V2 pair contract address, for example\n"
    "<code>0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc</code>\n\n"
    "I will fetch both tokens, their reserves and the LP supply from Ethereum mainnet."
)


@router.message(CommandStart())
async def start(msg: types.Message) -> None:
    module_logger.info(f"User {msg.from_user.id} started the bot")
    await msg.answer(HELP_TEXT)


@router.message(Command("help"))
async def help_command(msg: types.Message) -> None:
    await msg.answer(HELP_TEXT)
