import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from chains import ethereum
from clients.evm.dex.uniswap import UniswapV2PairClient
from config import settings
from handlers import setup_routers
from services.pair_lookup import PairLookupService

module_logger = logging.getLogger(__name__)


async def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not settings.BOT_TOKEN:
        raise ValueError("BOT_TOKEN not set")

    bot = Bot(
        token=settings.BOT_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = Dispatcher()
    dp.include_router(setup_routers())

    async with UniswapV2PairClient(ethereum) as client:
        dp["pair_lookup"] = PairLookupService(client)

        module_logger.info(
            f"Starting bot on {ethereum.display_name} via {ethereum.rpc_url} "
            f"(multicall {ethereum.multicall_address})"
        )
        await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
