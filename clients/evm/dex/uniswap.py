import logging
from datetime import datetime, timezone

from eth_utils.address import to_checksum_address
from web3 import AsyncWeb3
from web3.types import BlockIdentifier

from chains.dto import ChainConfig
from clients.evm.abi import PAIR_CALLS, TOKEN_CALLS, AbiFunction
from clients.evm.base import BaseWeb3Client
from clients.evm.dto import PairSnapshot, ReservesSnapshot, TokenInfo
from clients.evm.units import LP_TOKEN_DECIMALS, format_units
from config import settings

module_logger = logging.getLogger(__name__)


class UniswapV2PairClient(BaseWeb3Client):
    """Resolves a Uniswap V2 pair into a ``PairSnapshot`` with two multicalls.

    Round one reads ``token0``, ``token1``, ``getReserves`` and
    ``totalSupply`` from the pair. Round two needs the token addresses
    decoded from round one and reads ``name``, ``symbol`` and ``decimals``
    from both tokens.

    Unless a block is requested explicitly, round two is pinned to the
    block round one executed at (``PIN_BLOCK``), so both batches observe
    the same chain state.
    """

    def __init__(
        self,
        chain_config: ChainConfig,
        w3: AsyncWeb3 | None = None,
        timeout: float | None = None,
        pin_block: bool | None = None,
    ):
        super().__init__(chain_config, w3, timeout)
        self.pin_block = settings.PIN_BLOCK if pin_block is None else pin_block

    @staticmethod
    def _pair_calls(pair: str) -> list[tuple[str, AbiFunction]]:
        return [(pair, function) for function in PAIR_CALLS]

    @staticmethod
    def _token_calls(token0: str, token1: str) -> list[tuple[str, AbiFunction]]:
        return [
            (token, function)
            for token in (token0, token1)
            for function in TOKEN_CALLS
        ]

    def _token_block(
        self, pair_block: int, block_identifier: BlockIdentifier | None
    ) -> BlockIdentifier:
        if block_identifier is not None:
            return block_identifier
        if self.pin_block:
            return pair_block
        return "latest"

    async def aggregate(
        self,
        pair_address: str,
        block_identifier: BlockIdentifier | None = None,
    ) -> PairSnapshot:
        pair = to_checksum_address(pair_address)

        pair_block, pair_results = await self.multicall(
            self._pair_calls(pair),
            "latest" if block_identifier is None else block_identifier,
        )
        token0, token1, reserves, total_supply = pair_results
        reserve0, reserve1, block_timestamp_last = reserves

        module_logger.info(
            f"Pair {pair} resolved tokens {token0}/{token1} at block {pair_block}"
        )

        _, token_results = await self.multicall(
            self._token_calls(token0, token1),
            self._token_block(pair_block, block_identifier),
        )
        name0, symbol0, decimals0, name1, symbol1, decimals1 = token_results

        return PairSnapshot(
            pair_address=pair,
            token0=TokenInfo(
                address=token0,
                name=name0,
                symbol=symbol0,
                decimals=decimals0,
                reserve=format_units(reserve0, decimals0),
            ),
            token1=TokenInfo(
                address=token1,
                name=name1,
                symbol=symbol1,
                decimals=decimals1,
                reserve=format_units(reserve1, decimals1),
            ),
            reserves=ReservesSnapshot(
                reserve0=reserve0,
                reserve1=reserve1,
                block_timestamp_last=block_timestamp_last,
            ),
            total_supply=format_units(total_supply, LP_TOKEN_DECIMALS),
            block_number=pair_block,
            last_updated=datetime.now(timezone.utc),
        )
