import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from web3.types import BlockIdentifier

from clients.evm.dex.uniswap import UniswapV2PairClient
from clients.evm.dto import PairQuery, PairSnapshot
from clients.evm.errors import PairLookupError
from clients.evm.validator import validate

module_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LookupResult(Generic[T]):
    success: bool
    value: T | None = None
    error: PairLookupError | None = None


class PairLookupService:
    """Entry points for the presentation layer.

    Both return a ``LookupResult`` instead of raising, so handlers only
    branch on ``success``.
    """

    def __init__(self, client: UniswapV2PairClient):
        self.client = client

    async def validate(self, value: str) -> LookupResult[str]:
        try:
            address = await validate(self.client, value)
        except PairLookupError as e:
            module_logger.info(f"Address {value!r} rejected: {e.kind}")
            return LookupResult(success=False, error=e)

        return LookupResult(success=True, value=address)

    async def aggregate(
        self,
        address: str,
        block_identifier: BlockIdentifier | None = None,
    ) -> LookupResult[PairSnapshot]:
        try:
            snapshot = await self.client.aggregate(address, block_identifier)
        except PairLookupError as e:
            module_logger.warning(f"Aggregation failed for {address}: {e.kind}: {e}")
            return LookupResult(success=False, error=e)

        return LookupResult(success=True, value=snapshot)

    async def lookup(self, query: PairQuery) -> LookupResult[PairSnapshot]:
        validation = await self.validate(query.pair_address)

        if not validation.success:
            return LookupResult(success=False, error=validation.error)

        return await self.aggregate(validation.value)
