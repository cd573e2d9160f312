import asyncio
import logging
from typing import Any, Awaitable

import aiohttp
from eth_abi.exceptions import DecodingError as AbiDecodingError
from eth_utils.address import to_checksum_address
from web3 import AsyncWeb3
from web3.exceptions import ContractLogicError, Web3Exception
from web3.providers import AsyncHTTPProvider
from web3.types import BlockIdentifier

from chains.dto import ChainConfig
from clients.evm.abi import AbiFunction, decode_aggregate, encode_aggregate
from clients.evm.errors import ContractCallFailed, DecodingError, NetworkError
from config import settings

module_logger = logging.getLogger(__name__)


class BaseWeb3Client:
    """Read-only JSON-RPC handle shared by the validator and the aggregator.

    Pass ``w3`` to reuse an existing ``AsyncWeb3`` (or a test double);
    otherwise one is created on ``__aenter__`` and closed on ``__aexit__``.
    """

    def __init__(
        self,
        chain_config: ChainConfig,
        w3: AsyncWeb3 | None = None,
        timeout: float | None = None,
    ):
        self.chain_config = chain_config
        self.timeout = settings.RPC_TIMEOUT_SECONDS if timeout is None else timeout
        self._w3 = w3
        self._owns_w3 = w3 is None

    async def __aenter__(self):
        if self._w3 is None:
            self._w3 = AsyncWeb3(AsyncHTTPProvider(self.chain_config.rpc_url))
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._w3 is not None and self._owns_w3:
            await self._w3.provider.disconnect()

            self._w3 = None

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    @staticmethod
    def _create_call(target: str, function: AbiFunction) -> tuple[str, bytes]:
        return (to_checksum_address(target), function.encode())

    async def _request(self, awaitable: Awaitable[Any], operation: str) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except ContractLogicError as e:
            module_logger.warning(f"{operation} reverted: {e}")
            raise ContractCallFailed(f"{operation} reverted: {e}") from e
        except asyncio.TimeoutError as e:
            module_logger.warning(f"{operation} timed out after {self.timeout}s")
            raise NetworkError(f"{operation} timed out after {self.timeout}s") from e
        except (aiohttp.ClientError, OSError, Web3Exception) as e:
            module_logger.warning(f"{operation} failed: {e!r}")
            raise NetworkError(f"{operation} failed: {e}") from e

    async def get_code(self, address: str) -> bytes:
        code = await self._request(
            self.w3.eth.get_code(to_checksum_address(address)), "eth_getCode"
        )
        return bytes(code)

    def _decode_call(
        self, index: int, target: str, function: AbiFunction, data: bytes
    ) -> Any:
        if not data:
            raise ContractCallFailed(
                f"{function.signature} on {target} returned no data (call {index})"
            )

        try:
            return function.decode(data)
        except (AbiDecodingError, UnicodeDecodeError) as e:
            module_logger.error(
                f"Decoding failed kind={DecodingError.kind} call_index={index} "
                f"signature={function.signature} target={target} raw=0x{data.hex()}"
            )
            raise DecodingError(
                f"Cannot decode {function.signature} result of call {index}: {e}",
                call_index=index,
                signature=function.signature,
                raw=data,
            ) from e

    async def multicall(
        self,
        calls: list[tuple[str, AbiFunction]],
        block_identifier: BlockIdentifier = "latest",
    ) -> tuple[int, list[Any]]:
        """Execute ``calls`` through the aggregator in one ``eth_call``.

        Returns the block number the aggregator ran at and the decoded
        result of each call, in request order. A revert of any call fails
        the whole batch.
        """
        payload = encode_aggregate(
            [self._create_call(target, function) for target, function in calls]
        )
        tx = {
            "to": to_checksum_address(self.chain_config.multicall_address),
            "data": payload,
        }

        raw = bytes(
            await self._request(
                self.w3.eth.call(tx, block_identifier), "multicall aggregate"
            )
        )

        try:
            block_number, return_data = decode_aggregate(raw)
        except AbiDecodingError as e:
            module_logger.error(
                f"Decoding failed kind={DecodingError.kind} call_index=None "
                f"signature=aggregate raw=0x{raw.hex()}"
            )
            raise DecodingError(
                f"Malformed multicall response: {e}", signature="aggregate", raw=raw
            ) from e

        if len(return_data) != len(calls):
            module_logger.error(
                f"Decoding failed kind={DecodingError.kind} call_index=None "
                f"signature=aggregate expected={len(calls)} got={len(return_data)} "
                f"raw=0x{raw.hex()}"
            )
            raise DecodingError(
                f"Multicall returned {len(return_data)} results for {len(calls)} calls",
                signature="aggregate",
                raw=raw,
            )

        results = [
            self._decode_call(index, target, function, data)
            for index, ((target, function), data) in enumerate(zip(calls, return_data))
        ]

        module_logger.info(
            f"Multicall of {len(calls)} calls executed at block {block_number}"
        )
        return block_number, results
