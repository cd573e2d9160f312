"""Explicit call-data encoders and return-data decoders.

Every read the viewer performs has a fixed signature, so instead of
building contract objects from JSON ABIs at runtime each function is
declared once here with its selector and a typed decoder. ``FUNCTIONS``
maps a 4-byte selector to its declaration.
"""
from dataclasses import dataclass
from typing import Any, Callable

from eth_abi.abi import decode as abi_decode, encode as abi_encode
from eth_utils.address import to_checksum_address
from eth_utils.crypto import keccak


def selector_for(signature: str) -> bytes:
    return keccak(text=signature)[:4]


def _decode_address(data: bytes) -> str:
    return to_checksum_address(abi_decode(["address"], data)[0])


def _decode_reserves(data: bytes) -> tuple[int, int, int]:
    reserve0, reserve1, block_timestamp_last = abi_decode(
        ["uint112", "uint112", "uint32"], data
    )
    return int(reserve0), int(reserve1), int(block_timestamp_last)


def _decode_uint256(data: bytes) -> int:
    return int(abi_decode(["uint256"], data)[0])


def _decode_uint8(data: bytes) -> int:
    return int(abi_decode(["uint8"], data)[0])


def _decode_string(data: bytes) -> str:
    return abi_decode(["string"], data)[0]


@dataclass(frozen=True)
class AbiFunction:
    name: str
    signature: str
    output_types: tuple[str, ...]
    decode: Callable[[bytes], Any]

    @property
    def selector(self) -> bytes:
        return selector_for(self.signature)

    def encode(self) -> bytes:
        # all supported reads take no arguments
        return self.selector


TOKEN0 = AbiFunction("token0", "token0()", ("address",), _decode_address)
TOKEN1 = AbiFunction("token1", "token1()", ("address",), _decode_address)
GET_RESERVES = AbiFunction(
    "getReserves",
    "getReserves()",
    ("uint112", "uint112", "uint32"),
    _decode_reserves,
)
TOTAL_SUPPLY = AbiFunction("totalSupply", "totalSupply()", ("uint256",), _decode_uint256)
NAME = AbiFunction("name", "name()", ("string",), _decode_string)
SYMBOL = AbiFunction("symbol", "symbol()", ("string",), _decode_string)
DECIMALS = AbiFunction("decimals", "decimals()", ("uint8",), _decode_uint8)

FUNCTIONS: dict[bytes, AbiFunction] = {
    fn.selector: fn
    for fn in (TOKEN0, TOKEN1, GET_RESERVES, TOTAL_SUPPLY, NAME, SYMBOL, DECIMALS)
}

PAIR_CALLS = (TOKEN0, TOKEN1, GET_RESERVES, TOTAL_SUPPLY)
TOKEN_CALLS = (NAME, SYMBOL, DECIMALS)


AGGREGATE_SIGNATURE = "aggregate((address,bytes)[])"
AGGREGATE_SELECTOR = selector_for(AGGREGATE_SIGNATURE)


def encode_aggregate(calls: list[tuple[str, bytes]]) -> bytes:
    return AGGREGATE_SELECTOR + abi_encode(["(address,bytes)[]"], [calls])


def decode_aggregate(data: bytes) -> tuple[int, list[bytes]]:
    block_number, return_data = abi_decode(["uint256", "bytes[]"], data)
    return int(block_number), list(return_data)
