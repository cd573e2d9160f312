import re

from eth_utils.address import is_checksum_address

from clients.evm.base import BaseWeb3Client
from clients.evm.errors import InvalidAddressFormat, NotAContract

ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")


def is_valid_address(value: str) -> bool:
    if not isinstance(value, str) or ADDRESS_PATTERN.fullmatch(value) is None:
        return False

    hex_part = value[2:]
    if hex_part.islower() or hex_part.isupper() or hex_part.isdigit():
        return True

    # mixed case must carry a valid EIP-55 checksum
    return is_checksum_address(value)


async def validate(client: BaseWeb3Client, value: str) -> str:
    """Return ``value`` unchanged if it is a deployed contract address.

    The syntax check runs before any network access, so malformed input
    never costs a round-trip.
    """
    if not is_valid_address(value):
        raise InvalidAddressFormat(f"{value!r} is not a valid Ethereum address")

    code = await client.get_code(value)

    if not code or code == b"\x00":
        raise NotAContract(f"No contract deployed at {value}")

    return value
