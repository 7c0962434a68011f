"""
Address normalization — returns the EIP-55 checksummed form.
"""

import re

from web3 import Web3

from siwe_message.errors import InvalidAddressError

_HEX_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")


def normalize_address(raw: str) -> str:
    if not isinstance(raw, str) or not _HEX_ADDRESS.fullmatch(raw):
        raise InvalidAddressError(raw)
    try:
        return Web3.to_checksum_address(raw)
    except ValueError as e:
        raise InvalidAddressError(raw) from e
