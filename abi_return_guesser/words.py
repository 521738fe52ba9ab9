from typing import List, Union

from eth_typing import HexStr
from eth_utils import is_0x_prefixed, remove_0x_prefix

WORD_SIZE = 32
WORD_HEX_LENGTH = WORD_SIZE * 2


class InvalidHexEncoding(ValueError):
    pass


def strip_hex(data: Union[HexStr, str]) -> str:
    if is_0x_prefixed(data):
        return remove_0x_prefix(HexStr(data))
    return data


def decode_hex(data: Union[HexStr, str, bytes]) -> bytes:
    # bytes (and HexBytes) pass straight through
    if isinstance(data, bytes):
        return bytes(data)

    stripped = strip_hex(data)
    try:
        return bytes.fromhex(stripped)
    except ValueError as e:
        raise InvalidHexEncoding(f"invalid hex string {data!r}: {e}") from e


# split raw return data into 32 byte words
# a trailing chunk shorter than a word is kept as-is
def split_words(return_data: Union[HexStr, str, bytes]) -> List[str]:
    if isinstance(return_data, bytes):
        hex_data = return_data.hex()
    else:
        hex_data = strip_hex(return_data)

    return [hex_data[i:i + WORD_HEX_LENGTH] for i in range(0, len(hex_data), WORD_HEX_LENGTH)]


# convert a word to its raw bytes. the word isn't required to be a full 32 bytes
def bytes_of(word: str) -> bytes:
    if len(word) % 2 != 0:
        raise InvalidHexEncoding(f"hex string {word!r} has odd length")

    try:
        return bytes.fromhex(word)
    except ValueError as e:
        raise InvalidHexEncoding(f"hex string {word!r} contains non-hex characters") from e


# interpret a word as a big-endian unsigned integer
def word_to_int(word: str) -> int:
    return int.from_bytes(bytes_of(word), 'big')
