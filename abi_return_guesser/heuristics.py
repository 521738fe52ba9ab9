import logging
from typing import List, NamedTuple

from abi_return_guesser.padding import Padding, classify_padding, padding_size
from abi_return_guesser.words import InvalidHexEncoding, bytes_of

logger = logging.getLogger(__name__)

NUMERIC_PREFIXES = ('uint', 'address', 'bool')
BYTE_STRING_PREFIXES = ('bytes', 'string')


class TypeCharacteristics(NamedTuple):
    # candidate type names, most likely first
    types: List[str]
    # number of significant bytes
    type_size: int


# given a byte size, return the types that could hold a value of that size.
# domain specific types come first, the generic integer/byte fallbacks last
def byte_size_to_candidates(byte_size: int) -> TypeCharacteristics:
    types = []

    if byte_size == 1:
        types.append('bool')
    elif 15 <= byte_size <= 20:
        types.append('address')

    types.append(f"uint{byte_size * 8}")
    types.append(f"bytes{byte_size}")
    types.append(f"int{byte_size * 8}")

    return TypeCharacteristics(types, byte_size)


def candidates_for_word(word: str) -> TypeCharacteristics:
    byte_size = len(word) // 2 - padding_size(word)
    return byte_size_to_candidates(byte_size)


# - left padding: probably uintN, address or bool
# - right padding: probably bytesN
# - no padding: probably bytes32
def refine_by_padding(word: str) -> TypeCharacteristics:
    try:
        characteristics = candidates_for_word(word)
        padding = classify_padding(bytes_of(word))
    except InvalidHexEncoding as e:
        logger.debug("cannot analyze word %r: %s", word, e)
        return TypeCharacteristics([], 0)

    prefixes = NUMERIC_PREFIXES if padding is Padding.LEFT else BYTE_STRING_PREFIXES
    types = [t for t in characteristics.types if t.startswith(prefixes)]

    return TypeCharacteristics(types, characteristics.type_size)
