"""
Padding analysis for single ABI words.

Numbers and addresses are right-aligned in a word (zeros on the left) while
``bytesN`` and string data are left-aligned (zeros on the right). Which side
carries the longer run of zero bytes is the only hint we have about what a
word encodes.
"""
import enum

from abi_return_guesser.words import bytes_of


class Padding(enum.Enum):
    NONE = 'None'
    LEFT = 'Left'
    RIGHT = 'Right'


# count the number of leading zeros
def count_leading_zeros(arr: bytes) -> int:
    return len(arr) - len(arr.lstrip(b'\x00'))


# count the number of trailing zeros
def count_trailing_zeros(arr: bytes) -> int:
    return len(arr) - len(arr.rstrip(b'\x00'))


def classify_padding(data: bytes) -> Padding:
    size = len(data)
    null_byte_indices = [i for i, b in enumerate(data) if b == 0]

    # no null bytes, or neither end is a null byte
    if not null_byte_indices or (null_byte_indices[0] != 0 and null_byte_indices[-1] != size - 1):
        return Padding.NONE

    starts_with_null = null_byte_indices[0] == 0
    ends_with_null = null_byte_indices[-1] == size - 1

    if starts_with_null and not ends_with_null:
        return Padding.LEFT

    if ends_with_null and not starts_with_null:
        return Padding.RIGHT

    # both ends are null, the longer run wins
    if not any(data):
        return Padding.NONE

    left_hand_padding = count_leading_zeros(data)
    right_hand_padding = count_trailing_zeros(data)

    if left_hand_padding > right_hand_padding:
        return Padding.LEFT
    if left_hand_padding < right_hand_padding:
        return Padding.RIGHT
    return Padding.NONE


# the number of padding bytes on the padded side of the word.
# this is a maximum: a small number looks exactly like a narrow left-padded uint
def padding_size(word: str) -> int:
    data = bytes_of(word)
    padding = classify_padding(data)

    if padding is Padding.LEFT:
        return count_leading_zeros(data)
    if padding is Padding.RIGHT:
        return count_trailing_zeros(data)
    return 0
