from typing import List

import pytest
from eth_abi import encode

from abi_return_guesser.words import split_words

ADDRESS = '0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045'
OTHER_ADDRESS = '0x677c09067dB0990904D01C561c32cf800a67B786'


def word(value: int) -> str:
    return format(value, '064x')


def encoded_words(types: List[str], values: List) -> List[str]:
    return split_words(encode(types, values))


@pytest.fixture
def hello_words() -> List[str]:
    return encoded_words(['string'], ['hello'])


@pytest.fixture
def uint_array_words() -> List[str]:
    return encoded_words(['uint256[]'], [[1, 2, 3]])


@pytest.fixture
def string_array_words() -> List[str]:
    return encoded_words(['string[]'], [['hello', 'world']])


@pytest.fixture
def address_array_words() -> List[str]:
    return encoded_words(['address[]'], [[ADDRESS, OTHER_ADDRESS]])
