from typing import List

import pytest

from abi_return_guesser.dynamic import (
    MAX_NESTING_DEPTH,
    DecodedType,
    DynamicTypeProber,
    FailureReason,
    ProbeFailure,
    resolve_element_type,
)
from abi_return_guesser.heuristics import TypeCharacteristics

from .conftest import encoded_words, word


def test_string_is_bytes(hello_words: List[str]) -> None:
    assert len(hello_words) == 3
    assert DynamicTypeProber(hello_words).probe(0) == DecodedType('bytes', frozenset({0, 1, 2}))


def test_long_string_is_bytes() -> None:
    words = encoded_words(['string'], ['a' * 100])

    assert DynamicTypeProber(words).probe(0) == DecodedType('bytes', frozenset(range(6)))


def test_uint_array(uint_array_words: List[str]) -> None:
    result = DynamicTypeProber(uint_array_words).probe(0)

    assert isinstance(result, DecodedType)
    assert result.type.endswith('[]')
    assert result.coverages == frozenset(range(5))


def test_array_element_type_is_widest_element() -> None:
    words = encoded_words(['uint256[]'], [[123, 456, 789]])

    assert DynamicTypeProber(words).probe(0).type == 'uint16[]'


def test_address_array(address_array_words: List[str]) -> None:
    assert DynamicTypeProber(address_array_words).probe(0) == DecodedType('address[]', frozenset(range(4)))


def test_nested_offsets_are_relative_to_array_data(string_array_words: List[str]) -> None:
    assert len(string_array_words) == 8

    result = DynamicTypeProber(string_array_words).probe(0)

    assert result == DecodedType('bytes[]', frozenset(range(8)))


def test_empty_array() -> None:
    words = [word(0x20), word(0)]

    assert DynamicTypeProber(words).probe(0) == DecodedType('[]', frozenset({0, 1}))


@pytest.mark.parametrize(
    "words, reason",
    [
        ([word(0)], FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE),
        ([word(5)], FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE),
        (["zz" * 32], FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE),
        ([word(0x20), "zz" * 32], FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE),
        ([word(0x40)], FailureReason.WORD_OFFSET_OUT_OF_BOUNDS),
        ([word(2**255)], FailureReason.WORD_OFFSET_OUT_OF_BOUNDS),
        ([word(0x20), word(100)], FailureReason.BYTES_CHECK_OUT_OF_BOUNDS),
        ([word(0x20), word(5), word(1)], FailureReason.PADDING_CHECK_FAILED),
    ],
)
def test_probe_failures(words: List[str], reason: FailureReason) -> None:
    result = DynamicTypeProber(words).probe(0)

    assert isinstance(result, ProbeFailure)
    assert result.reason is reason


def test_probe_results_are_cached(hello_words: List[str]) -> None:
    prober = DynamicTypeProber(hello_words)

    first = prober.probe(0)
    second = prober.probe(0)

    assert first is second
    assert prober.probe_count == 1


def test_probe_count_is_bounded() -> None:
    # every word is a pointer to the next one
    words = [word(0x20)] * 64
    prober = DynamicTypeProber(words)

    for i in range(len(words)):
        prober.probe(i)

    assert prober.probe_count <= len(words) ** 2


def test_nesting_deeper_than_limit_is_not_followed() -> None:
    words = [word(0x20)] * 8

    result = DynamicTypeProber(words).probe(0, depth=MAX_NESTING_DEPTH + 1)

    assert isinstance(result, ProbeFailure)
    assert result.reason is FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE


def test_deeply_nested_pointers_stay_within_the_stack() -> None:
    # each array element points at another array, far past the nesting limit
    words = [word(0x20)] * 1000

    result = DynamicTypeProber(words).probe(0)

    assert isinstance(result, DecodedType)
    assert result.type.endswith('[]')


def test_resolve_element_type_precedence() -> None:
    uint = TypeCharacteristics(['uint8'], 1)
    wide = TypeCharacteristics(['uint64'], 8)
    address = TypeCharacteristics(['address', 'uint160'], 20)
    string = TypeCharacteristics(['string'], 32)

    assert resolve_element_type([uint, wide]) == 'uint64'
    assert resolve_element_type([wide, address, uint]) == 'address'
    assert resolve_element_type([address, string]) == 'string'
    assert resolve_element_type([TypeCharacteristics(['bytes'], 32), TypeCharacteristics(['bytes4'], 32)]) == 'bytes'
    assert resolve_element_type([]) == ''
