"""
Probing of words that may point at dynamically sized ABI values.

A dynamic value (``bytes``, ``string``, ``T[]``) is encoded as an offset word
in the head that points at a length word, followed by the value's data. We
can't know whether a word really is such an offset, so each word is probed:
the offset and length are bounds checked against the words we actually have
and the pointed-to region is interpreted as an array if there is room for
one, and as ``bytes`` otherwise.

Probe failures are returned as ``ProbeFailure`` values. Every failure means
the same thing to a caller: this word is not a pointer to a dynamic value.
"""
import enum
import logging
from typing import Dict, FrozenSet, List, NamedTuple, Sequence, Set, Tuple, Union

from abi_return_guesser.heuristics import TypeCharacteristics, refine_by_padding
from abi_return_guesser.padding import padding_size
from abi_return_guesser.words import WORD_SIZE, InvalidHexEncoding, word_to_int

logger = logging.getLogger(__name__)

# arrays nested deeper than this are not followed
MAX_NESTING_DEPTH = 32


class FailureReason(enum.Enum):
    NOT_POINTER_TO_DYNAMIC_TYPE = 'NotPointerToDynamicType'
    WORD_OFFSET_OUT_OF_BOUNDS = 'WordOffsetOutOfBounds'
    BYTES_CHECK_OUT_OF_BOUNDS = 'BytesCheckOutOfBounds'
    CEILED_SIZE_CHECK_OUT_OF_BOUNDS = 'CeiledSizeCheckOutOfBounds'
    PADDING_CHECK_FAILED = 'PaddingCheckFailed'


class DecodedType(NamedTuple):
    type: str
    # absolute indices of every word the value occupies
    coverages: FrozenSet[int]


class ProbeFailure(NamedTuple):
    reason: FailureReason
    detail: str


ProbeResult = Union[DecodedType, ProbeFailure]


# pick the element type of an array from the candidates of each of its elements.
# string beats address beats the widest element
def resolve_element_type(all_characteristics: List[TypeCharacteristics]) -> str:
    if any('string' in c.types for c in all_characteristics):
        return 'string'

    if any('address' in c.types for c in all_characteristics):
        return 'address'

    potential_type, max_size = '', 0
    for types, type_size in all_characteristics:
        if type_size > max_size:
            potential_type, max_size = (types[0] if types else ''), type_size

    return potential_type


class DynamicTypeProber:
    """
    Probes the words of one return value for dynamic ABI types.

    Nested dynamic data resets offsets, so every probe is made relative to a
    region: the suffix of the words starting at ``base``. Results are cached
    per ``(base, index, depth)`` and nesting stops at ``MAX_NESTING_DEPTH``,
    which keeps both the work and the recursion bounded however the offsets
    are nested.
    """

    def __init__(self, words: Sequence[str]) -> None:
        self.words = tuple(words)
        self.probe_count = 0
        self._cache: Dict[Tuple[int, int, int], ProbeResult] = {}

    def probe(self, word_index: int, base: int = 0, depth: int = 0) -> ProbeResult:
        if depth > MAX_NESTING_DEPTH:
            return self._fail(
                FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE, word_index, base,
                f"nesting too deep (more than {MAX_NESTING_DEPTH} levels)",
            )

        key = (base, word_index, depth)
        if key not in self._cache:
            self.probe_count += 1
            self._cache[key] = self._probe(word_index, base, depth)
        return self._cache[key]

    def _fail(self, reason: FailureReason, word_index: int, base: int, message: str) -> ProbeFailure:
        detail = f"parameter {word_index} (region {base}): {message}"
        logger.debug("%s: %s", reason.value, detail)
        return ProbeFailure(reason, detail)

    def _probe(self, word_index: int, base: int, depth: int) -> ProbeResult:
        region_length = len(self.words) - base
        word = self.words[base + word_index]

        # (1) the word must look like a word aligned byte offset into the region
        try:
            value = word_to_int(word)
        except InvalidHexEncoding as e:
            return self._fail(FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE, word_index, base, str(e))

        if value == 0 or value % WORD_SIZE != 0:
            return self._fail(
                FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE, word_index, base,
                f"{word} doesn't appear to be an offset pointer to a dynamic type",
            )

        word_offset = value // WORD_SIZE
        if word_offset >= region_length:
            return self._fail(
                FailureReason.WORD_OFFSET_OUT_OF_BOUNDS, word_index, base,
                f"{word} is out of bounds (offset check)",
            )

        # (2) the pointed-to word holds the element count (arrays) or byte length (bytes/string)
        try:
            size = word_to_int(self.words[base + word_offset])
        except InvalidHexEncoding as e:
            return self._fail(FailureReason.NOT_POINTER_TO_DYNAMIC_TYPE, word_index, base, str(e))

        coverages = {base + word_index, base + word_offset}

        # (3) without room for `size` element words this can't be an array
        data_start = word_offset + 1
        data_end = data_start + size - 1

        if data_end >= region_length:
            return self._probe_bytes(word_index, base, word_offset, data_start, size, coverages)
        return self._probe_array(word_index, base, depth, word_offset, data_start, data_end, coverages)

    def _probe_bytes(
        self,
        word_index: int,
        base: int,
        word_offset: int,
        data_start: int,
        size: int,
        coverages: Set[int],
    ) -> ProbeResult:
        logger.debug("parameter %d (region %d) may be bytes", word_index, base)

        data_words = self.words[base + data_start:]

        if len(data_words) * WORD_SIZE < size:
            return self._fail(
                FailureReason.BYTES_CHECK_OUT_OF_BOUNDS, word_index, base,
                f"length {size} is out of bounds (bytes check)",
            )

        word_count_for_size = -(-size // WORD_SIZE)
        if len(data_words) < word_count_for_size:
            return self._fail(
                FailureReason.CEILED_SIZE_CHECK_OUT_OF_BOUNDS, word_index, base,
                f"length {size} is out of bounds (ceiled size check)",
            )

        # the last word holds the remaining `size % 32` bytes, the rest of it is padding
        last_word = data_words[word_count_for_size - 1]
        last_word_size = size % WORD_SIZE
        try:
            last_word_padding = padding_size(last_word)
        except InvalidHexEncoding as e:
            return self._fail(FailureReason.PADDING_CHECK_FAILED, word_index, base, str(e))

        if last_word_padding > WORD_SIZE - last_word_size:
            return self._fail(
                FailureReason.PADDING_CHECK_FAILED, word_index, base,
                f"size {size} cannot fit into last word with padding of {last_word_padding} bytes",
            )

        coverages.update(range(base + word_offset, base + data_start + word_count_for_size))

        logger.debug("parameter %d (region %d) is bytes", word_index, base)
        return DecodedType('bytes', frozenset(coverages))

    def _probe_array(
        self,
        word_index: int,
        base: int,
        depth: int,
        word_offset: int,
        data_start: int,
        data_end: int,
        coverages: Set[int],
    ) -> ProbeResult:
        logger.debug("parameter %d (region %d) may be an array", word_index, base)

        coverages.update(range(base + word_offset, base + data_end + 1))

        # offsets inside the array data are relative to its first element
        nested_base = base + data_start
        all_characteristics = []

        for element_index in range(data_end - data_start + 1):
            nested = self.probe(element_index, nested_base, depth + 1)

            if isinstance(nested, DecodedType):
                coverages.update(nested.coverages)
                all_characteristics.append(TypeCharacteristics([nested.type], WORD_SIZE))
                continue

            all_characteristics.append(refine_by_padding(self.words[nested_base + element_index]))

        element_type = resolve_element_type(all_characteristics)
        logger.debug("parameter %d (region %d) is %s[]", word_index, base, element_type)

        return DecodedType(f"{element_type}[]", frozenset(coverages))

