import json
import logging
from typing import List, Optional, Sequence, Tuple, Union

from eth_abi import decode
from eth_abi.exceptions import DecodingError, ParseError
from eth_typing import HexStr

from abi_return_guesser.config import GuesserConfig
from abi_return_guesser.coverage import CoverageSet
from abi_return_guesser.dynamic import DecodedType, DynamicTypeProber
from abi_return_guesser.heuristics import refine_by_padding
from abi_return_guesser.words import decode_hex, split_words

logger = logging.getLogger(__name__)


def decode_abi_data(types: List[str], data: bytes) -> Tuple:
    return decode(types, data)


# pretty print the guessed types, ready to be handed to an abi decoder
def format_types(types: Sequence[str]) -> str:
    return json.dumps(list(types), separators=(', ', ':'))


# a single forward sweep over the words. at every word not yet covered by an
# earlier value, prefer reading it as a pointer to a dynamic value and fall
# back to guessing a static type from its padding
def decode_return_parameter_types(
    words: Sequence[str],
    config: Optional[GuesserConfig] = None,
) -> List[str]:
    config = config or GuesserConfig()
    prober = DynamicTypeProber(words)

    potential_types: List[str] = []
    covered_words = CoverageSet()

    word_index = 0
    while not covered_words.is_complete(len(words)) and word_index < len(words):
        if word_index in covered_words:
            word_index += 1
            continue

        result = prober.probe(word_index)
        if isinstance(result, DecodedType):
            potential_types.append(result.type)
            covered_words.merge(result.coverages)
            word_index += 1
            continue

        type_characteristics = refine_by_padding(words[word_index])
        if type_characteristics.types:
            potential_types.append(type_characteristics.types[0])
            covered_words.add(word_index)
        elif config.unknown_type is not None:
            logger.warning("parameter %d: %r could not be classified", word_index, words[word_index])
            potential_types.append(config.unknown_type)
        else:
            logger.warning("parameter %d: %r could not be classified, skipping", word_index, words[word_index])

        word_index += 1

    logger.debug("covered words: %s", list(covered_words))
    logger.debug("potential parameter types: (%s)", ','.join(potential_types))

    return potential_types


def guess_return_types(
    return_data: Union[HexStr, str, bytes],
    config: Optional[GuesserConfig] = None,
) -> List[str]:
    # malformed words (odd length trailing chunk, non-hex characters) are left
    # to the sweep, which drops them or reports them as config.unknown_type
    return decode_return_parameter_types(split_words(return_data), config)


def guess_and_decode_return_data(
    return_data: Union[HexStr, str, bytes],
    config: Optional[GuesserConfig] = None,
) -> Optional[Tuple[List[str], Tuple]]:
    types = guess_return_types(return_data, config)
    if not types:
        return None

    try:
        values = decode_abi_data(types, decode_hex(return_data))
    # InvalidHexEncoding is a ValueError
    except (DecodingError, ParseError, ValueError) as e:
        logger.debug("could not decode return data as %s: %s", format_types(types), e)
        return None

    return types, values
