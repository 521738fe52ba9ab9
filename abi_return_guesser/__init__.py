from importlib.metadata import PackageNotFoundError, version

from abi_return_guesser.config import (
    GuesserConfig,
    load_config,
)
from abi_return_guesser.lib import (
    decode_return_parameter_types,
    format_types,
    guess_and_decode_return_data,
    guess_return_types,
)
from abi_return_guesser.words import (
    InvalidHexEncoding,
    split_words,
)

try:
    __version__ = version("abi-return-guesser")
except PackageNotFoundError:
    __version__ = "0.0.0"
