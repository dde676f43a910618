"""
Fee parameter configuration.

Fee parameters are chain state on L2, but tools quoting fees offline read
them from a JSON document such as::

    {"overhead": "0xbc", "scalar": 684000, "decimals": 6}

Values may be decimal integers or `0x` prefixed hex strings.
"""

import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, TextIO, TypeVar, Union

from ethereum_types.numeric import U64, U256, Uint

from .exceptions import ConfigurationError

W = TypeVar("W", Uint, U64, U256)

DEFAULT_OVERHEAD = Uint(188)
DEFAULT_SCALAR = Uint(684000)
DEFAULT_DECIMALS = Uint(6)

log = logging.getLogger(__name__)


def parse_hex_or_int(value: Union[str, int], to_type: Callable[[int], W]) -> W:
    """Read an unsigned integer from a hex string, decimal string or int"""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigurationError(f"invalid integer {value!r}")
    try:
        if isinstance(value, str) and value.startswith("0x"):
            return to_type(int(value[2:], 16))
        else:
            return to_type(int(value))
    except (TypeError, ValueError, OverflowError) as e:
        raise ConfigurationError(f"invalid integer {value!r}") from e


@dataclass(frozen=True)
class FeeParameters:
    """
    Tunable inputs of the L1 fee computation.
    """

    overhead: Uint = DEFAULT_OVERHEAD
    scalar: Uint = DEFAULT_SCALAR
    decimals: Uint = DEFAULT_DECIMALS

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "FeeParameters":
        """
        Build parameters from a decoded JSON object. Missing keys keep their
        defaults.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ConfigurationError(
                f"unknown fee parameter(s): {', '.join(sorted(unknown))}"
            )

        values = {
            name: parse_hex_or_int(value, Uint) for name, value in raw.items()
        }
        return cls(**values)


def load_fee_parameters(stream: TextIO) -> FeeParameters:
    """
    Read :class:`FeeParameters` from a JSON document.

    Parameters
    ----------
    stream :
        Open text stream containing a JSON object.

    Returns
    -------
    parameters : `FeeParameters`
        The configured parameters.
    """
    try:
        raw = json.load(stream)
    except json.JSONDecodeError as e:
        raise ConfigurationError("fee parameters are not valid JSON") from e

    if not isinstance(raw, dict):
        raise ConfigurationError("fee parameters must be a JSON object")

    parameters = FeeParameters.from_dict(raw)
    log.debug(
        "loaded fee parameters overhead=%s scalar=%s decimals=%s",
        parameters.overhead,
        parameters.scalar,
        parameters.decimals,
    )
    return parameters
