"""
Application capability bitmask.

Each backend function of an application (login, register, chat, ...) is a
named toggle stored as one bit of a single integer. The integer is the
persisted value; the per-key toggle view is derived from it on demand.
"""

from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterator
import logging

logger = logging.getLogger(__name__)

# Widest integer the backend stores the function value in
MAX_BITS = 64


class CapabilityConfigError(ValueError):
    """Raised when a capability table is malformed."""


class CapabilityMap(Mapping):
    """Immutable, validated mapping of capability key -> bit index."""

    def __init__(self, bits: Mapping[str, int]):
        seen: Dict[int, str] = {}
        for key, index in bits.items():
            if not isinstance(key, str) or not key:
                raise CapabilityConfigError(f"Invalid capability key: {key!r}")
            # bool is an int subclass but never a meaningful bit index
            if isinstance(index, bool) or not isinstance(index, int):
                raise CapabilityConfigError(
                    f"Bit index for '{key}' must be an integer, got {index!r}")
            if index < 0 or index >= MAX_BITS:
                raise CapabilityConfigError(
                    f"Bit index for '{key}' out of range 0..{MAX_BITS - 1}: {index}")
            if index in seen:
                raise CapabilityConfigError(
                    f"Bit {index} assigned to both '{seen[index]}' and '{key}'")
            seen[index] = key

        self._bits = MappingProxyType(dict(bits))
        self._covered = 0
        for index in self._bits.values():
            self._covered |= 1 << index

    def __getitem__(self, key: str) -> int:
        return self._bits[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __repr__(self) -> str:
        return f"CapabilityMap({dict(self._bits)!r})"

    @property
    def covered_mask(self) -> int:
        return self._covered


def covered_mask(bits: CapabilityMap) -> int:
    """OR of every bit enumerated by the map."""
    return bits.covered_mask


def unknown_bits(bits: CapabilityMap, value: int) -> int:
    """Bits set in value that the map does not know about."""
    return value & ~bits.covered_mask


def encode(bits: CapabilityMap, toggles: Mapping[str, bool]) -> int:
    """
    Encode a toggle set into an integer.

    Keys not present in the map are ignored so that toggles coming from a
    newer backend do not break encoding.

    Args:
        bits: Capability table
        toggles: Mapping of capability key -> enabled

    Returns:
        Integer with one bit set per enabled, known capability
    """
    value = 0
    for key, enabled in toggles.items():
        if not enabled:
            continue
        index = bits.get(key)
        if index is None:
            logger.debug(f"Capabilities: ignoring unknown toggle '{key}'")
            continue
        value |= 1 << index
    return value


def decode(bits: CapabilityMap, value: int) -> Dict[str, bool]:
    """
    Decode an integer into a toggle set.

    Args:
        bits: Capability table
        value: Persisted function value

    Returns:
        Dict with every key of the map and nothing else
    """
    return {key: bool(value & (1 << index)) for key, index in bits.items()}


def set_toggle(bits: CapabilityMap, value: int, key: str, enabled: bool) -> int:
    """
    Flip a single capability on the canonical integer.

    Bits outside the map are carried over untouched.

    Raises:
        KeyError: if key is not a known capability
    """
    mask = 1 << bits[key]
    if enabled:
        return value | mask
    return value & ~mask


def set_all(bits: CapabilityMap, value: int, enabled: bool) -> int:
    """Enable or disable every known capability, keeping unknown bits."""
    if enabled:
        return value | bits.covered_mask
    return unknown_bits(bits, value)


def all_enabled(bits: CapabilityMap, value: int) -> bool:
    """True if every known capability is enabled."""
    return (value & bits.covered_mask) == bits.covered_mask


# Function toggles understood by the auth backend, in bit order
APP_FUNCTIONS = CapabilityMap({
    'loginToggle': 0,
    'registerToggle': 1,
    'licenseToggle': 2,
    'upgradeToggle': 3,
    'chatSendToggle': 4,
    'chatGetToggle': 5,
    'getVarToggle': 6,
    'setVarToggle': 7,
    'varToggle': 8,
    'banToggle': 9,
    'checkBlackToggle': 10,
    'sessionToggle': 11,
    'changeUsernameToggle': 12,
    'fileToggle': 13,
    'fetchOnlineToggle': 14,
    'forgotPasswordToggle': 15,
    'fetchStatsToggle': 16,
    'logToggle': 17,
    'webhookToggle': 18,
    'tfaToggle': 19,
})

# New applications start with every function enabled
DEFAULT_FUNCTION_VALUE = APP_FUNCTIONS.covered_mask
