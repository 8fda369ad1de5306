"""
Data-shaping services shared by the console screens.

Capability bitmask, duration units and the table view pipeline.
None of them perform I/O; records and settings come from the auth API.
"""

from panel.services.capabilities import (
    APP_FUNCTIONS, DEFAULT_FUNCTION_VALUE, CapabilityConfigError, CapabilityMap,
    decode, encode,
)
from panel.services.durations import DurationSpec, humanize, humanize_delay, to_seconds
from panel.services.collection_view import ViewParams, ViewResult, view

__all__ = [
    'APP_FUNCTIONS',
    'DEFAULT_FUNCTION_VALUE',
    'CapabilityConfigError',
    'CapabilityMap',
    'encode',
    'decode',
    'DurationSpec',
    'to_seconds',
    'humanize',
    'humanize_delay',
    'ViewParams',
    'ViewResult',
    'view',
]
