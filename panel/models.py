"""
Application settings as edited on the app-settings screen.

The auth API returns settings as a flat camelCase record. Every option the
console knows is declared here with its type and default; options it does
not know are kept as extras and sent back untouched on save.
"""

from typing import Any, Dict
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_serializer, field_validator

from panel.services.capabilities import (
    APP_FUNCTIONS, DEFAULT_FUNCTION_VALUE, all_enabled, decode, set_all, set_toggle,
)
from panel.services.durations import (
    SECONDS_PER_UNIT, DurationSpec, coerce_magnitude, parse_unit, to_seconds,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_HWID = 20
DEFAULT_COOLDOWN_UNIT = SECONDS_PER_UNIT['day']
DEFAULT_COOLDOWN_DURATION = 7
DEFAULT_SESSION_UNIT = SECONDS_PER_UNIT['hour']
DEFAULT_SESSION_DURATION = 6
DEFAULT_MIN_USERNAME_LENGTH = 1

# Sessions cannot be configured beyond weeks
MAX_SESSION_UNIT = SECONDS_PER_UNIT['week']

SWITCHES = (
    'status', 'hwid_lock', 'force_hwid', 'vpn_block', 'hash_check',
    'block_leaked_passwords', 'token_validation', 'ip_logging',
)

MESSAGES = (
    'app_disabled', 'token_invalid', 'hash_check_fail', 'vpn_blocked', 'username_taken',
    'key_not_found', 'key_used', 'key_banned', 'no_sub_level', 'user_banned',
    'username_not_found', 'pass_mismatch', 'hwid_mismatch', 'no_active_subs',
    'hwid_blacked', 'paused_sub', 'session_unauthed', 'logged_in_msg', 'paused_app',
    'un_too_short', 'pw_leaked', 'chat_hit_delay',
)


def _unit_seconds(raw, default: int, limit: int = SECONDS_PER_UNIT['lifetime']) -> int:
    try:
        seconds = SECONDS_PER_UNIT[parse_unit(raw)]
    except ValueError:
        logger.debug(f"AppSettings: unknown unit {raw!r}, using {default}")
        return default
    if seconds > limit:
        logger.debug(f"AppSettings: unit {raw!r} above limit, using {default}")
        return default
    return seconds


class AppSettings(BaseModel):
    """Typed view over an application's settings record."""

    model_config = ConfigDict(populate_by_name=True, extra='allow')

    status: bool = True
    hwid_lock: bool = Field(True, alias='hwidLock')
    force_hwid: bool = Field(True, alias='forceHwid')
    vpn_block: bool = Field(False, alias='vpnBlock')
    hash_check: bool = Field(False, alias='hashCheck')
    block_leaked_passwords: bool = Field(False, alias='blockLeakedPasswords')
    token_validation: bool = Field(False, alias='tokenValidation')
    ip_logging: bool = Field(True, alias='ipLogging')

    min_hwid: int = Field(DEFAULT_MIN_HWID, alias='minHwid')
    version: str = '1.0'
    download: str = ''
    webdownload: str = ''
    webhook: str = ''

    # Responses the client SDK shows to end users
    app_disabled: str = Field('This application is disabled', alias='appdisabled')
    token_invalid: str = Field('Please provide a valid token for you to proceed', alias='tokeninvalid')
    hash_check_fail: str = Field(
        "This program hash does not match, make sure you're using latest version", alias='hashcheckfail')
    vpn_blocked: str = Field('VPNs are blocked on this application', alias='vpnblocked')
    username_taken: str = Field('Username already taken, choose a different one', alias='usernametaken')
    key_not_found: str = Field('Invalid license key', alias='keynotfound')
    key_used: str = Field('License key has already been used', alias='keyused')
    key_banned: str = Field('Your license is banned', alias='keybanned')
    no_sub_level: str = Field(
        'There is no subscription created for your key level. Contact application developer.',
        alias='nosublevel')
    user_banned: str = Field('The user is banned', alias='userbanned')
    username_not_found: str = Field('Invalid username', alias='usernamenotfound')
    pass_mismatch: str = Field('Password does not match.', alias='passmismatch')
    hwid_mismatch: str = Field("HWID doesn't match. Ask for a HWID reset", alias='hwidmismatch')
    no_active_subs: str = Field('No active subscription(s) found', alias='noactivesubs')
    hwid_blacked: str = Field("You've been blacklisted from our application", alias='hwidblacked')
    paused_sub: str = Field("Your subscription is paused and can't be used right now", alias='pausedsub')
    session_unauthed: str = Field('Session is not validated', alias='sessionunauthed')
    logged_in_msg: str = Field('Logged in!', alias='loggedInMsg')
    paused_app: str = Field(
        'Application is currently paused, please wait for the developer to say otherwise.',
        alias='pausedApp')
    un_too_short: str = Field('Username too short, try longer one.', alias='unTooShort')
    pw_leaked: str = Field(
        'This password has been leaked in a data breach (not from us), please use a different one.',
        alias='pwLeaked')
    chat_hit_delay: str = Field("Chat slower, you've hit the delay limit", alias='chatHitDelay')

    # Units are stored as seconds-per-unit, durations as magnitudes
    cooldown_unit: int = Field(DEFAULT_COOLDOWN_UNIT, alias='cooldownexpiry')
    cooldown_duration: int = Field(DEFAULT_COOLDOWN_DURATION, alias='cooldownduration')
    session_unit: int = Field(DEFAULT_SESSION_UNIT, alias='sessionexpiry')
    session_duration: int = Field(DEFAULT_SESSION_DURATION, alias='sessionduration')
    min_username_length: int = Field(DEFAULT_MIN_USERNAME_LENGTH, alias='minUsernameLength')

    function_value: int = Field(DEFAULT_FUNCTION_VALUE, alias='functionValue')

    @field_validator(*SWITCHES, mode='before')
    def _parse_switch(cls, v):
        """Select boxes submit "0"/"1"."""
        if isinstance(v, str):
            return v.strip().lower() in ('1', 'true', 'on', 'yes')
        return bool(v)

    @field_validator('version', 'download', 'webdownload', 'webhook', mode='before')
    def _parse_text(cls, v):
        return '' if v is None else str(v)

    @field_validator(*MESSAGES, mode='before')
    def _parse_message(cls, v, info: ValidationInfo):
        # a blank message means "use the stock text"
        if v is None or not str(v).strip():
            return cls.model_fields[info.field_name].default
        return str(v)

    @field_validator('min_hwid', mode='before')
    def _parse_min_hwid(cls, v):
        return coerce_magnitude(v, DEFAULT_MIN_HWID, allow_zero=False)

    @field_validator('cooldown_unit', mode='before')
    def _parse_cooldown_unit(cls, v):
        return _unit_seconds(v, DEFAULT_COOLDOWN_UNIT)

    @field_validator('cooldown_duration', mode='before')
    def _parse_cooldown_duration(cls, v):
        # zero cooldown is meaningful: resets allowed immediately
        return coerce_magnitude(v, DEFAULT_COOLDOWN_DURATION)

    @field_validator('session_unit', mode='before')
    def _parse_session_unit(cls, v):
        return _unit_seconds(v, DEFAULT_SESSION_UNIT, limit=MAX_SESSION_UNIT)

    @field_validator('session_duration', mode='before')
    def _parse_session_duration(cls, v):
        return coerce_magnitude(v, DEFAULT_SESSION_DURATION, allow_zero=False)

    @field_validator('min_username_length', mode='before')
    def _parse_min_username_length(cls, v):
        return coerce_magnitude(v, DEFAULT_MIN_USERNAME_LENGTH, allow_zero=False)

    @field_validator('function_value', mode='before')
    def _parse_function_value(cls, v):
        try:
            v = int(v)
        except (TypeError, ValueError):
            logger.warning(f"AppSettings: invalid functionValue {v!r}, using defaults")
            return DEFAULT_FUNCTION_VALUE
        return v if v >= 0 else DEFAULT_FUNCTION_VALUE

    @field_serializer(*SWITCHES)
    def _dump_switch(self, v: bool) -> str:
        # the API stores switches as "0"/"1" strings
        return str(int(v))

    # ------------------------------------------------------------------
    # Function toggles (functionValue is the source of truth)
    # ------------------------------------------------------------------
    def toggles(self) -> Dict[str, bool]:
        """Per-function on/off view derived from functionValue."""
        return decode(APP_FUNCTIONS, self.function_value)

    @property
    def all_functions_enabled(self) -> bool:
        return all_enabled(APP_FUNCTIONS, self.function_value)

    def with_toggle(self, key: str, enabled: bool) -> 'AppSettings':
        """Return a copy with one function toggled; unknown bits are kept."""
        value = set_toggle(APP_FUNCTIONS, self.function_value, key, enabled)
        return self.model_copy(update={'function_value': value})

    def with_all_toggles(self, enabled: bool) -> 'AppSettings':
        value = set_all(APP_FUNCTIONS, self.function_value, enabled)
        return self.model_copy(update={'function_value': value})

    # ------------------------------------------------------------------
    # Durations
    # ------------------------------------------------------------------
    @property
    def cooldown(self) -> DurationSpec:
        return DurationSpec(magnitude=self.cooldown_duration, unit=self.cooldown_unit)

    @property
    def cooldown_seconds(self) -> int:
        """HWID reset cooldown (unit * duration)."""
        return to_seconds(self.cooldown)

    @property
    def session(self) -> DurationSpec:
        return DurationSpec(magnitude=self.session_duration, unit=self.session_unit)

    @property
    def session_seconds(self) -> int:
        return to_seconds(self.session)

    # ------------------------------------------------------------------
    # Payload
    # ------------------------------------------------------------------
    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'AppSettings':
        return cls.model_validate(payload or {})

    def to_payload(self) -> Dict[str, Any]:
        """Settings record for the save call, including unrecognised keys."""
        return self.model_dump(by_alias=True)
