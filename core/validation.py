# =============================================================================
# core/validation.py  -  Validation Rule Library
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the small, pure rules every domain operation runs before it talks
#   to the music service.  Each rule returns None when the input passes, or
#   an Err carrying a fixed message when it does not.  The messages are part
#   of the tool contract: callers (and the tests) match on them exactly.
#
# HOW OPERATIONS USE IT:
#   An operation lists its rules in order and surfaces the first failure:
#
#       failure = first_failure(
#           require_id(album_id, "Album ID"),
#           check_market(market),
#       )
#       if failure:
#           return failure
#
#   Every rule accepts None (meaning "not supplied") without raising, so the
#   whole list can be evaluated up front.
#
# POLICY CONSTANTS:
#   Batch limits differ per endpoint (20, 50 or 100) and live next to the
#   operation that uses them.  The limits below are shared by all endpoints.
# =============================================================================

import base64
import binascii
import re
from typing import Iterable, Sequence

from core.result import Err, Ok, Result

LIMIT_MIN = 1
LIMIT_MAX = 50
VOLUME_MIN = 0
VOLUME_MAX = 100
MAX_COVER_IMAGE_BYTES = 256 * 1024

ITEM_URI_PATTERN = re.compile(r"^spotify:(track|episode):[A-Za-z0-9]+$")
CONTEXT_URI_PATTERN = re.compile(
    r"^spotify:(album|artist|playlist|show|episode|collection):[A-Za-z0-9]+$"
)
# Any well-formed Spotify URI; used to tell a wrong type apart from garbage.
ANY_SPOTIFY_URI_PATTERN = re.compile(r"^spotify:[a-z]+:[A-Za-z0-9]+$")
BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")
COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")

# ISO 3166-1 alpha-2, plus XK (Kosovo), which the service lists as a market.
ISO_3166_ALPHA_2 = frozenset("""
    AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ
    BA BB BD BE BF BG BH BI BJ BL BM BN BO BQ BR BS BT BV BW BY BZ
    CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV CW CX CY CZ
    DE DJ DK DM DO DZ
    EC EE EG EH ER ES ET
    FI FJ FK FM FO FR
    GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY
    HK HM HN HR HT HU
    ID IE IL IM IN IO IQ IR IS IT
    JE JM JO JP
    KE KG KH KI KM KN KP KR KW KY KZ
    LA LB LC LI LK LR LS LT LU LV LY
    MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ
    NA NC NE NF NG NI NL NO NP NR NU NZ
    OM
    PA PE PF PG PH PK PL PM PN PR PS PT PW PY
    QA
    RE RO RS RU RW
    SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ
    TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ
    UA UG UM US UY UZ
    VA VC VE VG VI VN VU
    WF WS
    XK
    YE YT
    ZA ZM ZW
""".split())


def first_failure(*outcomes: Err | None) -> Err | None:
    """Return the first failed rule outcome, in declared order."""
    for outcome in outcomes:
        if outcome is not None:
            return outcome
    return None


# =============================================================================
# Identifiers and batches
# =============================================================================
def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def require_id(value: str | None, label: str) -> Err | None:
    """Reject a missing or whitespace-only identifier.

    Args:
        value: The identifier as supplied by the caller.
        label: Human name used in the message, e.g. "Album ID".
    """
    if value is None or _is_blank(value):
        return Err(f"{label} must not be empty")
    return None


def check_optional_id(value: str | None, label: str = "Device ID") -> Err | None:
    """An optional identifier may be omitted, but not supplied blank."""
    if value is not None and _is_blank(value):
        return Err(f"{label} must not be empty if provided")
    return None


def check_batch(
    ids: Sequence[str] | None,
    entity: str,
    maximum: int,
    minimum: int = 1,
) -> Err | None:
    """Bound a batch of IDs to [minimum, maximum] and reject blank elements.

    Args:
        ids: The identifiers supplied by the caller.
        entity: Lower-case entity name used in messages, e.g. "album".
        maximum: The endpoint's batch cap (20, 50, ...).
        minimum: 1 unless the endpoint accepts an empty batch.
    """
    count = len(ids) if ids is not None else 0
    if count < minimum:
        return Err(f"At least one {entity} ID is required")
    if count > maximum:
        return Err(f"Maximum {maximum} {entity} IDs allowed")
    if ids and any(not isinstance(item, str) or _is_blank(item) for item in ids):
        return Err(f"All {entity} IDs must be non-empty strings")
    return None


def check_item_count(items: Sequence | None, action: str, maximum: int = 100) -> Err | None:
    """Bound a playlist mutation batch.

    Args:
        items: URIs (or track objects) to add or remove.
        action: "add" or "remove", used in the over-limit message.
        maximum: The endpoint's cap.
    """
    if not items:
        return Err("At least one URI must be provided")
    if len(items) > maximum:
        return Err(f"Cannot {action} more than {maximum} items at once")
    return None


# =============================================================================
# Spotify URIs
# =============================================================================
def check_item_uri(uri: str) -> Err | None:
    """Accept only track and episode URIs.

    A well-formed URI of another type (album, artist, ...) gets the type
    restriction message; anything else is a format error.
    """
    if ITEM_URI_PATTERN.match(uri):
        return None
    if ANY_SPOTIFY_URI_PATTERN.match(uri):
        return Err("Only track and episode URIs are supported")
    return Err(f"Invalid URI format: {uri}")


def check_item_uris(uris: Iterable[str] | None) -> Err | None:
    for uri in uris or ():
        failure = check_item_uri(uri)
        if failure:
            return failure
    return None


def check_context_uri(uri: str | None) -> Err | None:
    if uri is not None and not CONTEXT_URI_PATTERN.match(uri):
        return Err("Invalid context URI format")
    return None


# =============================================================================
# Markets
# =============================================================================
def is_country_code(value: str) -> bool:
    return bool(COUNTRY_CODE_PATTERN.match(value)) and value in ISO_3166_ALPHA_2


def check_market(market: str | None, label: str = "Market") -> Err | None:
    """Validate an optional ISO 3166-1 alpha-2 code ("US", not "us" or "USA")."""
    if market is not None and not is_country_code(market):
        return Err(f"{label} must be a valid ISO 3166-1 alpha-2 country code")
    return None


# =============================================================================
# Numbers
# =============================================================================
def check_limit(limit: int | None, minimum: int = LIMIT_MIN, maximum: int = LIMIT_MAX) -> Err | None:
    if limit is not None and not minimum <= limit <= maximum:
        return Err(f"Limit must be between {minimum} and {maximum}")
    return None


def check_offset(offset: int | None, message: str = "Offset must be non-negative") -> Err | None:
    return check_non_negative(offset, message)


def check_non_negative(value: int | None, message: str) -> Err | None:
    if value is not None and value < 0:
        return Err(message)
    return None


def check_positive(value: int | None, message: str) -> Err | None:
    if value is not None and value <= 0:
        return Err(message)
    return None


def check_volume(volume_percent: int | None) -> Err | None:
    if volume_percent is not None and not VOLUME_MIN <= volume_percent <= VOLUME_MAX:
        return Err(f"Volume must be between {VOLUME_MIN} and {VOLUME_MAX}")
    return None


def check_choices(values: Iterable[str] | None, allowed: Sequence[str], message: str) -> Err | None:
    """Reject the first value outside `allowed`; `message` may use {value}."""
    for value in values or ():
        if value not in allowed:
            return Err(message.format(value=value))
    return None


# =============================================================================
# Mutually exclusive parameter groups
# =============================================================================
def check_exactly_one(
    first_given: bool,
    second_given: bool,
    neither_message: str,
    both_message: str,
) -> Err | None:
    if not first_given and not second_given:
        return Err(neither_message)
    if first_given and second_given:
        return Err(both_message)
    return None


# =============================================================================
# Playlist visibility
# =============================================================================
def resolve_public_flag(
    public: bool | None,
    collaborative: bool | None,
    default: bool | None = None,
) -> Result[bool | None]:
    """Work out the "public" flag to send alongside "collaborative".

    Collaborative playlists must be private:
      - collaborative=True with an explicit public=True is rejected;
      - collaborative=True with public omitted sends public=False;
      - otherwise public passes through (or `default` when omitted).
    """
    if collaborative and public is True:
        return Err("Collaborative playlists must be private")
    if collaborative:
        return Ok(False)
    return Ok(default if public is None else public)


# =============================================================================
# Binary payloads
# =============================================================================
def decode_cover_image(image_base64: str | None) -> Result[bytes]:
    """Validate base64 JPEG data for a playlist cover.

    The alphabet is checked first, then the data is decoded, then the decoded
    size is capped at 256 KiB.  Alphabet and decode failures share one
    message; the size failure has its own.
    """
    if image_base64 is None or _is_blank(image_base64):
        return Err("Image data must not be empty")
    if not BASE64_PATTERN.match(image_base64):
        return Err("Invalid base64 image data")
    try:
        decoded = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError):
        return Err("Invalid base64 image data")
    if len(decoded) > MAX_COVER_IMAGE_BYTES:
        return Err("Image size must not exceed 256KB")
    return Ok(decoded)
