"""Tests for the validation rule library."""

import base64

import pytest

from core.result import Err, Ok
from core.validation import (
    check_batch,
    check_choices,
    check_context_uri,
    check_exactly_one,
    check_item_count,
    check_item_uri,
    check_item_uris,
    check_limit,
    check_market,
    check_non_negative,
    check_offset,
    check_optional_id,
    check_positive,
    check_volume,
    decode_cover_image,
    first_failure,
    is_country_code,
    require_id,
    resolve_public_flag,
)


class TestFirstFailure:
    def test_returns_first_in_declared_order(self):
        assert first_failure(None, Err("second"), Err("third")) == Err("second")

    def test_all_pass(self):
        assert first_failure(None, None) is None


class TestIdentifiers:
    def test_require_id_accepts_value(self):
        assert require_id("abc", "Album ID") is None

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_require_id_rejects_blank(self, value):
        assert require_id(value, "Album ID") == Err("Album ID must not be empty")

    def test_optional_id_may_be_omitted(self):
        assert check_optional_id(None) is None

    def test_optional_id_rejects_blank(self):
        assert check_optional_id("  ") == Err("Device ID must not be empty if provided")


class TestBatch:
    def test_empty_batch(self):
        assert check_batch([], "album", 20) == Err("At least one album ID is required")

    def test_missing_batch(self):
        assert check_batch(None, "album", 20) == Err("At least one album ID is required")

    def test_bounds_are_inclusive(self):
        assert check_batch(["a"], "album", 20) is None
        assert check_batch(["a"] * 20, "album", 20) is None

    def test_over_maximum(self):
        assert check_batch(["a"] * 21, "album", 20) == Err("Maximum 20 album IDs allowed")

    def test_blank_element(self):
        assert check_batch(["a", " "], "track", 50) == Err("All track IDs must be non-empty strings")

    def test_item_count(self):
        assert check_item_count([], "add") == Err("At least one URI must be provided")
        assert check_item_count(["u"] * 101, "add") == Err("Cannot add more than 100 items at once")
        assert check_item_count(["u"] * 100, "remove") is None


class TestUris:
    def test_track_and_episode_accepted(self):
        assert check_item_uri("spotify:track:4iV5W9uYEdYUVa79Axb7Rh") is None
        assert check_item_uri("spotify:episode:512ojhOuo1ktJprKbVcKyQ") is None

    def test_other_spotify_type_gets_restriction_message(self):
        assert check_item_uri("spotify:album:4aawyAB9vmqN3uQ7FjRGTy") == Err(
            "Only track and episode URIs are supported"
        )

    def test_garbage_gets_format_message(self):
        assert check_item_uri("not-a-uri") == Err("Invalid URI format: not-a-uri")

    def test_first_bad_uri_wins(self):
        uris = ["spotify:track:a1", "bad", "spotify:album:x"]
        assert check_item_uris(uris) == Err("Invalid URI format: bad")

    def test_context_uri(self):
        assert check_context_uri("spotify:playlist:37i9dQZF1DXcBWIGoYBM5M") is None
        assert check_context_uri(None) is None
        assert check_context_uri("spotify:track:abc") == Err("Invalid context URI format")


class TestMarket:
    def test_valid_code(self):
        assert check_market("US") is None

    @pytest.mark.parametrize("market", ["USA", "us", "U", "ZZ"])
    def test_invalid_codes(self, market):
        assert check_market(market) == Err("Market must be a valid ISO 3166-1 alpha-2 country code")

    def test_omitted(self):
        assert check_market(None) is None

    def test_custom_label(self):
        assert check_market("xx", "Country") == Err("Country must be a valid ISO 3166-1 alpha-2 country code")

    def test_kosovo_is_a_market(self):
        assert is_country_code("XK")


class TestNumbers:
    def test_limit(self):
        assert check_limit(1) is None
        assert check_limit(50) is None
        assert check_limit(0) == Err("Limit must be between 1 and 50")
        assert check_limit(51) == Err("Limit must be between 1 and 50")

    def test_offset(self):
        assert check_offset(0) is None
        assert check_offset(-1) == Err("Offset must be non-negative")

    def test_non_negative_and_positive(self):
        assert check_non_negative(0, "msg") is None
        assert check_non_negative(-1, "msg") == Err("msg")
        assert check_positive(0, "msg") == Err("msg")
        assert check_positive(None, "msg") is None

    def test_volume(self):
        assert check_volume(0) is None
        assert check_volume(100) is None
        assert check_volume(101) == Err("Volume must be between 0 and 100")
        assert check_volume(-1) == Err("Volume must be between 0 and 100")

    def test_choices(self):
        message = "Invalid type: {value}"
        assert check_choices(["a"], ("a", "b"), message) is None
        assert check_choices(["a", "c"], ("a", "b"), message) == Err("Invalid type: c")


class TestExactlyOne:
    def test_neither(self):
        assert check_exactly_one(False, False, "neither", "both") == Err("neither")

    def test_both(self):
        assert check_exactly_one(True, True, "neither", "both") == Err("both")

    def test_one(self):
        assert check_exactly_one(True, False, "neither", "both") is None


class TestPublicFlag:
    def test_collaborative_and_public_rejected(self):
        assert resolve_public_flag(True, True) == Err("Collaborative playlists must be private")

    def test_collaborative_forces_private(self):
        assert resolve_public_flag(None, True) == Ok(False)

    def test_public_passes_through(self):
        assert resolve_public_flag(False, None) == Ok(False)
        assert resolve_public_flag(True, False) == Ok(True)

    def test_default_when_omitted(self):
        assert resolve_public_flag(None, None, default=True) == Ok(True)
        assert resolve_public_flag(None, None) == Ok(None)


class TestCoverImage:
    def test_valid_image(self):
        data = base64.b64encode(b"\xff\xd8\xff" + b"0" * 100).decode()
        result = decode_cover_image(data)
        assert result.is_ok()
        assert result.unwrap().startswith(b"\xff\xd8\xff")

    def test_empty(self):
        assert decode_cover_image("  ") == Err("Image data must not be empty")

    def test_bad_alphabet(self):
        assert decode_cover_image("not base64!") == Err("Invalid base64 image data")

    def test_bad_padding(self):
        assert decode_cover_image("abc") == Err("Invalid base64 image data")

    def test_too_large(self):
        data = base64.b64encode(b"0" * (256 * 1024 + 1)).decode()
        assert decode_cover_image(data) == Err("Image size must not exceed 256KB")

    def test_exactly_at_limit(self):
        data = base64.b64encode(b"0" * (256 * 1024)).decode()
        assert decode_cover_image(data).is_ok()
