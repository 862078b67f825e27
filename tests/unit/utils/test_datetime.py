"""Tests for datetime helpers."""

from datetime import datetime, timedelta, timezone

from podcastarchive.utils.datetime import format_rfc822, now_utc


class TestDatetimeHelpers:
    """Tests for now_utc() and format_rfc822()."""

    def test_now_utc_is_aware(self) -> None:
        """Test that now_utc returns an aware UTC datetime."""
        assert now_utc().tzinfo == timezone.utc

    def test_format_rfc822_utc(self) -> None:
        """Test RFC 822 rendering in GMT."""
        value = datetime(2020, 7, 18, 14, 30, tzinfo=timezone.utc)

        assert format_rfc822(value) == "Sat, 18 Jul 2020 14:30:00 GMT"

    def test_format_rfc822_converts_offset(self) -> None:
        """Test that other offsets are converted to GMT."""
        value = datetime(2020, 7, 18, 1, 0, tzinfo=timezone(timedelta(hours=3)))

        assert format_rfc822(value) == "Fri, 17 Jul 2020 22:00:00 GMT"

    def test_format_rfc822_naive_is_utc(self) -> None:
        """Test that naive values are taken as UTC."""
        assert format_rfc822(datetime(2020, 7, 18, 14, 30)) == "Sat, 18 Jul 2020 14:30:00 GMT"
