from datetime import datetime, timedelta, timezone

from egov_portal_api.app.core import clock


def test_today_uses_utc_date():
    # 06:30 in Hanoi is still the previous day in UTC
    hanoi = timezone(timedelta(hours=7))
    late = datetime(2026, 3, 2, 6, 30, tzinfo=hanoi).astimezone(timezone.utc)
    assert clock.today_iso(now=late) == "2026-03-01"
    assert clock.today_iso(7, now=late) == "2026-03-08"


def test_today_matches_timestamp_date():
    assert clock.now_iso()[:10] in {clock.today_iso(), clock.today_iso(-1)}


def test_now_iso_format():
    stamp = clock.now_iso()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2026-01-01T00:00:00.000Z")
