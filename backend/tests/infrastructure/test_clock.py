from datetime import datetime, timezone

from infra_kata.infrastructure.clock import get_clock, utc_now


def test_utc_now_is_aware_utc():
    now = utc_now()
    assert now.utcoffset().total_seconds() == 0


def test_get_clock_returns_system_clock():
    clock = get_clock()
    assert clock is utc_now
    assert abs((clock() - datetime.now(timezone.utc)).total_seconds()) < 5
