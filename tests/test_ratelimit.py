import threading

import pytest

from tonekit.utils.ratelimit import WarmingUpRateLimiter


def test_initial_status_starts_at_step():
    limiter = WarmingUpRateLimiter(100, 10, auto_tick=False)
    assert limiter.current_status() == (0, 100, 10, 10)


def test_step_is_at_least_one():
    limiter = WarmingUpRateLimiter(50, 100, auto_tick=False)
    assert limiter.current_status() == (0, 50, 1, 100)


def test_tick_records_count_and_caps_allowance():
    limiter = WarmingUpRateLimiter(1000, 1, auto_tick=False)
    for _ in range(3):
        limiter.take()
    limiter.tick()
    last_qps, maximum, current, _ = limiter.current_status()
    assert last_qps == 3
    assert maximum == 1000
    assert current == 1000


def test_take_blocks_until_tick_when_exhausted():
    limiter = WarmingUpRateLimiter(2, 1, auto_tick=False)
    limiter.take()
    limiter.take()
    done = threading.Event()

    def third():
        limiter.take()
        done.set()

    worker = threading.Thread(target=third, daemon=True)
    worker.start()
    worker.join(timeout=0.3)
    assert not done.is_set()
    limiter.tick()
    assert limiter.current_status()[0] == 2
    worker.join(timeout=3)
    assert done.is_set()


def test_non_positive_limit_is_ignored():
    limiter = WarmingUpRateLimiter(100, 10, auto_tick=False)
    before = limiter.current_status()
    limiter.set_limit(0)
    limiter.set_limit(-5)
    assert limiter.current_status() == before


def test_setters_update_status():
    limiter = WarmingUpRateLimiter(100, 10, auto_tick=False)
    limiter.set_limit_and_warming_period(500, 5)
    status = limiter.current_status()
    assert status[1] == 500
    assert status[3] == 5
    limiter.set_warm_up_period(4)
    assert limiter.current_status()[3] == 4
    limiter.set_limit(300)
    assert limiter.current_status()[1] == 300


def test_zero_period_rejected():
    limiter = WarmingUpRateLimiter(100, 10, auto_tick=False)
    with pytest.raises(ValueError):
        limiter.set_limit_and_warming_period(100, 0)
    with pytest.raises(ValueError):
        WarmingUpRateLimiter(100, 0, auto_tick=False)


def test_non_positive_max_token_rejected():
    with pytest.raises(ValueError):
        WarmingUpRateLimiter(0, 1, auto_tick=False)