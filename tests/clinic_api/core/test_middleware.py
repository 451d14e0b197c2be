from clinic_api.core.middleware import RateLimiter


class _FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_rate_limiter_allows_requests_up_to_the_limit() -> None:
    limiter = RateLimiter(max_requests=3, window_seconds=60, clock=_FakeClock())

    assert [limiter.hit('10.0.0.1') for _ in range(3)] == [None, None, None]


def test_rate_limiter_blocks_until_the_window_slides() -> None:
    clock = _FakeClock()
    limiter = RateLimiter(max_requests=2, window_seconds=60, clock=clock)
    limiter.hit('10.0.0.1')
    clock.now += 10
    limiter.hit('10.0.0.1')

    clock.now += 5
    assert limiter.hit('10.0.0.1') == 45

    clock.now += 45
    assert limiter.hit('10.0.0.1') is None


def test_rate_limiter_counts_each_client_separately() -> None:
    limiter = RateLimiter(max_requests=1, window_seconds=60, clock=_FakeClock())

    assert limiter.hit('10.0.0.1') is None
    assert limiter.hit('10.0.0.2') is None
    assert limiter.hit('10.0.0.1') is not None


def test_rate_limiter_forgets_idle_clients() -> None:
    clock = _FakeClock()
    limiter = RateLimiter(max_requests=5, window_seconds=60, clock=clock)
    limiter.hit('10.0.0.1')

    clock.now += 120
    limiter.hit('10.0.0.2')

    assert '10.0.0.1' not in limiter._hits


def test_rate_limiter_prunes_at_most_once_per_window() -> None:
    clock = _FakeClock()
    limiter = RateLimiter(max_requests=5, window_seconds=60, clock=clock)
    clock.now = 1050
    limiter.hit('10.0.0.1')
    clock.now = 1060
    limiter.hit('10.0.0.2')

    clock.now = 1115
    limiter.hit('10.0.0.3')
    assert '10.0.0.1' in limiter._hits

    clock.now = 1120
    limiter.hit('10.0.0.3')
    assert '10.0.0.1' not in limiter._hits
    assert '10.0.0.2' not in limiter._hits
