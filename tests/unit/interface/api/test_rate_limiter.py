"""Unit tests for the fixed-window rate limiter."""

from starlette.requests import Request

from chirp.interface.api.middleware import FixedWindowRateLimiter, client_key


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestFixedWindowRateLimiter:
    """Tests for FixedWindowRateLimiter.hit()."""

    def test_allows_up_to_limit(self):
        """Should allow exactly ``requests`` hits per window."""
        limiter = FixedWindowRateLimiter(3, 60, clock=FakeClock())

        results = [limiter.hit("1.2.3.4")[0] for _ in range(4)]

        assert results == [True, True, True, False]

    def test_retry_after_counts_down_to_window_end(self):
        """Should tell the client how long until the window resets."""
        clock = FakeClock(1000.0)  # window [960, 1020)
        limiter = FixedWindowRateLimiter(1, 60, clock=clock)
        limiter.hit("1.2.3.4")

        allowed, retry_after = limiter.hit("1.2.3.4")

        assert allowed is False
        assert retry_after == 20

    def test_new_window_resets_counts(self):
        """Should start counting afresh in the next window."""
        clock = FakeClock(1000.0)
        limiter = FixedWindowRateLimiter(1, 60, clock=clock)
        limiter.hit("1.2.3.4")
        assert limiter.hit("1.2.3.4")[0] is False

        clock.now = 1020.0

        assert limiter.hit("1.2.3.4") == (True, 0)

    def test_keys_are_independent(self):
        """One client's traffic doesn't count against another."""
        limiter = FixedWindowRateLimiter(1, 60, clock=FakeClock())

        assert limiter.hit("1.1.1.1")[0] is True
        assert limiter.hit("2.2.2.2")[0] is True
        assert limiter.hit("1.1.1.1")[0] is False


class TestClientKey:
    """Tests for client_key()."""

    @staticmethod
    def _request(headers=None, client=("198.51.100.7", 5000)):
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/posts",
            "headers": [
                (name.lower().encode(), value.encode())
                for name, value in (headers or {}).items()
            ],
            "client": client,
        }
        return Request(scope)

    def test_uses_peer_address(self):
        assert client_key(self._request()) == "198.51.100.7"

    def test_ignores_forwarded_for_header(self):
        request = self._request(headers={"X-Forwarded-For": "203.0.113.9, 10.0.0.1"})

        assert client_key(request) == "198.51.100.7"

    def test_missing_peer(self):
        assert client_key(self._request(client=None)) == "unknown"
