from intake_bot.services.rate_limiter import Allowed, Denied, RateLimiter


def test_first_submission_is_allowed():
    limiter = RateLimiter(cooldown_seconds=60, clock=lambda: 0.0)
    assert limiter.check(1) == Allowed()


def test_check_does_not_record():
    limiter = RateLimiter(cooldown_seconds=60)
    limiter.check(1, now=5.0)
    assert limiter.last_submission(1) is None
    assert limiter.check(1, now=6.0) == Allowed()


def test_denied_inside_window_rounds_up():
    limiter = RateLimiter(cooldown_seconds=60)
    limiter.record(1, now=100.0)

    assert limiter.check(1, now=100.0) == Denied(seconds_remaining=60)
    assert limiter.check(1, now=100.001) == Denied(seconds_remaining=60)
    assert limiter.check(1, now=130.0) == Denied(seconds_remaining=30)
    assert limiter.check(1, now=159.2) == Denied(seconds_remaining=1)


def test_allowed_once_cooldown_elapsed():
    limiter = RateLimiter(cooldown_seconds=60)
    limiter.record(1, now=100.0)

    assert limiter.check(1, now=160.0) == Allowed()
    assert limiter.check(1, now=500.0) == Allowed()


def test_users_do_not_share_cooldown():
    limiter = RateLimiter(cooldown_seconds=60)
    limiter.record(1, now=100.0)

    assert limiter.check(2, now=101.0) == Allowed()


def test_record_uses_clock_by_default():
    limiter = RateLimiter(cooldown_seconds=60, clock=lambda: 42.0)
    limiter.record(7)
    assert limiter.last_submission(7) == 42.0
    assert limiter.check(7) == Denied(seconds_remaining=60)


def test_reset_forgets_everyone():
    limiter = RateLimiter(cooldown_seconds=60)
    limiter.record(1, now=0.0)
    limiter.reset()
    assert limiter.check(1, now=1.0) == Allowed()
