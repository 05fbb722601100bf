from datetime import timedelta

from taobei_auth.application.services.session_store import SessionStore


def test_issue_sets_seven_day_expiry(fakes, clock):
    store = SessionStore(repo=fakes.SessionRepo(), clock=clock, random_source=fakes.RandomSource())
    s = store.issue("user-1")
    assert s.user_id == "user-1"
    assert s.issued_at == clock.now()
    assert s.expires_at == clock.now() + timedelta(days=7)


def test_issue_uses_256_bit_tokens(fakes, clock):
    store = SessionStore(repo=fakes.SessionRepo(), clock=clock, random_source=fakes.RandomSource())
    assert len(store.issue("user-1").token) == 64


def test_multiple_tokens_coexist_for_one_user(fakes, clock):
    store = SessionStore(repo=fakes.SessionRepo(), clock=clock, random_source=fakes.RandomSource())
    first = store.issue("user-1")
    second = store.issue("user-1")
    assert first.token != second.token
    assert store.resolve(first.token) is not None
    assert store.resolve(second.token) is not None


def test_resolve_unknown_token(fakes, clock):
    store = SessionStore(repo=fakes.SessionRepo(), clock=clock, random_source=fakes.RandomSource())
    assert store.resolve("nope") is None
