"""Tests for state and session signing."""
from mailchimp_oauth.security import sign_session, sign_state, verify_session, verify_state


def test_state_matches_its_cookie(settings):
    state = sign_state(settings)
    assert verify_state(settings, state, state)


def test_state_of_another_login_is_rejected(settings):
    assert not verify_state(settings, sign_state(settings), sign_state(settings))


def test_state_without_cookie_is_rejected(settings):
    assert not verify_state(settings, sign_state(settings), None)


def test_state_signed_with_other_key_is_rejected(settings):
    other = settings.model_copy(update={"secret_key": "other-key"})
    state = sign_state(other)
    assert not verify_state(settings, state, state)


def test_expired_state_is_rejected(settings):
    expired = settings.model_copy(update={"state_max_age": -1})
    state = sign_state(settings)
    assert not verify_state(expired, state, state)


def test_session_is_not_accepted_as_state(settings):
    session = sign_session(settings, "tok", "us1")
    assert not verify_state(settings, session, session)


def test_session_round_trip(settings):
    signed = sign_session(settings, "tok", "us1")
    assert verify_session(settings, signed) == {"access_token": "tok", "dc": "us1"}


def test_tampered_session_is_rejected(settings):
    assert verify_session(settings, sign_session(settings, "tok", "us1") + "x") is None
