from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from simplebank.modules.tokens import (
    ExpiredTokenError,
    InvalidTokenError,
    JWTMaker,
    LocalTokenMaker,
    TokenScheme,
    new_token_maker,
)
from simplebank.modules.tokens.local_maker import HEADER
from simplebank.modules.tokens.maker import b64url_encode

from .factories import TEST_SYMMETRIC_KEY

OTHER_KEY = "abcdefghijklmnopqrstuvwxyz012345"
MAKERS = [JWTMaker, LocalTokenMaker]


def _fixed_clock(moment: datetime):
    return lambda: moment


def _tamper(token: str, position: int) -> str:
    replacement = "A" if token[position] != "A" else "B"
    return token[:position] + replacement + token[position + 1 :]


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_round_trip(maker_cls):
    maker = maker_cls(TEST_SYMMETRIC_KEY)
    issued = datetime.now(timezone.utc)

    token = maker.create_token("alice", timedelta(minutes=1))
    payload = maker.verify_token(token)

    assert payload.username == "alice"
    assert payload.id is not None
    assert abs(payload.issued_at - issued) < timedelta(seconds=5)
    assert payload.expired_at - payload.issued_at == timedelta(minutes=1)


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_each_token_has_a_fresh_id(maker_cls):
    maker = maker_cls(TEST_SYMMETRIC_KEY)
    first = maker.verify_token(maker.create_token("alice", timedelta(minutes=1)))
    second = maker.verify_token(maker.create_token("alice", timedelta(minutes=1)))
    assert first.id != second.id


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_token_expires_at_expiry_instant(maker_cls):
    issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    token = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at)).create_token(
        "alice", timedelta(minutes=1)
    )

    just_before = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at + timedelta(seconds=59)))
    assert just_before.verify_token(token).username == "alice"

    at_expiry = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at + timedelta(minutes=1)))
    with pytest.raises(ExpiredTokenError):
        at_expiry.verify_token(token)


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_expired_token_is_not_reported_as_invalid(maker_cls):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(past)).create_token("alice", timedelta(minutes=1))

    with pytest.raises(ExpiredTokenError) as exc_info:
        maker_cls(TEST_SYMMETRIC_KEY).verify_token(token)
    assert not isinstance(exc_info.value, InvalidTokenError)
    assert str(exc_info.value) == "token has expired"


@pytest.mark.parametrize("maker_cls", MAKERS)
@pytest.mark.parametrize("duration", [timedelta(0), timedelta(minutes=-1)])
def test_non_positive_duration_is_rejected(maker_cls, duration):
    with pytest.raises(ValueError):
        maker_cls(TEST_SYMMETRIC_KEY).create_token("alice", duration)


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_short_key_is_rejected(maker_cls):
    with pytest.raises(ValueError, match="invalid key size"):
        maker_cls("x" * 31)


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_token_signed_with_another_key_is_invalid(maker_cls):
    token = maker_cls(OTHER_KEY).create_token("alice", timedelta(minutes=1))
    with pytest.raises(InvalidTokenError):
        maker_cls(TEST_SYMMETRIC_KEY).verify_token(token)


def test_tampered_jwt_signature_is_invalid():
    maker = JWTMaker(TEST_SYMMETRIC_KEY)
    token = maker.create_token("alice", timedelta(minutes=1))
    header, claims, signature = token.split(".")
    tampered = ".".join([header, claims, _tamper(signature, len(signature) // 2)])

    with pytest.raises(InvalidTokenError):
        maker.verify_token(tampered)


def test_tampered_jwt_claims_are_invalid():
    maker = JWTMaker(TEST_SYMMETRIC_KEY)
    token = maker.create_token("alice", timedelta(minutes=1))
    header, claims, signature = token.split(".")
    forged_claims = jwt.get_unverified_claims(token)
    forged_claims["username"] = "mallory"
    forged = b64url_encode(json.dumps(forged_claims).encode())

    with pytest.raises(InvalidTokenError):
        maker.verify_token(".".join([header, forged, signature]))


def test_tampered_local_token_is_invalid():
    maker = LocalTokenMaker(TEST_SYMMETRIC_KEY)
    token = maker.create_token("alice", timedelta(minutes=1))
    body_start = len(HEADER)
    position = body_start + (len(token) - body_start) // 2

    with pytest.raises(InvalidTokenError):
        maker.verify_token(_tamper(token, position))


def test_non_canonical_trailing_character_is_invalid():
    maker = LocalTokenMaker(TEST_SYMMETRIC_KEY)
    token = maker.create_token("alice", timedelta(minutes=1))
    last = token[-1]
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
    # A neighbour in the alphabet differs only in the low bits, which may be padding.
    neighbour = alphabet[alphabet.index(last) ^ 1]

    with pytest.raises(InvalidTokenError):
        maker.verify_token(token[:-1] + neighbour)


def test_unsigned_jwt_is_rejected():
    maker = JWTMaker(TEST_SYMMETRIC_KEY)
    claims = maker.verify_token(maker.create_token("alice", timedelta(minutes=1))).to_claims()
    header = b64url_encode(json.dumps({"alg": "none", "typ": "JWT"}).encode())
    body = b64url_encode(json.dumps(claims).encode())

    with pytest.raises(InvalidTokenError):
        maker.verify_token(f"{header}.{body}.")


@pytest.mark.parametrize("token", ["", "garbage", "a.b", "local.", "local.!!!", "x.y.z"])
@pytest.mark.parametrize("maker_cls", MAKERS)
def test_malformed_tokens_are_invalid(maker_cls, token):
    with pytest.raises(InvalidTokenError):
        maker_cls(TEST_SYMMETRIC_KEY).verify_token(token)


def test_tokens_do_not_cross_schemes():
    jwt_token = JWTMaker(TEST_SYMMETRIC_KEY).create_token("alice", timedelta(minutes=1))
    local_token = LocalTokenMaker(TEST_SYMMETRIC_KEY).create_token("alice", timedelta(minutes=1))

    with pytest.raises(InvalidTokenError):
        LocalTokenMaker(TEST_SYMMETRIC_KEY).verify_token(jwt_token)
    with pytest.raises(InvalidTokenError):
        JWTMaker(TEST_SYMMETRIC_KEY).verify_token(local_token)


def test_factory_dispatches_on_scheme():
    assert isinstance(new_token_maker("jwt", TEST_SYMMETRIC_KEY), JWTMaker)
    assert isinstance(new_token_maker(TokenScheme.LOCAL, TEST_SYMMETRIC_KEY), LocalTokenMaker)
    with pytest.raises(ValueError):
        new_token_maker("paseto", TEST_SYMMETRIC_KEY)


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_token_is_not_valid_before_it_was_issued(maker_cls):
    issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    token = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at)).create_token(
        "alice", timedelta(minutes=1)
    )

    behind = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at - timedelta(seconds=1)))
    with pytest.raises(InvalidTokenError):
        behind.verify_token(token)

    at_issue = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at))
    assert at_issue.verify_token(token).issued_at == issued_at


@pytest.mark.parametrize("bad_id", [123, None, ["not", "a", "uuid"]])
def test_jwt_with_non_string_id_is_invalid(bad_id):
    now = datetime.now(timezone.utc)
    claims = {
        "id": bad_id,
        "username": "alice",
        "issued_at": now.isoformat(),
        "expired_at": (now + timedelta(minutes=1)).isoformat(),
    }
    token = jwt.encode(claims, TEST_SYMMETRIC_KEY, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        JWTMaker(TEST_SYMMETRIC_KEY).verify_token(token)


@pytest.mark.parametrize("maker_cls", MAKERS)
def test_issue_token_returns_the_sealed_payload(maker_cls):
    issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    maker = maker_cls(TEST_SYMMETRIC_KEY, clock=_fixed_clock(issued_at))

    token, payload = maker.issue_token("alice", timedelta(minutes=15))

    assert payload.issued_at == issued_at
    assert payload.expired_at == issued_at + timedelta(minutes=15)
    assert maker.verify_token(token) == payload
