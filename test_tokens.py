import time

import jwt
import pytest

from backerhub.auth.tokens import TokenService, TokenClaims, InvalidToken

SECRET = 'unit-test-secret'


@pytest.fixture
def token_service():
    return TokenService(SECRET)


def test_generated_token_carries_user_id(token_service):
    token = token_service.generate_token(42)

    assert token_service.validate_token(token) == TokenClaims(user_id=42)


def test_token_signed_with_other_key_is_rejected(token_service):
    token = jwt.encode({'user_id': 1}, 'someone-else', algorithm='HS256')

    with pytest.raises(InvalidToken):
        token_service.validate_token(token)


@pytest.mark.parametrize('payload', [
    {},
    {'user_id': '1'},
    {'user_id': 1.5},
    {'user_id': True},
    {'user_id': None},
])
def test_missing_or_mistyped_user_id_claim_is_rejected(token_service, payload):
    token = jwt.encode(payload, SECRET, algorithm='HS256')

    with pytest.raises(InvalidToken):
        token_service.validate_token(token)


def test_garbage_and_empty_tokens_are_rejected(token_service):
    for token in ('', 'not-a-jwt', 'a.b.c'):
        with pytest.raises(InvalidToken):
            token_service.validate_token(token)


def test_unsigned_token_is_rejected(token_service):
    token = jwt.encode({'user_id': 1}, None, algorithm='none')

    with pytest.raises(InvalidToken):
        token_service.validate_token(token)


def test_expired_token_is_rejected():
    service = TokenService(SECRET, expires_seconds=1)
    token = jwt.encode({'user_id': 1, 'exp': int(time.time()) - 10}, SECRET, algorithm='HS256')

    with pytest.raises(InvalidToken):
        service.validate_token(token)


def test_tokens_without_expiry_when_disabled(token_service):
    payload = jwt.decode(token_service.generate_token(7), SECRET, algorithms=['HS256'])

    assert payload == {'user_id': 7}


def test_secret_key_is_required():
    with pytest.raises(ValueError):
        TokenService('')
