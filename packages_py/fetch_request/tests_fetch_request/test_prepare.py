"""
Tests for prepare() and the authorization hooks.
"""
import base64
from typing import Any, Dict, Mapping

import pytest
from pydantic import SecretStr, ValidationError
from unittest.mock import Mock

from fetch_request import (
    AuthCredentials,
    AuthorizationError,
    AuthorizationHook,
    HttpMethod,
    OAuth1AuthorizationHook,
    OAuth1Credentials,
    RawDataCallback,
    RequestBuilder,
    StaticAuthorizationHook,
    prepare,
)
from fetch_request.auth.oauth1 import signature_base_string, sign


class RecordingHook(AuthorizationHook):
    def __init__(self):
        self.calls = []

    async def sign_and_parameterize(self, url, parameters, method) -> Dict[str, Any]:
        self.calls.append(("sign", url, dict(parameters), method))
        return {**parameters, "signature": "abc"}

    def apply_auth_header(self, url: str, headers: Mapping[str, str]) -> Dict[str, str]:
        self.calls.append(("header", url, dict(headers)))
        return {**headers, "Authorization": "Signed abc"}


class FailingHook(AuthorizationHook):
    async def sign_and_parameterize(self, url, parameters, method):
        raise RuntimeError("token service unavailable")

    def apply_auth_header(self, url, headers):
        return dict(headers)


def _request(method=HttpMethod.GET, params=None, hook=None):
    builder = RequestBuilder("https://api.example.com/r", method).params(params or {})
    if hook:
        builder.authenticate(hook)
    return builder.on_complete(RawDataCallback(Mock())).build()


@pytest.mark.asyncio
async def test_prepare_without_hook_calls_on_ready_once():
    on_ready = Mock()
    built = await prepare(_request(params={"a": "1"}), on_ready)

    on_ready.assert_called_once_with(built)
    assert built.url == "https://api.example.com/r?a=1"


@pytest.mark.asyncio
async def test_prepare_with_hook_signs_then_sets_header():
    hook = RecordingHook()
    on_ready = Mock()
    built = await prepare(_request(HttpMethod.POST, {"a": "1"}, hook), on_ready)

    assert [c[0] for c in hook.calls] == ["sign", "header"]
    assert hook.calls[0] == ("sign", "https://api.example.com/r", {"a": "1"}, HttpMethod.POST)
    assert built.body == b"a=1&signature=abc"
    assert built.headers["Authorization"] == "Signed abc"
    on_ready.assert_called_once_with(built)


@pytest.mark.asyncio
async def test_prepare_with_hook_signs_get_query():
    built = await prepare(_request(HttpMethod.GET, {"a": "1"}, RecordingHook()))
    assert built.url == "https://api.example.com/r?a=1&signature=abc"
    assert built.body is None


@pytest.mark.asyncio
async def test_prepare_does_not_mutate_request():
    request = _request(HttpMethod.POST, {"a": "1"}, RecordingHook())
    await prepare(request)
    assert dict(request.parameters) == {"a": "1"}
    assert "Authorization" not in request.headers


@pytest.mark.asyncio
async def test_hook_failure_raises_authorization_error():
    on_ready = Mock()
    with pytest.raises(AuthorizationError, match="token service unavailable"):
        await prepare(_request(hook=FailingHook()), on_ready)
    on_ready.assert_not_called()


@pytest.mark.asyncio
async def test_hook_returning_non_mapping_raises_authorization_error():
    class NoneHook(FailingHook):
        async def sign_and_parameterize(self, url, parameters, method):
            return None

    with pytest.raises(AuthorizationError, match="NoneHook failed"):
        await prepare(_request(hook=NoneHook()))


@pytest.mark.asyncio
async def test_static_bearer_hook():
    hook = StaticAuthorizationHook(AuthCredentials(type="bearer", raw_api_key=SecretStr("tok")))
    built = await prepare(_request(params={"a": "1"}, hook=hook))

    assert built.headers["Authorization"] == "Bearer tok"
    assert built.url == "https://api.example.com/r?a=1"


def test_static_basic_credentials():
    creds = AuthCredentials(type="basic", username="user", password=SecretStr("pass"))
    expected = base64.b64encode(b"user:pass").decode()
    assert creds.to_headers() == {"Authorization": f"Basic {expected}"}


def test_static_email_token_credentials():
    creds = AuthCredentials(type="bearer_email_token", email="a@b.c", raw_api_key=SecretStr("k"))
    expected = base64.b64encode(b"a@b.c:k").decode()
    assert creds.to_headers() == {"Authorization": f"Bearer {expected}"}


def test_static_api_key_and_custom_credentials():
    assert AuthCredentials(type="x-api-key", raw_api_key=SecretStr("k")).to_headers() == {"X-API-Key": "k"}
    custom = AuthCredentials(type="custom", header_name="X-Token", raw_api_key=SecretStr("k"))
    assert custom.to_headers() == {"X-Token": "k"}
    assert AuthCredentials(type="none").to_headers() == {}


def test_static_credentials_validation():
    with pytest.raises(ValidationError) as exc:
        AuthCredentials(type="basic", username="user")
    assert "Basic auth requires 'username' and 'password'" in str(exc.value)

    with pytest.raises(ValidationError):
        AuthCredentials(type="custom", raw_api_key=SecretStr("k"))


def test_static_hook_replaces_existing_authorization_header():
    hook = StaticAuthorizationHook(AuthCredentials(type="bearer", raw_api_key=SecretStr("new")))
    headers = hook.apply_auth_header("https://x.com", {"authorization": "Bearer old", "Accept": "*/*"})
    assert headers == {"Authorization": "Bearer new", "Accept": "*/*"}


# Published OAuth 1.0a example (Twitter developer documentation)
OAUTH_CREDENTIALS = OAuth1Credentials(
    consumer_key="xvz1evFS4wEEPTGEFPHBog",
    consumer_secret=SecretStr("kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw"),
    token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
    token_secret=SecretStr("LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE"),
)
OAUTH_URL = "https://api.twitter.com/1.1/statuses/update.json"
OAUTH_PARAMS = {
    "status": "Hello Ladies + Gentlemen, a signed OAuth request!",
    "include_entities": "true",
}


def _oauth_hook():
    return OAuth1AuthorizationHook(
        OAUTH_CREDENTIALS,
        nonce_factory=lambda: "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg",
        timestamp_factory=lambda: "1318622958",
    )


def test_oauth1_signature_base_string():
    hook = _oauth_hook()
    pairs = list(OAUTH_PARAMS.items()) + list(hook.oauth_parameters().items())
    base = signature_base_string("POST", OAUTH_URL, pairs)

    assert base == (
        "POST&https%3A%2F%2Fapi.twitter.com%2F1.1%2Fstatuses%2Fupdate.json&"
        "include_entities%3Dtrue%26oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog%26"
        "oauth_nonce%3DkYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg%26"
        "oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1318622958%26"
        "oauth_token%3D370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb%26"
        "oauth_version%3D1.0%26status%3DHello%2520Ladies%2520%252B%2520Gentlemen"
        "%252C%2520a%2520signed%2520OAuth%2520request%2521"
    )
    assert sign(
        base,
        "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
        "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
    ) == "hCtSmYh+iHYCEqBWrE7C7hYmtUk="


@pytest.mark.asyncio
async def test_oauth1_hook_sets_authorization_header():
    request = (
        RequestBuilder(OAUTH_URL, HttpMethod.POST)
        .params(OAUTH_PARAMS)
        .authenticate(_oauth_hook())
        .on_complete(RawDataCallback(Mock()))
        .build()
    )
    built = await prepare(request)

    header = built.headers["Authorization"]
    assert header.startswith("OAuth ")
    assert 'oauth_signature="hCtSmYh%2BiHYCEqBWrE7C7hYmtUk%3D"' in header
    assert 'oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog"' in header
    assert "status" not in header
    assert built.body == (
        b"include_entities=true&"
        b"status=Hello+Ladies+++Gentlemen%2C+a+signed+OAuth+request%21"
    )


def test_oauth1_header_requires_signing_first():
    with pytest.raises(AuthorizationError):
        _oauth_hook().apply_auth_header(OAUTH_URL, {})
