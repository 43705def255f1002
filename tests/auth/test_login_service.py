"""
Login protocol tests.

Both failure paths of the token contract are pinned here: an expired token
and a malformed token each raise and leave the session exactly as if no
login had happened.
"""

from urllib.parse import parse_qs, urlparse

import pytest

from mizu.auth.service import LoginService
from mizu.errors import (
    DecodeError,
    ExpiredTokenError,
    GraphQLError,
    InvalidArgumentError,
    NotAuthenticatedError,
    UnexpectedResponseError,
)

from tests.factories import APP_ID, ENDPOINTS, USER_ID, make_token


KEYLESS_URL = "https://keyless.example/keyless_google"


def _service(session, executor) -> LoginService:
    return LoginService(session, executor, keyless_google_url=KEYLESS_URL)


class TestLoginWithIdentity:

    @pytest.mark.asyncio
    async def test_success_sets_user_and_token_together(self, session, executor):
        token = make_token()
        executor.respond("LoginMutation", {"tgLogin": token})

        user_id = await _service(session, executor).login_with_identity("query_id=AAE&user=%7B%7D")

        assert user_id == USER_ID
        assert session.user_id == USER_ID
        assert session.session_token == token
        call = executor.calls[0]
        assert call["endpoint"] == ENDPOINTS[session.network]
        assert call["variables"] == {"appId": APP_ID, "initData": "query_id=AAE&user=%7B%7D"}
        assert "Authorization" not in call["headers"]

    @pytest.mark.asyncio
    async def test_expired_token_raises_and_leaves_no_session(self, session, executor):
        executor.respond("LoginMutation", {"tgLogin": make_token(expires_in=-60)})

        with pytest.raises(ExpiredTokenError):
            await _service(session, executor).login_with_identity("init")

        assert session.user_id == ""
        assert session.session_token == ""
        assert not session.is_authenticated

    @pytest.mark.asyncio
    async def test_malformed_token_raises_and_leaves_no_session(self, session, executor):
        executor.respond("LoginMutation", {"tgLogin": "garbage"})

        with pytest.raises(DecodeError):
            await _service(session, executor).login_with_identity("init")

        assert session.user_id == ""
        assert session.session_token == ""

    @pytest.mark.asyncio
    async def test_failed_relogin_clears_previous_session(self, logged_in_session, executor):
        executor.respond("LoginMutation", {"tgLogin": make_token(expires_in=-1)})

        with pytest.raises(ExpiredTokenError):
            await _service(logged_in_session, executor).login_with_identity("init")

        assert logged_in_session.user_id == ""
        assert logged_in_session.session_token == ""

    @pytest.mark.asyncio
    async def test_failed_relogin_without_token_clears_previous_session(
        self, logged_in_session, executor
    ):
        executor.respond("LoginMutation", {})

        with pytest.raises(UnexpectedResponseError):
            await _service(logged_in_session, executor).login_with_identity("init")

        assert logged_in_session.user_id == ""
        assert logged_in_session.session_token == ""

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, session, executor):
        executor.respond("LoginMutation", GraphQLError([{"message": "invalid initData"}]))

        with pytest.raises(GraphQLError, match="invalid initData"):
            await _service(session, executor).login_with_identity("init")

        assert not session.is_authenticated

    @pytest.mark.asyncio
    async def test_missing_token_field_is_unexpected_response(self, session, executor):
        executor.respond("LoginMutation", {})

        with pytest.raises(UnexpectedResponseError):
            await _service(session, executor).login_with_identity("init")

    @pytest.mark.asyncio
    async def test_empty_init_data_is_rejected_before_network(self, session, executor):
        with pytest.raises(InvalidArgumentError):
            await _service(session, executor).login_with_identity("")

        assert executor.calls == []


class TestCheckUserExists:

    @pytest.mark.asyncio
    async def test_returns_true_when_backend_has_a_match(self, session, executor):
        executor.respond(
            "CheckUserIsExistQueryByTgId",
            {"telegramUser": [{"walletUserId": USER_ID, "tgId": 5512345678}]},
        )

        assert await _service(session, executor).check_user_exists("5512345678") is True

        call = executor.calls[0]
        assert call["headers"] == {"x-hasura-tg-id": "5512345678"}
        assert call["variables"] == {}

    @pytest.mark.asyncio
    async def test_returns_false_for_empty_result(self, session, executor):
        executor.respond("CheckUserIsExistQueryByTgId", {"telegramUser": []})

        assert await _service(session, executor).check_user_exists("1") is False

    @pytest.mark.asyncio
    async def test_does_not_need_login(self, session, executor):
        executor.respond("CheckUserIsExistQueryByTgId", {"telegramUser": None})

        assert await _service(session, executor).check_user_exists("1") is False

    @pytest.mark.asyncio
    async def test_empty_id_is_rejected_before_network(self, session, executor):
        with pytest.raises(InvalidArgumentError):
            await _service(session, executor).check_user_exists("")

        assert executor.calls == []


class TestIdentityBinding:

    @pytest.mark.asyncio
    async def test_wallet_address_returns_first_sub_wallet(self, logged_in_session, executor):
        executor.respond(
            "UserWalletAddressQuery",
            {"walletUserByPk": {"sub_wallets": [{"address": "0xabc"}, {"address": "0xdef"}]}},
        )

        address = await _service(logged_in_session, executor).get_user_wallet_address()

        assert address == "0xabc"
        call = executor.calls[0]
        assert call["variables"] == {"id": USER_ID}
        assert call["headers"]["Authorization"] == f"Bearer {logged_in_session.session_token}"

    @pytest.mark.asyncio
    async def test_wallet_address_is_none_without_sub_wallets(self, logged_in_session, executor):
        executor.respond("UserWalletAddressQuery", {"walletUserByPk": {"sub_wallets": []}})

        assert await _service(logged_in_session, executor).get_user_wallet_address() is None

    @pytest.mark.asyncio
    async def test_bind_google_account_sends_address_and_id_token(self, logged_in_session, executor):
        executor.respond("BindGoogleMutation", {"bindGoogle": True})

        bound = await _service(logged_in_session, executor).bind_google_account("0xkeyless", "google-jwt")

        assert bound is True
        assert executor.calls[0]["variables"] == {"address": "0xkeyless", "idToken": "google-jwt"}

    @pytest.mark.asyncio
    async def test_bind_google_account_requires_login(self, session, executor):
        with pytest.raises(NotAuthenticatedError):
            await _service(session, executor).bind_google_account("0xkeyless", "google-jwt")

        assert executor.calls == []

    def test_build_bind_google_url_carries_token_and_app(self, logged_in_session, executor):
        url = _service(logged_in_session, executor).build_bind_google_url("https://app.example/done")

        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == KEYLESS_URL
        assert query == {
            "token": [logged_in_session.session_token],
            "appId": [APP_ID],
            "redirect_uri": ["https://app.example/done"],
        }
