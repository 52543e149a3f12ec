"""Unit tests for the access gate decision."""

import pytest

from blogger_identity.application import Allow, Redirect, decide, safe_callback_url
from blogger_identity.application.access_gate import is_auth_page


class TestDecide:
    def test_protected_page_without_session_redirects_to_login(self):
        assert decide("/dashboard", "", has_session=False) == Redirect(
            "/login?callbackUrl=/dashboard",
        )

    def test_protected_page_keeps_query_in_callback(self):
        decision = decide("/posts/edit", "id=3&draft=1", has_session=False)

        assert decision == Redirect(
            "/login?callbackUrl=/posts/edit%3Fid%3D3%26draft%3D1",
        )

    def test_protected_page_with_session_is_allowed(self):
        assert decide("/dashboard", "", has_session=True) == Allow()

    @pytest.mark.parametrize("path", ["/login", "/signup", "/login/reset", "/signup/"])
    def test_auth_page_without_session_is_allowed(self, path):
        assert decide(path, "", has_session=False) == Allow()

    def test_auth_page_with_session_redirects_home(self):
        assert decide("/login", "", has_session=True) == Redirect("/")

    def test_auth_page_with_session_follows_callback_url(self):
        decision = decide("/login", "callbackUrl=%2Fposts%2F1", has_session=True)

        assert decision == Redirect("/posts/1")

    @pytest.mark.parametrize(
        "callback",
        ["https%3A%2F%2Fevil.example", "%2F%2Fevil.example", "javascript%3Aalert(1)"],
    )
    def test_auth_page_with_session_ignores_foreign_callback(self, callback):
        decision = decide("/signup", f"callbackUrl={callback}", has_session=True)

        assert decision == Redirect("/")

    def test_root_is_protected(self):
        assert decide("/", "", has_session=False) == Redirect("/login?callbackUrl=/")


class TestIsAuthPage:
    def test_similar_prefix_is_not_an_auth_page(self):
        assert not is_auth_page("/login-help")
        assert not is_auth_page("/signups")

    def test_sub_paths_are_auth_pages(self):
        assert is_auth_page("/signup/verify")


class TestSafeCallbackUrl:
    @pytest.mark.parametrize("value", ["/", "/posts/1?tab=2", "/a#b"])
    def test_relative_paths_pass(self, value):
        assert safe_callback_url(value) == value

    @pytest.mark.parametrize(
        "value",
        [None, "", "posts", "//evil.example", "/\\evil.example", "https://x.y/", "/a\nb"],
    )
    def test_everything_else_falls_back(self, value):
        assert safe_callback_url(value) == "/"

    def test_custom_default(self):
        assert safe_callback_url(None, default="/home") == "/home"
