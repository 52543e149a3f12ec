"""Route-level access gate.

A pure decision over the requested path, its raw query string and
whether the request carries a valid session. The HTTP middleware owns
cookie parsing and exempt prefixes; this module only decides.
"""

from dataclasses import dataclass
from typing import Union
from urllib.parse import parse_qs, quote

AUTH_PAGES = ("/login", "/signup")
LOGIN_PATH = "/login"
DEFAULT_REDIRECT = "/"
CALLBACK_URL_PARAM = "callbackUrl"


@dataclass(frozen=True)
class Allow:
    """Let the navigation through."""


@dataclass(frozen=True)
class Redirect:
    """Send the browser to ``target`` instead."""

    target: str


GateDecision = Union[Allow, Redirect]


def is_auth_page(path: str) -> bool:
    """True for ``/login``, ``/signup`` and anything below them.

    Matching is by path segment, so ``/login-help`` is not an auth page.
    """
    normalized = path.rstrip("/") or "/"
    return any(
        normalized == page or normalized.startswith(page + "/") for page in AUTH_PAGES
    )


def safe_callback_url(value: str | None, default: str = DEFAULT_REDIRECT) -> str:
    """Return ``value`` when it is a same-site relative path, else ``default``.

    Protocol-relative (``//host``) and backslash variants are rejected
    because browsers resolve them to another origin.
    """
    if not value or not value.startswith("/"):
        return default
    if value.startswith("//") or value.startswith("/\\"):
        return default
    if any(ch in value for ch in "\r\n\t"):
        return default
    return value


def login_redirect_target(path: str, query: str = "") -> str:
    destination = f"{path}?{query}" if query else path
    return f"{LOGIN_PATH}?{CALLBACK_URL_PARAM}={quote(destination, safe='/')}"


def decide(path: str, query: str, has_session: bool) -> GateDecision:
    """Decide whether a navigation proceeds or redirects.

    Parameters
    ----------
    path
        The requested path, without query string
    query
        The raw (still encoded) query string, possibly empty
    has_session
        Whether the request carries a valid session

    Returns
    -------
    ``Allow()`` or ``Redirect(target)``
    """
    if is_auth_page(path):
        if not has_session:
            return Allow()
        values = parse_qs(query or "").get(CALLBACK_URL_PARAM)
        return Redirect(safe_callback_url(values[0] if values else None))

    if has_session:
        return Allow()
    return Redirect(login_redirect_target(path, query))
