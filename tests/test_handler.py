"""Tests for SiteRedirectApp — the ASGI form, driven through TestClient."""

from typing import Any

import pytest

from siteredirect.config import RedirectConfig
from siteredirect.errors import ConfigurationError, MissingSignalSourceError
from siteredirect.server.handler import SiteRedirectApp
from siteredirect.testing import TestClient

REDIRECT_MAP = {"A": "a", "B": "b", "b": "b", "C": "c"}


def _config(**overrides: object) -> RedirectConfig:
    base: dict[str, object] = {
        "base_url": "https://www.mysite.com",
        "default_path": "default/",
        "redirect_cookies": (),
        "redirect_headers": ("header1",),
        "redirection_map": REDIRECT_MAP,
    }
    base.update(overrides)
    return RedirectConfig(**base)  # type: ignore[arg-type]


class RecordingApp:
    """Inner ASGI app that answers "hello" and records what it was given."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, scope, receive, send) -> None:
        self.calls.append({"scope": scope, "receive": receive, "send": send})
        if scope["type"] != "http":
            return
        message = await receive()
        body = b"hello" + message.get("body", b"")
        await send(
            {
                "type": "http.response.start",
                "status": 200,
                "headers": [(b"content-type", b"text/plain"), (b"x-inner", b"1")],
            }
        )
        await send({"type": "http.response.body", "body": body})


class TestScenarios:
    @pytest.mark.anyio
    async def test_no_headers_uses_default(self) -> None:
        inner = RecordingApp()
        async with TestClient(SiteRedirectApp(inner, _config(), "test")) as client:
            response = await client.get("/")

        assert response.status == 301
        assert response.location == "https://www.mysite.com/default/"
        assert inner.calls == []

    @pytest.mark.anyio
    async def test_header_match(self) -> None:
        app = SiteRedirectApp(RecordingApp(), _config(redirect_headers=["header2"]))
        async with TestClient(app) as client:
            response = await client.get("/", headers={"header2": "A"})

        assert response.location == "https://www.mysite.com/a/"

    @pytest.mark.anyio
    async def test_unmapped_header_uses_default(self) -> None:
        async with TestClient(SiteRedirectApp(RecordingApp(), _config())) as client:
            response = await client.get("/", headers={"header1": "D"})

        assert response.location == "https://www.mysite.com/default/"

    @pytest.mark.anyio
    async def test_cookie_beats_header(self) -> None:
        app = SiteRedirectApp(RecordingApp(), _config(redirect_cookies=["header2"]))
        async with TestClient(app) as client:
            response = await client.get("/", headers={"header1": "b"}, cookies={"header2": "C"})

        assert response.location == "https://www.mysite.com/c/"

    @pytest.mark.anyio
    async def test_non_root_path_passes_through(self) -> None:
        inner = RecordingApp()
        app = SiteRedirectApp(inner, _config(redirect_cookies=["header2"]))
        async with TestClient(app) as client:
            response = await client.get(
                "/noexist", headers={"header1": "b"}, cookies={"header2": "C"}
            )

        assert response.status == 200
        assert response.body == b"hello"
        assert response.content_type == "text/plain"
        assert response.header("x-inner") == "1"
        assert response.location is None
        assert len(inner.calls) == 1


class TestPassthrough:
    @pytest.mark.anyio
    async def test_body_reaches_inner_app_unread(self) -> None:
        async with TestClient(SiteRedirectApp(RecordingApp(), _config())) as client:
            response = await client.request("POST", "/submit", body=b" world")

        assert response.body == b"hello world"

    @pytest.mark.anyio
    async def test_original_scope_forwarded(self) -> None:
        inner = RecordingApp()
        async with TestClient(SiteRedirectApp(inner, _config())) as client:
            await client.get("/page?x=1", headers={"header1": "A"})

        scope = inner.calls[0]["scope"]
        assert scope["path"] == "/page"
        assert scope["query_string"] == b"x=1"
        assert (b"header1", b"A") in scope["headers"]

    @pytest.mark.anyio
    async def test_lifespan_scope_forwarded(self) -> None:
        inner = RecordingApp()
        app = SiteRedirectApp(inner, _config())

        async def receive() -> dict[str, Any]:
            return {"type": "lifespan.startup"}

        async def send(message: dict[str, Any]) -> None:
            pytest.fail("middleware must not answer lifespan scopes")

        await app({"type": "lifespan"}, receive, send)

        assert inner.calls[0]["receive"] is receive
        assert inner.calls[0]["send"] is send


class TestRedirectResponse:
    @pytest.mark.anyio
    async def test_get_body_links_to_location(self) -> None:
        async with TestClient(SiteRedirectApp(RecordingApp(), _config())) as client:
            response = await client.get("/", headers={"header1": "A"})

        assert response.content_type == "text/html; charset=utf-8"
        assert response.body == b'<a href="https://www.mysite.com/a/">Moved Permanently</a>.\n\n'

    @pytest.mark.anyio
    async def test_head_has_no_body(self) -> None:
        async with TestClient(SiteRedirectApp(RecordingApp(), _config())) as client:
            response = await client.request("HEAD", "/", headers={"header1": "A"})

        assert response.status == 301
        assert response.location == "https://www.mysite.com/a/"
        assert response.content_type == "text/html; charset=utf-8"
        assert response.body == b""

    @pytest.mark.anyio
    async def test_post_has_no_content_type(self) -> None:
        async with TestClient(SiteRedirectApp(RecordingApp(), _config())) as client:
            response = await client.request("POST", "/", headers={"header1": "A"})

        assert response.status == 301
        assert response.location == "https://www.mysite.com/a/"
        assert response.content_type == ""
        assert response.body == b""

    @pytest.mark.anyio
    async def test_non_ascii_target_is_sent_percent_encoded(self) -> None:
        config = _config(redirection_map={"JP": "日本"})
        async with TestClient(SiteRedirectApp(RecordingApp(), config)) as client:
            response = await client.get("/", headers={"header1": "JP"})

        assert response.status == 301
        assert response.location == "https://www.mysite.com/%E6%97%A5%E6%9C%AC/"

    @pytest.mark.anyio
    async def test_non_ascii_base_url_is_sent_percent_encoded(self) -> None:
        config = _config(base_url="https://bücher.example/")
        async with TestClient(SiteRedirectApp(RecordingApp(), config)) as client:
            response = await client.get("/")

        assert response.location == "https://b%C3%BCcher.example/default/"

    @pytest.mark.anyio
    async def test_repeated_header_skipped(self) -> None:
        app = SiteRedirectApp(RecordingApp(), _config(redirect_headers=["header1", "header2"]))
        async with TestClient(app) as client:
            response = await client.get(
                "/", headers=[("header1", "A"), ("header1", "B"), ("header2", "C")]
            )

        assert response.location == "https://www.mysite.com/c/"

    @pytest.mark.anyio
    async def test_query_string_on_root_still_redirects(self) -> None:
        async with TestClient(SiteRedirectApp(RecordingApp(), _config())) as client:
            response = await client.get("/?utm_source=x", headers={"header1": "C"})

        assert response.location == "https://www.mysite.com/c/"


class TestConstruction:
    def test_invalid_config_never_builds(self) -> None:
        with pytest.raises(MissingSignalSourceError):
            SiteRedirectApp(RecordingApp(), _config(redirect_headers=()))

    def test_from_mapping(self) -> None:
        app = SiteRedirectApp(
            RecordingApp(),
            RedirectConfig.from_mapping(
                {
                    "baseUrl": "https://www.mysite.com/",
                    "defaultPath": "default/",
                    "redirectHeaders": ["header1"],
                    "redirectionMap": REDIRECT_MAP,
                }
            ),
            name="from-settings",
        )

        assert app.config.base_url == "https://www.mysite.com"
        assert repr(app) == (
            "SiteRedirectApp(name='from-settings', base_url='https://www.mysite.com')"
        )

    def test_bad_mapping_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            RedirectConfig.from_mapping({"redirectHeaders": "header1"})
