from unittest.mock import MagicMock, patch

from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from clockcheck.middlewares.logging_middleware import LoggingMiddleware


def _make_app():
    async def homepage(request):
        return JSONResponse({"ok": True})

    async def plain(request):
        return PlainTextResponse("hello")

    app = Starlette(routes=[
        Route("/", homepage),
        Route("/plain", plain),
    ])
    app.add_middleware(LoggingMiddleware)
    return app


def _mock_logger(debug_enabled):
    mock_logger = MagicMock()
    mock_logger.isEnabledFor = MagicMock(return_value=debug_enabled)
    return mock_logger


def test_normal_get_passes_through():
    client = TestClient(_make_app())
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_request_and_response_logged():
    mock_logger = _mock_logger(False)
    with patch("clockcheck.middlewares.logging_middleware.logger", mock_logger):
        resp = TestClient(_make_app()).get("/", params={"page": "1"})

    assert resp.status_code == 200
    calls = {c[0][0]: c[1] for c in mock_logger.info.call_args_list}
    assert calls["Incoming Request"]["method"] == "GET"
    assert calls["Incoming Request"]["path"] == "/"
    assert calls["Incoming Request"]["query_params"] == {"page": "1"}
    assert calls["Outgoing Response"]["status_code"] == 200
    assert "body" not in calls["Outgoing Response"]


def test_token_and_auth_header_redacted():
    mock_logger = _mock_logger(False)
    with patch("clockcheck.middlewares.logging_middleware.logger", mock_logger):
        TestClient(_make_app()).get(
            "/",
            params={"token": "1234567890"},
            headers={"Authorization": "Bearer supersecret"},
        )

    logged = str(mock_logger.info.call_args_list)
    assert "1234567890" not in logged
    assert "supersecret" not in logged
    request_log = mock_logger.info.call_args_list[0][1]
    assert request_log["query_params"]["token"] == "1234...[REDACTED]"


def test_debug_logging_includes_response_body():
    """When logger is at DEBUG level, the response body is logged and still delivered."""
    mock_logger = _mock_logger(True)
    with patch("clockcheck.middlewares.logging_middleware.logger", mock_logger):
        client = TestClient(_make_app())
        resp = client.get("/")
        plain = client.get("/plain")

    assert resp.json() == {"ok": True}
    assert plain.text == "hello"
    bodies = [c[1]["body"] for c in mock_logger.info.call_args_list if c[0][0] == "Outgoing Response"]
    assert bodies == [{"ok": True}, "hello"]
