from unittest.mock import MagicMock

import httpx
import pytest

from explainshell_cli.config import ExplainConfig
from explainshell_cli.fetching.base import FetchError
from explainshell_cli.fetching.httpx_fetcher import HttpxFetcher


def _fetcher(handler, **kwargs) -> HttpxFetcher:
    return HttpxFetcher(transport=httpx.MockTransport(handler), **kwargs)


class TestBuildUrl:
    def test_command_is_url_encoded(self) -> None:
        fetcher = HttpxFetcher()

        url = fetcher.build_url("ls -la | grep foo")

        assert url == "https://explainshell.com/explain?cmd=ls%20-la%20%7C%20grep%20foo"

    def test_custom_base_url(self) -> None:
        fetcher = HttpxFetcher(config=ExplainConfig(base_url="http://localhost:5000/"))

        assert fetcher.build_url("ls") == "http://localhost:5000/explain?cmd=ls"


@pytest.mark.asyncio
async def test_fetch_returns_body_text() -> None:
    fetcher = _fetcher(lambda request: httpx.Response(200, text="<html>ok</html>"))

    markup = await fetcher.fetch("ls")

    assert markup == "<html>ok</html>"


@pytest.mark.asyncio
async def test_fetch_sends_single_get_with_user_agent() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text="")

    await _fetcher(handler).fetch("echo $(date)")

    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert requests[0].url.params["cmd"] == "echo $(date)"
    assert requests[0].headers["User-Agent"] == "explainshell-cli"


@pytest.mark.asyncio
async def test_non_success_status_raises_fetch_error() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, text="boom")

    with pytest.raises(FetchError) as exc_info:
        await _fetcher(handler).fetch("ls")

    assert exc_info.value.url == "https://explainshell.com/explain?cmd=ls"
    assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
    assert len(calls) == 1  # No retries


@pytest.mark.asyncio
async def test_connection_error_raises_fetch_error_with_url() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(FetchError, match="Connection refused") as exc_info:
        await _fetcher(handler).fetch("ls -la")

    assert "https://explainshell.com/explain?cmd=ls%20-la" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_metrics_recorded_on_success() -> None:
    metrics_hook = MagicMock()
    fetcher = _fetcher(
        lambda request: httpx.Response(200, text="x"), metrics_hook=metrics_hook
    )

    await fetcher.fetch("ls")

    assert metrics_hook.record_latency.call_args[0][0] == "fetch_duration"
    metrics_hook.increment.assert_called_once_with(
        "fetch_requests_total", labels={"status": "200"}
    )


@pytest.mark.asyncio
async def test_metrics_recorded_on_failure() -> None:
    metrics_hook = MagicMock()
    fetcher = _fetcher(
        lambda request: httpx.Response(404), metrics_hook=metrics_hook
    )

    with pytest.raises(FetchError):
        await fetcher.fetch("ls")

    metrics_hook.increment.assert_called_once_with("fetch_errors_total")
    metrics_hook.record_latency.assert_not_called()
