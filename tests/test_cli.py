import json
import sys

import httpx
import pytest
from typer.testing import CliRunner

from messages_worker_sdk import MessagesWorkerClient
from messages_worker_sdk.cli import main as cli_main

from .conftest import RecordingHandler, json_response
from .test_workers import STATUS_PAYLOAD

runner = CliRunner()


@pytest.fixture
def serve(monkeypatch):
    """Route the CLI's client through a MockTransport handler."""

    def _serve(handler):
        recorder = RecordingHandler(handler)
        monkeypatch.setattr(
            cli_main,
            "build_client",
            lambda settings: MessagesWorkerClient(settings, transport=httpx.MockTransport(recorder)),
        )
        return recorder

    return _serve


def test_health_ok(serve):
    serve(lambda request: httpx.Response(200, text="OK"))

    result = runner.invoke(cli_main.app, ["health"])

    assert result.exit_code == 0
    assert "Service is healthy" in result.output


def test_health_failure_exits_1(serve):
    serve(lambda request: httpx.Response(503, text="down"))

    result = runner.invoke(cli_main.app, ["health"])

    assert result.exit_code == 1
    assert "health check failed with status 503" in result.output


def test_base_url_option_is_used(serve):
    recorder = serve(lambda request: httpx.Response(200, text="OK"))

    result = runner.invoke(cli_main.app, ["--base-url", "http://other.test:9000", "health"])

    assert result.exit_code == 0
    assert recorder.requests[0].url.host == "other.test"
    assert recorder.requests[0].url.port == 9000


def test_status_table(serve):
    serve(lambda request: json_response(200, STATUS_PAYLOAD))

    result = runner.invoke(cli_main.app, ["status"])

    assert result.exit_code == 0
    assert "low-1" in result.output
    assert "total" in result.output


def test_post_message_with_body(serve):
    recorder = serve(
        lambda request: json_response(
            201, {"id": "msg-1", "status": "published", "itemId": "pr-9", "priority": "high", "topic": "pullrequests"}
        )
    )

    result = runner.invoke(
        cli_main.app,
        ["post", "pr-9", "https://cb.test", "--priority", "high", "--body", '{"urgent": true}'],
    )

    assert result.exit_code == 0
    assert "msg-1" in result.output
    sent = json.loads(recorder.requests[0].content)
    assert sent["priority"] == "high"
    assert sent["object_body"] == {"urgent": True}


def test_post_message_invalid_body_json(serve):
    recorder = serve(lambda request: httpx.Response(201))

    result = runner.invoke(cli_main.app, ["post", "pr-9", "https://cb.test", "--body", "{nope"])

    assert result.exit_code == 2
    assert recorder.requests == []


def test_bulk_from_file(serve, tmp_path):
    recorder = serve(lambda request: json_response(201, {"status": "published", "count": 2, "messages": []}))
    path = tmp_path / "messages.json"
    path.write_text(json.dumps([{"item_id": "a"}, {"item_id": "b", "priority": "low"}]), encoding="utf-8")

    result = runner.invoke(cli_main.app, ["bulk", str(path)])

    assert result.exit_code == 0
    assert recorder.requests[0].url.path == "/api/v1/messages/bulk"
    assert len(json.loads(recorder.requests[0].content)["messages"]) == 2


def test_scale_invalid_priority_never_hits_network(serve):
    recorder = serve(lambda request: httpx.Response(200))

    result = runner.invoke(cli_main.app, ["scale", "urgent", "2"])

    assert result.exit_code == 1
    assert "validation error" in result.output
    assert recorder.requests == []


def test_remove_sends_negative_count(serve):
    recorder = serve(
        lambda request: json_response(
            200, {"status": "success", "message": "removed", "priority": "low", "count": 2, "action": "removed"}
        )
    )

    result = runner.invoke(cli_main.app, ["remove", "low", "2"])

    assert result.exit_code == 0
    assert recorder.requests[0].url.params["count"] == "-2"


def test_remove_all_requires_confirmation(serve):
    recorder = serve(lambda request: json_response(200, {"status": "success", "message": "ok", "total_removed": 0}))

    result = runner.invoke(cli_main.app, ["remove-all"], input="n\n")

    assert result.exit_code == 1
    assert recorder.requests == []


def test_remove_all_with_yes(serve):
    recorder = serve(lambda request: json_response(200, {"status": "success", "message": "ok", "total_removed": 3}))

    result = runner.invoke(cli_main.app, ["remove-all", "--yes"])

    assert result.exit_code == 0
    assert "Removed: 3" in result.output
    assert recorder.requests[0].url.path == "/api/v1/workers/remove-all"


def test_count_total_and_by_priority(serve):
    serve(lambda request: json_response(200, STATUS_PAYLOAD))

    total = runner.invoke(cli_main.app, ["count"])
    high = runner.invoke(cli_main.app, ["count", "high"])

    assert total.exit_code == 0
    assert "Total workers: 6" in total.output
    assert high.exit_code == 0
    assert "high priority workers: 3" in high.output


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG_CONFIG_HOME only applies on Linux")
def test_configure_writes_user_env_file(monkeypatch, tmp_path):
    for name in ("MESSAGES_WORKER_BASE_URL", "MESSAGES_WORKER_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli_main.app, ["configure"], input="http://svc.test:9000\n12\n")

    assert result.exit_code == 0
    env_path = tmp_path / "messages-worker-sdk" / ".env"
    assert "Saved config to" in result.output
    text = env_path.read_text(encoding="utf-8")
    assert "MESSAGES_WORKER_BASE_URL=http://svc.test:9000" in text
    assert "MESSAGES_WORKER_TIMEOUT_SECONDS=12.0" in text
