from unittest.mock import MagicMock
from click.testing import CliRunner
from cli import cli


def fake_response(content_type, json_body=None, text=""):
    response = MagicMock()
    response.headers = {"content-type": content_type}
    response.json.return_value = json_body
    response.text = text
    return response


def test_transfer_posts_payload_and_prints_json(monkeypatch):
    post = MagicMock(return_value=fake_response(
        "application/json", json_body={"status": "SUCCESS", "transactionId": "TXN1"}
    ))
    monkeypatch.setattr("cli.requests.post", post)

    result = CliRunner().invoke(cli, [
        "transfer",
        "--from-account", "A",
        "--to-account", "B",
        "--amount", "100",
        "--server-url", "http://svc:9000",
    ])

    assert result.exit_code == 0
    assert "TXN1" in result.output
    post.assert_called_once_with(
        "http://svc:9000/api/transfer",
        json={"fromAccount": "A", "toAccount": "B", "amount": 100.0},
    )
    post.return_value.raise_for_status.assert_called_once()


def test_transfer_prints_text_reply(monkeypatch):
    post = MagicMock(return_value=fake_response(
        "text/plain; charset=utf-8", text="Transfer completed successfully."
    ))
    monkeypatch.setattr("cli.requests.post", post)

    result = CliRunner().invoke(cli, ["transfer"])

    assert result.exit_code == 0
    assert result.output.strip() == "Transfer completed successfully."


def test_serve_runs_uvicorn(monkeypatch):
    run = MagicMock()
    monkeypatch.setattr("cli.uvicorn.run", run)

    result = CliRunner().invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "9001"])

    assert result.exit_code == 0
    run.assert_called_once_with("app:app", host="127.0.0.1", port=9001, reload=False)


def test_transaction_id_command():
    result = CliRunner().invoke(cli, ["transaction-id"])

    assert result.exit_code == 0
    assert result.output.strip().startswith("TXN")
    assert result.output.strip()[3:].isdigit()
