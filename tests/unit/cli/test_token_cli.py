"""Tests for the development token command."""

import jwt
import pytest

from hrm.cli.commands import token


def test_issue_prints_signed_token(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("HRM_AUTH__JWT__SECRET", "cli-secret")

    token.issue("user_123", name="Ada", role="employee")

    encoded = capsys.readouterr().out.strip()
    payload = jwt.decode(encoded, "cli-secret", algorithms=["HS256"], audience="authenticated")
    assert payload["sub"] == "user_123"
    assert payload["name"] == "Ada"
    assert payload["unsafe_metadata"] == {"role": "employee"}


def test_issue_without_secret_exits(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("HRM_AUTH__JWT__SECRET", "")

    with pytest.raises(SystemExit) as exc_info:
        token.issue("user_123")

    assert exc_info.value.code == 1
    assert "No JWT secret configured" in capsys.readouterr().err
