"""Tests for the role lookup commands."""

import pytest

from hrm.cli.commands import roles


class TestShow:
    def test_shows_inherited_grants(self, capsys: pytest.CaptureFixture[str]) -> None:
        roles.show("manager")

        out = capsys.readouterr().out
        assert "Manager" in out
        assert "payroll_view" in out
        assert "/manager" in out

    def test_unknown_role_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            roles.show("ceo")

        assert exc_info.value.code == 1
        assert "Unknown role: ceo" in capsys.readouterr().err


class TestTransitions:
    def test_allowed_promotion(self, capsys: pytest.CaptureFixture[str]) -> None:
        roles.can_promote("manager", "employee", "manager")

        assert "may promote" in capsys.readouterr().out

    def test_denied_promotion(self, capsys: pytest.CaptureFixture[str]) -> None:
        roles.can_promote("admin", "manager", "super_admin")

        assert "may not promote" in capsys.readouterr().out

    def test_denied_demotion(self, capsys: pytest.CaptureFixture[str]) -> None:
        roles.can_demote("manager", "manager", "employee")

        assert "may not demote" in capsys.readouterr().out

    def test_role_arguments_are_case_insensitive(self, capsys: pytest.CaptureFixture[str]) -> None:
        roles.can_promote("Manager", "EMPLOYEE", "manager")

        assert "may promote" in capsys.readouterr().out

    def test_unknown_role_argument_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            roles.can_demote("ceo", "employee", "intern")

        assert "Unknown role: ceo" in capsys.readouterr().err


def test_signup_lists_intern_and_employee(capsys: pytest.CaptureFixture[str]) -> None:
    roles.signup()

    out = capsys.readouterr().out
    assert "(intern)" in out
    assert "(employee)" in out
    assert "(manager)" not in out
