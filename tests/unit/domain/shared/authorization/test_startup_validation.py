"""Tests for startup validation of handler __auth__ declarations."""

import pytest

from hrm.domain.shared.authorization.gate import authenticated
from hrm.domain.shared.authorization.startup import (
    _check_handler_class,
    iter_handler_classes,
    validate_all_handlers,
)
from hrm.domain.shared.command import Command, CommandHandler, Result
from hrm.domain.shared.error import ConfigurationError
from hrm.domain.shared.query import Query, QueryHandler
from hrm.domain.shared.query import Result as QueryResult


class TestStartupValidation:
    def test_catches_missing_auth_on_command_handler(self) -> None:
        class UnprotectedCommand(Command):
            pass

        class UnprotectedResult(Result):
            pass

        class UnprotectedHandler(CommandHandler[UnprotectedCommand, UnprotectedResult]):
            async def run(self, cmd: UnprotectedCommand) -> UnprotectedResult:
                return UnprotectedResult()

        with pytest.raises(ConfigurationError, match="UnprotectedHandler"):
            _check_handler_class(UnprotectedHandler)

    def test_catches_non_gate_auth_on_query_handler(self) -> None:
        class SomeQuery(Query):
            pass

        class SomeResult(QueryResult):
            pass

        class MisconfiguredHandler(QueryHandler[SomeQuery, SomeResult]):
            __auth__ = "admin"  # type: ignore[assignment]

            async def run(self, query: SomeQuery) -> SomeResult:
                return SomeResult()

        with pytest.raises(ConfigurationError, match="MisconfiguredHandler"):
            _check_handler_class(MisconfiguredHandler)

    def test_passes_for_protected_handler(self) -> None:
        class ProtectedCommand(Command):
            pass

        class ProtectedResult(Result):
            pass

        class ProtectedHandler(CommandHandler[ProtectedCommand, ProtectedResult]):
            __auth__ = authenticated()

            async def run(self, cmd: ProtectedCommand) -> ProtectedResult:
                return ProtectedResult()

        _check_handler_class(ProtectedHandler)

    def test_all_application_handlers_declare_gates(self) -> None:
        validate_all_handlers()

    def test_discovers_every_auth_handler(self) -> None:
        names = {cls.__name__ for cls in iter_handler_classes()}

        assert {
            "RegisterEmployeeHandler",
            "PromoteEmployeeHandler",
            "DemoteEmployeeHandler",
            "TransferSuperAdminHandler",
            "GetRoleProfileHandler",
            "ListRoleProfilesHandler",
            "ListSignupRolesHandler",
            "GetMyAccessHandler",
            "GetFirstUserStatusHandler",
            "ListEmployeesHandler",
            "GetRoleHistoryHandler",
        } <= names

    def test_handlers_defined_outside_package_are_ignored(self) -> None:
        class LocalQuery(Query):
            pass

        class LocalHandler(QueryHandler[LocalQuery, QueryResult]):
            async def run(self, query: LocalQuery) -> QueryResult:
                return QueryResult()

        assert LocalHandler not in set(iter_handler_classes())
        validate_all_handlers()
