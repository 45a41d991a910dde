"""Employee commands - a thin HTTP client over the REST API."""

import os
import sys
from typing import Any

import cyclopts
import httpx

from hrm.cli.console import get_console

app = cyclopts.App(name="employees", help="Employee and role management")


def get_server_url() -> str:
    """Get server URL from environment."""
    return os.environ.get("HRM_SERVER", "http://localhost:8000")


def make_client(token: str | None) -> httpx.Client:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    return httpx.Client(base_url=get_server_url(), headers=headers, timeout=10.0)


def _call(method: str, path: str, token: str | None, **kwargs: Any) -> Any:
    """Send a request to /api/v1 and return the decoded JSON body.

    Exits with status 1 on connection failures and error responses.
    """
    console = get_console()
    token = token or os.environ.get("HRM_TOKEN")

    try:
        with make_client(token) as client:
            response = client.request(method, f"/api/v1{path}", **kwargs)
            response.raise_for_status()
            return response.json()
    except httpx.ConnectError:
        console.error(
            f"Could not connect to server at {get_server_url()}",
            hint="Is the server running? Start it with: hrm server run",
        )
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        detail = _error_detail(e.response)
        console.error(f"{e.response.status_code} {detail}")
        sys.exit(1)


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    detail = body.get("detail", body) if isinstance(body, dict) else body
    if isinstance(detail, dict) and "message" in detail:
        return f"{detail.get('code', 'error')}: {detail['message']}"
    return str(detail)


@app.command(name="list")
def list_employees(
    role: str | None = None,
    token: str | None = None,
) -> None:
    """List employees, optionally filtered by role.

    Args:
        role: Only show employees holding this role.
        token: Access token. Defaults to HRM_TOKEN.
    """
    params = {"role": role} if role else {}
    data = _call("GET", "/employees", token, params=params)
    employees = data.get("employees", [])

    console = get_console()
    if not employees:
        console.warning("No employees found")
        return
    console.table(
        employees,
        [("id", "ID"), ("name", "Name"), ("role", "Role"), ("position", "Position")],
    )


def _change_role(
    action: str,
    employee_id: str,
    to: str | None,
    reason: str | None,
    token: str | None,
) -> None:
    body = {"new_role": to, "reason": reason}
    data = _call("POST", f"/employees/{employee_id}/{action}", token, json=body)
    change = data["change"]
    get_console().success(
        f"{change['employee_id']}: {change['old_role']} -> {change['new_role']}"
    )


@app.command
def promote(
    employee_id: str,
    /,
    to: str | None = None,
    reason: str | None = None,
    token: str | None = None,
) -> None:
    """Promote an employee. Without --to, moves up one level.

    Args:
        employee_id: Employee ID.
        to: Target role.
        reason: Reason recorded in the role history.
        token: Access token. Defaults to HRM_TOKEN.
    """
    _change_role("promote", employee_id, to, reason, token)


@app.command
def demote(
    employee_id: str,
    /,
    to: str | None = None,
    reason: str | None = None,
    token: str | None = None,
) -> None:
    """Demote an employee. Without --to, moves down one level.

    Args:
        employee_id: Employee ID.
        to: Target role.
        reason: Reason recorded in the role history.
        token: Access token. Defaults to HRM_TOKEN.
    """
    _change_role("demote", employee_id, to, reason, token)
