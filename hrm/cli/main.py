"""Main CLI application using Cyclopts.

Role lookups run locally against the built-in hierarchy; employee commands
are a thin HTTP client over the REST API.
"""

import cyclopts

from hrm.cli.commands import employees, roles, server, token

app = cyclopts.App(
    name="hrm",
    help="HRM - role-based employee management",
)

app.command(roles.app, name="roles")
app.command(token.app, name="token")
app.command(server.app, name="server")
app.command(employees.app, name="employees")


def main() -> None:
    app()
