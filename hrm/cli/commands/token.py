"""Development access tokens signed with the configured JWT secret."""

import sys

import cyclopts

from hrm.cli.console import get_console
from hrm.config import Config
from hrm.domain.auth.service.token import TokenService

app = cyclopts.App(name="token", help="Access token commands")


@app.command
def issue(
    subject: str,
    /,
    name: str | None = None,
    email: str | None = None,
    role: str | None = None,
) -> None:
    """Issue an access token for a user ID.

    Args:
        subject: Identity provider user ID placed in the 'sub' claim
        name: Display name claim
        email: Email claim
        role: Role requested at registration, stored in unsafe_metadata
    """
    console = get_console()
    config = Config()

    if not config.auth.jwt.secret:
        console.error(
            "No JWT secret configured",
            hint="Set HRM_AUTH__JWT__SECRET or auth.jwt.secret in the config file",
        )
        sys.exit(1)

    claims: dict = {}
    if name:
        claims["name"] = name
    if email:
        claims["email"] = email
    if role:
        claims["unsafe_metadata"] = {"role": role}

    service = TokenService(_config=config.auth.jwt)
    console.print(service.create_access_token(subject, claims), soft_wrap=True)
