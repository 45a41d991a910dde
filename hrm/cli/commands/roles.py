"""Role lookup commands. Pure: no server or database needed."""

import sys

import cyclopts

from hrm.cli.console import get_console, role_markup
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.service.role_resolver import ROLE_RESOLVER

app = cyclopts.App(name="roles", help="Inspect the role hierarchy")


def _parse_or_exit(value: str) -> Role:
    role = Role.parse(value)
    if role is None:
        get_console().error(
            f"Unknown role: {value}",
            hint=f"Valid roles: {', '.join(r.value for r in Role)}",
        )
        sys.exit(1)
    return role


@app.command(name="list")
def list_roles() -> None:
    """List every role with its level and dashboard."""
    console = get_console()
    rows = [
        {
            "role": role.value,
            "name": ROLE_RESOLVER.get_role_display(role).name,
            "level": role.level,
            "dashboard": ROLE_RESOLVER.get_dashboard_path(role),
            "permissions": len(ROLE_RESOLVER.get_all_permissions(role)),
            "features": len(ROLE_RESOLVER.get_all_features(role)),
        }
        for role in Role
    ]
    console.table(
        rows,
        [
            ("role", "Role"),
            ("name", "Name"),
            ("level", "Level"),
            ("dashboard", "Dashboard"),
            ("permissions", "Permissions"),
            ("features", "Features"),
        ],
    )


@app.command
def show(role: str, /) -> None:
    """Show the effective permissions and features of a role.

    Args:
        role: Role tag, e.g. 'manager'
    """
    console = get_console()
    parsed = _parse_or_exit(role)
    display = ROLE_RESOLVER.get_role_display(parsed)

    lines = [f"[cyan]Level:[/cyan] {display.level}"]
    lines.append(f"[cyan]Dashboard:[/cyan] {ROLE_RESOLVER.get_dashboard_path(parsed)}")
    lines.append("")
    lines.append("[bold]Permissions[/bold]")
    lines.extend(f"  {p}" for p in sorted(ROLE_RESOLVER.get_all_permissions(parsed)))
    lines.append("")
    lines.append("[bold]Features[/bold]")
    lines.extend(f"  {f}" for f in sorted(ROLE_RESOLVER.get_all_features(parsed)))

    console.panel("\n".join(lines), title=f"[bold]{display.name}[/bold]", subtitle=role_markup(parsed.value))


@app.command
def signup() -> None:
    """List the roles offered at self-registration."""
    console = get_console()
    for option in ROLE_RESOLVER.get_available_signup_roles():
        console.print(f"[bold]{option.label}[/bold] ({option.role.value})")
        console.print(f"    [dim]{option.description}[/dim]")


@app.command
def can_promote(promoter: str, target: str, new_role: str, /) -> None:
    """Check whether a promoter role may promote a target role to a new role.

    Args:
        promoter: Role of the employee performing the promotion
        target: Current role of the employee being promoted
        new_role: Role being promoted to
    """
    console = get_console()
    allowed = ROLE_RESOLVER.can_promote_role(
        _parse_or_exit(promoter), _parse_or_exit(target), _parse_or_exit(new_role)
    )
    if allowed:
        console.success(f"{promoter} may promote {target} to {new_role}")
    else:
        console.warning(f"{promoter} may not promote {target} to {new_role}")


@app.command
def can_demote(demoter: str, target: str, new_role: str, /) -> None:
    """Check whether a demoter role may demote a target role to a new role.

    Args:
        demoter: Role of the employee performing the demotion
        target: Current role of the employee being demoted
        new_role: Role being demoted to
    """
    console = get_console()
    allowed = ROLE_RESOLVER.can_demote_role(
        _parse_or_exit(demoter), _parse_or_exit(target), _parse_or_exit(new_role)
    )
    if allowed:
        console.success(f"{demoter} may demote {target} to {new_role}")
    else:
        console.warning(f"{demoter} may not demote {target} to {new_role}")
