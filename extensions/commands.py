# extensions/commands.py
"""
Maintenance commands, run with the flask CLI:

    flask --app app seed-permissions
    flask --app app reset-permissions
    flask --app app permissions-in-use
"""

import click
from flask.cli import with_appcontext

from services.permission_service import PermissionService


@click.command("seed-permissions")
@with_appcontext
def seed_permissions():
    """Insert the default permissions that do not exist yet."""
    created, _ = PermissionService.seed_defaults()
    click.echo(f"created {len(created)} permission(s): {', '.join(created) or '-'}")


@click.command("reset-permissions")
@with_appcontext
def reset_permissions():
    """Restore soft-deleted default permissions and re-seed missing ones."""
    created, restored = PermissionService.seed_defaults(restore_deleted=True)
    click.echo(f"created {len(created)}, restored {len(restored)} permission(s)")


@click.command("permissions-in-use")
@with_appcontext
def permissions_in_use():
    """Print the permissions referenced by at least one role."""
    permissions = PermissionService.in_use()
    if not permissions:
        click.echo("no permission is referenced by a role")
        return
    for p in permissions:
        click.echo(f"{p.id}\t{p.key}\t{p.name}")


def init_commands(app):
    for command in (seed_permissions, reset_permissions, permissions_in_use):
        app.cli.add_command(command)
