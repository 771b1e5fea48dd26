"""Seed a staff account.

Usage:
    flask seed-user --name admin --password secret123 --role ADMIN
"""

from __future__ import annotations

import click
from flask.cli import with_appcontext

from sassy.core.auth.password import hash_password
from sassy.core.auth.permissions import Role
from sassy.core.users.models import User
from sassy.extensions import db


def seed_user(name: str, password: str, role: Role = Role.ADMIN) -> tuple[User, bool]:
    """Create the user, or reset password and role if it already exists."""
    user = User.query.filter_by(name=name).first()
    created = user is None
    if created:
        user = User(name=name, password_hash=hash_password(password), role=role.value)
        db.session.add(user)
    else:
        user.password_hash = hash_password(password)
        user.role = role.value
    db.session.commit()
    return user, created


@click.command("seed-user")
@click.option("--name", "-n", required=True, help="Login name")
@click.option("--password", "-p", required=True, help="Password (min 6 characters)")
@click.option("--role", "-r", type=click.Choice([r.value for r in Role]), default=Role.ADMIN.value, help="Role")
@with_appcontext
def seed_user_command(name: str, password: str, role: str):
    """Create or reset a staff account."""
    if len(name.strip()) < 3:
        raise click.BadParameter("must be at least 3 characters", param_hint="--name")
    if len(password) < 6:
        raise click.BadParameter("must be at least 6 characters", param_hint="--password")
    user, created = seed_user(name.strip(), password, Role(role))
    verb = "Created" if created else "Updated"
    click.echo(f"{verb} {user.role} user {user.name} ({user.id})")


def register_commands(app):
    """Register CLI commands with Flask app."""
    app.cli.add_command(seed_user_command)
