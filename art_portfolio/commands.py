# art_portfolio/commands.py
import click
from flask import current_app
from flask.cli import with_appcontext

from .models import db, User
from .session_store import purge_expired_sessions


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Creates all tables."""
    db.create_all()
    click.echo('Database tables created.')


@click.command('create-user')
@click.argument('username')
@click.argument('email')
@click.password_option()
@with_appcontext
def create_user_command(username, email, password):
    """Creates a user account from the command line."""
    password_error = User.validate_password(password)
    if password_error:
        raise click.BadParameter(password_error, param_hint='password')
    if User.query.filter((User.username == username) | (User.email == email)).first():
        raise click.ClickException(f"A user with username '{username}' or email '{email}' already exists.")
    user = User.register(username, email, password)
    current_app.logger.info(f"User {user.username} created from CLI")
    click.echo(f'Created user {user.username} (id={user.id}).')


@click.command('purge-sessions')
@with_appcontext
def purge_sessions_command():
    """Deletes expired server-side sessions."""
    deleted = purge_expired_sessions()
    click.echo(f'Purged {deleted} expired session(s).')


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)
    app.cli.add_command(purge_sessions_command)
