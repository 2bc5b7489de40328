import click
from flask import current_app
from portfolio.application.settings import seed_settings
from portfolio.extensions import db
from portfolio.models.user import AdminUser
from portfolio.utils.transaction import transactional


def register_commands(app):
    @app.cli.command("create-admin")
    @click.argument("email")
    @click.password_option()
    def create_admin(email, password):
        """Create an admin user, or reset the password of an existing one."""
        email = email.strip().lower()
        user = AdminUser.query.filter_by(email=email).first()

        with transactional():
            if user is None:
                user = AdminUser(email=email, role="admin")
                db.session.add(user)
            user.set_password(password)
            user.is_active = True

        current_app.logger.info(f"Admin user ready: {email}")
        click.echo(f"Admin user ready: {email}")

    @app.cli.command("seed-settings")
    def seed_settings_command():
        """Insert the default site settings that are missing."""
        created = seed_settings()
        click.echo(f"Seeded {created} setting(s)")
