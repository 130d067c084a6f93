import click

from .bootstrap import initialize_database, seed_demo
from .extensions import db


def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create missing tables and seed the default categories."""
        added = initialize_database(db.engine)
        click.echo(f"Database ready ({added} default categories added).")

    @app.cli.command("seed-demo")
    def seed_demo_command():
        """Add sample transactions and a monthly budget for the current month."""
        added = seed_demo(db.session)
        if added:
            click.echo(f"Seeded {added} demo transactions.")
        else:
            click.echo("Transactions already exist; nothing seeded.")
