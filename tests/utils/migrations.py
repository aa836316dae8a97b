from alembic.config import Config
from alembic import command


def _config(db_url: str) -> Config:
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", db_url)
    # Keep the test run's logging configuration
    alembic_cfg.attributes["configure_logger"] = False
    return alembic_cfg


def run_migrations_up(db_url: str):
    """
    Runs alembic upgrade head against the specified database URL.
    """
    command.upgrade(_config(db_url), "head")


def run_migrations_down(db_url: str):
    """
    Runs alembic downgrade base against the specified database URL.
    """
    command.downgrade(_config(db_url), "base")
