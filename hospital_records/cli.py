"""
Command-line interface for the hospital records database.
"""
import logging
import sys
from typing import Optional
import click
from sqlalchemy.exc import SQLAlchemyError

from .commands import (
    find_admission_info,
    find_doctor_info,
    find_patient_info,
    print_menu,
    run_command,
    update_admission_payment,
)
from .config import LOG_LEVELS, RecordsConfig
from .database import db_manager
from .exceptions import CommandNotFoundError, HospitalRecordsError

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'WARNING', log_file: Optional[str] = None):
    """Send log records to stderr, and to a file when one is configured."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


settings = RecordsConfig()


def _run_with_database(ctx, action, *args):
    """Initialize the database, run one action and always close the database again."""
    try:
        db_manager.initialize(**ctx.obj)
        action(*args)

    except CommandNotFoundError as e:
        logger.error(str(e))
        click.echo("Command not found", err=True)
        sys.exit(1)
    except (SQLAlchemyError, HospitalRecordsError) as e:
        logger.exception("Command failed")
        click.echo(f"❌ Query failed: {e}", err=True)
        sys.exit(1)
    except ImportError as e:
        logger.exception("Database driver could not be loaded")
        click.echo(f"❌ Database driver not available: {e}", err=True)
        sys.exit(1)
    finally:
        db_manager.close()


@click.group(invoke_without_command=True)
@click.option('--log-level', envvar='HOSPITAL_LOG_LEVEL',
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Set the logging level')
@click.option('--database-url', envvar='HOSPITAL_DB_URL',
              help='SQLAlchemy database URL')
@click.option('--username', envvar='HOSPITAL_DB_USER',
              help='Database username')
@click.option('--password', envvar='HOSPITAL_DB_PASSWORD',
              help='Database password')
@click.pass_context
def cli(ctx, log_level, database_url, username, password):
    """Hospital Records CLI

    Run without a command to list the numbered reports, then pick one with
    `run SELECTOR`.
    """
    try:
        settings.validate()
    except ValueError as e:
        raise click.UsageError(str(e))

    log_level = (log_level or settings.log_level).upper()
    configure_logging(log_level, settings.log_file)
    logging.getLogger().setLevel(getattr(logging, log_level))
    ctx.obj = {
        'database_url': database_url,
        'username': username,
        'password': password,
    }

    if ctx.invoked_subcommand is None:
        print_menu()


@cli.command()
def menu():
    """List the numbered commands."""
    print_menu()


@cli.command()
@click.argument('selector', type=int)
@click.pass_context
def run(ctx, selector):
    """Run the numbered command SELECTOR, prompting for its input."""
    _run_with_database(ctx, run_command, selector)


@cli.command()
@click.argument('ssn', required=False)
@click.pass_context
def patient(ctx, ssn):
    """Report a patient's basic information."""
    _run_with_database(ctx, find_patient_info, ssn)


@cli.command()
@click.argument('doctor_id', type=int, required=False)
@click.pass_context
def doctor(ctx, doctor_id):
    """Report a doctor's basic information."""
    _run_with_database(ctx, find_doctor_info, doctor_id)


@cli.command()
@click.argument('admission_id', type=int, required=False)
@click.pass_context
def admission(ctx, admission_id):
    """Report an admission with its rooms and examining doctors."""
    _run_with_database(ctx, find_admission_info, admission_id)


@cli.command()
@click.argument('admission_id', type=int, required=False)
@click.option('--total-payment', type=float, help='New total payment')
@click.pass_context
def update_payment(ctx, admission_id, total_payment):
    """Update the total payment of an admission."""
    _run_with_database(ctx, update_admission_payment, admission_id, total_payment)


@cli.command()
@click.pass_context
def test_connection(ctx):
    """Test database connection."""
    try:
        db_manager.initialize(**ctx.obj)

        if db_manager.test_connection():
            click.echo("✅ Database connection successful")
        else:
            click.echo("❌ Database connection failed", err=True)
            sys.exit(1)

    except (SQLAlchemyError, ImportError) as e:
        click.echo(f"❌ Connection test failed: {e}", err=True)
        sys.exit(1)
    finally:
        db_manager.close()


if __name__ == '__main__':
    cli()
