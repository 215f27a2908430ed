"""Click CLI interface for schema introspection."""

import json
import logging
import sys

import click

from . import SUPPORTED_BACKENDS, __version__
from .backends import get_backend
from .config import IntrospectConfig
from .exceptions import (
    BackendNotAvailableError,
    ConfigurationError,
    ConnectionError,
    InverseSchemaError,
)
from .parser import SchemaParser
from .serialize import schema_to_dict


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def connection_options(func):
    """Options shared by every command that connects to a database."""
    options = [
        click.option("--db-type", "-t", type=click.Choice(SUPPORTED_BACKENDS, case_sensitive=False),
                     default="postgresql", help="Database type"),
        click.option("-h", "--host", envvar="DB_HOST", help="Database server hostname"),
        click.option("-P", "--port", type=int, envvar="DB_PORT", help="Database server port"),
        click.option("-d", "--database", envvar="DB_NAME", help="Database name"),
        click.option("-u", "--username", envvar="DB_USER", help="Database username"),
        click.option("-p", "--password", envvar="DB_PASSWORD", help="Database password"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def cli():
    """Inverse Schema - Read a database catalog into a code-generation model."""
    pass


@cli.command()
@connection_options
@click.option("-s", "--schema", "schema_name", default="public", envvar="DB_SCHEMA",
              show_default=True, help="Namespace to introspect")
@click.option("--timeout", type=float, help="Abort the parse after this many seconds")
@click.option("-o", "--output", type=click.File("w"), default="-",
              help="Write JSON to this file instead of stdout")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def inspect(
    db_type: str,
    host: str | None,
    port: int | None,
    database: str | None,
    username: str | None,
    password: str | None,
    schema_name: str,
    timeout: float | None,
    output,
    indent: int,
    verbose: int,
) -> None:
    """Extract tables and enums of a namespace and print them as JSON."""
    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        config = IntrospectConfig(
            db_type=db_type.lower(),
            host=host,
            port=port,
            database=database,
            username=username,
            password=password,
            schema_name=schema_name,
            timeout=timeout,
            verbosity=verbose,
        )
        config.validate()

        ConnectionClass, AdapterClass = get_backend(config.db_type)

        with ConnectionClass(config) as conn:
            adapter = AdapterClass(conn, config.schema_name)
            schema = SchemaParser(adapter).parse(config.new_context())

        json.dump(schema_to_dict(schema), output, indent=indent)
        output.write("\n")
        click.echo(f"Extracted {len(schema.tables)} tables and {len(schema.enums)} enums", err=True)

    except BackendNotAvailableError as e:
        click.echo(f"Backend not available: {e}", err=True)
        sys.exit(1)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ConnectionError as e:
        click.echo(f"Connection error: {e}", err=True)
        sys.exit(1)
    except InverseSchemaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


@cli.command("test-connection")
@connection_options
def test_connection(
    db_type: str,
    host: str | None,
    port: int | None,
    database: str | None,
    username: str | None,
    password: str | None,
) -> None:
    """Test database connection."""
    try:
        config = IntrospectConfig(
            db_type=db_type.lower(),
            host=host,
            port=port,
            database=database,
            username=username,
            password=password,
        )
        config.validate()

        ConnectionClass, _ = get_backend(config.db_type)

        click.echo(f"Connecting to {db_type} database...")
        with ConnectionClass(config) as conn:
            version = conn.get_version() if hasattr(conn, "get_version") else "Unknown"
            click.echo("Connection successful!")
            click.echo(f"\nServer version:\n{version}")

    except BackendNotAvailableError as e:
        click.echo(f"Backend not available: {e}", err=True)
        sys.exit(1)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ConnectionError as e:
        click.echo(f"Connection failed: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
