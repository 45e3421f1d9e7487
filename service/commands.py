import logging
import sqlite3

import click

from chia_lib.address import check_address
from config.settings import CHIA_DB_PATH, DEFAULT_HRP
from db.database_manager import DatabaseManager
from structs.bech32m import encode
from structs.checksum import Variant
from structs.hex_blob import blob_from_hex

logger = logging.getLogger(__name__)

VARIANTS = {variant.name.lower(): variant for variant in Variant}


def format_value(value) -> str:
    """Renders a SQL value the way the sqlite shell does, with blobs as uppercase hex."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.hex().upper()
    return str(value)


@click.command("encode")
@click.argument("payload_hex")
@click.option("--hrp", default=DEFAULT_HRP, show_default=True, help="Human-readable prefix.")
@click.option("--variant", type=click.Choice(sorted(VARIANTS)), default="bech32m", show_default=True)
def encode_command(payload_hex, hrp, variant):
    """Encode a hex payload as a bech32m address."""
    try:
        address = encode(hrp, blob_from_hex(payload_hex), VARIANTS[variant])
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(address)


@click.command("decode")
@click.argument("address")
@click.option("--hrp", default=None, help="Require this human-readable prefix.")
def decode_command(address, hrp):
    """Decode an address into its prefix and hex payload."""
    result = check_address(address, hrp)
    if not result.success:
        raise click.ClickException(result.error)
    decoded_hrp, payload = result.data
    click.echo(f"hrp: {decoded_hrp}")
    click.echo(f"payload: {payload.hex()}")


@click.command("query")
@click.argument("sql")
@click.option("--db", "db_path", default=CHIA_DB_PATH, show_default=True, help="SQLite database file.")
@click.option("--read-only", is_flag=True, help="Open the database read-only.")
@click.option("--header/--no-header", default=False, help="Print column names first.")
def query_command(sql, db_path, read_only, header):
    """Run SQL with the chia functions loaded and print the rows tab-separated."""
    with DatabaseManager(db_path, read_only=read_only) as db_manager:
        try:
            cursor = db_manager.get_connection().execute(sql)
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Query failed: {e}")
            raise click.ClickException(str(e))
        if header and cursor.description:
            click.echo("\t".join(column[0] for column in cursor.description))
        for row in rows:
            click.echo("\t".join(format_value(value) for value in row))


def setup_commands(cli: click.Group) -> None:
    cli.add_command(encode_command)
    cli.add_command(decode_command)
    cli.add_command(query_command)
