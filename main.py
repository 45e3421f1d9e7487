import logging

import click

from config.settings import LOG_LEVEL
from service.commands import setup_commands

logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@click.group()
def cli():
    """Bech32m addresses and chia blockchain helpers for SQLite."""
    pass


setup_commands(cli)


def main():
    cli()


if __name__ == "__main__":
    main()
