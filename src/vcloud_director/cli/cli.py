import logging
import click

from .crud import rest
from .auth import change_profile, login
from .vcenter import vcenter

@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
def cli(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

cli.add_command(change_profile,"profiles")
cli.add_command(login,"login")
cli.add_command(rest,"rest")
cli.add_command(vcenter,"vcenter")

if __name__ == '__main__':
    cli()
