import click
from vcloud_director.cli.auth import authenticate, get_client
from vcloud_director.cli.config import CLIAuthConfig
from vcloud_director.cli.crud import handle_api_exceptions
from vcloud_director.resources.vcenters import get_vcenter_by_name

@click.command()
@click.option("--name", "-n", prompt="vCenter name")
@click.option("--storage-profiles", is_flag=True, help="Refresh storage profiles instead of the whole vCenter")
@authenticate
@handle_api_exceptions
def refresh(name, storage_profiles, auth: CLIAuthConfig):

  with get_client(auth) as client:
    vc = get_vcenter_by_name(client, name)

    if storage_profiles:
      vc.refresh_storage_profiles()
    else:
      vc.refresh_vcenter()

  click.echo(f"Refreshed {click.style(name,fg='green')}")

@click.group()
def vcenter():
    pass

vcenter.add_command(refresh,"refresh")
