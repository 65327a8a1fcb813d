import functools
import click
from httpx import ConnectError
from vcloud_director.cli.auth import authenticate, get_client
from vcloud_director.cli.config import CLIAuthConfig
from vcloud_director.client.exceptions import VCDException
from vcloud_director.interface.base import ListQuery
from vcloud_director.resources import content_libraries, defined_entity_types, defined_interfaces, vcenters

# kind -> (get all, get by id)
RESOURCE_DEFINITIONS = {
    "entity-types": (defined_entity_types.get_all_rde_types, defined_entity_types.get_rde_type_by_id),
    "interfaces": (defined_interfaces.get_all_defined_interfaces, defined_interfaces.get_defined_interface_by_id),
    "content-libraries": (content_libraries.get_all_content_libraries, content_libraries.get_content_library_by_id),
    "vcenters": (vcenters.get_all_vcenters, vcenters.get_vcenter_by_id),
}

AVAILABLE_RESOURCES = list(RESOURCE_DEFINITIONS.keys())

def handle_api_exceptions(func):

  @functools.wraps(func)
  def wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except ConnectError:
      click.echo(f"Connection to [{click.style(kwargs['auth'].api_url,fg='red')}] could not be established.")
    except VCDException as e:
      status = e.status_code if e.status_code != None else "error"
      click.echo(f"[{click.style(str(status),fg='red')}] {e.message}")

  return wrapper

@click.command()
@click.option("--kind", "-t", type=click.Choice(AVAILABLE_RESOURCES), prompt="Kind")
@click.option("--filter", "-f", "fiql", help="FIQL filter, e.g. name==foo")
@click.option("--page-size", type=int)
@authenticate
@handle_api_exceptions
def list_entities(kind, fiql, page_size, auth: CLIAuthConfig):

  query = ListQuery(filter=fiql, page_size=page_size)

  with get_client(auth) as client:
    get_all, _ = RESOURCE_DEFINITIONS[kind]

    for entity in get_all(client, query):
      click.echo(entity.inner.model_dump_json(indent=4, by_alias=True, exclude_none=True))

@click.command()
@click.option("--kind", "-t", type=click.Choice(AVAILABLE_RESOURCES), prompt="Kind")
@click.option("--id", "-i", prompt=True)
@authenticate
@handle_api_exceptions
def get_entity(kind, id, auth: CLIAuthConfig):

  with get_client(auth) as client:
    _, get_by_id = RESOURCE_DEFINITIONS[kind]

    entity = get_by_id(client, id)

    click.echo(entity.inner.model_dump_json(indent=4, by_alias=True, exclude_none=True))

@click.command()
def show_query_parameters():

  click.echo(f"Query parameters for collection endpoints:\n")
  for field, info in ListQuery.model_fields.items():
    click.echo(f"{click.style(field,fg='green')} - {info.annotation}")

@click.group()
def rest():
    pass

rest.add_command(list_entities,"list")
rest.add_command(show_query_parameters,"query")
rest.add_command(get_entity,"get")
