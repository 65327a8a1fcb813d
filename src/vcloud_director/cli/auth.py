import os
import functools
import click
import yaml
from vcloud_director.cli.config import CLIAuthConfig
from vcloud_director.client.api_client import VCDClient
from vcloud_director.client.exceptions import VCDException
from vcloud_director.interface.auth import ApiTokenAuthConfig, BasicAuthConfig, TokenAuthConfig
from vcloud_director.interface.config import ConfigFactory

HOME_DIR = os.path.expanduser("~") or os.environ.get("HOME") or os.environ.get("USERPROFILE")
VCD_DIR = os.path.join(HOME_DIR,".vcd")
AUTH_FILE = "active_profile.yaml"
PROFILES_FILE = "profiles.yaml"

def init_filesystem():
    if not os.path.exists(VCD_DIR):
        os.makedirs(VCD_DIR,exist_ok=True)

    if not os.path.exists(os.path.join(VCD_DIR,PROFILES_FILE)):
        open(os.path.join(VCD_DIR,PROFILES_FILE), "x").close()

def read_auth_profiles() -> list[CLIAuthConfig]:
    init_filesystem()

    filename = os.path.join(VCD_DIR,PROFILES_FILE)

    with open(filename, "r") as file:
        objs = yaml.safe_load(file)

        if objs == None:
            return []

        return [CLIAuthConfig(**obj) for obj in objs]

def write_auth_profiles(profiles: list[CLIAuthConfig]):
    profiles_dict = [profile.model_dump(exclude_unset=True) for profile in profiles]

    filename = os.path.join(VCD_DIR,PROFILES_FILE)

    with open(filename, "w") as file:
        file.write(yaml.safe_dump(profiles_dict))

def same_identity(a: CLIAuthConfig, b: CLIAuthConfig) -> bool:
    if a.api_url != b.api_url:
        return False
    if a.basic != None and b.basic != None:
        return a.basic.username == b.basic.username and a.basic.org == b.basic.org
    if a.api_token != None and b.api_token != None:
        return a.api_token.org == b.api_token.org
    if a.token != None and b.token != None:
        return a.token.org == b.token.org
    return False

def get_client(auth: CLIAuthConfig) -> VCDClient:
    client = VCDClient(href=auth.api_url, api_version=auth.api_version, insecure=auth.insecure, is_tm=auth.is_tm)

    if auth.basic != None:
        client.login(auth.basic.username, auth.basic.password, auth.basic.org)
    elif auth.api_token != None:
        client.login_with_api_token(auth.api_token.api_token, auth.api_token.org)
    elif auth.token != None:
        client.set_token(auth.token.token, auth.token.org)
    else:
        raise NotImplementedError()

    return client

@click.command()
def change_profile():
    profiles = read_auth_profiles()

    if len(profiles) == 0:
        click.echo("No profiles stored. Use 'vcd login' first.")
        return

    profile_dict = {}
    for idx, profile in enumerate(profiles):
        idx_str = str(idx+1)
        click.echo(f"({idx_str}): {profile.display_name}")
        profile_dict[idx_str] = profile

    profile = click.prompt('Profile', type=click.Choice(list(profile_dict.keys())))

    profile_dict[profile].write_config(os.path.join(VCD_DIR,AUTH_FILE))

    click.echo("Changed profile!")

@click.command()
@click.option("--auth-method", "-a", type=click.Choice(['basic', 'token', 'api-token']), prompt="Auth method")
@click.option("--base-url", "-b", prompt="Cloud Director url")
@click.option("--org", "-o", default="System", show_default=True)
@click.option("--username", "-u")
@click.option("--password", "-p")
@click.option("--token")
@click.option("--api-version", default="37.0", show_default=True)
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification")
@click.option("--tm", "is_tm", is_flag=True, help="Site is a Tenant Manager")
def login(auth_method, base_url, org, username, password, token, api_version, insecure, is_tm):

    cli_auth_config = CLIAuthConfig(api_url=base_url, api_version=api_version, insecure=insecure, is_tm=is_tm)

    if auth_method == 'basic':
        username = username if username != None else click.prompt('Username')
        password = password if password != None else click.prompt('Password', hide_input=True)
        cli_auth_config.basic = BasicAuthConfig(username=username, password=password, org=org)

    elif auth_method == 'token':
        token = token if token != None else click.prompt('Bearer token', hide_input=True)
        cli_auth_config.token = TokenAuthConfig(token=token, org=org)

    elif auth_method == 'api-token':
        token = token if token != None else click.prompt('API token', hide_input=True)
        cli_auth_config.api_token = ApiTokenAuthConfig(api_token=token, org=org)

    try:
        with get_client(cli_auth_config) as client:
            client.supported_versions()
    except VCDException as e:
        click.echo(f"Authentication failed: {e}")
        return False

    init_filesystem()
    profiles = [profile for profile in read_auth_profiles() if not same_identity(profile, cli_auth_config)]
    profiles.append(cli_auth_config)
    write_auth_profiles(profiles)

    cli_auth_config.write_config(os.path.join(VCD_DIR,AUTH_FILE))

    click.echo("Authentication successful!")
    return True

def authenticate(func):

    @functools.wraps(func)
    def wrapper(*args, **kwargs):

        file = os.path.join(VCD_DIR,AUTH_FILE)

        if not os.path.exists(file):
            click.echo("You are not logged in. Please login with 'vcd login'.")
            raise click.Abort()

        kwargs["auth"] = ConfigFactory.read_config_from_file(CLIAuthConfig,file)

        return func(*args, **kwargs)

    return wrapper
