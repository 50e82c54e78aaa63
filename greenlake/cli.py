import click
from rich.console import Console
from rich.table import Table
from . import __version__
from .client import GreenLakeClient
from .config.settings import Settings, get_settings
from .errors import GreenLakeError
from .models import UserListResponse
from .utils.telemetry import setup_logging, setup_telemetry


console = Console()


class GreenLakeCLI:
    def __init__(self, settings: Settings, trace: bool = False):
        self.settings = settings
        self.logger = setup_logging(self.settings.log_level)
        if trace:
            setup_telemetry()

    def make_client(self) -> GreenLakeClient:
        return GreenLakeClient.from_settings(self.settings)

    def show_token(self):
        token = self.make_client().get_token()

        table = Table(title="Token", show_header=True, header_style="bold magenta")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        access_token = token.access_token
        if len(access_token) > 16:
            access_token = f"{access_token[:16]}..."

        table.add_row("access_token", access_token)
        table.add_row("token_type", token.token_type)
        table.add_row("scope", token.scope)
        table.add_row("expiry", token.expiry)
        table.add_row("expires_in", str(token.expires_in))
        table.add_row("accessTokenOnly", str(token.access_token_only))

        console.print(table)

    def show_users(self, path: str, raw: bool = False):
        client = self.make_client()

        if raw:
            payload = client.get_users(path)
            console.print_json(payload.decode("utf-8"))
            return

        users = client.get_users_as(path, UserListResponse)

        table = Table(title=f"Users ({users.total_results})", show_header=True, header_style="bold magenta")
        table.add_column("User Name", style="cyan")
        table.add_column("Display Name")
        table.add_column("Given Name")
        table.add_column("Family Name")
        table.add_column("Active", style="green")

        for user in users.resources:
            table.add_row(
                user.user_name,
                user.display_name,
                user.name.given_name,
                user.name.family_name,
                "yes" if user.active else "no",
            )

        console.print(table)

    def run(self, action, *args, **kwargs) -> int:
        try:
            action(*args, **kwargs)
        except (GreenLakeError, ValueError) as e:
            console.print(f"[red]Error: {str(e)}[/red]")
            self.logger.error(f"CLI error: {str(e)}", exc_info=self.settings.log_level == "DEBUG")
            return 1
        return 0


@click.group()
@click.option("--host", help="API base URL (GREENLAKE_HOST)")
@click.option("--tenant-id", help="Tenant ID (GREENLAKE_TENANT_ID)")
@click.option("--api-key", help="Pre-issued API key (GREENLAKE_API_KEY)")
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]))
@click.option("--trace", is_flag=True, help="Print OpenTelemetry spans to the console")
@click.version_option(version=__version__, prog_name="greenlake")
@click.pass_context
def main(ctx, host, tenant_id, api_key, insecure, timeout, log_level, trace):
    """GreenLake tenant API client."""
    overrides = {}
    if host:
        overrides["host"] = host
    if tenant_id:
        overrides["tenant_id"] = tenant_id
    if api_key:
        overrides["api_key"] = api_key
    if insecure:
        overrides["verify_tls"] = False
    if timeout is not None:
        overrides["timeout"] = timeout
    if log_level:
        overrides["log_level"] = log_level

    settings = get_settings()
    if overrides:
        settings = settings.model_copy(update=overrides)

    ctx.obj = GreenLakeCLI(settings, trace=trace)


@main.command()
@click.pass_obj
def token(cli: GreenLakeCLI):
    """Obtain a bearer token."""
    ctx = click.get_current_context()
    ctx.exit(cli.run(cli.show_token))


@main.command()
@click.argument("path")
@click.option("--raw", is_flag=True, help="Print the raw JSON payload")
@click.pass_obj
def users(cli: GreenLakeCLI, path, raw):
    """List users under PATH of /scim/v1/tenant/<tenant>/, e.g. Users."""
    ctx = click.get_current_context()
    ctx.exit(cli.run(cli.show_users, path, raw=raw))


if __name__ == "__main__":
    main()
