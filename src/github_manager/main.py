import logging
from collections.abc import Iterator
from contextlib import contextmanager
from logging import Logger, getLogger
from pathlib import Path
from typing import Any, Literal

import click
import httpx
from pydantic import TypeAdapter

from github_manager.clients.errors.github import ClientError
from github_manager.clients.github import ReturnFormat, get_http_client
from github_manager.managers.billing import BillingManager
from github_manager.managers.emojis import DEFAULT_EMOJI_SUFFIX, EmojisManager
from github_manager.managers.environments import EnvironmentsManager
from github_manager.managers.gitignore import GitignoreManager
from github_manager.managers.licenses import LicensesManager
from github_manager.managers.meta import MetaManager
from github_manager.managers.secrets import SecretsManager
from github_manager.managers.watching import WatchingManager

logger: Logger = getLogger(name=__name__)

BillingProduct = Literal["actions", "packages", "shared-storage"]


def echo_json(value: Any) -> None:
    click.echo(TypeAdapter(Any).dump_json(value, indent=2, by_alias=True).decode("utf-8"))


def require(value: Any, what: str) -> Any:
    if value is None:
        msg = f"{what} could not be found"
        raise click.ClickException(msg)
    return value


@contextmanager
def client_errors() -> Iterator[None]:
    try:
        yield
    except (ClientError, ValueError) as e:
        raise click.ClickException(str(e)) from e


class CliClient:
    """Builds the HTTP client the first time a command needs it, so `--help` works without a token."""

    def __init__(self, ctx: click.Context, token: str | None):
        self._ctx = ctx
        self._token = token
        self._http_client: httpx.Client | None = None

    @property
    def http_client(self) -> httpx.Client:
        if self._http_client is None:
            with client_errors():
                self._http_client = get_http_client(token=self._token)
            self._ctx.call_on_close(self._http_client.close)

        return self._http_client


@click.group()
@click.option("--token", envvar=["GITHUB_TOKEN", "GITHUB_PERSONAL_ACCESS_TOKEN"], default=None, help="The GitHub access token")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="The level to log at",
)
@click.pass_context
def cli(ctx: click.Context, token: str | None, log_level: str):
    """Manage GitHub resources through the REST API."""

    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    ctx.obj = CliClient(ctx=ctx, token=token)


@cli.command()
@click.argument("names", nargs=-1)
@click.option("--download-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Download the images here")
@click.option("--suffix", default=DEFAULT_EMOJI_SUFFIX, show_default=True, help="The file suffix of downloaded images")
@click.pass_obj
def emojis(client: CliClient, names: tuple[str, ...], download_dir: Path | None, suffix: str):
    """List the emojis available on GitHub, or download their images."""

    manager = EmojisManager(http_client=client.http_client)

    with client_errors():
        if download_dir is not None:
            if not names:
                msg = "Name the emojis to download"
                raise click.UsageError(msg)

            written = manager.download_emojis(names=names, directory=download_dir, suffix=suffix)
            echo_json([str(path) for path in written])
            return

        echo_json(require(manager.get_emojis(names=names or None, return_format=ReturnFormat.JSON), "Emojis"))


@cli.command()
@click.pass_obj
def zen(client: CliClient):
    """Print a sentence from the Zen of GitHub."""

    with client_errors():
        click.echo(MetaManager(http_client=client.http_client).get_zen())


@cli.command()
@click.argument("name", required=False)
@click.pass_obj
def gitignore(client: CliClient, name: str | None):
    """List the .gitignore templates, or print the template NAME."""

    manager = GitignoreManager(http_client=client.http_client)

    with client_errors():
        if name is None:
            echo_json(require(manager.list_templates(), "Gitignore templates"))
            return

        click.echo(require(manager.get_template(name=name), f"Gitignore template {name}").source)


@cli.command(name="license")
@click.argument("license_key", required=False)
@click.option("--featured", is_flag=True, default=False, help="Only list featured licenses")
@click.pass_obj
def license_command(client: CliClient, license_key: str | None, featured: bool):
    """List the commonly used licenses, or show the license LICENSE_KEY."""

    manager = LicensesManager(http_client=client.http_client)

    with client_errors():
        if license_key is None:
            echo_json(require(manager.list_licenses(featured=featured or None), "Licenses"))
            return

        echo_json(require(manager.get_license(license_key=license_key), f"License {license_key}"))


@cli.command()
@click.option("--org", default=None, help="The organization to get billing for")
@click.option("--user", "username", default=None, help="The user to get billing for")
@click.option("--product", type=click.Choice(["actions", "packages", "shared-storage"]), default="actions", show_default=True)
@click.pass_obj
def billing(client: CliClient, org: str | None, username: str | None, product: BillingProduct):
    """Show the billing usage of an organization or a user."""

    if (org is None) == (username is None):
        msg = "Pass exactly one of --org or --user"
        raise click.UsageError(msg)

    manager = BillingManager(http_client=client.http_client)

    with client_errors():
        if org is not None:
            org_getters = {
                "actions": manager.get_organization_actions_billing,
                "packages": manager.get_organization_packages_billing,
                "shared-storage": manager.get_organization_shared_storage_billing,
            }
            echo_json(require(org_getters[product](org=org), f"Billing of {org}"))
        else:
            user_getters = {
                "actions": manager.get_user_actions_billing,
                "packages": manager.get_user_packages_billing,
                "shared-storage": manager.get_user_shared_storage_billing,
            }
            echo_json(require(user_getters[product](username=username), f"Billing of {username}"))


@cli.command(name="set-secret")
@click.argument("owner")
@click.argument("repo")
@click.argument("secret_name")
@click.option("--value", prompt=True, hide_input=True, help="The value of the secret")
@click.pass_obj
def set_secret(client: CliClient, owner: str, repo: str, secret_name: str, value: str):
    """Create or update the repository secret SECRET_NAME."""

    manager = SecretsManager(http_client=client.http_client)

    if not manager.create_or_update_repository_secret(owner=owner, repo=repo, secret_name=secret_name, secret_value=value):
        msg = f"Setting secret {secret_name} on {owner}/{repo} failed with status {manager.status_code}"
        raise click.ClickException(msg)

    logger.info(f"Set secret {secret_name} on {owner}/{repo}")


@cli.command(name="delete-secret")
@click.argument("owner")
@click.argument("repo")
@click.argument("secret_name")
@click.pass_obj
def delete_secret(client: CliClient, owner: str, repo: str, secret_name: str):
    """Delete the repository secret SECRET_NAME."""

    manager = SecretsManager(http_client=client.http_client)

    if not manager.delete_repository_secret(owner=owner, repo=repo, secret_name=secret_name):
        msg = f"Deleting secret {secret_name} from {owner}/{repo} failed with status {manager.status_code}"
        raise click.ClickException(msg)


@cli.command()
@click.argument("owner")
@click.argument("repo")
@click.option("--page", type=int, default=None)
@click.option("--per-page", type=int, default=None)
@click.pass_obj
def watchers(client: CliClient, owner: str, repo: str, page: int | None, per_page: int | None):
    """List the people watching a repository."""

    with client_errors():
        users = WatchingManager(http_client=client.http_client).list_watchers(owner=owner, repo=repo, page=page, per_page=per_page)

    echo_json([user.login for user in require(users, f"Repository {owner}/{repo}")])


@cli.command()
@click.argument("owner")
@click.argument("repo")
@click.pass_obj
def environments(client: CliClient, owner: str, repo: str):
    """List the deployment environments of a repository."""

    with client_errors():
        environments_list = EnvironmentsManager(http_client=client.http_client).list_environments(owner=owner, repo=repo)

    echo_json(require(environments_list, f"Repository {owner}/{repo}"))


if __name__ == "__main__":
    cli()
