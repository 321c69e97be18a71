"""CLI entry point for api-config-kit."""

import functools
import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from api_config_kit.adapter.response import CLIENT_KINDS, classify, convert_response_type
from api_config_kit.config.manifest import load_manifest
from api_config_kit.errors import ApiConfigError
from api_config_kit.path.template import resolve, to_canonical_form

DEFAULT_CLIENT = "axios"

client_option = click.option(
    "--client",
    default=DEFAULT_CLIENT,
    envvar="API_CONFIG_KIT_CLIENT",
    show_default=True,
    type=click.Choice(CLIENT_KINDS),
    help="HTTP client convention to produce directives for.",
)


def _reports_errors(command):
    """Turn library errors into a clean CLI failure."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (ApiConfigError, ValidationError) as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _parse_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    values = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="VALUES")
        values[key] = value
    return values


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Config Kit: inspect endpoint paths and content type adapters."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command("classify")
@click.argument("content_types", nargs=-1, required=True)
def classify_cmd(content_types: tuple[str, ...]):
    """Print the content type family of each CONTENT_TYPE."""
    for content_type in content_types:
        click.echo(f"{content_type}\t{classify(content_type)}")


@main.command()
@click.argument("content_types", nargs=-1, required=True)
@client_option
@_reports_errors
def adapt(content_types: tuple[str, ...], client: str):
    """Print the response directive for each CONTENT_TYPE as JSON."""
    for content_type in content_types:
        click.echo(json.dumps(convert_response_type(content_type, client)))


@main.command("resolve")
@click.argument("template")
@click.argument("values", nargs=-1)
def resolve_cmd(template: str, values: tuple[str, ...]):
    """Fill TEMPLATE placeholders from key=value VALUES."""
    click.echo(resolve(template, _parse_pairs(values)))


@main.command()
@click.argument("template")
def canonical(template: str):
    """Print TEMPLATE in OpenAPI brace notation."""
    click.echo(to_canonical_form(template))


@main.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@client_option
@_reports_errors
def routes(manifest: Path, client: str):
    """List the endpoints of a route MANIFEST with their response directives."""
    configs = load_manifest(manifest)
    for config in configs:
        directive = json.dumps(config.convert_response_type(client))
        click.echo(f"{config.http_method} {config.make_openapi_path()} {directive}")
    click.echo(f"{len(configs)} endpoints.")
