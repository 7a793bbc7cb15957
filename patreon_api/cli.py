#!/usr/bin/env python3
"""
CLI interface for the Patreon API client.
"""

import functools
import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from .client import PatreonClient
from .config import Config
from .errors import PatreonError
from .options import RequestOptions
from .processors.export import CampaignExporter


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_options(
    include: Optional[str],
    fields: Tuple[str, ...],
    page_size: Optional[int],
    page_cursor: Optional[str]
) -> RequestOptions:
    """Build request options from CLI values. Fieldsets are given as TYPE=a,b."""
    fieldsets = {}
    for fieldset in fields:
        resource, sep, names = fieldset.partition('=')
        if not sep or not resource:
            raise click.BadParameter(f"Expected TYPE=field1,field2, got '{fieldset}'", param_hint='--fields')
        fieldsets[resource] = names
    try:
        return RequestOptions(include=include, fields=fieldsets, page_size=page_size, page_cursor=page_cursor)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e


def request_options(command):
    """Add include, fieldset and pagination options to a command."""
    @click.option('--include', help='Comma-separated relationships to include')
    @click.option('--fields', multiple=True, help='Sparse fieldset as TYPE=field1,field2 (repeatable)')
    @click.option('--page-size', type=int, help='Page size for list endpoints')
    @click.option('--page-cursor', help='Pagination cursor for list endpoints')
    @click.option('--depth', type=int, default=1, show_default=True, help='Relationship levels to expand in output')
    @functools.wraps(command)
    def wrapper(include, fields, page_size, page_cursor, depth, **kwargs):
        options = build_options(include, fields, page_size, page_cursor)
        return command(options=options, depth=depth, **kwargs)
    return wrapper


def echo_entities(result, depth: int) -> None:
    if isinstance(result, list):
        payload = [entity.to_dict(depth) for entity in result]
    else:
        payload = result.to_dict(depth)
    click.echo(json.dumps(payload, indent=2, default=str))


def run_fetch(fetch, depth: int) -> None:
    """Run a client fetch and print the result as JSON."""
    try:
        with PatreonClient.from_env() as client:
            result = fetch(client)
        echo_entities(result, depth)
    except (PatreonError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """Patreon API - fetch typed resources from the Patreon API v2."""
    setup_logging(verbose)


@cli.command()
@request_options
def identity(options: RequestOptions, depth: int):
    """Fetch the user the OAuth token belongs to."""
    run_fetch(lambda client: client.fetch_identity(options), depth)


@cli.command()
@request_options
def campaigns(options: RequestOptions, depth: int):
    """Fetch campaigns owned by the authorized user."""
    run_fetch(lambda client: client.fetch_campaigns(options), depth)


@cli.command()
@click.argument('campaign_id')
@request_options
def campaign(campaign_id: str, options: RequestOptions, depth: int):
    """Fetch a single campaign by id."""
    run_fetch(lambda client: client.fetch_campaign_by_id(campaign_id, options), depth)


@cli.command()
@click.argument('member_id')
@request_options
def member(member_id: str, options: RequestOptions, depth: int):
    """Fetch a single member by id."""
    run_fetch(lambda client: client.fetch_member_by_id(member_id, options), depth)


@cli.command()
@click.argument('campaign_id')
@request_options
def members(campaign_id: str, options: RequestOptions, depth: int):
    """Fetch one page of a campaign's members."""
    run_fetch(lambda client: client.fetch_members_by_campaign_id(campaign_id, options), depth)


@cli.command()
@click.option('--output-dir', type=click.Path(), default='./data', help='Output directory for parquet files')
@click.option('--no-timestamp', is_flag=True, help='Disable timestamp suffix on files')
def export_campaigns(output_dir: str, no_timestamp: bool):
    """Export campaigns with tiers, benefits and goals into parquet files."""
    options = RequestOptions(include=Config().get_includes('campaigns'))
    try:
        with PatreonClient.from_env() as client:
            fetched = client.fetch_campaigns(options)

        exporter = CampaignExporter(output_dir=Path(output_dir))
        output_files = exporter.process_to_parquet(fetched, timestamp_suffix=not no_timestamp)
    except (PatreonError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    click.echo(f"✅ Exported {len(fetched)} campaigns")
    for filepath in output_files:
        click.echo(f"   📄 {filepath}")


@cli.command()
def list_endpoints():
    """List available API endpoints."""
    config = Config()
    click.echo("Available endpoints:")
    for endpoint in config.list_endpoints():
        click.echo(f"  • {endpoint}")


@cli.command()
@click.argument('endpoint')
def schema(endpoint: str):
    """Show path, includes and scopes of an endpoint."""
    try:
        endpoint_config = Config().get_endpoint(endpoint)
    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    click.echo(f"Endpoint {endpoint}: {endpoint_config.path}")
    click.echo(f"  resource: {endpoint_config.resource_type}{' (list)' if endpoint_config.many else ''}")
    click.echo(f"  includes: {', '.join(endpoint_config.includes) or '-'}")
    click.echo(f"  scopes:   {', '.join(endpoint_config.scopes) or '-'}")


if __name__ == '__main__':
    cli()
