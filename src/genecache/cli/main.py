"""Main CLI entry point for genecache.

Provides command group with global options and subcommands for cache warming.
"""

from pathlib import Path

import click
from pydantic import ValidationError

from genecache import __version__
from genecache.config.loader import load_config_with_overrides
from genecache.cli.warm_cmd import warm


@click.group()
@click.version_option(__version__, prog_name="genecache")
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Path to YAML configuration file (defaults are used when omitted)'
)
@click.option(
    '--log-level',
    type=click.Choice(['debug', 'info', 'warn', 'error', 'fatal', 'panic']),
    default=None,
    help='Log level for the application [default: info]'
)
@click.option(
    '--log-format',
    type=click.Choice(['json', 'text']),
    default=None,
    help='Format of the logging output, either json or text [default: json]'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Name of the output log file, default goes to STDERR'
)
@click.pass_context
def cli(ctx, config, log_level, log_format, log_file):
    """genecache: cli for caching all dictybase genes.

    Walks the gene, protein, panel and references pages of every gene in an
    input list so the site cache is warm before users arrive.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['overrides'] = {
        'log.level': log_level,
        'log.format': log_format,
        'log.file': log_file,
    }


@cli.command()
@click.pass_context
def info(ctx):
    """Display genecache version and configuration summary."""
    config_path = ctx.obj['config_path']

    click.echo(f"genecache v{__version__}")
    click.echo(f"Config: {config_path or '(defaults)'}")
    click.echo()

    try:
        config = load_config_with_overrides(config_path, ctx.obj['overrides'])
    except (FileNotFoundError, ValidationError) as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(2)

    click.echo(f"Config Hash: {config.config_hash()[:16]}...")
    click.echo()

    click.echo(click.style("Site:", bold=True))
    click.echo(f"  Base URL: {config.base_url}")
    click.echo(f"  Workers:  {config.workers}")
    click.echo()

    click.echo(click.style("HTTP:", bold=True))
    click.echo(f"  Timeout: {config.http.timeout_seconds}s")
    click.echo(f"  Follow Redirects: {config.http.follow_redirects}")
    click.echo()

    click.echo(click.style("Logging:", bold=True))
    click.echo(f"  Level:  {config.log.level}")
    click.echo(f"  Format: {config.log.format}")
    click.echo(f"  File:   {config.log.file or 'STDERR'}")


# Register commands
cli.add_command(warm)


if __name__ == '__main__':
    cli()
