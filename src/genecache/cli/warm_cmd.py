"""Warm command: walk every gene of an input list against the site.

Orchestrates the run:
1. Load config and apply command line overrides
2. Configure the event log
3. Open the gene list
4. Warm genes sequentially or on a worker pool
5. Print a summary; exit 2 if a references fetch aborted the run
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from genecache.api_clients.base import GeneCacheClient
from genecache.config.loader import load_config_with_overrides
from genecache.config.schema import WarmerConfig
from genecache.errors import RecordFormatError, WarmingAborted
from genecache.log_setup import configure_logging
from genecache.outcomes import WarmingReport
from genecache.records import iter_records, open_gene_list
from genecache.warming.engine import FetchTraversalEngine
from genecache.warming.pool import ConcurrentWarmer

logger = logging.getLogger(__name__)

EXIT_FAILURE = 2


def run_warming(config: WarmerConfig, input_path: Path) -> WarmingReport:
    """
    Warm the cache for every gene listed in ``input_path``.

    Args:
        config: Warmer configuration
        input_path: Tab separated gene/transcript list

    Returns:
        WarmingReport of a run that went through the whole list

    Raises:
        OSError: If the gene list cannot be opened or read
        UnicodeDecodeError: If the gene list is not UTF-8 text
        RecordFormatError: On a malformed input line
        WarmingAborted: If a references fetch failed
    """
    with open_gene_list(input_path) as handle, GeneCacheClient.from_config(config) as client:
        engine = FetchTraversalEngine(client, config.base_url)
        warmer = ConcurrentWarmer(engine, workers=config.workers)
        report = warmer.run(iter_records(handle))

    if report.aborted is not None:
        raise WarmingAborted(report.aborted)
    return report


@click.command('warm')
@click.option(
    '--input', '-i', 'input_path',
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Input file with list of paired dictybase gene and transcript ids [required]'
)
@click.option(
    '--url', '-u',
    default=None,
    help='Base url for dictybase [default: http://dictybase.org]'
)
@click.option(
    '--workers',
    type=click.IntRange(min=1, max=64),
    default=None,
    help='Number of genes warmed concurrently [default: 1]'
)
@click.pass_context
def warm(ctx, input_path, url, workers):
    """Warm the cache for every gene in the input list.

    Each input line holds a gene id and a transcript id separated by a tab.
    Stops with exit code 2 as soon as a references page cannot be fetched.
    """
    overrides = dict(ctx.obj['overrides'])
    overrides['base_url'] = url
    overrides['workers'] = workers

    try:
        config = load_config_with_overrides(ctx.obj['config_path'], overrides)
    except (FileNotFoundError, ValidationError) as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        sys.exit(EXIT_FAILURE)

    try:
        log_file = configure_logging(config.log)
    except OSError as e:
        click.echo(click.style(f"unable to open log file {e}", fg='red'), err=True)
        sys.exit(EXIT_FAILURE)

    try:
        logger.info(
            f"Warming {config.base_url} from {input_path} "
            f"(workers={config.workers}, config={config.config_hash()[:12]})"
        )
        report = run_warming(config, input_path)
    except WarmingAborted as e:
        click.echo(click.style(f"Warming aborted: {e}", fg='red'), err=True)
        logger.error(f"Warming aborted at gene {e.outcome.gene_id}")
        sys.exit(EXIT_FAILURE)
    except RecordFormatError as e:
        click.echo(click.style(f"Bad input: {e}", fg='red'), err=True)
        logger.error(str(e))
        sys.exit(EXIT_FAILURE)
    except UnicodeDecodeError as e:
        click.echo(click.style(f"cannot read file {input_path}: not UTF-8 text ({e})", fg='red'), err=True)
        logger.error(f"Gene list {input_path} is not valid UTF-8: {e}")
        sys.exit(EXIT_FAILURE)
    except OSError as e:
        click.echo(click.style(f"cannot open file {input_path} {e}", fg='red'), err=True)
        logger.exception("Failed to read gene list")
        sys.exit(EXIT_FAILURE)
    finally:
        if log_file is not None:
            log_file.close()

    click.echo(click.style("=== Warming Summary ===", bold=True))
    click.echo(f"Genes Cached: {report.genes_completed}")
    click.echo(f"URLs Fetched: {report.fetch_count}")
    click.echo(f"Non-fatal Failures: {report.failure_count}")
    click.echo(click.style("Warming complete!", fg='green', bold=True))
