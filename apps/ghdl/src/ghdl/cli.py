"""CLI for downloading files and directories from GitHub."""

import logging

import click
from dotenv import load_dotenv

from gh import GitHubClient, GitHubError, is_raw_url
from gh.client import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT

from .downloader import TreeDownloader

logger = logging.getLogger(__name__)

HELP_MESSAGE = """
ghdl - A tool to download files and directories from GitHub.

Usage:
  ghdl <github_url> <output_directory>
  ghdl <output_filename> <raw_github_url>

Example (file):
  ghdl https://github.com/username/repo/blob/main/path/to/file.ext ./output_dir

Example (directory):
  ghdl https://github.com/username/repo/tree/main/path/to/dir ./output_dir

Example (raw file):
  ghdl file.ext https://raw.githubusercontent.com/username/repo/main/path/to/file.ext

Options:
  --api-url URL      GitHub API base URL (env GHDL_API_URL)
  --timeout SECONDS  Request timeout (env GHDL_TIMEOUT)
  -r, --retries N    Attempts on network errors, default 1 (env GHDL_RETRIES)
  -v, --verbose      Verbosity (-v, -vv)
"""


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.command(add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1)
@click.option("--api-url", envvar="GHDL_API_URL", default=None, help="GitHub API base URL")
@click.option("--timeout", envvar="GHDL_TIMEOUT", type=float, default=DEFAULT_TIMEOUT, show_default=True)
@click.option("--retries", "-r", envvar="GHDL_RETRIES", type=int, default=DEFAULT_MAX_RETRIES, show_default=True)
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
def cli(args: tuple[str, ...], api_url: str | None, timeout: float, retries: int, verbose: int) -> None:
    """Download a file or directory tree from GitHub."""
    setup_logging(verbose)

    if len(args) != 2 or args[0] == "help":
        click.echo(HELP_MESSAGE)
        return

    first, second = args
    try:
        with GitHubClient(base_url=api_url, timeout=timeout, max_retries=retries) as client:
            downloader = TreeDownloader(client)
            if is_raw_url(second):
                summary = downloader.download_raw(second, first)
            else:
                summary = downloader.download_url(first, second)
    except GitHubError as e:
        logger.debug("Download failed", exc_info=True)
        click.echo(f"Error: {e}")
        raise SystemExit(1)

    click.echo("Content downloaded successfully!")
    click.echo(summary.describe())


def main() -> None:
    """Console entry point; reads a local .env before option parsing."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
