"""CLI for repolink."""

import sys
from pathlib import Path

import click
import structlog

from repolink.config.logging import configure_logging
from repolink.config.settings import get_settings
from repolink.core.exceptions import InvalidRegionError, RepolinkError
from repolink.core.models.link import LineRange, LinkContext

logger = structlog.get_logger(__name__)


def _parse_lines(value: str) -> LineRange:
    """Parse ``N`` or ``N-M`` into a LineRange."""
    start, _, end = value.partition("-")
    try:
        return LineRange(start=int(start), end=int(end or start))
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        raise click.BadParameter(f"expected N or N-M with N <= M, got {value!r}") from e


def _parse_region(value: str) -> tuple[int, int]:
    """Parse ``START:END`` character offsets."""
    start, sep, end = value.partition(":")
    try:
        if not sep:
            raise ValueError(value)
        return int(start), int(end)
    except ValueError as e:
        raise click.BadParameter(f"expected START:END offsets, got {value!r}") from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """repolink: shareable links to files on GitHub and Bitbucket."""
    log_level = "DEBUG" if verbose else get_settings().log_level
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--lines", "-l", help="Line or line range to highlight, e.g. 10 or 10-20")
@click.option("--region", "-r", help="Character offsets START:END of a marked region")
@click.option("--remote", help="Remote name (default: origin)")
def link(file_path: str, lines: str | None, region: str | None, remote: str | None) -> None:
    """Print the web link to FILE_PATH on its current branch."""
    from repolink.services.linking import LinkService
    from repolink.utils.regions import line_range_from_region

    if lines and region:
        raise click.UsageError("--lines and --region are mutually exclusive")

    try:
        selection = None
        if lines:
            selection = _parse_lines(lines)
        elif region:
            start, end = _parse_region(region)
            try:
                text = Path(file_path).read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise InvalidRegionError(
                    f"Cannot map a region in {file_path}: not UTF-8 text",
                    details={"path": file_path, "reason": e.reason},
                ) from e
            selection = line_range_from_region(text, start, end)

        context = LinkContext(
            current_file_path=file_path,
            selection=selection,
            remote_name=remote,
        )
        url = LinkService().build_link_for(context)
    except RepolinkError as e:
        logger.debug("Link failed", error=e.message, **e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(url)


@cli.command()
@click.argument("path", default=".", type=click.Path(exists=True))
@click.option("--remote", help="Remote name (default: origin)")
def remote(path: str, remote: str | None) -> None:
    """Print the web URL of the repository containing PATH."""
    from repolink.services.linking import LinkService

    try:
        url = LinkService().remote_web_url(path, remote_name=remote)
    except RepolinkError as e:
        logger.debug("Remote lookup failed", error=e.message, **e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(url)


if __name__ == "__main__":
    cli()
