import logging

import click
from rich.console import Console
from rich.markup import escape

from .exceptions import UrlToMdError
from .output import write_output
from .pipeline import UrlToMarkdown

logger = logging.getLogger("url_to_md")
console = Console(stderr=True)


class ConsoleHandler(logging.Handler):
    """Prints log records as plain lines on the stderr console."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            console.print(self.format(record), markup=False, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    handler = ConsoleHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers = [h for h in logger.handlers if not isinstance(h, ConsoleHandler)]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _fail(ctx: click.Context, message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    ctx.exit(1)

@click.command(name="url-to-md", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("url", required=False)
@click.option("-o", "--output", metavar="FILE", help="Output file (default: stdout)")
@click.option("-v", "--verbose", is_flag=True, help="Show debug diagnostics")
@click.pass_context
def cli(ctx: click.Context, url: str, output: str, verbose: bool):
    """Convert any webpage to clean Markdown.

    \b
    Examples:
      url-to-md https://example.com
      url-to-md https://example.com -o article.md
    """
    if not url:
        click.echo(ctx.get_help())
        ctx.exit(1)

    _configure_logging(verbose)
    pipeline = ctx.obj if isinstance(ctx.obj, UrlToMarkdown) else UrlToMarkdown()

    try:
        markdown = pipeline.convert(url)
        write_output(markdown, output)
    except UrlToMdError as e:
        _fail(ctx, str(e))
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        _fail(ctx, str(e) or type(e).__name__)


def main():
    cli()


if __name__ == "__main__":
    main()
