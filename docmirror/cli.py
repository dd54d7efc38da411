import signal
import sys

import click
from click import ParamType
from tqdm import tqdm

from docmirror.config import (
    DEFAULT_LOCALES,
    DEFAULT_TARGET_DIR,
    PublishConfig,
    parse_locales,
    set_log_level,
)
from docmirror.fs import fs_getsize, fs_isdir
from docmirror.navigation import synthesize
from docmirror.publish import publish as publish_locales
from docmirror.title import format_title
from docmirror.version import VERSION

options = {}


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug mode.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Set logging level.",
)
def cli(debug, log_level):
    """
    Publish generated documentation into a documentation site.

    The source tree is copied once per locale, and every directory of the copy
    gets a navigation metadata file.
    """
    options["debug"] = debug
    options["log_level"] = log_level or ("DEBUG" if debug else "INFO")
    set_log_level(options["log_level"])


def safe_cli():
    # options is filled only once cli() has parsed the command line
    debug = "--debug" in sys.argv[1:]
    if not debug:
        signal.signal(signal.SIGINT, signal.SIG_DFL)
    try:
        cli()
    except Exception as e:
        if debug:
            raise
        else:
            click.echo(f"\n[{type(e).__name__}] {e}", err=True)
            sys.exit(1)


class LocalesType(ParamType):
    name = "locales"

    def convert(self, value, param, ctx):
        if isinstance(value, list):
            return value
        try:
            return parse_locales(value)
        except ValueError as error:
            self.fail(str(error), param, ctx)


@cli.command(short_help="Copy the documentation into every locale of the site.")
@click.option(
    "-t",
    "--target-dir",
    type=click.Path(file_okay=False),
    default=DEFAULT_TARGET_DIR,
    show_default=True,
    help="Content directory of the documentation site.",
)
@click.option(
    "-l",
    "--locales",
    type=LocalesType(),
    default=",".join(DEFAULT_LOCALES),
    show_default=True,
    help="Comma-separated locales to publish, e.g. en,zh.",
)
@click.option("-g", "--progress-bar", is_flag=True, help="Show progress bar.")
def publish(target_dir: str, locales: list, progress_bar: bool):
    config = PublishConfig.from_env(target_dir=target_dir, locales=locales)

    def locale_callback(locale: str, locale_dir: str):
        message = f"Published {locale} to {locale_dir}"
        if progress_bar:
            tqdm.write(message)
        else:
            click.echo(message)

    if progress_bar:
        total = 0
        if fs_isdir(config.source_dir):
            total = fs_getsize(config.source_dir) * len(config.locales)
        sbar = tqdm(
            total=total,
            unit="B",
            ascii=True,
            unit_scale=True,
            unit_divisor=1024,
        )

        def callback(length: int):
            sbar.update(length)

        try:
            target_dirs = publish_locales(
                config, callback=callback, locale_callback=locale_callback
            )
        finally:
            sbar.close()
    else:
        target_dirs = publish_locales(config, locale_callback=locale_callback)

    click.echo(f"Published {len(target_dirs)} locale(s)")


@cli.command(short_help="Regenerate navigation metadata of a published tree.")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
def nav(path: str):
    synthesize(path)
    click.echo(f"Navigation written under {path}")


@cli.command(short_help="Show the display title of names.")
@click.argument("names", nargs=-1)
def title(names):
    for name in names:
        click.echo(format_title(name))


@cli.command(short_help="Return the docmirror version.")
def version():
    click.echo(VERSION)


if __name__ == "__main__":
    # Usage: python -m docmirror.cli
    safe_cli()  # pragma: no cover
