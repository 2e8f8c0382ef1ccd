"""gapihub CLI - Command-line interface for Google REST APIs."""

import logging
import os

import click
from click_option_group import optgroup, MutuallyExclusiveOptionGroup
from dotenv import load_dotenv

from gapihub import __version__
from gapihub.apis import HUBS

from .config_commands import config_group as config_module
from .engine import api_group, describe_apis


# Configure logging at the application level
if not logging.root.handlers:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL),
                        format='%(asctime)s - %(levelname)s - %(message)s')
# Suppress noisy logs from the HTTP and auth stacks
logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('google.auth').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="gapihub")
@click.option('--config-dir', type=click.Path(file_okay=False),
              help='Directory holding config.yaml (overrides GAPIHUB_CONFIG_DIR).')
@click.option('--debug', is_flag=True, help='Log requests and print full error details.')
@click.option('--scope', 'scopes', multiple=True, metavar='URL',
              help="Request this scope instead of the method's default (repeatable; aliases allowed).")
@optgroup.group('Authentication', cls=MutuallyExclusiveOptionGroup)
@optgroup.option('--token-file', type=click.Path(), help='Use an authorized-user token file.')
@optgroup.option('--adc', is_flag=True, help='Use Application Default Credentials.')
@optgroup.option('--api-key', help='Authorize with an API key instead of an OAuth token.')
@click.pass_context
def gapihub(ctx, config_dir, debug, scopes, token_file, adc, api_key):
    """gapihub - call Google REST APIs from the command line.

    \b
    Usage: gapihub <api> <resource> <method> [ARGS] [-p k=v] [-r k=v] [-o FILE]
    Example:
      gapihub chromemanagement1 customers apps-android-get \\
          customers/my_customer/apps/android/com.google.android.apps.docs
    """
    ctx.ensure_object(dict)
    if config_dir:
        os.environ["GAPIHUB_CONFIG_DIR"] = config_dir
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug(f"gapihub {__version__} debug logging enabled")
    ctx.obj.update({
        "debug": debug,
        "scopes": scopes,
        "token_file": token_file,
        "adc": adc,
        "api_key": api_key,
    })


@click.command()
def apis():
    """List the available APIs, resources and methods."""
    for line in describe_apis(HUBS):
        click.echo(line)


# Add commands to groups using add_command()
gapihub.add_command(config_module, name='config')
gapihub.add_command(apis, name='apis')
for _name, _hub_cls in HUBS.items():
    gapihub.add_command(api_group(_name, _hub_cls))


def main():
    """Entry point for the CLI."""
    load_dotenv()
    gapihub()


if __name__ == "__main__":
    main()
