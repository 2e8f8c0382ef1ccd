"""CLI decorators for error reporting."""

import logging
from functools import wraps

import click

from gapihub.sdk.exceptions import ApiError, ValidationError

logger = logging.getLogger(__name__)


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    obj = ctx.find_root().obj or {}
    return bool(obj.get("debug"))


def handle_api_errors(f):
    """
    Decorator turning gapihub errors into CLI exits.

    API and I/O errors print 'Error: ...' to stderr and exit with status 1.
    With --debug the full error detail follows. Problems with the command
    line itself become click usage errors (status 2).
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ApiError as e:
            click.echo(f"Error: {e}", err=True)
            if _debug_enabled():
                click.echo(e.detail(), err=True)
            raise SystemExit(1)
        except ValidationError as e:
            raise click.UsageError(str(e))
        except OSError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
    return decorated_function
