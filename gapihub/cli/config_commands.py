import click
import yaml

from gapihub.sdk import config

# Define the schema of allowed configuration keys and their allowed values
ALLOWED_CONFIG = {
    "auth.mode": {
        "type": str,
        "allowed_values": ["token", "adc", "none"]
    },
    "auth.token_file": {"type": str},
    "api_key": {"type": str},
    "http.timeout": {"type": float},
    "http.user_agent": {"type": str},
    "retry.max_attempts": {"type": int},
    "retry.initial_backoff": {"type": float},
    "retry.max_backoff": {"type": float},
}

# Per-API base URL overrides, e.g. base_urls.chromemanagement
BASE_URL_PREFIX = "base_urls."


def _key_schema(key: str) -> dict:
    if key.startswith(BASE_URL_PREFIX) and len(key) > len(BASE_URL_PREFIX):
        return {"type": str}
    if key not in ALLOWED_CONFIG:
        raise click.UsageError(f"Configuration key '{key}' is not supported.")
    return ALLOWED_CONFIG[key]


@click.group()
def config_group():
    """Commands for managing gapihub configuration."""
    pass


@config_group.command('show')
def show_config():
    """Displays the current gapihub configuration."""
    config_data = config.load_config()
    click.echo(f"# {config.get_config_file_path()}")
    click.echo(yaml.safe_dump(config_data, default_flow_style=False))


@config_group.command('get')
@click.argument('key')
def get_config(key):
    """Prints one configuration value (dot-separated KEY)."""
    value = config.get_config_value(key)
    if value is None:
        raise SystemExit(1)
    if isinstance(value, (dict, list)):
        click.echo(yaml.safe_dump(value, default_flow_style=False).rstrip())
    else:
        click.echo(value)


@config_group.command('set')
@click.argument('key')
@click.argument('value')
def set_config(key, value):
    """
    Sets a configuration value for a supported key.

    \b
    Supported Keys:
      - auth.mode: Set the authentication mode.
                   Allowed values: 'token', 'adc', 'none'.
      - auth.token_file: Authorized-user token file used in 'token' mode.
      - api_key: API key for calls without scopes.
      - http.timeout, http.user_agent
      - retry.max_attempts, retry.initial_backoff, retry.max_backoff
      - base_urls.<api>: Override the base URL of one API.

    \b
    Examples:
      gapihub config set auth.mode adc
      gapihub config set retry.max_attempts 5
      gapihub config set base_urls.chromemanagement http://localhost:8080/
    """
    key_schema = _key_schema(key)

    # Validate allowed values
    if "allowed_values" in key_schema and value not in key_schema["allowed_values"]:
        allowed = ", ".join(f"'{v}'" for v in key_schema["allowed_values"])
        raise click.UsageError(f"Invalid value '{value}' for key '{key}'. Allowed values are: {allowed}.")

    target_type = key_schema["type"]
    if target_type is not str:
        try:
            value = target_type(value)
        except ValueError:
            raise click.UsageError(f"Value '{value}' for key '{key}' must be of type {target_type.__name__}.")

    config.set_config_value(key, value)
    click.echo(f"✓ Set '{key}' to: {value}")

    # Provide helpful guidance for ADC mode
    if key == "auth.mode" and value == "adc":
        click.echo("\nTo use Application Default Credentials, ensure you have authenticated with gcloud:")
        click.echo("  gcloud auth application-default login")
