"""`srenity config` commands for the API and auth settings."""

from cyclopts import App

from srenity.config import CLIENT_SECRET, KNOWN_KEYS, Config, get_config

config_app = App(name="config", help="Manage API URLs and client credentials")

SECRET_MASK = "********"


def _scoped(global_: bool) -> tuple[Config, str]:
    return get_config(use_global=global_), "global" if global_ else "local"


def _display(key: str, value: object) -> str:
    return SECRET_MASK if key == CLIENT_SECRET else str(value)


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Store a setting.

    Args:
        key: One of api_url, auth_url, client_id, client_secret
        value: Setting value
        global_: Store in ~/.srenity instead of the current directory
    """
    config, scope = _scoped(global_)
    config.set(key, value)
    print(f"{key} = {_display(key, value)} ({scope})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Remove a setting."""
    config, scope = _scoped(global_)
    config.unset(key)
    print(f"{key} removed ({scope})")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Print one setting, with client_secret masked."""
    config, _ = _scoped(global_)
    value = config.get(key)
    print(f"{key} is not set" if value is None else f"{key} = {_display(key, value)}")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """Print every setting, flagging the ones still missing."""
    config, scope = _scoped(global_)
    settings = config.list()

    for key in KNOWN_KEYS:
        print(f"{key} = {_display(key, settings[key])}" if key in settings else f"{key} (not set)")
    for key in sorted(settings.keys() - KNOWN_KEYS):
        print(f"{key} = {settings[key]} (unknown key)")
    print(f"({scope})")
