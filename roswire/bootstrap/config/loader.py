import os
from pathlib import Path

CONFIG_ENV = "ROSWIRECONFIG"
DEFAULT_CONFIG_FILE = "roswire.yaml"


def get_configfile() -> Path | None:
    """
    Locate the optional codec configuration file.

    Priority: ENV > default file in current working directory. Unlike a
    daemon, a library must work without any file, so a missing default is
    not an error; an explicitly configured path that does not exist is.
    """
    raw = os.getenv(CONFIG_ENV)

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIG_FILE
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise FileNotFoundError(
            f"[config] Configuration file not found: '{file}'.\n"
            f"  - Fix the {CONFIG_ENV} environment variable\n"
            f"  - Or unset it to use '{DEFAULT_CONFIG_FILE}' from the current working directory."
        )

    return file
