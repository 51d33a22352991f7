"""Environment variable utility functions for atlassian-adf."""

import os


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


def getenv(
    env: dict[str, str], env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve the value of an environment variable.

    The provided `env` mapping is checked first, then the process environment.

    Args:
        env: A dictionary containing environment variables and their values.
        env_var_name: The name of the environment variable to retrieve.
        default: Value returned when neither source defines the variable.

    Returns:
        The value of the environment variable if found, otherwise `default`.
    """
    return env.get(env_var_name, os.getenv(env_var_name, default))
