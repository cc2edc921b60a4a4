from __future__ import annotations


class ConfigurationError(Exception):
    """Base class for every error raised while acquiring or saving a configuration."""


class ConfigNotFoundError(ConfigurationError, FileNotFoundError):
    """The configuration file does not exist and creating it was not requested."""


class ConfigParseError(ConfigurationError, ValueError):
    """The configuration or template is not a JSON object."""


class ConfigIOError(ConfigurationError, OSError):
    """Reading or writing the configuration failed (disk or network)."""


class MissingTemplateError(ConfigurationError, FileNotFoundError):
    """The bundled default configuration is missing: a packaging defect."""


class ConfigurationNotLoadedError(ConfigurationError, RuntimeError):
    """The manager was used before its configuration was acquired."""


def not_found_message(config_file_path: str) -> str:
    return (
        f"{config_file_path} not found. Create a default configuration file by loading it once with "
        "create_if_missing=True (or set CONFIG_CREATE_IF_MISSING=true), which copies the bundled "
        "DefaultConfigurations template into place. If this is an additional player instance, copy the "
        "StartupConfiguration.json file from the main project's root folder into this instance's working "
        "directory instead."
    )
