"""Contains exceptions raised when reconciling and parsing changelog configuration."""


class ConfigParseError(Exception):
    """Raised when a custom sections description cannot be parsed."""

    def __init__(self, message: str, diagnostic: str | None = None) -> None:
        """Initializes the exception with the underlying parse diagnostic."""
        if diagnostic:
            message = f"{message}: {diagnostic}"
        super().__init__(message)
        self.diagnostic = diagnostic


class RequiredConfigurationElementError(Exception):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name}")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name
