"""Chainkit exception hierarchy.

This module defines the exceptions raised by chains, prompt templates,
model providers and action targets. None of them are retried internally:
the orchestration core always propagates failures to its caller.
"""


class ChainkitError(Exception):
    """Base exception for all chainkit errors.

    All chainkit-specific exceptions should inherit from this class.
    """
    pass


class MissingInputError(ChainkitError):
    """Raised when a declared chain input key is absent at call time.

    Attributes:
        key: Name of the missing input key
        chain_type: Tag of the chain that was called
    """
    def __init__(self, key: str, chain_type: str | None = None):
        self.key = key
        self.chain_type = chain_type
        message = f"Missing input key '{key}'"
        if chain_type:
            message += f" for chain '{chain_type}'"
        super().__init__(message)


class ChainContractError(ChainkitError):
    """Raised when a chain does not produce one of its declared output keys."""

    def __init__(self, key: str, chain_type: str):
        self.key = key
        self.chain_type = chain_type
        super().__init__(f"Chain '{chain_type}' did not produce declared output key '{key}'")


class TemplateRenderError(ChainkitError):
    """Raised when a prompt placeholder cannot be resolved.

    Attributes:
        missing: Declared variable names that had no value
    """
    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing values for prompt variables: {', '.join(self.missing)}")


class UnknownResourceError(ChainkitError):
    """Raised when a restricted resource set names resources the target does not know.

    Attributes:
        missing: Resource (table) names that were not found
    """
    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Resources {self.missing} not found in database")


class UnsupportedChainTypeError(ChainkitError):
    """Raised when a chain payload carries an unrecognized chain kind tag."""

    def __init__(self, chain_type: str, available: list[str] | None = None):
        self.chain_type = chain_type
        self.available = available or []
        message = f"Chain type '{chain_type}' is not supported"
        if self.available:
            message += f". Supported chain types: {', '.join(self.available)}"
        super().__init__(message)


class ActionExecutionError(ChainkitError):
    """Raised when an action target fails (SQL error, HTTP failure or non-success status).

    The underlying exception, if any, is chained as ``__cause__``.

    Attributes:
        action: Kind of action that failed ("sql" | "http")
        status_code: HTTP status code, when the failure was a response status
    """
    def __init__(self, action: str, message: str, status_code: int | None = None):
        self.action = action
        self.status_code = status_code
        super().__init__(f"{action} action failed: {message}")


class ModelInvocationError(ChainkitError):
    """Raised when the language model provider call fails."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"Model invocation failed for provider '{provider}': {message}")


class ProviderNotFoundError(ChainkitError):
    """Raised when an LLM provider is not registered.

    Attributes:
        provider: Name of the provider that was not found
        available: List of available provider names
    """
    def __init__(self, provider: str, available: list[str] | None = None):
        self.provider = provider
        self.available = available or []
        message = f"Provider '{provider}' not found"
        if self.available:
            message += f". Available providers: {', '.join(self.available)}"
        super().__init__(message)


class ConfigurationError(ChainkitError):
    """Raised when configuration is invalid or missing required settings.

    Attributes:
        setting: Name of the setting that is invalid/missing
        message: Detailed error message
    """
    def __init__(self, setting: str, message: str | None = None):
        self.setting = setting
        self.message = message or f"Invalid or missing configuration for '{setting}'"
        super().__init__(self.message)


class APIKeyError(ConfigurationError):
    """Raised when a required API key is missing.

    Attributes:
        provider: Provider name requiring the API key
        env_var: Environment variable name for the API key
    """
    def __init__(self, provider: str, env_var: str):
        self.provider = provider
        self.env_var = env_var
        message = f"{env_var} is required for {provider}. Set {env_var}."
        super().__init__(env_var, message)
