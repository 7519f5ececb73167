"""ContextVar-based parse configuration for monadparse.

Provides thread-local configuration using Python's ContextVars (PEP 567).
``parse`` installs its config for the duration of a run; combinators that
need a setting (the repetition guard) read it from the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Per call
    from monadparse import parse, ParseConfig
    result, ok = parse(grammar, producer, ParseConfig(error_propagation=False))

    # Keyword overrides on top of the active config
    result, ok = parse(grammar, producer, initial_user_data=())

    # Or set it for a whole block
    with parse_config_context(ParseConfig(error_value="<error>")):
        result, ok = parse(grammar, producer)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        initial_user_data: User data carried by the initial parse state
        error_propagation: Raise on failure (True) or return
            ``(error_value, False)`` (False)
        error_value: Placeholder result returned when not propagating
        guard_empty_loops: Raise RepetitionError when a repeated parser
            succeeds without consuming; when False such loops never end

    """

    initial_user_data: Any = None
    error_propagation: bool = True
    error_value: Any = None
    guard_empty_loops: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "error_propagation": False,
            ...     "error_value": "<error>",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.error_propagation
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(guard_empty_loops=False)):
        ...     get_parse_config().guard_empty_loops
        False

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
