"""ContextVar-based scan configuration for inistream.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from inistream.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(comment_prefixes=(";", "#"))):
        parse(source, handler)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        comment_prefixes: Line prefixes that mark a whole-line comment

    """

    comment_prefixes: tuple[str, ...] = (";",)

    def __post_init__(self) -> None:
        if not self.comment_prefixes:
            raise ValueError("comment_prefixes must not be empty")
        for prefix in self.comment_prefixes:
            if not prefix or prefix.strip() != prefix or prefix.startswith("["):
                raise ValueError(f"Invalid comment prefix: {prefix!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. List values for comment_prefixes are
        converted to tuples.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "comment_prefixes": [";", "#"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comment_prefixes
            (';', '#')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "comment_prefixes" in filtered:
            filtered["comment_prefixes"] = tuple(filtered["comment_prefixes"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(comment_prefixes=("#",))):
        ...     events = list(scan("# note"))
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
