"""ContextVar-based render configuration for Tejido.

Provides thread-local configuration using Python's ContextVars (PEP 567).
An HtmlRenderer created without an explicit config reads the active one.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from tejido.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(max_depth=50)):
        html = render(doc)

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

# Each nesting level costs two interpreter frames; stay well under the
# default recursion limit of 1000.
DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        max_depth: Deepest allowed nesting below the root (None = unbounded)
        text_transformer: Optional callback applied to text values before escaping

    """

    max_depth: int | None = DEFAULT_MAX_DEPTH
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Unknown keys are silently ignored, so a larger application config
        can be passed straight through.

        Example:
            >>> RenderConfig.from_dict({"max_depth": 10, "theme": "dark"}).max_depth
            10

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(max_depth=None)):
        ...     get_render_config().max_depth is None
        True

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
