"""Base classes for renderer options."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from notion2html.constants import DEFAULT_STRICT_MODE

LogSink = Callable[[str], None]


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options shared by all renderers.

    Parameters
    ----------
    strict_mode : bool, default False
        Raise ``RenderingError`` on soft failures (unknown block types,
        malformed dates, tables without columns) instead of logging them and
        rendering a degraded fragment.
    log_sink : callable or None, default None
        Receives the formatted message of every soft failure, whether or not
        strict mode is enabled. Messages are also logged as warnings on the
        module logger.

    """

    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={
            "help": "Abort rendering on unsupported or malformed content instead of logging and skipping it",
            "importance": "core",
        },
    )
    log_sink: Optional[LogSink] = field(
        default=None,
        compare=False,
        metadata={"help": "Callable receiving soft-failure messages", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if self.log_sink is not None and not callable(self.log_sink):
            raise ValueError(f"log_sink must be callable, got {type(self.log_sink).__name__}")
