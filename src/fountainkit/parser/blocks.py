"""Multi-line block absorbers for boneyard comments and notes."""

from __future__ import annotations

from typing import Generic, TypeVar

from fountainkit.config import get_logger
from fountainkit.parser.elements import TextBlock

logger = get_logger(__name__)

BlockT = TypeVar("BlockT", bound=TextBlock)


class BlockAbsorber(Generic[BlockT]):
    """Consume every line between an open marker and its close marker.

    Once open, an absorber takes each line verbatim (trimmed) regardless of
    what it looks like; the finished block is appended to ``collection``
    only when the close marker is seen.
    """

    def __init__(self, block_type: type[BlockT], collection: list[BlockT]) -> None:
        """Initialize the absorber.

        Args:
            block_type: Block class providing the open and close markers
            collection: Document list that receives sealed blocks
        """
        self.block_type = block_type
        self.collection = collection
        self.current: BlockT | None = None

    @property
    def active(self) -> bool:
        return self.current is not None

    def absorb(self, trimmed: str) -> bool:
        """Offer the current line to the absorber.

        Args:
            trimmed: The current line with surrounding whitespace removed

        Returns:
            True if the line was consumed
        """
        if self.current is None:
            if not trimmed.startswith(self.block_type.open_marker):
                return False
            self.current = self.block_type()
            logger.debug("Opened block", block=self.block_type.__name__)

        self.current.append_line(trimmed)
        if self.current.is_closed():
            self.collection.append(self.current)
            logger.debug(
                "Sealed block",
                block=self.block_type.__name__,
                lines=len(self.current.lines),
            )
            self.current = None
        return True

    def discard(self) -> BlockT | None:
        """Drop an unterminated block, returning it if there was one."""
        dropped, self.current = self.current, None
        return dropped
