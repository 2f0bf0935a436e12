"""Assembly of changelog entries into a Markdown document."""

import structlog

logger = structlog.get_logger(__name__)


class MarkdownWriter:
    """Handles the document-level Markdown around changelog entries."""

    def __init__(self, header: str) -> None:
        """Initialize with the document header."""
        self.header = header.strip()

    def compose(self, entries: list[str]) -> str:
        """Join entries, newest first, under the document header."""
        content = f"{self.header}\n\n" if self.header else ""
        content += "".join(entries)
        logger.info("Composed changelog document", entries=len(entries))
        return content
