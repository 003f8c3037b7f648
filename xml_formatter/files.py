"""
Loading user files and saving downloadable XML artifacts.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import structlog

from xml_formatter.core.config import Settings, get_settings
from xml_formatter.formatting.types import XMLError

logger = structlog.get_logger(__name__)

XML_MEDIA_TYPE = "application/xml"


class XMLFileError(XMLError):
    """A file could not be read or written."""
    pass


def read_xml_file(path: Union[str, Path]) -> str:
    """
    Read a user-supplied file as UTF-8 text.

    A leading byte order mark is dropped.

    Raises:
        XMLFileError: If the file is missing, unreadable or not UTF-8
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read file", path=str(path), error=str(e))
        raise XMLFileError(f"Failed to read file {path}: {e}") from e

    logger.debug("Read file", path=str(path), content_length=len(content))
    return content


@dataclass(frozen=True)
class DownloadArtifact:
    """A document packaged for saving, with its file name and media type."""

    filename: str
    content: str
    media_type: str = XML_MEDIA_TYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")

    def save(self, directory: Union[str, Path]) -> Path:
        """Write the artifact into ``directory`` and return the file path."""
        target = Path(directory) / self.filename
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(self.to_bytes())
        except OSError as e:
            logger.error("Failed to save artifact", path=str(target), error=str(e))
            raise XMLFileError(f"Failed to write {target}: {e}") from e

        logger.info("Saved artifact", path=str(target), media_type=self.media_type,
                    size=len(self.to_bytes()))
        return target


def input_artifact(content: str, settings: Optional[Settings] = None) -> DownloadArtifact:
    """Package the editor input for download."""
    settings = settings or get_settings()
    return DownloadArtifact(settings.input_filename, content, settings.media_type)


def output_artifact(content: str, settings: Optional[Settings] = None) -> DownloadArtifact:
    """Package a formatted or minified result for download."""
    settings = settings or get_settings()
    return DownloadArtifact(settings.output_filename, content, settings.media_type)
