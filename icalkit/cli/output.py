"""Writing split chunks to disk, as loose files or a single ZIP archive."""

import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path

from icalkit.splitter.models import ICSChunk

logger = logging.getLogger(__name__)


def zip_file_name(chunk_count: int) -> str:
    """Archive name used for ``split --zip``."""
    return f"calendar_split_{chunk_count}_files.zip"


def write_chunks_to_directory(chunks: Sequence[ICSChunk], output_dir: Path) -> list[Path]:
    """Write each chunk to ``output_dir`` (created if missing).

    Returns:
        Paths written, in chunk order
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: list[Path] = []
    for chunk in chunks:
        path = output_dir / chunk.file_name
        # Chunk content already uses CRLF line endings
        path.write_text(chunk.content, encoding="utf-8", newline="")
        paths.append(path)
        logger.debug(f"Wrote {chunk.event_count} events to {path}")

    return paths


def write_chunks_to_zip(chunks: Sequence[ICSChunk], archive_path: Path) -> Path:
    """Write all chunks into one deflated ZIP archive."""
    archive_path.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for chunk in chunks:
            archive.writestr(chunk.file_name, chunk.content.encode("utf-8"))

    logger.debug(f"Wrote {len(chunks)} chunks to {archive_path}")
    return archive_path
