"""
Filesystem Adapters

Implements RecordSource (CNAB file loader) and MatchExporter (JSON dump)
using the local filesystem.
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from ..core.domain import HEADER_LINES, TRAILER_LINES, CompanyMatch
from ..core.errors import CnabFileNotFoundError, WriteError
from ..core.ports import MatchExporter, RecordSource

logger = logging.getLogger(__name__)


class FilesystemRecordSource(RecordSource):
    """Reads a CNAB file and strips its header and trailer lines

    Undecodable bytes become U+FFFD instead of aborting the load. Latin-1
    remessa files decode exactly with encoding="latin-1".
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, path: str | Path) -> list[str]:
        """Return the data records, unmodified and in document order"""
        file_path = Path(path)
        if not file_path.is_file():
            raise CnabFileNotFoundError(file_path)

        content = file_path.read_text(encoding=self.encoding, errors="replace")
        lines = content.split("\n")

        # Slicing keeps documents with four lines or fewer as an empty list
        records = lines[HEADER_LINES:-TRAILER_LINES]
        logger.debug(f"Loaded {len(records)} records from {file_path} ({len(lines)} lines)")
        return records


class JsonFileExporter(MatchExporter):
    """Writes company matches as a timestamped JSON file"""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)

    def _get_path(self, now: Optional[datetime] = None) -> Path:
        """Get path for a new export file"""
        now = now or datetime.now(timezone.utc)
        stamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return self.output_dir / f"exportedData_{stamp}.json"

    def export(self, matches: Sequence[CompanyMatch]) -> Optional[Path]:
        """Save matches to disk, return path (None when there is nothing to save)"""
        if not matches:
            return None

        path = self._get_path()
        payload = json.dumps([m.to_dict() for m in matches], indent=2, ensure_ascii=False)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise WriteError(path, e.strerror or str(e)) from e

        logger.info(f"Exported {len(matches)} matches to {path}")
        return path
