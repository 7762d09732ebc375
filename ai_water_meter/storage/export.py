"""
History export and import.

JSON export is a pretty-printed array of records; CSV export has one row
per record with standard quoting. Importing a JSON history fails open: an
unreadable file yields an empty history rather than an error.
"""

import csv
import io
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Union

from .models import PromptRecord

logger = logging.getLogger(__name__)

CSV_HEADER = ["Timestamp", "Prompt", "Tokens", "Energy (kWh)", "Water (ml)"]


class ExportFormat(Enum):
    JSON = "json"
    CSV = "csv"


def export_json(records: Iterable[PromptRecord]) -> str:
    """Serialize records as a pretty-printed JSON array."""
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def export_csv(records: Iterable[PromptRecord]) -> str:
    """Serialize records as CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow([
            record.timestamp.isoformat(),
            record.prompt,
            record.total_tokens,
            record.real_world_kwh,
            record.real_world_water_ml,
        ])
    return buffer.getvalue()


def write_export(
    records: Iterable[PromptRecord],
    path: Union[str, Path],
    fmt: ExportFormat = ExportFormat.JSON
) -> Path:
    """Write an export file.

    Args:
        records: Records to export
        path: Destination file
        fmt: Export format

    Returns:
        The path written to
    """
    path = Path(path)
    content = export_json(records) if fmt == ExportFormat.JSON else export_csv(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    logger.info("Exported history to %s as %s", path, fmt.value)
    return path


def load_json_history(path: Union[str, Path]) -> List[PromptRecord]:
    """Load a JSON history file.

    A missing file, malformed JSON or a document that is not a list yields
    an empty history. Individual malformed entries are skipped.
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("History file not found: %s", path)
        return []
    except (OSError, ValueError) as exc:
        logger.warning("Could not read history file %s: %s", path, exc)
        return []

    if not isinstance(document, list):
        logger.warning("History file %s does not contain a list", path)
        return []

    records = []
    for index, entry in enumerate(document):
        try:
            records.append(PromptRecord.from_dict(entry))
        except ValueError as exc:
            logger.warning("Skipping malformed history entry %d: %s", index, exc)
    return records
