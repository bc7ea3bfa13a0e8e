"""
JSON file storage helpers.

Every collection (customers, services, payments) lives in its own
file holding a single JSON array of records.  Reads never fail: a
missing file, an unreadable file or a document that is not an array
are all treated as an empty collection.  Writes replace the whole file
with the full collection and never leave a partially written file.

There is no locking.  Two processes writing the same file will race
and the last writer wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional


logger = logging.getLogger(__name__)


def ensure_file_exists(path: str) -> None:
    """Create ``path`` holding an empty array if it does not exist yet."""
    file_path = Path(path)
    if file_path.exists():
        return
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("[]", encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not create storage file %s: %s", path, exc)


def load_json_array(path: str) -> List[Dict[str, Any]]:
    """Load a JSON array of records from ``path``.

    Returns an empty list when the file is missing, cannot be parsed or
    does not contain an array.  Elements that are not JSON objects are
    dropped.
    """
    document = load_json_document(path)
    if document is None:
        return []
    if not isinstance(document, list):
        logger.warning("Storage file %s does not hold an array; treating as empty", path)
        return []
    return [item for item in document if isinstance(item, dict)]


def load_json_document(path: str) -> Optional[Any]:
    """Return the parsed JSON content of ``path`` or ``None`` on any failure."""
    file_path = Path(path)
    if not file_path.exists():
        return None
    try:
        with file_path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return None


def write_json_array(path: str, records: List[Dict[str, Any]]) -> bool:
    """Replace the content of ``path`` with ``records``.

    The collection is serialised first and then swapped in through a
    temporary file in the same directory, so a failed write leaves the
    previous content untouched.  Returns ``False`` if the records could
    not be encoded or the file could not be written.
    """
    file_path = Path(path)
    try:
        payload = json.dumps(records, indent=4, ensure_ascii=False) + "\n"
        data = payload.encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.error("Could not encode records for %s: %s", path, exc)
        return False

    tmp_name = None
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb", dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp", delete=False
        ) as fh:
            tmp_name = fh.name
            fh.write(data)
        os.replace(tmp_name, file_path)
        return True
    except OSError as exc:
        logger.error("Could not write %s: %s", path, exc)
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        return False
