import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from logging_config import get_logger

logger = get_logger(__name__)


class StoreError(Exception):
    """The backing file could not be read or written."""


class RecordNotFound(LookupError):
    def __init__(self, collection: str, record_id: int):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} record {record_id} not found")


class MockStore:
    """A JSON document on disk, read and rewritten wholesale per operation."""

    def __init__(self, path: Path, default: Any = None):
        self.path = Path(path)
        self.name = self.path.stem
        self.default = default

    def read(self) -> Any:
        if not self.path.exists():
            logger.debug(f"Mock file {self.path} missing, using default")
            return self.default
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read mock file {self.path}: {e}", exc_info=True)
            raise StoreError(f"Could not read {self.name}") from e

    def write(self, data: Any) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to write mock file {self.path}: {e}", exc_info=True)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError(f"Could not write {self.name}") from e


class MockCollection(MockStore):
    """A JSON array of records keyed by an integer ``id``."""

    def __init__(self, path: Path):
        super().__init__(path, default=[])

    def all(self) -> List[Dict[str, Any]]:
        records = self.read()
        if not isinstance(records, list):
            raise StoreError(f"{self.name} is not a list of records")
        return records

    def list(self, skip: int = 0, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        records = self.all()[skip:]
        return records if limit is None else records[:limit]

    def get(self, record_id: int) -> Dict[str, Any]:
        for record in self.all():
            if record.get("id") == record_id:
                return record
        raise RecordNotFound(self.name, record_id)

    def find(self, predicate: Callable[[Dict[str, Any]], bool]) -> Optional[Dict[str, Any]]:
        return next((record for record in self.all() if predicate(record)), None)

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        records = self.all()
        record = {"id": max((r.get("id", 0) for r in records), default=0) + 1, **fields}
        records.append(record)
        self.write(records)
        logger.info(f"Created {self.name} record {record['id']}")
        return record

    def replace(self, record_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        records = self.all()
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                records[index] = {"id": record_id, **fields}
                self.write(records)
                logger.info(f"Replaced {self.name} record {record_id}")
                return records[index]
        raise RecordNotFound(self.name, record_id)

    def update(self, record_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        records = self.all()
        for record in records:
            if record.get("id") == record_id:
                record.update({k: v for k, v in fields.items() if k != "id"})
                self.write(records)
                logger.info(f"Updated {self.name} record {record_id}: {sorted(fields)}")
                return record
        raise RecordNotFound(self.name, record_id)

    def delete(self, record_id: int) -> Dict[str, Any]:
        records = self.all()
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                removed = records.pop(index)
                self.write(records)
                logger.info(f"Deleted {self.name} record {record_id}")
                return removed
        raise RecordNotFound(self.name, record_id)

    def remove_where(self, predicate: Callable[[Dict[str, Any]], bool]) -> List[Dict[str, Any]]:
        records = self.all()
        kept, removed = [], []
        for record in records:
            (removed if predicate(record) else kept).append(record)
        if removed:
            self.write(kept)
            logger.info(f"Removed {len(removed)} {self.name} record(s)")
        return removed


class MockDatabase:
    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)
        self._collections: Dict[str, MockCollection] = {}
        self._documents: Dict[str, MockStore] = {}
        logger.info(f"Mock database at {self.data_dir}")

    def collection(self, name: str) -> MockCollection:
        if name not in self._collections:
            self._collections[name] = MockCollection(self.data_dir / f"{name}.json")
        return self._collections[name]

    def document(self, name: str) -> MockStore:
        if name not in self._documents:
            self._documents[name] = MockStore(self.data_dir / f"{name}.json", default={})
        return self._documents[name]
