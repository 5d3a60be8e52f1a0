import json
import time
from pathlib import Path

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone

from core.exceptions import FatalStorageError

import logging
logger = logging.getLogger("rest_framework")


class FallbackOrderStore:
    """
    JSON file holding orders that could not be written to the database.

    The file is a single JSON array, newest record first. Every append reads
    the whole array and rewrites it, so two appends racing each other can
    lose one record. Records are never deduplicated.
    """

    def __init__(self, path):
        self.path = Path(path)

    @classmethod
    def from_settings(cls):
        return cls(settings.ORDERS_FALLBACK_FILE)

    def read(self):
        if not self.path.exists():
            return []
        content = self.path.read_text(encoding='utf-8')
        if not content.strip():
            return []
        records = json.loads(content)
        if not isinstance(records, list):
            raise ValueError(f"{self.path} does not contain a JSON array")
        return records

    @staticmethod
    def next_id(records):
        used = {r.get('id') for r in records if isinstance(r, dict)}
        candidate = int(time.time() * 1000)
        while candidate in used:
            candidate += 1
        return candidate

    def append(self, payload):
        """
        Store ``payload`` with a generated ``id`` (epoch milliseconds, bumped
        past any id already in the file) and an ISO-8601 ``createdAt``, and
        return the stored record.
        """
        record = dict(payload)
        record['createdAt'] = timezone.now().isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        try:
            records = self.read()
            record['id'] = self.next_id(records)
            records.insert(0, record)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(records, cls=DjangoJSONEncoder, ensure_ascii=False, indent=2),
                encoding='utf-8',
            )
        except (OSError, ValueError) as exc:
            logger.critical(f"Fallback order store {self.path} is not writable: {exc}")
            raise FatalStorageError() from exc

        logger.info(f"Order stored in fallback file with id {record['id']}")
        return record
