# src/streamshield/tenant_store.py
from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping

from .errors import NotRegisteredError

logger = logging.getLogger(__name__)

NOT_REGISTERED = "Tenant not found. Please Register first"


class TenantStore:
    """Last registration response, one JSON file per installation."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def _read_sync(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write_sync(self, record: Mapping[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dict(record), f, indent=2, ensure_ascii=False)
            # concurrent writers: last one wins
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    async def read(self) -> Dict[str, Any]:
        logger.debug("Reading tenant record from %s", self.path)
        try:
            record = await asyncio.to_thread(self._read_sync)
        except (OSError, ValueError) as e:
            raise NotRegisteredError(NOT_REGISTERED) from e
        if not isinstance(record, dict):
            raise NotRegisteredError(NOT_REGISTERED)
        return record

    async def tenant_id(self) -> str:
        record = await self.read()
        tenant_id = record.get("tenant_id")
        if not tenant_id:
            raise NotRegisteredError(NOT_REGISTERED)
        return str(tenant_id)

    async def write(self, record: Mapping[str, Any]) -> None:
        logger.debug("Writing tenant record to %s", self.path)
        await asyncio.to_thread(self._write_sync, record)
