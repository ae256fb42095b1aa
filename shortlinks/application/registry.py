"""Link registry: owns link records in the store, enforces code uniqueness and CRUD."""

import logging
from typing import Callable, Iterable, List, Optional

from shortlinks.application.audit_log import AuditLog
from shortlinks.application.code_generator import DEFAULT_CODE_LENGTH, CodeGenerator
from shortlinks.application.key_value_store import KeyValueStore
from shortlinks.core.clock import Clock, utc_now
from shortlinks.domain.exceptions import ConflictError, ValidationError
from shortlinks.domain.models.link import LinkRecord
from shortlinks.domain.validators.link_validator import (
    validate_custom_code,
    validate_long_url,
    validate_validity_mins,
)

LINK_KEY_PREFIX = "link:"
DEFAULT_VALIDITY_MINS = 30

EVENT_CREATED = "shortlink.created"
EVENT_DELETED = "shortlink.delete"


def _link_key(code: str) -> str:
    return f"{LINK_KEY_PREFIX}{code}"


class Registry:
    """
    Collection of LinkRecords keyed by code. At most one record per code:
    writes go through set_if_absent so a concurrent creator cannot overwrite.
    """

    def __init__(
        self,
        store: KeyValueStore,
        audit_log: AuditLog,
        code_generator: Optional[CodeGenerator] = None,
        clock: Clock = utc_now,
        default_validity_mins: int = DEFAULT_VALIDITY_MINS,
        code_length: int = DEFAULT_CODE_LENGTH,
        reserved_codes: Iterable[str] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._store = store
        self._audit_log = audit_log
        self._code_generator = code_generator or CodeGenerator()
        self._clock = clock
        self._default_validity_mins = default_validity_mins
        self._code_length = code_length
        # Compared case-insensitively; codes that would shadow fixed routes
        self._reserved_codes = frozenset(c.lower() for c in reserved_codes)
        self._logger = logger or logging.getLogger(__name__)

    async def create(
        self,
        long_url: str,
        custom_code: Optional[str] = None,
        validity_mins: Optional[int] = None,
    ) -> LinkRecord:
        """
        Register long_url under custom_code or a freshly generated code.
        Raises ValidationError on bad input, ConflictError if custom_code is taken.
        """
        url = validate_long_url(long_url)
        validity = validate_validity_mins(validity_mins, self._default_validity_mins)

        # Empty custom code means "generate one"
        if custom_code is not None and custom_code != "":
            check = validate_custom_code(custom_code)
            if not check.valid:
                raise ValidationError(check.reason)
            if self.is_reserved(custom_code):
                raise ValidationError(f"custom code '{custom_code}' is reserved")
            if await self.exists(custom_code):
                raise ConflictError(f"custom code '{custom_code}' is already in use")
            record = LinkRecord.new(custom_code, url, validity, self._clock())
            if not await self._store.set_if_absent(_link_key(custom_code), record.to_dict()):
                raise ConflictError(f"custom code '{custom_code}' is already in use")
        else:
            while True:
                code = await self._code_generator.find_unique(self, self._code_length)
                if self.is_reserved(code):
                    continue
                record = LinkRecord.new(code, url, validity, self._clock())
                if await self._store.set_if_absent(_link_key(code), record.to_dict()):
                    break
                self._logger.info("generated_code_taken", extra={"code": code})

        self._logger.info("link_created", extra={"code": record.code, "validity_mins": validity})
        await self._audit_log.append(
            EVENT_CREATED,
            {"code": record.code, "long_url": record.long_url, "validity_mins": validity},
        )
        return record

    def is_reserved(self, code: str) -> bool:
        return code.lower() in self._reserved_codes

    async def get(self, code: str) -> Optional[LinkRecord]:
        raw = await self._store.get(_link_key(code))
        if raw is None:
            return None
        return LinkRecord.from_dict(raw)

    async def exists(self, code: str) -> bool:
        return await self._store.get(_link_key(code)) is not None

    async def delete(self, code: str) -> None:
        """Remove the record. Idempotent: an unknown code leaves the store unchanged."""
        existed = await self.exists(code)
        await self._store.delete(_link_key(code))
        await self._audit_log.append(EVENT_DELETED, {"code": code, "existed": existed})

    async def list(self) -> List[LinkRecord]:
        """All records in store order. Callers sort for presentation."""
        records = []
        for key in await self._store.keys(LINK_KEY_PREFIX):
            raw = await self._store.get(key)
            # Deleted between keys() and get()
            if raw is not None:
                records.append(LinkRecord.from_dict(raw))
        return records

    async def update(
        self,
        code: str,
        mutate: Callable[[LinkRecord], None],
    ) -> Optional[LinkRecord]:
        """
        Atomically apply mutate to the stored record and persist it.
        Returns the updated record, or None if the code is not registered.
        """

        def _apply(current):
            if current is None:
                return None
            record = LinkRecord.from_dict(current)
            mutate(record)
            return record.to_dict()

        updated = await self._store.update(_link_key(code), _apply)
        if updated is None:
            return None
        return LinkRecord.from_dict(updated)
