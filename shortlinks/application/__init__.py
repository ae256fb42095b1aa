# Application layer: services that orchestrate domain rules over the key-value store.

from shortlinks.application.access_tracker import AccessTracker
from shortlinks.application.action_middleware import ActionMiddleware
from shortlinks.application.audit_log import AuditLog
from shortlinks.application.code_generator import CodeGenerator
from shortlinks.application.exceptions import ApplicationError, ConcurrentUpdateError
from shortlinks.application.key_value_store import KeyValueStore
from shortlinks.application.link_service import ShortLinkService
from shortlinks.application.registry import Registry

__all__ = [
    "AccessTracker",
    "ActionMiddleware",
    "ApplicationError",
    "AuditLog",
    "CodeGenerator",
    "ConcurrentUpdateError",
    "KeyValueStore",
    "Registry",
    "ShortLinkService",
]
