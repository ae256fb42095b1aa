"""Short code generation and custom code validation."""

import logging
import random
import string
import time
from typing import Any, Callable, Optional, Protocol

from shortlinks.domain.validators.link_validator import is_valid_custom_code

logger = logging.getLogger(__name__)

DEFAULT_CODE_LENGTH = 6
MAX_RANDOM_ATTEMPTS = 10
ATTEMPTS_PER_LENGTH_STEP = 3
_BASE36_CHARS = string.digits + string.ascii_lowercase
_FALLBACK_RANDOM_LENGTH = 6
_FALLBACK_TIME_LENGTH = 4


class CodeLookup(Protocol):
    """Anything that can answer whether a code is taken (e.g. Registry)."""

    async def exists(self, code: str) -> bool: ...


def _to_base36(num: int) -> str:
    if num == 0:
        return _BASE36_CHARS[0]
    digits = []
    while num > 0:
        num, remainder = divmod(num, 36)
        digits.append(_BASE36_CHARS[remainder])
    return "".join(reversed(digits))


class CodeGenerator:
    """Generate candidate short codes and find one the registry does not hold yet."""

    # Base62 characters (alphanumeric, case-sensitive)
    ALPHABET = string.ascii_letters + string.digits

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        time_ms: Optional[Callable[[], int]] = None,
    ) -> None:
        self._rng = rng or random.SystemRandom()
        self._time_ms = time_ms or (lambda: time.time_ns() // 1_000_000)

    def generate(self, length: int = DEFAULT_CODE_LENGTH) -> str:
        """Draw length characters uniformly from ALPHABET. Not guaranteed unique."""
        return "".join(self._rng.choices(self.ALPHABET, k=length))

    @staticmethod
    def validate_custom(code: Any) -> bool:
        return is_valid_custom_code(code)

    def _fallback_candidate(self) -> str:
        random_part = "".join(self._rng.choices(_BASE36_CHARS, k=_FALLBACK_RANDOM_LENGTH))
        time_part = _to_base36(self._time_ms())[-_FALLBACK_TIME_LENGTH:]
        return random_part + time_part

    async def find_unique(self, registry: CodeLookup, base_length: int = DEFAULT_CODE_LENGTH) -> str:
        """
        Try up to MAX_RANDOM_ATTEMPTS random codes, growing the length by one every
        ATTEMPTS_PER_LENGTH_STEP attempts. Then fall back to random + millisecond-clock
        fragments until the registry reports no collision.
        """
        for attempt in range(MAX_RANDOM_ATTEMPTS):
            candidate = self.generate(base_length + attempt // ATTEMPTS_PER_LENGTH_STEP)
            if not await registry.exists(candidate):
                return candidate

        logger.warning(
            "code_generation_fallback",
            extra={"attempts": MAX_RANDOM_ATTEMPTS, "base_length": base_length},
        )
        candidate = self._fallback_candidate()
        while await registry.exists(candidate):
            candidate = self._fallback_candidate()
        return candidate
