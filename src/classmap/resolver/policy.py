"""Scan policy flags and the state machine that consumes them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag

from classmap.constants.policy import (
    SCAN_POLICY_ALWAYS,
    SCAN_POLICY_CACHE,
    SCAN_POLICY_NEVER,
    SCAN_POLICY_ONCE,
    VALID_SCAN_POLICIES,
)
from classmap.exceptions import ConfigError
from classmap.model import LookupStatus


class ScanFlag(IntFlag):
    """Combinable rescan options."""

    NEVER = 0
    ONCE = 1
    ALWAYS = 2
    CACHE = 4


_FLAGS_BY_NAME: dict[str, ScanFlag] = {
    SCAN_POLICY_NEVER: ScanFlag.NEVER,
    SCAN_POLICY_ONCE: ScanFlag.ONCE,
    SCAN_POLICY_ALWAYS: ScanFlag.ALWAYS,
    SCAN_POLICY_CACHE: ScanFlag.CACHE,
}


def parse_scan_flags(names: Iterable[str]) -> ScanFlag:
    """Combine policy names such as ``("once", "cache")`` into a ScanFlag."""
    flags = ScanFlag.NEVER
    for raw_name in names:
        name = raw_name.strip().lower()
        if name not in VALID_SCAN_POLICIES:
            raise ConfigError(
                f"Unknown scan policy '{raw_name}'. Valid policies: {', '.join(sorted(VALID_SCAN_POLICIES))}"
            )
        flags |= _FLAGS_BY_NAME[name]
    return flags


@dataclass
class ScanPolicy:
    """Mutable policy state owned by a resolver.

    ``rescan_once_remaining`` is cleared by :meth:`after_rescan` unless
    ``always_rescan`` is set; every other field is fixed for the lifetime
    of the resolver.
    """

    never_rescan: bool = False
    rescan_once_remaining: bool = True
    always_rescan: bool = False
    negative_cache: bool = False

    @classmethod
    def from_flags(cls, flags: ScanFlag | int) -> ScanPolicy:
        flags = ScanFlag(flags)
        once = bool(flags & ScanFlag.ONCE)
        always = bool(flags & ScanFlag.ALWAYS)
        return cls(
            never_rescan=not (once or always),
            rescan_once_remaining=once,
            always_rescan=always,
            negative_cache=bool(flags & ScanFlag.CACHE),
        )

    @property
    def flags(self) -> ScanFlag:
        flags = ScanFlag.NEVER
        if self.rescan_once_remaining:
            flags |= ScanFlag.ONCE
        if self.always_rescan:
            flags |= ScanFlag.ALWAYS
        if self.negative_cache:
            flags |= ScanFlag.CACHE
        return flags

    def should_rescan(self, status: LookupStatus) -> bool:
        """Only names never seen before trigger a rescan."""
        if status is not LookupStatus.UNKNOWN or self.never_rescan:
            return False
        return self.rescan_once_remaining or self.always_rescan

    def should_mark_absent(self, status: LookupStatus) -> bool:
        return self.negative_cache and status is not LookupStatus.FOUND

    def after_rescan(self) -> None:
        """Consume the one-shot rescan unless rescans are unconditional."""
        if not self.always_rescan:
            self.rescan_once_remaining = False
