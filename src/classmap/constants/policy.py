"""Names accepted for scan policy flags in config files and on the CLI."""

from __future__ import annotations

SCAN_POLICY_NEVER: str = "never"
SCAN_POLICY_ONCE: str = "once"
SCAN_POLICY_ALWAYS: str = "always"
SCAN_POLICY_CACHE: str = "cache"

VALID_SCAN_POLICIES: frozenset[str] = frozenset(
    {SCAN_POLICY_NEVER, SCAN_POLICY_ONCE, SCAN_POLICY_ALWAYS, SCAN_POLICY_CACHE}
)
