"""
Environment configuration for intcalc.

The parser bounds expression nesting (parenthesis depth plus stacked
unary minuses) so that hostile input cannot exhaust the interpreter's
call stack. The bound is read from the INTCALC_MAX_DEPTH environment
variable and may be overridden per call.

Usage:
    from intcalc.core.environment import get_max_depth

    limit = get_max_depth()      # INTCALC_MAX_DEPTH or the default
    limit = get_max_depth(50)    # explicit override wins
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

# Each nesting level costs up to four parser frames; 100 stays well
# inside CPython's default recursion limit.
DEFAULT_MAX_DEPTH = 100

MAX_DEPTH_ENV_VAR = "INTCALC_MAX_DEPTH"


def get_max_depth(override: int | None = None) -> int:
    """Resolve the nesting limit.

    Resolution order:
    1. ``override`` if given
    2. INTCALC_MAX_DEPTH if set to a positive integer
    3. DEFAULT_MAX_DEPTH

    Raises:
        ValueError: If ``override`` is less than 1.
    """
    if override is not None:
        if override < 1:
            raise ValueError(f"max_depth must be at least 1, got {override}")
        return override

    raw = os.environ.get(MAX_DEPTH_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_MAX_DEPTH

    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning(
            "Ignoring invalid %s value '%s'. Expected a positive integer; using %d.",
            MAX_DEPTH_ENV_VAR,
            raw,
            DEFAULT_MAX_DEPTH,
        )
        return DEFAULT_MAX_DEPTH
    return value
