"""
Timestamp helpers.
"""

import time


def epoch_seconds() -> int:
    """Current time as whole seconds since the epoch."""
    return int(time.time())
