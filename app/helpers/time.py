# app/helpers/time.py
import time


def now_millis() -> int:
    """Milliseconds since the epoch, used as client-generated record ids."""
    return int(time.time() * 1000)
