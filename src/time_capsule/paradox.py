"""Paradox rule: how far into the past a message may be addressed."""

from __future__ import annotations

PARADOX_WINDOW = 100


def is_paradox(send_time: int, target_time: int, window: int = PARADOX_WINDOW) -> bool:
    """Return ``True`` if *target_time* lies more than *window* units before *send_time*.

    Sending to the present or future is never a paradox, whatever the distance.
    """
    return target_time < send_time and (send_time - target_time) > window
