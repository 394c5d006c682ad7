"""Greedy interval partitioning of trains onto platforms."""

import logging
import math

from departure_board.domain.models.train import Train
from departure_board.domain.time_math import effective_window, intervals_overlap

logger = logging.getLogger(__name__)


def _has_manual_conflict(train: Train, trains: list[Train]) -> bool:
    """Check whether another train requests the same platform during an overlapping window."""
    window = effective_window(train)
    for other in trains:
        if other is train or other.platform != train.platform:
            continue
        other_window = effective_window(other)
        if intervals_overlap(other_window.arrive, other_window.depart, window.arrive, window.depart):
            return True
    return False


def _pick_free_platform(free_at: list[float], arrive: float) -> int:
    """Return the lowest platform index free by ``arrive``, else the one freeing up earliest."""
    for index, busy_until in enumerate(free_at):
        if busy_until <= arrive:
            return index
    # Every platform is busy: accept a conflict on the earliest-freeing one
    return min(range(len(free_at)), key=lambda i: free_at[i])


def assign_platforms(
    trains: list[Train],
    num_platforms: int,
    reserve_manual_platforms: bool = False,
) -> list[Train]:
    """Assign every train a platform in ``1..num_platforms``.

    Trains are processed by effective arrival (stable for ties). A manual
    platform request is honored when no other train requests the same platform
    over an overlapping window; otherwise the train gets the lowest-numbered
    platform free at its arrival, falling back to the platform that frees up
    earliest. An assignment always succeeds, overlap is accepted rather than
    rejected.

    Honored manual requests do not advance the platform's busy-until time
    unless ``reserve_manual_platforms`` is set, so by default a later automatic
    assignment may share that platform during an overlapping window. With the
    flag set a request is also only honored while the platform is free at the
    train's arrival, and is otherwise treated like a conflicting request.

    Args:
        trains: Trains to assign; ``assigned_platform`` is set in place.
        num_platforms: Number of platforms available (at least 1).
        reserve_manual_platforms: Also track busy-until for honored manual requests.

    Returns:
        The trains ordered by effective arrival time.
    """
    if num_platforms < 1:
        raise ValueError("num_platforms must be at least 1")

    ordered = sorted(trains, key=lambda t: effective_window(t).arrive)
    free_at = [-math.inf] * num_platforms

    for train in ordered:
        window = effective_window(train)
        index: int | None = None

        if train.platform is not None and not _has_manual_conflict(train, ordered):
            requested = max(1, min(num_platforms, train.platform)) - 1
            if not reserve_manual_platforms:
                index = requested
            elif free_at[requested] <= window.arrive:
                index = requested
                free_at[index] = max(free_at[index], window.depart)

        if index is None:
            if train.platform is not None:
                logger.debug(
                    f"Platform {train.platform} requested by train {train.train_no} conflicts, "
                    "assigning automatically"
                )
            index = _pick_free_platform(free_at, window.arrive)
            free_at[index] = max(free_at[index], window.depart)

        train.assigned_platform = index + 1

    return ordered
