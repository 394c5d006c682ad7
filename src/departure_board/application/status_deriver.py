"""Derivation of train status from the virtual clock."""

from departure_board.domain.models.train import Train, TrainStatus
from departure_board.domain.time_math import effective_window

BOARDING_LEAD_MINUTES = 5
# Minutes a train keeps BOARDING after its departure time before it counts as DEPARTED
DEFAULT_DEPARTED_GRACE_MINUTES = 0


def derive_status(
    train: Train,
    virtual_minutes: float,
    departed_grace: float = DEFAULT_DEPARTED_GRACE_MINUTES,
) -> TrainStatus:
    """Compute a train's status at ``virtual_minutes``.

    CANCELLED is absorbing. Otherwise the first matching rule wins, checked
    against the effective window ``(a, d)`` with ``g = departed_grace``:

    - ``vm >= d + g``: DEPARTED
    - ``d - 5 <= vm < d + g``: BOARDING
    - ``a <= vm < d - 5``: ARRIVED
    - positive delay: DELAYED
    - else: ON_TIME
    """
    if train.status is TrainStatus.CANCELLED:
        return TrainStatus.CANCELLED

    window = effective_window(train)
    vm = virtual_minutes
    if vm >= window.depart + departed_grace:
        return TrainStatus.DEPARTED
    if window.depart - BOARDING_LEAD_MINUTES <= vm:
        return TrainStatus.BOARDING
    if window.arrive <= vm:
        return TrainStatus.ARRIVED
    if train.delay_min > 0:
        return TrainStatus.DELAYED
    return TrainStatus.ON_TIME


def apply_statuses(
    trains: list[Train],
    virtual_minutes: float,
    departed_grace: float = DEFAULT_DEPARTED_GRACE_MINUTES,
) -> None:
    """Recompute the status of every train in place."""
    for train in trains:
        train.status = derive_status(train, virtual_minutes, departed_grace)
