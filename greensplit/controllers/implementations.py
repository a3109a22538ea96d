import logging
import math
from typing import Union
from greensplit.controllers.base import Allocator
from greensplit.domain.models import Allocation, AllocationPolicy, DemandScores, OverflowCause

logger = logging.getLogger(__name__)

def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

class ProportionalAllocator(Allocator):
    """Splits the budget in proportion to demand, floors, then rescales once.

    The rescale floors a second time and rounds half-up, so the final sum can
    still exceed the budget. The snapshot records that case as an overflow
    instead of correcting it.
    """

    def allocate(self, demand: DemandScores, total_cycle_seconds: int, baseline_min: int) -> Allocation:
        greens = [
            max(baseline_min, round_half_up(score * total_cycle_seconds / demand.sumScores))
            for score in demand.scores
        ]
        allocated = sum(greens)
        cause = None

        if allocated > total_cycle_seconds:
            scale = total_cycle_seconds / allocated
            rescaled = [round_half_up(green * scale) for green in greens]
            floored = any(green < baseline_min for green in rescaled)
            greens = [max(baseline_min, green) for green in rescaled]
            allocated = sum(greens)
            if allocated > total_cycle_seconds:
                cause = OverflowCause.FLOOR if floored else OverflowCause.ROUNDING
                logger.debug("Rescaled allocation %s still over budget by %ds (%s)",
                             greens, allocated - total_cycle_seconds, cause.value)

        return Allocation(greenTimes=greens, allocated=allocated, overflowCause=cause)

class LargestRemainderAllocator(Allocator):
    """Hamilton apportionment with a per-approach floor.

    Approaches whose proportional share falls below the floor are pinned to it
    and the rest of the budget is re-split among the others until no share is
    under the floor. Whole seconds are handed out by largest remainder, lower
    index first on ties, so the sum equals the budget whenever any score is
    positive and never exceeds it.
    """

    def allocate(self, demand: DemandScores, total_cycle_seconds: int, baseline_min: int) -> Allocation:
        scores = demand.scores
        free = list(range(len(scores)))

        while free:
            available = total_cycle_seconds - baseline_min * (len(scores) - len(free))
            weight = sum(scores[i] for i in free)
            pinned = [i for i in free if weight == 0 or scores[i] * available < baseline_min * weight]
            if not pinned:
                break
            free = [i for i in free if i not in pinned]

        greens = [baseline_min] * len(scores)
        if free:
            available = total_cycle_seconds - baseline_min * (len(scores) - len(free))
            weight = sum(scores[i] for i in free)
            remainders = {}
            for i in free:
                greens[i], remainders[i] = divmod(scores[i] * available, weight)
            leftover = available - sum(greens[i] for i in free)
            for i in sorted(free, key=lambda i: (-remainders[i], i))[:leftover]:
                greens[i] += 1

        return Allocation(greenTimes=greens, allocated=sum(greens))

_ALLOCATORS = {
    AllocationPolicy.PROPORTIONAL: ProportionalAllocator,
    AllocationPolicy.LARGEST_REMAINDER: LargestRemainderAllocator,
}

def get_allocator(policy: Union[AllocationPolicy, str]) -> Allocator:
    # AllocationPolicy() raises ValueError for unknown names
    return _ALLOCATORS[AllocationPolicy(policy)]()
