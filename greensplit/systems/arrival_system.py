import random
from typing import List
from greensplit.domain.models import Approach

class ArrivalSystem:
    def update(self, approaches: List[Approach], cycles_remaining: int, cycle_seconds: int) -> int:
        return sum(a.inject_arrivals(cycles_remaining, cycle_seconds) for a in approaches)

    def perturb(self, approaches: List[Approach], rng: random.Random, probability: float) -> int:
        """Adds at most one extra vehicle to each non-empty queue.

        The generator is only drawn from for non-empty queues, in index order,
        so a run is reproducible from its seed alone.
        """
        extra = 0
        for approach in approaches:
            if approach.queue and rng.random() < probability:
                approach.queue.append(0)
                extra += 1
        return extra
