from typing import List
from greensplit.domain.models import Approach

class ServiceSystem:
    def update(self, approaches: List[Approach]) -> int:
        seconds_used = 0
        for approach in approaches:
            seconds_used += approach.greenTime
            # One vehicle per second of green; extra calls on an empty queue are no-ops
            for _ in range(approach.greenTime):
                approach.serve_one()
        return seconds_used
