from abc import ABC, abstractmethod
from typing import List
from greensplit.domain.models import Allocation, Approach, DemandScores

class Allocator(ABC):
    @abstractmethod
    def allocate(self, demand: DemandScores, total_cycle_seconds: int, baseline_min: int) -> Allocation:
        pass

    def run_cycle(self, approaches: List[Approach], demand: DemandScores,
                  total_cycle_seconds: int, baseline_min: int) -> Allocation:
        allocation = self.allocate(demand, total_cycle_seconds, baseline_min)
        for approach, green in zip(approaches, allocation.greenTimes):
            approach.greenTime = green
        return allocation
