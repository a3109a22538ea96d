from collections import deque
from enum import Enum
from typing import Deque, List, Optional
from pydantic import BaseModel, ConfigDict, Field

class AllocationPolicy(str, Enum):
    PROPORTIONAL = "proportional"
    LARGEST_REMAINDER = "largest_remainder"

class ArrivalMode(str, Enum):
    CONSTANT = "constant"    # divide density by the planned cycle count every cycle
    COUNTDOWN = "countdown"  # divide density by the cycles still to run

class OverflowCause(str, Enum):
    ROUNDING = "ROUNDING"
    FLOOR = "FLOOR"

class ApproachProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    density: int = Field(ge=0)     # static arrival-rate proxy
    waitFactor: int = Field(gt=0)  # static priority multiplier

class Approach(BaseModel):
    """Runtime cell for one incoming road.

    The profile never changes during a run; ``queue`` and ``greenTime`` are
    rewritten once per cycle by the simulation kernel.
    """

    index: int
    profile: ApproachProfile
    queue: Deque[int] = Field(default_factory=deque)  # vehicle tokens, FIFO
    greenTime: int = 0

    def inject_arrivals(self, cycles_remaining: int, cycle_seconds: int) -> int:
        # cycle_seconds is accepted for the arrival model's signature but unused
        arrivals = max(0, self.profile.density // max(1, cycles_remaining))
        self.queue.extend([0] * arrivals)
        return arrivals

    def queue_length(self) -> int:
        return len(self.queue)

    def serve_one(self):
        if self.queue:
            self.queue.popleft()

# Report Models

class DemandScores(BaseModel):
    scores: List[int]
    sumScores: int  # never 0, guarded for division

class Allocation(BaseModel):
    greenTimes: List[int]
    allocated: int
    overflowCause: Optional[OverflowCause] = None

class ApproachSnapshot(BaseModel):
    index: int
    greenTime: int
    queueLength: int

class CycleSnapshot(BaseModel):
    cycle: int  # 1-based
    cycleTime: int
    approaches: List[ApproachSnapshot]
    allocated: int
    overflow: int = 0
    overflowCause: Optional[OverflowCause] = None
    secondsUsed: int = 0

class SimulationReport(BaseModel):
    seed: int
    policy: AllocationPolicy
    cycles: List[CycleSnapshot]
    final: List[ApproachSnapshot]
