from typing import List
from greensplit.domain.models import Allocation, ApproachSnapshot, CycleSnapshot
from greensplit.domain.state import SimulationState

class SnapshotBuilder:
    def approaches(self, state: SimulationState) -> List[ApproachSnapshot]:
        return [
            ApproachSnapshot(index=a.index, greenTime=a.greenTime, queueLength=a.queue_length())
            for a in state.approaches
        ]

    def build(self, state: SimulationState, cycle_time: int, allocation: Allocation,
              seconds_used: int) -> CycleSnapshot:
        return CycleSnapshot(
            cycle=state.cycle,
            cycleTime=cycle_time,
            approaches=self.approaches(state),
            allocated=allocation.allocated,
            overflow=max(0, allocation.allocated - cycle_time),
            overflowCause=allocation.overflowCause,
            secondsUsed=seconds_used,
        )

def format_cycle(snapshot: CycleSnapshot) -> str:
    # Cycle 1: A0[g=18,q=0] A1[g=106,q=0] ... (cycleTime=300)
    parts = "".join(f"A{a.index}[g={a.greenTime},q={a.queueLength}] " for a in snapshot.approaches)
    return f"Cycle {snapshot.cycle}: {parts}(cycleTime={snapshot.cycleTime})"

def format_final(approaches: List[ApproachSnapshot]) -> List[str]:
    lines = ["Final green allocations:"]
    for a in approaches:
        lines.append(f"Approach {a.index}: greenTime={a.greenTime}s, queue={a.queueLength}")
    return lines
