import logging
import random
from typing import List, Optional
from greensplit.controllers.implementations import get_allocator
from greensplit.domain.models import Approach, ApproachSnapshot, ArrivalMode, CycleSnapshot
from greensplit.domain.state import SimulationConfig, SimulationState
from greensplit.kernel.snapshot_builder import SnapshotBuilder
from greensplit.systems.arrival_system import ArrivalSystem
from greensplit.systems.demand_system import DemandScorer
from greensplit.systems.service_system import ServiceSystem

logger = logging.getLogger(__name__)

class SimulationKernel:
    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()
        self.state = SimulationState()
        self.rng = random.Random(self.config.seed)
        self.initialized = False

        self.scorer = DemandScorer()
        self.allocator = get_allocator(self.config.policy)
        self.arrivals = ArrivalSystem()
        self.service = ServiceSystem()
        self.snapshots = SnapshotBuilder()

    def initialize(self, seed: Optional[int] = None):
        if seed is None:
            seed = self.config.seed
        self.rng = random.Random(seed)
        self.state.cycle = 0
        self.state.approaches = [
            Approach(index=i, profile=profile, greenTime=self.config.baselineMin)
            for i, profile in enumerate(self.config.approaches)
        ]
        self.initialized = True
        logger.info("Kernel initialized (seed=%d, approaches=%d, policy=%s)",
                    seed, len(self.state.approaches), self.config.policy.value)

    def cycles_remaining(self) -> int:
        if self.config.arrivalMode == ArrivalMode.COUNTDOWN:
            return self.config.cyclesToSimulate - self.state.cycle
        return self.config.cyclesToSimulate

    def run_cycle(self, rng: Optional[random.Random] = None) -> CycleSnapshot:
        if not self.initialized: self.initialize()
        if rng is None:
            rng = self.rng

        cfg = self.config
        approaches = self.state.approaches

        # 1. Arrivals
        self.arrivals.update(approaches, self.cycles_remaining(), cfg.totalCycleSeconds)

        # 2. Demand
        demand = self.scorer.score(approaches)

        # 3. Allocation
        allocation = self.allocator.run_cycle(approaches, demand, cfg.totalCycleSeconds, cfg.baselineMin)

        # 4. Service
        seconds_used = self.service.update(approaches)

        # 5. Stochastic extra arrivals
        self.arrivals.perturb(approaches, rng, cfg.perturbationProbability)

        self.state.cycle += 1
        snapshot = self.snapshots.build(self.state, cfg.totalCycleSeconds, allocation, seconds_used)
        logger.debug("Cycle %d: scores=%s greens=%s allocated=%d",
                     snapshot.cycle, demand.scores, allocation.greenTimes, allocation.allocated)
        if snapshot.overflow:
            logger.info("Cycle %d allocated %ds of a %ds budget (%s)",
                        snapshot.cycle, snapshot.allocated, cfg.totalCycleSeconds,
                        snapshot.overflowCause.value)
        return snapshot

    def get_state(self) -> List[ApproachSnapshot]:
        return self.snapshots.approaches(self.state)
