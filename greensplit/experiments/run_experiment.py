import logging
import sys
import time
from typing import Optional, TextIO
from greensplit.domain.models import SimulationReport
from greensplit.domain.state import SimulationConfig
from greensplit.kernel.simulation_kernel import SimulationKernel
from greensplit.kernel.snapshot_builder import format_cycle, format_final

logger = logging.getLogger(__name__)

def run_experiment(config: Optional[SimulationConfig] = None,
                   out: Optional[TextIO] = None) -> SimulationReport:
    """Runs every planned cycle in order and collects the snapshots.

    When ``out`` is given, each cycle line is written as soon as the cycle
    finishes, followed by the final per-approach summary.
    """
    config = config or SimulationConfig()
    kernel = SimulationKernel(config)
    kernel.initialize(seed=config.seed)

    cycles = []
    start_time = time.perf_counter()
    for _ in range(config.cyclesToSimulate):
        snapshot = kernel.run_cycle()
        cycles.append(snapshot)
        if out is not None:
            print(format_cycle(snapshot), file=out)

    final = kernel.get_state()
    if out is not None:
        for line in format_final(final):
            print(line, file=out)

    logger.info("Experiment finished: %d cycles in %.4fs",
                len(cycles), time.perf_counter() - start_time)
    return SimulationReport(seed=config.seed, policy=config.policy, cycles=cycles, final=final)

if __name__ == "__main__":
    run_experiment(out=sys.stdout)
