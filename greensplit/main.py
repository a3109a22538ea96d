import argparse
import logging
import sys
from typing import List, Optional
from pydantic import ValidationError
from greensplit.domain.models import AllocationPolicy, ApproachProfile, ArrivalMode
from greensplit.domain.state import SimulationConfig
from greensplit.domain import config
from greensplit.experiments.run_experiment import run_experiment

logger = logging.getLogger(__name__)

def parse_approach(value: str) -> ApproachProfile:
    """Parses ``DENSITY:WAIT`` into a profile, e.g. ``3:2``."""
    try:
        density, wait = (int(part) for part in value.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad approach {value!r}, expected DENSITY:WAIT")
    try:
        return ApproachProfile(density=density, waitFactor=wait)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(f"Bad approach {value!r}: {e.errors()[0]['msg']}")

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="greensplit",
        description="Fixed-time intersection simulator that splits a green-time budget by demand.")
    p.add_argument("--approach", dest="approaches", type=parse_approach, action="append",
                   metavar="DENSITY:WAIT",
                   help="add an approach (repeatable); replaces the default set of "
                        + " ".join(f"{d}:{w}" for d, w in config.DEFAULT_APPROACHES))
    p.add_argument("--cycle-seconds", type=int, default=config.TOTAL_CYCLE_SECONDS)
    p.add_argument("--baseline-min", type=int, default=config.BASELINE_MIN)
    p.add_argument("--cycles", type=int, default=config.CYCLES_TO_SIMULATE)
    p.add_argument("--seed", type=int, default=config.RANDOM_SEED)
    p.add_argument("--perturbation-probability", type=float, default=config.PERTURBATION_PROBABILITY)
    p.add_argument("--policy", choices=[policy.value for policy in AllocationPolicy],
                   default=AllocationPolicy.PROPORTIONAL.value)
    p.add_argument("--arrival-mode", choices=[m.value for m in ArrivalMode],
                   default=ArrivalMode.CONSTANT.value)
    p.add_argument("--json", action="store_true", help="print the full report as JSON")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p

def build_config(args: argparse.Namespace) -> SimulationConfig:
    fields = dict(
        totalCycleSeconds=args.cycle_seconds,
        baselineMin=args.baseline_min,
        cyclesToSimulate=args.cycles,
        seed=args.seed,
        perturbationProbability=args.perturbation_probability,
        policy=args.policy,
        arrivalMode=args.arrival_mode,
    )
    if args.approaches:
        fields["approaches"] = args.approaches
    return SimulationConfig(**fields)

def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s %(message)s")
    try:
        sim_config = build_config(args)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.json:
        report = run_experiment(sim_config)
        print(report.model_dump_json(indent=2))
    else:
        run_experiment(sim_config, out=sys.stdout)
    return 0

if __name__ == "__main__":
    sys.exit(main())
