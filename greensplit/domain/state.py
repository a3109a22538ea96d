from typing import List
from pydantic import BaseModel, Field, model_validator
from greensplit.domain.models import Approach, ApproachProfile, AllocationPolicy, ArrivalMode
from greensplit.domain import config

def _default_profiles() -> List[ApproachProfile]:
    return [ApproachProfile(density=d, waitFactor=w) for d, w in config.DEFAULT_APPROACHES]

class SimulationConfig(BaseModel):
    approaches: List[ApproachProfile] = Field(default_factory=_default_profiles, min_length=1)
    totalCycleSeconds: int = Field(default=config.TOTAL_CYCLE_SECONDS, gt=0)
    baselineMin: int = Field(default=config.BASELINE_MIN, gt=0)
    cyclesToSimulate: int = Field(default=config.CYCLES_TO_SIMULATE, ge=0)
    seed: int = config.RANDOM_SEED
    perturbationProbability: float = Field(default=config.PERTURBATION_PROBABILITY, ge=0.0, le=1.0)
    policy: AllocationPolicy = AllocationPolicy.PROPORTIONAL
    arrivalMode: ArrivalMode = ArrivalMode.CONSTANT

    @model_validator(mode="after")
    def check_budget_covers_floor(self):
        required = self.baselineMin * len(self.approaches)
        if self.totalCycleSeconds < required:
            raise ValueError(
                f"totalCycleSeconds={self.totalCycleSeconds} cannot give baselineMin={self.baselineMin} "
                f"to {len(self.approaches)} approaches (needs at least {required})"
            )
        return self

class SimulationState(BaseModel):
    cycle: int = 0
    approaches: List[Approach] = []
