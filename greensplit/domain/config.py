# Simulation Configuration

# Cycle Budget
TOTAL_CYCLE_SECONDS = 300  # Green-time budget shared by all approaches per cycle
BASELINE_MIN = 5           # Minimum green per approach

# Run Settings
CYCLES_TO_SIMULATE = 10
RANDOM_SEED = 42

# Arrivals
PERTURBATION_PROBABILITY = 0.5  # Chance of one extra arrival on a non-empty queue

# (density, waitFactor) per approach, in approach-index order
DEFAULT_APPROACHES = (
    (1, 1),
    (3, 2),
    (2, 3),
    (4, 1),
)
