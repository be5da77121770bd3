"""
Constants shared across the engine.
"""

# option(): present nine times in ten
OPTION_PRESENT_WEIGHT = 9
OPTION_ABSENT_WEIGHT = 1

# Configuration defaults
DEFAULT_SIZE = 100
DEFAULT_SAMPLE_COUNT = 100

# Environment variables read by GenerationConfig.from_env()
ENV_SEED = "PROPGEN_SEED"
ENV_SIZE = "PROPGEN_SIZE"
ENV_SAMPLES = "PROPGEN_SAMPLES"

# Distribution display
PERCENTAGE_PRECISION = 1
MAX_VALUE_DISPLAY_LENGTH = 40
