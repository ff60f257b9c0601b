"""Audio format constants shared across layers."""

SAMPLE_RATE = 16000
MAX_DURATION_SECONDS = 30
N_SAMPLES = SAMPLE_RATE * MAX_DURATION_SECONDS
