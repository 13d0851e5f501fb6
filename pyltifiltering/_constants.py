"""Constants shared by the FIR and IIR filters."""

# FIR impulse response used when none is given
DEFAULT_IMPULSE_RESPONSE: tuple = (1, 2, 1)

# IIR coefficients used when none are given: H(z) = (0.1 + 0.1 z^-1) / (1 + 0.1 z^-1)
DEFAULT_B: tuple = (0.1, 0.1)
DEFAULT_A: tuple = (1.0, 0.1)

# Output length 0 means "round the input length up to the next power of two"
AUTO_LENGTH: int = 0

# Stability probe: a unit impulse of 30 samples evaluated with L = 31
STABILITY_IMPULSE_LENGTH: int = 30
STABILITY_PROBE_LENGTH: int = 31

# Second-half / first-half energy ratio at or above which the probe is "unstable"
STABILITY_RATIO_THRESHOLD: float = 1.0
