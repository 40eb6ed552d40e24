"""Scale constants for the fixed point math library."""

# Token amounts, prices, and protocol factors: 7 digits of precision
SCALAR_7 = 10**7

# Emission indexes: 9 digits of precision
SCALAR_9 = 10**9

# b/d token rate accumulators: 12 digits of precision
SCALAR_12 = 10**12

SECONDS_PER_YEAR = 31_536_000
