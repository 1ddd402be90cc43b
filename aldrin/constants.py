"""Protocol constants for the Aldrin programs.

Values here mirror what the deployed programs hard-code; changing them does
not change on-chain behavior, only how this library reads it.
"""

# Stable curve amplification coefficient (fixed for every stable pool)
STABLE_CURVE_AMP = 85

# The stable curve is a two-coin invariant
STABLE_CURVE_N_COINS = 2

# Newton's method budget shared by the D and y solvers
NEWTON_MAX_ITERATIONS = 32

# Successive Newton estimates within this many units count as converged
NEWTON_TOLERANCE = 1

# Anchor account discriminator / instruction selector width
DISCRIMINATOR_SIZE = 8

# Solana public key width
PUBLIC_KEY_SIZE = 32

# Slots in a farming snapshot ring
SNAPSHOT_QUEUE_CAPACITY = 1000

# Farming states a single ticket can attach to
TICKET_ATTACHED_STATES = 10

# Orders held by one DTWAP order array
DTWAP_ORDERS_PER_ARRAY = 30

# A ticket that is still open carries i64::MAX as its end time
DEFAULT_FARMING_TICKET_END_TIME = 2**63 - 1

# Only 1/PRE_VESTING_DENOMINATOR of a period reward is claimable before vesting ends
PRE_VESTING_DENOMINATOR = 3

# Basis point denominator for slippage tolerances
BPS_DENOMINATOR = 10_000
