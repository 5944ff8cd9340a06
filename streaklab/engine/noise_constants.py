"""Fixed blend parameters for the streak field and the noise stack.

These are design constants, not tunables: changing any of them changes the
statistical look of every stage image. Alphas are in [0, 1]; sizes in pixels.
"""

# --- Streak field ---

# Background grain under the streaks
BACKGROUND_DOT_ALPHA = 0.02

# Streaks never start in the bottom 10% of the field
STREAK_Y_FRACTION = 0.9
STREAK_LENGTH_RANGE = (10.0, 50.0)
STREAK_ALPHA_RANGE = (0.1, 0.8)
STREAK_WIDTH_RANGE = (1.0, 2.0)

# Gradient along each streak: full alpha at the head, half at 80%, clear at the tail
STREAK_MID_STOP = 0.8
STREAK_MID_ALPHA_FACTOR = 0.5

# --- Noise stack ---

HAZE_GRAY = 100
HAZE_ALPHA = 0.005

STRIPE_SPACING = 10
STRIPE_ALPHA = 0.01
STRIPE_WIDTH = 0.5

SPECKLE_COUNT = 500
SPECKLE_SIZE_RANGE = (5.0, 15.0)
SPECKLE_ALPHA = 0.008

# Many faint independent dots stand in for additive Gaussian noise; this is an
# approximation, not a per-pixel normal distribution.
GRAIN_COUNT = 2000
GRAIN_ALPHA = 0.05

SALT_PEPPER_ALPHA = 0.9
SALT_PROBABILITY = 0.5

BLOCK_SIZE = 16
BLOCK_PROBABILITY = 0.2
BLOCK_ALPHA = 0.003

MOTION_OFFSET = (2.0, 0.0)
MOTION_ALPHA = 0.01

# Glare center and radius as fractions of the canvas dimension
GLARE_CENTER = (0.7, 0.3)
GLARE_RADIUS = 0.5
GLARE_ALPHA = 0.05

# --- Overlay ---

ARROW_HALF_WIDTH = 2.5
ARROW_HEIGHT = 5.0
ARROW_ALPHA = 0.9
ARROW_SHAFT_WIDTH = 1.5

CROSSHAIR_GLOW_RADIUS = 20.0
CROSSHAIR_HALF_LENGTH = 4.0
CROSSHAIR_LINE_WIDTH = 1.0
