WIDTH = 500
HEIGHT = 500
FULLSCREEN = False
WINDOW_TITLE = "Shooting Game"
FPS = 61
VSYNC = False
CLEAR_COLOR = (1.0, 1.0, 1.0, 1.0)
DEFAULT_SEED = 1234

# Rendering defaults (line width is global GL state, reset after trees)
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_POINT_SIZE = 4.0

# Player
PLAYER_SPEED = 150.0  # world units per second
PLAYER_SIZE = 14.0
PLAYER_COLOR = (0.1, 0.1, 0.1)

# Circles derive their vertex count from the circumference
CIRCLE_UNITS_PER_VERTEX = 6.0
MIN_PRECISION = 3
# Sine ribbons are sampled every few world units
SINE_UNITS_PER_SAMPLE = 4.0

# Palettes (RGB floats)
TREE_COLORS = [
    (0.36, 0.22, 0.10),
    (0.45, 0.30, 0.12),
    (0.20, 0.55, 0.20),
    (0.10, 0.45, 0.15),
    (0.55, 0.70, 0.20),
]
SPAWN_COLORS = [
    (0.90, 0.20, 0.20),
    (0.20, 0.60, 0.90),
    (0.95, 0.70, 0.10),
    (0.50, 0.25, 0.80),
    (0.15, 0.75, 0.45),
    (0.95, 0.45, 0.70),
]

# Spawn jitter
SPAWN_RADIUS = (15, 40)
SPAWN_ROTATE_SPEED = (30, 180)  # degrees per second, sign picked separately
SPAWN_SCALE_AMPLITUDE = 0.25
SPAWN_SCALE_FREQUENCY = 2.0

# Fractal tree defaults
TREE_DEPTH = 8
TREE_LENGTH = 60.0
TREE_SPLIT_ANGLE = 25.0
TREE_SPLIT_DECAY = 0.75
TREE_WIDTH = 6.0
TREE_RANDOM_RANGE = 0.3

# Demo population
DEMO_TREE_COUNT = 2
DEMO_SINE_WAVES = 2
DEMO_MARKERS = 2
