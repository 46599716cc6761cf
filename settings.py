# settings.py
WIDTH, HEIGHT = 400, 800
TITLE = "Flappy Dash"

# Physics (px, seconds; y grows downward)
GRAVITY = 1000.0
JUMP_FORCE = -300.0

# Bird
BIRD_WIDTH = 64
BIRD_HEIGHT = 48
GROUND_MARGIN = 100           # bird dies once its top passes HEIGHT - GROUND_MARGIN

# Pipes
PIPE_WIDTH = 104
PIPE_HEIGHT = 640
PIPE_END_X = -150             # traversal target, fully off the left edge
PIPE_RESPAWN_X = -100         # crossing this starts the next cycle
GAP_RANGE = 200               # gap offset drawn from [-GAP_RANGE, GAP_RANGE]
BASE_TRAVERSAL_SECONDS = 3.0

# Difficulty: score 0 -> 1x, score 20 -> 2x, unclamped past that
SPEED_SCORE_RANGE = (0.0, 20.0)
SPEED_RANGE = (1.0, 2.0)

# Tilt (presentation only)
TILT_VELOCITY_RANGE = (-400.0, 400.0)
TILT_RANGE = (-0.5, 0.5)      # radians

# Colors (RGBA)
BG = (78, 192, 202, 255)
GROUND = (222, 216, 149, 255)
GRASS = (94, 174, 58, 255)
BIRD_COLOR = (250, 214, 60, 255)
PIPE_COLOR = (116, 191, 46, 255)
PIPE_EDGE = (84, 56, 71, 255)
WHITE = (255, 255, 255, 255)
PINK = (255, 220, 220, 255)
GRAY = (210, 210, 210, 255)
