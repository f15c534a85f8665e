"""
constants.py: Centralized configuration for the game world, physics and look.
"""

# -------- Window / Client Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
RENDER_FPS = 60                 # One tick per rendered frame

GAME_TITLE = "Bird Flopping Game"
TAP_INSTRUCTION = "Click, tap, or press SPACE to flap!"

# -------- Game World Config --------
BIRD_X = 100                    # Fixed bird X position
BIRD_RADIUS = 20                # For collision detection
GROUND_HEIGHT = 100             # Ground band at the bottom of the viewport

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 200
PIPE_SPEED = 3                  # Horizontal speed (pixels/tick)
PIPE_SPAWN_SPACING = 300        # Distance from the right edge before the next spawn
PIPE_MIN_TOP = 100              # Smallest gap-top height
PIPE_GROUND_CLEARANCE = 100     # Room kept between gap bottom and ground line

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.5                   # Added to velocity every tick
JUMP_STRENGTH = -10.0           # Velocity set by a flap

# -------- Scoring --------
SCORE_DIVISOR = 30              # Pixels of travel per point

# -------- Time of Day --------
TRANSITION_SPEED = 0.002        # Progress per tick toward the next phase
PHASE_ORDER = ("morning", "afternoon", "evening", "night")
SKY_COLORS = {
    "morning": {"top": "#FFB347", "bottom": "#87CEEB", "sun": "#FDB813"},
    "afternoon": {"top": "#87CEEB", "bottom": "#B0E0E6", "sun": "#FFD700"},
    "evening": {"top": "#FF6B6B", "bottom": "#FF8E53", "sun": "#FF4500"},
    "night": {"top": "#0C1445", "bottom": "#1a2a6c", "sun": "#F0E68C"},
}

# -------- Palette --------
SKY_COLOR = "#87CEEB"
BIRD_COLOR = "#FFD700"
PIPE_COLOR = "#228B22"
GROUND_COLOR = "#8B4513"
BUTTON_COLOR = "#FF6B6B"
BEAK_COLOR = "#FF6347"

# -------- Render Details --------
BIRD_TILT = 0.05                # Radians of tilt per unit of velocity
PIPE_CAP_HEIGHT = 35
PIPE_CAP_OVERHANG = 5
SUN_RADIUS = 40
STAR_COUNT = 50
