# --- Display ---
WIDTH = 800
HEIGHT = 400
FPS = 60
MAX_DT = 1.0 / 30.0         # clamp frame hitches (sec)

# --- Hero ---
HERO_START_X = 50
HERO_W = 40
HERO_H = 40
HERO_RUN_PX_PER_S = 220.0   # left/right speed (px/s)
JUMP_VY = -380.0            # jump impulse (px/s), negative = up
GRAVITY = 900.0             # px/s^2
MAX_JUMPS = 2               # double jump
MAX_JUMP_HEIGHT = 80        # rough apex of one jump, used for coin placement (px)

# --- Ground ---
GROUND_Y = 300                      # hero top y when standing on the ground
GROUND_LINE_Y = GROUND_Y + HERO_H   # y of the ground surface

# --- World / scrolling ---
SCROLL_PX_PER_S = 220.0     # shared speed for coins, spikes, platform
SPAWN_X = WIDTH + 40        # entities spawn off-screen right
START_LIVES = 3

COIN_W = 24
COIN_H = 24
SPIKE_W = 40
SPIKE_H = 40

# --- Floating platform ---
PLATFORM_ENABLED = True
PLATFORM_W = 200
PLATFORM_H = 20
PLATFORM_MIN_TOP = GROUND_Y - 140 + HERO_H   # highest surface
PLATFORM_MAX_TOP = GROUND_Y - 60 + HERO_H    # lowest surface
PLATFORM_CHANCE = 0.004     # per-frame probability when none is alive
LANDING_TOLERANCE = 10      # +/- px around the platform top
COIN_CLEARANCE = 10         # no-spawn margin around the platform body

# --- Spawning ---
SPAWN_POLICY = "interval"   # "interval" or "bernoulli"
COIN_INTERVAL_S = (0.25, 0.6)
SPIKE_INTERVAL_S = (0.9, 1.7)
COIN_CHANCE_PER_FRAME = 0.035
SPIKE_CHANCE_PER_FRAME = 0.012
SEED_DEFAULT = 12345

# --- Animation (presentation only) ---
HERO_FRAME_COUNT = 4
HERO_FRAME_S = 0.1
COIN_FRAME_COUNT = 6
COIN_FRAME_S = 0.08

# --- Diagnostics ---
LOG_EVENTS = False

# --- Colors (RGB) ---
COLOR_BG = (24, 30, 48)
COLOR_FG = (230, 236, 250)
COLOR_GROUND = (17, 17, 17)
COLOR_HERO = (120, 200, 255)
COLOR_COIN = (255, 210, 70)
COLOR_DANGER = (255, 86, 110)
COLOR_OVERLAY = (0, 0, 0, 170)
