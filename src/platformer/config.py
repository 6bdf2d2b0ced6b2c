# --- Display ---
WIDTH = 960
HEIGHT = 540
FPS = 60

# --- World / Physics ---
GRAVITY = 0.5               # px/frame^2, added to vy every airborne frame
SCALE_REF_HEIGHT = 500      # viewports shorter than this shrink every nominal size
MOVE_SPEED = 5              # px/frame inside the scroll band
SCROLL_SPEED = 5            # px/frame the world shifts outside the band
KEY_X_VELOCITY = 8          # vx kick applied on left/right key press
JUMP_IMPULSE = 8            # vy kick applied by a jump key event

# --- Scroll band (nominal, scaled once at load) ---
BAND_LEFT = 100
BAND_RIGHT = 400

# --- Player ---
PLAYER_START_X = 10
PLAYER_START_Y = 400
PLAYER_W = 40
PLAYER_H = 40

# --- Platforms / checkpoints ---
PLATFORM_W = 200            # never scaled
PLATFORM_H = 40
CHECKPOINT_W = 40
CHECKPOINT_H = 70
CHECKPOINT_MESSAGE_WINDOW = 40   # px past checkpoint.x where "reached" is announced
CHECKPOINT_ENTRY_TOLERANCE = 0.9 # fraction of player width allowed past the entry edge

# --- Messages ---
MESSAGE_CHECKPOINT = "You reached a checkpoint!"
MESSAGE_FINAL = "You reached the final checkpoint!"
MESSAGE_HIDE_MS = 2000

# --- Default level (nominal coords; y is scaled at load, x is not) ---
PLATFORM_POSITIONS = [
    (500, 450),
    (700, 400),
    (850, 350),
    (1050, 150),
    (2500, 450),
    (2900, 400),
    (3150, 350),
    (3900, 450),
    (4200, 400),
    (4400, 200),
    (4700, 150),
]
CHECKPOINT_POSITIONS = [
    (1170, 80),
    (2900, 330),
    (4800, 80),
]

# --- Debug ---
DEBUG_SIM_LOGS = False      # print claims / phase changes to stdout

# --- Colors (RGB) ---
COLOR_BG = (10, 10, 35)
COLOR_FG = (220, 232, 255)
COLOR_PLAYER = (153, 201, 255)
COLOR_PLAT = (172, 209, 87)
COLOR_CHECKPOINT = (241, 190, 50)
COLOR_PANEL = (20, 30, 60)
