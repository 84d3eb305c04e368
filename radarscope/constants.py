"""
Hard-coded colours and animation constants so every module can import
them without circular dependencies.
"""
from pathlib import Path

# -------- colours (RGBA) --------
GREEN = (0, 250, 0, 0xFF)
BLACK = (0, 0, 0, 0xFF)

# -------- blips --------
NUM_BLIPS      = 20
FULL_BRIGHT    = 255
PAUSE_TICKS    = 50         # cooldown after a blip hops
FADE_EVERY     = 4          # fade on every 4th degree
FADE_STEP      = 2
RADIUS_SCALE   = 0.03       # × shorter surface side
VELOCITY_SCALE = 0.01       # × surface side
BLIP_LINE_W    = 4

# -------- scope --------
DEGREES        = 360
SPOKE_STEP_DEG = 45
RING_STEP      = 0.3        # 1.0, 0.7, 0.4, 0.1
SCOPE_LINE_W   = 2

# -------- sweep beam --------
SWEEP_SEGMENTS = 60
SWEEP_SPREAD   = 0.5        # degrees between segments
SWEEP_FADE     = 3          # green lost per segment
SWEEP_GREEN    = 250

# -------- window --------
DEFAULT_SIZE  = (512, 512)
DEFAULT_TITLE = "Radar"
FRAME_DELAY_MS = 2

# -------- dirs --------
ROOT     = Path(__file__).resolve().parent.parent
CFG_PATH = ROOT / "radarscope_config.json"
