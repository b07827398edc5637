# Game Configuration Constants

import os

# Screen dimensions (desktop world size)
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400
FPS = 60

# Touch layout: world takes the full viewport width and part of its height,
# the rest is the control strip below the canvas.
TOUCH_HEIGHT_RATIO = 0.75
TOUCH_BUTTON_STRIP_RATIO = 0.3
TOUCH_BUTTON_GAP = 24
TOUCH_ENV_FLAG = "BOUNCE_TOUCH"

# Feature flags
ENABLE_SOUND = True
USE_NATIVE_FRAME_SCHEDULING = True

# Motion-trail fade: 1.0 repaints the whole canvas every frame.
FADE_FACTOR = 1.0

# Menu fades (milliseconds)
MENU_FADE_IN_DURATION = 300
MENU_FADE_OUT_DURATION = 600

# Logging
LOG_LEVEL = os.environ.get("BOUNCE_LOG_LEVEL", "INFO")

# Persistence
HIGH_SCORE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "high_scores.json")
HIGH_SCORE_KEY = "highscore"

# Sounds: cue name -> (file, loop)
MASTER_VOLUME = 0.5
SOUND_DIR = "assets"
SOUNDS = {
    "intro": ("intro.mp3", True),
    "dead": ("dead.mp3", False),
    "ping": ("ping.mp3", False),
    "bounce": ("bounce.mp3", False),
    "start": ("start.wav", False),
    "background": ("background.mp3", True),
}
BACKGROUND_SEEK = 1.0

# Colors (r, g, b, a) with 0-255 channels
PALETTE = {
    "background": (0, 0, 0),
    "player": (255, 255, 255, 230),
    "enemy_yellow": (220, 220, 0, 230),
    "enemy_green": (0, 220, 0, 230),
    "ball_stroke": (255, 255, 255, 102),
    "score_value": (0, 220, 220, 255),
    "hud_text": (255, 255, 255, 255),
    "hud_panel": (0, 0, 0, 77),
    "milestone": (0, 220, 220),
    "menu_text": (235, 235, 235, 255),
    "menu_meta": (160, 170, 180, 255),
}

# HUD
HUD_FONT = "Verdana"
HUD_FONT_SIZE = 16
HUD_LABEL = "Score:"
HUD_LABEL_X = 5
HUD_LABEL_Y = 18
HUD_VALUE_OFFSET = 60
HUD_PANEL_HEIGHT = 30

# Notifications
NOTIFY_FONT = "Arial"

# Window
CAPTION = "Bounce"
