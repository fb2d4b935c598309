"""Shared numeric constants and CLI defaults."""

CHANNELS = 3
RGB_MAX = 255

# Width of one hue sector in degrees (six sectors around the wheel)
HUE_SECTOR = 60.0
HUE_SECTORS = 6.0
HUE_FULL_TURN = 360.0

DEFAULT_OUTPUT_DIR = 'data'
DEFAULT_OUTPUT_PATH = 'data/rgb_output.png'
