"""
Configuration constants for the propeller catalog.
"""

# --- Dataset Layout ---
VOLUME_GLOB = "volume-*"
VOLUME_NUMBER_SEP = "-"
DATA_DIR = "data"
PHOTO_DIR = "prop_photos"

# --- File Type Definitions ---
DATA_EXT = ".txt"
DATA_EXTS = {DATA_EXT}
IMAGE_EXTS = {'.jpg', '.png'}

# Format hint handed to the image reader; anything not listed is read as JPEG
IMAGE_FORMAT_HINTS = {'.png': 'PNG'}
DEFAULT_IMAGE_FORMAT = 'JPEG'

# --- Filename Grammar ---
FIELD_SEP = "_"     # manufacturer_size_modifiers..._role_...
SIZE_SEP = "x"      # <diameter>x<pitch>
VIEW_SEP = "-"      # <prefix>-<view>.jpg

GEOM_KEYWORD = "geom"
STATIC_KEYWORD = "static"
THICK_KEYWORD = "thick"

DEG_SUFFIX = "deg"
BLADE_SUFFIX = "b"
BLADE_TOKEN_LEN = 2
SPECIMEN_MARKER = "spec"
FRONT_MARKER = "front"

# Compact size tokens such as '12p1' (pusher) or '9t2' (tractor):
# <diameter><flag><specimen>
COMPACT_SIZE_PATTERN = r'^(\d+)([pt])(\d+)$'
COMPACT_SIZE_MAX_LEN = 4
PUSHER_FLAG = 'p'
TRACTOR_FLAG = 't'

# --- Units ---
MM_PER_INCH = 25.4
# A diameter above this is assumed to be given in millimeters
MM_DIAMETER_THRESHOLD = 30

# Manufacturers whose names break the generic unit detection.
# Maps manufacturer -> correction rule name (see metadata/units.py)
UNIT_QUIRKS = {
    'ancf': 'half_inch',
}

# 'ancf' lists half-inch sizes without the decimal point: 125 means 12.5
HALF_INCH_DIAMETER_THRESHOLD = 60
HALF_INCH_PITCH_THRESHOLD = 30
HALF_INCH_DIVISOR = 10

# --- Reporting ---
CATALOG_CSV = "catalog.csv"
DROPPED_CSV = "dropped.csv"
LOG_FILE = "prop_catalog.log"
