"""
Constants for the UBID codec.

OLC format characters are duplicated here because the openlocationcode
package only exposes them as private module attributes.
"""

# Open Location Code format
OLC_CODE_ALPHABET = "23456789CFGHJMPQRVWX"
OLC_PADDING_CHARACTER = "0"
OLC_SEPARATOR_CHARACTER = "+"

# Leading significant digits accepted before the OLC separator
OLC_MIN_PREFIX_DIGITS = 4
OLC_MAX_PREFIX_DIGITS = 8

# Code length limits enforced by the OLC library
OLC_MIN_CODE_LENGTH = 2
OLC_PAIR_CODE_LENGTH = 10  # Below this, lengths must be even
OLC_MAX_CODE_LENGTH = 15

# "Normal precision" code length (roughly 14m x 14m at the equator)
DEFAULT_CODE_LENGTH = OLC_PAIR_CODE_LENGTH

# UBID format
UBID_SEPARATOR_CHARACTER = "-"

# Coordinate ranges (decimal degrees)
LATITUDE_MIN = -90.0
LATITUDE_MAX = 90.0
LONGITUDE_MIN = -180.0
LONGITUDE_MAX = 180.0

# Logging defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "logs/buildingid.log"
DEFAULT_CONFIG_FILE = "buildingid.json"
