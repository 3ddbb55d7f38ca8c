"""Android gesture store protocol constants.

Single source of truth for the on-disk layout. Everything is big-endian.
The decoder, the inspector and the synthetic store generator must agree on it.
"""

# Fixed-width signed integers: width -> struct format
INT_FORMATS = {
    2: ">h",
    4: ">i",
    8: ">q",
}
FLOAT32_FMT = ">f"

# Header: [Version(2) | EntryCount(4)] = 6 bytes
VERSION_LEN = 2
HEADER_FMT = ">hi"

# Entry: [Reserved(2) | Name(text) | GestureCount(4)]
# Android writes the name with writeUTF, so the reserved field holds the
# name's byte length and the name has no terminator. The decoder never
# interprets the field; the name ends at the first NUL, which is left unread.
ENTRY_RESERVED_FMT = ">H"
ENTRY_RESERVED_LEN = 2
COUNT_LEN = 4
COUNT_FMT = ">i"

# Gesture: [GestureId(8) | StrokeCount(4)]
GESTURE_ID_LEN = 8
GESTURE_ID_FMT = ">q"

# Point: [X(4) | Y(4) | Timestamp(8)] = 16 bytes
POINT_FMT = ">ffq"
TIMESTAMP_LEN = 8

TEXT_TERMINATOR = b"\x00"
TEXT_ENCODING = "utf-8"

# Counts are stored as int32 but iterated as unsigned
COUNT_MASK = 0xFFFFFFFF

# Normalized coordinate range for downstream template matching
NORMALIZED_SCALE = 300.0

# Default resource lookup
DEFAULT_STORE_NAME = "gestures.bin"
STORE_PATH_ENV = "GESTURE_STORE_PATH"
