"""
Shared constants for qutils.
"""

# Byte thresholds used by bytes_to_size
KB = 1024
MB = 1024 * KB
GB = 1024 * MB

# Milliseconds per time unit ("y" is a 365-day year)
MS_PER_UNIT = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
    "w": 604_800_000,
    "y": 31_536_000_000,
}

MS_PER_LEAP_YEAR = 31_622_400_000

# Letters used by get_random_pronounceable_word
CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"
