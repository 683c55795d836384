"""
Game rule constants.

Single source of truth for the limits the CLI enforces and the engine
relies on. Kept as plain module constants so every layer reads the same
numbers.
"""

# Letter pool
DEFAULT_LETTERS_LENGTH = 7   # length of a randomly generated pool
MAX_LETTERS_LENGTH = 13

# Minimum guess length
DEFAULT_MIN_LENGTH = 3
LOWEST_MIN_LENGTH = 3
HIGHEST_MIN_LENGTH = 5

# Extra points for a guess that uses every letter in the pool
BONUS_SCORE = 10

DEFAULT_DICT = "words.txt"
