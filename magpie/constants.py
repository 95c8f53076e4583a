"""Constants shared across the engine, plus machine-letter blank helpers."""

from enum import IntEnum

LETTER_DISTRIBUTION_FILE_EXTENSION = ".csv"
LETTER_DISTRIBUTION_FILEPATH = "data/letterdistributions/"
GADDAG_MAGIC_STRING = "cgdg"
KLV_MAGIC_STRING = "cldg"
ALPHABET_MAGIC_STRING = "clcv"
LETTER_DISTRIBUTION_MAGIC_STRING = "clds"

MAX_ALPHABET_SIZE = 50
MACHINE_LETTER_MAX_VALUE = 255
MAX_LETTER_CHAR_LENGTH = 6
ALPHABET_EMPTY_SQUARE_MARKER = 0
PLAYED_THROUGH_MARKER = 0
INVALID_LETTER = 0x80 - 1
BLANK_MASK = 0x80
UNBLANK_MASK = 0x80 - 1

BOARD_DIM = 15
INITIAL_LAST_ANCHOR_COL = BOARD_DIM
BINGO_BONUS = 50

GADDAG_NUM_ARCS_BIT_LOC = 24
GADDAG_LETTER_BIT_LOC = 24
GADDAG_NODE_IDX_BIT_MASK = (1 << GADDAG_LETTER_BIT_LOC) - 1
LETTER_SET_BIT_MASK = (1 << GADDAG_NUM_ARCS_BIT_LOC) - 1

BLANK_OFFSET = 100
BLANK_MACHINE_LETTER = 0
SEPARATION_MACHINE_LETTER = 0
TRIVIAL_CROSS_SET = (1 << MAX_ALPHABET_SIZE) - 1

WORD_DIRECTION_RIGHT = 1
WORD_DIRECTION_LEFT = -1
SEPARATION_TOKEN = "^"
BLANK_TOKEN = "?"
ASCII_PLAYED_THROUGH = "."

BAG_SIZE = 100
RACK_SIZE = 7

BOARD_HORIZONTAL_DIRECTION = 0
BOARD_VERTICAL_DIRECTION = 1

GAME_END_REASON_NONE = 0
GAME_END_REASON_STANDARD = 1
GAME_END_REASON_CONSECUTIVE_ZEROS = 2

INFERENCE_EQUITY_EPSILON = 0.000000001
INFERENCE_SUBTOTAL_INDEX_OFFSET_DRAW = 0
INFERENCE_SUBTOTAL_INDEX_OFFSET_LEAVE = 1

SORT_BY_SCORE = 0
SORT_BY_EQUITY = 1
PLAY_RECORDER_TYPE_ALL = 0
PLAY_RECORDER_TYPE_TOP_EQUITY = 1
PREENDGAME_ADJUSTMENT_VALUES_TYPE_ZERO = 0
PREENDGAME_ADJUSTMENT_VALUES_TYPE_QUACKLE = 1

INFERENCE_STATUS_SUCCESS = 0
INFERENCE_STATUS_RUNNING = 1
INFERENCE_STATUS_NO_TILES_PLAYED = 2
INFERENCE_STATUS_RACK_OVERFLOW = 3
INFERENCE_STATUS_TILES_PLAYED_NOT_IN_BAG = 4
INFERENCE_STATUS_BOTH_PLAY_AND_EXCHANGE = 5
INFERENCE_STATUS_EXCHANGE_SCORE_NOT_ZERO = 6
INFERENCE_STATUS_EXCHANGE_NOT_ALLOWED = 7
INFERENCE_STATUS_INVALID_NUMBER_OF_THREADS = 8

START_ROUNDED_EQUITY_VALUE = -100
MOVE_LIST_CAPACITY = 1000000
PASS_MOVE_EQUITY = -10000
INITIAL_TOP_MOVE_EQUITY = -100000
MAX_SCORELESS_TURNS = 6
OPENING_HOTSPOT_PENALTY = -0.7
PREENDGAME_ADJUSTMENT_VALUES_LENGTH = 13

BONUS_TRIPLE_WORD_SCORE = "="
BONUS_DOUBLE_WORD_SCORE = "-"
BONUS_TRIPLE_LETTER_SCORE = '"'
BONUS_DOUBLE_LETTER_SCORE = "'"

DATA_DIRECTORY = "data"
KLV_FILENAME_EXTENSION = "lg"
MAX_ARG_LENGTH = 300
MAX_DATA_FILENAME_LENGTH = 64

SIM_STOPPING_CONDITION_NONE = 0
SIM_STOPPING_CONDITION_95PCT = 1
SIM_STOPPING_CONDITION_98PCT = 2
SIM_STOPPING_CONDITION_99PCT = 3

BACKUP_MODE_OFF = 0
BACKUP_MODE_SIMULATION = 1
UCGI_MODE_OFF = 0
UCGI_MODE_ON = 1

CROSSWORD_GAME_BOARD = (
    "=  '   =   '  =",
    " -   \"   \"   - ",
    "  -   ' '   -  ",
    "'  -   '   -  '",
    "    -     -    ",
    " \"   \"   \"   \" ",
    "  '   ' '   '  ",
    "=  '   -   '  =",
    "  '   ' '   '  ",
    " \"   \"   \"   \" ",
    "    -     -    ",
    "'  -   '   -  '",
    "  -   ' '   -  ",
    " -   \"   \"   - ",
    "=  '   =   '  =",
)


class MoveType(IntEnum):
    """Kind of move a player makes."""

    PLAY = 0
    EXCHANGE = 1
    PASS = 2


def blank(ml: int) -> int:
    """Return the blanked form of a machine letter."""
    return ml | BLANK_MASK


def unblank(ml: int) -> int:
    """Return the machine letter with its blank bit cleared."""
    return ml & UNBLANK_MASK


def is_blanked(ml: int) -> bool:
    """Whether the machine letter carries the blank bit."""
    return bool(ml & BLANK_MASK)