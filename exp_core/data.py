"""Domain constants, input coercion, and shared type aliases."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Final


class Mode(str, Enum):
    """Play modes, each with its own independent calculator state."""

    FOUR_PLAYER = "4p"
    TWO_PLAYER = "2p"
    SOLO = "solo"


MODES: Final[tuple[Mode, ...]] = (Mode.FOUR_PLAYER, Mode.TWO_PLAYER, Mode.SOLO)

MODE_LABELS: Final[dict[Mode, str]] = {
    Mode.FOUR_PLAYER: "4人協力",
    Mode.TWO_PLAYER: "2人協力",
    Mode.SOLO: "ソロ",
}

CHARACTER_COUNT: Final[int] = 5
STAT_COLUMNS: Final[int] = 9
MAX_RUNS: Final[int] = 100

STAT_TYPES: Final[tuple[str, ...]] = ("exp", "bp")

COOP_PARTY_BONUS: Final[float] = 0.5
DEFAULT_COOP_COUNT: Final[float] = 4
TWO_PLAYER_COOP_COUNT: Final[float] = 2
DEFAULT_BOOK: Final[float] = 1

CHARACTER_LABEL_TEMPLATE: Final[str] = "キャラ{number}"
AGGREGATE_LABEL: Final[str] = "合計結果"
NO_SELECTION_MESSAGE: Final[str] = "計算対象のキャラを選択してください"

NUMERIC_FIELDS: Final[tuple[str, ...]] = (
    "base_exp",
    "base_bp",
    "book",
    "ls_exp",
    "ls_bp",
    "coop_count",
    "mutual",
    "return_bonus",
    "friend_ls",
)

# Field names as the browser form reported them.
FIELD_ALIASES: Final[dict[str, str]] = {
    "baseExp": "base_exp",
    "baseBp": "base_bp",
    "lsExp": "ls_exp",
    "lsBp": "ls_bp",
    "coopCount": "coop_count",
    "returnBonus": "return_bonus",
    "friendLs": "friend_ls",
}

StatRow = list[float]

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_number(raw: object) -> float:
    """Return ``raw`` as a float, treating anything unparseable as zero.

    Text is parsed leniently: surrounding whitespace is ignored and only the
    leading numeric prefix counts, so ``"12abc"`` reads as 12 and ``"abc"`` as
    0. NaN and infinities never survive coercion.

    Parameters
    ----------
    raw:
        Value delivered by the input layer, usually text or a number.
    """

    if isinstance(raw, bool) or raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
        return value if math.isfinite(value) else 0.0

    text = str(raw).strip()
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def parse_mode(mode: Mode | str) -> Mode:
    """Return the ``Mode`` for an enum member or its string value."""

    try:
        return Mode(mode)
    except ValueError as exc:
        raise ValueError(f"Unknown mode '{mode}'") from exc


def canonical_field_name(field: str) -> str:
    """Map a numeric field name, or its camelCase alias, to the stored name."""

    name = FIELD_ALIASES.get(field, field)
    if name not in NUMERIC_FIELDS:
        raise ValueError(f"Unknown field '{field}'")
    return name


def character_label(char_index: int) -> str:
    """Return the display label for a zero-based character index."""

    return CHARACTER_LABEL_TEMPLATE.format(number=char_index + 1)
