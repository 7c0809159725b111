"""Display conventions shared by renderers of calculation outcomes."""

from __future__ import annotations

from .data import Mode


def format_percent(total: float) -> str:
    """Return a row total as shown in the table, e.g. ``15%`` or ``12.5%``."""

    if float(total).is_integer():
        return f"{int(total)}%"
    return f"{total}%"


def format_amount(value: int) -> str:
    """Return an EXP or BP amount with thousands separators."""

    return f"{value:,}"


def shows_bp(mode: Mode) -> bool:
    """Solo play awards no BP, so its BP inputs and values stay hidden."""

    return mode is not Mode.SOLO


def uses_selection(mode: Mode) -> bool:
    return mode is not Mode.FOUR_PLAYER


def uses_coop_inputs(mode: Mode) -> bool:
    return mode is not Mode.SOLO


def uses_friend_ls(mode: Mode) -> bool:
    return mode is Mode.SOLO


def projection_header(label: str, mode: Mode) -> str:
    """Return the projection column header for one result."""

    return f"{label} EXP / BP" if shows_bp(mode) else f"{label} EXP"
