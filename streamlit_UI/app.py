"""Streamlit front-end for the EXP/BP run calculator."""

from __future__ import annotations

import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from exp_core import (
    CHARACTER_COUNT,
    MODE_LABELS,
    MODES,
    NO_SELECTION_MESSAGE,
    SETTINGS_FILENAME,
    STAT_COLUMNS,
    CalculationOutcome,
    Mode,
    StateStore,
    character_label,
    format_amount,
    format_percent,
    load_settings,
    projection_header,
    setup_logging,
    shows_bp,
    uses_coop_inputs,
    uses_friend_ls,
    uses_selection,
)

SETTINGS_PATH = Path(__file__).resolve().parent / SETTINGS_FILENAME
COLUMN_NAMES = [str(col + 1) for col in range(STAT_COLUMNS)]

# (field, label, step) in display order; coop inputs and friend LS are filtered per mode.
BASE_INPUTS: list[tuple[str, str, float]] = [
    ("base_exp", "基礎EXP", 1.0),
    ("base_bp", "基礎BP", 1.0),
    ("book", "書の倍率", 0.1),
    ("ls_exp", "リーダースキル EXP(%)", 1.0),
    ("ls_bp", "リーダースキル BP(%)", 1.0),
    ("coop_count", "協力人数", 1.0),
    ("mutual", "相互フォロー(%)", 1.0),
    ("return_bonus", "復帰ボーナス(%)", 1.0),
    ("friend_ls", "フレンドLS(%)", 1.0),
]
BP_FIELDS = {"base_bp", "ls_bp"}
COOP_FIELDS = {"coop_count", "mutual", "return_bonus"}


def get_store() -> StateStore:
    """Return the session's store, creating it and logging on first use."""

    if "store" not in st.session_state:
        settings = load_settings(SETTINGS_PATH)
        setup_logging(settings["log_level"])
        st.session_state.store = StateStore()
    return st.session_state.store


def visible_inputs(mode: Mode) -> list[tuple[str, str, float]]:
    """Return the base inputs shown for a mode."""

    fields = []
    for field, label, step in BASE_INPUTS:
        if field in BP_FIELDS and not shows_bp(mode):
            continue
        if field in COOP_FIELDS and not uses_coop_inputs(mode):
            continue
        if field == "friend_ls" and not uses_friend_ls(mode):
            continue
        fields.append((field, label, step))
    return fields


def render_base_inputs(store: StateStore, mode: Mode) -> None:
    """Render the base value inputs and push edits into the store."""

    state = store.state(mode)
    inputs = visible_inputs(mode)
    columns = st.columns(3)
    for idx, (field, label, step) in enumerate(inputs):
        key = f"{mode.value}_{field}"
        kwargs: dict[str, float] = {}
        if key not in st.session_state:
            kwargs["value"] = float(getattr(state, field))
        if field == "coop_count" and mode is Mode.TWO_PLAYER:
            kwargs["max_value"] = 2.0
        columns[idx % 3].number_input(
            label,
            step=step,
            format="%g",
            key=key,
            on_change=lambda f=field, k=key: store.set_field(mode, f, st.session_state[k]),
            **kwargs,
        )


def build_stat_frame(store: StateStore, mode: Mode, stat_type: str) -> pd.DataFrame:
    """Return the 5x9 bonus table of one stat type as a DataFrame."""

    rows = [char.stats_for(stat_type) for char in store.state(mode).characters]
    return pd.DataFrame(
        rows,
        columns=COLUMN_NAMES,
        index=[character_label(idx) for idx in range(CHARACTER_COUNT)],
    )


def render_stat_table(
    store: StateStore,
    mode: Mode,
    stat_type: str,
    outcome: CalculationOutcome,
) -> CalculationOutcome:
    """Render an editable bonus table and forward every changed cell."""

    before = build_stat_frame(store, mode, stat_type)
    edited = st.data_editor(
        before,
        key=f"{mode.value}_{stat_type}_table",
        use_container_width=True,
    )
    for char_index in range(CHARACTER_COUNT):
        for col in range(STAT_COLUMNS):
            new_value = edited.iat[char_index, col]
            if new_value != before.iat[char_index, col]:
                outcome = store.set_character_stat(mode, char_index, stat_type, col, new_value)

    totals = outcome.row_totals.exp if stat_type == "exp" else outcome.row_totals.bp
    st.caption(
        " / ".join(
            f"{character_label(idx)}: {format_percent(total)}" for idx, total in enumerate(totals)
        )
    )
    return outcome


def render_character_selection(store: StateStore, mode: Mode) -> None:
    """Render one checkbox per character for the aggregating modes."""

    st.markdown("**計算対象キャラ**")
    columns = st.columns(CHARACTER_COUNT)
    for idx, char in enumerate(store.state(mode).characters):
        key = f"{mode.value}_select_{idx}"
        kwargs = {} if key in st.session_state else {"value": char.selected}
        columns[idx].checkbox(
            character_label(idx),
            key=key,
            on_change=lambda i=idx, k=key: store.set_character_selected(
                mode, i, st.session_state[k]
            ),
            **kwargs,
        )


def build_projection_frame(outcome: CalculationOutcome) -> pd.DataFrame:
    """Return the run projection with one row per run count, 100 first."""

    records = []
    for row in outcome.projection:
        record: dict[str, object] = {"周回数": row.run_count}
        for cell in row.values:
            header = projection_header(cell.label, outcome.mode)
            if shows_bp(outcome.mode):
                record[header] = f"{format_amount(cell.exp)} / {format_amount(cell.bp)}"
            else:
                record[header] = format_amount(cell.exp)
        records.append(record)
    return pd.DataFrame.from_records(records)


def render_projection_chart(outcome: CalculationOutcome) -> None:
    """Plot cumulative EXP per result against the run count."""

    chart_data = pd.DataFrame(
        [
            {"run": row.run_count, "label": cell.label, "exp": cell.exp}
            for row in outcome.projection
            for cell in row.values
        ]
    )
    chart = (
        alt.Chart(chart_data)
        .mark_line()
        .encode(
            x=alt.X("run:Q", title="周回数"),
            y=alt.Y("exp:Q", title="累計EXP", axis=alt.Axis(format=",d")),
            color=alt.Color("label:N", title=None),
            tooltip=[
                alt.Tooltip("label:N", title="対象"),
                alt.Tooltip("run:Q", title="周回数"),
                alt.Tooltip("exp:Q", title="累計EXP", format=","),
            ],
        )
        .properties(height=240)
    )
    st.altair_chart(chart, use_container_width=True)


def render_results(outcome: CalculationOutcome) -> None:
    """Render result metrics and the projection, or the selection prompt."""

    if outcome.no_selection:
        st.info(NO_SELECTION_MESSAGE)
        return

    with st.container(border=True):
        columns = st.columns(len(outcome.results))
        for column, entry in zip(columns, outcome.results):
            column.markdown(f"**{entry.label}**")
            column.metric("EXP", format_amount(entry.exp))
            if shows_bp(outcome.mode):
                column.metric("BP", format_amount(entry.bp))

    render_projection_chart(outcome)
    st.dataframe(
        build_projection_frame(outcome),
        hide_index=True,
        use_container_width=True,
    )


def render_mode(store: StateStore, mode: Mode) -> None:
    """Render every section of one mode's calculator."""

    render_base_inputs(store, mode)
    if uses_selection(mode):
        render_character_selection(store, mode)

    outcome = store.last_outcome(mode)
    st.markdown("**EXP ボーナス(%)**")
    outcome = render_stat_table(store, mode, "exp", outcome)
    if shows_bp(mode):
        st.markdown("**BP ボーナス(%)**")
        outcome = render_stat_table(store, mode, "bp", outcome)

    render_results(outcome)


def main() -> None:
    """Entry point used by Streamlit."""

    st.set_page_config(page_title="EXP/BP Calculator", layout="wide")
    store = get_store()

    st.title("EXP/BP 計算機")
    selected = st.radio(
        "モード",
        options=list(MODES),
        index=list(MODES).index(store.active_mode),
        format_func=lambda mode: MODE_LABELS[mode],
        horizontal=True,
        label_visibility="collapsed",
    )
    if selected != store.active_mode:
        store.select_mode(selected)

    render_mode(store, store.active_mode)


if __name__ == "__main__":
    main()
