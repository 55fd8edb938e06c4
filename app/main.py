import logging
import time

import streamlit as st

from config import (
    AppConfig,
    get_config_from_widgets,
    make_game_and_view,
    pattern_names,
    rule_section,
    set_default_config,
)
from infinite_life.game import Game
from infinite_life.interaction import PaintStroke
from infinite_life.patterns import place_pattern
from infinite_life.renderer.frame import render_view
from infinite_life.vector import Vector2
from infinite_life.view import (
    ViewTransform,
    pan,
    visible_chunk_keys,
    zoom_at,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

st.set_page_config(layout="wide", page_title="Infinite Life")


def view_moved(game: Game, view: ViewTransform, config: AppConfig) -> None:
    """Allocate every chunk the camera can now see."""
    st.session_state["view"] = view
    game.world.ensure_chunks(
        visible_chunk_keys(
            view,
            config.frame_width,
            config.frame_height,
            game.world.chunk_size,
            game.world.cell_pixel_size,
        )
    )


# --------- Main App ---------

set_default_config()
tab_game, tab_config = st.tabs(["Game", "Config"])

with tab_config:
    config: AppConfig = get_config_from_widgets()
    st.session_state["app_config"] = config

    if st.button("💾 Save", key="save_config_btn", use_container_width=True):
        if "game" in st.session_state:
            st.session_state["game"].set_speed(config.speed)
    st.divider()

with tab_game:
    if "game" not in st.session_state or "view" not in st.session_state:
        make_game_and_view(st.session_state["app_config"])

    config = st.session_state["app_config"]
    game: Game = st.session_state["game"]
    view: ViewTransform = st.session_state["view"]
    center = Vector2(config.frame_width / 2, config.frame_height / 2)

    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        run_label = "⏸️ Stop" if game.is_running() else "▶️ Start"
        if st.button(run_label, key="run_btn", use_container_width=True):
            if game.is_running():
                game.stop()
            else:
                game.start()
            st.rerun()
        if st.button("⏭️ Step", key="step_btn", use_container_width=True):
            game.step()
        if st.button("🧹 Reset", key="reset_btn", use_container_width=True):
            make_game_and_view(config)
            st.rerun()

        st.divider()

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                view_moved(game, pan(view, Vector2(0, config.pan_step)), config)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                view_moved(game, pan(view, Vector2(config.pan_step, 0)), config)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                view_moved(game, pan(view, Vector2(0, -config.pan_step)), config)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                view_moved(game, pan(view, Vector2(-config.pan_step, 0)), config)

        zoom_in_btn, zoom_out_btn = st.columns([1, 1])
        with zoom_in_btn:
            if st.button("🔍 In", key="zoom_in_btn", use_container_width=True):
                view_moved(game, zoom_at(view, center, -config.zoom_step), config)
        with zoom_out_btn:
            if st.button("🔭 Out", key="zoom_out_btn", use_container_width=True):
                view_moved(game, zoom_at(view, center, config.zoom_step), config)

        st.divider()

        st.text("Cell")
        x_col, y_col = st.columns([1, 1])
        with x_col:
            cell_x: int = st.number_input("x", value=64, step=1, key="cell_x")
        with y_col:
            cell_y: int = st.number_input("y", value=64, step=1, key="cell_y")
        cell = Vector2(int(cell_x), int(cell_y))
        if st.button("✏️ Toggle cell", key="toggle_btn", use_container_width=True):
            stroke = PaintStroke(game.world)
            stroke.press(cell)
            stroke.release()

        pattern: str = st.selectbox("Pattern", pattern_names(), key="pattern")
        if st.button("🧬 Place pattern", key="pattern_btn", use_container_width=True):
            place_pattern(game.world, pattern, cell)

    with left_col:
        rule_section(game)
        st.divider()
        st.info(f"**Generation:** {game.generation}", icon="⏱️")
        st.info(f"**Population:** {game.world.population}", icon="🧫")
        st.info(f"**Chunks:** {len(game.world.chunks)}", icon="🧩")
        st.info(f"**Zoom:** {st.session_state['view'].scale:.2f}x", icon="🔎")

    with middle_col:
        img = render_view(
            game.world,
            st.session_state["view"],
            config.frame_width,
            config.frame_height,
        )
        st.image(img, use_container_width=True)

    if game.is_running():
        time.sleep(game.tick_interval / 1000.0)
        game.tick()
        st.rerun()
