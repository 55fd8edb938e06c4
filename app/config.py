from dataclasses import dataclass, replace
from typing import List

import streamlit as st

from infinite_life.config import Config
from infinite_life.game import Game
from infinite_life.patterns import PATTERNS
from infinite_life.rules import RULE_REGISTRY
from infinite_life.vector import Vector2
from infinite_life.view import view_centered_on


@dataclass(frozen=True)
class AppConfig:
    frame_width: int
    frame_height: int
    speed: float
    zoom_step: float
    pan_step: int


def set_default_config() -> None:
    if "app_config" not in st.session_state:
        st.session_state["app_config"] = AppConfig(
            frame_width=960,
            frame_height=640,
            speed=1.0,
            zoom_step=100.0,
            pan_step=120,
        )


def make_game_and_view(config: AppConfig) -> None:
    game = Game()
    game.set_speed(config.speed)
    st.session_state["game"] = game
    reset_rule_widgets()
    st.session_state["view"] = view_centered_on(
        Vector2(Config.CHUNK_SIZE, Config.CHUNK_SIZE),
        config.frame_width,
        config.frame_height,
        scale=0.25,
    )


def get_config_from_widgets() -> AppConfig:
    config: AppConfig = st.session_state["app_config"]

    st.subheader("Frame")
    frame_width: int = st.slider(
        "Frame width", 320, 1920, config.frame_width, step=32, key="frame_width"
    )
    frame_height: int = st.slider(
        "Frame height", 240, 1080, config.frame_height, step=32, key="frame_height"
    )

    st.subheader("Speed")
    speed: float = st.slider(
        f"Tick speed (x1: {Config.BASE_TICK_INTERVAL:.0f}ms)",
        0.1,
        10.0,
        config.speed,
        step=0.1,
        key="speed",
    )

    st.subheader("Camera")
    zoom_step: float = st.slider(
        "Zoom step (wheel units)", 10.0, 500.0, config.zoom_step, key="zoom_step"
    )
    pan_step: int = st.slider("Pan step (px)", 10, 500, config.pan_step, key="pan_step")

    return replace(
        config,
        frame_width=frame_width,
        frame_height=frame_height,
        speed=speed,
        zoom_step=zoom_step,
        pan_step=pan_step,
    )


def reset_rule_widgets() -> None:
    """Drop checkbox state so the widgets pick up the engine's rules next run."""
    for count in range(9):
        st.session_state.pop(f"live-{count}", None)
        st.session_state.pop(f"death-{count}", None)


def rule_section(game: Game) -> None:
    st.subheader("Rules")
    preset_names: List[str] = list(RULE_REGISTRY.keys())
    preset: str = st.selectbox("Preset", preset_names, key="rule_preset")
    if st.button("Apply preset", key="apply_preset_btn", use_container_width=True):
        game.rules = RULE_REGISTRY[preset]
        reset_rule_widgets()
        st.rerun()

    st.text("Survive (live)")
    survive_cols = st.columns(9)
    for count, col in enumerate(survive_cols):
        with col:
            enabled = st.checkbox(
                str(count), value=count in game.rules.survive, key=f"live-{count}"
            )
            if enabled != (count in game.rules.survive):
                game.toggle_survival(count)

    st.text("Birth (death)")
    birth_cols = st.columns(9)
    for count, col in enumerate(birth_cols):
        with col:
            enabled = st.checkbox(
                str(count), value=count in game.rules.birth, key=f"death-{count}"
            )
            if enabled != (count in game.rules.birth):
                game.toggle_birth(count)

    st.info(f"{game.rules.notation}", icon="📜")


def pattern_names() -> List[str]:
    return list(PATTERNS.keys())


__all__ = [
    "AppConfig",
    "get_config_from_widgets",
    "make_game_and_view",
    "pattern_names",
    "rule_section",
    "set_default_config",
]
