"""Control panel holding the scale slider and the fill checkbox."""

from __future__ import annotations

from collections.abc import Callable

SLIDER_MIN = 0
SLIDER_MAX = 100
SLIDER_DEFAULT = 50
PANEL_WIDTH = 250


def slider_to_scale(value: int) -> float:
    """Map a slider position to a scene scale; the middle is 1.0."""
    return value / 50.0


def wireframe_from_filled(filled: bool) -> bool:
    return not filled


class SidePanel:
    """State of the side panel; changing a control notifies its callback."""

    def __init__(self) -> None:
        self.width = PANEL_WIDTH
        self.shown = True
        self._slider_value = SLIDER_DEFAULT
        self._filled = True
        self._on_slider_changed: Callable[[float], None] | None = None
        self._on_render_mode_toggled: Callable[[bool], None] | None = None

    def set_on_slider_changed(self, callback: Callable[[float], None] | None) -> None:
        self._on_slider_changed = callback

    def set_on_render_mode_toggled(
        self, callback: Callable[[bool], None] | None
    ) -> None:
        self._on_render_mode_toggled = callback

    @property
    def slider_value(self) -> int:
        return self._slider_value

    @slider_value.setter
    def slider_value(self, value: int) -> None:
        if not SLIDER_MIN <= value <= SLIDER_MAX:
            raise ValueError(
                f"slider value {value} outside {SLIDER_MIN}..{SLIDER_MAX}"
            )
        self._slider_value = value
        if self._on_slider_changed is not None:
            self._on_slider_changed(slider_to_scale(value))

    @property
    def filled(self) -> bool:
        return self._filled

    @filled.setter
    def filled(self, filled: bool) -> None:
        self._filled = filled
        if self._on_render_mode_toggled is not None:
            self._on_render_mode_toggled(wireframe_from_filled(filled))