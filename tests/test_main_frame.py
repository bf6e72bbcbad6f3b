import pytest

from scaleview.main_frame import MainFrame, PanelToggle
from scaleview.overlay_button import OverlayButton
from scaleview.side_panel import SidePanel, slider_to_scale


@pytest.fixture
def frame():
    return MainFrame(button=OverlayButton(textures=(None, None)))


def test_panel_toggle_flips_and_lays_out():
    panel = SidePanel()
    layouts = []
    toggle = PanelToggle(panel, lambda: layouts.append(panel.shown))
    assert toggle.toggle() is False
    assert toggle.toggle() is True
    assert layouts == [False, True]


def test_toggle_side_panel(frame):
    assert frame.side_panel.shown
    assert frame.toggle_side_panel() is False
    assert not frame.side_panel.shown
    assert frame.toggle_side_panel() is True


def test_hiding_panel_widens_canvas(frame):
    width_with_panel, height = frame.canvas.size
    frame.toggle_side_panel()
    width_without_panel, height_after = frame.canvas.size
    assert width_without_panel > width_with_panel
    assert height_after == height


def test_overlay_button_click_hides_panel(frame):
    assert frame.canvas.scene.left_down(10, 10) is True
    assert not frame.side_panel.shown


def test_click_outside_button_keeps_panel(frame):
    assert frame.canvas.scene.left_down(200, 200) is False
    assert frame.side_panel.shown


def test_slider_sets_scene_scale_and_refreshes(frame):
    refreshes = []
    frame.canvas.on_refresh = lambda: refreshes.append(1)
    frame.side_panel.slider_value = 80
    assert frame.canvas.scene.scale == slider_to_scale(80)
    assert refreshes == [1]


def test_unchecking_filled_sets_wireframe(frame):
    frame.side_panel.filled = False
    assert frame.canvas.scene.wireframe is True
    frame.side_panel.filled = True
    assert frame.canvas.scene.wireframe is False


def test_layout_hook_called_on_toggle(frame):
    calls = []
    frame.on_layout = lambda: calls.append(frame.side_panel.shown)
    assert frame.toggle_side_panel() is False
    assert calls == [False]