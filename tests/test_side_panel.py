import pytest

from scaleview.side_panel import SidePanel, slider_to_scale, wireframe_from_filled


def test_slider_to_scale():
    assert slider_to_scale(50) == 1.0
    assert slider_to_scale(0) == 0.0
    assert slider_to_scale(100) == 2.0


def test_wireframe_from_filled():
    assert wireframe_from_filled(True) is False
    assert wireframe_from_filled(False) is True


def test_defaults_give_unit_scale():
    panel = SidePanel()
    assert slider_to_scale(panel.slider_value) == 1.0
    assert panel.filled is True
    assert panel.shown is True


def test_slider_change_notifies_scale():
    panel = SidePanel()
    received = []
    panel.set_on_slider_changed(received.append)
    panel.slider_value = 75
    assert received == [slider_to_scale(75)]
    assert panel.slider_value == 75


def test_slider_without_callback_stores_value():
    panel = SidePanel()
    panel.slider_value = 10
    assert panel.slider_value == 10


@pytest.mark.parametrize("value", [-1, 101])
def test_slider_out_of_range(value):
    panel = SidePanel()
    received = []
    panel.set_on_slider_changed(received.append)
    before = panel.slider_value
    with pytest.raises(ValueError):
        panel.slider_value = value
    assert panel.slider_value == before
    assert received == []


def test_unchecking_filled_requests_wireframe():
    panel = SidePanel()
    received = []
    panel.set_on_render_mode_toggled(received.append)
    panel.filled = False
    panel.filled = True
    assert received == [True, False]


def test_callback_can_be_cleared():
    panel = SidePanel()
    received = []
    panel.set_on_slider_changed(received.append)
    panel.set_on_slider_changed(None)
    panel.slider_value = 20
    assert received == []