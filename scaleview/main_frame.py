"""Main window: the scene canvas beside a collapsible side panel."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike

from scaleview.overlay_button import OverlayButton
from scaleview.scene import Scene, SceneCanvas
from scaleview.side_panel import SidePanel

TITLE = "Scale View"
FRAME_SIZE = (900, 600)
BORDER = 5


@dataclass
class PanelToggle:
    """Shows or hides a side panel and then asks for a new layout."""

    panel: SidePanel
    on_layout: Callable[[], None] | None = None

    def toggle(self) -> bool:
        """Flip the panel's visibility; return whether it is now shown."""
        self.panel.shown = not self.panel.shown
        if self.on_layout is not None:
            self.on_layout()
        return self.panel.shown


class MainFrame:
    """Wires the side panel's controls to the scene canvas."""

    def __init__(
        self,
        *,
        size: tuple[int, int] = FRAME_SIZE,
        button: OverlayButton | None = None,
        resource_dir: str | PathLike[str] = "resources",
    ) -> None:
        self.title = TITLE
        self.size = size
        self.on_layout: Callable[[], None] | None = None
        self.side_panel = SidePanel()
        self.panel_toggle = PanelToggle(self.side_panel, self._layout)
        if button is None:
            button = OverlayButton(0, 0, resource_dir=resource_dir)
        scene = Scene(button=button, on_overlay_button_clicked=self.toggle_side_panel)
        self.canvas = SceneCanvas(scene=scene)
        self.side_panel.set_on_slider_changed(self.canvas.set_scene_scale)
        self.side_panel.set_on_render_mode_toggled(self.canvas.set_wireframe_mode)
        self._layout()

    def toggle_side_panel(self) -> bool:
        return self.panel_toggle.toggle()

    def _layout(self) -> None:
        width, height = self.size
        panel_width = (
            self.side_panel.width + 2 * BORDER if self.side_panel.shown else 0
        )
        self.canvas.size = (
            max(0, width - 2 * BORDER - panel_width),
            max(0, height - 2 * BORDER),
        )
        if self.on_layout is not None:
            self.on_layout()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the viewer window."""
    parser = argparse.ArgumentParser(prog="scaleview", description=TITLE)
    parser.add_argument(
        "--resources", default="resources", help="directory holding the arrow images"
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    from PIL import ImageTk

    frame = MainFrame(resource_dir=args.resources)
    root = tk.Tk()
    root.title(frame.title)
    root.geometry(f"{frame.size[0]}x{frame.size[1]}")

    panel = tk.Frame(root, width=frame.side_panel.width, bg="light grey")
    panel.pack_propagate(False)
    panel_pack = {"side": tk.RIGHT, "fill": tk.Y, "padx": BORDER, "pady": BORDER}
    panel.pack(**panel_pack)

    view = tk.Canvas(root, highlightthickness=0, bd=0)
    view.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=BORDER, pady=BORDER)

    tk.Label(panel, text="Scale", bg="light grey").pack(
        anchor=tk.W, padx=BORDER, pady=(BORDER, 0)
    )
    slider = tk.Scale(
        panel,
        from_=0,
        to=100,
        orient=tk.HORIZONTAL,
        bg="light grey",
        highlightthickness=0,
    )
    slider.set(frame.side_panel.slider_value)
    slider.pack(fill=tk.X, padx=BORDER, pady=BORDER)

    filled = tk.BooleanVar(value=frame.side_panel.filled)

    def on_filled() -> None:
        frame.side_panel.filled = filled.get()

    tk.Checkbutton(
        panel, text="Filled", variable=filled, command=on_filled, bg="light grey"
    ).pack(anchor=tk.W, padx=BORDER, pady=BORDER)

    def redraw() -> None:
        photo = ImageTk.PhotoImage(frame.canvas.render())
        view.delete("all")
        view.create_image(0, 0, anchor=tk.NW, image=photo)
        view.photo = photo

    def on_slider(value: str) -> None:
        frame.side_panel.slider_value = int(float(value))

    def on_layout() -> None:
        if frame.side_panel.shown:
            panel.pack(**panel_pack, before=view)
        else:
            panel.pack_forget()

    def on_configure(event: tk.Event) -> None:
        frame.canvas.size = (event.width, event.height)
        redraw()

    def on_motion(event: tk.Event) -> None:
        if frame.canvas.scene.mouse_move(event.x, event.y):
            redraw()

    def on_click(event: tk.Event) -> None:
        if frame.canvas.scene.left_down(event.x, event.y):
            redraw()

    slider.configure(command=on_slider)
    frame.canvas.on_refresh = redraw
    frame.on_layout = on_layout
    view.bind("<Configure>", on_configure)
    view.bind("<Motion>", on_motion)
    view.bind("<Button-1>", on_click)

    root.mainloop()
    return 0