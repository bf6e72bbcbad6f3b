# scaleview

scaleview is a small desktop viewer. It opens a 900×600 window with two
areas:

- a drawing canvas on the left. It shows a rectangle with its top-left
  corner at (100, 150). The rectangle is blue normally and orange while the
  mouse pointer is over it.
- a light grey side panel, 250 pixels wide, on the right. It holds a
  **Scale** slider and a **Filled** checkbox.

A 50×50 overlay button sits in the top-left corner of the canvas. Clicking
it hides or shows the side panel. Each click also switches the button's
image between `left_arrow.png` and `right_arrow.png`; the right arrow is
shown first. While the pointer is over the button, the button is drawn as a
black shape at half of the image's opacity. If an image cannot be loaded,
an error is logged and a plain white square is drawn in its place.

## Installing

```
pip install .
```

The package needs Pillow. The window uses tkinter, which must be present in
the Python installation.

## Running

```
scaleview
scaleview --resources path/to/images
```

The button images are read from `left_arrow.png` and `right_arrow.png` in
the directory given by `--resources`. The default is `resources`, relative
to the directory the program is started from.

## Controls

- **Scale slider** (0 to 100, starting at 50): the rectangle's scale is the
  slider value divided by 50. The middle position gives the natural size of
  200×150. The far right doubles it, and 0 shrinks it to nothing.
- **Filled checkbox** (checked at start): when unchecked, the rectangle is
  drawn as an outline only.
- **Overlay button**: hides or shows the side panel.

## Using it from Python

The parts work without a window.

`scaleview.side_panel`

- `slider_to_scale(value)` turns a slider position into a scale.
- `wireframe_from_filled(filled)` turns the checkbox state into a wireframe
  flag.
- `SidePanel` holds the `slider_value` and `filled` properties. Setting
  either one calls the callback registered with `set_on_slider_changed` or
  `set_on_render_mode_toggled`. A slider value outside 0..100 raises
  `ValueError`.

`scaleview.scene`

- `Scene` holds the interaction state. It offers `rectangle_bounds()`,
  `is_mouse_over_rectangle(x, y)`, `mouse_move(x, y)` and `left_down(x, y)`.
  - `mouse_move` returns whether a hover state changed.
  - `left_down` returns whether the click hit the overlay button. On a hit
    it calls `on_overlay_button_clicked` and switches the button's texture.
- `SceneCanvas` draws a scene. `render()` returns a Pillow RGBA image of
  the canvas's `size`. `set_scene_scale(scale)` and
  `set_wireframe_mode(enabled)` update the scene and call `on_refresh`.

`scaleview.overlay_button`

- `OverlayButton(x, y, textures=..., resource_dir=...)` offers:
  - `hit_test(x, y)`, which includes the edges;
  - `toggle_texture()`;
  - `current_texture()`;
  - `draw(canvas)`, which blends the button onto an RGBA image in place.
- `load_texture(path)` reads a PNG file into a `Texture`, which holds its
  width, its height and RGBA bytes. It raises `TextureError` on failure.
- `to_rgba(image)` converts any Pillow image to a `Texture`.

`scaleview.main_frame`

- `MainFrame` wires the side panel to the canvas. `toggle_side_panel()`
  hides or shows the panel and resizes the canvas to match.
- `PanelToggle` flips a panel's visibility and asks for a new layout.
- `main(argv=None)` is the `scaleview` command.

## What it does not do

The viewer only draws its fixed scene. It does not open, edit or save
images, and the rectangle cannot be moved.

## Running the tests

```
pip install .[test]
pytest
```