"""End-to-end tests: describe a scene, render it and write it out.

These run at tiny resolutions so the Python shading loop stays fast.
"""

import numpy as np
from PIL import Image as PILImage


class TestDemoScene:
    """Tests rendering the built-in demo scene."""

    def test_render_demo_scene(self):
        """Test the demo scene renders a lit, non-uniform image."""
        from whitted.scene.presets import demo_scene

        camera, world = demo_scene(16, 8)
        image = camera.render(world).to_numpy()

        assert image.shape == (8, 16, 3)
        assert np.all(np.isfinite(image))
        assert np.all(image >= 0.0)
        assert image.max() > 0.1
        assert image.std() > 0.01

    def test_demo_scene_uses_every_shape_kind(self):
        """Test the demo scene includes each primitive kind."""
        from whitted.geometry.shape import ShapeKind
        from whitted.scene.presets import demo_scene

        _, world = demo_scene(4, 2)
        assert {s.kind for s in world.objects} == set(ShapeKind)


class TestDescriptionToFile:
    """Tests the description -> render -> export pipeline."""

    def _describe(self):
        return [
            {
                "add": "camera",
                "width": 12,
                "height": 8,
                "field-of-view": 1.0472,
                "from": [0, 1.5, -5],
                "to": [0, 1, 0],
                "up": [0, 1, 0],
            },
            {"add": "light", "at": [-10, 10, -10], "intensity": [1, 1, 1]},
            {
                "add": "plane",
                "material": {
                    "pattern": {"type": "checkers", "colors": [[1, 1, 1], [0, 0, 0]]},
                    "reflective": 0.3,
                },
            },
            {
                "add": "sphere",
                "transform": [["translate", 0, 1, 0]],
                "material": {
                    "color": [0.1, 0.1, 0.1],
                    "transparency": 0.9,
                    "reflective": 0.9,
                    "refractive-index": 1.5,
                },
            },
        ]

    def test_ppm_and_png_agree(self, tmp_path):
        """Test the PPM and default PNG of one render hold the same pixels."""
        from whitted.preview.export import save_png, save_ppm
        from whitted.scene.builder import build_scene

        camera, world = build_scene(self._describe())
        canvas = camera.render(world)

        ppm_path = tmp_path / "scene.ppm"
        png_path = tmp_path / "scene.png"
        save_ppm(canvas, ppm_path)
        save_png(canvas, png_path)

        tokens = ppm_path.read_text(encoding="ascii").split()
        assert tokens[:4] == ["P3", "12", "8", "255"]
        ppm_pixels = np.array([int(t) for t in tokens[4:]], dtype=np.uint8).reshape(8, 12, 3)

        with PILImage.open(png_path) as img:
            png_pixels = np.array(img)

        assert np.array_equal(ppm_pixels, png_pixels)
        assert ppm_pixels.max() > 0

    def test_render_is_deterministic(self):
        """Test two renders of the same scene are identical."""
        from whitted.scene.builder import build_scene

        camera, world = build_scene(self._describe())
        first = camera.render(world).to_numpy()
        second = camera.render(world).to_numpy()
        assert np.array_equal(first, second)
