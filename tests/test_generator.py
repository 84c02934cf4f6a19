"""
Tests for the doormat generator, the render passes and the export pipeline.
Run from project root: python -m pytest tests/ -v
"""
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _small_config(**overrides):
    from doormat.config import RenderConfig

    params = dict(mat_width=120, mat_height=180, fringe_length=10, warp_thickness=2)
    params.update(overrides)
    return RenderConfig(**params)


class TestCanvas(unittest.TestCase):

    def test_fill_channels_are_clamped(self):
        from doormat.render import Canvas

        canvas = Canvas(4, 4, background=(0, 0, 0))
        canvas.rect(0, 0, 2, 2, (300, -5, 128))
        arr = canvas.to_array()
        self.assertEqual(tuple(arr[0, 0]), (255, 0, 128))
        self.assertEqual(tuple(arr[3, 3]), (0, 0, 0))

    def test_alpha_fill_blends(self):
        from doormat.render import Canvas

        canvas = Canvas(2, 2, background=(0, 0, 0))
        canvas.rect(0, 0, 2, 2, (255, 255, 255, 128))
        value = int(canvas.to_array()[0, 0, 0])
        self.assertGreater(value, 100)
        self.assertLess(value, 160)

    def test_rotation_is_clockwise(self):
        from doormat.render import Canvas

        canvas = Canvas(3, 2, background=(0, 0, 0))
        canvas.rect(0, 0, 1, 1, (255, 0, 0))
        rotated = canvas.rotated()
        self.assertEqual(rotated.size, (2, 3))
        # top-left corner ends up top-right after a clockwise quarter turn
        self.assertEqual(rotated.getpixel((1, 0)), (255, 0, 0))


class TestWeaveRules(unittest.TestCase):
    """Per-stripe color rules of the weave renderer."""

    def _stripe(self, weave, primary="#000000", secondary="#FFFFFF"):
        from doormat.stripes import Stripe, WeaveType

        return Stripe(0.0, 300.0, primary, secondary, WeaveType(weave), 0.2)

    def _grid(self):
        import numpy as np

        return np.arange(0, 400, 3, dtype=float), np.arange(0, 300, 9, dtype=float)

    def test_ink_contrasts_with_thread(self):
        import numpy as np
        from doormat.color import Color
        from doormat.render.weave import _apply_ink

        light, dark = Color(230, 230, 230), Color(20, 20, 20)
        colors = np.array([[10.0, 10.0, 10.0], [240.0, 240.0, 240.0]])
        out = _apply_ink(colors, np.array([True, True]), (light, dark))
        self.assertEqual(tuple(out[0]), light.as_tuple())
        self.assertEqual(tuple(out[1]), dark.as_tuple())

    def test_ink_only_where_masked(self):
        import numpy as np
        from doormat.color import Color
        from doormat.render.weave import _apply_ink

        colors = np.array([[10.0, 10.0, 10.0], [240.0, 240.0, 240.0]])
        out = _apply_ink(colors, np.array([False, True]), (Color(230, 230, 230), Color(20, 20, 20)))
        self.assertEqual(tuple(out[0]), (10.0, 10.0, 10.0))
        self.assertTrue(np.array_equal(_apply_ink(colors, np.array([True, True]), None), colors))

    def test_mixed_bases_are_primary_or_secondary(self):
        from doormat.random_utils import SeededRandom
        from doormat.render.weave import weft_base_colors

        xs, ys = self._grid()
        base = weft_base_colors(self._stripe("mixed"), xs, ys, SeededRandom(42))
        self.assertEqual(base.shape, (len(ys), len(xs), 3))
        found = {tuple(int(c) for c in px) for px in base.reshape(-1, 3)}
        self.assertEqual(found, {(0, 0, 0), (255, 255, 255)})

    def test_mixed_without_secondary_stays_primary(self):
        import numpy as np
        from doormat.random_utils import SeededRandom
        from doormat.render.weave import weft_base_colors

        xs, ys = self._grid()
        base = weft_base_colors(self._stripe("mixed", "#8B7355", None), xs, ys, SeededRandom(42))
        self.assertTrue(np.all(base == np.array([0x8B, 0x73, 0x55], dtype=float)))

    def test_textured_bases_lean_toward_white(self):
        import numpy as np
        from doormat.random_utils import SeededRandom
        from doormat.render.weave import weft_base_colors

        xs, ys = self._grid()
        primary = np.array([0x8B, 0x73, 0x55], dtype=float)
        base = weft_base_colors(self._stripe("textured", "#8B7355", None), xs, ys, SeededRandom(7))
        upper = primary + (255.0 - primary) * 0.15
        self.assertTrue(np.all(base >= primary - 1e-9))
        self.assertTrue(np.all(base <= upper + 1e-9))
        self.assertGreater(float(base.max() - base.min()), 0.0)

    def test_solid_bases_are_primary(self):
        import numpy as np
        from doormat.random_utils import SeededRandom
        from doormat.render.weave import weft_base_colors

        xs, ys = self._grid()
        base = weft_base_colors(self._stripe("solid"), xs, ys, SeededRandom(1))
        self.assertTrue(np.all(base == 0.0))

    def test_texture_factors_bounds(self):
        import numpy as np
        from doormat.random_utils import SeededRandom
        from doormat.render.weave import texture_factors

        factors = texture_factors(SeededRandom(42), 200, 300)
        self.assertEqual(factors.shape, (300, 200))
        self.assertGreaterEqual(float(factors.min()), 1.0 - 70 / 255)
        self.assertLessEqual(float(factors.max()), 1.0 + 25 / 255 + 1e-9)
        self.assertLess(float(factors.min()), 1.0)

    def test_selvedge_color_of_mixed_stripe(self):
        from doormat.color import Color
        from doormat.random_utils import SeededRandom
        from doormat.render.edges import selvedge_color

        rng = SeededRandom(3)
        stripe = self._stripe("mixed", "#C80000", "#0000C8")
        for y in range(0, 300, 7):
            c = selvedge_color(stripe, float(y), rng)
            self.assertTrue(0 <= c.r <= 160 and 0 <= c.b <= 160 and c.g == 0)
        # Other weave types ignore the secondary and just darken the primary
        self.assertEqual(selvedge_color(self._stripe("textured", "#C80000", "#0000C8"), 5.0, rng), Color(160, 0, 0))


class TestEdges(unittest.TestCase):

    def test_selvedge_rows_skip_first_and_last_thread(self):
        from doormat.render.edges import selvedge_rows
        from doormat.stripes import Stripe, WeaveType

        stripes = [
            Stripe(0.0, 20.0, "#8B7355", None, WeaveType.SOLID, 0.2),
            Stripe(20.0, 20.0, "#A0522D", None, WeaveType.SOLID, 0.2),
        ]
        rows = selvedge_rows(stripes, 8)
        self.assertEqual([y for _, y in rows], [9.0, 18.0, 20.0, 29.0])
        self.assertIs(rows[1][0], stripes[0])
        self.assertIs(rows[2][0], stripes[1])
        self.assertEqual(selvedge_rows([], 8), [])

    def test_fringe_without_palette_uses_default(self):
        from doormat.random_utils import SeededRandom
        from doormat.render import Canvas, render_fringe

        config = _small_config()
        canvas = Canvas(*config.canvas_size, background=config.background)
        before = canvas.to_array()
        render_fringe(canvas, None, SeededRandom(1), config)
        self.assertFalse((before == canvas.to_array()).all())

    def test_fringe_stays_outside_mat_body(self):
        from doormat.random_utils import SeededRandom
        from doormat.render import Canvas, render_fringe

        config = _small_config()
        canvas = Canvas(*config.canvas_size, background=(0, 0, 0))
        render_fringe(canvas, None, SeededRandom(2), config)
        ox, oy = config.origin
        body = canvas.to_array()[oy + 5:oy + config.mat_height - 5, ox:ox + config.mat_width]
        self.assertEqual(int(body.sum()), 0)


class TestDoormatGenerator(unittest.TestCase):
    """Determinism and the re-render operations of DoormatGenerator."""

    def test_same_seed_same_pixels(self):
        import numpy as np
        from doormat.generator import DoormatGenerator

        a = DoormatGenerator(_small_config())
        b = DoormatGenerator(_small_config())
        a.generate(1234)
        b.generate(1234)
        self.assertEqual(a.state.stripes, b.state.stripes)
        self.assertEqual(a.get_current_palette(), b.get_current_palette())
        self.assertTrue(np.array_equal(a.pixels, b.pixels))

    def test_different_seeds_differ(self):
        import numpy as np
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config())
        gen.generate(1)
        first = gen.pixels
        gen.generate(2)
        self.assertFalse(np.array_equal(first, gen.pixels))

    def test_regenerate_is_reproducible(self):
        import numpy as np
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config())
        gen.generate(9)
        first = gen.pixels
        gen.generate(10)
        gen.generate(9)
        self.assertTrue(np.array_equal(first, gen.pixels))

    def test_default_size_seed_42(self):
        from doormat.config import RenderConfig
        from doormat.generator import DoormatGenerator
        from doormat.stripes import validate_layout

        gen = DoormatGenerator(RenderConfig())
        state = gen.generate(42)
        self.assertTrue(validate_layout(state.stripes, 1200))
        self.assertIn(state.warp_thickness, range(1, 7))
        self.assertEqual(state.weft_thickness, 8)
        self.assertEqual(gen.pixels.shape, (800 + 120, 1200 + 120, 3))

    def test_text_changes_pixels_and_clear_restores(self):
        import numpy as np
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config())
        gen.generate(5)
        plain = gen.pixels
        stripes = list(gen.state.stripes)
        rows = gen.set_text(["hi!"])
        self.assertEqual(rows, ["HI"])
        self.assertTrue(gen.state.text_cells)
        self.assertFalse(np.array_equal(plain, gen.pixels))
        # Text never changes the layout
        self.assertEqual(stripes, gen.state.stripes)
        gen.clear_text()
        self.assertEqual(gen.state.text_cells, [])
        self.assertTrue(np.array_equal(plain, gen.pixels))

    def test_text_survives_new_seed(self):
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config())
        gen.set_text("OK")
        self.assertIsNone(gen.state)
        gen.generate(3)
        self.assertEqual(gen.state.text_rows, ["OK"])
        self.assertEqual(gen.calculate_traits().total_characters, 2)

    def test_thickness_updates(self):
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config(warp_thickness=None))
        gen.generate(11)
        stripes = list(gen.state.stripes)
        gen.set_warp_thickness(4)
        self.assertEqual(gen.state.warp_thickness, 4)
        gen.set_weft_thickness(5)
        self.assertEqual(gen.state.weft_thickness, 5)
        self.assertEqual(stripes, gen.state.stripes)
        # Weft thickness carries over to the next seed
        gen.generate(12)
        self.assertEqual(gen.state.weft_thickness, 5)

    def test_pinned_warp_wins(self):
        from doormat.generator import DoormatGenerator

        for seed in range(5):
            gen = DoormatGenerator(_small_config(warp_thickness=3))
            self.assertEqual(gen.generate(seed).warp_thickness, 3)

    def test_pinned_warp_keeps_layout(self):
        from doormat.generator import DoormatGenerator

        free = DoormatGenerator(_small_config(warp_thickness=None)).generate(21)
        pinned = DoormatGenerator(_small_config(warp_thickness=6)).generate(21)
        self.assertEqual(free.stripes, pinned.stripes)
        self.assertEqual(free.palette, pinned.palette)

    def test_invalid_thickness_raises(self):
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config())
        gen.generate(1)
        with self.assertRaises(ValueError):
            gen.set_warp_thickness(0)
        with self.assertRaises(ValueError):
            gen.set_weft_thickness(2.5)
        self.assertEqual(gen.state.warp_thickness, 2)

    def test_on_redraw_called_after_each_render(self):
        from doormat.generator import DoormatGenerator

        calls = []
        gen = DoormatGenerator(_small_config(), on_redraw=calls.append)
        gen.generate(1)
        gen.set_text("A")
        gen.set_weft_thickness(6)
        gen.clear_text()
        self.assertEqual(len(calls), 4)
        self.assertIs(calls[0], gen)

    def test_accessors_before_generate(self):
        from doormat.generator import DoormatGenerator
        from doormat.palettes import default_palette

        gen = DoormatGenerator(_small_config())
        self.assertEqual(gen.get_current_palette(), default_palette())
        self.assertEqual(gen.stripe_data(), [])
        self.assertEqual(gen.calculate_traits().stripe_count, 0)

    def test_set_warp_before_generate_uses_default_seed(self):
        from doormat.generator import DEFAULT_SEED, DoormatGenerator

        gen = DoormatGenerator(_small_config())
        gen.set_warp_thickness(3)
        self.assertEqual(gen.state.seed, DEFAULT_SEED)
        self.assertEqual(gen.state.warp_thickness, 3)

    def test_image_orientation(self):
        from doormat.generator import DoormatGenerator

        config = _small_config()
        w, h = config.canvas_size
        gen = DoormatGenerator(config)
        gen.generate(4)
        self.assertEqual(gen.pixels.shape, (w, h, 3))
        flat = DoormatGenerator(_small_config(rotate=False))
        flat.generate(4)
        self.assertEqual(flat.pixels.shape, (h, w, 3))

    def test_traits_match_state(self):
        from doormat.generator import DoormatGenerator

        gen = DoormatGenerator(_small_config())
        state = gen.generate(8)
        traits = gen.calculate_traits()
        self.assertEqual(traits.stripe_count, len(state.stripes))
        self.assertEqual(traits.palette_name, state.palette.name)
        self.assertEqual(len(gen.stripe_data()), len(state.stripes))


class TestPipeline(unittest.TestCase):

    def _config(self, tmp):
        from doormat.config import _defaults

        cfg = _defaults()
        cfg["doormat"].update(width=100, height=140, fringe_length=8, warp_thickness=3)
        cfg["output"]["dir"] = tmp
        return cfg

    def test_generate_doormat_writes_png_and_json(self):
        from PIL import Image
        from doormat.pipeline import generate_doormat

        with tempfile.TemporaryDirectory() as tmp:
            path = generate_doormat(7, text_rows=["HI"], output_path=Path(tmp) / "mat", config=self._config(tmp))
            self.assertEqual(path.suffix, ".png")
            self.assertTrue(path.exists())
            with Image.open(path) as img:
                self.assertEqual(img.size, (140 + 32, 100 + 32))
            meta = json.loads(path.with_suffix(".json").read_text(encoding="utf-8"))
        self.assertEqual(meta["seed"], 7)
        self.assertEqual(meta["textRows"], ["HI"])
        self.assertEqual(meta["traits"]["textLines"], 1)
        self.assertEqual(len(meta["stripeData"]), meta["traits"]["stripeCount"])

    def test_reused_generator_drops_previous_text(self):
        from doormat.config import render_config_from_dict
        from doormat.generator import DoormatGenerator
        from doormat.pipeline import generate_doormat

        with tempfile.TemporaryDirectory() as tmp:
            cfg = self._config(tmp)
            gen = DoormatGenerator(render_config_from_dict(cfg))
            generate_doormat(1, text_rows=["HI"], config=cfg, generator=gen)
            path = generate_doormat(2, config=cfg, generator=gen)
            meta = json.loads(path.with_suffix(".json").read_text(encoding="utf-8"))
        self.assertEqual(gen.state.text_rows, [])
        self.assertEqual(meta["textRows"], [])
        self.assertEqual(meta["traits"]["textLines"], 0)

    def test_batch_names_files_by_seed(self):
        from doormat.pipeline import generate_batch

        with tempfile.TemporaryDirectory() as tmp:
            paths = generate_batch([1, 2], config=self._config(tmp))
            self.assertEqual([p.name for p in paths], ["doormat_1.png", "doormat_2.png"])
            for p in paths:
                self.assertTrue(p.exists())
                self.assertTrue(p.with_suffix(".json").exists())


if __name__ == "__main__":
    unittest.main()
