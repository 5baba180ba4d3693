import unittest

from lineseries.style import BLACK, BLUE, DEFAULT_STYLE, RED, ShapeStyle, coerce_color, coerce_style


class ShapeStyleTests(unittest.TestCase):
    def test_default_is_black_stroke(self) -> None:
        self.assertEqual(DEFAULT_STYLE, ShapeStyle(color=BLACK, filled=False, stroke_width=1))

    def test_fill_and_stroke_variants(self) -> None:
        filled = ShapeStyle(color=BLUE).fill()
        self.assertTrue(filled.filled)
        self.assertFalse(filled.stroke().filled)
        self.assertEqual(filled.color, BLUE)

    def test_stroke_width(self) -> None:
        style = ShapeStyle(color=RED).with_stroke_width(3)
        self.assertEqual(style.stroke_width, 3)
        with self.assertRaisesRegex(ValueError, "stroke_width"):
            ShapeStyle(stroke_width=-1)

    def test_mix_scales_alpha(self) -> None:
        self.assertEqual(ShapeStyle(color=(10, 20, 30, 200)).mix(0.5).color, (10, 20, 30, 100))
        self.assertEqual(ShapeStyle(color=RED).mix(2.0).color, RED)

    def test_rgb_colors_get_opaque_alpha(self) -> None:
        self.assertEqual(coerce_color((1, 2, 3)), (1, 2, 3, 255))
        self.assertEqual(ShapeStyle(color=(1, 2, 3)).color, (1, 2, 3, 255))

    def test_invalid_colors_are_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "channels"):
            coerce_color((1, 2))
        with self.assertRaisesRegex(ValueError, "out of range"):
            coerce_color((0, 0, 256))

    def test_coerce_style(self) -> None:
        style = ShapeStyle(color=RED)
        self.assertIs(coerce_style(style), style)
        self.assertEqual(coerce_style((0, 0, 255)), ShapeStyle(color=BLUE))
        with self.assertRaises(TypeError):
            coerce_style("red")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
