"""
Tests for the Color value type and its serialization.
"""

import re
import unittest

from colorvalue.models.color import Color, quantize


class TestSerialization(unittest.TestCase):
    """Tests for to_css and quantization."""

    def test_construction(self):
        self.assertEqual(Color(0, 0, 0, 0).to_css(), '#00000000')
        self.assertEqual(Color(1, 1, 1, 1).to_css(), '#ffffffff')
        self.assertEqual(Color(0.5, 0.75, 0.25, 0.0625).to_css(), '#80bf4010')
        self.assertEqual(Color(0.502, 0.753, 0.25, 0.0625).to_css(), '#80c04010')

    def test_out_of_range_clamps(self):
        self.assertEqual(Color(-1, -0.001, 1.0001, 2).to_css(), '#0000ffff')

    def test_format(self):
        pattern = re.compile(r'#[0-9a-f]{8}')
        for channels in [(0.1, 0.2, 0.3, 0.4), (-5, 5, 0.999, 0.001), (0.03, 0.5, 0.97, 1)]:
            with self.subTest(channels=channels):
                self.assertIsNotNone(pattern.fullmatch(Color(*channels).to_css()))

    def test_quantize(self):
        self.assertEqual(quantize(0), 0)
        self.assertEqual(quantize(1), 255)
        self.assertEqual(quantize(-0.2), 0)
        self.assertEqual(quantize(1.2), 255)
        self.assertEqual(quantize(0.5), 128)
        self.assertEqual(quantize(16 / 255), 16)
        self.assertEqual(quantize(float('inf')), 255)
        self.assertEqual(quantize(float('nan')), 0)

    def test_huge_components_serialize(self):
        self.assertEqual(Color.from_css('rgb(1e999,0,0)').to_css(), '#ff0000ff')

    def test_str_is_css(self):
        self.assertEqual(str(Color(1, 0, 0, 1)), '#ff0000ff')

    def test_to_bytes(self):
        self.assertEqual(Color.from_css('#fe01c912').to_bytes(), (254, 1, 201, 18))
        self.assertEqual(Color(2, -1, 0, 1).to_bytes(), (255, 0, 0, 255))


class TestValueSemantics(unittest.TestCase):
    """Tests for copying, equality and construction helpers."""

    def test_channels_are_not_clamped(self):
        color = Color(1.5, -0.5, 0.25, 2)
        self.assertEqual(color.rgba, (1.5, -0.5, 0.25, 2))

    def test_clone_is_independent(self):
        original = Color(0.1, 0.2, 0.3, 0.4)
        copy = original.clone()
        self.assertEqual(copy, original)
        self.assertIsNot(copy, original)
        copy.red = 0.9
        self.assertEqual(original.red, 0.1)

    def test_equality(self):
        self.assertEqual(Color(0.1, 0.2, 0.3, 0.4), Color(0.1, 0.2, 0.3, 0.4))
        self.assertNotEqual(Color(0.1, 0.2, 0.3, 0.4), Color(0.1, 0.2, 0.3, 0.5))
        self.assertNotEqual(Color(0, 0, 0, 0), (0, 0, 0, 0))

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Color(0, 0, 0, 0))

    def test_from_bytes(self):
        self.assertEqual(Color.from_bytes(255, 0, 128).to_css(), '#ff0080ff')
        self.assertEqual(Color.from_bytes(0, 0, 0, 0), Color(0, 0, 0, 0))

    def test_with_alpha(self):
        color = Color.from_css('#c3512f45')
        faded = color.with_alpha(0)
        self.assertEqual(faded.to_css(), '#c3512f00')
        self.assertEqual(color.to_css(), '#c3512f45')

    def test_copies_keep_subclass(self):
        class Swatch(Color):
            __slots__ = ()

        swatch = Swatch(0.1, 0.2, 0.3, 0.4)
        self.assertIs(type(swatch.clone()), Swatch)
        self.assertIs(type(swatch.with_alpha(1)), Swatch)
        self.assertIs(type(swatch.brightened(0.5)), Swatch)
        self.assertIs(type(Swatch.from_css('#fff')), Swatch)

    def test_is_achromatic(self):
        self.assertTrue(Color.from_css('#121212').is_achromatic)
        self.assertFalse(Color.from_css('#121213').is_achromatic)

    def test_repr(self):
        self.assertEqual(
            repr(Color(1, 0.5, 0, 1)),
            "Color(red=1, green=0.5, blue=0, alpha=1)"
        )


if __name__ == "__main__":
    unittest.main()
