import unittest
from stringext import padding

class TestFixedWidth(unittest.TestCase):
    def test_pads_short_string(self):
        result = padding.fixed_width('ab', 5)
        self.assertEqual(result, 'ab   ')

    def test_does_not_truncate(self):
        result = padding.fixed_width('abcdef', 3)
        self.assertEqual(result, 'abcdef')

    def test_exact_width(self):
        result = padding.fixed_width('abc', 3)
        self.assertEqual(result, 'abc')

    def test_none_returns_spaces(self):
        result = padding.fixed_width(None, 4)
        self.assertEqual(result, '    ')

    def test_empty_is_padded(self):
        result = padding.fixed_width('', 2)
        self.assertEqual(result, '  ')

    def test_zero_width(self):
        self.assertEqual(padding.fixed_width(None, 0), '')
        self.assertEqual(padding.fixed_width('ab', 0), 'ab')

    def test_negative_width_raises(self):
        with self.assertRaises(ValueError):
            padding.fixed_width('ab', -1)

class TestTakeFirstCharacters(unittest.TestCase):
    def test_truncates(self):
        result = padding.take_first_characters('Portland', 4)
        self.assertEqual(result, 'Port')

    def test_pads_with_spaces_by_default(self):
        result = padding.take_first_characters('ab', 4)
        self.assertEqual(result, 'ab  ')

    def test_pads_with_custom_character(self):
        result = padding.take_first_characters('ab', 5, '0')
        self.assertEqual(result, 'ab000')

    def test_exact_length(self):
        result = padding.take_first_characters('abcd', 4)
        self.assertEqual(result, 'abcd')

    def test_none_and_empty_return_padding(self):
        for source in (None, ''):
            with self.subTest(source=source):
                self.assertEqual(padding.take_first_characters(source, 3), '   ')
                self.assertEqual(padding.take_first_characters(source, 3, '*'), '***')
                self.assertEqual(padding.take_first_characters(source, 0, '*'), '')

    def test_zero_count(self):
        result = padding.take_first_characters('abc', 0)
        self.assertEqual(result, '')

    def test_negative_count_raises(self):
        with self.assertRaises(ValueError):
            padding.take_first_characters('abc', -2)

    def test_multi_character_padding_raises(self):
        with self.assertRaises(ValueError):
            padding.take_first_characters('abc', 5, '--')
        with self.assertRaises(ValueError):
            padding.take_first_characters('abc', 5, '')
