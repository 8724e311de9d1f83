import tempfile
import unittest
from pathlib import Path
from stringext import presets

class TestPunctuationPreset(unittest.TestCase):
    def test_sentence(self):
        result = presets.punctuation_preset('sentence')
        self.assertEqual(result, frozenset('.!?'))

    def test_none(self):
        result = presets.punctuation_preset('none')
        self.assertEqual(result, frozenset())

    def test_closing_contains_brackets_and_quotes(self):
        result = presets.punctuation_preset('closing')
        for char in ')]}\'"”»':
            with self.subTest(char=char):
                self.assertIn(char, result)

    def test_unknown_preset_raises(self):
        with self.assertRaises(KeyError) as context:
            presets.punctuation_preset('semicolons')
        self.assertIn('sentence', str(context.exception))

class TestPunctuationPresets(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write_yaml(self, text: str) -> Path:
        file_path = self.tmp_path / 'punctuation.yaml'
        file_path.write_text(text, encoding='utf-8')
        return file_path

    def test_packaged_names(self):
        result = presets.PunctuationPresets().names
        self.assertEqual(result, ['abbreviation', 'closing', 'code', 'none', 'sentence'])

    def test_load_from_file(self):
        file_path = self.write_yaml("presets:\n  colon: ':'\n")
        table = presets.PunctuationPresets(file_path)
        self.assertIn('colon', table)
        self.assertEqual(table['colon'], frozenset(':'))

    def test_missing_presets_key(self):
        file_path = self.write_yaml("other: 1\n")
        table = presets.PunctuationPresets(file_path)
        self.assertEqual(table.names, [])

    def test_non_string_preset_raises(self):
        file_path = self.write_yaml("presets:\n  broken: [1, 2]\n")
        table = presets.PunctuationPresets(file_path)
        with self.assertRaises(ValueError):
            table.data

    def test_top_level_list_raises(self):
        file_path = self.write_yaml("- sentence\n- closing\n")
        table = presets.PunctuationPresets(file_path)
        with self.assertRaises(ValueError):
            table.data

    def test_presets_list_raises(self):
        file_path = self.write_yaml("presets:\n  - '.'\n")
        table = presets.PunctuationPresets(file_path)
        with self.assertRaises(ValueError):
            table.data

    def test_load_is_logged(self):
        file_path = self.write_yaml("presets:\n  colon: ':'\n")
        with self.assertLogs('stringext.presets', level='DEBUG') as logs:
            presets.PunctuationPresets(file_path).data
        self.assertTrue(any('Loaded 1 punctuation presets' in line for line in logs.output))
