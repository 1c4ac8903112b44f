import json
import tempfile
import unittest
from pathlib import Path

from ludo_chat.exceptions import InvalidBoardVariantError
from ludo_chat.variants import BoardVariants


class TestBundledVariants(unittest.TestCase):
    def setUp(self):
        self.variants = BoardVariants()

    def test_names_sorted(self):
        names = self.variants.names()
        self.assertIn("fortress", names)
        self.assertIn("open_field", names)
        self.assertEqual(names, sorted(names))

    def test_load_fortress(self):
        board = self.variants.load("fortress")
        self.assertEqual(board.name, "fortress")
        self.assertEqual(len(board.safe_cells()), 12)
        self.assertTrue(board.is_safe(4))
        self.assertEqual(board.cells[13].type, "start")

    def test_load_is_cached(self):
        self.assertIs(self.variants.load("open_field"), self.variants.load("open_field"))

    def test_unknown_name(self):
        with self.assertRaises(InvalidBoardVariantError):
            self.variants.load("no_such_board")


class TestVariantDirectory(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.variants = BoardVariants(self.dir)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, payload):
        (self.dir / f"{name}.json").write_text(payload, encoding="utf-8")

    def test_short_board_rejected(self):
        cells = [{"position": i, "type": "normal", "safe": False} for i in range(40)]
        self.write("short", json.dumps(cells))
        self.assertEqual(self.variants.names(), [])
        with self.assertRaises(InvalidBoardVariantError):
            self.variants.load("short")

    def test_bad_json_rejected(self):
        self.write("broken", "[{")
        with self.assertRaises(InvalidBoardVariantError):
            self.variants.load("broken")

    def test_non_utf8_file_rejected(self):
        (self.dir / "garbled.json").write_bytes(b"\xff\xfe[")
        with self.assertRaises(InvalidBoardVariantError):
            self.variants.load("garbled")

    def test_names_skip_malformed_files(self):
        cells = [{"position": i, "type": "normal", "safe": i % 13 == 0} for i in range(52)]
        self.write("ring", json.dumps(cells))
        self.write("broken", "[{")
        self.write("short", json.dumps(cells[:10]))
        self.assertEqual(self.variants.names(), ["ring"])
        self.assertEqual(self.variants.load("ring").safe_cells(), [0, 13, 26, 39])

    def test_other_files_ignored(self):
        (self.dir / "notes.txt").write_text("hi", encoding="utf-8")
        self.assertEqual(self.variants.names(), [])

    def test_missing_directory(self):
        variants = BoardVariants(self.dir / "missing")
        self.assertEqual(variants.names(), [])


if __name__ == "__main__":
    unittest.main()
