import io
import os
import random
import tempfile
import unittest
from contextlib import ExitStack, redirect_stderr
from pathlib import Path

from randomwriter.errors import EmptyTableError, FileUnreadableError
from randomwriter.markov_chain import learn_patterns, open_training_files, write_random_phrase


class TestOpenTrainingFiles(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name, text):
        path = self.tmp / name
        path.write_text(text, encoding='utf-8')
        return path

    def test_opens_in_order_and_closes_on_exit(self) -> None:
        paths = [self._write("one.txt", "abab"), self._write("two.txt", "cdcd")]
        with ExitStack() as stack:
            streams = open_training_files(stack, paths)
            table = learn_patterns(2, streams)
        self.assertEqual(list(table), ["ab", "ba", "cd", "dc"])
        self.assertTrue(all(s.closed for s in streams))

    def test_missing_file_fails_before_reading(self) -> None:
        good = self._write("good.txt", "abc")
        missing = self.tmp / "missing.txt"
        with self.assertRaises(FileUnreadableError) as caught:
            with ExitStack() as stack:
                open_training_files(stack, [good, missing])
        self.assertEqual(caught.exception.path, missing)
        self.assertIn("missing.txt", str(caught.exception))

    def test_encoding(self) -> None:
        path = self.tmp / "latin.txt"
        path.write_bytes("caf\xe9 caf\xe9".encode('latin-1'))
        with ExitStack() as stack:
            streams = open_training_files(stack, [path], encoding='latin-1')
            table = learn_patterns(3, streams)
        self.assertEqual(table["caf"], ["\xe9", "\xe9"])


class TestWriteRandomPhrase(unittest.TestCase):
    def test_writes_phrase_to_sink(self) -> None:
        sink = io.StringIO()
        phrase = write_random_phrase(2, 5, [io.StringIO("abcabcabc")], sink, rng=random.Random(0))
        self.assertEqual(sink.getvalue(), phrase)
        self.assertGreaterEqual(len(phrase), 5)
        self.assertLessEqual(set(phrase), set("abc"))

    def test_nothing_written_on_empty_table(self) -> None:
        sink = io.StringIO()
        with self.assertRaises(EmptyTableError):
            write_random_phrase(4, 5, [io.StringIO("ab"), io.StringIO("cd")], sink)
        self.assertEqual(sink.getvalue(), "")

    def test_progress_bar_does_not_touch_sink(self) -> None:
        sink = io.StringIO()
        with open(os.devnull, 'w') as devnull:
            with redirect_stderr(devnull):
                write_random_phrase(1, 3, [io.StringIO("aaaa")], sink, rng=random.Random(0), progress=True)
        self.assertEqual(sink.getvalue(), "aaaa")


if __name__ == '__main__':
    unittest.main()
