import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from conlang import cmdline, teletype
from conlang.reader import ConlangReader

class ReplTests(unittest.TestCase):

	def test_one_line_out_per_value(self):
		out = io.StringIO()
		cmdline.repl(ConlangReader(["asdf", "x:1 x:2 x:3.", ",1,2", "-5", "q"]), out)
		self.assertEqual([
			'"asdf"',
			"(1.0 . [2.0, 3.0])",
			"[1.0, 2.0]",
			"-5.0",
			'"q"',
		], out.getvalue().splitlines())

	def test_nothing_printed_for_leftover_line(self):
		out = io.StringIO()
		cmdline.repl(ConlangReader(["a", "b c", "d"]), out)
		self.assertEqual('"a"\n', out.getvalue())

class TeletypeTests(unittest.TestCase):

	def test_terminal_lines_end_at_eof(self):
		with mock.patch("builtins.input", side_effect=["one", "two", EOFError]) as fake:
			self.assertEqual(["one", "two"], list(teletype.terminal_lines()))
		fake.assert_called_with(teletype.PROMPT)

	def test_stream_lines_drop_newlines(self):
		self.assertEqual(["a", "b", "c"], list(teletype.stream_lines(io.StringIO("a\nb\nc"))))

class RunTests(unittest.TestCase):

	def _run(self, text, *flags):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder) / "phrases.txt"
			path.write_text(text, encoding="utf-8")
			with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
				with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
					status = cmdline.main([*flags, str(path)])
		return status, out.getvalue(), err.getvalue()

	def test_whole_file(self):
		status, out, err = self._run("asdf\n123e4\nx:1.5x:2\n")
		self.assertEqual(0, status)
		self.assertEqual(['"asdf"', "1230000.0", "(1.5 . 2.0)"], out.splitlines())
		self.assertEqual("", err)

	def test_leftover_ends_quietly(self):
		status, out, err = self._run("a\nb c\nd\n")
		self.assertEqual(0, status)
		self.assertEqual('"a"\n', out)
		self.assertEqual("", err)

	def test_leftover_explained_when_verbose(self):
		status, out, err = self._run("a\nb c\nd\n", "-v")
		self.assertEqual(0, status)
		self.assertEqual('"a"\n', out)
		self.assertIn("There was more on line 2", err)

	def test_end_of_input_mentioned_when_verbose(self):
		status, out, err = self._run("a\n", "--verbose")
		self.assertEqual(0, status)
		self.assertIn("End of input after 1 line(s).", err)

	def test_missing_file_is_reported(self):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder) / "absent.txt"
			with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
				with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
					status = cmdline.main([str(path)])
		self.assertEqual(1, status)
		self.assertEqual("", out.getvalue())
		self.assertIn("I see no file called", err.getvalue())
		self.assertIn("absent.txt", err.getvalue())

	def test_unparseable_line_is_fatal(self):
		status, out, err = self._run("a\n\nd\n")
		self.assertEqual(cmdline.FATAL, status)
		self.assertEqual('"a"\n', out)
		self.assertIn("Line 2 is not anything I know how to read.", err)


if __name__ == '__main__':
	unittest.main()
