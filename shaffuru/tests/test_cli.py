# shaffuru/tests/test_cli.py
import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from shaffuru.app.cli import main
from shaffuru.logic.scramble import generate


class TestCli(unittest.TestCase):
    def _run(self, argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            try:
                code = main(argv)
            except SystemExit as exc:
                code = exc.code
        return code, out.getvalue(), err.getvalue()

    def test_prints_seed_and_moves(self):
        code, out, _ = self._run(["--seed", "42", "--length", "25"])
        self.assertEqual(code, 0)
        self.assertEqual(out, generate(42, 25).render() + "\n")
        lines = out.splitlines()
        self.assertEqual(lines[0], "Seed: 42")
        self.assertEqual(len(lines[1].split()), 25)

    def test_default_length(self):
        code, out, _ = self._run(["-s", "7"])
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()[1].split()), 25)

    def test_zero_length_prints_only_seed(self):
        code, out, _ = self._run(["-s", "9", "-l", "0"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Seed: 9\n")

    def test_random_seed_when_missing(self):
        code, out, _ = self._run(["-l", "5"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("Seed: "))
        seed = int(out.splitlines()[0].split(": ")[1])
        self.assertEqual(out, generate(seed, 5).render() + "\n")

    def test_invalid_length_is_rejected(self):
        for bad in ["256", "abc", "-3", "1_0", "٢٥"]:
            with self.subTest(length=bad):
                code, out, err = self._run(["-s", "1", "--length=" + bad])
                self.assertEqual(code, 2)
                self.assertEqual(out, "")
                self.assertIn("length", err)

    def test_invalid_seed_is_rejected(self):
        for bad in ["nope", "4_2", "-1"]:
            with self.subTest(seed=bad):
                code, out, err = self._run(["--seed=" + bad])
                self.assertEqual(code, 2)
                self.assertEqual(out, "")
                self.assertIn("seed", err)


if __name__ == "__main__":
    unittest.main()
