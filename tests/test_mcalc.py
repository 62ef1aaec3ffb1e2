import contextlib
import io
import unittest
from unittest import mock
import mcalc

def run_main(argv, stdin_lines=None):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        if stdin_lines is None:
            status = mcalc.main(argv)
        else:
            with mock.patch('builtins.input', side_effect=stdin_lines):
                status = mcalc.main(argv)
    return status, out.getvalue(), err.getvalue()

class TestMcalc(unittest.TestCase):
    def test_one_shot(self):
        status, out, err = run_main(['2^3^2', '1+2*3'])
        self.assertEqual(status, 0)
        self.assertEqual(out, '512.0\n7.0\n')
        self.assertEqual(err, '')

    def test_failure_reports_and_continues(self):
        status, out, err = run_main(['2+', '1+1'])
        self.assertEqual(status, 1)
        self.assertEqual(out, '2.0\n')
        self.assertIn('Expected a number', err)

    def test_tree_flag(self):
        status, out, _ = run_main(['-t', '1+2'])
        self.assertEqual(status, 0)
        self.assertEqual(out, '+\n\t1.0\n\t2.0\n3.0\n')

    def test_repl_until_empty_line(self):
        status, out, err = run_main([], ['1+1', '2 3', '2#5', '', '9'])
        self.assertEqual(status, 0)
        self.assertEqual(out, '2.0\n5.0\n')
        self.assertIn('Unexpected text', err)

    def test_repl_until_eof(self):
        status, out, _ = run_main([], ['(2+3)*2', EOFError()])
        self.assertEqual(status, 0)
        self.assertEqual(out, '10.0\n')

    def test_long_input(self):
        status, out, err = run_main(['+'.join(['1'] * 1200)])
        self.assertEqual(status, 0)
        self.assertEqual(out, '1200.0\n')
        self.assertEqual(err, '')

    def test_deep_nesting_reported(self):
        status, out, err = run_main(['(' * 5000 + '1' + ')' * 5000, '2^3^2'])
        self.assertEqual(status, 1)
        self.assertEqual(out, '512.0\n')
        self.assertIn('nested too deeply', err)
