from unittest import TestCase, mock

from pydantic import ValidationError

from letterboxed.config import SolverConfig


class SolverConfigTest(TestCase):

    def test_defaults(self):
        config = SolverConfig(_env_file=None)
        self.assertEqual(6, config.max_depth)
        self.assertEqual(4, config.max_solutions)
        self.assertEqual(3, config.early_return_depth)
        self.assertEqual(100_000, config.report_interval)

    def test_report_interval_must_be_positive(self):
        for value in (0, -5):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    SolverConfig(_env_file=None, report_interval=value)

    def test_report_interval_from_environment(self):
        with mock.patch.dict("os.environ", {"REPORT_INTERVAL": "0"}):
            with self.assertRaises(ValidationError):
                SolverConfig(_env_file=None)
