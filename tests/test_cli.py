import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from hiq_core import cli
from hiq_core.session import GameSession


def _run(argv, inputs=None):
    buf = io.StringIO()
    with redirect_stdout(buf):
        if inputs is None:
            cli.main(argv)
        else:
            with patch('builtins.input', side_effect=inputs):
                cli.main(argv)
    return buf.getvalue()


class TestCli(unittest.TestCase):
    def test_given_taps_in_either_format_when_parsed_then_coordinates(self):
        self.assertEqual(cli.parse_coord('3,1'), (3, 1))
        self.assertEqual(cli.parse_coord(' 3 1 '), (3, 1))
        self.assertEqual(cli.parse_coord('3, 1'), (3, 1))
        self.assertIsNone(cli.parse_coord('3'))
        self.assertIsNone(cli.parse_coord('a,b'))
        self.assertEqual(cli.parse_moves('3,1 2,3'), [(3, 1), (2, 3)])
        with self.assertRaises(ValueError):
            cli.parse_moves('3,1 nope')

    def test_given_list_flag_when_run_then_presets_with_counts(self):
        out = _run(['--list'])
        self.assertIn('Solitaire', out)
        self.assertIn('32 pegs', out)
        self.assertIn('Pyramid', out)
        self.assertEqual(len(out.strip().splitlines()), 8)

    def test_given_moves_flag_when_run_then_final_board_printed(self):
        out = _run(['--config', 'Cross', '--moves', '3,3'])
        self.assertIn('5/6 pegs', out)
        self.assertIn('peg 4, 4 jumped', out)

    def test_given_interactive_session_when_resolving_ambiguity_then_jump_made(self):
        out = _run(['--config', 'Cross'], inputs=['2,3', '2,5', 'quit'])
        self.assertIn('Choose a destination: 0,1 2,5 2,1', out)
        self.assertIn('you chose 3, 6', out)
        self.assertIn('5/6 pegs', out)

    def test_given_interactive_commands_when_entered_then_config_and_reset_applied(self):
        out = _run(['--config', 'Cross'], inputs=['config Plus', 'config Nope', 'x', 'reset', 'quit'])
        self.assertIn('Solitaire Checkers in Plus configuration', out)
        self.assertIn('Unknown configuration', out)
        self.assertIn('Could not parse', out)

    def test_given_winning_line_when_played_then_loop_ends_with_message(self):
        session = GameSession('Cross')
        session.board.clear()
        session.board.set_occupied(3, 1, True)
        session.board.set_occupied(3, 2, True)
        buf = io.StringIO()
        with redirect_stdout(buf), patch('builtins.input', side_effect=['3,1']):
            cli.play(session)
        self.assertIn("I'm a perfect winner!", buf.getvalue())

    def test_given_env_configuration_when_no_flag_then_used_as_default(self):
        with patch.dict(os.environ, {'HIQ_CONFIGURATION': 'Pyramid'}):
            out = _run(['--moves', ''])
        self.assertIn('16/16 pegs', out)


if __name__ == '__main__':
    unittest.main(verbosity=2)
