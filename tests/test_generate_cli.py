"""Tests for the dungeon-forge command line entry point."""

import json

from dungeon_forge.generate import build_parser, config_from_args, main


class TestArgs:
    def test_overrides_applied(self):
        args = build_parser().parse_args(['--seed', '7', '--max-rooms', '9', '--min-boss-depth', '2', '--random-seed'])
        config = config_from_args(args)
        assert config.seed == 7
        assert config.max_rooms == 9
        assert config.minimum_boss_depth == 2
        assert config.randomize_seed

    def test_flags_override_config_file(self, tmp_path):
        path = tmp_path / "dungeon.json"
        path.write_text(json.dumps({'max_rooms': 30, 'loop_chance': 0.0}))
        args = build_parser().parse_args(['--config', str(path), '--max-rooms', '12'])
        config = config_from_args(args)
        assert config.max_rooms == 12
        assert config.loop_chance == 0.0


class TestMain:
    def test_json_output(self, capsys):
        code = main(['--max-rooms', '10', '--min-boss-depth', '1', '--json'])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data['attempts'] == 1
        assert data['metrics']['num_rooms'] >= 10

    def test_text_output(self, capsys):
        code = main(['--seed', '3', '--max-rooms', '8', '--min-boss-depth', '1'])
        out = capsys.readouterr().out
        assert code == 0
        assert "Seed: 3" in out
        assert "S" in out

    def test_exhausted_returns_one(self, capsys):
        assert main(['--max-rooms', '1', '--max-attempts', '2', '--report']) == 1
        assert "Total attempts: 2" in capsys.readouterr().out

    def test_bad_config_returns_two(self):
        assert main(['--max-rooms', '0']) == 2

    def test_missing_config_file_returns_two(self, tmp_path):
        assert main(['--config', str(tmp_path / 'absent.json')]) == 2

    def test_malformed_config_file_returns_two(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('{not json')
        assert main(['--config', str(path)]) == 2
