import pygame
import pytest

from solong.cli import delta_for_key, main, run_window
from solong.game import Game
from solong.mapfile import parse_map

VALID_MAP = "11111\n1PCE1\n11111\n"


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_w, (0, -1)),
        (pygame.K_s, (0, 1)),
        (pygame.K_a, (-1, 0)),
        (pygame.K_d, (1, 0)),
        (pygame.K_q, None),
        (pygame.K_ESCAPE, None),
    ],
)
def test_delta_for_key(key, expected):
    assert delta_for_key(key) == expected


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage: solong <path/map_file.ber>" in capsys.readouterr().out


def test_main_with_two_maps_prints_usage(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_rejects_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Error: Map file must have .ber extension" in capsys.readouterr().out


def test_main_reports_map_errors(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1P01\n1111\n")
    assert main([str(path)]) == 1
    assert "Map Error: Exit Missing or more than one" in capsys.readouterr().out


def test_main_rejects_directory(tmp_path, capsys):
    folder = tmp_path / "maps.ber"
    folder.mkdir()
    assert main([str(folder)]) == 1
    assert "Error: expected a file, not a directory" in capsys.readouterr().out


def test_main_bonus_enemies_block_path(tmp_path, capsys):
    path = tmp_path / "enemy.ber"
    path.write_text("111111\n1PMCE1\n111111\n")
    assert main(["--bonus", str(path)]) == 1
    assert "Error: Map has unreachable collectibles or exit" in capsys.readouterr().out


def test_main_reports_missing_textures(tmp_path, capsys, headless):
    path = tmp_path / "ok.ber"
    path.write_text(VALID_MAP)
    empty = tmp_path / "textures"
    empty.mkdir()
    assert main([str(path), "--textures", str(empty)]) == 1
    assert "Error: Failed to load room textures" in capsys.readouterr().out


def test_main_textures_option_needs_value(capsys):
    assert main(["map.ber", "--textures"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_run_window_fails_without_textures(tmp_path, capsys, headless):
    game = Game(parse_map(VALID_MAP))
    assert run_window(game, tmp_path) == 1
    assert "Failed to load room textures" in capsys.readouterr().out