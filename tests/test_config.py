"""Tests for configuration loading."""

import logging
from pathlib import Path

from questlog.config import DATA_DIR, Config, load_config
from questlog.core.tasks import SortMode


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.data_file == DATA_DIR / "tasks.json"
        assert config.sort_mode is SortMode.CREATED_TIME
        assert config.notifications_enabled is False

    def test_parses_values(self, tmp_path):
        path = tmp_path / "questlog.conf"
        path.write_text(
            "\n".join(
                [
                    "# Quest Log settings",
                    "",
                    'DATA_FILE = "~/quests/tasks.json"',
                    "LANGUAGE = zh",
                    "SORT_MODE = 'Due Date'",
                    "SOUND_ENABLED = off  # quiet please",
                    "MUSIC_ENABLED = no",
                    "NOTIFICATIONS_ENABLED = yes",
                    "SEED_DEMO_DATA = false",
                    "no equals sign here",
                    "UNKNOWN_KEY = whatever",
                ]
            )
        )
        config = load_config(path)

        assert config.data_file == Path.home() / "quests" / "tasks.json"
        assert config.language == "zh"
        assert config.sort_mode is SortMode.DUE_DATE
        assert config.sound_enabled is False
        assert config.music_enabled is False
        assert config.notifications_enabled is True
        assert config.seed_demo_data is False

    def test_sort_mode_by_name(self, tmp_path):
        path = tmp_path / "questlog.conf"
        path.write_text("sort_mode = task_name\n")
        assert load_config(path).sort_mode is SortMode.TASK_NAME

    def test_bad_values_keep_defaults(self, tmp_path, caplog):
        path = tmp_path / "questlog.conf"
        path.write_text("LANGUAGE = klingon\nSORT_MODE = priority\nSOUND_ENABLED = maybe\n")
        with caplog.at_level(logging.WARNING, logger="questlog.config"):
            config = load_config(path)

        assert config.language == "en"
        assert config.sort_mode is SortMode.CREATED_TIME
        assert config.sound_enabled is True
        assert "LANGUAGE" in caplog.text
        assert "SORT_MODE" in caplog.text
        assert "SOUND_ENABLED" in caplog.text
