"""
Tests for the command-line driver.

These run main() end to end and check what lands on stdout.
"""

import pytest

from src.config.settings import get_settings
from src.core.training.models import Running, Swimming, Walking
from src.core.training.report import get_labels
from src.main import build_sample_trainings, main


@pytest.fixture
def fresh_settings(monkeypatch):
    """Reset cached settings so each test sees its own environment."""
    monkeypatch.delenv("REPORT_LOCALE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


EXPECTED_ENGLISH = (
    "Training type: Swimming\n"
    "Duration: 90 min\n"
    "Distance: 2.76 km.\n"
    "Avg. speed: 0.17 km/h\n"
    "Calories burned: 323.00\n"
    "\n"
    "Training type: Walking\n"
    "Duration: 225 min\n"
    "Distance: 13.00 km.\n"
    "Avg. speed: 3.47 km/h\n"
    "Calories burned: 947.82\n"
    "\n"
    "Training type: Running\n"
    "Duration: 30 min\n"
    "Distance: 3.25 km.\n"
    "Avg. speed: 6.50 km/h\n"
    "Calories burned: 302.91\n"
    "\n"
)


class TestSampleTrainings:
    """Tests for the demo data."""

    def test_order_and_types(self):
        trainings = build_sample_trainings(get_labels("en"))

        assert [type(t) for t in trainings] == [Swimming, Walking, Running]

    def test_sample_values(self):
        swimming, walking, running = build_sample_trainings(get_labels("en"))

        assert swimming.training.repetitions == 2000
        assert (swimming.pool_length_m, swimming.lap_count) == (50, 5)
        assert swimming.training.duration.total_seconds() == 90 * 60
        assert walking.height_cm == 185
        assert walking.training.duration.total_seconds() == 225 * 60
        assert running.training.repetitions == 5000
        assert all(t.training.weight_kg == 85 for t in (swimming, walking, running))

    def test_names_follow_locale(self):
        trainings = build_sample_trainings(get_labels("ru"))

        assert [t.training.type_label for t in trainings] == ["Плавание", "Ходьба", "Бег"]


class TestMain:
    """Tests for the printed report."""

    def test_prints_english_reports(self, fresh_settings, capsys):
        main()

        assert capsys.readouterr().out == EXPECTED_ENGLISH

    def test_prints_russian_reports(self, fresh_settings, capsys):
        fresh_settings.setenv("REPORT_LOCALE", "ru")

        main()

        out = capsys.readouterr().out
        assert out.startswith("Тип тренировки: Плавание\nДлительность: 90 мин\n")
        assert "Потрачено ккал: 302.91\n" in out

    def test_bad_locale_falls_back_to_english(self, fresh_settings, capsys):
        fresh_settings.setenv("REPORT_LOCALE", "xx")

        main()

        assert capsys.readouterr().out == EXPECTED_ENGLISH

    def test_bad_log_level_keeps_valid_locale(self, fresh_settings, capsys):
        """Only the broken setting falls back; the report stays in Russian."""
        fresh_settings.setenv("REPORT_LOCALE", "ru")
        fresh_settings.setenv("LOG_LEVEL", "LOUD")

        main()

        assert capsys.readouterr().out.startswith("Тип тренировки: Плавание\n")
