import logging
from datetime import datetime, timezone

import pytest

from golfstats.config import reset_settings_cache
from golfstats.rounds.models import HoleRecord, RoundRecord
from golfstats.schemas.player_stats import PlayerStats
from golfstats.services.player_stats import (
    RoundFilter,
    build_dashboard,
    compute_player_stats,
    filter_rounds,
    parse_round_filter,
)


def _dt(month: int, day: int = 1) -> datetime:
    return datetime(2024, month, day, tzinfo=timezone.utc)


def _hole(number: int, par: int, score: int, putts: int, fairway=None) -> HoleRecord:
    return HoleRecord(
        hole_number=number, par=par, score=score, putts=putts, fairway_hit=fairway
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("GOLFSTATS_RECENT_ROUNDS", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def rounds() -> list[RoundRecord]:
    return [
        RoundRecord(
            id=1,
            course_name="Pine Valley",
            date_played=_dt(4),
            score=90,
            putts=34,
            gir_putts=10,
            greens_in_regulation=6,
            fairways_in_regulation=7,
            up_and_downs=3,
            up_and_down_attempts=8,
            course_rating=72.0,
            slope_rating=113,
            handicap_differential=18.0,
            hole_by_hole=[
                _hole(1, 4, 4, 2, True),
                _hole(2, 3, 4, 2),
                _hole(3, 5, 7, 3, False),
            ],
        ),
        RoundRecord(
            id=2,
            course_name="Augusta",
            date_played=_dt(5),
            score=80,
            putts=30,
            gir_putts=12,
            greens_in_regulation=9,
            up_and_downs=2,
            handicap_differential=8.0,
            hole_by_hole=[
                _hole(1, 4, 3, 1, True),
                _hole(2, 4, 0, 0),
                _hole(3, 4, 5, 2, True),
            ],
        ),
        RoundRecord(
            id=3,
            course_name="Pine Valley",
            date_played=_dt(6),
            score=44,
            holes=9,
            fairways_in_regulation=4,
        ),
    ]


def test_parse_round_filter() -> None:
    assert parse_round_filter(None) is RoundFilter.ALLTIME
    assert parse_round_filter("last10") is RoundFilter.LAST10
    assert parse_round_filter(" Course ") is RoundFilter.COURSE
    assert parse_round_filter(RoundFilter.DATERANGE) is RoundFilter.DATERANGE


def test_unknown_filter_falls_back_with_warning(
    rounds, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        selected = filter_rounds(rounds, "bogus")

    assert [r.id for r in selected] == [3, 2, 1]
    assert any("Unknown round filter" in msg for msg in caplog.messages)


def test_filter_last_n_orders_most_recent_first() -> None:
    many = [
        RoundRecord(id=i, date_played=_dt(1, i), score=80 + i) for i in range(1, 8)
    ]

    selected = filter_rounds(many, "last5")

    assert [r.id for r in selected] == [7, 6, 5, 4, 3]
    assert len(filter_rounds(many, RoundFilter.LAST20)) == 7


def test_filter_by_course(rounds) -> None:
    selected = filter_rounds(rounds, "course", course_name="Pine Valley")
    assert [r.id for r in selected] == [3, 1]

    # no course name means no course restriction
    assert len(filter_rounds(rounds, "course")) == 3


def test_filter_by_date_range_is_inclusive(rounds) -> None:
    selected = filter_rounds(
        rounds, "daterange", start_date=_dt(4, 15), end_date=_dt(6)
    )
    assert [r.id for r in selected] == [3, 2]

    assert len(filter_rounds(rounds, "daterange", start_date=_dt(5))) == 3


def test_filter_by_date_range_accepts_naive_bounds() -> None:
    played = [
        RoundRecord(id=1, date_played="2024-05-01T10:00:00Z", score=80),
        RoundRecord(id=2, date_played="2024-07-01T10:00:00Z", score=84),
        RoundRecord(id=3, date_played=datetime(2024, 5, 20), score=88),
    ]

    selected = filter_rounds(
        played,
        "daterange",
        start_date=datetime(2024, 4, 1),
        end_date=datetime(2024, 6, 1),
    )

    assert [r.id for r in selected] == [3, 1]


def test_compute_player_stats_empty() -> None:
    assert compute_player_stats([]) == PlayerStats()


def test_compute_player_stats(rounds) -> None:
    stats = compute_player_stats(rounds)

    assert stats.total_rounds == 3
    assert stats.avg_score == pytest.approx(71.3)
    assert stats.avg_putts == pytest.approx(32.0)
    assert stats.avg_putts_per_gir == pytest.approx(11.0)

    assert stats.total_gir == 2
    assert stats.total_gir_opportunities == 6
    assert stats.gir_percentage == pytest.approx(33.3)

    assert stats.total_fir == 3
    assert stats.total_fir_opportunities == 4
    assert stats.fir_percentage == pytest.approx(75.0)


def test_compute_player_stats_streaks_run_oldest_first(rounds) -> None:
    stats = compute_player_stats(rounds)

    assert stats.fir_streak == 2
    assert stats.no_three_putt_streak == 3
    assert stats.no_double_bogey_streak == 2


def test_player_stats_serialise_with_aliases(rounds) -> None:
    payload = compute_player_stats(rounds).model_dump(by_alias=True)

    assert payload["totalRounds"] == 3
    assert payload["no3PuttStreak"] == 3
    assert payload["avgPuttsPerGIR"] == pytest.approx(11.0)


def test_build_dashboard(rounds) -> None:
    dashboard = build_dashboard(rounds, stored_handicap_index=12.3)

    assert dashboard.handicap_index == 12.3
    assert dashboard.calculated_handicap_index == 6.0
    assert dashboard.number_of_differentials_used == 1
    assert dashboard.total_rounds == 3
    assert dashboard.rounds_with_differential == 2
    assert dashboard.average_score == pytest.approx(85.0)
    assert dashboard.greens_in_regulation_pct == pytest.approx(41.7)
    assert dashboard.fairways_in_regulation_pct == pytest.approx(52.4)
    assert dashboard.average_putts == pytest.approx(32.0)
    assert dashboard.up_and_down_pct == pytest.approx(37.5)
    assert [r.id for r in dashboard.recent_rounds] == [3, 2, 1]
    assert dashboard.recent_rounds[0].holes == 9


def test_build_dashboard_without_rounds() -> None:
    dashboard = build_dashboard([])

    assert dashboard.calculated_handicap_index is None
    assert dashboard.number_of_differentials_used == 8
    assert dashboard.total_rounds == 0
    assert dashboard.average_score is None
    assert dashboard.greens_in_regulation_pct is None
    assert dashboard.fairways_in_regulation_pct is None
    assert dashboard.average_putts is None
    assert dashboard.up_and_down_pct is None
    assert dashboard.recent_rounds == []


def test_build_dashboard_recent_rounds_limit(
    rounds, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GOLFSTATS_RECENT_ROUNDS", "2")
    reset_settings_cache()

    dashboard = build_dashboard(rounds)

    assert [r.id for r in dashboard.recent_rounds] == [3, 2]


def test_build_dashboard_logs_summary(rounds, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="golfstats.services.player_stats"):
        build_dashboard(rounds)

    records = [r for r in caplog.records if r.message == "Dashboard stats calculated"]
    assert len(records) == 1
    payload = records[0].dashboard
    assert payload["totalRounds"] == 3
    assert payload["hasHandicap"] is False
    assert payload["statsAvailable"] == {
        "gir": True,
        "fir": True,
        "putts": True,
        "upDown": True,
    }
