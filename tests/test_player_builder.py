import pytest

from simprep.builder import build_player_state
from simprep.context import LeagueContext, Phase
from simprep.models import Born, Injury, Player, PlayerRatings
from simprep.ratings import playoff_intensity

from tests.factories import PACE_ONLY, PLAYOFF_TABLE, SEASON, make_player, make_ratings


def _build(player, *, table=PACE_ONLY, context=None, user_team=False, stats=None):
    return build_player_state(
        player,
        weights=table,
        player_stats=stats if stats is not None else {"gs": 0, "min": 0, "pts": 0},
        context=context or LeagueContext(season=SEASON, basketball=False),
        user_team=user_team,
    )


def test_copies_identity_and_derives_age():
    player = make_player(7, pace=80, ovr=64, pos="PG", born=1999)

    state = _build(player)

    assert state.id == 7
    assert state.name == "First7 Last7"
    assert state.age == SEASON - 1999
    assert state.pos == "PG"
    assert state.value_no_pot == 65
    assert state.skills == ("3",)
    assert state.ovrs == {"PG": 64, "C": 59}
    assert state.composite_rating["pace"] == pytest.approx(0.8)
    assert not hasattr(state, "pid")


def test_uses_latest_rating_snapshot():
    player = Player(
        pid=1,
        tid=0,
        first_name="Old",
        last_name="Timer",
        born=Born(year=1990),
        ratings=[make_ratings(pace=20, pos="C"), make_ratings(pace=70, pos="PF")],
    )

    state = _build(player)

    assert state.pos == "PF"
    assert state.composite_rating["pace"] == pytest.approx(0.7)


def test_injured_flag_follows_injury_type():
    hurt = _build(make_player(1, injury_games=4))
    listed = _build(make_player(2, injury_games=0, injury_type="Sore Back"))
    healthy = _build(make_player(3))

    assert hurt.injured is True
    assert hurt.injury == Injury(type="Sprained Ankle", games_remaining=4)
    assert listed.injured is True
    assert healthy.injured is False


def test_ai_team_play_time_modifier_is_reset():
    player = make_player(1, pt_modifier=1.75)

    assert _build(player, user_team=False).pt_modifier == 1.0
    assert _build(player, user_team=True).pt_modifier == 1.75


def test_stat_accumulator_is_fresh_per_player():
    stats = {"gs": 0, "min": 0, "pts": 0}

    first = _build(make_player(1), stats=stats)
    second = _build(make_player(2), stats=stats)
    first.stat["pts"] += 12

    assert first.stat == {"gs": 0, "min": 0, "pts": 12, "court_time": 0, "bench_time": 0, "energy": 1}
    assert second.stat["pts"] == 0
    assert stats["pts"] == 0


def test_composite_keys_match_weight_table():
    state = _build(make_player(1), table=PLAYOFF_TABLE)

    assert set(state.composite_rating) == set(PLAYOFF_TABLE)


def test_regular_season_leaves_composites_alone():
    context = LeagueContext(season=SEASON, phase=Phase.REGULAR_SEASON, basketball=False)

    state = _build(make_player(1, pace=50, ovr=80), table=PLAYOFF_TABLE, context=context)

    assert state.composite_rating["pace"] == pytest.approx(0.5)
    assert state.composite_rating["turnovers"] == pytest.approx(0.5)


def test_playoffs_adjust_composites():
    context = LeagueContext(season=SEASON, phase=Phase.PLAYOFFS, basketball=False)

    state = _build(make_player(1, pace=50, ovr=80), table=PLAYOFF_TABLE, context=context)

    assert state.composite_rating["pace"] == pytest.approx(0.6)
    assert state.composite_rating["usage"] == pytest.approx(0.55)
    assert state.composite_rating["turnovers"] == pytest.approx(0.5 / 1.2)
    assert state.composite_rating["drawing_fouls"] == pytest.approx(0.425)


def test_basketball_usage_exponent_applies_after_playoff_adjustment():
    context = LeagueContext(season=SEASON, phase=Phase.PLAYOFFS, basketball=True)
    multiplier = playoff_intensity(62)

    state = _build(make_player(1, pace=40, ovr=62), table=PLAYOFF_TABLE, context=context)

    expected = (0.4 * (1 + (multiplier - 1) / 2)) ** 1.9
    assert state.composite_rating["usage"] == pytest.approx(expected)


def test_usage_exponent_only_for_basketball():
    player = make_player(1, pace=40)

    plain = _build(player, table=PLAYOFF_TABLE, context=LeagueContext(season=SEASON, basketball=False))
    basketball = _build(player, table=PLAYOFF_TABLE, context=LeagueContext(season=SEASON, basketball=True))

    assert plain.composite_rating["usage"] == pytest.approx(0.4)
    assert basketball.composite_rating["usage"] == pytest.approx(0.4**1.9)


def test_basketball_without_usage_composite_is_fine():
    state = _build(make_player(1, pace=40), context=LeagueContext(season=SEASON, basketball=True))

    assert dict(state.composite_rating) == {"pace": pytest.approx(0.4)}


def test_missing_rating_snapshot_is_rejected_by_model():
    with pytest.raises(ValueError):
        Player(pid=1, tid=0, first_name="No", last_name="Ratings", born=Born(year=2000), ratings=[])
