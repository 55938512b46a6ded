import logging

import pytest

from simprep.builder import build_team_state, fit_players, team_pace
from simprep.collaborators import Collaborators, basketball_team_ovr
from simprep.context import LeagueContext
from simprep.requests import ExhibitionSide, RegularTeam

from tests.factories import PACE_ONLY, SEASON, make_player, make_season, make_team


class _RecordingOvr:
    def __init__(self):
        self.calls = []

    def __call__(self, players):
        self.calls.append([(p.pid, p.ovr, p.pos) for p in players])
        return 42.0


def _build(players, *, request=None, team=None, season=None, context=None, collaborators=None):
    request = request or RegularTeam(0)
    return build_team_state(
        request,
        team or make_team(request.tid),
        season or make_season(request.tid),
        players,
        weights=PACE_ONLY,
        player_stats={"gs": 0, "min": 0, "pts": 0},
        team_stats={"pts": 0, "opp_pts": 0},
        context=context or LeagueContext(season=SEASON, basketball=False),
        collaborators=collaborators or Collaborators(),
    )


def test_regular_roster_sorted_by_roster_order():
    players = [
        make_player(1, roster_order=3),
        make_player(2, roster_order=1),
        make_player(3, roster_order=2),
    ]

    state = _build(players)

    assert [p.id for p in state.player] == [2, 3, 1]


def test_exhibition_roster_keeps_selection_order():
    players = [
        make_player(1, roster_order=3),
        make_player(2, roster_order=1),
        make_player(3, roster_order=2),
    ]

    state = _build(players, request=ExhibitionSide(0), team=make_team(-1), season=make_season(-1))

    assert [p.id for p in state.player] == [1, 2, 3]


def test_team_ovr_only_sees_fit_players():
    ovr = _RecordingOvr()
    players = [
        make_player(1, ovr=70, pos="C"),
        make_player(2, ovr=80, injury_games=3),
        make_player(3, ovr=60, pos="PG"),
    ]

    state = _build(players, collaborators=Collaborators(team_ovr=ovr))

    assert state.ovr == 42.0
    assert ovr.calls == [[(1, 70, "C"), (3, 60, "PG")]]


def test_removing_injured_players_keeps_team_ovr():
    healthy = [make_player(pid, ovr=40 + pid * 3) for pid in range(1, 9)]
    injured = [make_player(20, ovr=90, injury_games=10), make_player(21, ovr=85, injury_games=1)]

    with_injured = _build(healthy + injured)
    without_injured = _build(healthy)

    assert with_injured.ovr == pytest.approx(without_injured.ovr)
    assert with_injured.ovr == pytest.approx(basketball_team_ovr(fit_players(healthy)))


def test_pace_uses_first_seven_players():
    players = [make_player(pid, pace=50) for pid in range(7)]
    players += [make_player(pid, pace=100) for pid in range(7, 10)]

    state = _build(players)

    assert state.pace == pytest.approx(0.5 * 15 + 100)


def test_pace_averages_short_rosters():
    state = _build([make_player(1, pace=20), make_player(2, pace=40)])

    assert state.pace == pytest.approx(0.3 * 15 + 100)


def test_pace_stays_in_design_range():
    slow = _build([make_player(pid, pace=0) for pid in range(8)])
    fast = _build([make_player(pid, pace=100) for pid in range(8)])

    assert slow.pace == pytest.approx(100)
    assert fast.pace == pytest.approx(115)


def test_exhibition_pace_is_scaled():
    players = [make_player(pid, pace=30 + pid * 5) for pid in range(9)]

    regular = _build(players)
    exhibition = _build(players, request=ExhibitionSide(1), team=make_team(-2), season=make_season(-2))

    assert exhibition.pace == pytest.approx(regular.pace * 1.15)


def test_empty_roster_falls_back_to_base_pace(caplog):
    with caplog.at_level(logging.WARNING, logger="simprep.builder.team"):
        state = _build([])

    assert state.pace == 100.0
    assert state.player == []
    assert "No players to average pace over" in caplog.text
    assert team_pace([], exhibition=True) == pytest.approx(115.0)


def test_team_record_and_accumulators():
    state = _build([make_player(1)], season=make_season(0, won=12, lost=8, tied=2, health_rank=4))

    assert (state.id, state.cid, state.did) == (0, 0, 0)
    assert (state.won, state.lost) == (12, 8)
    assert state.tied is None
    assert state.health_rank == 4
    assert state.stat == {"pts": 0, "opp_pts": 0, "pts_qtrs": [0]}
    assert state.synergy.to_dict() == {"off": 0.0, "def": 0.0, "reb": 0.0}
    assert state.composite_rating.to_dict() == {"pace": 0.0}
    assert state.depth is None


def test_tied_reported_when_league_tracks_ties():
    context = LeagueContext(season=SEASON, basketball=False, ties=True)

    state = _build([make_player(1)], season=make_season(0, tied=3), context=context)

    assert state.tied == 3


def test_depth_chart_built_from_processed_players():
    team = make_team(0, depth={"F": [3, 1, 99], "G": [2]})
    players = [make_player(1), make_player(2), make_player(3)]

    state = _build(players, team=team)

    assert {pos: [p.id for p in ps] for pos, ps in state.depth.items()} == {"F": [3, 1], "G": [2]}
    assert state.depth["G"][0] is state.player[1]


def test_user_team_keeps_play_time_modifier():
    players = [make_player(1, pt_modifier=0.75)]

    ai = _build(players)
    user = _build(players, context=LeagueContext(season=SEASON, basketball=False, user_tids=frozenset({0})))

    assert ai.player[0].pt_modifier == 1.0
    assert user.player[0].pt_modifier == 0.75


def test_team_identity_is_immutable():
    state = _build([make_player(1)])

    with pytest.raises(AttributeError):
        state.id = 5  # type: ignore[misc]
