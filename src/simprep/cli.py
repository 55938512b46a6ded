"""Command-line interface for inspecting simulation-ready team states."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from pathlib import Path

from simprep.config import default_config
from simprep.config_loader import CompositeProfile
from simprep.context import LeagueContext, Phase
from simprep.errors import SimPrepError
from simprep.loader import load_team_states
from simprep.persistence import LeagueSnapshot, MemoryLeagueStore

_LOG_LEVEL_ENV = "SIMPREP_LOG_LEVEL"


def _parse_phase(value: str) -> Phase:
    try:
        return Phase(int(value))
    except ValueError:
        pass
    try:
        return Phase[value.upper().replace("-", "_")]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown phase {value!r}") from None


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build simulation-ready team states from a league file")
    parser.add_argument("league", type=Path, help="Path to league snapshot JSON")
    parser.add_argument(
        "--teams",
        type=int,
        nargs="+",
        required=True,
        help="Team ids to load (use -1 -2 for the exhibition game)",
    )
    parser.add_argument("--sport", default="basketball", help="Sport whose defaults to use")
    parser.add_argument(
        "--phase",
        type=_parse_phase,
        default=Phase.REGULAR_SEASON,
        help="League phase, by name (e.g. playoffs) or number",
    )
    parser.add_argument("--weights", type=Path, default=None, help="Composite weight profile JSON")
    parser.add_argument("--save-weights", type=Path, default=None, help="Write the weights in use to JSON")
    parser.add_argument("--output", type=Path, default=None, help="Write team states JSON here instead of stdout")
    parser.add_argument(
        "--log-level",
        default=os.getenv(_LOG_LEVEL_ENV, "WARNING"),
        help="Logging level (default from SIMPREP_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.weights:
            config = CompositeProfile.load(args.weights).to_config(sport=args.sport)
        else:
            config = default_config(args.sport)
        if args.save_weights:
            CompositeProfile.from_config(config).save(args.save_weights)
            print(f"Saved composite weights to {args.save_weights}")

        snapshot = LeagueSnapshot.load(args.league)
        store = MemoryLeagueStore.from_snapshot(snapshot)
        context = LeagueContext(
            season=snapshot.season,
            phase=args.phase,
            user_tids=frozenset(snapshot.user_tids),
            basketball=args.sport.lower() == "basketball",
            ties=snapshot.ties,
            num_teams=max(len(snapshot.teams), 1),
        )
        states = asyncio.run(
            load_team_states(
                args.teams,
                store=store,
                config=config,
                context=context,
                exhibition=store,
            )
        )
    except (SimPrepError, KeyError, ValueError, OSError) as exc:
        print(f"error: {exc}")
        return 1

    payload = {str(tid): state.to_dict() for tid, state in states.items()}
    text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote {len(states)} team states to {args.output}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
