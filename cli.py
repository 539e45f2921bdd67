"""March Madness Bracket Engine - CLI entry point.

Usage:
    python cli.py load-tournament [--interactive | --file tournament-2026.json]
    python cli.py show --picks picks.json
    python cli.py pick --picks picks.json --game top-left-r64-1 --team duke
    python cli.py validate --picks picks.json [--tie-breaker 145] [--site-config site.json | --sheet-id ID]
    python cli.py export --picks picks.json [--format order|csv] [--output path]
"""

import argparse
import os
import pickle
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from errors import BracketError

STATE_FILE = os.path.join(config.DATA_DIR, "state.pkl")


def save_state(state: dict):
    """Save intermediate state to disk."""
    os.makedirs(config.DATA_DIR, exist_ok=True)
    with open(STATE_FILE, "wb") as f:
        pickle.dump(state, f)


def load_state() -> dict:
    """Load intermediate state from disk."""
    if os.path.exists(STATE_FILE):
        with open(STATE_FILE, "rb") as f:
            return pickle.load(f)
    return {}


def _require_tournament():
    tournament = load_state().get("tournament")
    if not tournament:
        print("ERROR: No tournament loaded. Run 'python cli.py load-tournament' first.")
    return tournament


def _load_picks(path: str):
    from ingestion.picks_loader import load_picks
    if not path or not os.path.exists(path):
        return {}, None
    return load_picks(path)


# --- Commands ---

def cmd_load_tournament(args):
    """Load the 64-team field."""
    from engine.builder import check_tournament_data

    if args.file:
        from ingestion.tournament_loader import load_tournament_from_json
        tournament = load_tournament_from_json(args.file)
    else:
        from ingestion.tournament_loader import load_tournament_interactive, save_tournament_to_json
        tournament = load_tournament_interactive()
        save_tournament_to_json(tournament, os.path.join(config.DATA_DIR, "tournament.json"))

    check_tournament_data(tournament)

    state = load_state()
    state["tournament"] = tournament
    save_state(state)
    print(f"\nTournament loaded: {len(tournament.all_teams())} teams in {len(tournament.regions)} regions")
    return 0


def cmd_show(args):
    """Display the bracket with picks filled in."""
    tournament = _require_tournament()
    if not tournament:
        return 1

    from engine.builder import build_bracket
    from engine.propagator import propagate
    from output.printer import print_bracket

    picks, _ = _load_picks(args.picks)
    bracket = propagate(build_bracket(tournament), picks, tournament)
    print_bracket(bracket, picks, tournament)
    return 0


def cmd_pick(args):
    """Record one pick, clearing later picks the change invalidates."""
    tournament = _require_tournament()
    if not tournament:
        return 1

    from engine.builder import build_bracket
    from engine.propagator import apply_pick
    from ingestion.picks_loader import save_picks_to_json

    picks, tie_breaker = _load_picks(args.picks)
    bracket = build_bracket(tournament)
    if bracket.get_game(args.game) is None:
        print(f"ERROR: Unknown game id: {args.game}")
        return 1

    updated = apply_pick(bracket, picks, args.game, args.team)
    cleared = sorted(set(picks) - set(updated))
    if cleared:
        print(f"Cleared later picks: {', '.join(cleared)}")
    save_picks_to_json(updated, args.picks, tie_breaker)
    return 0


def cmd_validate(args):
    """Validate a bracket submission."""
    tournament = _require_tournament()
    if not tournament:
        return 1

    from engine.validator import validate_submission
    from output.printer import print_validation

    if args.site_config:
        from ingestion.site_config import load_site_config_from_json
        site_config = load_site_config_from_json(args.site_config)
    elif args.sheet_id:
        from ingestion.site_config import fetch_site_config
        site_config = fetch_site_config(args.sheet_id)
    else:
        from ingestion.site_config import FALLBACK_SITE_CONFIG
        site_config = FALLBACK_SITE_CONFIG

    picks, saved_tie_breaker = _load_picks(args.picks)
    tie_breaker = args.tie_breaker if args.tie_breaker is not None else saved_tie_breaker

    result = validate_submission(picks, tie_breaker, tournament, site_config)
    print_validation(result)
    return 0 if result.is_valid else 1


def cmd_export(args):
    """Export picks in fill-in order."""
    tournament = _require_tournament()
    if not tournament:
        return 1

    from engine.builder import build_bracket
    from engine.propagator import propagate

    picks, _ = _load_picks(args.picks)
    bracket = propagate(build_bracket(tournament), picks, tournament)

    if args.format == "order":
        from output.export import print_fill_in_order
        print_fill_in_order(bracket, picks, tournament)
    elif args.format == "csv":
        from output.export import export_picks_csv
        output_path = args.output or os.path.join(config.DATA_DIR, "bracket_picks.csv")
        export_picks_csv(bracket, picks, tournament, output_path)
    else:
        print(f"Unknown format: {args.format}")
        return 1
    return 0


# --- Main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="March Madness Bracket Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. python cli.py load-tournament --file tournament-2026.json   # Load the field
  2. python cli.py pick --picks picks.json --game top-left-r64-1 --team duke
  3. python cli.py show --picks picks.json                       # See the bracket so far
  4. python cli.py validate --picks picks.json --tie-breaker 145 # Check before submitting
  5. python cli.py export --picks picks.json --format csv        # Fill-in order export
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # load-tournament
    p_load = subparsers.add_parser("load-tournament", help="Load the 64-team field")
    p_load.add_argument("--file", help="JSON file with tournament data")
    p_load.add_argument("--interactive", action="store_true", help="Enter teams interactively")

    # show
    p_show = subparsers.add_parser("show", help="Display the bracket with picks filled in")
    p_show.add_argument("--picks", help="Picks file (.json or .csv)")

    # pick
    p_pick = subparsers.add_parser("pick", help="Record a winner for one game")
    p_pick.add_argument("--picks", required=True, help="Picks JSON file to update")
    p_pick.add_argument("--game", required=True, help="Game id, e.g. top-left-r64-1")
    p_pick.add_argument("--team", required=True, help="Winning team id")

    # validate
    p_val = subparsers.add_parser("validate", help="Validate a bracket submission")
    p_val.add_argument("--picks", required=True, help="Picks file (.json or .csv)")
    p_val.add_argument("--tie-breaker", help="Tie breaker value (overrides the one in the picks file)")
    p_val.add_argument("--site-config", help="Site config JSON file")
    p_val.add_argument("--sheet-id", help="Google Sheet id to fetch site config from")

    # export
    p_export = subparsers.add_parser("export", help="Export picks in fill-in order")
    p_export.add_argument("--picks", required=True, help="Picks file (.json or .csv)")
    p_export.add_argument("--format", choices=["order", "csv"], default="order")
    p_export.add_argument("--output", help="Output file path (for csv format)")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "load-tournament": cmd_load_tournament,
        "show": cmd_show,
        "pick": cmd_pick,
        "validate": cmd_validate,
        "export": cmd_export,
    }

    cmd_func = commands.get(args.command)
    if not cmd_func:
        parser.print_help()
        return 0

    try:
        return cmd_func(args)
    except BracketError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
