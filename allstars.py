#!/usr/bin/env python
"""
All Stars Season Simulator - CLI with observability
"""
import sys
from pathlib import Path
import argparse
import time
import uuid

from allstars_sim.config import settings
from allstars_sim.exceptions import ConfigurationError, RosterError
from allstars_sim.utils.logging import setup_logging
from allstars_sim.utils.observability import initialize_observability, get_metrics, metrics_enabled, Logger

# Initialize observability
initialize_observability(settings.observability)

logger = Logger(__name__)
metrics = get_metrics()


def _option(value, default):
    return value if value is not None else default


def _resolve_layout(args):
    bracket_count = _option(args.bracket_count, settings.season.bracket_count)
    bracket_size = _option(args.bracket_size, settings.season.bracket_size)
    return bracket_count, bracket_size


def cmd_simulate(args):
    """Simulate one season and write its JSON record."""
    from allstars_sim.roster import load_roster
    from allstars_sim.core import NumpyRandomSource
    from allstars_sim.season import simulate_season
    
    queens = load_roster(Path(args.roster))
    bracket_count, bracket_size = _resolve_layout(args)
    seed = _option(args.seed, settings.season.seed)
    
    logger.log_event('simulate_command_started', queens=len(queens), seed=seed)
    
    start = time.perf_counter()
    result = simulate_season(
        queens,
        rng=NumpyRandomSource(seed),
        bracket_count=bracket_count,
        bracket_size=bracket_size,
    )
    if metrics_enabled():
        metrics.season_duration.observe(time.perf_counter() - start)
        metrics.seasons_simulated.labels(mode="single").inc()
    
    payload = result.to_json()
    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
        logger.log_event('season_saved', path=str(output), champion=result.champion)
    else:
        print(payload)


def cmd_odds(args):
    """Monte Carlo champion odds."""
    from allstars_sim.roster import load_roster
    from allstars_sim.season import simulate_champion_odds
    
    queens = load_roster(Path(args.roster))
    bracket_count, bracket_size = _resolve_layout(args)
    n_seasons = _option(args.seasons, settings.simulation.n_seasons)
    seed = _option(args.seed, settings.simulation.seed)
    record = metrics_enabled()
    
    logger.log_event('odds_command_started', queens=len(queens), n_seasons=n_seasons, seed=seed)
    
    try:
        odds = simulate_champion_odds(
            queens,
            n_seasons=n_seasons,
            seed=seed,
            bracket_count=bracket_count,
            bracket_size=bracket_size,
            metrics=metrics if record else None,
        )
    except Exception:
        if record:
            metrics.monte_carlo_runs.labels(status="failure").inc()
        raise
    if record:
        metrics.monte_carlo_runs.labels(status="success").inc()
    
    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        odds.write_csv(output)
        logger.log_event('odds_saved', path=str(output), rows=len(odds))
    else:
        print(odds)


def main():
    parser = argparse.ArgumentParser(description="All Stars Season Simulator")
    parser.add_argument("--log-file", help="Also write engine logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    simulate = subparsers.add_parser("simulate", help="Simulate one season")
    simulate.add_argument("--roster", "-r", required=True, help="Roster file (JSON list or one name per line)")
    simulate.add_argument("--seed", type=int)
    simulate.add_argument("--bracket-count", type=int)
    simulate.add_argument("--bracket-size", type=int)
    simulate.add_argument("--output", "-o", help="Save season JSON to file")
    simulate.set_defaults(func=cmd_simulate)
    
    odds = subparsers.add_parser("odds", help="Monte Carlo champion odds")
    odds.add_argument("--roster", "-r", required=True, help="Roster file (JSON list or one name per line)")
    odds.add_argument("--seasons", "-n", type=int)
    odds.add_argument("--seed", type=int)
    odds.add_argument("--bracket-count", type=int)
    odds.add_argument("--bracket-size", type=int)
    odds.add_argument("--output", "-o", help="Save odds table to CSV")
    odds.set_defaults(func=cmd_odds)
    
    args = parser.parse_args()
    
    setup_logging(
        level=settings.observability.log_level,
        log_file=Path(args.log_file) if args.log_file else None,
    )
    
    # Initialize correlation ID for this run
    run_logger = logger.with_correlation_id(str(uuid.uuid4()))
    run_logger.info('command_started', command=args.command)
    
    start_time = time.time()
    
    try:
        args.func(args)
    except (ConfigurationError, RosterError) as e:
        if metrics_enabled():
            metrics.configuration_errors.labels(error_type=type(e).__name__).inc()
        logger.log_error("command_rejected", error=str(e))
        sys.exit(2)
    except Exception as e:
        logger.log_error("command_failed", error=str(e), exc_info=True)
        sys.exit(1)
    finally:
        duration = time.time() - start_time
        logger.log_event('command_completed', duration_seconds=duration)

if __name__ == "__main__":
    main()
