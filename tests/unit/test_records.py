"""
Unit tests for season record serialization and analysis frames.
"""
import json
from dataclasses import FrozenInstanceError

import polars as pl
import pytest

from allstars_sim.core import NumpyRandomSource
from allstars_sim.season import simulate_season
from allstars_sim.season.records import FinalePairing, PeerAward, Standing


@pytest.fixture
def season(queen_names):
    return simulate_season(queen_names, rng=NumpyRandomSource(2024))


def test_peer_award_serializes_as_from_to():
    assert PeerAward("Katya", "Trixie").to_dict() == {"from": "Katya", "to": "Trixie"}


def test_bye_serialization():
    assert FinalePairing("Shea", None, "Shea").to_dict() == {
        "a": "Shea", "b": None, "winner": "Shea", "bye": True,
    }


def test_records_are_frozen():
    standing = Standing("Raja", 12)
    with pytest.raises(FrozenInstanceError):
        standing.points = 20


def test_season_json_round_trips_through_json_module(season):
    payload = json.loads(season.to_json())
    
    assert payload["champion"] == season.champion
    assert len(payload["brackets"]) == 3
    assert len(payload["episodes"]) == 9
    assert payload["meta"]["format"] == "All Stars 10 (custom)"
    assert payload["meta"]["bracket_count"] == 3
    assert payload["episodes"][0]["detail"]["peer_awards"][0].keys() == {"from", "to"}


def test_generated_at_is_iso_utc(season):
    assert season.meta.generated_at.endswith("+00:00")


def test_episodes_frame(season, queen_names):
    frame = season.episodes_frame()
    
    assert frame.height == 9 * 6
    assert frame["points"].sum() == 81
    assert frame.filter(pl.col("lip_sync_winner")).height == 9
    assert frame.filter(pl.col("challenge_winner")).height == 18
    
    totals = frame.group_by("name").agg(pl.col("points").sum())
    for bracket in season.brackets:
        for name, points in bracket.points.items():
            assert totals.filter(pl.col("name") == name)["points"][0] == points


def test_standings_frame(season):
    frame = season.standings_frame()
    
    assert frame.height == 18
    assert frame.filter(pl.col("top_pool")).height == 9
    assert frame.filter(pl.col("rank") <= 3)["name"].to_list() == list(season.top_pool)
