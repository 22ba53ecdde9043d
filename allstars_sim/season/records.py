"""
Season Record Data Structures.

Immutable snapshots published by each stage of a season. Stages only
read the records of earlier stages, never their working state.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
import json

import polars as pl


@dataclass(frozen=True)
class PeerAward:
    """One point a non-winning competitor grants to another competitor."""
    giver: str
    recipient: str
    
    def to_dict(self) -> Dict[str, str]:
        return {"from": self.giver, "to": self.recipient}


@dataclass(frozen=True)
class EpisodeDetail:
    """Trace of how an episode's points were assigned."""
    winners: Tuple[str, str]
    lip_sync_winner: str
    peer_awards: Tuple[PeerAward, ...]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "winners": list(self.winners),
            "lip_sync_winner": self.lip_sync_winner,
            "peer_awards": [award.to_dict() for award in self.peer_awards],
        }


@dataclass(frozen=True)
class EpisodeOutcome:
    """Point deltas and trace from a single simulated episode."""
    points: Mapping[str, int]
    detail: EpisodeDetail
    
    @property
    def total_points(self) -> int:
        return sum(self.points.values())


@dataclass(frozen=True)
class EpisodeRecord:
    """An episode placed within its bracket and the season."""
    bracket: int                 # 1-based bracket index
    episode_in_bracket: int      # 1..episodes per bracket
    episode_number: int          # global sequence number, 1-based
    competitors: Tuple[str, ...]
    points: Mapping[str, int]
    detail: EpisodeDetail
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "bracket": self.bracket,
            "episode_in_bracket": self.episode_in_bracket,
            "episode_number": self.episode_number,
            "competitors": list(self.competitors),
            "points": dict(self.points),
            "detail": self.detail.to_dict(),
        }


@dataclass(frozen=True)
class Standing:
    """A competitor's cumulative points within a bracket."""
    name: str
    points: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "points": self.points}


@dataclass(frozen=True)
class BracketResult:
    """Final state of one bracket after all of its episodes."""
    bracket: int
    competitors: Tuple[str, ...]
    points: Mapping[str, int]
    standings: Tuple[Standing, ...]
    episodes: Tuple[EpisodeRecord, ...]
    
    def top(self, count: int) -> Tuple[str, ...]:
        """Names of the leading ``count`` standings."""
        return tuple(standing.name for standing in self.standings[:count])
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "bracket": self.bracket,
            "competitors": list(self.competitors),
            "points": dict(self.points),
            "standings": [standing.to_dict() for standing in self.standings],
            "episodes": [episode.to_dict() for episode in self.episodes],
        }


@dataclass(frozen=True)
class FinalePairing:
    """A finale contest, or a bye when ``opponent`` is None."""
    competitor: str
    opponent: Optional[str]
    winner: str
    
    @property
    def is_bye(self) -> bool:
        return self.opponent is None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "a": self.competitor,
            "b": self.opponent,
            "winner": self.winner,
            "bye": self.is_bye,
        }


@dataclass(frozen=True)
class SeasonMeta:
    """Audit metadata. Nothing downstream reads it."""
    format: str
    generated_at: str
    bracket_count: int
    bracket_size: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "generated_at": self.generated_at,
            "bracket_count": self.bracket_count,
            "bracket_size": self.bracket_size,
        }


@dataclass(frozen=True)
class SeasonResult:
    """
    Complete history of a simulated season.
    
    Serializes to a plain tree of dicts/lists via ``to_dict`` and to
    polars frames for analysis.
    """
    meta: SeasonMeta
    brackets: Tuple[BracketResult, ...]
    episodes: Tuple[EpisodeRecord, ...]
    top_pool: Tuple[str, ...]
    semifinal_eliminations: Tuple[str, ...]
    finalists: Tuple[str, ...]
    finale_rounds: Tuple[Tuple[FinalePairing, ...], ...]
    champion: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "brackets": [bracket.to_dict() for bracket in self.brackets],
            "episodes": [episode.to_dict() for episode in self.episodes],
            "top_pool": list(self.top_pool),
            "semifinal_eliminations": list(self.semifinal_eliminations),
            "finalists": list(self.finalists),
            "finale_rounds": [
                [pairing.to_dict() for pairing in round_pairings]
                for round_pairings in self.finale_rounds
            ],
            "champion": self.champion,
        }
    
    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
    
    def episodes_frame(self) -> pl.DataFrame:
        """One row per (episode, competitor) with the points earned."""
        rows = [
            {
                "episode_number": episode.episode_number,
                "bracket": episode.bracket,
                "episode_in_bracket": episode.episode_in_bracket,
                "name": name,
                "points": episode.points[name],
                "challenge_winner": name in episode.detail.winners,
                "lip_sync_winner": name == episode.detail.lip_sync_winner,
            }
            for episode in self.episodes
            for name in episode.competitors
        ]
        return pl.DataFrame(rows)
    
    def standings_frame(self) -> pl.DataFrame:
        """Final bracket standings with 1-based rank."""
        rows = [
            {
                "bracket": bracket.bracket,
                "rank": rank,
                "name": standing.name,
                "points": standing.points,
                "top_pool": standing.name in self.top_pool,
            }
            for bracket in self.brackets
            for rank, standing in enumerate(bracket.standings, start=1)
        ]
        return pl.DataFrame(rows)
