"""Move records, summaries and markdown reports for engine-versus-engine games."""

import enum
from dataclasses import dataclass, field
from typing import Iterable, Sequence

_MIN_ALLOCATION_MS = 50
_MATE_WINDOW = 200
_PV_SHOWN = 5
_DASH = "\u2014"


class Side(enum.Enum):
    """The colour that made a move."""

    WHITE = "white"
    BLACK = "black"


@dataclass
class MoveRecord:
    """One move played in a match, with search metrics for our own moves."""

    move_number: int = 0
    san: str = ""
    uci: str = ""
    side: Side = Side.WHITE
    depth_reached: int = 0
    score: int = 0
    nodes: int = 0
    time_ms: int = 0
    nps: int = 0
    pv: list[str] = field(default_factory=list)
    has_cchess_info: bool = False


@dataclass
class GameSummary:
    """Totals over the moves that carry search metrics."""

    total_nodes: int = 0
    total_depth: int = 0
    total_nps: int = 0
    cchess_moves: int = 0
    total_time_ms: int = 0

    @classmethod
    def from_log(cls, log: Iterable[MoveRecord]) -> "GameSummary":
        summary = cls()
        for rec in log:
            if rec.has_cchess_info:
                summary.total_nodes += rec.nodes
                summary.total_depth += rec.depth_reached
                summary.total_nps += rec.nps
                summary.total_time_ms += rec.time_ms
                summary.cchess_moves += 1
        return summary


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def format_score(score: int, mate_score: int) -> str:
    """Format a centipawn score as "+1.23", or a mate distance as "M3" / "-M3"."""
    if score >= mate_score - _MATE_WINDOW:
        mate_ply = mate_score - score
        return f"M{(mate_ply + 1) // 2}"
    if score <= -(mate_score - _MATE_WINDOW):
        mate_ply = mate_score + score
        return f"-M{(mate_ply + 1) // 2}"
    return f"{score / 100.0:+.2f}"


def compact_number(n: int) -> str:
    """Abbreviate a count with a k or M suffix."""
    if n >= 1_000_000:
        return f"{n / 1_000_000.0:.1f}M"
    if n >= 10_000:
        return f"{n // 1000}k"
    if n >= 1000:
        return f"{n / 1000.0:.1f}k"
    return str(n)


def comma_number(n: int) -> str:
    """Write a non-negative count with thousands separators."""
    if n < 0:
        raise ValueError("comma_number expects a non-negative count")
    return f"{n:,}"


def allocate_time(remaining_ms: int, inc_ms: int) -> int:
    """Milliseconds to spend on the next move, never less than 50."""
    allocated = _trunc_div(remaining_ms, 30) + inc_ms
    allocated = min(allocated, _trunc_div(remaining_ms, 3))
    return max(allocated, _MIN_ALLOCATION_MS)


def _move_row(rec: MoveRecord, mate_score: int) -> str:
    label = f"{rec.move_number}{'.' if rec.side is Side.WHITE else '...'}"
    if not rec.has_cchess_info:
        return (
            f"| {label} | {rec.san} | {_DASH} | {_DASH} | {_DASH} | "
            f"{rec.time_ms}ms | {_DASH} | {_DASH} |"
        )
    pv_text = " ".join(rec.pv[:_PV_SHOWN])
    return (
        f"| {label} | {rec.san} | {rec.depth_reached} | "
        f"{format_score(rec.score, mate_score)} | {compact_number(rec.nodes)} | "
        f"{rec.time_ms}ms | {compact_number(rec.nps)} | {pv_text} |"
    )


def render_game_report(
    opponent_name: str,
    time_ms: int,
    inc_ms: int,
    result: str,
    moves: Sequence[MoveRecord],
    tt_hit_rate: float,
    tt_cutoff_rate: float,
    tt_occupancy: float,
    date: str,
    mate_score: int,
) -> str:
    """Build the markdown report for a finished game."""
    lines = [
        f"# CChess vs {opponent_name}",
        f"**Date:** {date}",
        f"**Time Control:** {_trunc_div(time_ms, 1000)}+{_trunc_div(inc_ms, 1000)}",
        f"**Result:** {result}",
        "",
        "## Move Log",
        "",
        "| # | Move | Depth | Score | Nodes | Time | NPS | PV |",
        "|---|------|-------|-------|-------|------|-----|----|",
    ]
    lines.extend(_move_row(rec, mate_score) for rec in moves)

    summary = GameSummary.from_log(moves)
    lines += [
        "",
        "## Summary",
        "",
        "| Metric | Value |",
        "|--------|-------|",
        f"| Total Moves | {len(moves)} |",
    ]
    if summary.cchess_moves > 0:
        count = summary.cchess_moves
        lines += [
            f"| CChess Nodes (total) | {comma_number(summary.total_nodes)} |",
            f"| CChess Avg Depth | {summary.total_depth / count:.1f} |",
            f"| CChess Avg NPS | {comma_number(summary.total_nps // count)} |",
            f"| CChess Avg Time/Move | {summary.total_time_ms // count}ms |",
        ]
    lines += [
        f"| TT Hit Rate | {tt_hit_rate:.1f}% |",
        f"| TT Cutoff Rate | {tt_cutoff_rate:.1f}% |",
        f"| TT Occupancy | {tt_occupancy:.1f}% |",
    ]
    return "\n".join(lines) + "\n"