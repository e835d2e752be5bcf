"""Strategic Test Suite (STS) file parsing and result reporting."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_POINTS = 10


@dataclass
class EpdEntry:
    """One STS position: a full FEN and the points awarded per move."""

    fen: str
    scores: dict[str, int] = field(default_factory=dict)


@dataclass
class FileResult:
    """Score achieved on one STS file."""

    filename: str
    score: int
    max_score: int


def strip_check_suffix(san: str) -> str:
    """Remove trailing '+' and '#' from a SAN move."""
    return san.rstrip("+#")


def _parse_score(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else None


def parse_c0(c0: str) -> dict[str, int]:
    """Parse a c0 field such as "f5=10, Be5+=2" into move scores."""
    scores: dict[str, int] = {}
    for part in c0.split(","):
        item = part.lstrip(" ")
        if not item:
            continue
        eq = item.rfind("=")
        if eq <= 0:
            continue
        move_san = item[:eq].rstrip(" ")
        score = _parse_score(item[eq + 1 :].lstrip(" "))
        if score is None:
            continue
        scores[strip_check_suffix(move_san)] = score
    return scores


def parse_epd(line: str) -> EpdEntry | None:
    """Parse an STS EPD line; return None if it is empty or malformed."""
    fields = line.split()
    if len(fields) < 4:
        return None
    fen = " ".join(fields[:4]) + " 0 1"

    c0_pos = line.find('c0 "')
    if c0_pos < 0:
        return None
    start = c0_pos + 4
    end = line.find('"', start)
    if end < 0:
        return None

    scores = parse_c0(line[start:end])
    if not scores:
        return None
    return EpdEntry(fen=fen, scores=scores)


def best_expected(scores: dict[str, int]) -> str:
    """Return the highest-scoring move (first in sorted order on ties), or ""."""
    best_move = ""
    best_score = 0
    for move, score in sorted(scores.items()):
        if score > best_score:
            best_move, best_score = move, score
    return best_move


def find_sts_files(directory) -> list[Path]:
    """Return the existing STS1.epd .. STS15.epd files, sorted by path text."""
    base = Path(directory)
    found = [base / f"STS{i}.epd" for i in range(1, 16)]
    return sorted((p for p in found if p.exists()), key=str)


def append_results(path, results, search_time_ms, positions_per_file, timestamp=None) -> None:
    """Append one row of results to a markdown table, writing the header if new."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if timestamp is None:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    total_score = sum(r.score for r in results)
    total_max = sum(r.max_score for r in results)
    total_pct = 100.0 * total_score / total_max if total_max > 0 else 0.0

    is_new = not path.exists()
    with path.open("a", encoding="utf-8") as out:
        if is_new:
            out.write("# STS Benchmark Results\n\n")
            names = "".join(f" {r.filename} |" for r in results)
            out.write(f"| Date | Time (ms) | Positions |{names} Total | % |\n")
            dashes = "------|" * len(results)
            out.write(f"|------|-----------|-----------|{dashes}-------|---|\n")
        cells = "".join(f" {r.score}/{r.max_score} |" for r in results)
        out.write(
            f"| {timestamp} | {search_time_ms} | {positions_per_file} |{cells}"
            f" {total_score}/{total_max} | {total_pct:.1f}% |\n"
        )