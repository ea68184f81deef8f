from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional
import logging

from manuscript.domains.puzzle8 import State, validate_state

logger = logging.getLogger(__name__)

class InputFormatError(ValueError):
    """Raised for malformed puzzle input (bad token, wrong length, odd line count)."""

@dataclass
class Instance:
    index: int
    start: State
    goal: State
    depth: Optional[int] = None   # scramble depth, for generated instances
    seed: Optional[int] = None

def parse_state(text: str) -> State:
    """Parse "123;B46;758", "1 2 3 4 5 6 7 8 B" or "1 2 3 / B 4 6 / 7 5 8". "B" and "0" are the blank."""
    tokens = text.replace(";", "").replace("/", "").replace(" ", "").replace("\t", "").upper().replace("B", "0")
    if len(tokens) != 9 or not tokens.isdigit():
        raise InputFormatError(f"expected 9 tokens from 0-8/B, got {text!r}")
    try:
        return validate_state(int(ch) for ch in tokens)
    except ValueError as e:
        raise InputFormatError(f"{text!r} is not a permutation of 0-8") from e

def parse_instances(lines: Iterable[str]) -> List[Instance]:
    """
    Pair non-blank lines into (start, goal) instances.

    An odd number of non-blank lines rejects the whole batch. A pair with an
    unparseable line is skipped with a warning.
    """
    content = [ln.strip() for ln in lines if ln.strip()]
    if len(content) % 2 != 0:
        raise InputFormatError(
            f"input is incomplete: {len(content)} non-blank lines, expected start/goal pairs")
    out: List[Instance] = []
    for i in range(0, len(content), 2):
        try:
            start, goal = parse_state(content[i]), parse_state(content[i + 1])
        except InputFormatError as e:
            logger.warning(f"skipping instance {i // 2 + 1}: {e}")
            continue
        out.append(Instance(index=i // 2 + 1, start=start, goal=goal))
    return out

def load_instances(path: Path) -> List[Instance]:
    """Read instances from a text file. OSError propagates to the caller."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_instances(f)
