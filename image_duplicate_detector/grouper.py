"""
Pairwise duplicate grouping.

Every unordered pair of candidates is scored once (upper-triangular sweep
over the sorted candidates). Pairs scoring at or above the threshold are
added to the group that already holds one of them, or start a new group.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .config import MAX_THRESHOLD, MIN_THRESHOLD
from .scorer import compare_images

# progress(level, percent) with level "outer" or "inner"
ProgressCallback = Callable[[str, int], None]
Scorer = Callable[[Path, Path], Optional[float]]


def clamp_threshold(threshold: float) -> float:
    """Clamp a similarity threshold into the supported range."""
    return max(MIN_THRESHOLD, min(MAX_THRESHOLD, threshold))


def add_duplicate(groups: List[List[Path]], path1: Path, path2: Path) -> None:
    """
    Record a matching pair in the group list.

    The first group holding either path receives the other one. Two
    existing groups are never merged, even when the pair links them.
    """
    for group in groups:
        if path1 in group:
            if path2 not in group:
                group.append(path2)
            return
        if path2 in group:
            group.append(path1)
            return

    groups.append([path1, path2])


def find_duplicates(candidates: Iterable[Path], threshold: float,
                    scorer: Scorer = compare_images,
                    progress: Optional[ProgressCallback] = None) -> List[List[Path]]:
    """
    Find groups of duplicate images.

    Args:
        candidates: Image paths to compare
        threshold: Minimum score for a pair to count as duplicates (inclusive)
        scorer: Returns a score for a pair, or None when it is incomparable
        progress: Called with the percentage done of the outer and inner sweep

    Returns:
        List of duplicate groups in discovery order
    """
    threshold = clamp_threshold(threshold)
    paths = sorted(set(candidates))
    duplicates: List[List[Path]] = []

    def report(level: str, percent: int) -> None:
        if progress is not None:
            progress(level, percent)

    for i, path in enumerate(paths):
        report('outer', 100 * i // len(paths))
        remaining = paths[i + 1:]
        for j, compare in enumerate(remaining):
            report('inner', 100 * j // len(remaining))
            score = scorer(path, compare)
            # Incomparable pairs are skipped
            if score is not None and score >= threshold:
                add_duplicate(duplicates, path, compare)

    report('outer', 100)
    report('inner', 100)
    return duplicates
