from __future__ import annotations

from .models import RecommendationRequest

# Ordered oldest/weakest first; the first rule with a matching substring wins.
# "4060 vs 1060" therefore scores as a 1060.
GPU_NAME_RULES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("1050", "rx 570"), 40),
    (("1060", "1660", "rx 580"), 55),
    (("2060", "2070", "rx 5600"), 75),
    (("3060", "6700"), 90),
    (("3070", "6800"), 110),
    (("4060",), 100),
    (("4070",), 145),
)

# (minimum VRAM in GB, score), checked top to bottom.
VRAM_TIERS: tuple[tuple[float, float], ...] = (
    (12, 100),
    (8, 70),
    (6, 55),
)
VRAM_FLOOR_SCORE = 35


def _score_from_vram(vram_gb: float | None) -> float:
    vram = vram_gb or 0.0
    for min_vram, score in VRAM_TIERS:
        if vram >= min_vram:
            return score
    return VRAM_FLOOR_SCORE


def _score_from_name(name: str) -> float | None:
    for patterns, score in GPU_NAME_RULES:
        if any(p in name for p in patterns):
            return score
    return None


def estimate_current_perf(request: RecommendationRequest) -> float:
    """
    Estimate the baseline performance score of the user's installed GPU.

    Recognised model numbers in the free-text name take priority; an empty
    or unrecognised name falls back to a VRAM-tier heuristic.
    """
    name = (request.current_gpu or "").lower()
    if name:
        score = _score_from_name(name)
        if score is not None:
            return score
    return _score_from_vram(request.vram_gb)
