from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..affiliate.links import build_affiliate_urls
from .catalog import GPU_OPTIONS
from .factors import cpu_bottleneck_factor, game_multiplier, parse_games, resolution_multiplier
from .models import FormFactor, GpuOption, Recommendation, RecommendationRequest
from .performance import estimate_current_perf

logger = logging.getLogger(__name__)

NO_CANDIDATES_MESSAGE = "No GPUs found under your budget for this form factor."


@dataclass(frozen=True)
class ScoredCandidate:
    gpu: GpuOption
    effective_perf: float
    est_fps_gain_percent: float
    cost_per_fps_point: float  # math.inf when the upgrade gains nothing


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _eligible(gpu: GpuOption, request: RecommendationRequest) -> bool:
    if gpu.price > request.budget:
        return False
    return gpu.form_factor in (FormFactor.both, request.form_factor)


def _score_gpu(
    gpu: GpuOption,
    current_perf: float,
    res_mult: float,
    games_mult: float,
    cpu_factor: float,
) -> ScoredCandidate:
    effective_perf = gpu.perf_score * res_mult * games_mult * cpu_factor
    gain = max(effective_perf - current_perf, 0.0)
    gain_percent = (gain / current_perf) * 100 if current_perf > 0 else 0.0
    cost = gpu.price / gain_percent if gain_percent > 0 else math.inf
    return ScoredCandidate(
        gpu=gpu,
        effective_perf=effective_perf,
        est_fps_gain_percent=gain_percent,
        cost_per_fps_point=cost,
    )


def score_candidates(
    request: RecommendationRequest,
    catalog: tuple[GpuOption, ...] = GPU_OPTIONS,
) -> list[ScoredCandidate]:
    """
    Score every eligible GPU and rank by ascending cost per FPS point.

    A GPU is eligible when it fits the budget and the form factor. The sort
    is stable, so on exact ties the earlier catalog entry ranks first.
    Returns an empty list when nothing is eligible.
    """
    current_perf = estimate_current_perf(request)
    res_mult = resolution_multiplier(request.resolution)
    games_mult = game_multiplier(parse_games(request.games))
    cpu_factor = cpu_bottleneck_factor(request.cores)

    logger.debug(
        "Scoring request: current_perf=%s res=%s games=%s cpu=%s",
        current_perf, res_mult, games_mult, cpu_factor,
    )

    scored = [
        _score_gpu(gpu, current_perf, res_mult, games_mult, cpu_factor)
        for gpu in catalog
        if _eligible(gpu, request)
    ]
    scored.sort(key=lambda c: c.cost_per_fps_point)
    return scored


def recommend_gpu(
    request: RecommendationRequest,
    catalog: tuple[GpuOption, ...] = GPU_OPTIONS,
) -> Recommendation | None:
    """Return the most cost-efficient upgrade, or ``None`` when no GPU is eligible."""
    ranked = score_candidates(request, catalog)
    if not ranked:
        logger.info("No GPU candidates within budget=%s", request.budget)
        return None

    best = ranked[0]
    cost = best.cost_per_fps_point
    return Recommendation(
        name=best.gpu.name,
        price=best.gpu.price,
        est_fps_gain_percent=int(_round_half_up(best.est_fps_gain_percent)),
        cost_per_fps_point=_round_half_up(cost, 2) if math.isfinite(cost) else None,
        affiliate_urls=build_affiliate_urls(best.gpu.product_url),
    )
