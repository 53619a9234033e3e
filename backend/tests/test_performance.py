from __future__ import annotations

from backend.recommendations.factors import (
    cpu_bottleneck_factor,
    game_multiplier,
    parse_games,
    resolution_multiplier,
)
from backend.recommendations.models import RecommendationRequest, Resolution
from backend.recommendations.performance import estimate_current_perf


def _request(current_gpu: str = "GTX 1060", vram_gb: float | None = None) -> RecommendationRequest:
    return RecommendationRequest(
        form_factor="desktop",
        current_gpu=current_gpu,
        vram_gb=vram_gb,
        budget=600,
        resolution="1080p",
    )


# ── Current performance estimate ─────────────────────────────────────────


def test_known_gpu_names():
    expected = {
        "GTX 1050 Ti": 40,
        "Radeon RX 570": 40,
        "GTX 1060 6GB": 55,
        "GTX 1660 Super": 55,
        "RX 580": 55,
        "RTX 2060": 75,
        "RTX 2070 Super": 75,
        "RX 5600 XT": 75,
        "RTX 3060": 90,
        "RX 6700 XT": 90,
        "RTX 3070": 110,
        "RX 6800": 110,
        "RTX 4060": 100,
        "RTX 4070": 145,
    }
    for name, score in expected.items():
        assert estimate_current_perf(_request(name)) == score, name


def test_name_matching_is_case_insensitive():
    assert estimate_current_perf(_request("rtx 4070")) == 145
    assert estimate_current_perf(_request("RTX 4070")) == 145


def test_first_matching_rule_wins():
    # Both "4060" and "1060" appear; the older card's rule is checked first.
    assert estimate_current_perf(_request("4060 vs 1060")) == 55
    # "6800" is listed before "4070".
    assert estimate_current_perf(_request("RX 6800 or RTX 4070")) == 110


def test_unknown_name_falls_back_to_vram():
    assert estimate_current_perf(_request("Intel Arc A770", vram_gb=16)) == 100
    assert estimate_current_perf(_request("Intel Arc A750", vram_gb=8)) == 70
    assert estimate_current_perf(_request("GT 1030", vram_gb=2)) == 35


def test_unknown_name_without_vram_gets_floor_score():
    assert estimate_current_perf(_request("Mystery GPU")) == 35


def test_empty_name_uses_vram_tiers():
    cases = {16: 100, 12: 100, 11: 70, 8: 70, 6: 55, 4: 35, 0: 35}
    for vram, score in cases.items():
        req = RecommendationRequest.model_construct(current_gpu="", vram_gb=vram)
        assert estimate_current_perf(req) == score, vram


def test_empty_name_ignores_name_rules():
    req = RecommendationRequest.model_construct(current_gpu="", vram_gb=16)
    assert estimate_current_perf(req) == 100


# ── Resolution and CPU factors ───────────────────────────────────────────


def test_resolution_multiplier_covers_every_resolution():
    assert resolution_multiplier(Resolution.fhd) == 1.0
    assert resolution_multiplier(Resolution.qhd) == 0.8
    assert resolution_multiplier(Resolution.uhd) == 0.6
    for res in Resolution:
        assert resolution_multiplier(res) > 0


def test_resolution_multiplier_accepts_raw_value():
    assert resolution_multiplier("4K") == 0.6


def test_cpu_bottleneck_factor():
    assert cpu_bottleneck_factor(None) == 1.0
    assert cpu_bottleneck_factor(0) == 1.0
    assert cpu_bottleneck_factor(2) == 0.8
    assert cpu_bottleneck_factor(4) == 0.8
    assert cpu_bottleneck_factor(5) == 0.92
    assert cpu_bottleneck_factor(6) == 0.92
    assert cpu_bottleneck_factor(8) == 1.0
    assert cpu_bottleneck_factor(64) == 1.0


# ── Games ────────────────────────────────────────────────────────────────


def test_parse_games_splits_and_normalises():
    text = "Valorant; Fortnite\n\n , Cyberpunk 2077 ,"
    assert parse_games(text) == ["valorant", "fortnite", "cyberpunk 2077"]


def test_parse_games_empty():
    assert parse_games(None) == []
    assert parse_games("") == []
    assert parse_games(" ,; \n") == []


def test_game_multiplier_neutral_without_games():
    assert game_multiplier([]) == 1.0


def test_game_multiplier_takes_most_demanding_game():
    assert game_multiplier(["valorant"]) == 0.6
    assert game_multiplier(["valorant", "fortnite"]) == 0.7
    assert game_multiplier(["valorant", "cyberpunk 2077"]) == 1.1


def test_game_multiplier_unknown_game_weighs_one():
    assert game_multiplier(["minecraft"]) == 1.0
    assert game_multiplier(["valorant", "minecraft"]) == 1.0


def test_game_multiplier_matches_exact_titles_only():
    assert game_multiplier(["cyberpunk"]) == 1.0


def test_first_game_can_lower_the_neutral_multiplier():
    assert game_multiplier([]) == 1.0
    assert game_multiplier(["valorant"]) == 0.6


def test_game_multiplier_never_decreases_when_adding_games():
    games = ["valorant"]
    previous = game_multiplier(games)
    for title in ["fortnite", "call of duty", "minecraft", "cyberpunk 2077", "valorant"]:
        games.append(title)
        current = game_multiplier(games)
        assert current >= previous
        previous = current
