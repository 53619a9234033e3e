from __future__ import annotations

from types import MappingProxyType

from .models import FormFactor, GpuOption

# Lightweight GPU catalog; perf_score is a synthetic baseline, not a benchmark.
GPU_OPTIONS: tuple[GpuOption, ...] = (
    GpuOption(
        id="rtx-4060",
        name="NVIDIA GeForce RTX 4060",
        price=299,
        perf_score=100,
        form_factor=FormFactor.desktop,
        product_url="https://www.newegg.com/p/pl?d=rtx+4060",
    ),
    GpuOption(
        id="rtx-4070",
        name="NVIDIA GeForce RTX 4070",
        price=549,
        perf_score=145,
        form_factor=FormFactor.desktop,
        product_url="https://www.newegg.com/p/pl?d=rtx+4070",
    ),
    GpuOption(
        id="rx-7800-xt",
        name="AMD Radeon RX 7800 XT",
        price=499,
        perf_score=140,
        form_factor=FormFactor.desktop,
        product_url="https://www.newegg.com/p/pl?d=rx+7800+xt",
    ),
    GpuOption(
        id="laptop-rtx-4060",
        name="Laptop RTX 4060 (various OEMs)",
        price=1299,
        perf_score=110,
        form_factor=FormFactor.laptop,
        product_url="https://www.amazon.com/s?k=laptop+rtx+4060",
    ),
)

# Lowercase game title -> performance-demand multiplier.
GAME_WEIGHTS: MappingProxyType[str, float] = MappingProxyType({
    "cyberpunk 2077": 1.1,
    "valorant": 0.6,
    "fortnite": 0.7,
    "elderscrolls": 1.0,
    "call of duty": 0.95,
})
