"""
GPU recommendation engine.

Responsibilities:
- Hold the static GPU catalog and game-demand weights.
- Estimate the performance of the user's current GPU.
- Filter the catalog by budget and form factor.
- Rank candidates by cost per FPS point and return the best one.
"""
