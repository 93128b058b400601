#!/usr/bin/env python3
"""
Toroidal Glider Demonstration Script

Runs a glider across a wrap-around grid using the generation core and
checks that it returns to its starting cells after 4 * grid_size steps.
"""

import sys
import os
import logging

import numpy as np

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from src.core.generation import Generation
from src.core.ruleset import RuleParams, apply_conway_ruleset, next_generation

GLIDER = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)


def run_glider_demo(grid_size=10, start_x=1, start_y=1, birth=None, survival=None, show=False):
    """Run a full glider lap around the torus and return metrics."""
    logger.info("=== TOROIDAL GLIDER DEMONSTRATION ===")
    logger.info(f"Grid size: {grid_size}x{grid_size}")

    pattern = np.zeros((grid_size, grid_size), dtype=bool)
    for py, px in np.argwhere(GLIDER):
        pattern[(start_y + py) % grid_size, (start_x + px) % grid_size] = True
    start = Generation.from_array(pattern)

    if birth is None and survival is None:
        ruleset = apply_conway_ruleset
    else:
        params = RuleParams(birth, survival)
        logger.info(f"Using {params}")
        ruleset = params.as_ruleset()

    steps = 4 * grid_size
    live_counts = [start.count_alive()]
    generation = start

    for step in range(steps):
        generation = next_generation(generation, ruleset)
        live_counts.append(generation.count_alive())

        if step % grid_size == 0 or step == steps - 1:
            logger.info(f"Step {step}: Live={live_counts[-1]}")
            if show:
                print(generation, end="\n\n")

    returned_home = generation == start
    logger.info(f"Final live cells: {live_counts[-1]}")
    logger.info(f"Returned to start: {'YES' if returned_home else 'NO'}")

    return {
        "grid_size": grid_size,
        "steps": steps,
        "live_count_history": live_counts,
        "returned_home": returned_home,
    }


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Toroidal Glider Demonstration")
    parser.add_argument("--grid-size", type=int, default=10, help="Grid size (square, >= 5)")
    parser.add_argument("--start-x", type=int, default=1, help="Glider start X position")
    parser.add_argument("--start-y", type=int, default=1, help="Glider start Y position")
    parser.add_argument("--birth", type=int, nargs="*", help="Birth neighbor counts (default 3)")
    parser.add_argument("--survival", type=int, nargs="*", help="Survival neighbor counts (default 2 3)")
    parser.add_argument("--show", action="store_true", help="Print the grid at each lap quarter")

    args = parser.parse_args()

    try:
        results = run_glider_demo(
            grid_size=args.grid_size,
            start_x=args.start_x,
            start_y=args.start_y,
            birth=args.birth,
            survival=args.survival,
            show=args.show
        )
    except ValueError as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)

    sys.exit(0 if results["returned_home"] else 1)
