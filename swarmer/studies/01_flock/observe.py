"""
Study 01: Flock Observation

Run: python -m swarmer.studies.01_flock.observe

Scatter a population across the arena and watch groups form,
align, and flow around the trees.
"""

import argparse
import logging
from typing import Optional

from swarmer.environments.arena import Arena, ArenaConfig, load_arena_config
from swarmer.observations.metrics import cohesion, min_separation, polarization, speed_range
from swarmer.observations.visualize import SwarmVisualizer

logger = logging.getLogger(__name__)


def run_study(
    config: Optional[ArenaConfig] = None,
    steps: int = 1000,
    animate: bool = True,
    save_path: Optional[str] = None,
    report_every: int = 100
) -> Arena:
    """
    Observe a flock.

    Watch:
    - Cohesion (distance to the flock centroid)
    - Polarization (do headings agree?)
    - Closest approach (does repulsion hold?)
    """
    print("=" * 50)
    print("Study 01: Flock Observation")
    print("=" * 50)

    arena = Arena(config)

    print(f"\nArena: {arena.config.width:.0f}x{arena.config.height:.0f}, "
          f"{len(arena.swarm)} swarmers, {len(arena.obstacles)} trees")
    print(f"Running {steps} steps (dt={arena.config.dt})...")

    polarization_history = []
    viz = SwarmVisualizer(arena) if animate else None

    try:
        for step in range(steps):
            arena.step()
            if viz is not None:
                viz.render()

            velocities = arena.get_velocities()
            polarization_history.append(polarization(velocities))

            if step % report_every == 0:
                positions = arena.get_positions()
                print(f"  Step {step}: cohesion={cohesion(positions):.2f}, "
                      f"polarization={polarization_history[-1]:.2f}")

        if viz is not None and save_path:
            viz.save_frame(save_path)
    finally:
        if viz is not None:
            viz.close()

    # Analysis
    positions = arena.get_positions()
    velocities = arena.get_velocities()
    slowest, fastest = speed_range(velocities)

    print("\n" + "=" * 50)
    print("Observations")
    print("=" * 50)

    if polarization_history:
        print(f"\nPolarization:")
        print(f"  Initial: {polarization_history[0]:.2f}")
        print(f"  Final: {polarization_history[-1]:.2f}")

    print(f"\nCohesion: {cohesion(positions):.2f}")
    print(f"Closest pair: {min_separation(positions):.2f}")
    print(f"Speed range: [{slowest:.2f}, {fastest:.2f}]")

    print("\n" + "=" * 50)
    print("Study complete. Where did the flock go?")
    print("=" * 50)

    return arena


def main():
    parser = argparse.ArgumentParser(description="Flock Study")
    parser.add_argument("--config", type=str, default=None, help="YAML arena config")
    parser.add_argument("--agents", type=int, default=None)
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--dt", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-obstacles", action="store_true")
    parser.add_argument("--no-animate", action="store_true")
    parser.add_argument("--save", type=str, default=None, help="Save last frame to PNG")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = load_arena_config(args.config) if args.config else ArenaConfig()
    if args.agents is not None:
        config.n_agents = args.agents
    if args.dt is not None:
        config.dt = args.dt
    if args.seed is not None:
        config.seed = args.seed
    if args.no_obstacles:
        config.obstacles = []

    logger.info(f"Starting flock study with {config.n_agents} swarmers")

    run_study(
        config=config,
        steps=args.steps,
        animate=not args.no_animate,
        save_path=args.save
    )


if __name__ == "__main__":
    main()
