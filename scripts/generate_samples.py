"""
Generate one multi-species sample per pattern for visualization and review
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / "src"))

from multilife.evolution import SimulationConfig, run_simulation
from multilife.model import GridSize, World
from multilife.utils.grid import place_pattern
from multilife.utils.patterns import PATTERN_CATEGORIES, get_pattern
from multilife.utils.visualization import (
    visualize_world,
    visualize_generations,
    create_animation,
)

NUM_SPECIES = 3


def build_sample(pattern_name, grid_size):
    """Place the pattern twice, left copy species 0, right copy species 1."""
    pattern = get_pattern(pattern_name)
    ph, pw = pattern.shape
    top = (grid_size - ph) // 2
    left = place_pattern(grid_size, pattern, species=0, position=(grid_size // 4 - pw // 2, top))
    right = place_pattern(grid_size, pattern, species=1, position=(3 * grid_size // 4 - pw // 2, top))
    return World(GridSize(grid_size), NUM_SPECIES, left + right)


def main():
    """Generate and visualize one sample per pattern."""

    project_root = Path(__file__).parent.parent
    output_dir = project_root / "figures" / "samples"
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Generating samples for each pattern...")
    print("=" * 60)

    for category_name, patterns in PATTERN_CATEGORIES.items():
        print(f"\nCategory: {category_name}")
        print("-" * 60)

        for pattern_name in patterns:
            print(f"  Processing {pattern_name}...")

            if pattern_name == 'glider_gun':
                grid_size, num_steps = 90, 120
            elif pattern_name == 'pulsar':
                grid_size, num_steps = 40, 30
            else:
                grid_size, num_steps = 24, 40

            world = build_sample(pattern_name, grid_size)
            generations = run_simulation(SimulationConfig(grid_size, num_steps), world, progress=True)

            visualize_world(
                world,
                title=f"{pattern_name.upper()} (gen 0)",
                save_path=output_dir / f"{pattern_name}_initial.png",
            )
            visualize_generations(
                generations,
                name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_generations.png",
                figsize=(18, 5) if pattern_name == 'glider_gun' else (16, 4),
            )
            create_animation(
                generations,
                name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_animation.gif",
                fps=10,
            )
            print(f"    Population: {world.population()} -> {generations[-1].population()}")

    print("\n" + "=" * 60)
    print(f"All samples saved to: {output_dir.absolute()}")
    print("=" * 60)


if __name__ == "__main__":
    main()
