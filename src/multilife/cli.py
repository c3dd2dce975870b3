"""
Command-line entry point: read an input document, evolve it, write the result.
"""
import argparse
import json
import sys
from pathlib import Path

from .errors import MultiLifeError
from .evaluation import find_period, species_population
from .evolution import SimulationConfig, run_simulation
from .io import DUPLICATE_POLICIES, read_simulation, write_world
from .rules import RULES, TIE_BREAKS, get_rule
from .utils.visualization import visualize_generations, visualize_world


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='multilife',
        description='Run a multi-species Game of Life simulation from an XML input file'
    )
    parser.add_argument('-i', '--input', type=str, default='input.xml',
                       help='Input file')
    parser.add_argument('-o', '--output', type=str, default='output.xml',
                       help='Output file')
    parser.add_argument('--rule', type=str, default='conway', choices=list(RULES),
                       help='Evolution rule')
    parser.add_argument('--wrap', action='store_true',
                       help='Use periodic boundaries instead of clipping at the grid edge')
    parser.add_argument('--tie-break', type=str, default='lowest', choices=list(TIE_BREAKS),
                       help='How to choose between species with equal neighbour counts')
    parser.add_argument('--duplicates', type=str, default='last', choices=list(DUPLICATE_POLICIES),
                       help='How to resolve two organisms at the same position')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for random tie-breaks and duplicate resolution')
    parser.add_argument('--iterations', type=int, default=None,
                       help='Override the number of iterations given in the input file')
    parser.add_argument('--figures', type=str, default=None,
                       help='Directory to save initial/final state figures')
    parser.add_argument('--summary', type=str, default=None,
                       help='Path of a JSON run summary')
    parser.add_argument('--progress', action='store_true',
                       help='Show a progress bar')
    return parser


def save_summary(path: Path, args, generations) -> None:
    final = generations[-1]
    summary = {
        'input': args.input,
        'rule': args.rule,
        'wrap': args.wrap,
        'size': final.size.cells,
        'species': final.species_count,
        'iterations': len(generations) - 1,
        'initial_population': species_population(generations[0]),
        'final_population': species_population(final),
        'period': find_period(generations),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(summary, f, indent=2)


def save_figures(output_dir: Path, generations) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    visualize_world(generations[0], title="Generation 0",
                    save_path=output_dir / "initial.png")
    visualize_world(generations[-1], title=f"Generation {len(generations) - 1}",
                    save_path=output_dir / "final.png")
    visualize_generations(generations, name="Simulation",
                          save_path=output_dir / "generations.png")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config, world = read_simulation(args.input, duplicates=args.duplicates, seed=args.seed)
        if args.iterations is not None:
            config = SimulationConfig(config.size, args.iterations)
        rule = get_rule(args.rule, wrap=args.wrap, tie_break=args.tie_break, seed=args.seed)
        generations = run_simulation(config, world, rule, progress=args.progress)
        write_world(args.output, generations)
    except MultiLifeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    final = generations[-1]
    print("=" * 60)
    print(f"Rule: {rule}")
    print(f"Grid: {final.size.cells}x{final.size.cells}, species: {final.species_count}")
    print(f"Generations: {len(generations) - 1}")
    print(f"Population: {world.population()} -> {final.population()}")
    print(f"Result written to: {args.output}")

    if args.summary:
        save_summary(Path(args.summary), args, generations)
        print(f"Summary written to: {args.summary}")
    if args.figures:
        save_figures(Path(args.figures), generations)
    print("=" * 60)
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
