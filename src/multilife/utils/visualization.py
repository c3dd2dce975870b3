"""
Visualization tools for multi-species worlds
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.colors import BoundaryNorm, ListedColormap
from typing import Optional, Sequence, Tuple

from ..errors import InvalidValueError
from ..model import World
from .grid import world_to_array


def species_colormap(species_count: int) -> Tuple[ListedColormap, BoundaryNorm]:
    """
    Build a colormap for dense world grids: white for dead cells (-1),
    one qualitative color per species id.
    """
    base = plt.get_cmap('tab10' if species_count <= 10 else 'tab20')
    colors = ['white'] + [base(i % base.N) for i in range(species_count)]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm(np.arange(-1.5, species_count, 1.0), cmap.N)
    return cmap, norm


def _draw_world(ax, world: World, show_grid: bool):
    cmap, norm = species_colormap(world.species_count)
    image = ax.imshow(world_to_array(world), cmap=cmap, norm=norm, interpolation='nearest')

    if show_grid:
        side = world.size.cells
        ax.set_xticks(np.arange(-0.5, side, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, side, 1), minor=True)
        ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)

    ax.set_xticks([])
    ax.set_yticks([])
    return image


def visualize_world(world: World,
                    title: str = "Multi-species Life",
                    save_path: Optional[str] = None,
                    figsize: tuple = (8, 8),
                    show_grid: bool = True) -> None:
    """
    Visualize a single generation.

    Args:
        world: World to draw
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)
    _draw_world(ax, world, show_grid)
    ax.set_title(title, fontsize=16, pad=10)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def visualize_generations(generations: Sequence[World],
                          name: str = "World",
                          save_path: Optional[str] = None,
                          figsize: tuple = (16, 4),
                          num_frames_to_show: int = 8,
                          show_grid: bool = True) -> None:
    """
    Visualize evenly spaced frames of a generation history.

    Args:
        generations: Worlds in generation order
        name: Name used in the figure title
        save_path: Path to save figure
        figsize: Figure size
        num_frames_to_show: Maximum number of frames to display
        show_grid: Whether to show grid lines
    """
    if not generations:
        raise InvalidValueError("No generations to visualize")
    if num_frames_to_show <= 0:
        raise InvalidValueError(f"num_frames_to_show must be positive, got {num_frames_to_show}")
    num_frames = min(num_frames_to_show, len(generations))
    indices = np.linspace(0, len(generations) - 1, num_frames, dtype=int)

    fig, axes = plt.subplots(1, num_frames, figsize=figsize)
    axes = np.atleast_1d(axes)

    for ax, idx in zip(axes, indices):
        _draw_world(ax, generations[idx], show_grid)
        ax.set_title(f"gen={idx}", fontsize=12)

    fig.suptitle(f"{name} Evolution", fontsize=16)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved generations to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def create_animation(generations: Sequence[World],
                     name: str = "World",
                     save_path: Optional[str] = None,
                     fps: int = 10,
                     figsize: tuple = (8, 8),
                     show_grid: bool = True) -> None:
    """
    Create an animated GIF from a generation history.

    Args:
        generations: Worlds in generation order
        name: Name used in the frame title
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    if not generations:
        raise InvalidValueError("No generations to animate")
    fig, ax = plt.subplots(figsize=figsize)
    image = _draw_world(ax, generations[0], show_grid)
    title = ax.set_title(f"{name} - Generation 0", fontsize=16)
    frames = [world_to_array(world) for world in generations]

    def update(frame):
        image.set_array(frames[frame])
        title.set_text(f"{name} - Generation {frame}")
        return [image, title]

    anim = FuncAnimation(fig, update, frames=len(frames),
                         interval=1000 // fps, blit=False, repeat=True)

    if save_path:
        anim.save(save_path, writer=PillowWriter(fps=fps))
        print(f"Saved animation to {save_path}")
    else:
        plt.show()

    plt.close(fig)
