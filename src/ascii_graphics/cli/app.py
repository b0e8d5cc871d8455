"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from ascii_graphics.core.border import BorderStyle
from ascii_graphics.core.screen import Screen


def build_shapes(
    width: int,
    height: int,
    fill: str = '#',
    stroke: str = '*',
) -> Screen:
    """Compose the static sample drawing used by the ``shapes`` command."""
    screen = Screen(width, height)
    radius = max(1, min(width, height) // 4)
    (screen
        .border(BorderStyle.named("ascii"))
        .fill(fill)
        .stroke(stroke)
        .rect(width // 4, height // 2, width // 4, height // 3)
        .circle(width * 3 // 4, height // 2, radius)
        .line(1, height - 2, width - 2, 1)
        .text("ascii-graphics", 2, 0))
    return screen


def demo_update(frames: Optional[int] = None):
    """
    Build the update function for the ``demo`` animation.

    Draws a bordered screen with a circle bouncing across it, a
    diagonal line, and the frame counter. Stops after `frames` frames
    when given.
    """
    def update(screen: Screen, frame: int) -> bool:
        if frames is not None and frame >= frames:
            return False

        width, height = screen.width, screen.height
        radius = max(1, min(width, height) // 5)
        travel = max(1, width - 2 * radius - 2)
        step = frame % (2 * travel)
        cx = radius + 1 + (step if step < travel else 2 * travel - step)

        (screen
            .background(' ')
            .border(BorderStyle.symmetric('+', '-', '|'))
            .no_fill()
            .stroke('o')
            .circle(cx, height // 2, radius)
            .stroke('.')
            .line(1, height - 2, width - 2, 1)
            .text(f"frame {frame}", 2, height - 1))
        return True

    return update


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install ascii-graphics[cli]")

    app = typer.Typer(
        name="ascii-graphics",
        help="Draw shapes and text on a character grid in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Draw shapes and text on a character grid in the terminal."""
        _configure_logging(verbose)

    @app.command()
    def demo(
        fps: Annotated[int, typer.Option("--fps", help="Frames per second")] = 10,
        frames: Annotated[Optional[int], typer.Option("--frames", "-n", help="Stop after this many frames")] = None,
        width: Annotated[int, typer.Option("--width", "-w", help="Screen width")] = 40,
        height: Annotated[int, typer.Option("--height", help="Screen height")] = 20,
    ) -> None:
        """Run a small animation until interrupted."""
        from ascii_graphics.animation import Animation
        from ascii_graphics.render.terminal import TerminalRenderer

        if fps <= 0:
            console.print(f"[red]--fps must be positive, got {fps}[/]")
            raise typer.Exit(1)

        if width < 8 or height < 8:
            console.print("[red]The demo needs a screen of at least 8x8[/]")
            raise typer.Exit(1)

        screen = Screen(width, height)
        screen.set_update(demo_update(frames))
        renderer = TerminalRenderer()

        animation = Animation(fps, renderer=renderer)
        with renderer.terminal.hidden_cursor():
            try:
                animation.run(screen)
            except KeyboardInterrupt:
                pass
        console.print(f"[dim]{animation.frames} frames[/]")

    @app.command()
    def shapes(
        width: Annotated[int, typer.Option("--width", "-w", help="Screen width")] = 40,
        height: Annotated[int, typer.Option("--height", help="Screen height")] = 20,
        fill: Annotated[str, typer.Option("--fill", help="Fill character")] = '#',
        stroke: Annotated[str, typer.Option("--stroke", help="Stroke character")] = '*',
    ) -> None:
        """Print a sample composition of every shape."""
        try:
            screen = build_shapes(width, height, fill, stroke)
        except (ValueError, IndexError) as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        print(screen)

    @app.command()
    def show(
        path: Annotated[Path, typer.Argument(help="Text file to show")],
        border: Annotated[Optional[str], typer.Option("--border", "-b", help="Frame with a border: ascii, hash, dots, single, double")] = None,
    ) -> None:
        """Print a text file, optionally framed with a border."""
        from ascii_graphics.io.reader import loads

        if not path.exists():
            console.print(f"[red]No such file: {path}[/]")
            raise typer.Exit(1)

        try:
            content = loads(path.read_text(encoding="utf-8"))
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        if border is None:
            print(content)
            return

        framed = Screen(content.width + 2, content.height + 2)
        for y, row in enumerate(content.rows()):
            framed.text(row, 1, y + 1)
        try:
            if border in ("single", "double"):
                framed.box_border(border)
            else:
                framed.border(BorderStyle.named(border))
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        print(framed)

    @app.command()
    def image(
        path: Annotated[Path, typer.Argument(help="Image to convert")],
        width: Annotated[int, typer.Option("--width", "-w", help="Width in characters")] = 78,
        invert: Annotated[bool, typer.Option("--invert", help="Invert the ramp for light backgrounds")] = False,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to a text file instead of stdout")] = None,
    ) -> None:
        """Convert an image to characters."""
        from ascii_graphics.import_image import from_image

        try:
            screen = from_image(path, width=width, invert=invert)
        except ImportError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        except (OSError, ValueError) as e:
            console.print(f"[red]Cannot convert {path}: {e}[/]")
            raise typer.Exit(1)

        if output is None:
            print(screen)
        else:
            from ascii_graphics.io.writer import save
            save(screen, output)
            console.print(f"[green]Converted {path} → {output}[/]")

    return app
