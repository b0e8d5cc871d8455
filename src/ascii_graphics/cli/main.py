"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    try:
        from ascii_graphics.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Minimal CLI when typer is not installed."""
    args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help"):
        print("ascii-graphics - character grid drawing")
        print()
        print("Install CLI extras for full functionality:")
        print("  pip install ascii-graphics[cli]")
        print()
        print("Basic usage (library mode):")
        print("  python -c \"import ascii_graphics as ag; print(ag.create(5, 5).solid_border('*'))\"")
        return

    if args[0] == "shapes":
        from ascii_graphics.cli.app import build_shapes
        print(build_shapes(40, 20))
        return

    print(f"Unknown command: {args[0]}")
    print("Install CLI extras: pip install ascii-graphics[cli]")
    sys.exit(1)


if __name__ == "__main__":
    main()
