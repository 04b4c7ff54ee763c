"""CLI modules for evaluating chain drives.

Note: avoid importing submodules at import-time. This keeps `python -m chaindrive.cli.<cmd>`
free of `runpy` warnings and avoids side effects from eager imports.
"""

from __future__ import annotations


def run_single_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `chaindrive.cli.run_single.main`."""

    from .run_single import main

    return main(argv)


def run_sweep_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `chaindrive.cli.run_sweep.main`."""

    from .run_sweep import main

    return main(argv)


__all__ = ["run_single_main", "run_sweep_main"]
