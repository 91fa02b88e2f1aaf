"""Module entrypoint for ``python -m gridls``.

All argument parsing and listing happen in ``gridls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
