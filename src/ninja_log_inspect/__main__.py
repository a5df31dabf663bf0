"""Module entrypoint.

Allows:
    python -m ninja_log_inspect path/to/.ninja_log
"""

from __future__ import annotations

from ninja_log_inspect.cli import main

if __name__ == "__main__":
    main()
