"""Allow running the solver with `python -m letterboxed`."""

from letterboxed import main

main()
