"""
Package entry point.

Allows running the schedule commands without the console script:

    python -m careschedule --file schedule.json conflicts
"""

from careschedule.cli import main

if __name__ == "__main__":
    main()
