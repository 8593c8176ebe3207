"""Allow running CollegeApp with ``python -m collegeapp``."""

from collegeapp.cli import main

if __name__ == "__main__":
    main()
