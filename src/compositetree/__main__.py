"""Run the composite tree demonstration: python -m compositetree."""

from compositetree.config import configure_logging
from compositetree.demo import run_demo


def main() -> int:
    configure_logging()
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
