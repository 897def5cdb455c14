"""Allow running clean-repo with ``python -m cleanrepo``."""

from cleanrepo.cli.main import run

run()
