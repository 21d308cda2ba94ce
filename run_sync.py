"""Convenience shim to run the sync without installing the package."""

from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from research_hub_sync.runner import main as sync_main  # noqa: E402


if __name__ == "__main__":
    sys.exit(sync_main(sys.argv[1:]))
