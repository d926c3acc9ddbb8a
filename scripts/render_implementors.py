#!/usr/bin/env python3
"""Load implementor tables and hand them to a consumer, as described by a session YAML.

Example session::

    pending_policy: queue
    consumer:
      consumer_type: json
      output_dir: out
    doc_root: ../target/doc
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on the path so `implementors` can be imported
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Import packages to ensure all registry decorators are executed
import implementors.loaders  # noqa: F401
import implementors.consumers  # noqa: F401

from implementors.session import ImplementorSession, SessionConfig
from implementors.utils.logging_utils import configure_logging


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print(f"Usage: {Path(__file__).name} SESSION_YAML")
        return 1

    cfg = SessionConfig.from_yaml(Path(argv[0]))
    configure_logging(cfg.log_level)

    session = ImplementorSession(cfg)
    try:
        session.run()
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
