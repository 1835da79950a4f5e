#!/usr/bin/env python3
"""Start script for container deployments; PORT overrides the configured port."""

import os
import sys

src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if os.path.isdir(src_path) and src_path not in sys.path:
    sys.path.insert(0, src_path)

from summit_backend.main import resolve_port, run  # noqa: E402


if __name__ == "__main__":
    try:
        run(port=resolve_port(os.environ.get("PORT")))
    except KeyboardInterrupt:
        sys.exit(0)
