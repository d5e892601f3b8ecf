# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the time_capsule script runner.

Usage:
    python -m time_capsule.runner < script.json > output.json

Exit codes:
    0: Every call succeeded
    1: A call failed or the script could not be run (details in JSON output)
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from .executor import Executor
from .schema import ScriptInput, ScriptOutput


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        # Logs go to stderr so stdout stays pure JSON
        logging.basicConfig(
            stream=sys.stderr,
            level=os.getenv("TIME_CAPSULE_LOG_LEVEL", "WARNING").upper(),
            format="%(levelname)s %(name)s: %(message)s",
        )

        script = ScriptInput.model_validate_json(sys.stdin.read())
        output = asyncio.run(Executor().execute(script))
        print(output.model_dump_json())
        return 0 if output.success else 1

    except Exception as e:
        error_output = ScriptOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_output.model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
