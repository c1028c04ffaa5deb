#!/usr/bin/env python3
"""Parse the sample action list and print each action with a trace.

Run with GSTCONF_DEBUG=1 to see every (state, event) transition.
"""

import sys
from pathlib import Path

from gstconf.parser import ConfigParseError, ParserOptions, load_actions
from gstconf.report import ActionReport, OutputFormat
from gstconf.utils.logger import Logger


def main() -> int:
    Logger.configure(level="DEBUG", timestamps=False)

    config = Path(__file__).parent / "gst_actions.yaml"
    try:
        actions = load_actions(config, ParserOptions.from_env())
    except ConfigParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    ActionReport(actions, source=config).emit(sys.stdout, OutputFormat.TEXT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
