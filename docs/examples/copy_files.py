#!/usr/bin/env python3
"""Copy-files style command line built with fluent-clp.

Try:
    python copy_files.py --source=in --dest out -n 3 --mode fast -v
    python copy_files.py /?
"""

import enum
import logging
import sys
from dataclasses import dataclass

from fluent_clp import FluentCommandLineBuilder


class Mode(enum.Enum):
    SAFE = "safe"
    FAST = "fast"


@dataclass
class CopySettings:
    source: str = ""
    dest: str = ""
    retries: int = 0
    mode: Mode = Mode.SAFE
    verbose: bool = False


def main(argv: list[str]) -> int:
    builder = FluentCommandLineBuilder(CopySettings)
    builder.setup_attribute("source", "s", "source").required().with_description("Source folder")
    builder.setup_attribute("dest", "d", "dest").required().with_description("Destination folder")
    builder.setup_attribute("retries", "n", "retries", int).with_default(1)
    builder.setup_attribute("mode", "m", "mode", Mode).with_default(Mode.SAFE)
    builder.setup_attribute("verbose", "v", "verbose", bool).with_default(False)
    builder.setup_help("?", "h", "help").with_header("usage: copy_files [options]").callback(print)

    result = builder.parse(argv)
    if result.help_called:
        return 0
    if result.has_errors:
        print(result.error_text, file=sys.stderr)
        return 2
    for pair in result.additional_options_found:
        print(f"ignoring unknown option {pair.key!r}", file=sys.stderr)

    settings = builder.object
    logging.basicConfig(level=logging.DEBUG if settings.verbose else logging.WARNING)
    print(f"Copying {settings.source} -> {settings.dest} "
          f"({settings.mode.value}, {settings.retries} retries)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
