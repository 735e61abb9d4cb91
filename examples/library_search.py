"""Using gremp as a library: resolve a config, run it, then call a matcher directly."""

import os
from pathlib import Path

from gremp import SearchConfig, run, search_case_insensitive

SAMPLE = Path(__file__).with_name("sample.txt")


def main() -> None:
    """Search the bundled sample file both ways."""
    config = SearchConfig.from_argv(["library_search", "Rust", str(SAMPLE)], environ=os.environ).unwrap()
    matches = run(config).unwrap()
    print(f"-- {matches} match(es)")  # noqa: T201

    for line_number, line in search_case_insensitive("rust", SAMPLE.read_text()):
        print(f"{line_number}: {line!r}")  # noqa: T201


if __name__ == "__main__":
    main()
