"""Render a status panel the way a long-running job would.

Run: python examples/status_screen.py [config.yaml]
"""

import sys
import time

from quantfmt import QuantityFormatter
from quantfmt.cli.display import print_status


def main():
    fmt = QuantityFormatter.from_yaml(sys.argv[1]) if len(sys.argv) > 1 else QuantityFormatter()

    now_ms = int(time.time() * 1000)
    started_ms = now_ms - 3 * 86_400_000 - 5_025_000
    last_find_ms = now_ms - 754_000

    print_status(
        "job status",
        [
            ("run time", fmt.time_delta(now_ms, started_ms)),
            ("last new item", fmt.time_delta(now_ms, last_find_ms)),
            ("last crash", fmt.time_delta(now_ms, 0)),
            ("total execs", fmt.count(48_213_775)),
            ("exec speed", fmt.float_value(1843.7) + "/sec"),
            ("stability", fmt.float_value(99.1) + "%"),
            ("memory", fmt.memory_size(734_003_200)),
        ],
    )


if __name__ == "__main__":
    main()
