"""Basic formatting example.

Run: python examples/basic_formatting.py
"""

from quantfmt import (
    OutputBuffer,
    format_count,
    format_float,
    format_memory_size,
    format_time_delta,
)


def main():
    print("=" * 60)
    print("quantfmt — Human-readable quantities")
    print("=" * 60)

    # ── Counts ──
    print("\nCounts:")
    for value in (42, 9_999, 12_345, 999_999, 9_994_999, 9_995_000, 999_500_000, 10**15):
        print(f"  {value:>20,}  →  {format_count(value)}")

    # ── Memory sizes ──
    print("\nMemory sizes:")
    for value in (0, 1023, 1024, 150_000, 5 * 1024**3, 3 * 1024**4):
        print(f"  {value:>20,}  →  {format_memory_size(value)}")

    # ── Floats ──
    print("\nFloats:")
    for value in (0.5, 50.567, 500.12, 2_000_000.0):
        print(f"  {value:>20}  →  {format_float(value)}")

    # ── Time deltas ──
    print("\nTime deltas:")
    print(f"  never          →  {format_time_delta(90_000_000, 0)}")
    print(f"  25 hours ago   →  {format_time_delta(190_000_000, 100_000_000)}")

    # ── Fixed-size buffer ──
    print("\nTruncating into a 4-byte buffer:")
    buf = OutputBuffer(4)
    format_count(10**15, buf=buf)
    print(f"  {buf!r}")


if __name__ == "__main__":
    main()
