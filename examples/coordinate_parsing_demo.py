#!/usr/bin/env python3
"""
Demo script showing how to use the coordinate parser.

This example demonstrates:
1. Detecting the notation of free-form coordinate text
2. Parsing decimal, DMS, UTM and MGRS input to WGS84
3. Encoding a location as MGRS at each precision
4. Handling unrecognized input
"""

from geocoord.core.coords import (
    MGRS_PRECISION_METERS,
    detect_format,
    is_coordinate,
    parse,
    to_mgrs,
    validate_utm_accuracy,
)
from geocoord.core.errors import CoordinateError
from geocoord.core.logging_config import setup_logging

SAMPLES = [
    "19.856, 99.817",
    "19°51'22\"N 99°49'0\"E",
    "19d51m22sN 99d49m0sE",
    "47N 485986 2197460",
    "47QME8598697460",
    "Chiang Rai, Thailand",
    "",
]


def main():
    """Run coordinate parsing demo."""
    setup_logging(log_level="WARNING")

    print("=" * 70)
    print("Coordinate Parsing Demo")
    print("=" * 70)

    # Example 1: Detection
    print("\n1. Detecting formats...")
    print("-" * 70)
    for text in SAMPLES:
        flag = "yes" if is_coordinate(text) else "no"
        print(f"  {text!r:32} format={detect_format(text)!s:8} coordinate={flag}")

    # Example 2: Parsing
    print("\n2. Parsing to WGS84...")
    print("-" * 70)
    for text in SAMPLES:
        try:
            result = parse(text)
        except CoordinateError as e:
            print(f"  ✗ {text!r}: {e}")
            continue
        print(f"  ✓ {text!r:32} [{result.format}] {result.location}")

    # Example 3: MGRS encoding
    print("\n3. Encoding Chiang Rai as MGRS...")
    print("-" * 70)
    for precision, meters in MGRS_PRECISION_METERS.items():
        print(f"  precision {precision} ({meters:>5} m): {to_mgrs(19.856, 99.817, precision)}")

    # Example 4: Check the UTM inverse against PROJ
    print("\n4. Comparing UTM conversion with PROJ...")
    print("-" * 70)
    ok = validate_utm_accuracy(47, 485986, 2197460, True)
    print(f"  Within 1 m of PROJ: {ok}")

    print("\n" + "=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
