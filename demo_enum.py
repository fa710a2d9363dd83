#!/usr/bin/env python3
"""
Demo: Ordered enumerations with labelset.

Walks the compass enum through lookups, neighbours, comparisons and
derivations, then shows both validation failures.
"""

from labelset import DuplicateValueError, Enum, TypeValidationError
from labelset.examples import build_compass, build_roles


def main():
    compass = build_compass()

    print("=" * 80)
    print("LABELSET DEMO")
    print("=" * 80)

    print(f"\nEnum:      {compass}")
    print(f"Values:    {list(compass.values)}")
    print(f"Attribute: compass.NORTH = {compass.NORTH!r}")
    print(f"First:     {compass.first}")
    print(f"Last:      {compass.last}")

    print("\nNEIGHBOURS:")
    print("-" * 80)
    for direction in compass:
        print(f"  {direction:<6} previous={compass.previous(direction)!r:<9} next={compass.next(direction)!r}")

    print("\nQUERIES:")
    print("-" * 80)
    print(f"  has('UP')               = {compass.has('UP')}")
    print(f"  compare('NORTH','WEST') = {compass.compare('NORTH', 'WEST')}")
    print(f"  compare('NORTH','UP')   = {compass.compare('NORTH', 'UP')}")
    print(f"  random()                = {compass.random()}")

    print("\nDERIVATIONS:")
    print("-" * 80)
    print(f"  filter(endswith 'TH')   = {compass.filter(lambda d: d.endswith('TH'))}")
    print(f"  map(str.lower)          = {compass.map(str.lower)}")
    print(f"  reduce(join)            = {compass.reduce(lambda acc, d: acc + '-' + d)}")

    print("\nVALIDATION:")
    print("-" * 80)
    try:
        Enum("UP", 1, None)
    except TypeValidationError as e:
        print(f"  TypeValidationError: {e}")
    try:
        build_roles("EDITOR")
    except DuplicateValueError as e:
        print(f"  DuplicateValueError: {e}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
