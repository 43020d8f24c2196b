"""
Demo: Run the structural transformer and parameter decoder on sample data.
"""

from collections import OrderedDict

from lunatic.containers import ABSENT
from lunatic.logger import setup_logger
from lunatic.params import convenient_parser
from lunatic.serialization import CopyMode, SerializationError
from lunatic.transform import (
    filter_to_plain_map,
    filter_values,
    pair_list,
    transform_values,
)


class Registry:
    """A keys()/values() container that is not a Mapping."""

    def __init__(self, pairs):
        self._pairs = list(pairs)

    def keys(self):
        return (k for k, _ in self._pairs)

    def values(self):
        return (v for _, v in self._pairs)

    def __repr__(self):
        return f"Registry({self._pairs!r})"


def main():
    setup_logger()
    print()
    print("=" * 70)
    print("STRUCTURAL TRANSFORMER DEMO")
    print("=" * 70)

    stats = OrderedDict(x=1, y=2, z=3)
    print(f"\n  Input:                 {stats}")
    print(f"  Doubled:               {transform_values(lambda v: v * 2, stats)}")
    print(f"  Odd only:              {filter_values(lambda v: v % 2 == 1, stats)}")
    print(f"  Pair list:             {pair_list(stats)}")

    registry = Registry([("hp", 10), ("mp", 4)])
    print(f"\n  Registry doubled:      {transform_values(lambda v: v * 2, registry)}")

    missing = filter_to_plain_map(bool, None)
    print(f"\n  Filter on None:        {missing!r} (absent: {missing is ABSENT})")

    try:
        transform_values(repr, {"callback": print}, copy_mode=CopyMode.JSON)
    except SerializationError as e:
        print(f"\n  JSON copy refused:     {e}")

    raw = {"Speed": "4", "Enabled": "TRUE", "Name": "Harold", "Pos": '{"x": "1", "y": "2"}'}
    print(f"\n  Raw parameters:        {raw}")
    print(f"  Decoded parameters:    {convenient_parser(raw)}")
    print()


if __name__ == "__main__":
    main()
