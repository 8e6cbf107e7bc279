from __future__ import annotations

import argparse

from seqindex import element_at_or_default, slice_range
from seqindex.testing import SinglePass, generate_cases

_MISSING = object()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="compare_paths")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=10000)
    ap.add_argument("--max-len", type=int, default=12)
    args = ap.parse_args(argv)

    mismatches = 0
    for i, case in enumerate(generate_cases(seed=args.seed, count=args.count, max_len=args.max_len)):
        direct = element_at_or_default(case.data, case.index, default=_MISSING)
        single = element_at_or_default(SinglePass(case.data), case.index, default=_MISSING)
        if direct != single:
            mismatches += 1
            print(f"case {i}: element {case.index} of {list(case.data)}: {direct!r} != {single!r}")

        a = list(slice_range(case.data, case.rng))
        b = list(slice_range(SinglePass(case.data), case.rng))
        if a != b:
            mismatches += 1
            print(f"case {i}: slice {case.rng} of {list(case.data)}: {a!r} != {b!r}")

    print(f"{args.count} cases, {mismatches} mismatches")
    return 1 if mismatches else 0


if __name__ == "__main__":
    raise SystemExit(main())
