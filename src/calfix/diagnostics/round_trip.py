#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import calfix
from calfix.core.fixed import FIXED_MAX, FIXED_MIN, Fixed


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calfix[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    # "gregorian,julian" -> ["gregorian", "julian"]
    return [x.strip() for x in s.split(",") if x.strip()]


def sample_days(np, n: int, lo: float, hi: float, seed: int):
    """n integer day indices drawn uniformly from [lo, hi], always including both ends."""
    rng = np.random.default_rng(seed)
    days = rng.integers(int(lo), int(hi), size=n, endpoint=True, dtype=np.int64)
    return np.concatenate([np.array([int(lo), int(hi)], dtype=np.int64), days])


def roundtrip_test(name: str, days, *, max_failures: int) -> int:
    """Count days where from_fixed(d).to_fixed() lands on another day."""
    failures = 0
    for d in days:
        f0 = Fixed(int(d))
        value = calfix.from_fixed(name, f0)
        back = value.to_fixed().to_day()
        if back != f0:
            failures += 1
            print("\nFAIL")
            print("calendar:", name)
            print("fixed:", f0.day)
            print("value:", value)
            print("back:", back.day)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip sweep: fixed -> calendar -> fixed.")
    p.add_argument("--calendars", type=str, default=",".join(calfix.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar and window.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    np = _need_numpy()

    # Whole recommended range, then a dense window around the common era.
    windows = [
        sample_days(np, args.N, FIXED_MIN, FIXED_MAX, args.seed),
        sample_days(np, args.N, -1_000_000, 1_000_000, args.seed + 1),
    ]

    total_fail = 0
    for name in parse_calendars(args.calendars):
        print(f"Testing {name} ...")
        for days in windows:
            total_fail += roundtrip_test(name, days, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
