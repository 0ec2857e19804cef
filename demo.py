#!/usr/bin/env python3
"""
Demo and benchmarks for the toy ORE byte-domain scheme.

Usage:
    python3 demo.py                       # Encrypt random values and sort them by ciphertext
    python3 demo.py --values 9 3 200 3    # Encrypt given values
    python3 demo.py --general-prp         # Use a general permutation (ordering may break)
    python3 demo.py --benchmark           # Time encode and compare
"""

import argparse
import random
import time

from Crypto.Random.random import StrongRandom

from ore import ORE, KeyMaterial
from ore.params import DOMAIN_SIZE

DEFAULT_COUNT = 8
DEFAULT_BENCH_OPS = 2000


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"


def format_bytes(n: int) -> str:
    """Format bytes with KiB suffix."""
    if n >= 1024:
        return f"{n / 1024:.2f} KiB"
    return f"{n} B"


# =============================================================================
# Demo
# =============================================================================


def run_demo(values: list[int], rng, involution: bool):
    """Encrypt values, then order them using ciphertexts only."""
    print("=" * 70)
    print("Toy ORE over [0, 256) - Demo")
    print("=" * 70)

    key_material = KeyMaterial.generate(rng, involution=involution)
    ore = ORE(key_material, rng=rng)

    fixed = sum(1 for x in range(DOMAIN_SIZE) if key_material.prp[key_material.prp[x]] == x)
    print(f"\n{'Key Material':─^70}")
    print(f"  {key_material!r}")
    print(f"  Points with prp[prp[x]] == x: {fixed:>4} / {DOMAIN_SIZE}")

    print(f"\n{'Encryption':─^70}")
    ciphertexts = []
    for v in values:
        ct = ore.encrypt(v)
        ciphertexts.append((ct, v))
        print(f"  {v:>3} -> left={ct.left}  right={ct.right[:24]}...")
    left_size = len(ciphertexts[0][0].left) // 2 if ciphertexts else 0
    right_size = len(ciphertexts[0][0].right) // 2 if ciphertexts else 0
    print(f"  Left token:  {format_bytes(left_size):>10}")
    print(f"  Right token: {format_bytes(right_size):>10}")

    print(f"\n{'Ordering (ciphertexts only)':─^70}")
    by_ct = {ct: v for ct, v in ciphertexts}
    ordered = [by_ct[ct] for ct in ORE.sort(ct for ct, _ in ciphertexts)]
    expected = sorted(values)
    print(f"  Recovered: {ordered}")
    print(f"  Expected:  {expected}")
    if ordered == expected:
        print("  [OK] Order recovered")
    else:
        print("  [FAIL] Order not recovered (prp is not an involution)")


def run_benchmark(num_ops: int, rng):
    """Time encode and compare."""
    print("=" * 70)
    print("Toy ORE over [0, 256) - Benchmark")
    print("=" * 70)

    ore = ORE(rng=rng)
    values = [rng.randrange(DOMAIN_SIZE) for _ in range(num_ops)]

    start = time.time()
    ciphertexts = ore.encrypt_many(values)
    encrypt_time = time.time() - start

    start = time.time()
    for a, b in zip(ciphertexts, reversed(ciphertexts)):
        ORE.compare(a, b)
    compare_time = time.time() - start

    start = time.time()
    KeyMaterial.generate(rng)
    keygen_time = time.time() - start

    print(f"\n{'Timings':─^70}")
    print(f"  Operations:          {num_ops:>10}")
    print(f"  Key generation:      {format_time(keygen_time):>10}")
    print(f"  Encrypt (per op):    {format_time(encrypt_time / num_ops):>10}")
    print(f"  Compare (per op):    {format_time(compare_time / num_ops):>10}")


def main():
    parser = argparse.ArgumentParser(
        description="Toy ORE demo and benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --values 9 3 200 3
  python3 demo.py --count 20 --seed 1
  python3 demo.py --benchmark --ops 5000
        """,
    )
    parser.add_argument("--values", type=int, nargs="+", default=None, help="Values in [0, 256) to encrypt")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help=f"Number of random values (default: {DEFAULT_COUNT})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run (not secure)")
    parser.add_argument("--general-prp", action="store_true", help="Draw a general permutation instead of an involution")
    parser.add_argument("--benchmark", action="store_true", help="Time encode and compare")
    parser.add_argument("--ops", type=int, default=DEFAULT_BENCH_OPS, help=f"Benchmark operations (default: {DEFAULT_BENCH_OPS})")
    args = parser.parse_args()

    rng = random.Random(args.seed) if args.seed is not None else StrongRandom()

    if args.benchmark:
        run_benchmark(args.ops, rng)
        return

    values = args.values
    if values is None:
        values = [rng.randrange(DOMAIN_SIZE) for _ in range(args.count)]
    for v in values:
        if not 0 <= v < DOMAIN_SIZE:
            parser.error(f"value {v} out of range [0, {DOMAIN_SIZE})")

    run_demo(values, rng, involution=not args.general_prp)


if __name__ == "__main__":
    main()
