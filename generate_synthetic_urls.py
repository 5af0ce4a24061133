#!/usr/bin/env python3
"""
Synthetic dataset generator for url-topk benchmarks.

Generates a large newline-delimited file of URLs whose frequencies follow a
Zipf-like distribution, so a small set of URLs dominates the top of the
ranking while the long tail keeps the distinct count high.

Host names are prefixed with a two-letter token drawn uniformly, which keeps
shard sizes even under the default 2-character partition key.
"""

import argparse
import random
import string
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB


def make_url(url_id: int, rng: random.Random) -> str:
    """Build a deterministic URL for url_id; rng must be seeded per id."""
    prefix = "".join(rng.choice(string.ascii_lowercase) for _ in range(2))
    depth = rng.randint(1, 3)
    path = "/".join(f"p{rng.randrange(1000)}" for _ in range(depth))
    return f"{prefix}{url_id:08d}.example.com/{path}"


def zipf_weights(distinct: int, exponent: float) -> list[float]:
    """Unnormalised Zipf weights for ranks 1..distinct."""
    return [1.0 / (rank**exponent) for rank in range(1, distinct + 1)]


def generate_synthetic_dataset(
    output_path: str,
    num_lines: int,
    distinct: int,
    exponent: float,
    seed: int,
) -> int:
    """
    Generate a synthetic URL corpus.

    Streams output line-by-line; only the distinct URL table is kept in
    memory.

    Returns:
        Total number of lines written.
    """
    rng = random.Random(seed)
    url_rng = random.Random()
    urls = []
    for url_id in range(distinct):
        url_rng.seed((seed, url_id))
        urls.append(make_url(url_id, url_rng))

    weights = zipf_weights(distinct, exponent)
    total_lines = 0
    batch = 10000

    with open(output_path, "w", encoding="utf-8", buffering=BUFFER_SIZE) as f:
        while total_lines < num_lines:
            size = min(batch, num_lines - total_lines)
            for url in rng.choices(urls, weights=weights, k=size):
                f.write(url)
                f.write("\n")
            total_lines += size

            # Progress indicator every 1M lines
            if total_lines % 1_000_000 == 0:
                print(f"  Generated {total_lines:,}/{num_lines:,} lines...", file=sys.stderr)

    return total_lines


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate synthetic URL corpus.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate ~10M lines with 1M distinct URLs
  python generate_synthetic_urls.py --out data/urls.txt --lines 10000000

  # Flatter distribution (more ties near the cutoff)
  python generate_synthetic_urls.py --out data/urls_flat.txt --exponent 0.5
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--lines",
        type=int,
        default=10_000_000,
        help="Number of lines to write (default: 10000000)",
    )
    parser.add_argument(
        "--distinct",
        type=int,
        default=1_000_000,
        help="Number of distinct URLs (default: 1000000)",
    )
    parser.add_argument(
        "--exponent",
        type=float,
        default=1.1,
        help="Zipf exponent, higher is more skewed (default: 1.1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.lines < 1:
        parser.error("--lines must be at least 1")
    if args.distinct < 1:
        parser.error("--distinct must be at least 1")
    if args.exponent <= 0:
        parser.error("--exponent must be positive")

    # Approximate line length: ~40 chars
    approx_size_mb = (args.lines * 40) / (1024 * 1024)

    print("=" * 60, file=sys.stderr)
    print("Synthetic URL Corpus Generator", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Lines: {args.lines:,}", file=sys.stderr)
    print(f"Distinct URLs: {args.distinct:,}", file=sys.stderr)
    print(f"Zipf exponent: {args.exponent}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print(f"Estimated size: ~{approx_size_mb:.1f} MB", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    total_lines = generate_synthetic_dataset(
        output_path=args.out,
        num_lines=args.lines,
        distinct=args.distinct,
        exponent=args.exponent,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_lines:,} lines to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
