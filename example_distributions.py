#!/usr/bin/env python3
"""
Example evaluations of the built-in distributions.

Prints densities, cumulative probabilities, quantiles and seeded random
draws for Bernoulli, Poisson, Geometric and Laplace distributions.
"""

import logging
import sys

from probkit import Bernoulli, Geometric, Laplace, Poisson
from probkit.errors import DomainError, ProbabilityOutOfRangeError


def example_bernoulli():
    print("=" * 70)
    print("Bernoulli(p=0.3)")
    print("=" * 70)

    b = Bernoulli(0.3, seed=1)
    print(f"pmf(0) = {b.pmf(0):.6f}, pmf(1) = {b.pmf(1):.6f}")
    print(f"cdf(-1) = {b.cdf(-1):.6f}, cdf(0) = {b.cdf(0):.6f}, cdf(1) = {b.cdf(1):.6f}")
    print(f"quantile(0.5) = {b.quantile(0.5)}, quantile(0.9) = {b.quantile(0.9)}")
    print(f"random(10) = {b.random(10).tolist()}")

    try:
        b.pmf(2)
    except DomainError as e:
        print(f"pmf(2) -> {type(e).__name__}: {e}")
    return True


def example_poisson():
    print("=" * 70)
    print("Poisson(mean=1.5)")
    print("=" * 70)

    d = Poisson(1.5, seed=2)
    print(f"pmf(3) = {d.pmf(3):.6f}")
    print(f"cdf(1) = {d.cdf(1):.6f}")
    print(f"quantile(0.5) = {d.quantile(0.5)}")
    print(f"mean = {d.mean():.6f}, var = {d.var():.6f}")
    print(f"random(10) = {d.random(10).tolist()}")
    return True


def example_geometric():
    print("=" * 70)
    print("Geometric(p=0.5)")
    print("=" * 70)

    g = Geometric(0.5, seed=3)
    print(f"pmf(3) = {g.pmf(3):.6f}")
    print(f"cdf(3) = {g.cdf(3):.6f}")
    print(f"quantile(0.9999) = {g.quantile(0.9999)}")
    print(f"random(10) = {g.random(10).tolist()}")
    return True


def example_laplace():
    print("=" * 70)
    print("Laplace(mean=0, scale=1)")
    print("=" * 70)

    lap = Laplace(0.0, 1.0, seed=4)
    print(f"pdf(1) = {lap.pdf(1.0):.6f}")
    print(f"cdf(1) = {lap.cdf(1.0):.6f}")
    print(f"quantile(cdf(1)) = {lap.quantile(lap.cdf(1.0)):.6f}")
    print(f"random(5) = {[round(x, 4) for x in lap.random(5).tolist()]}")

    try:
        lap.quantile(1.5)
    except ProbabilityOutOfRangeError as e:
        print(f"quantile(1.5) -> {type(e).__name__}: {e}")
    return True


def example_reseeding():
    print("=" * 70)
    print("Reseeding")
    print("=" * 70)

    first, second = Poisson(4.0), Poisson(4.0)
    first.seed(42)
    second.seed(42)
    a, b = first.random(8), second.random(8)
    print(f"first  = {a.tolist()}")
    print(f"second = {b.tolist()}")
    return bool((a == b).all())


def main():
    if "-v" in sys.argv[1:]:
        logging.basicConfig(level=logging.DEBUG)

    examples = [
        ("Bernoulli", example_bernoulli),
        ("Poisson", example_poisson),
        ("Geometric", example_geometric),
        ("Laplace", example_laplace),
        ("Reseeding", example_reseeding),
    ]

    results = []
    for name, func in examples:
        results.append((name, func()))
        print()

    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    for name, result in results:
        status = "ok" if result else "FAILED"
        print(f"{status}: {name}")

    return 0 if all(result for _, result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
