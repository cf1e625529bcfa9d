#!/usr/bin/env python3
"""
Benchmark script comparing SMILES parsing speed between RDKit and smigraph.

Usage:
    python benchmarks/bench_parser.py [--extended] [FILE.smi]

Options:
    --extended    Run every test molecule and print a comparison table
    FILE.smi      Time parsing every line of a SMILES file instead
"""

import os
import sys
import time
from dataclasses import dataclass
from typing import Optional

# Ensure local smigraph is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Test molecules with varying complexity
TEST_MOLECULES = {
    "small_ether": "CCOCC",
    "medium_drug": "CC(C)Cc1ccc(cc1)C(C)C(=O)O",  # Ibuprofen
    "drug_like": "Cc1ccc(cc1Nc2nccc(n2)c3cccnc3)NC(=O)c4ccc(cc4)CN5CCN(CC5)C",  # Imatinib
    "large_complex": "CCn1c2ccc3cc2c2cc(ccc21)C(=O)c1ccc(cc1)Cn1c[n+](c2ccccc21)Cc1ccc(cc1)C(=O)c1ccc2c(c1)c1cc(ccc1n2CC)C(=O)c1ccc(cc1)C[n+]1cn(c2ccccc21)Cc1ccc(cc1)C3=O",
}

LARGE_MOLECULE = TEST_MOLECULES["large_complex"]

ITERATIONS = 5000
EXTENDED_ITERATIONS = 2000
FILE_ROUNDS = 10


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    smiles: str
    time_seconds: float
    iterations: int
    num_atoms: int

    @property
    def time_per_call_us(self) -> float:
        return (self.time_seconds / self.iterations) * 1_000_000

    @property
    def time_per_atom_us(self) -> float:
        """Microseconds per atom per call."""
        return self.time_per_call_us / self.num_atoms


def benchmark_rdkit(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark RDKit parsing (without sanitization)."""
    from rdkit import Chem

    mol = Chem.MolFromSmiles(smiles, sanitize=False)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")

    start = time.perf_counter()
    for _ in range(iterations):
        Chem.MolFromSmiles(smiles, sanitize=False)
    end = time.perf_counter()

    return BenchmarkResult(smiles, end - start, iterations, mol.GetNumAtoms())


def benchmark_smigraph(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark smigraph parsing."""
    from smigraph import parse

    g = parse(smiles)

    start = time.perf_counter()
    for _ in range(iterations):
        parse(smiles)
    end = time.perf_counter()

    return BenchmarkResult(smiles, end - start, iterations, g.order)


def run_single_benchmark() -> None:
    """Run basic single-molecule benchmark."""
    print("=" * 70)
    print("SMILES Parsing Benchmark: RDKit vs smigraph")
    print("=" * 70)
    print(f"\nTest molecule ({len(LARGE_MOLECULE)} chars):")
    print(f"  {LARGE_MOLECULE[:60]}...")
    print(f"\nIterations: {ITERATIONS}")
    print("-" * 70)

    rdkit_result: Optional[BenchmarkResult] = None
    smigraph_result: Optional[BenchmarkResult] = None

    print("\nRunning RDKit benchmark...", end=" ", flush=True)
    try:
        rdkit_result = benchmark_rdkit(LARGE_MOLECULE, ITERATIONS)
        print("done")
        print(f"  Time: {rdkit_result.time_seconds:.3f}s ({rdkit_result.time_per_call_us:.1f}us per call)")
    except ImportError:
        print("SKIPPED (rdkit not installed)")

    print("\nRunning smigraph benchmark...", end=" ", flush=True)
    smigraph_result = benchmark_smigraph(LARGE_MOLECULE, ITERATIONS)
    print("done")
    print(f"  Time: {smigraph_result.time_seconds:.3f}s ({smigraph_result.time_per_call_us:.1f}us per call)")

    print("\n" + "=" * 70)
    if rdkit_result:
        ratio = smigraph_result.time_seconds / rdkit_result.time_seconds
        if ratio < 1:
            print(f"smigraph is {1/ratio:.2f}x FASTER than RDKit")
        else:
            print(f"smigraph is {ratio:.2f}x SLOWER than RDKit")
    else:
        print("Could not compare (RDKit not installed)")


def run_extended_benchmark() -> None:
    """Run every test molecule and print a comparison table."""
    print("=" * 78)
    print("EXTENDED SMILES Parsing Benchmark: RDKit vs smigraph")
    print("=" * 78)
    print(f"\nIterations per molecule: {EXTENDED_ITERATIONS}\n")

    header = f"{'Molecule':<16} {'Atoms':>6} {'RDKit us':>10} {'smigraph us':>12} {'Ratio':>8} {'us/atom':>9}"
    print(header)
    print("-" * 78)

    for name, smiles in TEST_MOLECULES.items():
        ours = benchmark_smigraph(smiles, EXTENDED_ITERATIONS)
        try:
            theirs: Optional[BenchmarkResult] = benchmark_rdkit(smiles, EXTENDED_ITERATIONS)
        except ImportError:
            theirs = None

        rdkit_us = f"{theirs.time_per_call_us:>10.1f}" if theirs else f"{'N/A':>10}"
        ratio = f"{ours.time_seconds / theirs.time_seconds:.2f}x" if theirs else "N/A"
        print(f"{name:<16} "
              f"{ours.num_atoms:>6} "
              f"{rdkit_us} "
              f"{ours.time_per_call_us:>12.1f} "
              f"{ratio:>8} "
              f"{ours.time_per_atom_us:>9.2f}")


def run_file_benchmark(path: str) -> None:
    """Time repeated passes over a SMILES file, skipping malformed lines."""
    from smigraph import parse_lines

    with open(path, encoding="utf-8") as handle:
        lines = handle.readlines()

    print(f"{len(lines)} lines from {path}")
    for _ in range(FILE_ROUNDS):
        start = time.perf_counter()
        count = sum(1 for _ in parse_lines(lines))
        end = time.perf_counter()
        print(f"  {count} parsed in {(end - start) * 1000:.0f} ms")


def main() -> None:
    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    if args:
        run_file_benchmark(args[0])
    elif "--extended" in sys.argv or "-e" in sys.argv:
        run_extended_benchmark()
    else:
        run_single_benchmark()
        print("\n" + "-" * 70)
        print("TIP: Run with --extended for detailed multi-molecule analysis")


if __name__ == "__main__":
    main()
