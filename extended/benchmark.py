"""Benchmark extended number arithmetic against the bare primitive kind."""

import argparse
import sys
import time
from collections.abc import Sequence
from typing import Any

import numpy as np
from pydantic import BaseModel

from extended import kinds
from extended.errors import FiniteError
from extended.logger import set_log_level, xlogger
from extended.number import ExtendedNumber
from extended.settings import BenchmarkSettings

DURATION_UNIT: str = "microseconds"


class BenchmarkResult(BaseModel):
    sample_size: int
    kind: str
    primitive_time: int
    extended_time: int
    sums_agree: bool
    products_agree: bool

    @property
    def passed(self) -> bool:
        return self.sums_agree and self.products_agree


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments; unset flags fall back to the environment."""
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Benchmark extended numbers against their primitive kind."
    )
    parser.add_argument(
        "--sample_size", type=int, default=None, help="Number of random payloads."
    )
    parser.add_argument(
        "--min_value", type=int, default=None, help="Smallest payload (inclusive)."
    )
    parser.add_argument(
        "--max_value", type=int, default=None, help="Largest payload (inclusive)."
    )
    parser.add_argument(
        "--kind",
        type=str,
        default=None,
        choices=sorted(kinds.KIND_NAMES),
        help="Primitive kind of the payloads.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible samples."
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level.",
    )
    return parser.parse_args(argv)


def random_numbers(
    size: int,
    min_value: int,
    max_value: int,
    kind: type,
    seed: int | None = None,
) -> list[Any]:
    """Generate ``size`` payloads of ``kind`` drawn uniformly from ``[min_value, max_value]``."""
    if min_value > max_value:
        raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")

    generator = np.random.default_rng(seed)
    samples = generator.integers(min_value, max_value, size=size, endpoint=True)
    if issubclass(kind, np.generic):
        return list(samples.astype(kind))
    return [kinds.cast(sample, kind) for sample in samples.tolist()]


def extend(numbers: Sequence[Any]) -> list[ExtendedNumber[Any]]:
    return [ExtendedNumber(number) for number in numbers]


def operate(numbers: Sequence[Any], zero: Any, one: Any) -> tuple[Any, Any]:
    """Return the sum and the product of ``numbers``."""
    total = zero
    for number in numbers:
        total = total + number

    product = one
    for number in numbers:
        product = product * number

    return total, product


def agree(first: Any, second: Any) -> bool:
    """Whether two results are equal, counting nan as equal to nan."""
    return bool(first == second or (first != first and second != second))


def run_benchmark(settings: BenchmarkSettings) -> BenchmarkResult:
    kind = kinds.kind_by_name(settings.kind)
    num_sample = random_numbers(
        settings.sample_size,
        settings.min_value,
        settings.max_value,
        kind,
        settings.seed,
    )
    ext_sample = extend(num_sample)
    xlogger.info(
        f"Time measured in {DURATION_UNIT} on sample size of {settings.sample_size}"
    )

    # Both runs overflow alike: fixed-width kinds wrap, floating kinds reach inf and nan.
    with np.errstate(over="ignore", invalid="ignore"):
        begin = time.perf_counter_ns()
        num_sum, num_product = operate(num_sample, kinds.zero(kind), kinds.one(kind))
        middle = time.perf_counter_ns()
        ext_sum, ext_product = operate(
            ext_sample,
            ExtendedNumber(kind=kind),
            ExtendedNumber(kinds.one(kind), kind),
        )
        end = time.perf_counter_ns()

    return BenchmarkResult(
        sample_size=settings.sample_size,
        kind=settings.kind,
        primitive_time=(middle - begin) // 1000,
        extended_time=(end - middle) // 1000,
        sums_agree=agree(ext_sum.value(), num_sum),
        products_agree=agree(ext_product.value(), num_product),
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    settings = BenchmarkSettings(**overrides)
    set_log_level(settings.log_level)

    xlogger.info("--- PERFORMANCE BENCHMARKS ---")
    try:
        result = run_benchmark(settings)
    except FiniteError as error:
        xlogger.log(
            error.log_level, f"[BENCHMARK_ERROR] {error.code}: {error.message}"
        )
        return 1

    xlogger.info(f"Primitive time: {result.primitive_time}")
    xlogger.info(f"Extended time: {result.extended_time}")
    if not result.passed:
        xlogger.error(
            f"Benchmark results do not agree: sums_agree={result.sums_agree}, "
            f"products_agree={result.products_agree}"
        )
        return 1

    xlogger.info("Sanity check succeeded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
