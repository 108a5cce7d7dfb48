from gridsearch.backend.engine.benchmark.benchmark import (
    CSV_HEADER,
    BenchmarkRow,
    append_rows,
    run_benchmark,
)

__all__ = ["CSV_HEADER", "BenchmarkRow", "append_rows", "run_benchmark"]
