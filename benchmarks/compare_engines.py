from __future__ import annotations

import argparse
from datetime import datetime
import glob as stdlib_glob
import json
import os
from pathlib import Path
import statistics
import tempfile
import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable

from pathglob import GlobEngine, MemoryTree, ReferenceGlobEngine, native_available


@dataclass
class CaseResult:
    engine: str
    case: str
    matches: int
    seconds_mean: float
    seconds_min: float
    seconds_max: float
    peak_kib_mean: float


def _run_with_memory(fn: Callable[[], int]) -> tuple[float, float, int]:
    tracemalloc.start()
    start = time.perf_counter()
    matches = fn()
    elapsed = time.perf_counter() - start
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed, peak / 1024.0, matches


def build_tree(root: str, dirs: int, files: int, depth: int) -> list[str]:
    """Write ``dirs`` top-level directories, each ``depth`` levels deep with ``files`` files per level."""
    created: list[str] = []
    for d in range(dirs):
        current = os.path.join(root, f"d{d:03d}")
        for level in range(depth):
            os.makedirs(current, exist_ok=True)
            for f in range(files):
                for ext in ("txt", "swift"):
                    path = os.path.join(current, f"file{f:03d}.{ext}")
                    with open(path, "w") as fh:
                        fh.write("x")
                    created.append(path)
            with open(os.path.join(current, ".hidden"), "w") as fh:
                fh.write("x")
            current = os.path.join(current, f"l{level + 1}")
    return created


def memory_tree_from(root: str, created: list[str]) -> MemoryTree:
    tree = MemoryTree(cwd="/")
    tree.import_tree("/bench" + p[len(root):] for p in created)
    return tree


CASES = {
    "flat_star": "/*",
    "one_level_ext": "/*/*.txt",
    "two_level_class": "/*/l1/file0[0-4]*.swift",
    "braces": "/{d000,d001,d002}/*.{txt,swift}",
    "hidden": "/*/.*",
    "literal": "/d000/file000.txt",
    "deep": "/*/*/*/*.txt",
}


def run_case(
    engine: str,
    case: str,
    fn: Callable[[], int],
    repeat: int,
    warmup: int,
) -> CaseResult:
    for _ in range(warmup):
        fn()

    elapsed_list: list[float] = []
    peak_list: list[float] = []
    matches = 0
    for _ in range(repeat):
        elapsed, peak_kib, matches = _run_with_memory(fn)
        elapsed_list.append(elapsed)
        peak_list.append(peak_kib)

    return CaseResult(
        engine=engine,
        case=case,
        matches=matches,
        seconds_mean=statistics.mean(elapsed_list),
        seconds_min=min(elapsed_list),
        seconds_max=max(elapsed_list),
        peak_kib_mean=statistics.mean(peak_list),
    )


def _fmt_ms(seconds: float) -> str:
    return f"{seconds * 1000.0:.2f}"


def _fmt_kib(kib: float) -> str:
    return f"{kib:.1f}"


def print_table(results: list[CaseResult]) -> None:
    print("| Case | Engine | matches | mean(ms) | min(ms) | max(ms) | peak KiB (mean) |")
    print("|---|---:|---:|---:|---:|---:|---:|")
    for r in results:
        print(
            f"| {r.case} | {r.engine} | {r.matches} | {_fmt_ms(r.seconds_mean)} |"
            f" {_fmt_ms(r.seconds_min)} | {_fmt_ms(r.seconds_max)} | {_fmt_kib(r.peak_kib_mean)} |"
        )


def _results_to_dict(results: list[CaseResult]) -> list[dict[str, float | str | int]]:
    return [
        {
            "engine": r.engine,
            "case": r.case,
            "matches": r.matches,
            "seconds_mean": r.seconds_mean,
            "seconds_min": r.seconds_min,
            "seconds_max": r.seconds_max,
            "peak_kib_mean": r.peak_kib_mean,
        }
        for r in results
    ]


def _results_markdown(results: list[CaseResult], args: argparse.Namespace) -> str:
    lines = [
        "# Glob Engine Benchmark Results",
        "",
        f"- generated_at: `{datetime.now().isoformat(timespec='seconds')}`",
        f"- repeat: `{args.repeat}`",
        f"- warmup: `{args.warmup}`",
        f"- dirs: `{args.dirs}`",
        f"- files: `{args.files}`",
        f"- depth: `{args.depth}`",
        "",
        "| Case | Engine | matches | mean(ms) | min(ms) | max(ms) | peak KiB (mean) |",
        "|---|---:|---:|---:|---:|---:|---:|",
    ]
    for r in results:
        lines.append(
            f"| {r.case} | {r.engine} | {r.matches} | {_fmt_ms(r.seconds_mean)} | {_fmt_ms(r.seconds_min)}"
            f" | {_fmt_ms(r.seconds_max)} | {_fmt_kib(r.peak_kib_mean)} |"
        )
    lines.append("")
    return "\n".join(lines)


def _resolve_output_path(raw: str, ext: str) -> Path:
    if raw != "auto":
        return Path(raw)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = Path("benchmarks") / "results"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir / f"glob_benchmark_{ts}.{ext}"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark reference vs native glob engines (and the stdlib glob module)"
    )
    parser.add_argument("--repeat", type=int, default=5)
    parser.add_argument("--warmup", type=int, default=1)
    parser.add_argument("--dirs", type=int, default=20)
    parser.add_argument("--files", type=int, default=25)
    parser.add_argument("--depth", type=int, default=3)
    parser.add_argument("--json", action="store_true")
    parser.add_argument(
        "--save-md", default="", help="Save markdown report path (or 'auto')"
    )
    parser.add_argument(
        "--save-json", default="", help="Save json report path (or 'auto')"
    )
    args = parser.parse_args()

    results: list[CaseResult] = []
    with tempfile.TemporaryDirectory() as td:
        created = build_tree(td, args.dirs, args.files, args.depth)
        engines: list[GlobEngine] = [ReferenceGlobEngine()]
        if native_available():
            from pathglob import NativeGlobEngine

            engines.append(NativeGlobEngine())
        memory = ReferenceGlobEngine(memory_tree_from(td, created))

        for case, suffix in CASES.items():
            for engine in engines:
                results.append(
                    run_case(
                        engine.name,
                        case,
                        lambda e=engine, s=suffix: len(e.glob(td + s)),
                        args.repeat,
                        args.warmup,
                    )
                )
            results.append(
                run_case(
                    "reference(MemoryTree)",
                    case,
                    lambda s=suffix: len(memory.glob("/bench" + s)),
                    args.repeat,
                    args.warmup,
                )
            )
            results.append(
                run_case(
                    "stdlib glob",
                    case,
                    lambda s=suffix: len(stdlib_glob.glob(td + s)),
                    args.repeat,
                    args.warmup,
                )
            )

    if args.json:
        print(json.dumps(_results_to_dict(results), indent=2))
        return

    print_table(results)

    if args.save_md:
        md_path = _resolve_output_path(args.save_md, "md")
        md_path.parent.mkdir(parents=True, exist_ok=True)
        md_path.write_text(_results_markdown(results, args), encoding="utf-8")
        print(f"\nSaved markdown report: {md_path}")

    if args.save_json:
        json_path = _resolve_output_path(args.save_json, "json")
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(_results_to_dict(results), indent=2), encoding="utf-8")
        print(f"Saved JSON report: {json_path}")


if __name__ == "__main__":
    main()
