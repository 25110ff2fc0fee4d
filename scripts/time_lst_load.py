#!/usr/bin/env python3
"""Quick perf benchmark for two-phase LST loading."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from lstpy.load import LoadContext, load_lst_text
from lstpy.objects import ListKey


def _collect_lst_files(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.lst"))
    return [path for path in files if path.is_file()]


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    context = LoadContext()
    iterator = (
        tqdm(files, desc=label, unit="file")
        if show_progress
        else files
    )
    for path in iterator:
        load_lst_text(
            path.read_text(encoding="utf-8-sig"),
            source_path=str(path),
            context=context,
            resolve=False,
        )
    context.resolve_deferred()
    duration = time.perf_counter() - start

    total_weapons = sum(len(obj.get_list(ListKey.NATURAL_WEAPON)) for obj in context.data_objects())
    return duration, len(context.data_objects()), total_weapons, len(context.diagnostics)


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark LST load throughput")
    parser.add_argument("lst_root", type=Path, help="Directory scanned recursively for .lst files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick smoke tests (0 = all files)",
    )
    args = parser.parse_args()

    lst_root: Path = args.lst_root
    if not lst_root.exists() or not lst_root.is_dir():
        raise SystemExit(f"Invalid lst_root: {lst_root}")

    files = _collect_lst_files(lst_root)
    if not files:
        raise SystemExit(f"No .lst files found under {lst_root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    show_progress = not args.no_progress
    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(
            files,
            label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
            show_progress=show_progress,
        )

    timings: list[float] = []
    objects_count = 0
    weapons_count = 0
    diagnostics_count = 0
    for run_idx in range(max(args.runs, 1)):
        duration, objects_count, weapons_count, diagnostics_count = _run_once(
            files,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Dataset: {lst_root}")
    print(f"Files: {len(files)}")
    print(f"Objects: {objects_count}")
    print(f"Natural weapons: {weapons_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
