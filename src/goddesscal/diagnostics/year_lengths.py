#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from goddesscal.core import structure as st


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "goddesscal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "goddesscal[diagnostics]"') from e


def length_grid(np, width: int = 10):
    """
    Year lengths of one cycle as a (rows, width) array: 1 for short, 0 for normal.
    Row r holds years r*width+1 .. (r+1)*width.
    """
    if st.CYCLE_YEARS % width:
        raise ValueError(f"width must divide {st.CYCLE_YEARS}")
    flags = np.array([st.is_short(y) for y in st.YEARS], dtype=int)
    return flags.reshape(st.CYCLE_YEARS // width, width)


def text_barcode(width: int = 10) -> List[str]:
    """Same grid as length_grid, one line per row: '#' short, '.' normal."""
    lines = []
    for start in range(1, st.CYCLE_YEARS + 1, width):
        marks = "".join("#" if st.is_short(y) else "." for y in range(start, start + width))
        lines.append(f"{start:3d}-{start + width - 1:3d}  {marks}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Barcode diagram of short (383-day) years across one 470-year cycle."
    )
    p.add_argument("--width", type=int, default=10, help="Years per row (must divide 470; default 10).")
    p.add_argument("--out", default="year_lengths.png")
    p.add_argument("--title", default="Short years in the Goddess calendar cycle")
    p.add_argument("--text", action="store_true", help="Print an ASCII barcode instead of plotting.")
    args = p.parse_args(argv)

    if st.CYCLE_YEARS % args.width:
        raise SystemExit(f"--width must divide {st.CYCLE_YEARS}")

    print(f"normal years: {st.NORMAL_YEAR_COUNT}  short years: {st.SHORT_YEAR_COUNT}  days: {st.CYCLE_DAYS}")
    if args.text:
        for line in text_barcode(args.width):
            print(line)
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    Z = length_grid(np, args.width)
    rows, cols = Z.shape

    fig, ax = plt.subplots(figsize=(max(4.0, cols * 0.45), max(4.0, rows * 0.22)))
    ax.pcolormesh(
        np.arange(0.5, cols + 1.0, 1.0),
        np.arange(0.5, rows + 1.0, 1.0),
        Z,
        shading="flat",
        cmap=ListedColormap(["white", "0.15"]),
        vmin=0, vmax=1,
        edgecolors="0.88",
        linewidth=0.6,
    )
    ax.set_xlim(0.5, cols + 0.5)
    ax.set_ylim(rows + 0.5, 0.5)
    ax.tick_params(axis="both", which="both", length=0)

    ax.set_xticks(list(range(1, cols + 1)))
    ax.set_xlabel("Year within row")
    yt = list(range(1, rows + 1, 5))
    ax.set_yticks(yt)
    ax.set_yticklabels([str((r - 1) * cols + 1) for r in yt])
    ax.set_ylabel("First year of row")

    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    plt.close(fig)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
