"""
Max-Heap Demo -- Round trip, swap counts against tree height, capacity growth,
and heap sort timing.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from max_heap import MaxHeap, INITIAL_CAPACITY

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "gray": "#7f8c8d",
}


class SwapCounter:
    """Wraps a heap's swap so each operation's swaps can be read back."""

    def __init__(self, heap):
        self.count = 0
        self._swap = heap._swap
        heap._swap = self

    def __call__(self, i, j):
        self.count += 1
        self._swap(i, j)

    def take(self):
        n, self.count = self.count, 0
        return n


def example_1_round_trip():
    """Insert 2, 5, 1, 1 and drain."""
    print("=" * 60)
    print("Example 1: Round Trip")
    print("=" * 60)

    heap = MaxHeap()
    for v in [2, 5, 1, 1]:
        heap.insert(v)
        print(f"  insert({v}) -> {heap!r}")

    drained = []
    while not heap.is_empty():
        drained.append(heap.delete_max())
        print(f"  delete_max() = {drained[-1]} -> {heap!r}")

    print(f"Drained: {drained}")
    print(f"Empty afterward: {heap.is_empty()}")
    assert drained == [5, 2, 1, 1]
    return {"drained": drained}


def example_2_swap_counts(n=2000):
    """Swaps per operation against floor(log2(size))."""
    print("\n" + "=" * 60)
    print("Example 2: Swap Counts vs Tree Height")
    print("=" * 60)

    workloads = {
        "ascending": np.arange(n),
        "random": np.random.randint(0, 10 * n, size=n),
    }
    sizes = np.arange(1, n + 1)
    height = np.floor(np.log2(sizes))

    insert_swaps = {}
    delete_swaps = {}
    for name, values in workloads.items():
        heap = MaxHeap()
        counter = SwapCounter(heap)
        ins = []
        for v in values.tolist():
            heap.insert(v)
            ins.append(counter.take())
        dels = []
        while heap:
            heap.delete_max()
            dels.append(counter.take())
        insert_swaps[name] = np.array(ins)
        # delete i ran on a heap of n - i elements
        delete_swaps[name] = np.array(dels)[::-1]

        ins_ok = bool(np.all(insert_swaps[name] <= height))
        del_ok = bool(np.all(delete_swaps[name] <= height))
        print(f"  {name:>10}: mean insert swaps {insert_swaps[name].mean():.3f}, "
              f"mean delete swaps {delete_swaps[name].mean():.3f}, "
              f"within bound: {ins_ok and del_ok}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, data, title in [(axes[0], insert_swaps, "insert"), (axes[1], delete_swaps, "delete_max")]:
        ax.plot(sizes, height, color=COLORS["gray"], linewidth=2, linestyle="--",
                label="floor(log2(size))")
        ax.scatter(sizes, data["ascending"], s=4, color=COLORS["red"], label="ascending input")
        ax.scatter(sizes, data["random"], s=4, color=COLORS["blue"], alpha=0.5, label="random input")
        ax.set_xlabel("Heap size", fontsize=12)
        ax.set_ylabel("Swaps", fontsize=12)
        ax.set_title(f"Swaps per {title}", fontsize=14)
        ax.legend(fontsize=10)
        ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_swap_counts.png", dpi=150)
    plt.close(fig)

    print(f"Saved: {VIZ_DIR / '02_swap_counts.png'}")
    return {
        "insert_mean": {k: float(v.mean()) for k, v in insert_swaps.items()},
        "delete_mean": {k: float(v.mean()) for k, v in delete_swaps.items()},
        "max_height": int(height[-1]),
    }


def example_3_capacity_growth(n=700):
    """Capacity after each insert, starting from zero and from the default."""
    print("\n" + "=" * 60)
    print("Example 3: Capacity Growth")
    print("=" * 60)

    timelines = {}
    for start in (0, INITIAL_CAPACITY):
        heap = MaxHeap(start)
        caps = []
        for v in np.random.randint(0, 1000, size=n).tolist():
            heap.insert(v)
            caps.append(heap.capacity())
        timelines[start] = np.array(caps)
        growth_points = np.flatnonzero(np.diff(np.concatenate([[start], timelines[start]]))) + 1
        print(f"  start={start:>3}: grew at sizes {growth_points.tolist()}, "
              f"final capacity {caps[-1]}")

    sizes = np.arange(1, n + 1)
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sizes, color=COLORS["gray"], linestyle="--", label="size")
    ax.step(sizes, timelines[0], where="post", color=COLORS["orange"], linewidth=2,
            label="capacity (start 0)")
    ax.step(sizes, timelines[INITIAL_CAPACITY], where="post", color=COLORS["green"], linewidth=2,
            label=f"capacity (start {INITIAL_CAPACITY})")
    ax.set_xlabel("Elements inserted", fontsize=12)
    ax.set_ylabel("Slots", fontsize=12)
    ax.set_title("Capacity Doubling", fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_capacity_growth.png", dpi=150)
    plt.close(fig)

    print(f"Saved: {VIZ_DIR / '03_capacity_growth.png'}")
    final = timelines[INITIAL_CAPACITY][-1]
    return {"final_capacity": int(final), "load": n / final}


def example_4_heap_sort(sizes=(1000, 5000, 20000, 50000)):
    """from_array + repeated delete_max compared with sorted()."""
    print("\n" + "=" * 60)
    print("Example 4: Heap Sort")
    print("=" * 60)

    print(f"\n  {'n':>8} {'heap (ms)':>12} {'sorted (ms)':>12} {'match':>8}")
    print(f"  {'-'*44}")

    heap_ms = []
    sorted_ms = []
    for n in sizes:
        values = np.random.random(size=n).tolist()

        t0 = time.perf_counter()
        heap = MaxHeap.from_array(values)
        result = [heap.delete_max() for _ in range(n)]
        heap_ms.append((time.perf_counter() - t0) * 1000)

        t0 = time.perf_counter()
        expected = sorted(values, reverse=True)
        sorted_ms.append((time.perf_counter() - t0) * 1000)

        print(f"  {n:>8} {heap_ms[-1]:>12.2f} {sorted_ms[-1]:>12.2f} {str(result == expected):>8}")

    sizes_arr = np.array(sizes)
    per_elem = np.array(heap_ms) / (sizes_arr * np.log2(sizes_arr))

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].loglog(sizes_arr, heap_ms, "o-", color=COLORS["blue"], linewidth=2, label="MaxHeap")
    axes[0].loglog(sizes_arr, sorted_ms, "s-", color=COLORS["red"], linewidth=2, label="sorted()")
    axes[0].set_xlabel("n", fontsize=12)
    axes[0].set_ylabel("Time (ms)", fontsize=12)
    axes[0].set_title("Heap Sort vs Built-in Sort", fontsize=14)
    axes[0].legend(fontsize=10)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes_arr, per_elem * 1e3, "o-", color=COLORS["green"], linewidth=2)
    axes[1].set_xlabel("n", fontsize=12)
    axes[1].set_ylabel("Time / (n log2 n)  (us)", fontsize=12)
    axes[1].set_title("Normalized Heap Sort Cost", fontsize=14)
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_heap_sort.png", dpi=150)
    plt.close(fig)

    print(f"Saved: {VIZ_DIR / '04_heap_sort.png'}")
    return {"sizes": list(sizes), "heap_ms": heap_ms, "sorted_ms": sorted_ms}


def generate_pdf_report(results):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")

        ax.text(0.5, 0.7, "Binary Max-Heap\nDemo Report", transform=ax.transAxes, fontsize=28,
                ha="center", va="center", fontweight="bold")

        description = (
            "Array-backed priority queue with insert and delete_max in O(log n).\n"
            "Every element is <= its parent, so the maximum sits at index 0.\n"
            f"Storage starts at {INITIAL_CAPACITY} slots and doubles when full."
        )
        ax.text(0.5, 0.45, description, transform=ax.transAxes, fontsize=14,
                ha="center", va="center", style="italic")

        ax.text(0.5, 0.2, f"Random Seed: {SEED}", transform=ax.transAxes, fontsize=12,
                ha="center", va="center")

        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")

        ax.text(0.5, 0.95, "Summary of Results", transform=ax.transAxes, fontsize=20,
                ha="center", va="top", fontweight="bold")

        ex2 = results["ex2"]
        ex4 = results["ex4"]
        summary_text = f"""
Example 1: Round Trip
    - Drained order: {results['ex1']['drained']}

Example 2: Swap Counts
    - Mean insert swaps (ascending / random): {ex2['insert_mean']['ascending']:.3f} / {ex2['insert_mean']['random']:.3f}
    - Mean delete swaps (ascending / random): {ex2['delete_mean']['ascending']:.3f} / {ex2['delete_mean']['random']:.3f}
    - Tree height at largest size: {ex2['max_height']}

Example 3: Capacity Growth
    - Final capacity: {results['ex3']['final_capacity']}
    - Load factor: {results['ex3']['load']:.2%}

Example 4: Heap Sort
    - n = {ex4['sizes'][-1]}: heap {ex4['heap_ms'][-1]:.1f} ms, sorted() {ex4['sorted_ms'][-1]:.1f} ms
"""
        ax.text(0.1, 0.85, summary_text, transform=ax.transAxes, fontsize=11,
                ha="left", va="top", family="monospace")

        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in sorted(VIZ_DIR.glob("*.png")):
            fig, ax = plt.subplots(figsize=(11, 8.5))
            img = plt.imread(viz_file)
            ax.imshow(img)
            ax.axis("off")
            ax.set_title(viz_file.stem.replace("_", " ").title(), fontsize=14, fontweight="bold")
            fig.tight_layout()
            pdf.savefig(fig)
            plt.close(fig)

    print(f"Saved: {pdf_path}")


def main():
    print("Max-Heap Demo")
    print("=" * 60)
    print(f"Random seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")
    print()

    results = {}

    results["ex1"] = example_1_round_trip()
    results["ex2"] = example_2_swap_counts()
    results["ex3"] = example_3_capacity_growth()
    results["ex4"] = example_4_heap_sort()

    generate_pdf_report(results)

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)
    print(f"Visualizations saved to: {VIZ_DIR}")
    print(f"PDF report saved to: {Path(__file__).parent / 'report.pdf'}")


if __name__ == "__main__":
    main()
