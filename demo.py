"""
Integer Heap Demo -- Min/max walkthroughs, tree rendering, heap sort check,
and push/pop timing against the O(n log n) reference.

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
from int_heap import HeapType, IntHeap, new_heap, new_max_heap
from heap_printer import heap_label, print_array, print_tree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "dark": "#2c3e50",
}

BENCH_SIZES = [1_000, 2_000, 5_000, 10_000, 20_000, 50_000]


def draw_heap(ax, heap, title):
    """Draw the heap as a binary tree on ``ax``; level d holds 2**d slots."""
    items = heap.items()
    color = COLORS["blue"] if heap.heap_type is HeapType.MIN else COLORS["red"]
    positions = []
    for i in range(len(items)):
        depth = int(np.floor(np.log2(i + 1)))
        slot = i - (2 ** depth - 1)
        positions.append(((slot + 0.5) / 2 ** depth, -depth))

    for i in range(1, len(items)):
        (x0, y0), (x1, y1) = positions[(i - 1) // 2], positions[i]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1, zorder=1)
    for (x, y), value in zip(positions, items):
        ax.scatter([x], [y], s=700, color=color, edgecolors=COLORS["dark"], zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white",
                fontsize=11, fontweight="bold", zorder=3)

    ax.set_title(f"{title} ({heap_label(heap)})")
    ax.set_xlim(0, 1)
    ax.set_ylim((positions[-1][1] if positions else 0) - 0.6, 0.6)
    ax.axis("off")


def example_1_integer_heap():
    """Push a fixed sequence into a min-heap, then drain it."""
    print("=" * 60)
    print("Example 1: Integer Heap")
    print("=" * 60)

    heap = new_heap()
    numbers = [5, 2, 8, 1, 9, 3, 7, 4, 6]
    print(f"Adding numbers: {numbers}")
    for num in numbers:
        heap.push(num)
        print(f"Pushed {num}, heap size: {heap.size()}, peek: {heap.peek()}")

    print(f"\nHeap size: {heap.size()}")
    print(f"Is empty: {heap.is_empty()}")
    print(f"Peek (minimum): {heap.peek()}")
    print_tree(heap)

    fig, ax = plt.subplots(figsize=(10, 5))
    draw_heap(ax, heap, "Heap after pushing 5 2 8 1 9 3 7 4 6")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_min_heap_tree.png", dpi=150)
    plt.close(fig)

    print("\nPopping all elements (min-heap order):")
    while not heap.is_empty():
        value = heap.pop()
        print(f"Popped: {value}, remaining size: {heap.size()}")
    print(f"Final heap size: {heap.size()}")
    print(f"Is empty: {heap.is_empty()}")

    return fig


def example_2_partial_drain():
    """Pop only part of a heap and look at the new top."""
    print("\n" + "=" * 60)
    print("Example 2: Partial Drain")
    print("=" * 60)

    heap = new_heap()
    for value in [10, 5, 15, 3, 7]:
        heap.push(value)
    print(f"Heap size: {heap.size()}")
    print(f"Minimum element: {heap.peek()}")

    print("Popping first 3 elements:")
    for _ in range(3):
        if not heap.is_empty():
            print(f"Popped: {heap.pop()}")
    print(f"Remaining heap size: {heap.size()}")
    if not heap.is_empty():
        print(f"New minimum: {heap.peek()}")


def example_3_max_heap():
    """Same input as example 1, max ordering."""
    print("\n" + "=" * 60)
    print("Example 3: Max Heap")
    print("=" * 60)

    numbers = [5, 2, 8, 1, 9, 3, 7, 4, 6]
    min_heap = new_heap()
    max_heap = new_max_heap()
    for num in numbers:
        min_heap.push(num)
        max_heap.push(num)

    print_tree(max_heap)
    print_array(max_heap)
    print_array(min_heap)
    print(f"Max-heap drain order: {list(max_heap)}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    draw_heap(axes[0], min_heap, "Input 5 2 8 1 9 3 7 4 6")
    draw_heap(axes[1], max_heap, "Input 5 2 8 1 9 3 7 4 6")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_min_vs_max.png", dpi=150)
    plt.close(fig)

    return fig


def example_4_duplicates():
    """Equal elements keep their multiplicity."""
    print("\n" + "=" * 60)
    print("Example 4: Repeated Elements")
    print("=" * 60)

    values = [3, 1, 3, 1, 2, 2, 3, 1]
    heap = IntHeap.from_array(values)
    print(f"Input:     {values}")
    print_array(heap)
    print(f"Extracted: {list(heap)}")

    empty = new_heap()
    print(f"\nEmpty heap peek returns: {empty.peek()}")
    try:
        empty.pop()
    except IndexError as e:
        print(f"Empty heap pop raises {type(e).__name__}: {e}")


def example_5_heap_sort():
    """Drain a heap built from random integers and compare with numpy.sort."""
    print("\n" + "=" * 60)
    print("Example 5: Heap Sort vs numpy.sort")
    print("=" * 60)

    np.random.seed(SEED)
    values = np.random.randint(-1000, 1000, size=500)

    ascending = list(IntHeap.from_array(values, HeapType.MIN))
    descending = list(IntHeap.from_array(values, HeapType.MAX))
    reference = np.sort(values)

    print(f"Ascending matches numpy.sort:  {np.array_equal(ascending, reference)}")
    print(f"Descending matches reversed:   {np.array_equal(descending, reference[::-1])}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    axes[0].plot(values, ".", color=COLORS["dark"], alpha=0.6)
    axes[0].set_title("Input order")
    axes[0].set_xlabel("Index")
    axes[0].set_ylabel("Value")
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(ascending, color=COLORS["blue"], linewidth=2, label="min-heap drain")
    axes[1].plot(descending, color=COLORS["red"], linewidth=2, label="max-heap drain")
    axes[1].set_title("Extraction order")
    axes[1].set_xlabel("Pop number")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "05_heap_sort.png", dpi=150)
    plt.close(fig)

    return fig


def example_6_timing():
    """Time n pushes followed by n pops for growing n."""
    print("\n" + "=" * 60)
    print("Example 6: Push/Pop Timing")
    print("=" * 60)

    push_times = []
    pop_times = []
    for n in BENCH_SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()
        heap = new_heap()

        start = time.perf_counter()
        for v in values:
            heap.push(v)
        push_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        while heap:
            heap.pop()
        pop_times.append(time.perf_counter() - start)

        print(f"n={n:>6}: push {push_times[-1] * 1e3:8.2f} ms, pop {pop_times[-1] * 1e3:8.2f} ms")

    sizes = np.array(BENCH_SIZES, dtype=float)
    reference = sizes * np.log2(sizes)
    reference *= pop_times[-1] / reference[-1]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.loglog(sizes, push_times, "o-", color=COLORS["blue"], linewidth=2, label="n pushes")
    ax.loglog(sizes, pop_times, "s-", color=COLORS["red"], linewidth=2, label="n pops")
    ax.loglog(sizes, reference, "--", color=COLORS["orange"], linewidth=2, label="n log n (scaled)")
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Seconds")
    ax.set_title("Heap Operation Cost")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "06_timing.png", dpi=150)
    plt.close(fig)

    return fig


def generate_pdf_report():
    """Collect the saved figures into report.pdf."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = Path(__file__).parent / "report.pdf"
    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.9, "Integer Heap Report", fontsize=24, ha="center", fontweight="bold")
        summary_text = """
Array-backed binary heap over integers.

  - Min or max ordering fixed at construction
  - push / pop: O(log n) sift-up / sift-down
  - peek / size: O(1), peek returns 0 when empty
  - pop on an empty heap raises EmptyHeapError
  - from_array: O(n) bottom-up heapify
"""
        fig.text(0.1, 0.8, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for img_file in sorted(VIZ_DIR.glob("*.png")):
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, img_file.stem, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(img_file))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "INTEGER HEAP DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_integer_heap()
    example_2_partial_drain()
    example_3_max_heap()
    example_4_duplicates()
    example_5_heap_sort()
    example_6_timing()

    generate_pdf_report()

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print("\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print("  - report.pdf")


if __name__ == "__main__":
    main()
