"""
Binary Search Tree Demo -- Reference walkthrough, tree shape rendering,
insertion order vs height, and the three deletion cases.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_search_tree import BinarySearchTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "steel": "steelblue",
    "dark": "#2c3e50",
}

REFERENCE_VALUES = [50, 30, 70, 20, 40, 60, 80]


def build_tree(values):
    bst = BinarySearchTree()
    for value in values:
        bst.insert(value)
    return bst


def tree_layout(bst):
    """Node coordinates: x from in-order rank, y from negated depth."""
    positions = {}
    edges = []
    rank = {value: i for i, value in enumerate(bst.in_order())}
    stack = [(bst._root, 0, None)]
    while stack:
        node, depth, parent = stack.pop()
        if node is None:
            continue
        positions[node.value] = np.array([rank[node.value], -depth], dtype=float)
        if parent is not None:
            edges.append((parent, node.value))
        stack.append((node.right, depth + 1, node.value))
        stack.append((node.left, depth + 1, node.value))
    return positions, edges


def draw_tree(ax, bst, title, highlight=()):
    positions, edges = tree_layout(bst)
    for parent, child in edges:
        xs, ys = zip(positions[parent], positions[child])
        ax.plot(xs, ys, color=COLORS["dark"], linewidth=1.2, zorder=1)
    for value, (x, y) in positions.items():
        color = COLORS["orange"] if value in highlight else COLORS["blue"]
        ax.scatter(x, y, s=900, color=color, edgecolor="white", linewidth=2, zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=10,
                fontweight="bold", color="white", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.margins(0.15)
    ax.axis("off")
    if not positions:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes,
                color="gray")


# ---------------------------------------------------------------------------
# Example 1: Reference Walkthrough
# ---------------------------------------------------------------------------
def example_1_reference_walkthrough():
    """Traversals, searches and deletions on the seven-value reference tree."""
    print("=" * 60)
    print("Example 1: Reference Walkthrough")
    print("=" * 60)

    bst = build_tree(REFERENCE_VALUES)
    print(f"\n  Inserted: {REFERENCE_VALUES}")
    print(f"  Pre-order:  {bst.pre_order()}")
    print(f"  In-order:   {bst.in_order()}")
    print(f"  Post-order: {bst.post_order()}")
    print(f"\n  search(40): {bst.search(40)}")
    print(f"  search(90): {bst.search(90)}")

    snapshots = [("Initial tree", bst.copy(), ())]

    bst.delete(20)
    print(f"\n  After delete(20): {bst.in_order()}")
    snapshots.append(("After delete(20): leaf removed", bst.copy(), ()))

    bst.delete(50)
    print(f"  After delete(50): {bst.in_order()}")
    snapshots.append(("After delete(50): successor 60 takes the root", bst.copy(), (60,)))

    assert bst.in_order() == [30, 40, 60, 70, 80], "Reference deletions diverged"

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    for ax, (title, tree, highlight) in zip(axes, snapshots):
        draw_tree(ax, tree, title, highlight)
    fig.suptitle("Reference Tree: 50, 30, 70, 20, 40, 60, 80", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_reference_walkthrough.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/01_reference_walkthrough.png")


# ---------------------------------------------------------------------------
# Example 2: Traversal Orders
# ---------------------------------------------------------------------------
def example_2_traversal_orders():
    """Number each node by its position in the three traversal orders."""
    print("\n" + "=" * 60)
    print("Example 2: Traversal Orders")
    print("=" * 60)

    bst = build_tree(REFERENCE_VALUES)
    orders = [
        ("Pre-order (node, left, right)", bst.pre_order()),
        ("In-order (left, node, right)", bst.in_order()),
        ("Post-order (left, right, node)", bst.post_order()),
    ]
    positions, edges = tree_layout(bst)

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    for ax, (title, sequence) in zip(axes, orders):
        print(f"\n  {title}: {sequence}")
        step = {value: i + 1 for i, value in enumerate(sequence)}
        for parent, child in edges:
            xs, ys = zip(positions[parent], positions[child])
            ax.plot(xs, ys, color=COLORS["dark"], linewidth=1.2, zorder=1)
        for value, (x, y) in positions.items():
            ax.scatter(x, y, s=900, color=COLORS["purple"], edgecolor="white", zorder=2)
            ax.text(x, y, str(value), ha="center", va="center", fontsize=10,
                    fontweight="bold", color="white", zorder=3)
            ax.text(x, y + 0.3, str(step[value]), ha="center", va="bottom", fontsize=9,
                    color=COLORS["red"], fontweight="bold")
        ax.set_title(title, fontsize=10, fontweight="bold")
        ax.margins(0.15)
        ax.axis("off")

    fig.suptitle("Visit Order (red numbers)", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_traversal_orders.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/02_traversal_orders.png")


# ---------------------------------------------------------------------------
# Example 3: Insertion Order vs Height
# ---------------------------------------------------------------------------
def example_3_insertion_order_vs_height():
    """Random permutations stay shallow; sorted input degenerates to a list."""
    print("\n" + "=" * 60)
    print("Example 3: Insertion Order vs Height")
    print("=" * 60)

    sizes = [8, 16, 32, 64, 128, 256, 512]
    trials = 30
    random_heights = []
    for n in sizes:
        heights = [build_tree(np.random.permutation(n).tolist()).height() for _ in range(trials)]
        random_heights.append(heights)
    sorted_heights = [build_tree(range(n)).height() for n in sizes]

    print(f"\n  {'n':>5} {'random mean':>12} {'random max':>11} {'sorted':>7} {'log2(n+1)':>10}")
    for n, heights, degenerate in zip(sizes, random_heights, sorted_heights):
        print(f"  {n:>5} {np.mean(heights):>12.2f} {max(heights):>11} {degenerate:>7} "
              f"{np.log2(n + 1):>10.2f}")

    means = np.array([np.mean(h) for h in random_heights])
    stds = np.array([np.std(h) for h in random_heights])

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], label="Sorted input")
    axes[0].errorbar(sizes, means, yerr=stds, fmt="o-", color=COLORS["green"],
                     capsize=3, label=f"Random order (mean of {trials})")
    axes[0].plot(sizes, np.log2(np.array(sizes) + 1), "--", color=COLORS["steel"],
                 label=r"$\log_2(n+1)$ lower bound")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Number of elements n")
    axes[0].set_ylabel("Height (nodes)")
    axes[0].set_title("Height vs Size", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].hist(random_heights[-1], bins=range(min(random_heights[-1]),
                 max(random_heights[-1]) + 2), color=COLORS["blue"], edgecolor="white")
    axes[1].axvline(np.log2(sizes[-1] + 1), color=COLORS["steel"], linestyle="--",
                    label=r"$\log_2(n+1)$")
    axes[1].set_xlabel("Height (nodes)")
    axes[1].set_ylabel("Trials")
    axes[1].set_title(f"Height Distribution, n = {sizes[-1]}, random order",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_insertion_order_vs_height.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/03_insertion_order_vs_height.png")


# ---------------------------------------------------------------------------
# Example 4: Deletion Cases
# ---------------------------------------------------------------------------
def example_4_deletion_cases():
    """Leaf, right-only, left-only and two-children deletions side by side."""
    print("\n" + "=" * 60)
    print("Example 4: Deletion Cases")
    print("=" * 60)

    cases = [
        ("Leaf", [50, 30, 70, 20], 20),
        ("No left child", [50, 30, 70, 40, 35, 45], 30),
        ("No right child", [50, 30, 70, 20, 10, 25], 30),
        ("Two children", [50, 30, 90, 80, 70, 60, 65], 50),
    ]

    fig, axes = plt.subplots(2, len(cases), figsize=(20, 9))
    for col, (name, values, target) in enumerate(cases):
        bst = build_tree(values)
        draw_tree(axes[0, col], bst, f"{name}: delete({target})", highlight=(target,))
        before = bst.in_order()
        bst.delete(target)
        after = bst.in_order()
        assert after == [v for v in before if v != target], f"{name} deletion broke ordering"
        draw_tree(axes[1, col], bst, f"After: {after}")
        print(f"\n  {name}: delete({target})")
        print(f"    before: {before}")
        print(f"    after:  {after}")

    fig.suptitle("Deletion Cases (orange = value being removed)", fontsize=13,
                 fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_deletion_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/04_deletion_cases.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Generate PDF report: title page, summary, then one page per figure."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Search Tree", fontsize=24, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Insert, Search, Delete and Depth-First Traversals",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "An unbalanced binary search tree keeps every left descendant smaller\n"
            "and every right descendant larger than its node. Insert and delete\n"
            "descend recursively and reattach the rebuilt subtree on the way up.\n\n"
            "This demo covers:\n"
            "  1. Reference walkthrough: traversals, search, two deletions\n"
            "  2. Traversal orders: visit numbering for pre-, in- and post-order\n"
            "  3. Insertion order vs height: random vs sorted input\n"
            "  4. Deletion cases: leaf, one child, two children\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.94, "Summary of Findings", fontsize=20, fontweight="bold",
                ha="center", va="top", transform=ax.transAxes)
        summary_items = [
            "1. In-order traversal of any BST is ascending; this is the quickest check",
            "   that the ordering invariant survived a sequence of inserts and deletes.",
            "",
            "2. Pre-order lists a node before its subtrees, so re-inserting a pre-order",
            "   sequence into an empty tree rebuilds exactly the same shape.",
            "",
            "3. Height depends only on insertion order. Random order stays within a small",
            "   factor of log2(n+1); sorted order produces a chain of height n and makes",
            "   every operation linear.",
            "",
            "4. Deleting a node with one child splices the surviving child into its",
            "   parent's slot. With two children the node takes the value of its in-order",
            "   successor (leftmost node of the right subtree), which is then removed.",
        ]
        ax.text(0.06, 0.86, "\n".join(summary_items), fontsize=10, ha="left", va="top",
                transform=ax.transAxes, family="monospace", linespacing=1.3)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_reference_walkthrough.png": "Example 1: Reference Walkthrough",
            "02_traversal_orders.png": "Example 2: Traversal Orders",
            "03_insertion_order_vs_height.png": "Example 3: Insertion Order vs Height",
            "04_deletion_cases.png": "Example 4: Deletion Cases",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 2} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_reference_walkthrough()
    example_2_traversal_orders()
    example_3_insertion_order_vs_height()
    example_4_deletion_cases()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
