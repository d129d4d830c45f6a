from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


def _annotate_points(ax, xs, ys, *, fmt="{:d}", dx=0, dy=6, fontsize=8):
        """
        Annotate points (x, y) on ax with formatted y values.

        Args:
            ax: matplotlib Axes
            xs: list of x coordinates
            ys: list of y coordinates
            fmt: format string for y values
            dx: x offset in points
            dy: y offset in points
            fontsize: font size for annotations
        """

        for x, y in zip(xs, ys):
            if y is None:
                continue
            ax.annotate(
                fmt.format(y),
                (x, y),
                textcoords="offset points",
                xytext=(dx, dy),
                ha="center",
                va="center",
                fontsize=fontsize,
            )


def compute_table_stats(entries):
    """
    Returns a dict with
      count (int)
      best, worst, mean, median (float, np.nan if the table is empty)
    """
    scores = np.array([e.score for e in entries], dtype=np.float32)

    if scores.size == 0:
        return {
            "count": 0,
            "best": np.nan,
            "worst": np.nan,
            "mean": np.nan,
            "median": np.nan,
        }

    return {
        "count": int(scores.size),
        "best": float(np.max(scores)),
        "worst": float(np.min(scores)),
        "mean": float(np.mean(scores)),
        "median": float(np.median(scores)),
    }


def plot_highscores(entries, out_path="highscores.png"):
    """
    Draw the high score table as a bar chart and save it as PNG.

    Args:
        entries: list of ScoreEntry, already ranked
        out_path: target file

    Returns:
        Path: the written file
    """
    if not entries:
        raise ValueError("No high scores to plot.")

    out_path = Path(out_path)
    if out_path.parent != Path(""):
        out_path.parent.mkdir(parents=True, exist_ok=True)

    ranks = np.arange(1, len(entries) + 1)
    scores = [e.score for e in entries]
    labels = [f"#{r}\n{e.name}" for r, e in zip(ranks, entries)]

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(ranks, scores, color="tab:blue")
    _annotate_points(ax, ranks, scores)

    stats = compute_table_stats(entries)
    ax.axhline(stats["mean"], color="tab:red", linestyle="--", linewidth=1,
               label=f"mean {stats['mean']:.2f}")

    ax.set_xticks(ranks)
    ax.set_xticklabels(labels)
    ax.set_ylabel("Rounds completed")
    ax.set_title("Simon Says high scores")
    ax.set_ylim(0, max(max(scores), 1) * 1.2)
    ax.legend(loc="upper right")

    fig.tight_layout()
    fig.savefig(out_path, dpi=120)
    plt.close(fig)
    return out_path
