import csv
import json
import math


class Metrics:
    def __init__(self):
        self.rows = []
        self.counts = {}

    def count(self, heuristic):
        h = int(heuristic)
        self.counts[h] = self.counts.get(h, 0) + 1

    def append(
        self,
        it,
        elapsed_ms,
        heuristic,
        status,
        curr,
        best,
        phi=None,
    ):
        self.rows.append(
            (
                int(it),
                int(elapsed_ms),
                int(heuristic),
                status,
                float(curr),
                float(best),
                math.nan if phi is None else float(phi),
            )
        )

    def heuristic_counts(self):
        return dict(self.counts)

    def save_csv(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(
                [
                    "iter",
                    "elapsed_ms",
                    "heuristic",
                    "status",
                    "curr_value",
                    "best_value",
                    "phi",
                ]
            )
            for row in self.rows:
                w.writerow(list(row))


def save_metrics_json(path, metrics, best_value, params, *, extra=None):
    data = {
        "final_best_value": float(best_value),
        "iters_logged": len(metrics.rows),
        "heuristic_counts": {str(k): v for k, v in sorted(metrics.heuristic_counts().items())},
        "params": params,
    }
    if extra:
        data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_tour_csv(path, tour, coords=None):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        if coords is None:
            w.writerow(["pos", "city"])
            for i, c in enumerate(tour):
                w.writerow([i, int(c)])
        else:
            w.writerow(["pos", "city", "x", "y"])
            for i, c in enumerate(tour):
                w.writerow([i, int(c), float(coords[c, 0]), float(coords[c, 1])])
