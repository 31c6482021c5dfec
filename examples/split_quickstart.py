"""
Score candidate thresholds of a single numeric feature with splitgain.

The tree-building side (threshold enumeration, weighting children by their
share of the node) lives here in the caller; splitgain only scores label sets.
"""
import numpy as np
from splitgain import InformationGain

rng = np.random.default_rng(42)
n_samples, n_classes = 300, 3

x = rng.uniform(0, 10, size=n_samples)
# class depends on x, with 15% of the labels nudged to a neighbour
noise = (rng.random(n_samples) < 0.15) * rng.integers(-1, 2, size=n_samples)
y = np.clip((x // 3.4).astype(int) + noise, 0, n_classes - 1)
w = rng.uniform(0.5, 1.5, size=n_samples)

crit = InformationGain()
parent = crit.evaluate_weighted(y, n_classes, w)
span = crit.range(n_classes)
print(f"parent gain: {parent:.4f}  (range {span:.4f})")

# labels were validated once above; skip the checks inside the sweep
fast = InformationGain(check_input=False)
best = None
for thr in np.quantile(x, np.linspace(0.05, 0.95, 19)):
    left = x <= thr
    wl, wr = w[left].sum(), w[~left].sum()
    child = (wl * fast.evaluate_weighted(y[left], n_classes, w[left])
             + wr * fast.evaluate_weighted(y[~left], n_classes, w[~left])) / (wl + wr)
    improvement = (child - parent) / span
    if best is None or improvement > best[1]:
        best = (thr, improvement)
    print(f"x <= {thr:5.2f}: children gain {child:.4f}, normalised improvement {improvement:.4f}")

print(f"\nBest threshold: x <= {best[0]:.2f} (normalised improvement {best[1]:.4f})")
