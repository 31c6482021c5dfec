# -*- coding: utf-8 -*-
"""
splitgain.criterion
===================

Information gain split criterion for decision-tree learners.

Given the class labels that reach a node (optionally with sample weights)
the criterion returns the *negative* Shannon entropy of the class
distribution, in bits::

    gain = sum_c f_c * log2(f_c)        (classes with f_c > 0 only)

A pure node scores ``0.0``; a node spread uniformly over ``k`` classes
scores ``-log2(k)``.  :meth:`InformationGain.range` returns ``log2(k)``, the
span between those two extremes, so gains computed for problems with a
different number of classes can be put on a common scale.

Every operation is a pure function of its arguments: the class-count
accumulator is allocated per call and nothing is cached between calls, so
the tree builder is free to evaluate candidate splits concurrently.
"""

from __future__ import annotations
import logging
import numpy as np
from sklearn.base import BaseEstimator
from sklearn.utils.validation import (
    assert_all_finite, check_consistent_length, column_or_1d)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _check_num_classes(num_classes) -> int:
    k = int(num_classes)
    if k < 1:
        raise ValueError(f"num_classes must be >= 1, got {num_classes!r}")
    return k

def _as_label_vector(labels: np.ndarray, num_classes: int) -> np.ndarray:
    y = column_or_1d(labels)
    if y.dtype.kind not in "biu":
        # float labels are accepted as long as they hold whole numbers
        if y.dtype.kind != "f" or not np.all(np.floor(y) == y):
            raise ValueError("labels must be integer class indices")
        y = y.astype(np.intp)
    lo, hi = int(y.min()), int(y.max())
    if lo < 0 or hi >= num_classes:
        raise ValueError(
            f"labels must lie in [0, {num_classes}); found values in [{lo}, {hi}]")
    return y

def _as_weight_vector(weights, y: np.ndarray) -> np.ndarray:
    w = column_or_1d(weights).astype(float, copy=False)
    check_consistent_length(y, w)
    assert_all_finite(w, input_name="weights")
    if np.any(w < 0):
        raise ValueError("weights must be non-negative")
    return w

def _gain_from_counts(counts: np.ndarray, total: float) -> float:
    f = counts / total
    f = f[f > 0]  # 0 * log2(0) is taken as 0
    return float(np.sum(f * np.log2(f)))


# -----------------------------------------------------------------------------
# Criterion
# -----------------------------------------------------------------------------
class InformationGain(BaseEstimator):
    """
    Entropy-based split criterion.

    Parameters
    ----------
    check_input : bool, default=True
        Validate the caller contract before computing: labels must be 1-D
        integer class indices in ``[0, num_classes)``, weights must be 1-D,
        non-negative and as long as the labels.  Violations raise
        ``ValueError``.  Set to ``False`` inside tight split-search loops
        once the labels have been validated upstream; inputs are then
        trusted and out-of-range labels give meaningless (but finite)
        results instead of an error.

    Notes
    -----
    The instance carries configuration only.  Calls never modify it nor
    their inputs, so a single instance can be shared across threads.
    """

    def __init__(self, *, check_input: bool = True):
        self.check_input = check_input

    def evaluate(self, labels, num_classes: int, weights=None,
                 use_weights: bool = False) -> float:
        """
        Return the information gain of a label distribution.

        Parameters
        ----------
        labels : array-like of shape (n_samples,)
            Class index of each sample reaching the node.
        num_classes : int
            Number of classes in the whole problem, not only the ones seen
            in ``labels``.
        weights : array-like of shape (n_samples,), optional
            Per-sample weights, aligned with ``labels``.  Ignored unless
            ``use_weights`` is true.
        use_weights : bool, default=False
            Use the fraction of total weight per class instead of the
            fraction of samples.

        Returns
        -------
        float
            ``sum_c f_c * log2(f_c)``, a value in ``[-log2(num_classes), 0]``.
            Empty label sets and weighted sets whose total weight is zero
            score ``0.0``.

        Raises
        ------
        ValueError
            If ``num_classes < 1``, if ``use_weights`` is set without
            ``weights``, or (with ``check_input``) if the labels or weights
            break the contract described above.
        """
        labels = np.asarray(labels)
        if labels.size == 0:
            logger.debug("Empty label set, gain is 0.0")
            return 0.0

        k = _check_num_classes(num_classes)
        if self.check_input:
            y = _as_label_vector(labels, k)
        else:
            y = labels.ravel()

        if not use_weights:
            counts = np.bincount(y, minlength=k)
            return _gain_from_counts(counts, float(len(y)))

        if weights is None:
            raise ValueError("weights must be given when use_weights=True")
        if self.check_input:
            w = _as_weight_vector(weights, y)
        else:
            w = np.asarray(weights, dtype=float).ravel()

        counts = np.bincount(y, weights=w, minlength=k)
        # denominator is the sum of the class totals: a pure node gives f == 1.0 exactly
        total = float(counts.sum())
        if total == 0.0:
            logger.debug("Total weight of %d samples is zero, gain is 0.0", len(y))
            return 0.0
        return _gain_from_counts(counts, total)

    def evaluate_weighted(self, labels, num_classes: int, weights) -> float:
        """Weighted information gain; shorthand for ``evaluate(..., use_weights=True)``."""
        return self.evaluate(labels, num_classes, weights, use_weights=True)

    def evaluate_counts(self, class_counts) -> float:
        """
        Return the information gain of an already accumulated class histogram.

        Split searches that sweep sorted thresholds usually maintain running
        per-class totals; this entry point scores such a vector directly
        instead of rescanning the labels.

        Parameters
        ----------
        class_counts : array-like of shape (num_classes,)
            Count (or summed weight) of each class.

        Returns
        -------
        float
            Same quantity as :meth:`evaluate`; ``0.0`` for an empty vector or
            a zero total.
        """
        counts = np.asarray(class_counts, dtype=float)
        if counts.size == 0:
            return 0.0
        if self.check_input:
            counts = column_or_1d(counts)
            assert_all_finite(counts, input_name="class_counts")
            if np.any(counts < 0):
                raise ValueError("class_counts must be non-negative")
        else:
            counts = counts.ravel()
        total = float(counts.sum())
        if total == 0.0:
            logger.debug("Class histogram sums to zero, gain is 0.0")
            return 0.0
        return _gain_from_counts(counts, total)

    def range(self, num_classes: int) -> float:
        """
        Span of achievable gains for ``num_classes`` classes.

        The best gain is ``0`` (a pure node) and the worst is the uniform
        distribution, ``k * (1/k) * log2(1/k) = -log2(k)``; the span is
        therefore ``log2(k)``.

        Raises
        ------
        ValueError
            If ``num_classes < 1`` (``log2(0)`` is undefined).
        """
        return float(np.log2(_check_num_classes(num_classes)))


# -----------------------------------------------------------------------------
# Functional interface
# -----------------------------------------------------------------------------
_default = InformationGain()

def evaluate(labels, num_classes: int, weights=None, use_weights: bool = False) -> float:
    """Module-level :meth:`InformationGain.evaluate` with input checking on."""
    return _default.evaluate(labels, num_classes, weights, use_weights)

def evaluate_weighted(labels, num_classes: int, weights) -> float:
    return _default.evaluate_weighted(labels, num_classes, weights)

def evaluate_counts(class_counts) -> float:
    return _default.evaluate_counts(class_counts)

def gain_range(num_classes: int) -> float:
    """Module-level :meth:`InformationGain.range`."""
    return _default.range(num_classes)
