"""Compare the shapes of distributions measured on different scales.

Elections in different countries differ both in the number of constituencies
or precincts and in their sizes, so comparing raw histograms of, say, turnout
tells little. Instead, each sample is binned over its own range and converted
to a probability mass function; bin ``k`` then stands for the relative
position ``k / n_bins`` within that sample. The resulting profiles can be
overlaid to compare shapes, e.g. to see whether one of them has a suspicious
second peak near full turnout.

Since bin positions are relative, the same bin index stands for different
absolute values in different samples. Only shape properties (peak positions,
spread of probability mass) are comparable.
"""

import logging
import operator
from fractions import Fraction
from numbers import Real
from typing import Any, Dict, Hashable, Iterable, Mapping

import votestats.binning
from votestats.binning import DEFAULT_N_BINS, N_BINS_CHECKER


def compare(samples: Mapping[Hashable, Iterable[Real]],
            n_bins: int = DEFAULT_N_BINS,
            ) -> Dict[Hashable, Dict[int, Fraction]]:
    """Compute comparable probability mass profiles of labeled samples.

    :param samples: Samples keyed by their labels (e.g. country names).
    :param n_bins: Number of bins to divide each sample range into.
    :returns: A PMF for each label, in the order of the input labels.
    :raises InvalidConfigurationError: If n_bins is not a positive integer.
    :raises EmptyInputError: If any of the samples is empty.
    :raises DegenerateRangeError: If any of the samples has zero range.
    """
    N_BINS_CHECKER.check(n_bins)
    profiles = {}
    for label, sample in samples.items():
        logging.debug('binning %s into %d bins', label, n_bins)
        profiles[label] = votestats.binning.as_pmf(
            votestats.binning.bin_indices(sample, n_bins)
        )
    return profiles


def relative_positions(pmf: Mapping[int, Any],
                       n_bins: int,
                       ) -> Dict[Fraction, Any]:
    """Key the PMF by relative positions of the bins within the sample range.

    :param pmf: A PMF keyed by bin index, as produced by :func:`compare`.
    :param n_bins: Number of bins the PMF was computed with.
    """
    N_BINS_CHECKER.check(n_bins)
    return {Fraction(k, n_bins): prob for k, prob in pmf.items()}


def peak_position(pmf: Mapping[int, Any], n_bins: int) -> Fraction:
    """Return the relative position of the most probable bin.

    If more bins share the highest probability, the lowest of them is taken.

    :param pmf: A PMF keyed by bin index, as produced by :func:`compare`.
    :param n_bins: Number of bins the PMF was computed with.
    :raises ValueError: If the PMF is empty.
    """
    N_BINS_CHECKER.check(n_bins)
    if not pmf:
        raise ValueError('cannot find the peak of an empty PMF')
    peak_bin, _ = max(sorted(pmf.items()), key=operator.itemgetter(1))
    return Fraction(peak_bin, n_bins)
