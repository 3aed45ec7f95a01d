"""Votestats - descriptive statistics and distribution comparison for elections.

Votestats summarizes and compares numeric columns of election results, such
as electorate sizes, turnouts or vote shares of constituencies, even when the
datasets come from different countries with different numbers and sizes of
electoral units.

The package is organized into modules by the task performed:

-   Samples of real numbers and the errors raised for invalid input are
    defined in the ``sample`` module.
-   Means, variances, standard deviations and skewness are computed by the
    ``describe`` module, quantiles, medians and five-number summaries by the
    ``quantile`` module.
-   To see the shape of a distribution, the ``binning`` module divides
    a sample into equal-width bins and converts their counts to
    a probability mass function; the ``ecdf`` module builds empirical
    cumulative distribution functions.
-   Distribution shapes of samples measured on different scales can be
    compared using the ``compare`` module.
-   Random sequences with known distributions (the honest and dishonest
    baker) are produced by the ``generate`` module.
-   Election tables are loaded from CSV files and prepared for analysis by
    the ``dataset`` module.

Run ``python -m votestats`` for a commandline summary of a CSV column or of
a simulated sequence.
"""
