""" Online logarithmic binning analysis of correlated data streams.

Successive samples of a Markov chain Monte Carlo simulation are correlated,
so the naive standard error sqrt(var / N) of their mean is biased. Binning
analysis averages blocks of 2**k consecutive samples: once the blocks are
longer than the correlation time, the block means are (nearly) independent
and the variance of the level-k block means yields an honest error estimate.

The BinningTree computes the mean and variance at all levels k in a single
pass over the data and with memory logarithmic in the number of samples.

Example:
    >>> tree = BinningTree()
    >>> tree.extend([2, 4, 6, 8])
    >>> tree.mean(0)  # level 0 absorbed the pairs (2, 4) and (6, 8)
    5.0
    >>> tree.mean(1)  # block means 3 and 7
    5.0
    >>> tree.levels_count()  # the mean 5 of level 1 waits at level 2
    3

Statistics that are not yet available raise InsufficientData, levels that do
not exist raise LevelNotFound.

Example:
    >>> tree = BinningTree()
    >>> tree.push(1.)
    >>> tree.mean(0)
    Traceback (most recent call last):
        ...
    logbinning.accumulators.InsufficientData: Level 0 has not absorbed a pair yet.

Interpreting the level variances is left to the caller: for levels k well beyond
the correlation time, the ratio 2**k * var(k) / var(0) approaches 1 + 2 tau,
with tau the integrated autocorrelation time.
"""

from . import util

from .accumulators import PairAccumulator, LevelAccumulator
from .accumulators import InsufficientData, LevelNotFound
from .binning import BinningTree, LevelStats
