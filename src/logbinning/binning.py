from collections import namedtuple

from .accumulators import LevelAccumulator, InsufficientData, LevelNotFound
from .util import interpret_value

LevelStats = namedtuple('LevelStats', ['level', 'nelements', 'mean', 'var'])


class BinningTree(object):

    def __init__(self):
        """ Online logarithmic binning of a (correlated) data stream.

        Raw samples enter binning level 0. Whenever a level completes a pair
        of values, the pair mean is pushed to the next level, so level k sees
        the means of consecutive blocks of 2**k raw samples. Levels are
        created when the first value arrives at them; after N pushes there
        are at most floor(log2(N)) + 1 levels.

        A push is only consistent after it returned, callers sharing a tree
        between threads must lock around each call to push or extend.

        self.levels: List of LevelAccumulator, indexed by level.

        self.npushed: Number of raw samples pushed.
        """
        self.levels = []
        self.npushed = 0

    def push(self, value):
        """ Add a raw sample and cascade completed pairs upwards.

        :param value: Number or array-like (vector samples are binned
            component-wise).
        """
        value = interpret_value(value)
        if not self.levels:
            self.levels.append(LevelAccumulator(0))
        self.npushed += 1

        level = 0
        while value is not None:
            value = self.levels[level].push(value)
            if value is not None:
                level += 1
                if level == len(self.levels):
                    self.levels.append(LevelAccumulator(level))

    def extend(self, values, log_every=-1):
        """ Push a sequence of raw samples in order.

        :param values: Iterable of samples, for numpy arrays the sample
            index runs along the first axis.
        :param log_every: Print the number of pushed samples. Do not log if
            value is < 0. Log every sample for log_every=1.
        """
        for i, value in enumerate(values):
            self.push(value)
            if log_every > 0 and (i + 1) % log_every == 0:
                print("Pushed %d samples." % (i + 1), flush=True)

    def __getitem__(self, level):
        if not 0 <= level < len(self.levels):
            raise LevelNotFound("Binning level %d does not exist, "
                                "%d levels were created." %
                                (level, len(self.levels)))
        return self.levels[level]

    def __len__(self):
        return len(self.levels)

    def levels_count(self):
        return len(self.levels)

    def mean(self, level=0):
        """ Mean of the values absorbed at a binning level.

        Raises LevelNotFound if the level does not exist and InsufficientData
        if it has not absorbed a pair yet.
        """
        return self[level].mean()

    def var(self, level=0):
        """ Sample variance of the values absorbed at a binning level.

        Raises LevelNotFound if the level does not exist and InsufficientData
        if it has absorbed less than two pairs.
        """
        return self[level].var()

    def level_stats(self):
        """ Snapshot of the statistics of all levels.

        :return: List of LevelStats, one per level. Statistics a level
            cannot provide yet are None.
        """
        stats = []
        for acc in self.levels:
            try:
                mean = acc.mean()
            except InsufficientData:
                mean = None
            try:
                var = acc.var()
            except InsufficientData:
                var = None
            stats.append(LevelStats(acc.level, acc.nelements, mean, var))
        return stats

    def __repr__(self):
        return '%s(npushed=%d, levels=%d)' % (
            type(self).__name__, self.npushed, len(self.levels))
