"""
Accumulators for a single binning level.

A PairAccumulator buffers values until a pair is complete and reduces the pair
to its mean (the value promoted to the next level) and its sum of squared
deviations. A LevelAccumulator keeps the running total T and square S
accumulators of all values absorbed at its level, such that

    mean = T / nelements,   var = S / (nelements - 1).

Both accumulators work with any value type supporting +, -, * and division by
an integer, e.g. floats, fractions or numpy arrays (component-wise statistics).
Values of very large magnitude may overflow or lose precision in the squares;
no attempt is made to guard against this.
"""

from .util import merge_moments


class InsufficientData(RuntimeError):
    """ Raised if a level has not absorbed enough pairs for a statistic. """


class LevelNotFound(IndexError):
    """ Raised if a binning level was queried that does not exist (yet). """


class PairAccumulator(object):

    def __init__(self):
        """ Buffer for the first value of a pair (the bare accumulator). """
        self.pending = None

    @property
    def full(self):
        return self.pending is not None

    @staticmethod
    def pair_T(first, second):
        """ The T function of a pair, T = x_1 + x_2. """
        return first + second

    @staticmethod
    def pair_S(first, second, total):
        """ The S function of a pair given its T function.

        S = sum_k (x_k - T / 2)^2, taken with respect to the pair's own mean.
        """
        mean = total / 2
        return (first - mean) * (first - mean) + (second - mean) * (second - mean)

    @classmethod
    def combine(cls, pending_value, new_value):
        """ Reduce a pair to its mean and sum of squared deviations.

        :return: Tuple (promoted, pair_square_term).
        """
        total = cls.pair_T(pending_value, new_value)
        return total / 2, cls.pair_S(pending_value, new_value, total)

    def push(self, value):
        """ Add a value to the pair.

        :return: None if the value is the first of a pair. Otherwise the
            tuple (promoted, pair_square_term) of the completed pair, after
            which the accumulator is empty again.
        """
        if self.pending is None:
            self.pending = value
            return None

        result = self.combine(self.pending, value)
        self.pending = None
        return result


class LevelAccumulator(object):

    def __init__(self, level=0):
        """ Running statistics of the values arriving at one binning level.

        self.nelements: Number of values absorbed into the statistics. Values
            are absorbed pairwise, a pending value is not counted.

        self.sumT: Total accumulator, sum of the absorbed values.

        self.sumS: Square accumulator, sum of squared deviations of the
            absorbed values from their mean.

        self.pair: PairAccumulator holding a pending value, if any.

        :param level: Binning level, values at level k are means of blocks
            of 2**k raw samples.
        """
        self.level = level
        self.nelements = 0
        self.sumT = 0
        self.sumS = 0
        self.pair = PairAccumulator()

    @property
    def npairs(self):
        """ Number of completed pairs (= values promoted by this level). """
        return self.nelements // 2

    @property
    def full(self):
        return self.pair.full

    def push(self, value):
        """ Add a value at this level.

        :param value: A raw sample (level 0) or a value promoted by the
            level below.
        :return: The mean of the completed pair, to be pushed to the next
            level, or None if the value is pending.
        """
        result = self.pair.push(value)
        if result is None:
            return None

        promoted, pair_square = result
        if self.nelements > 0:
            mean = self.sumT / self.nelements
        else:
            mean = promoted
        self.nelements, _, self.sumS = merge_moments(
            self.nelements, mean, self.sumS, 2, promoted, pair_square)
        self.sumT = self.sumT + 2 * promoted
        return promoted

    def mean(self):
        if self.npairs < 1:
            raise InsufficientData(
                "Level %d has not absorbed a pair yet." % self.level)
        return self.sumT / self.nelements

    def var(self):
        """ Bessel corrected sample variance of the absorbed values. """
        if self.npairs < 2:
            raise InsufficientData(
                "Level %d needs 2 absorbed pairs for the variance, has %d."
                % (self.level, self.npairs))
        return self.sumS / (self.nelements - 1)

    def __repr__(self):
        return '%s(level=%d, nelements=%d)' % (
            type(self).__name__, self.level, self.nelements)
