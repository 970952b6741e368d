import numpy as np
from scipy.signal import lfilter


def interpret_value(value):
    """ Prepare a sample value for accumulation.

    Scalars (python numbers, fractions, numpy scalars) are returned as they
    are. Anything else is copied into a numpy array, such that vector valued
    samples are accumulated component-wise and later changes to the caller's
    array do not affect values pending inside an accumulator.

    Example:
        >>> interpret_value(2)
        2
        >>> x = [1., 2.]
        >>> y = interpret_value(x)
        >>> y.shape
        (2,)

    :param value: Number or array-like.
    :return: The value itself or a numpy array copy of it.
    """
    if np.isscalar(value):
        return value
    return np.array(value, copy=True, subok=True)


def merge_moments(n_a, mean_a, s_a, n_b, mean_b, s_b):
    """ Combine the moments of two disjoint batches of values.

    Parallel variance algorithm of Chan, Golub and LeVeque: given the size,
    mean and sum of squared deviations (from the respective batch mean) of
    two batches, compute the same three quantities for their union without
    revisiting the values.

    Example:
        >>> merge_moments(2, 3., 2., 2, 7., 2.)
        (4, 5.0, 20.0)

    :param n_a: Number of values in the first batch.
    :param mean_a: Mean of the first batch (ignored if n_a is 0).
    :param s_a: Sum of squared deviations of the first batch from mean_a.
    :param n_b: Number of values in the second batch.
    :param mean_b: Mean of the second batch (ignored if n_b is 0).
    :param s_b: Sum of squared deviations of the second batch from mean_b.
    :return: Tuple (n, mean, s) of the combined batch.
    """
    if n_a == 0:
        return n_b, mean_b, s_b
    if n_b == 0:
        return n_a, mean_a, s_a

    n = n_a + n_b
    delta = mean_b - mean_a
    mean = mean_a + delta * n_b / n
    s = s_a + s_b + delta * delta * n_a * n_b / n
    return n, mean, s


def block_means(values, level):
    """ Means of consecutive, non-overlapping blocks of 2**level values.

    This is the direct (offline) counterpart of the values seen by a given
    binning level. An incomplete trailing block is dropped.

    Example:
        >>> block_means([2, 4, 6, 8, 10], 1)
        array([3., 7.])

    :param values: Array-like, the sample index runs along the first axis.
    :param level: Binning level, blocks contain 2**level values.
    :return: Numpy array with one entry (along the first axis) per block.
    """
    values = np.asanyarray(values, dtype=float)
    size = 2 ** level
    nblocks = values.shape[0] // size
    blocks = values[:nblocks * size].reshape((nblocks, size) + values.shape[1:])
    return np.mean(blocks, axis=1)


def ar1_chain(size, rho, sigma=1., initial=0., seed=None):
    """ Generate an autoregressive AR(1) sequence.

    x_t = rho * x_{t-1} + eps_t with independent gaussian eps_t of standard
    deviation sigma. For |rho| < 1 the integrated autocorrelation time is
    (1 + rho) / (1 - rho) / 2, which makes the sequence a convenient stand-in
    for a correlated Markov chain.

    :param size: Number of values to generate.
    :param rho: Lag-one correlation coefficient.
    :param sigma: Standard deviation of the innovations.
    :param initial: Value preceding the first generated entry.
    :param seed: Seed for numpy's random generator.
    :return: Numpy array of shape (size,).
    """
    rng = np.random.default_rng(seed)
    noise = rng.normal(0, sigma, size)
    chain, _ = lfilter([1.], [1., -rho], noise, zi=[rho * initial])
    return chain
