import numpy as np
from fractions import Fraction
from ..accumulators import *

from unittest import TestCase


class PairAccumulatorTest(TestCase):

    def test_push(self):
        pair = PairAccumulator()
        self.assertFalse(pair.full)
        self.assertIsNone(pair.push(2.))
        self.assertTrue(pair.full)
        self.assertEqual((3., 2.), pair.push(4.))
        self.assertFalse(pair.full)
        self.assertIsNone(pair.pending)

    def test_square_term(self):
        a, b = 1.25, -3.5
        promoted, square = PairAccumulator.combine(a, b)
        self.assertAlmostEqual((a + b) / 2, promoted)
        self.assertAlmostEqual(0.5 * (a - b) ** 2, square)

    def test_pair_functions(self):
        total = PairAccumulator.pair_T(1, 5)
        self.assertEqual(6, total)
        self.assertEqual(8, PairAccumulator.pair_S(1, 5, total))

    def test_fraction(self):
        promoted, square = PairAccumulator.combine(Fraction(1, 3), Fraction(1))
        self.assertEqual(Fraction(2, 3), promoted)
        self.assertEqual(Fraction(2, 9), square)

    def test_vector(self):
        promoted, square = PairAccumulator.combine(np.array([0., 2.]),
                                                   np.array([2., 2.]))
        self.assertTrue(np.array_equal([1., 2.], promoted))
        self.assertTrue(np.array_equal([2., 0.], square))


class LevelAccumulatorTest(TestCase):

    def test_boundaries(self):
        acc = LevelAccumulator()
        self.assertRaises(InsufficientData, acc.mean)
        self.assertIsNone(acc.push(2))
        self.assertRaises(InsufficientData, acc.mean)
        self.assertEqual(3, acc.push(4))
        self.assertEqual(3, acc.mean())
        self.assertRaises(InsufficientData, acc.var)
        self.assertIsNone(acc.push(6))
        self.assertRaises(InsufficientData, acc.var)
        self.assertEqual(7, acc.push(8))
        self.assertEqual(5, acc.mean())
        self.assertAlmostEqual(20 / 3, acc.var())

    def test_counts(self):
        acc = LevelAccumulator(level=2)
        for i in range(7):
            acc.push(float(i))
        self.assertEqual(2, acc.level)
        self.assertEqual(6, acc.nelements)
        self.assertEqual(3, acc.npairs)
        self.assertTrue(acc.full)
        self.assertEqual(6., acc.pair.pending)

    def test_exact(self):
        values = np.random.default_rng(5).normal(10, 3, 1000)
        acc = LevelAccumulator()
        for x in values:
            acc.push(x)
        self.assertAlmostEqual(np.mean(values), acc.mean())
        self.assertAlmostEqual(np.var(values, ddof=1), acc.var())
        self.assertGreaterEqual(acc.sumS, 0)

    def test_large_offset(self):
        # squared deviations are accumulated, not raw second moments
        values = 1e9 + np.random.default_rng(6).random(1000)
        acc = LevelAccumulator()
        for x in values:
            acc.push(x)
        self.assertAlmostEqual(np.var(values, ddof=1), acc.var(), 4)

    def test_fraction(self):
        acc = LevelAccumulator()
        values = [Fraction(i, 7) for i in (1, 4, 2, 9, 3, 3)]
        for x in values:
            acc.push(x)
        mean = sum(values) / 6
        var = sum((x - mean) ** 2 for x in values) / 5
        self.assertEqual(mean, acc.mean())
        self.assertEqual(var, acc.var())

    def test_vector(self):
        values = np.random.default_rng(7).random((64, 3))
        acc = LevelAccumulator()
        for x in values:
            acc.push(x)
        self.assertTrue(np.allclose(np.mean(values, axis=0), acc.mean()))
        self.assertTrue(np.allclose(np.var(values, axis=0, ddof=1), acc.var()))

    def test_idempotent(self):
        acc = LevelAccumulator()
        for x in (0.1, 0.7, 0.3, 0.2):
            acc.push(x)
        self.assertEqual(acc.mean(), acc.mean())
        self.assertEqual(acc.var(), acc.var())
