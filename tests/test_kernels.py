import math
import unittest
import numpy as np
import bayreg as br
import bayreg.num as bnp
from bayreg.kernel import (
    RBFKernel,
    Matern32Kernel,
    MaternKernel,
    PeriodicKernel,
    LinearKernel,
    create_kernel,
    KERNEL_TYPES,
    rbf_kernel,
    matern32_kernel,
)


class TestKernelFormulas(unittest.TestCase):
    def test_rbf(self):
        k = RBFKernel(length_scale=2.0, signal_variance=3.0)
        self.assertAlmostEqual(k.compute(1.0, 1.0), 3.0)
        self.assertAlmostEqual(k.compute(0.0, 1.0), 3.0 * math.exp(-1.0 / 8.0))

    def test_matern32(self):
        k = Matern32Kernel(length_scale=0.5, signal_variance=2.0)
        t = math.sqrt(3.0) * 0.7 / 0.5
        self.assertAlmostEqual(k.compute(0.2, 0.9), 2.0 * (1.0 + t) * math.exp(-t))
        self.assertIs(MaternKernel, Matern32Kernel)

    def test_periodic(self):
        k = PeriodicKernel(length_scale=0.8, signal_variance=1.5, period=2.5)
        r = 1.1
        expected = 1.5 * math.exp(-2.0 * math.sin(math.pi * r / 2.5) ** 2 / 0.8**2)
        self.assertAlmostEqual(k.compute(0.3, 0.3 + r), expected)
        # exact repetition after one period
        self.assertAlmostEqual(k.compute(0.0, 2.5), 1.5)
        self.assertAlmostEqual(k.compute(0.0, 1.0), k.compute(0.0, 3.5))

    def test_linear(self):
        k = LinearKernel(signal_variance=0.5, bias_variance=1.0, center=5.0)
        self.assertAlmostEqual(k.compute(1.0, 7.0), 1.0 + 0.5 * (-4.0) * 2.0)
        self.assertAlmostEqual(k.compute(5.0, 123.0), 1.0)

    def test_correlation_functions(self):
        h = np.array([0.0, 0.5, 2.0, np.inf])
        self.assertTrue(np.allclose(rbf_kernel(h), [1.0, math.exp(-0.125), math.exp(-2.0), 0.0]))
        r = matern32_kernel(h)
        self.assertEqual(r[0], 1.0)
        self.assertEqual(r[-1], 0.0)
        self.assertTrue(np.all(np.diff(r) < 0.0))


class TestKernelMatrices(unittest.TestCase):
    def setUp(self):
        self.x = np.array([0.0, 0.4, 1.3, 2.0, 5.5])
        self.kernels = [create_kernel(t, length_scale=0.9, signal_variance=1.7) for t in KERNEL_TYPES]

    def test_symmetry_and_consistency(self):
        for k in self.kernels:
            K = k.compute_matrix(self.x)
            self.assertEqual(K.shape, (5, 5))
            self.assertTrue(np.allclose(K, K.T), k.name)
            for i in range(5):
                for j in range(5):
                    self.assertAlmostEqual(K[i, j], k.compute(self.x[i], self.x[j]), msg=k.name)
                    self.assertAlmostEqual(k.compute(self.x[i], self.x[j]), k.compute(self.x[j], self.x[i]))

    def test_rectangular_and_diag(self):
        xt = np.linspace(-1.0, 6.0, 7)
        for k in self.kernels:
            K = k.compute_matrix(xt, self.x)
            self.assertEqual(K.shape, (7, 5))
            self.assertTrue(np.allclose(k.compute_diag(xt), np.diag(k.compute_matrix(xt))))
            self.assertTrue(np.allclose(k(xt, self.x), K))

    def test_stationary_diag_is_signal_variance(self):
        for k in self.kernels[:3]:
            self.assertTrue(np.allclose(k.compute_diag(self.x), 1.7))

    def test_positive_semidefinite(self):
        x = np.linspace(0.0, 10.0, 30)
        for k in self.kernels:
            eigvals = np.linalg.eigvalsh(k.compute_matrix(x))
            self.assertGreater(eigvals.min(), -1e-8 * eigvals.max(), k.name)

    def test_profile(self):
        h = np.linspace(-3.0, 3.0, 11)
        k = RBFKernel(1.0, 2.0)
        self.assertTrue(np.allclose(k.profile(h), 2.0 * np.exp(-0.5 * h**2)))
        lin = LinearKernel()
        self.assertTrue(np.allclose(lin.profile(h, reference=6.0), 1.0 + 0.5 * (1.0 + h)))


class TestDegenerateHyperparameters(unittest.TestCase):
    def test_tiny_length_scale(self):
        x = np.linspace(0.0, 1.0, 4)
        for t in ["rbf", "matern", "periodic"]:
            for ls in [1e-12, 1e-300, 0.0]:
                k = create_kernel(t, length_scale=ls)
                K = k.compute_matrix(x)
                self.assertTrue(np.all(np.isfinite(K)), (t, ls))
                self.assertTrue(np.allclose(np.diag(K), 1.0), (t, ls))

    def test_tiny_length_scale_rbf_matern_off_diagonal(self):
        x = np.array([0.0, 0.5])
        for t in ["rbf", "matern"]:
            K = create_kernel(t, length_scale=1e-300).compute_matrix(x)
            self.assertEqual(K[0, 1], 0.0)

    def test_hyperparameters_are_mutable(self):
        k = RBFKernel(1.0, 1.0)
        before = k.compute(0.0, 1.0)
        k.length_scale = 3.0
        self.assertGreater(k.compute(0.0, 1.0), before)
        self.assertEqual(k.parameters, {"length_scale": 3.0, "signal_variance": 1.0})


class TestFactory(unittest.TestCase):
    def test_types(self):
        self.assertIsInstance(create_kernel("rbf"), RBFKernel)
        self.assertIsInstance(create_kernel("matern"), Matern32Kernel)
        self.assertIsInstance(create_kernel("periodic"), PeriodicKernel)
        self.assertIsInstance(create_kernel("linear"), LinearKernel)

    def test_parameters_forwarded(self):
        k = create_kernel("periodic", length_scale=0.3, signal_variance=2.0)
        self.assertEqual((k.length_scale, k.signal_variance, k.period), (0.3, 2.0, 3.0))
        lin = create_kernel("linear", length_scale=7.0, signal_variance=2.0)
        self.assertEqual((lin.signal_variance, lin.bias_variance, lin.center), (2.0, 1.0, 5.0))

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            create_kernel("cosine")

    def test_repr(self):
        self.assertEqual(repr(RBFKernel(2.0, 0.5)), "RBFKernel(length_scale=2.0, signal_variance=0.5)")
        self.assertIn("period=3.0", repr(PeriodicKernel()))
        self.assertEqual(br.kernel.create_kernel("rbf").name, "RBF")


if __name__ == "__main__":
    unittest.main()
