from unittest import TestCase

import numpy as np

from rotkit import rotations as rk


def zyx_matrix(zyx):
    return rk.rot_z(zyx[0]) @ rk.rot_y(zyx[1]) @ rk.rot_x(zyx[2])


class TestFloatingPointModulo(TestCase):

    def test_floating_point_modulo(self):

        values = [(5., 2., 1.), (-0.5, 2., 1.5), (4., 2., 0.), (0., 2., 0.), (-4., 2., 0.),
                  (7*np.pi, 2*np.pi, np.pi)]

        for value, modulus, solu in values:

            with self.subTest(value=value, modulus=modulus):

                self.assertAlmostEqual(float(rk.floating_point_modulo(value, modulus)), solu)

    def test_open_end(self):

        # -tiny + modulus rounds onto modulus
        result = rk.floating_point_modulo(-1e-20, 2*np.pi)

        self.assertEqual(result, 0)

        result = rk.floating_point_modulo(np.array([-1e-20, -1e-300, 2*np.pi]), 2*np.pi)

        self.assertTrue(((result >= 0) & (result < 2*np.pi)).all())

    def test_dtype(self):

        result = rk.floating_point_modulo(np.float32(-0.5), 2)

        self.assertEqual(result.dtype, np.float32)
        self.assertAlmostEqual(float(result), 1.5)


class TestWrapAngle(TestCase):

    def test_wrap_angle(self):

        angles = [(0, 0), (np.pi, -np.pi), (-np.pi, -np.pi), (3*np.pi/2, -np.pi/2), (-3*np.pi/2, np.pi/2),
                  (2*np.pi + 0.1, 0.1), (-2*np.pi - 0.3, -0.3), (10., 10 - 4*np.pi)]

        for angle, solu in angles:

            with self.subTest(angle=angle):

                self.assertAlmostEqual(float(rk.wrap_angle(np.float64(angle))), solu, places=12)

    def test_range(self):

        rng = np.random.default_rng(7)

        angles = np.concatenate([rng.uniform(-100, 100, 1000), [np.pi, -np.pi, np.nextafter(np.pi, 0),
                                                                 np.nextafter(-np.pi, 0), 3*np.pi, -3*np.pi]])

        wrapped = rk.wrap_angle(angles)

        self.assertTrue((wrapped >= -np.pi).all())
        self.assertTrue((wrapped < np.pi).all())

        np.testing.assert_allclose(np.cos(wrapped), np.cos(angles), atol=1e-12)
        np.testing.assert_allclose(np.sin(wrapped), np.sin(angles), atol=1e-12)


class TestEulerZyxUnique(TestCase):

    def test_regular(self):

        unique = rk.euler_zyx_unique([0.3, 0.2, 0.1])

        np.testing.assert_allclose(unique, [0.3, 0.2, 0.1], atol=1e-15)

    def test_wrapping(self):

        unique = rk.euler_zyx_unique([2*np.pi + 0.1, 0.2, -2*np.pi - 0.3])

        np.testing.assert_allclose(unique, [0.1, 0.2, -0.3], atol=1e-12)

    def test_lower_singular_band(self):

        for pitch in [-np.pi/2, -np.pi/2 + 5e-4, -np.pi/2 - 5e-4, -np.pi/2 + 9e-4, -np.pi/2 - 9e-4]:

            with self.subTest(pitch=pitch):

                unique = rk.euler_zyx_unique([0.7, pitch, 0.4])

                np.testing.assert_allclose(unique, [1.1, pitch, 0], atol=1e-12)

    def test_upper_singular_band(self):

        for pitch in [np.pi/2, np.pi/2 + 5e-4, np.pi/2 - 5e-4, np.pi/2 - 9e-4]:

            with self.subTest(pitch=pitch):

                unique = rk.euler_zyx_unique([0.3, pitch, 0.2])

                np.testing.assert_allclose(unique, [0.1, pitch, 0], atol=1e-12)

    def test_collapsed_yaw_is_wrapped(self):

        unique = rk.euler_zyx_unique([3., -np.pi/2, 3.])

        np.testing.assert_allclose(unique, [6. - 2*np.pi, -np.pi/2, 0], atol=1e-12)

        unique = rk.euler_zyx_unique([-3., np.pi/2, 3.])

        np.testing.assert_allclose(unique, [2*np.pi - 6., np.pi/2, 0], atol=1e-12)

    def test_out_of_band(self):

        unique = rk.euler_zyx_unique([0., 2., 0.])

        np.testing.assert_allclose(unique, [-np.pi, np.pi - 2, -np.pi], atol=1e-12)

        np.testing.assert_allclose(zyx_matrix(unique), zyx_matrix([0., 2., 0.]), atol=1e-12)

        unique = rk.euler_zyx_unique([0.5, -2., -0.5])

        np.testing.assert_allclose(unique, [0.5 - np.pi, 2 - np.pi, np.pi - 0.5], atol=1e-12)

        np.testing.assert_allclose(zyx_matrix(unique), zyx_matrix([0.5, -2., -0.5]), atol=1e-12)

    def test_band_edges(self):

        tolerance = rk.UNIQUE_PITCH_TOLERANCE

        # just outside of the upper singular band the triple is flipped
        unique = rk.euler_zyx_unique([0.3, np.pi/2 + 2*tolerance, 0.2])

        self.assertLess(unique[1], np.pi/2)
        self.assertNotEqual(unique[2], 0)

        # just inside of the regular band nothing changes
        unique = rk.euler_zyx_unique([0.3, np.pi/2 - 2*tolerance, 0.2])

        np.testing.assert_allclose(unique, [0.3, np.pi/2 - 2*tolerance, 0.2], atol=1e-15)

        # pitch on the outer edges of the singular bands is treated as gimbal lock
        for pitch, yaw in [(np.pi/2 + tolerance, 0.1), (-np.pi/2 - tolerance, 0.5)]:

            with self.subTest(pitch=pitch):

                unique = rk.euler_zyx_unique([0.3, pitch, 0.2])

                self.assertEqual(unique[2], 0)
                self.assertAlmostEqual(unique[1], pitch, delta=1e-15)
                self.assertAlmostEqual(unique[0], yaw, delta=1e-15)

    def test_vectorized(self):

        angles = np.array([[2*np.pi + 0.1, 0.3, 0.],
                           [0.2, np.pi/2, 2.],
                           [-2*np.pi - 0.3, 0.2, 0.]])

        unique = rk.euler_zyx_unique(angles)

        self.assertEqual(unique.shape, (3, 3))

        np.testing.assert_allclose(unique, [[0.1, 0.1, -np.pi],
                                            [0.2, np.pi/2, np.pi - 2],
                                            [-0.3, 0, -np.pi]], atol=1e-12)

    def test_single_precision(self):

        unique = rk.euler_zyx_unique([2*np.pi + 0.1, 0.2, -2*np.pi - 0.3], dtype=np.float32)

        self.assertEqual(unique.dtype, np.float32)

        np.testing.assert_allclose(unique, [0.1, 0.2, -0.3], atol=1e-5)

    def test_collapse_logged(self):

        with self.assertLogs('rotkit.rotations.core.canonical', level='DEBUG'):
            rk.euler_zyx_unique([0.3, np.pi/2, 0.2])

    def test_idempotent(self):

        rng = np.random.default_rng(11)

        angles = rng.uniform(-3*np.pi, 3*np.pi, (3, 500))

        unique = rk.euler_zyx_unique(angles)
        twice = rk.euler_zyx_unique(unique)

        np.testing.assert_allclose(twice, unique, rtol=0, atol=4*np.finfo(np.float64).eps)

    def test_non_finite(self):

        unique = rk.euler_zyx_unique([np.nan, 0.1, 0.2])

        self.assertTrue(np.isnan(unique[0]))
