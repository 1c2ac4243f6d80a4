from unittest import TestCase

import numpy as np

from rotkit import rotations as rk


class TestIsSimilar(TestCase):

    def test_same_rotation(self):

        angles = rk.EulerAnglesZyxD(0.3, 0.2, 0.1)

        others = [rk.EulerAnglesZyxD(0.3 + 2*np.pi, 0.2, 0.1 - 4*np.pi),
                  rk.EulerAnglesZyxF(0.3, 0.2, 0.1),
                  rk.RotationMatrixD(angles),
                  rk.RotationQuaternionD(angles),
                  rk.AngleAxisD(angles),
                  rk.RotationVectorD(angles),
                  rk.EulerAnglesXyzD(angles),
                  rk.EulerAnglesZyxD(0.3 + np.pi, np.pi - 0.2, 0.1 - np.pi)]

        for other in others:

            with self.subTest(other=repr(other)):

                tolerance = 1e-6 if other.scalar_type is np.float64 else 1e-5

                self.assertTrue(rk.is_similar(angles, other, tolerance=tolerance))
                self.assertTrue(rk.is_similar(other, angles, tolerance=tolerance))

    def test_different_rotation(self):

        angles = rk.EulerAnglesZyxD(0.3, 0.2, 0.1)

        self.assertFalse(rk.is_similar(angles, rk.EulerAnglesZyxD(0.3, 0.2, 0.1 + 1e-4)))

        self.assertFalse(rk.is_similar(angles, angles.inverted()))

        self.assertTrue(rk.is_similar(angles, rk.EulerAnglesZyxD(0.3, 0.2, 0.1 + 1e-4), tolerance=1e-3))

    def test_gimbal_lock(self):

        # only z + x is observable at a pitch of -pi/2
        self.assertTrue(rk.is_similar(rk.EulerAnglesZyxD(0.7, -np.pi/2, 0.4), rk.EulerAnglesZyxD(1.1, -np.pi/2, 0)))

        self.assertTrue(rk.is_similar(rk.EulerAnglesZyxD(0.3, np.pi/2, 0.2), rk.EulerAnglesZyxD(0.1, np.pi/2, 0)))

    def test_yaw_near_pi(self):

        self.assertTrue(rk.is_similar(rk.EulerAnglesZyxD(np.pi - 1e-9, 0.1, 0.2),
                                      rk.EulerAnglesZyxD(-np.pi + 1e-9, 0.1, 0.2)))

    def test_out_of_band_pitch(self):

        angles = rk.EulerAnglesZyxD(0., 2., 0.)

        self.assertTrue(rk.is_similar(angles, rk.RotationQuaternionD(angles)))

    def test_not_a_rotation(self):

        with self.assertRaises(TypeError):
            rk.is_similar(rk.EulerAnglesZyxD(), [0, 0, 0])

        with self.assertRaises(TypeError):
            rk.is_similar(np.eye(3), rk.RotationMatrixD())
