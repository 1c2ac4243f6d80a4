from unittest import TestCase

import numpy as np

from rotkit import rotations as rk


def zyx_matrix(zyx):
    return rk.rot_z(zyx[0]) @ rk.rot_y(zyx[1]) @ rk.rot_x(zyx[2])


class TestRotationQuaternion(TestCase):

    def test_init(self):

        np.testing.assert_array_equal(rk.RotationQuaternion().to_implementation(), [0, 0, 0, 1])

        q = rk.RotationQuaternionD([1, 2, 3, 4])

        np.testing.assert_array_almost_equal(q.to_implementation(), np.array([1, 2, 3, 4])/np.sqrt(30))

        q = rk.RotationQuaternionD([np.sqrt(2)/2, 0, 0, -np.sqrt(2)/2])

        np.testing.assert_array_almost_equal(q.to_implementation(), [-np.sqrt(2)/2, 0, 0, np.sqrt(2)/2])

        q = rk.RotationQuaternionF([1, 2, 3, 4])

        self.assertEqual(q.to_implementation().dtype, np.float32)

        with self.assertRaises(ValueError):
            rk.RotationQuaternion([1, 2, 3])

    def test_from_rotation(self):

        q = rk.RotationQuaternionD(rk.EulerAnglesZyxD(0.5, 0, 0))

        np.testing.assert_allclose(q.to_implementation(), [0, 0, np.sin(0.25), np.cos(0.25)], atol=1e-15)

        # the scalar is kept non-negative
        q = rk.RotationQuaternionD(rk.AngleAxisD(3*np.pi/2, [0, 0, 1]))

        np.testing.assert_allclose(q.to_implementation(), [0, 0, -np.sqrt(2)/2, np.sqrt(2)/2], atol=1e-15)

    def test_vector_scalar(self):

        q = rk.RotationQuaternionD([1, 2, 3, 4])

        np.testing.assert_array_almost_equal(q.vector, np.array([1, 2, 3])/np.sqrt(30))
        self.assertAlmostEqual(q.scalar, 4/np.sqrt(30))

    def test_inverted(self):

        q = rk.RotationQuaternionD([1, 2, 3, 4])

        np.testing.assert_array_almost_equal(q.inverted().to_implementation(), np.array([-1, -2, -3, 4])/np.sqrt(30))

        result = q.invert()

        self.assertIs(result, q)
        np.testing.assert_array_almost_equal(q.to_implementation(), np.array([-1, -2, -3, 4])/np.sqrt(30))

    def test_rotation_matrix(self):

        q = rk.RotationQuaternionD([0, 0, np.sqrt(2)/2, np.sqrt(2)/2])

        np.testing.assert_array_almost_equal(q.to_rotation_matrix_array(), [[0, -1, 0], [1, 0, 0], [0, 0, 1]])


class TestAngleAxis(TestCase):

    def test_init(self):

        np.testing.assert_array_equal(rk.AngleAxis().to_implementation(), [0, 1, 0, 0])

        aa = rk.AngleAxisD(0.5, [0, 0, 2])

        self.assertEqual(aa.angle, 0.5)
        np.testing.assert_array_equal(aa.axis, [0, 0, 1])

        with self.assertRaises(ValueError):
            rk.AngleAxis(0.5)

        with self.assertRaises(ValueError):
            rk.AngleAxis(axis=[0, 0, 1])

        with self.assertRaises(ValueError):
            rk.AngleAxis(0.5, [0, 0, 0])

        with self.assertRaises(ValueError):
            rk.AngleAxis(0.5, [0, 1])

    def test_setters(self):

        aa = rk.AngleAxisD()

        aa.angle = 1.5
        aa.axis = [0, 3, 4]

        self.assertEqual(aa.angle, 1.5)
        np.testing.assert_array_almost_equal(aa.axis, [0, 0.6, 0.8])

        with self.assertRaises(ValueError):
            aa.axis = [0, 0, 0]

    def test_from_rotation(self):

        aa = rk.AngleAxisD(rk.RotationQuaternionD())

        np.testing.assert_array_equal(aa.to_implementation(), [0, 1, 0, 0])

        aa = rk.AngleAxisD(rk.EulerAnglesZyxD(0, 0.5, 0))

        self.assertAlmostEqual(aa.angle, 0.5)
        np.testing.assert_array_almost_equal(aa.axis, [0, 1, 0])

    def test_quaternion(self):

        q = rk.AngleAxisD(0.5, [0, 0, 1]).to_quaternion_array()

        np.testing.assert_array_almost_equal(q, [0, 0, np.sin(0.25), np.cos(0.25)])

        half_angle = np.float64(np.float32(0.3)) / 2

        q = rk.AngleAxisF(0.3, [0, 0, 1]).to_quaternion_array(dtype=np.float64)

        self.assertEqual(q.dtype, np.float64)
        np.testing.assert_allclose(q, [0, 0, np.sin(half_angle), np.cos(half_angle)], rtol=0, atol=1e-15)

        self.assertEqual(rk.AngleAxisF(0.3, [0, 0, 1]).to_quaternion_array().dtype, np.float32)

    def test_inverted(self):

        aa = rk.AngleAxisD(0.5, [0, 0, 1]).inverted()

        self.assertEqual(aa.angle, -0.5)
        np.testing.assert_array_equal(aa.axis, [0, 0, 1])


class TestRotationVector(TestCase):

    def test_init(self):

        np.testing.assert_array_equal(rk.RotationVector().to_implementation(), [0, 0, 0])

        np.testing.assert_array_equal(rk.RotationVectorD([1, 2, 3]).vector, [1, 2, 3])

        with self.assertRaises(ValueError):
            rk.RotationVector([1, 2])

    def test_from_rotation(self):

        rvec = rk.RotationVectorD(rk.EulerAnglesZyxD(0.5, 0, 0))

        np.testing.assert_array_almost_equal(rvec.vector, [0, 0, 0.5])

        rvec = rk.RotationVectorD(rk.RotationQuaternionD())

        np.testing.assert_array_equal(rvec.vector, [0, 0, 0])

    def test_quaternion(self):

        np.testing.assert_array_almost_equal(rk.RotationVectorD([1, 2, 3]).to_quaternion_array(),
                                             [0.25532186, 0.51064372, 0.76596558, -0.29555113])

        np.testing.assert_array_equal(rk.RotationVectorD().to_quaternion_array(), [0, 0, 0, 1])

    def test_inverted(self):

        np.testing.assert_array_equal(rk.RotationVectorD([1, 2, 3]).inverted().vector, [-1, -2, -3])


class TestRotationMatrix(TestCase):

    def test_init(self):

        np.testing.assert_array_equal(rk.RotationMatrix().matrix, np.eye(3))

        matrix = rk.RotationMatrixD([[0, -1, 0], [1, 0, 0], [0, 0, 1]])

        np.testing.assert_array_equal(matrix.matrix, [[0, -1, 0], [1, 0, 0], [0, 0, 1]])

        self.assertEqual(rk.RotationMatrixF().matrix.dtype, np.float32)

        with self.assertRaises(ValueError):
            rk.RotationMatrix([1, 2, 3])

    def test_from_rotation(self):

        # pure yaw
        srt2d2 = np.sqrt(2)/2

        matrix = rk.RotationMatrixD(rk.EulerAnglesZyxD(np.pi/4, 0, 0))

        np.testing.assert_allclose(matrix.matrix, [[srt2d2, -srt2d2, 0], [srt2d2, srt2d2, 0], [0, 0, 1]],
                                   atol=1e-15)

        matrix = rk.RotationMatrixD(rk.RotationQuaternionD([0, 0, np.sqrt(2)/2, np.sqrt(2)/2]))

        np.testing.assert_array_almost_equal(matrix.matrix, [[0, -1, 0], [1, 0, 0], [0, 0, 1]])

    def test_quaternion(self):

        q = rk.RotationMatrixD([[0, 1, 0], [-1, 0, 0], [0, 0, 1]]).to_quaternion_array()

        np.testing.assert_array_almost_equal(q, [0, 0, -np.sqrt(2)/2, np.sqrt(2)/2])

    def test_matrix_is_a_copy(self):

        matrix = rk.RotationMatrixD()

        copy = matrix.matrix
        copy[0, 0] = 5

        np.testing.assert_array_equal(matrix.matrix, np.eye(3))

    def test_inverted(self):

        rmat = zyx_matrix([0.3, 0.2, 0.1])

        matrix = rk.RotationMatrixD(rmat)

        np.testing.assert_array_equal(matrix.inverted().matrix, rmat.T)
        np.testing.assert_array_equal(matrix.transposed().matrix, rmat.T)

        matrix.invert()

        np.testing.assert_array_equal(matrix.matrix, rmat.T)


class TestEulerAnglesXyz(TestCase):

    def test_init(self):

        np.testing.assert_array_equal(rk.EulerAnglesXyz().vector(), [0, 0, 0])

        angles = rk.EulerAnglesXyzD(0.1, 0.2, 0.3)

        self.assertEqual(angles.x, 0.1)
        self.assertEqual(angles.y, 0.2)
        self.assertEqual(angles.z, 0.3)

        np.testing.assert_array_equal(rk.EulerAnglesXyzD([0.1, 0.2, 0.3]).vector(), [0.1, 0.2, 0.3])

        with self.assertRaises(ValueError):
            rk.EulerAnglesXyz(0.1, 0.2)

        with self.assertRaises(ValueError):
            rk.EulerAnglesXyz([0.1, 0.2])

    def test_rotation_matrix(self):

        rmat = rk.rot_x(0.1) @ rk.rot_y(0.2) @ rk.rot_z(0.3)

        np.testing.assert_allclose(rk.EulerAnglesXyzD(0.1, 0.2, 0.3).to_rotation_matrix_array(), rmat, atol=1e-14)

        np.testing.assert_allclose(rk.EulerAnglesXyzD(rk.RotationMatrixD(rmat)).vector(), [0.1, 0.2, 0.3],
                                   atol=1e-12)

    def test_from_zyx(self):

        # a rotation about a single axis has the same angle in both sequences
        angles = rk.EulerAnglesXyzD(rk.EulerAnglesZyxD(0, 0.4, 0))

        np.testing.assert_allclose(angles.vector(), [0, 0.4, 0], atol=1e-15)

        angles = rk.EulerAnglesZyxD(rk.EulerAnglesXyzD(0.1, 0.2, 0.3))

        np.testing.assert_allclose(angles.to_rotation_matrix_array(),
                                   rk.rot_x(0.1) @ rk.rot_y(0.2) @ rk.rot_z(0.3), atol=1e-12)

    def test_inverted(self):

        angles = rk.EulerAnglesXyzD(0.1, 0.2, 0.3)

        np.testing.assert_allclose(angles.inverted().to_rotation_matrix_array(), angles.to_rotation_matrix_array().T,
                                   atol=1e-12)
