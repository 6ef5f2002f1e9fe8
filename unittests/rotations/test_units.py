from unittest import TestCase

import numpy as np

from quat2eul import rotations as rot


class TestToDegrees(TestCase):

    def test_to_degrees(self):

        degrees = rot.to_degrees(rot.EulerAngles(np.pi / 2, -np.pi / 4, np.pi))

        np.testing.assert_array_almost_equal(degrees.as_array(), [90, -45, 180])
        self.assertTrue(degrees.degrees)
        self.assertEqual(degrees.unit, 'deg')

    def test_already_degrees(self):

        degrees = rot.EulerAngles(90, 45, 10, degrees=True)

        self.assertIs(rot.to_degrees(degrees), degrees)

    def test_round_trip(self):

        for angles in [(0.1, 0.2, 0.3), (-3.0, 1.5, 2.9), (1e-12, -1e3, 7.5)]:

            with self.subTest(angles=angles):

                radians = rot.EulerAngles(*angles)

                back = rot.to_radians(rot.to_degrees(radians))

                self.assertFalse(back.degrees)
                np.testing.assert_allclose(back.as_array(), angles, rtol=0, atol=1e-9)

                # dividing by 180/pi by hand gives the same
                np.testing.assert_allclose(rot.to_degrees(radians).as_array() / (180 / np.pi), angles,
                                           rtol=0, atol=1e-9)


class TestToRadians(TestCase):

    def test_to_radians(self):

        radians = rot.to_radians(rot.EulerAngles(90, -45, 180, degrees=True))

        np.testing.assert_array_almost_equal(radians.as_array(), [np.pi / 2, -np.pi / 4, np.pi])
        self.assertEqual(radians.unit, 'rad')

    def test_already_radians(self):

        radians = rot.EulerAngles(1, 2, 3)

        self.assertIs(rot.to_radians(radians), radians)


class TestRepresentations(TestCase):

    def test_quaternion(self):

        quaternion = rot.Quaternion.from_array([[1], [2], [3], [4]])

        self.assertEqual(quaternion, rot.Quaternion(1, 2, 3, 4))
        self.assertEqual(list(quaternion), [1, 2, 3, 4])
        self.assertAlmostEqual(quaternion.norm, np.sqrt(30))
        self.assertEqual(str(rot.Quaternion(1, 0, 0, 0)), '[1.000000, 0.000000, 0.000000, 0.000000]')

        with self.assertRaises(ValueError):
            rot.Quaternion.from_array([1, 2, 3])

    def test_euler_angles(self):

        angles = rot.EulerAngles(0.5, 1, -2)

        psi, theta, phi = angles

        self.assertEqual((psi, theta, phi), (0.5, 1, -2))
        self.assertEqual(str(angles), '0.500000, 1.000000, -2.000000')

    def test_notice_messages(self):

        notice = rot.NormalizationNotice(rot.InputMode.IMAGINARY, False, 0.5)

        self.assertEqual(notice.message, 'scalar part completed from the unit constraint')

        notice = rot.NormalizationNotice(rot.InputMode.FULL, True, 2)

        self.assertEqual(notice.message, 'quaternion renormalized from length 2')
