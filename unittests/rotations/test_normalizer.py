from unittest import TestCase

import numpy as np

from quat2eul import rotations as rot
from quat2eul.exceptions import DomainError


class TestVectorToQuaternion(TestCase):

    def test_vector_to_quaternion(self):

        np.testing.assert_array_almost_equal(rot.vector_to_quaternion([0, 0, 0.6]), [0.8, 0, 0, 0.6])
        np.testing.assert_array_equal(rot.vector_to_quaternion([0, 0, 0]), [1, 0, 0, 0])
        np.testing.assert_array_equal(rot.vector_to_quaternion([1, 0, 0]), [0, 1, 0, 0])

        quaternions = rot.vector_to_quaternion([[0, 0.6], [0, 0], [0, 0.8]])

        np.testing.assert_array_almost_equal(quaternions, [[1, 0], [0, 0.6], [0, 0], [0, 0.8]])

    def test_rounding_is_tolerated(self):

        quaternion = rot.vector_to_quaternion([0.6, 0.8, 0])

        self.assertEqual(quaternion[0], 0)
        np.testing.assert_array_equal(quaternion[1:], [0.6, 0.8, 0])

    def test_too_long(self):

        # x**2 + y**2 + z**2 = 1.2
        with self.assertRaises(DomainError):
            rot.vector_to_quaternion(np.sqrt([0.4, 0.4, 0.4]))

        with self.assertRaises(DomainError):
            rot.vector_to_quaternion([[0, 1], [0, 1], [0, 0]])

    def test_rejection_boundary(self):

        # squared lengths within the unit tolerance of 1 complete to w = 0, anything longer is rejected
        quaternion = rot.vector_to_quaternion([np.sqrt(1 + 5e-10), 0, 0])

        self.assertEqual(quaternion[0], 0)

        with self.assertRaises(DomainError):
            rot.vector_to_quaternion([np.sqrt(1 + 2e-9), 0, 0])

        with self.assertRaises(DomainError):
            rot.QuaternionNormalizer().from_imaginary(np.sqrt(1 + 2e-9), 0, 0)

    def test_not_finite(self):

        with self.assertRaises(DomainError):
            rot.vector_to_quaternion([np.nan, 0, 0])

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rot.vector_to_quaternion([0, 0])

        with self.assertRaises(ValueError):
            rot.vector_to_quaternion(0.5)


class TestHalfAnglesToQuaternion(TestCase):

    def test_half_angles_to_quaternion(self):

        np.testing.assert_array_almost_equal(rot.half_angles_to_quaternion([0, 0, np.pi / 2]),
                                             [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

        np.testing.assert_array_almost_equal(rot.half_angles_to_quaternion([np.pi / 3, 0, 0]),
                                             [np.sqrt(3) / 2, 0.5, 0, 0])

        np.testing.assert_array_equal(rot.half_angles_to_quaternion([0, 0, 0]), [1, 0, 0, 0])

    def test_domain(self):

        # both half angle sines are 1
        with self.assertRaises(DomainError):
            rot.half_angles_to_quaternion([np.pi, np.pi, 0])

        with self.assertRaises(DomainError):
            rot.half_angles_to_quaternion([np.inf, 0, 0])


class TestQuaternionNormalize(TestCase):

    def test_already_unit(self):

        quaternion = [0.5, 0.5, 0.5, 0.5]

        unit, renormalized, norm = rot.quaternion_normalize(quaternion)

        np.testing.assert_array_equal(unit, quaternion)
        self.assertFalse(renormalized)
        self.assertEqual(norm, 1)

    def test_renormalize(self):

        unit, renormalized, norm = rot.quaternion_normalize([1, 2, 3, 4])

        np.testing.assert_array_almost_equal(unit, np.array([1, 2, 3, 4]) / np.sqrt(30))
        self.assertTrue(renormalized)
        self.assertAlmostEqual(norm, np.sqrt(30))

    def test_sign_is_kept(self):

        unit, _, _ = rot.quaternion_normalize([-2, 0, 0, 0])

        np.testing.assert_array_equal(unit, [-1, 0, 0, 0])

    def test_tolerance(self):

        _, renormalized, _ = rot.quaternion_normalize([1 + 1e-12, 0, 0, 0])
        self.assertFalse(renormalized)

        _, renormalized, _ = rot.quaternion_normalize([1 + 1e-6, 0, 0, 0])
        self.assertTrue(renormalized)

        _, renormalized, _ = rot.quaternion_normalize([1 + 1e-6, 0, 0, 0], tolerance=1e-3)
        self.assertFalse(renormalized)

    def test_errors(self):

        with self.assertRaises(DomainError):
            rot.quaternion_normalize([0, 0, 0, 0])

        with self.assertRaises(DomainError):
            rot.quaternion_normalize([1, np.nan, 0, 0])

        with self.assertRaises(ValueError):
            rot.quaternion_normalize([[1, 0], [0, 1], [0, 0], [0, 0]])

        with self.assertRaises(ValueError):
            rot.quaternion_normalize([1, 0, 0])


class TestQuaternionNormalizer(TestCase):

    def test_imaginary(self):

        quaternion, notice = rot.QuaternionNormalizer().from_imaginary(0, 0, 0.7071)

        self.assertAlmostEqual(quaternion.w, 0.70711, places=5)
        self.assertEqual((quaternion.x, quaternion.y, quaternion.z), (0, 0, 0.7071))
        self.assertAlmostEqual(quaternion.norm, 1)

        self.assertIs(notice.mode, rot.InputMode.IMAGINARY)
        self.assertFalse(notice.renormalized)
        self.assertAlmostEqual(notice.input_norm, 0.7071)

    def test_imaginary_domain_error(self):

        with self.assertRaises(DomainError):
            rot.QuaternionNormalizer().from_imaginary(*np.sqrt([0.4, 0.4, 0.4]))

    def test_angles(self):

        quaternion, notice = rot.QuaternionNormalizer().from_angles(0, np.pi / 2, 0)

        np.testing.assert_array_almost_equal(quaternion.as_array(), [np.sqrt(2) / 2, 0, np.sqrt(2) / 2, 0])
        self.assertIs(notice.mode, rot.InputMode.ANGLES)
        self.assertFalse(notice.renormalized)
        self.assertAlmostEqual(notice.input_norm, np.sqrt(2) / 2)

        # the reported length is that of the half angle sines
        _, notice = rot.QuaternionNormalizer().from_angles(np.pi / 2, np.pi / 3, 0)

        self.assertAlmostEqual(notice.input_norm, np.sqrt(0.75))

    def test_components(self):

        quaternion, notice = rot.QuaternionNormalizer().from_components(1, 0, 0, 0)

        self.assertEqual(quaternion, rot.Quaternion(1, 0, 0, 0))
        self.assertIs(notice.mode, rot.InputMode.FULL)
        self.assertFalse(notice.renormalized)
        self.assertEqual(notice.message, 'quaternion accepted as given')

        quaternion, notice = rot.QuaternionNormalizer().from_components(0, 0, 0, 2)

        self.assertEqual(quaternion, rot.Quaternion(0, 0, 0, 1))
        self.assertTrue(notice.renormalized)
        self.assertEqual(notice.input_norm, 2)
        self.assertIn('renormalized', notice.message)

    def test_idempotent(self):

        normalizer = rot.QuaternionNormalizer()

        first, _ = normalizer.from_components(1, 2, 3, 4)

        second, notice = normalizer.from_components(*first)

        np.testing.assert_array_almost_equal(second.as_array(), first.as_array(), decimal=12)
        self.assertFalse(notice.renormalized)

    def test_zero_length(self):

        with self.assertRaises(DomainError):
            rot.QuaternionNormalizer().from_components(0, 0, 0, 0)

    def test_normalize_dispatch(self):

        normalizer = rot.QuaternionNormalizer()

        self.assertIs(normalizer.normalize([0, 0, 0.6]).notice.mode, rot.InputMode.IMAGINARY)
        self.assertIs(normalizer.normalize([1, 0, 0, 0]).notice.mode, rot.InputMode.FULL)
        self.assertIs(normalizer.normalize([0, 0, 1], mode='angles').notice.mode, rot.InputMode.ANGLES)
        self.assertIs(normalizer.normalize([0, 0, 1], mode=rot.InputMode.ANGLES).notice.mode, rot.InputMode.ANGLES)

        np.testing.assert_array_almost_equal(normalizer.normalize([0, 0, 0.6]).quaternion.as_array(), [0.8, 0, 0, 0.6])

    def test_normalize_bad_input(self):

        normalizer = rot.QuaternionNormalizer()

        with self.assertRaises(ValueError):
            normalizer.normalize([1, 2])

        with self.assertRaises(ValueError):
            normalizer.normalize([1, 2, 3, 4], mode='angles')

        with self.assertRaises(ValueError):
            normalizer.normalize([1, 2, 3], mode='full')

        with self.assertRaises(ValueError):
            normalizer.normalize([1, 2, 3], mode='polar')

    def test_logging(self):

        with self.assertLogs('quat2eul.rotations.normalizer', level='INFO') as logs:
            rot.normalize([2, 0, 0, 0])

        self.assertIn('renormalized', logs.output[0])

        with self.assertLogs('quat2eul.rotations.normalizer', level='INFO') as logs:
            rot.normalize([1, 0, 0, 0])

        self.assertIn('accepted as given', logs.output[0])

    def test_options(self):

        normalizer = rot.QuaternionNormalizer(rot.NormalizerOptions(unit_tolerance=1e-3))

        self.assertEqual(normalizer.unit_tolerance, 1e-3)

        _, notice = normalizer.from_components(1.0001, 0, 0, 0)

        self.assertFalse(notice.renormalized)

        normalizer.unit_tolerance = 1e-9

        _, notice = normalizer.from_components(1.0001, 0, 0, 0)

        self.assertTrue(notice.renormalized)

        normalizer.reset_settings()

        self.assertEqual(normalizer.unit_tolerance, 1e-3)
