from unittest import TestCase

from quat2eul import rotations as rot
from quat2eul.exceptions import InvalidSequenceError, Quat2EulError


class TestRotationSequence(TestCase):

    def test_families(self):

        repeated = {sequence.value for sequence in rot.RotationSequence
                    if sequence.family is rot.SequenceFamily.REPEATED_AXIS}
        distinct = {sequence.value for sequence in rot.RotationSequence
                    if sequence.family is rot.SequenceFamily.DISTINCT_AXIS}

        self.assertEqual(repeated, {'xyx', 'yzy', 'zxz', 'xzx', 'yxy', 'zyz'})
        self.assertEqual(distinct, {'xyz', 'yzx', 'zxy', 'xzy', 'yxz', 'zyx'})

    def test_parse(self):

        self.assertIs(rot.RotationSequence.parse('zyx'), rot.RotationSequence.ZYX)
        self.assertIs(rot.RotationSequence.parse('ZYX'), rot.RotationSequence.ZYX)
        self.assertIs(rot.RotationSequence.parse(' XyX\n'), rot.RotationSequence.XYX)
        self.assertIs(rot.RotationSequence.parse(rot.RotationSequence.YZX), rot.RotationSequence.YZX)

    def test_parse_invalid(self):

        for name in ['abc', 'xxy', 'xy', 'xyzx', '', 'x y z']:

            with self.subTest(name=name):

                with self.assertRaises(InvalidSequenceError):
                    rot.RotationSequence.parse(name)

        with self.assertRaises(InvalidSequenceError):
            rot.RotationSequence.parse(123)

    def test_error_hierarchy(self):

        self.assertTrue(issubclass(InvalidSequenceError, Quat2EulError))
        self.assertTrue(issubclass(InvalidSequenceError, ValueError))

    def test_axes(self):

        self.assertEqual(rot.RotationSequence.ZYX.axes, (2, 1, 0))
        self.assertEqual(rot.RotationSequence.XZX.axes, (0, 2, 0))
        self.assertEqual(str(rot.RotationSequence.YXZ), 'yxz')
