# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Convert a quaternion into the euler angles of a rotation sequence from the command line.

The quaternion components are given after the sequence name in the order ``x y z [w]``, that is the imaginary part
first and the (optional) real part last::

    $ quat2eul zyx 0 0 0.7071
    q = [0.707114, 0.000000, 0.000000, 0.707100]
    scalar part completed from the unit constraint
    angles psi, theta, phi for zyx are in
    rad    1.570777, 0.000000, 0.000000
    deg    89.998901, 0.000000, 0.000000

With 3 components the real part is completed from the unit constraint, with 4 components the quaternion may have any
non-zero length and is normalized if needed.  ``--mode angles`` interprets 3 components as angles in radians whose half
angle sines form the imaginary part.

The convention is that the i-axis carries psi, the j-axis theta, and the k-axis phi.  psi is always the first angle,
then theta and lastly phi, so that ``v_new = R_k(phi) R_j(theta) R_i(psi) v_before`` with positive rotations being
right handed.  If the second angle is close to a singularity a notice is printed.

Input that cannot be converted (a bad sequence name or components that cannot form a unit quaternion) is reported on
stderr and the exit status is 1.
"""

import logging
import sys

from argparse import ArgumentParser
from typing import Sequence

from quat2eul import __version__
from quat2eul.exceptions import Quat2EulError
from quat2eul.rotations import (EulerConverter, InputMode, QuaternionNormalizer, RotationSequence, to_degrees)


_SEQUENCE_HELP = ('the rotation sequence: xyx, yzy, zxz, xzx, yxy, zyz (repeated axis) or '
                  'xyz, yzx, zxy, xzy, yxz, zyx (distinct axes).  Case is ignored')


def _get_parser() -> ArgumentParser:
    """
    Helper function for the argparse extension

    :return: A setup argument parser
    """

    parser = ArgumentParser(prog='quat2eul',
                            description='Convert a quaternion to the euler angles of a rotation sequence.',
                            epilog='example: quat2eul zyx 0 0 0.7071')

    parser.add_argument('sequence', help=_SEQUENCE_HELP)
    parser.add_argument('components', help='the components x y z [w] (real part last), or the angles x y z in radians '
                                           'when the mode is angles',
                        type=float, nargs='+')

    parser.add_argument('-m', '--mode', help='how to interpret the components.  Defaults to imaginary for 3 components '
                                             'and full for 4',
                        choices=[mode.value for mode in InputMode], default=None)
    parser.add_argument('-v', '--verbose', help='log diagnostic information to stderr', action='store_true')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line front end.

    :param argv: the arguments to parse.  If ``None`` they are taken from ``sys.argv``
    :return: the exit status
    """

    parser = _get_parser()

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.ERROR,
                        format='%(name)s %(levelname)s: %(message)s')

    components = list(args.components)

    if len(components) not in (3, 4):
        parser.error(f'expected 3 or 4 components, got {len(components)}')

    if args.mode is not None and (len(components) == 4) != (args.mode == InputMode.FULL.value):
        parser.error(f'{args.mode} mode does not take {len(components)} components')

    if len(components) == 4:
        # the real part comes last on the command line
        components = components[-1:] + components[:-1]

    try:
        sequence = RotationSequence.parse(args.sequence)

        quaternion, normalization_notice = QuaternionNormalizer().normalize(components, mode=args.mode)

        print(f'q = {quaternion}')
        print(normalization_notice.message)

        angles, singularity_notice = EulerConverter().convert(quaternion, sequence)

    except Quat2EulError as err:
        print(f'error: {err}', file=sys.stderr)
        return 1

    if singularity_notice.near_singularity:
        print(singularity_notice.message)

    print(f'angles psi, theta, phi for {sequence} are in')
    print(f'rad    {angles}')
    print(f'deg    {to_degrees(angles)}')

    return 0


if __name__ == '__main__':

    sys.exit(main())
