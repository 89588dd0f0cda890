# -*- coding: utf-8 -*-
"""
Split a rotation into keyframes no more than `STEP_LIMIT` degrees apart.

An animation between two absolute angles more than 180 degrees apart is
ambiguous to anything that interpolates a transform matrix, and even a
plain numeric interpolation looks wrong when one step spins the widget
more than a quarter turn. `plan()` chops the rotation into pieces and
hands each piece a share of the progress range in proportion to how much
of the rotation it covers, so the whole thing plays at a constant
angular rate.

    >>> plan(270, clockwise=True)
    (Keyframe(key=33, rotation=-90), Keyframe(key=66, rotation=-180), Keyframe(key=100, rotation=-270))
"""
# SPDX-License-Identifier: GPL-3.0
__all__ = '''
DuplicateKeyCollision
InvalidRotationError
Keyframe
RotationError
STEP_LIMIT
plan
'''.split()

import collections
import math
import numbers

from kivy.logger import Logger


STEP_LIMIT = 90

Keyframe = collections.namedtuple('Keyframe', 'key rotation')
Keyframe.__doc__ = """
Progress key (integer percent, 0..100) paired with the absolute angle
the widget should have reached at that point.
"""


class RotationError(ValueError):
    pass

class InvalidRotationError(RotationError):
    """Degrees (or step limit) is zero, negative, NaN, infinite or not a number."""
    pass

class DuplicateKeyCollision(RotationError):
    """
    Two steps floored to the same progress key. Happens once the rotation
    is more than 100 step limits long, the per-step share of the
    progress range then rounds down to zero.
    """
    def __init__(self, key, previous, rotation):
        super().__init__(f"Progress key {key} for rotation {rotation} collides with previous step at rotation {previous}")
        self.key = key
        self.previous = previous
        self.rotation = rotation


def _check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidRotationError(f"{name} must be a number, not {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidRotationError(f"{name} must be finite and positive, not {value!r}")


def plan(degrees, clockwise, step_limit=STEP_LIMIT):
    """
    Compute the keyframes for rotating `degrees` degrees.

    :param degrees: Total rotation, strictly positive.

    :param clockwise: Direction of rotation. Clockwise rotations produce
    negative angles (positive angles are counter-clockwise in kivy).

    :param step_limit: Largest rotation between two consecutive keyframes.

    Returns a tuple of `Keyframe` with strictly increasing keys. The last
    keyframe always has key 100 and rotation exactly `±degrees`.

    When float rounding leaves a sliver of rotation after the last full
    step (`plan(0.7, False, step_limit=0.1)`), the final keyframe repeats
    the previous angle and the animation holds still for its share.
    """
    _check_positive("degrees", degrees)
    _check_positive("step_limit", step_limit)

    sign = -1 if clockwise else 1
    tick = 100 / degrees            # progress per degree
    remaining = degrees
    cumulative = 0
    key = 0
    steps = []

    while True:
        rotation = min(remaining, step_limit)
        # Subtract the full limit: a short final step drives remaining
        # negative, which ends the loop.
        remaining -= step_limit
        cumulative += sign * rotation

        if remaining > 0:
            next_key = key + math.floor(tick * rotation)
            if next_key <= key:
                previous = steps[-1].rotation if steps else 0
                raise DuplicateKeyCollision(next_key, previous, cumulative)
            key = next_key
            steps.append(Keyframe(key, cumulative))
        else:
            steps.append(Keyframe(100, sign * degrees))
            break

    Logger.debug(f"KVRotate: planned {len(steps)} keyframe(s) for {degrees} degree(s) {'cw' if clockwise else 'ccw'}: {steps}")
    return tuple(steps)
