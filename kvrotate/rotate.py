# -*- coding: utf-8 -*-
"""

"""
# SPDX-License-Identifier: GPL-3.0
__all__ = '''
rotate
'''.split()

from kivy.logger import Logger

from kvrotate.config import make_config
from kvrotate.player import play
from kvrotate.steps import STEP_LIMIT, plan


def rotate(widget, degrees, clockwise, duration=None, config=None, callbacks=None, prop='angle', step_limit=STEP_LIMIT):
    """
    Rotate `widget` with a linear animation of as many steps as needed,
    each step getting its share of `duration` in proportion to the
    degrees it covers.

        rotate(arrow, 270, clockwise=True, duration=2)

    Angles are absolute: `degrees` is where the widget ends up, as a
    clockwise or counter-clockwise angle from zero, not how far it turns
    from its current angle. The widget's current angle is not tracked,
    rotating to the angle a widget already has looks odd.

    :param degrees: Target rotation in degrees, strictly positive.

    :param clockwise: Whether to rotate clockwise.

    :param duration: Seconds. Overrides the duration from `config` when a
    finite non-negative number, ignored otherwise.

    :param config: `AnimationConfig` or dict (duration, delay,
    iteration_count, direction, fill_mode, transition). Defaults to one
    linear pass of 1 second holding the final angle. Never modified.

    :param callbacks: `Callbacks` or dict with optional `on_start`,
    `on_progress`, `on_complete` callables.

    :param prop: Name of the widget's angle property.

    Returns the running kivy Animation. Raises `InvalidRotationError`
    before anything is animated if `degrees` is not a finite positive
    number.
    """
    Logger.debug(f"KVRotate: rotate {widget!r} {degrees} degree(s) {'cw' if clockwise else 'ccw'}")
    keyframes = plan(degrees, clockwise, step_limit=step_limit)
    return play(widget, keyframes, make_config(config, duration=duration), callbacks, prop=prop)
