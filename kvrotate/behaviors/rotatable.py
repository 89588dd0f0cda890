# -*- coding: utf-8 -*-
"""

"""
# SPDX-License-Identifier: GPL-3.0
__all__ = '''
RotatableBehavior
'''.split()

from kivy.factory import Factory
from kivy.lang import Builder

from kvrotate.rotate import rotate as rotate_widget
from kvrotate.steps import STEP_LIMIT


Builder.load_string('''
<RotatableBehavior>:
    canvas.before:
        PushMatrix
        Rotate:
            angle: self.angle
            origin: self.center
    canvas.after:
        PopMatrix
''')


class RotatableBehavior(object):
    """
    Draw a widget rotated by `angle` degrees (counter-clockwise) about its
    center. Unlike `Scatter.rotation`, `angle` is never wrapped to
    0..360, so it can be animated through absolute keyframes:

        class Arrow(RotatableBehavior, Image):
            pass

        arrow.rotate(270, clockwise=True, duration=2)
    """
    angle = Factory.NumericProperty(0)

    def rotate(self, degrees, clockwise, duration=None, config=None, callbacks=None, step_limit=STEP_LIMIT):
        """See `kvrotate.rotate.rotate`."""
        return rotate_widget(self, degrees, clockwise, duration=duration, config=config,
                             callbacks=callbacks, prop='angle', step_limit=step_limit)


Factory.register("RotatableBehavior", RotatableBehavior)
