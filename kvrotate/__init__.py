# -*- coding: utf-8 -*-
"""
Rotate kivy widgets by any number of degrees with a linear animation,
without configuring a multi-step animation by hand.
"""
# SPDX-License-Identifier: GPL-3.0
__version__ = "1.0.0"

from kvrotate.steps import STEP_LIMIT, Keyframe, RotationError, InvalidRotationError, DuplicateKeyCollision, plan
from kvrotate.config import AnimationConfig, Callbacks, INFINITE, make_config, make_callbacks
from kvrotate.rotate import rotate
