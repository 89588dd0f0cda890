# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-3.0

from kvrotate.behaviors.rotatable import RotatableBehavior
