# -*- coding: utf-8 -*-
"""

"""
# SPDX-License-Identifier: GPL-3.0
__all__ = '''
AnimationConfig
Callbacks
DEFAULT_CONFIG
DIRECTIONS
FILL_MODES
INFINITE
CALLBACK_NAMES
make_callbacks
make_config
'''.split()

import math
import numbers

from amethyst.core import Object, Attr
from kivy.logger import Logger


INFINITE = math.inf

DIRECTIONS = ('none', 'reverse', 'alternate')

# "both" and "backwards" only differ from "forwards" and "none" in the
# state held during the delay, a rotation has none to hold.
FILL_MODES = {
    'forwards':  True,
    'both':      True,
    'none':      False,
    'backwards': False,
}

DEFAULT_CONFIG = (
    ('duration',        1.0),
    ('delay',           0.0),
    ('iteration_count', 1),
    ('direction',       'none'),
    ('fill_mode',       'forwards'),
    ('transition',      'linear'),
)
_DEFAULTS = dict(DEFAULT_CONFIG)


class AnimationConfig(Object):
    """
    Timing of a rotation animation. Build these with `make_config()`,
    which validates and never modifies an existing config.

    :ivar duration: Seconds for one full pass through the keyframes.
    :ivar delay: Seconds to wait before the first pass.
    :ivar iteration_count: Number of passes, or `INFINITE`.
    :ivar direction: "none", "reverse" or "alternate".
    :ivar fill_mode: "forwards" holds the final angle after the last
    pass, "none" restores the starting angle.
    :ivar transition: Kivy transition applied to each step.
    """
    duration = Attr(default=_DEFAULTS['duration'])
    delay = Attr(default=_DEFAULTS['delay'])
    iteration_count = Attr(default=_DEFAULTS['iteration_count'])
    direction = Attr(default=_DEFAULTS['direction'])
    fill_mode = Attr(default=_DEFAULTS['fill_mode'])
    transition = Attr(default=_DEFAULTS['transition'])

    @property
    def holds_final(self):
        return FILL_MODES[self.fill_mode]


class Callbacks(Object):
    """
    Optional animation callbacks, with kivy Animation event signatures
    minus the animation argument:

        on_start(widget)
        on_progress(widget, progression)
        on_complete(widget)
    """
    on_start = Attr()
    on_progress = Attr()
    on_complete = Attr()

CALLBACK_NAMES = ('on_start', 'on_progress', 'on_complete')


def _is_real(val):
    return isinstance(val, numbers.Real) and not isinstance(val, bool)

def _fields(obj, names):
    if obj is None:
        return {}
    if isinstance(obj, dict):
        unknown = set(obj) - set(names)
        if unknown:
            raise ValueError(f"Unknown keys: {', '.join(sorted(unknown))}")
        return dict(obj)
    return { name: getattr(obj, name) for name in names if getattr(obj, name, None) is not None }

def _check_config(values):
    for name in ('duration', 'delay'):
        val = values[name]
        if not _is_real(val) or not math.isfinite(val) or val < 0:
            raise ValueError(f"{name} must be a finite, non-negative number, not {val!r}")
        values[name] = float(val)

    count = values['iteration_count']
    if count != INFINITE:
        if not _is_real(count) or not math.isfinite(count) or count != int(count) or count < 1:
            raise ValueError(f"iteration_count must be a positive integer or INFINITE, not {count!r}")
        values['iteration_count'] = int(count)

    if values['direction'] not in DIRECTIONS:
        raise ValueError(f"direction must be one of {', '.join(DIRECTIONS)}, not {values['direction']!r}")
    if values['fill_mode'] not in FILL_MODES:
        raise ValueError(f"fill_mode must be one of {', '.join(FILL_MODES)}, not {values['fill_mode']!r}")
    if not isinstance(values['transition'], str) and not callable(values['transition']):
        raise ValueError(f"transition must be a kivy transition name or function, not {values['transition']!r}")


def make_config(config=None, duration=None, **overrides):
    """
    Return a new, immutable `AnimationConfig`. Values come from, in increasing
    precedence: `DEFAULT_CONFIG`, `config` (an AnimationConfig or dict),
    keyword `overrides`, and `duration`.

    `duration` is forgiving: anything other than a finite non-negative
    number is ignored and the configured duration kept. Other values are
    checked and raise `ValueError`.
    """
    values = dict(DEFAULT_CONFIG)
    values.update(_fields(config, _DEFAULTS))
    values.update(_fields(overrides, _DEFAULTS))

    if duration is not None:
        if _is_real(duration) and math.isfinite(duration) and duration >= 0:
            values['duration'] = duration
        else:
            Logger.debug(f"KVRotate: ignoring duration override {duration!r}, keeping {values['duration']!r}")

    _check_config(values)
    config = AnimationConfig(**values)
    config.amethyst_make_immutable()
    return config


def make_callbacks(callbacks=None, **overrides):
    """
    Return a new, immutable `Callbacks` from `callbacks` (a Callbacks or dict) and
    keyword `overrides`. Missing callbacks are None.
    """
    values = dict.fromkeys(CALLBACK_NAMES)
    values.update(_fields(callbacks, CALLBACK_NAMES))
    values.update(_fields(overrides, CALLBACK_NAMES))
    for name, cb in values.items():
        if cb is not None and not callable(cb):
            raise TypeError(f"{name} must be callable, not {cb!r}")
    callbacks = Callbacks(**values)
    callbacks.amethyst_make_immutable()
    return callbacks
