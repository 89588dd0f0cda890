# -*- coding: utf-8 -*-
"""
Play a keyframe sequence from `kvrotate.steps.plan()` on a widget using
kivy Animations.

Each keyframe becomes one `Animation` of the widget's angle property and
the pieces are chained with kivy's `+` sequencing. The keyframe angles
are absolute, so the animated property must not be normalized by the
widget (`Scatter.rotation` is, use `RotatableBehavior.angle` or another
plain NumericProperty).
"""
# SPDX-License-Identifier: GPL-3.0
__all__ = '''
build
play
timeline
'''.split()

from kivy.animation import Animation
from kivy.logger import Logger

from kvrotate.config import INFINITE, make_callbacks


def timeline(keyframes, duration, start=0, reverse=False):
    """
    Convert keyframes into `(angle, seconds)` segments. A keyframe gets
    the share of `duration` between its key and the previous one.

    With `reverse`, walks the keyframes backwards from the final angle
    to `start` with the same segment timings mirrored.
    """
    points = [ (0, start) ]
    points.extend(keyframes)
    segments = [ (angle, (key - points[n][0]) / 100 * duration)
                 for n, (key, angle) in enumerate(points[1:]) ]
    if not reverse:
        return segments
    return [ (points[n][1], seconds) for n, (angle, seconds) in reversed(list(enumerate(segments))) ]


def _chain(anims):
    anim = anims[0]
    for nxt in anims[1:]:
        anim = anim + nxt
    return anim

def _pass(keyframes, config, start, prop, reverse):
    return [ Animation(d=seconds, t=config.transition, **{prop: angle})
             for angle, seconds in timeline(keyframes, config.duration, start=start, reverse=reverse) ]

def _jump(prop, angle):
    return Animation(d=0, **{prop: angle})


def build(keyframes, config, start=0, prop='angle'):
    """
    Build (but do not start) the animation for `keyframes` as described
    by the `AnimationConfig` `config`. `start` is the angle the widget
    has when the animation starts.
    """
    if not keyframes:
        raise ValueError("No keyframes to animate")
    final = keyframes[-1].rotation

    if config.iteration_count == INFINITE:
        # Sequence.repeat restarts from anim1 so every repeated pass
        # begins with a jump into place.
        if config.direction == 'alternate':
            anims = _pass(keyframes, config, start, prop, False) + _pass(keyframes, config, start, prop, True)
        elif config.direction == 'reverse':
            anims = [ _jump(prop, final) ] + _pass(keyframes, config, start, prop, True)
        else:
            anims = [ _jump(prop, start) ] + _pass(keyframes, config, start, prop, False)
        anim = _chain(anims)
        anim.repeat = True

    else:
        anims = []
        for n in range(config.iteration_count):
            if config.direction == 'alternate':
                anims.extend(_pass(keyframes, config, start, prop, n % 2 == 1))
            elif config.direction == 'reverse':
                anims.append(_jump(prop, final))
                anims.extend(_pass(keyframes, config, start, prop, True))
            else:
                if n > 0:
                    anims.append(_jump(prop, start))
                anims.extend(_pass(keyframes, config, start, prop, False))
        anim = _chain(anims)

    if config.delay > 0:
        anim = Animation(d=config.delay) + anim
    return anim


def play(widget, keyframes, config, callbacks=None, prop='angle'):
    """
    Start animating `widget` through `keyframes` and return the kivy
    Animation. Does not wait for, or keep track of, the animation.

    :param callbacks: `Callbacks` or dict with optional `on_start`,
    `on_progress` and `on_complete` entries.

    :param prop: Name of the widget's (absolute, unnormalized) angle
    property.
    """
    callbacks = make_callbacks(callbacks)
    start = getattr(widget, prop)
    anim = build(keyframes, config, start=start, prop=prop)

    if callbacks.on_start is not None:
        anim.bind(on_start=lambda anim, w: callbacks.on_start(w))
    if callbacks.on_progress is not None:
        anim.bind(on_progress=lambda anim, w, progression: callbacks.on_progress(w, progression))

    holds_final = config.holds_final
    if not holds_final or callbacks.on_complete is not None:
        def on_complete(anim, w):
            if not holds_final:
                setattr(w, prop, start)
            if callbacks.on_complete is not None:
                callbacks.on_complete(w)
        anim.bind(on_complete=on_complete)

    Logger.debug(f"KVRotate: animating {widget!r}.{prop} from {start} through {len(keyframes)} keyframe(s) over {config.duration}s")
    anim.start(widget)
    return anim
