#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-3.0

import sys
from os.path import dirname, abspath, join
sys.path.insert(1, dirname(dirname(abspath(__file__))))
sys.argv = [ sys.argv[0] ]  # clear argv else kivy gets confused

import time
import unittest

from kivy.animation import Animation
from kivy.clock import Clock
from kivy.factory import Factory
from kivy.uix.widget import Widget

from kvrotate.config import make_config, INFINITE
from kvrotate.player import build, play, timeline
from kvrotate.rotate import rotate
from kvrotate.steps import plan, InvalidRotationError


class Dial(Widget):
    angle = Factory.NumericProperty(0)


def run_until(pred, timeout=3):
    end = time.time() + timeout
    while not pred() and time.time() < end:
        time.sleep(.01)
        Clock.tick()


class TimelineTest(unittest.TestCase):

    def test_timeline(self):
        segments = timeline(plan(270, True), 3)
        self.assertEqual([ angle for angle, dt in segments ], [-90, -180, -270])
        for (angle, dt), expect in zip(segments, (0.99, 0.99, 1.02)):
            self.assertAlmostEqual(dt, expect)

        segments = timeline(plan(45, False), 2, start=10)
        self.assertEqual(segments, [(45, 2)])

    def test_timeline_sums_to_duration(self):
        for degrees in (10, 90, 200.7, 725):
            segments = timeline(plan(degrees, False), 1.5)
            self.assertAlmostEqual(sum(dt for angle, dt in segments), 1.5)

    def test_timeline_reversed(self):
        segments = timeline(plan(270, True), 3, start=5, reverse=True)
        self.assertEqual([ angle for angle, dt in segments ], [-180, -90, 5])
        for (angle, dt), expect in zip(segments, (1.02, 0.99, 0.99)):
            self.assertAlmostEqual(dt, expect)


class BuildTest(unittest.TestCase):

    def test_single_step(self):
        anim = build(plan(45, True), make_config(duration=2))
        self.assertEqual(anim.animated_properties, {'angle': -45})
        self.assertAlmostEqual(anim.duration, 2)

    def test_durations(self):
        keyframes = plan(270, True)
        self.assertAlmostEqual(build(keyframes, make_config(duration=3)).duration, 3)
        self.assertAlmostEqual(build(keyframes, make_config(duration=3, delay=0.5)).duration, 3.5)
        for direction in ('none', 'reverse', 'alternate'):
            config = make_config(duration=3, iteration_count=2, direction=direction)
            self.assertAlmostEqual(build(keyframes, config).duration, 6, msg=direction)

    def test_property_name(self):
        anim = build(plan(30, False), make_config(), prop='rotation')
        self.assertEqual(anim.animated_properties, {'rotation': 30})

    def test_infinite(self):
        for direction in ('none', 'reverse', 'alternate'):
            anim = build(plan(45, True), make_config(iteration_count=INFINITE, direction=direction))
            self.assertTrue(anim.repeat, direction)

    def test_empty(self):
        with self.assertRaises(ValueError):
            build((), make_config())


class PlayTest(unittest.TestCase):

    def setUp(self):
        self.dial = Dial()
        self.events = []

    def tearDown(self):
        Animation.cancel_all(self.dial)

    def test_rotate(self):
        progress = []
        anim = rotate(self.dial, 270, True, duration=0.2, callbacks=dict(
            on_start=lambda w: self.events.append('start'),
            on_progress=lambda w, p: progress.append(w.angle),
            on_complete=lambda w: self.events.append('complete'),
        ))
        self.assertIsInstance(anim, Animation)
        run_until(lambda: 'complete' in self.events)

        self.assertEqual(self.events, ['start', 'complete'])
        self.assertEqual(self.dial.angle, -270)
        self.assertTrue(progress)
        self.assertEqual(progress, sorted(progress, reverse=True))
        self.assertTrue(all(-270 <= a <= 0 for a in progress))

    def test_counter_clockwise(self):
        rotate(self.dial, 200, False, duration=0.1, callbacks=dict(on_complete=lambda w: self.events.append('complete')))
        run_until(lambda: self.events)
        self.assertEqual(self.dial.angle, 200)

    def test_fill_none(self):
        self.dial.angle = 15
        config = make_config(fill_mode='none')
        rotate(self.dial, 90, False, duration=0.1, config=config,
               callbacks=dict(on_complete=lambda w: self.events.append(w.angle)))
        run_until(lambda: self.events)
        self.assertEqual(self.events, [15])
        self.assertEqual(self.dial.angle, 15)

    def test_reverse(self):
        play(self.dial, plan(180, True), make_config(duration=0.1, direction='reverse'),
             dict(on_complete=lambda w: self.events.append('complete')))
        run_until(lambda: self.events)
        self.assertEqual(self.dial.angle, 0)

    def test_alternate(self):
        play(self.dial, plan(180, True), make_config(duration=0.1, iteration_count=2, direction='alternate'),
             dict(on_complete=lambda w: self.events.append('complete')))
        run_until(lambda: self.events)
        self.assertEqual(self.events, ['complete'])
        self.assertEqual(self.dial.angle, 0)

        self.events.clear()
        play(self.dial, plan(180, True), make_config(duration=0.1, iteration_count=3, direction='alternate'),
             dict(on_complete=lambda w: self.events.append('complete')))
        run_until(lambda: self.events)
        self.assertEqual(self.dial.angle, -180)

    def test_delay(self):
        angles = []
        rotate(self.dial, 90, True, duration=0.1, config=dict(delay=0.2), callbacks=dict(
            on_progress=lambda w, p: angles.append((p, w.angle)),
            on_complete=lambda w: self.events.append('complete'),
        ))
        run_until(lambda: self.events)
        self.assertEqual(self.dial.angle, -90)
        # still at the start angle during the pause
        self.assertTrue(any(p < 0.5 and angle == 0 for p, angle in angles))

    def test_invalid(self):
        self.dial.angle = 30
        with self.assertRaises(InvalidRotationError):
            rotate(self.dial, 0, True, callbacks=dict(on_start=lambda w: self.events.append('start')))
        Clock.tick()
        self.assertEqual(self.events, [])
        self.assertEqual(self.dial.angle, 30)


if __name__ == '__main__':
    unittest.main()
