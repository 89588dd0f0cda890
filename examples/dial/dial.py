#!/usr/bin/python3
# -*- coding: utf-8 -*-
import os.path
import sys
import warnings
##
warnings.simplefilter('default')
warnings.filterwarnings('ignore', module=r'.*/kivy/.*')
##
from kivy.config import Config
Config.set('kivy', 'exit_on_escape', 1)
from kivy.app import App
from kivy.factory import Factory
from kivy.lang import Builder
##
sys.path.insert(1, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
import kvrotate.behaviors
from kvrotate import InvalidRotationError

Builder.load_string("""
<Needle@RotatableBehavior+Label>:
    text: "---->"
    font_size: 64

<MainScreen@BoxLayout>:
    orientation: "vertical"

    BoxLayout:
        orientation: "horizontal"
        size_hint_y: None
        height: 100
        TextInput:
            id: degrees
            hint_text: "degrees"
            input_filter: "float"
            multiline: False
        TextInput:
            id: duration
            hint_text: "seconds"
            input_filter: "float"
            multiline: False
        Button:
            text: "Clockwise"
            on_press: app.turn(degrees.text, duration.text, True)
        Button:
            text: "Counter-clockwise"
            on_press: app.turn(degrees.text, duration.text, False)

    Needle:
        id: needle

    Label:
        id: status
        size_hint_y: None
        height: 48
"""
)


class DialApp(App):
    def build(self):
        self.main = Factory.MainScreen()
        self.needle = self.main.ids['needle']
        return self.main

    def turn(self, degrees, duration, clockwise):
        try:
            degrees = float(degrees or 0)
        except ValueError:
            degrees = 0
        try:
            duration = float(duration)
        except ValueError:
            duration = None
        try:
            self.needle.rotate(degrees, clockwise, duration=duration, callbacks=dict(on_complete=self.on_turned))
        except InvalidRotationError as err:
            self.main.ids['status'].text = str(err)
            return
        self.main.ids['status'].text = "turning..."

    def on_turned(self, widget):
        self.main.ids['status'].text = f"heading {widget.angle:g}"

DialApp().run()
