# We're subclassing pyglet (that'll handle graphics, sound output, and keyboard handling)
# and overriding whatever def we need from there. The interpreter itself only ever sees
# a snapshot of the 16 keys and hands back its display buffer.

import logging
import random

import pyglet
from pyglet.window import key
from pyglet.media import synthesis

from . import config
from .errors import Chip8Error

log = logging.getLogger(__name__)

# map binding keys - physical keyboard key -> CHIP-8 keypad
KEYMAPS = {
    "cosmac": {
        key._1: 0x1, key._2: 0x2, key._3: 0x3, key._4: 0xC,
        key.Q: 0x4, key.W: 0x5, key.E: 0x6, key.R: 0xD,
        key.A: 0x7, key.S: 0x8, key.D: 0x9, key.F: 0xE,
        key.Z: 0xA, key.X: 0x0, key.C: 0xB, key.V: 0xF,
    },
    "hex": {
        key._0: 0x0, key._1: 0x1, key._2: 0x2, key._3: 0x3,
        key._4: 0x4, key._5: 0x5, key._6: 0x6, key._7: 0x7,
        key._8: 0x8, key._9: 0x9, key.A: 0xA, key.B: 0xB,
        key.C: 0xC, key.D: 0xD, key.E: 0xE, key.F: 0xF,
    },
}


class Chip8Window(pyglet.window.Window):

    def __init__(self, vm, scale=config.scale, keymap="cosmac", show_fps=False):
        self.vm = vm
        self.pixel_scale = scale
        window_width = config.width * scale
        window_height = config.height * scale
        super().__init__(window_width, window_height, caption="CHIP-8 Emulator", resizable=False)

        self.keymap = KEYMAPS[keymap]
        self.keystate = key.KeyStateHandler()
        self.push_handlers(self.keystate)
        self.error = None

        self.image = pyglet.image.ImageData(
            window_width,
            window_height,
            'RGBA',
            vm.display.to_rgba(scale).tobytes()
        )

        # ---- Performance Counters ----
        self.show_fps = show_fps
        self._frame_counter = 0
        self.fps_label = pyglet.text.Label(
            "FPS: 0.0",
            font_size=12,
            x=5,
            y=window_height - 15,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )
        if show_fps:
            pyglet.clock.schedule_interval(self._update_fps, 1.0)

        self.sound_playing = False

        # one instruction per frame
        pyglet.clock.schedule_interval(self._frame, 1.0 / config.FRAME_HZ)

    # ---- Input ----
    def key_snapshot(self):
        keys = [False] * config.KEY_COUNT
        for symbol, chip8_key in self.keymap.items():
            if self.keystate[symbol]:
                keys[chip8_key] = True
        return keys

    def on_key_press(self, symbol, modifiers):
        #@Override
        if symbol == key.ESCAPE:
            self.close()
            return pyglet.event.EVENT_HANDLED
        if symbol == key.F1:
            root = logging.getLogger("chip8vm")
            root.setLevel(logging.INFO if root.getEffectiveLevel() <= logging.DEBUG else logging.DEBUG)
            log.info("debug logging %s", "on" if root.level == logging.DEBUG else "off")

    # ---- Frame ----
    def _frame(self, dt):
        try:
            self.vm.tick(self.key_snapshot())
        except Chip8Error as e:
            self.error = e
            self.close()
            return
        self._frame_counter += 1

        if self.vm.sound_active:
            if not self.sound_playing:
                self._play_beep()

    def close(self):
        pyglet.clock.unschedule(self._frame)
        pyglet.clock.unschedule(self._update_fps)
        super().close()

    def _update_fps(self, dt):
        self.fps_label.text = f"FPS: {self._frame_counter / dt:.1f}"
        self._frame_counter = 0

    # ---- Sound ----
    def _play_beep(self, pitch_variation=15):
        freq = config.BEEP_FREQUENCY + random.randint(-pitch_variation, pitch_variation)
        wave = synthesis.Sine(duration=config.BEEP_DURATION, frequency=freq, sample_rate=44100)

        player = pyglet.media.Player()
        player.queue(wave)
        player.play()
        self.sound_playing = True

        def on_eos():
            self.sound_playing = False
            player.delete()

        player.push_handlers(on_eos=on_eos)

    # ---- Drawing ----
    def on_draw(self):
        #@Override
        self.clear()
        if self.vm.display_dirty:
            frame = self.vm.display.to_rgba(self.pixel_scale)
            # updates existing image without creating new object
            self.image.set_data('RGBA', frame.shape[1] * 4, frame.tobytes())
            self.vm.display_dirty = False
        self.image.blit(0, 0)

        if self.show_fps:
            self.fps_label.draw()
