import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class RecordingAudio:
    """Audio backend that remembers every command it was given."""

    def __init__(self):
        self.commands = []
        self.playing = set()

    def play(self, name):
        self.commands.append(("play", name))
        if name == "background":
            self.playing.add(name)

    def pause(self, name):
        self.commands.append(("pause", name))
        self.playing.discard(name)

    def is_playing(self, name):
        return name in self.playing


def scripted(values, default=1):
    """random_uint stand-in replaying ``values`` and then ``default`` forever."""
    it = iter(values)
    return lambda: next(it, default)
