"""Procedural sound generation and playback for the munch and music clips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Set

import numpy as np
import pygame

from config import BACKGROUND_SOUND, MUNCH_SOUND, settings_data
from logging_utils import log_debug


@dataclass(frozen=True)
class SoundSpec:
    """Configuration for a procedurally generated sound."""

    frequency: int
    duration: float
    volume_key: str
    waveform: str = "sine"
    loop: bool = False


class SoundManager:
    """Named-clip playback: ``play``, ``pause`` and ``is_playing``.

    Every call is fire-and-forget. When the mixer is unavailable the manager
    stays silent and only logs.
    """

    SAMPLE_RATE = 44_100

    def __init__(self, enable_audio: bool = True) -> None:
        self.sound_specs: Dict[str, SoundSpec] = {
            MUNCH_SOUND: SoundSpec(frequency=520, duration=0.18, volume_key="SFX_VOLUME", waveform="chirp"),
            BACKGROUND_SOUND: SoundSpec(frequency=220, duration=4.0, volume_key="MUSIC_VOLUME",
                                        waveform="chord", loop=True),
        }
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self._channels: Dict[str, Optional[pygame.mixer.Channel]] = {}
        self._paused: Set[str] = set()
        self.enabled = False

        if enable_audio:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init(frequency=self.SAMPLE_RATE, size=-16, channels=2)
                pygame.mixer.set_num_channels(max(8, len(self.sound_specs)))
                self.enabled = True
            except pygame.error as exc:
                log_debug(f"SoundManager mixer init failed: {exc}")
                self.enabled = False
        if self.enabled:
            log_debug("SoundManager initialising procedural sounds")
            self._prepare_sounds()
        else:
            log_debug("SoundManager running without audio output")

    def _prepare_sounds(self) -> None:
        for key, spec in self.sound_specs.items():
            try:
                self.sounds[key] = self._create_sound(spec)
                log_debug(f"Prepared sound '{key}' with spec {spec}")
            except (RuntimeError, ValueError, pygame.error) as exc:
                log_debug(f"Failed to prepare sound '{key}': {exc}")
                self.enabled = False
                self.sounds.clear()
                break

    def _wave(self, spec: SoundSpec) -> np.ndarray:
        sample_count = max(1, int(self.SAMPLE_RATE * spec.duration))
        t = np.linspace(0, spec.duration, sample_count, endpoint=False, dtype=np.float32)
        if spec.waveform == "chirp":
            # quick upward sweep with a decaying tail
            sweep = np.sin(2 * np.pi * (spec.frequency + spec.frequency * 2 * t) * t)
            return sweep * np.linspace(1.0, 0.0, sample_count) ** 2
        if spec.waveform == "chord":
            beat = spec.duration / 8
            wave = np.zeros(sample_count, dtype=np.float32)
            for i, ratio in enumerate((1.0, 1.25, 1.5, 2.0, 1.5, 1.25, 1.0, 0.75)):
                start = int(i * beat * self.SAMPLE_RATE)
                end = min(sample_count, int((i + 1) * beat * self.SAMPLE_RATE))
                local = t[start:end] - t[start]
                tone = (
                    np.sin(2 * np.pi * spec.frequency * ratio * local)
                    + 0.4 * np.sin(2 * np.pi * spec.frequency * 2 * local)
                )
                wave[start:end] = tone * np.linspace(0.8, 0.3, end - start)
            peak = np.max(np.abs(wave))
            return wave / peak if peak > 0 else wave
        return np.sin(2 * np.pi * spec.frequency * t)

    def _create_sound(self, spec: SoundSpec) -> pygame.mixer.Sound:
        wave = np.clip(self._wave(spec), -1.0, 1.0)
        audio = np.stack((wave, wave), axis=1)
        int_audio = np.ascontiguousarray((audio * 32_767).astype(np.int16))
        sound = pygame.sndarray.make_sound(int_audio)
        sound.set_volume(float(settings_data.get(spec.volume_key, 0.5)))
        return sound

    def is_playing(self, key: str) -> bool:
        if key in self._paused:
            return False
        channel = self._channels.get(key)
        return bool(channel is not None and channel.get_busy())

    def play(self, key: str) -> None:
        if not self.enabled:
            log_debug(f"Skipped playing '{key}' (audio disabled)")
            return
        sound = self.sounds.get(key)
        if sound is None:
            log_debug(f"Sound '{key}' not found")
            return
        channel = self._channels.get(key)
        if key in self._paused and channel is not None:
            channel.unpause()
            self._paused.discard(key)
            log_debug(f"Resumed '{key}'")
            return
        if self.sound_specs[key].loop:
            if channel is not None and channel.get_busy():
                return
            self._channels[key] = sound.play(loops=-1)
            log_debug(f"Started loop for '{key}'")
        else:
            self._channels[key] = sound.play()
            log_debug(f"Played sound '{key}' once")

    def pause(self, key: str) -> None:
        if not self.enabled:
            return
        channel = self._channels.get(key)
        if channel is None or key in self._paused:
            return
        channel.pause()
        self._paused.add(key)
        log_debug(f"Paused '{key}'")

    def stop_all(self) -> None:
        if not self.enabled:
            return
        for key, channel in list(self._channels.items()):
            if channel is not None:
                channel.stop()
                log_debug(f"Stopped '{key}' via stop_all")
        self._channels.clear()
        self._paused.clear()
