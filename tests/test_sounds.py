"""Tests for settings persistence and sound synthesis.

Covers:
- Settings dataclass defaults and JSON round-trip
- Fallback to defaults on missing or malformed files
- Generated WAV data and the SoundManager playback API
"""

from __future__ import annotations

import io
import json
import wave

import pytest

import pomodoro.settings as settings_mod
from pomodoro.settings import Settings, load_settings, save_settings
from pomodoro.audio.sounds import (
    SoundManager,
    SOUND_NAMES,
    SAMPLE_RATE,
    _generate_start,
    _generate_complete,
    _generate_click,
    _make_envelope,
)


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_sound(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_window(self):
        s = Settings()
        assert s.window_x is None
        assert s.window_y is None
        assert s.window_width == 420
        assert s.window_height == 640
        assert s.always_on_top is False

    def test_no_timer_state(self):
        names = set(vars(Settings()))
        assert not any("remaining" in n or "preset" in n for n in names)


class TestSettingsPersistence:
    def test_round_trip(self):
        save_settings(Settings(sound_volume=42, always_on_top=True, window_x=10))
        loaded = load_settings()
        assert loaded.sound_volume == 42
        assert loaded.always_on_top is True
        assert loaded.window_x == 10

    def test_save_creates_directory(self):
        save_settings(Settings())
        assert settings_mod.SETTINGS_PATH.exists()

    def test_saved_file_is_json(self):
        save_settings(Settings(sound_enabled=False))
        data = json.loads(settings_mod.SETTINGS_PATH.read_text(encoding="utf-8"))
        assert data["sound_enabled"] is False

    def test_missing_file_returns_defaults(self):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self):
        settings_mod.APP_SUPPORT_DIR.mkdir(parents=True)
        settings_mod.SETTINGS_PATH.write_text("NOT VALID JSON", encoding="utf-8")
        assert load_settings() == Settings()

    def test_non_object_json_returns_defaults(self):
        settings_mod.APP_SUPPORT_DIR.mkdir(parents=True)
        settings_mod.SETTINGS_PATH.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self):
        settings_mod.APP_SUPPORT_DIR.mkdir(parents=True)
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"sound_volume": 15, "unknown_future_key": True}),
            encoding="utf-8",
        )
        s = load_settings()
        assert s.sound_volume == 15
        assert not hasattr(s, "unknown_future_key")


# ═══════════════════════════════════════════════════════════════════════
#  SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


def _read_wav(data: bytes) -> wave.Wave_read:
    return wave.open(io.BytesIO(data), "rb")


class TestSynthesis:
    @pytest.mark.parametrize(
        "generator", [_generate_start, _generate_complete, _generate_click],
    )
    def test_valid_mono_16bit_wav(self, generator):
        with _read_wav(generator()) as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == SAMPLE_RATE
            assert wf.getnframes() > 0

    def test_complete_longer_than_click(self):
        with _read_wav(_generate_complete()) as a, _read_wav(_generate_click()) as b:
            assert a.getnframes() > b.getnframes()

    def test_envelope_bounds(self):
        env = _make_envelope(1000)
        assert env.min() >= 0.0
        assert env.max() <= 1.0
        assert env[0] == 0.0
        assert env[-1] == 0.0


# ═══════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════


class TestSoundManager:
    def test_generates_cached_files(self, qapp, tmp_path):
        SoundManager(sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            assert (tmp_path / f"{name}.wav").exists()

    def test_loads_all_effects(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        assert set(mgr.loaded) == set(SOUND_NAMES)

    def test_existing_files_are_kept(self, qapp, tmp_path):
        SoundManager(sounds_dir=tmp_path)
        path = tmp_path / "click.wav"
        before = path.stat().st_mtime_ns
        SoundManager(sounds_dir=tmp_path)
        assert path.stat().st_mtime_ns == before

    def test_volume_clamped(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_volume(150)
        assert mgr.volume == 100
        mgr.set_volume(-5)
        assert mgr.volume == 0
        mgr.set_volume(35)
        assert mgr.volume == 35

    def test_enable_toggle(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        assert mgr.enabled
        mgr.set_enabled(False)
        assert not mgr.enabled

    def test_play_unknown_or_disabled_is_noop(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.play("does_not_exist")
        mgr.set_enabled(False)
        mgr.play("complete")

    def test_default_dir_is_patched(self, qapp):
        import pomodoro.audio.sounds as sounds_mod

        mgr = SoundManager()
        assert (sounds_mod.SOUNDS_DIR / "complete.wav").exists()
        assert mgr.loaded
