"""Audio magic-number detection tests."""

import pytest

from maestro.core.errors import InvalidArgument, UnsupportedAudio
from maestro.services.audio import is_supported_audio, validate_audio_file


@pytest.mark.parametrize("header", [
    b"RIFF\x24\x00\x00\x00WAVE" + b"\x00" * 32,
    b"fLaC\x00\x00\x00\x22",
    b"OggS\x00\x02",
    b"ID3\x04\x00\x00",
    b"\xff\xfb\x90\x64",
    b"\x00\x00\x00\x20ftypM4A \x00\x00\x00\x00",
    b"\x00\x00\x00\x18ftypisom",
    b"\x00\x00\x00\x18ftypmp42",
    b"\xff\xf1\x50\x80",
])
def test_known_containers(header):
    assert is_supported_audio(header)


@pytest.mark.parametrize("header", [
    bytes(44),
    b"",
    b"RIFF\x00\x00\x00\x00AVI ",
    b"\x00\x00\x00\x18ftypqt  ",
    b"%PDF-1.7",
    b"\x89PNG\r\n\x1a\n",
])
def test_rejected_headers(header):
    assert not is_supported_audio(header)


def test_wav_needs_twelve_bytes():
    assert not is_supported_audio(b"RIFF\x00\x00\x00\x00WAV")


def test_validate_accepts_wav(wav_file):
    validate_audio_file(wav_file)


@pytest.mark.parametrize("reason", ["empty path", "file not found", "directory", "too small", "unrecognized"])
def test_validate_rejections(tmp_path, reason):
    if reason == "empty path":
        path = ""
    elif reason == "file not found":
        path = str(tmp_path / "nope.wav")
    elif reason == "directory":
        path = str(tmp_path)
    elif reason == "too small":
        path = str(tmp_path / "tiny.wav")
        (tmp_path / "tiny.wav").write_bytes(b"RIFF")
    else:
        path = str(tmp_path / "doc.pdf")
        (tmp_path / "doc.pdf").write_bytes(b"%PDF-1.7" + bytes(56))

    with pytest.raises(UnsupportedAudio) as exc_info:
        validate_audio_file(path)
    assert reason in exc_info.value.reason
    assert isinstance(exc_info.value, InvalidArgument)
