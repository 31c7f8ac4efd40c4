"""Audio container detection by magic number.

Used as a precondition check before sending audio to a multimodal agent.
"""

import os
import struct

from maestro.core.errors import UnsupportedAudio

HEADER_SIZE = 64
MIN_FILE_SIZE = 12

# ftyp major brands: 'M4A ', 'isom', 'mp42', 'MSNV', 'MP41'
MP4_AUDIO_BRANDS = frozenset({
    0x4D344120,
    0x69736F6D,
    0x6D703432,
    0x4D534E56,
    0x4D503431,
})


def looks_like_wav(h: bytes) -> bool:
    return len(h) >= 12 and h[0:4] == b"RIFF" and h[8:12] == b"WAVE"


def looks_like_flac(h: bytes) -> bool:
    return h[0:4] == b"fLaC"


def looks_like_ogg(h: bytes) -> bool:
    return h[0:4] == b"OggS"


def looks_like_mp3(h: bytes) -> bool:
    if len(h) < 3:
        return False
    if h[0:3] == b"ID3":
        return True
    # MPEG-1/2/2.5 frame sync
    return h[0] == 0xFF and (h[1] & 0xE0) == 0xE0


def looks_like_mp4(h: bytes) -> bool:
    if len(h) < 12 or h[4:8] != b"ftyp":
        return False
    (brand,) = struct.unpack(">I", h[8:12])
    return brand in MP4_AUDIO_BRANDS


def looks_like_aac_adts(h: bytes) -> bool:
    # 12-bit syncword 0xFFF
    return len(h) >= 2 and h[0] == 0xFF and (h[1] & 0xF0) == 0xF0


def is_supported_audio(header: bytes) -> bool:
    """Check whether a byte prefix starts a known audio container."""
    h = bytes(header[:HEADER_SIZE])
    return (
        looks_like_wav(h)
        or looks_like_mp3(h)
        or looks_like_flac(h)
        or looks_like_ogg(h)
        or looks_like_mp4(h)
        or looks_like_aac_adts(h)
    )


def validate_audio_file(path: str) -> None:
    """Reject paths that are not readable audio files.

    Raises:
        UnsupportedAudio: With the reason the file was rejected.
    """
    if not path or not path.strip():
        raise UnsupportedAudio(path or "", "empty path")
    if not os.path.exists(path):
        raise UnsupportedAudio(path, "file not found")
    if os.path.isdir(path):
        raise UnsupportedAudio(path, "path points to a directory")
    if os.path.getsize(path) < MIN_FILE_SIZE:
        raise UnsupportedAudio(path, "file too small to hold a valid header")

    with open(path, "rb") as f:
        header = f.read(HEADER_SIZE)

    if not is_supported_audio(header):
        raise UnsupportedAudio(path, "unrecognized audio format")
