"""Camera device and capability helpers.

Input shapes follow the browser APIs: ``enumerateDevices()`` entries
(``deviceId``, ``kind``, ``label``) and ``MediaStreamTrack.getCapabilities()``
ranges (``{"width": {"min", "max"}, "height": ..., "frameRate": ...}``).
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class Resolution:
    width: int
    height: int

    @property
    def label(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class CameraDevice:
    device_id: str
    label: str


@dataclass(frozen=True)
class CapabilityRange:
    """Inclusive min/max of one capability."""

    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["CapabilityRange"]:
        """Parse {"min", "max"}; None when the browser didn't report the range."""
        if not isinstance(raw, dict) or raw.get("max") is None:
            return None
        maximum = float(raw["max"])
        minimum = float(raw.get("min") or 0)
        return cls(min=minimum, max=maximum)


@dataclass(frozen=True)
class CameraCapabilities:
    width: Optional[CapabilityRange] = None
    height: Optional[CapabilityRange] = None
    frame_rate: Optional[CapabilityRange] = None

    @classmethod
    def from_media_capabilities(cls, raw: Dict[str, Any]) -> "CameraCapabilities":
        return cls(
            width=CapabilityRange.from_dict(raw.get("width")),
            height=CapabilityRange.from_dict(raw.get("height")),
            frame_rate=CapabilityRange.from_dict(raw.get("frameRate")),
        )


# Common presets, best first
RESOLUTION_PRESETS: List[Resolution] = [
    Resolution(3840, 2160),
    Resolution(2560, 1440),
    Resolution(1920, 1080),
    Resolution(1280, 720),
    Resolution(854, 480),
    Resolution(640, 480),
    Resolution(640, 360),
    Resolution(320, 240),
]

FRAME_RATE_PRESETS: List[int] = [60, 30, 25, 24, 15, 10, 5]


def _fits(value: float, bounds: Optional[CapabilityRange]) -> bool:
    # Unreported range: assume the preset is supported
    return bounds is None or bounds.contains(value)


def video_inputs(devices: Iterable[Dict[str, Any]]) -> List[CameraDevice]:
    """Keep video inputs; unnamed devices (no permission yet) become "Camera N"."""
    cameras: List[CameraDevice] = []
    for device in devices:
        if device.get("kind") != "videoinput":
            continue
        label = device.get("label") or f"Camera {len(cameras) + 1}"
        cameras.append(CameraDevice(device_id=device.get("deviceId", ""), label=label))
    return cameras


def resolution_options(capabilities: CameraCapabilities) -> List[Resolution]:
    """Presets that fit the device's width/height bounds.

    Falls back to the device maximum when no preset fits.
    """
    options = [
        preset
        for preset in RESOLUTION_PRESETS
        if _fits(preset.width, capabilities.width) and _fits(preset.height, capabilities.height)
    ]
    if options:
        return options
    smallest = RESOLUTION_PRESETS[-1]
    return [
        Resolution(
            int(capabilities.width.max) if capabilities.width else smallest.width,
            int(capabilities.height.max) if capabilities.height else smallest.height,
        )
    ]


def frame_rate_options(capabilities: CameraCapabilities) -> List[int]:
    """Frame-rate presets within the device's bounds, else the device maximum."""
    options = [rate for rate in FRAME_RATE_PRESETS if _fits(rate, capabilities.frame_rate)]
    if options:
        return options
    return [int(capabilities.frame_rate.max)]
