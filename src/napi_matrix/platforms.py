"""Registry of supported Node-API build platforms."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

MACOS_HOST = "macos-latest"
WINDOWS_HOST = "windows-latest"
LINUX_HOST = "ubuntu-22.04"

USE_CROSS = ("--use-cross",)
USE_NAPI_CROSS = ("--use-napi-cross",)
CROSS_COMPILE = ("-x",)
# aarch64-unknown-freebsd is tier 3, so std has to be rebuilt for it.
BUILD_STD = ("--", "-Zbuild-std=core,std,alloc,proc_macro,panic_abort")


@dataclass(frozen=True)
class Platform:
    """A build target and the runner able to compile it."""

    identifier: str
    host: str
    extra_args: tuple[str, ...] = ()

    def build_invocation(self, build_command: str) -> str:
        """Return the build command parametrized for this platform."""
        parts = [build_command, "--target", self.identifier, *self.extra_args]
        return " ".join(parts)


@dataclass(frozen=True)
class MatrixEntry:
    """Single row of a build matrix."""

    host: str
    target: str
    build: str

    def as_dict(self) -> dict[str, str]:
        return {"host": self.host, "target": self.target, "build": self.build}


def _platform_table(*platforms: Platform) -> Mapping[str, Platform]:
    return MappingProxyType({platform.identifier: platform for platform in platforms})


PLATFORMS: Mapping[str, Platform] = _platform_table(
    Platform("x86_64-apple-darwin", MACOS_HOST),
    Platform("x86_64-pc-windows-msvc", WINDOWS_HOST),
    Platform("i686-pc-windows-msvc", WINDOWS_HOST),
    Platform("x86_64-unknown-linux-gnu", LINUX_HOST, USE_NAPI_CROSS),
    Platform("x86_64-unknown-linux-musl", LINUX_HOST, CROSS_COMPILE),
    Platform("aarch64-apple-darwin", MACOS_HOST),
    Platform("aarch64-unknown-linux-gnu", LINUX_HOST, USE_CROSS),
    Platform("armv7-unknown-linux-gnueabihf", LINUX_HOST, USE_CROSS),
    Platform("aarch64-linux-android", LINUX_HOST),
    Platform("armv7-linux-androideabi", LINUX_HOST),
    Platform("aarch64-unknown-linux-musl", LINUX_HOST, CROSS_COMPILE),
    Platform("aarch64-pc-windows-msvc", WINDOWS_HOST),
    Platform("x86_64-unknown-freebsd", LINUX_HOST, USE_CROSS),
    Platform("aarch64-unknown-freebsd", LINUX_HOST, USE_CROSS + BUILD_STD),
    Platform("riscv64gc-unknown-linux-gnu", LINUX_HOST, USE_CROSS),
    Platform("riscv64gc-unknown-linux-musl", LINUX_HOST, USE_CROSS),
)


def get_platform(identifier: str) -> Platform | None:
    """Return the registered platform for an identifier, if any."""
    return PLATFORMS.get(identifier)


def is_supported(identifier: str) -> bool:
    return identifier in PLATFORMS


def list_platforms() -> list[Platform]:
    """Return registered platforms in registry order."""
    return list(PLATFORMS.values())


def lookup(identifier: str, build_command: str) -> MatrixEntry | None:
    """Resolve an identifier into a matrix entry, or None when unsupported."""
    platform = PLATFORMS.get(identifier)
    if platform is None:
        return None
    return MatrixEntry(
        host=platform.host,
        target=platform.identifier,
        build=platform.build_invocation(build_command),
    )


def platform_as_dict(platform: Platform) -> dict[str, Any]:
    """Serialize a platform for JSON output."""
    return {
        "identifier": platform.identifier,
        "host": platform.host,
        "extra_args": list(platform.extra_args),
    }


def format_platform(platform: Platform) -> str:
    """Format a platform as a single line of text."""
    line = f"{platform.identifier}: {platform.host}"
    if platform.extra_args:
        line = f"{line} ({' '.join(platform.extra_args)})"
    return line
