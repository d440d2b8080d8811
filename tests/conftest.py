"""Shared pytest configuration, marker assignment, and converter doubles."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class SucceedingConverter:
    """Write a small payload for every source and report success."""

    name = "succeed"

    def __init__(self) -> None:
        self.calls: list[tuple[Path, Path]] = []

    def convert(self, source_path: Path, target_path: Path) -> bool:
        self.calls.append((source_path, target_path))
        target_path.write_bytes(b"OggS" + source_path.name.encode("utf-8"))
        return True


class FailingConverter:
    """Leave a partial file behind and report failure."""

    name = "fail"

    def __init__(self) -> None:
        self.calls: list[tuple[Path, Path]] = []

    def convert(self, source_path: Path, target_path: Path) -> bool:
        self.calls.append((source_path, target_path))
        target_path.write_bytes(b"partial")
        return False


class FlakyConverter(SucceedingConverter):
    """Fail or raise for selected source file names, succeed otherwise."""

    name = "flaky"

    def __init__(
        self,
        fail_names: Iterable[str] = (),
        raise_names: Iterable[str] = (),
    ) -> None:
        super().__init__()
        self.fail_names = set(fail_names)
        self.raise_names = set(raise_names)

    def convert(self, source_path: Path, target_path: Path) -> bool:
        if source_path.name in self.raise_names:
            self.calls.append((source_path, target_path))
            target_path.write_bytes(b"corrupt")
            raise RuntimeError(f"decoder crashed on {source_path.name}")
        if source_path.name in self.fail_names:
            self.calls.append((source_path, target_path))
            return False
        return super().convert(source_path, target_path)


@pytest.fixture
def succeeding_converter() -> SucceedingConverter:
    return SucceedingConverter()


@pytest.fixture
def failing_converter() -> FailingConverter:
    return FailingConverter()


@pytest.fixture
def flaky_converter() -> type[FlakyConverter]:
    return FlakyConverter


@pytest.fixture
def make_audio(tmp_path: Path) -> Callable[..., Path]:
    """Create placeholder source audio files under ``tmp_path``."""

    def _make(name: str, subdir: str = "src") -> Path:
        directory = tmp_path / subdir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(b"ID3" + name.encode("utf-8"))
        return path

    return _make
