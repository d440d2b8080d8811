"""Staged construction of ``PackRequest`` with validation on ``build()``."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from audio_pack.application.options import PackRequest
from audio_pack.application.ports import AudioConverter
from audio_pack.collect import collect_source_files
from audio_pack.errors import ConfigurationError
from audio_pack.schemas import PackRequestConfig
from audio_pack.types import DEFAULT_SOURCE_EXTENSION, DEFAULT_TARGET_EXTENSION, PathRef


class PackRequestBuilder:
    """Collect pack settings, then validate them all at once in ``build()``.

    Setters only record values and return the builder, so calls can be
    chained. Source files are filtered by extension when ``build()`` runs,
    which means ``source_extension`` may be set in any order.
    """

    def __init__(self) -> None:
        self._files: list[PathRef | None] = []
        self._input_directory: PathRef | None = None
        self._output_path: PathRef | None = None
        self._namespace: str | None = None
        self._description: str = ""
        self._pack_format: int = 0
        self._converter: AudioConverter | None = None
        self._source_extension = DEFAULT_SOURCE_EXTENSION
        self._target_extension = DEFAULT_TARGET_EXTENSION

    def add_source_file(self, path: PathRef | None) -> PackRequestBuilder:
        self._files.append(path)
        return self

    def add_source_files(self, paths: Iterable[PathRef | None] | None) -> PackRequestBuilder:
        for path in paths or ():
            self.add_source_file(path)
        return self

    def input_directory(self, path: PathRef | None) -> PackRequestBuilder:
        self._input_directory = path
        return self

    def output_path(self, path: PathRef | None) -> PackRequestBuilder:
        self._output_path = path
        return self

    def namespace(self, name: str | None) -> PackRequestBuilder:
        self._namespace = name
        return self

    def description(self, text: str | None) -> PackRequestBuilder:
        self._description = "" if text is None else text
        return self

    def pack_format(self, value: int) -> PackRequestBuilder:
        self._pack_format = value
        return self

    def converter(self, converter: AudioConverter | None) -> PackRequestBuilder:
        self._converter = converter
        return self

    def source_extension(self, extension: str) -> PackRequestBuilder:
        self._source_extension = extension
        return self

    def target_extension(self, extension: str) -> PackRequestBuilder:
        self._target_extension = extension
        return self

    def build(self) -> PackRequest:
        """Validate every field and collect sources.

        Returns
        -------
        PackRequest
            Immutable request ready for ``create_resource_pack``.

        Raises
        ------
        ConfigurationError
            If any field is invalid, the input directory is not a directory,
            or no candidate source file is found.
        """
        if self._output_path is None:
            raise ConfigurationError("Output ZIP file must be specified.")
        try:
            config = PackRequestConfig(
                output_path=Path(self._output_path),
                namespace=self._namespace,
                description=self._description,
                pack_format=self._pack_format,
                source_extension=self._source_extension,
                target_extension=self._target_extension,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid pack request: {exc}") from exc

        if self._converter is None:
            raise ConfigurationError("An AudioConverter implementation must be provided.")
        if not callable(getattr(self._converter, "convert", None)):
            raise ConfigurationError(
                f"Converter {self._converter!r} does not define convert(source, target)."
            )

        sources = collect_source_files(
            self._files,
            self._input_directory,
            extension=config.source_extension,
        )
        if not sources:
            raise ConfigurationError(
                f"No valid {config.source_extension} files specified or found in input directory."
            )

        return PackRequest(
            sources=tuple(sources),
            output_path=config.output_path,
            namespace=config.namespace,
            description=config.description,
            pack_format=config.pack_format,
            converter=self._converter,
            source_extension=config.source_extension,
            target_extension=config.target_extension,
        )
