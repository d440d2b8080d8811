"""Converter registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from audio_pack.application.ports import NamedConverter
from audio_pack.converters.ffmpeg import FfmpegConverter
from audio_pack.errors import ConverterError

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """Registry for named audio converters."""

    def __init__(self) -> None:
        self._converters: dict[str, NamedConverter] = {}

    def register(self, converter: NamedConverter) -> None:
        """Register converter instance by unique name.

        Raises
        ------
        ConverterError
            If the converter has no usable name or no ``convert`` method.
        """
        name = str(getattr(converter, "name", "")).strip()
        if not name:
            raise ConverterError("Converter must define a non-empty 'name'.")
        if not callable(getattr(converter, "convert", None)):
            raise ConverterError(f"Converter '{name}' must define convert(source, target).")
        self._converters[name] = converter

    def names(self) -> list[str]:
        """Return registered converter names, sorted."""
        return sorted(self._converters.keys())

    def get(self, name: str) -> NamedConverter:
        """Get converter by name.

        Raises
        ------
        ConverterError
            If the name is not registered.
        """
        try:
            return self._converters[name]
        except KeyError as exc:
            raise ConverterError(
                f"Unknown converter '{name}'. Available converters: {', '.join(self.names())}"
            ) from exc

    def register_exports(self, module: ModuleType) -> None:
        """Register the converters a loaded module offers.

        A ``register_converters(registry)`` hook takes precedence. Otherwise every
        converter in ``CONVERTERS`` and the single ``CONVERTER`` are registered.

        Raises
        ------
        ConverterError
            If the module offers none of these.
        """
        hook = getattr(module, "register_converters", None)
        if callable(hook):
            hook(self)
            return

        offered = list(getattr(module, "CONVERTERS", None) or ())
        single = getattr(module, "CONVERTER", None)
        if single is not None:
            offered.append(single)
        if not offered:
            raise ConverterError(
                f"Converter module '{module.__name__}' offers no converters; define "
                "register_converters(registry), CONVERTERS, or CONVERTER."
            )
        for converter in offered:
            self.register(converter)

    def load_module(self, source: str) -> None:
        """Load a converter module from a ``.py`` file or a dotted name.

        The module must come from a trusted source; loading it runs its code.
        """
        module = load_converter_source(source)
        self.register_exports(module)
        logger.debug("Loaded converters from %s; now available: %s", source, self.names())


def load_converter_source(source: str) -> ModuleType:
    """Import the module behind ``source``.

    Existing files and anything ending in ``.py`` are loaded from disk under a
    private module name. Everything else goes through the normal import system.

    Raises
    ------
    ConverterError
        If the file is missing or the module fails to import.
    """
    path = Path(source)
    if not (path.suffix == ".py" or path.is_file()):
        try:
            return importlib.import_module(source)
        except Exception as exc:
            raise ConverterError(f"Cannot import converter module '{source}': {exc}") from exc

    if not path.is_file():
        raise ConverterError(f"Converter module file not found: {path}")
    spec = importlib.util.spec_from_file_location(f"audio_pack_converters_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ConverterError(f"Cannot load converter module from {path}.")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ConverterError(f"Converter module {path} failed to load: {exc}") from exc
    return module


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> ConverterRegistry:
    """Create a registry holding ``ffmpeg`` plus converters from ``extra_modules``."""
    registry = ConverterRegistry()
    registry.register(FfmpegConverter())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
