"""Discovery of translation files.

Modules and themes ship translations in a ``lang/`` directory holding one
file per locale, named ``<locale>.<ext>`` (e.g. ``lang/de_AT.yml``). A file
may also be named after a language only (``lang/de.yml``); it then counts as
the language's likely locale (``de_DE``).
"""

from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from localeforge.i18n.models import Module
from localeforge.i18n.priority import SourcePrioritizer
from localeforge.i18n.resolvers import LocaleResolver
from localeforge.logging import get_module_logger

logger = get_module_logger()

THEME_SET_PREFIX = "$"


class ModuleManifest:
    """The set of modules known to the application.

    Attributes:
        modules: Mapping of module name to module root path.
    """

    def __init__(self, modules: Optional[Mapping[str, Path]] = None):
        self.modules: Dict[str, Path] = {
            name: Path(path) for name, path in (modules or {}).items()
        }

    @classmethod
    def from_directory(
        cls, root: Path, exclude: Sequence[str] = ()
    ) -> "ModuleManifest":
        """Treat every sub-directory of root as a module.

        Hidden directories are ignored. Modules are listed by name.

        Args:
            root: Directory containing module directories.
            exclude: Directory names that are not modules (e.g. "themes").

        Returns:
            ModuleManifest instance.

        Raises:
            ValueError: If root is not a directory.
        """
        root = Path(root)
        if not root.is_dir():
            raise ValueError(f"Modules directory not found: {root}")

        modules = {
            entry.name: entry
            for entry in sorted(root.iterdir())
            if entry.is_dir()
            and not entry.name.startswith(".")
            and entry.name not in exclude
        }
        logger.info(
            "discovered_modules", root=str(root), module_count=len(modules)
        )
        return cls(modules)

    def __contains__(self, name: object) -> bool:
        return name in self.modules

    def __len__(self) -> int:
        return len(self.modules)


class TranslationSource:
    """Enumerates translation files of prioritized modules and themes.

    Attributes:
        manifest: Known modules.
        resolver: LocaleResolver used to normalize locale file names.
        prioritizer: SourcePrioritizer ordering the modules.
        module_priority: Configured priority order, lowest to highest.
        project_module: The application's own module.
        themes: Theme names whose lang/ directories are searched.
        themes_dir: Directory holding the themes.
        extensions: Recognized translation file extensions.
    """

    def __init__(
        self,
        manifest: ModuleManifest,
        resolver: LocaleResolver,
        prioritizer: Optional[SourcePrioritizer] = None,
        module_priority: Sequence[str] = (),
        project_module: str = "app",
        themes: Sequence[str] = (),
        themes_dir: Optional[Path] = None,
        extensions: Sequence[str] = ("yml", "yaml"),
    ):
        self.manifest = manifest
        self.resolver = resolver
        self.prioritizer = prioritizer or SourcePrioritizer()
        self.module_priority = list(module_priority)
        self.project_module = project_module
        self.themes = list(themes)
        self.themes_dir = Path(themes_dir) if themes_dir is not None else None
        self.extensions = tuple(ext.lstrip(".") for ext in extensions)

    def sorted_modules(self) -> Dict[str, Path]:
        """Return known modules, highest priority first."""
        return self.prioritizer.sorted_modules(
            self.manifest.modules,
            self.module_priority,
            self.project_module,
        )

    def lang_dirs(self) -> List[Path]:
        """Return existing lang/ directories, highest priority first.

        Module directories come first in module priority order, followed
        by the directories of configured themes. Theme sets (names starting
        with "$") are not themes and are skipped.
        """
        paths = []

        for name, module_path in self.sorted_modules().items():
            lang_path = Module(name=name, path=module_path).lang_dir
            if lang_path.is_dir():
                paths.append(lang_path)

        if self.themes_dir is not None:
            for theme in self.themes:
                if theme.startswith(THEME_SET_PREFIX):
                    continue
                lang_path = Module(name=theme, path=self.themes_dir / theme).lang_dir
                if lang_path.is_dir():
                    paths.append(lang_path)

        return paths

    def locale_files(self, locale: str) -> List[Path]:
        """Return the files contributing strings to a locale.

        Files are ordered from lowest to highest priority so that merging
        them in order lets higher priority modules override lower ones.
        Inside one directory a language file ("de.yml") precedes a regional
        one ("de_DE.yml").

        Args:
            locale: Locale to collect files for (e.g. "de_DE").

        Returns:
            List of translation file paths.
        """
        files = []
        for lang_path in reversed(self.lang_dirs()):
            matches = [
                path
                for path, file_locale in self._scan(lang_path)
                if file_locale == locale
            ]
            # Language-only files first: "de" sorts before "de_DE"
            files.extend(sorted(matches, key=lambda path: (len(path.stem), path.name)))
        return files

    def existing_translations(self) -> Dict[str, str]:
        """Return locales that have translation files.

        Locales are normalized through their likely subtags and must be
        known to the locale table.

        Returns:
            Dict of locale -> display name, sorted by display name.
        """
        locales: Dict[str, str] = {}
        for lang_path in self.lang_dirs():
            for _, locale in self._scan(lang_path):
                name = self.resolver.locale_name(locale)
                if name is not None:
                    locales[locale] = name

        return dict(sorted(locales.items(), key=lambda item: item[1]))

    def _scan(self, lang_path: Path) -> Iterator[Tuple[Path, str]]:
        for path in sorted(lang_path.iterdir()):
            if not path.is_file() or not path.stem:
                continue
            if path.suffix.lstrip(".") not in self.extensions:
                continue
            yield path, self.resolver.locale_from_language(path.stem)
