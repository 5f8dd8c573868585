"""Consistency checks over registered catalogs.

Translations are authored by hand per surface, so two catalogs of the same
group can drift apart. This module reports such defects for the catalog
owners; it never changes a catalog.

Attributes:
    MissingTranslation: Keys a language does not translate in one catalog.
    TranslationConflict: One key translated with swapped languages.
    find_missing_translations: Report incomplete non-default tables.
    find_translation_conflicts: Report swapped translations across surfaces.
    log_catalog_audit: Log both reports, used at startup.
"""

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from itertools import combinations

from bookcars_locale.logging_config import get_logger
from bookcars_locale.services.catalog import CatalogRegistry, Surface

logger = get_logger("audit")


@dataclass(frozen=True)
class MissingTranslation:
    """Keys of a catalog that a language does not translate.

    Attributes:
        surface: Surface owning the catalog.
        group: Catalog group name.
        language: The incomplete language.
        keys: Untranslated keys, in declaration order.
        has_table: False when the language has no table at all and the
            default language table is served instead.
    """

    surface: str
    group: str
    language: str
    keys: tuple[str, ...]
    has_table: bool


@dataclass(frozen=True)
class TranslationConflict:
    """A key whose two language texts are swapped between two surfaces.

    For ``first_language`` the first surface shows ``first_text`` and the
    second surface shows ``second_text``; for ``second_language`` it is the
    other way around.
    """

    group: str
    key: str
    first_surface: str
    second_surface: str
    first_language: str
    second_language: str
    first_text: str
    second_text: str


def find_missing_translations(
    registry: CatalogRegistry, languages: Collection[str]
) -> list[MissingTranslation]:
    """List untranslated keys of every non-default language.

    Args:
        registry: The registry to inspect.
        languages: Configured language codes.

    Returns:
        One record per incomplete (catalog, language) pair.
    """
    report: list[MissingTranslation] = []
    for catalog in registry:
        for language in languages:
            if language == registry.default_language:
                continue
            missing = catalog.missing_keys(language)
            if missing:
                report.append(
                    MissingTranslation(
                        surface=catalog.surface.value,
                        group=catalog.group,
                        language=language,
                        keys=tuple(key.value for key in missing),
                        has_table=catalog.has_language(language),
                    )
                )
    return report


def find_translation_conflicts(
    registries: Mapping[Surface, CatalogRegistry],
) -> list[TranslationConflict]:
    """Find keys translated with swapped languages between surfaces.

    Two catalogs sharing a group name conflict on a key when, for a pair of
    languages A and B, the first catalog's A text equals the second's B text
    and the first's B text equals the second's A text, while A and B differ.

    Args:
        registries: Registries by surface.

    Returns:
        Conflicts ordered by group, surface pair, key and language pair.
    """
    conflicts: list[TranslationConflict] = []
    surfaces = sorted(registries, key=lambda surface: surface.value)

    for first_surface, second_surface in combinations(surfaces, 2):
        first_registry = registries[first_surface]
        second_registry = registries[second_surface]
        for group in sorted(set(first_registry.groups()) & set(second_registry.groups())):
            first = first_registry.catalog(group)
            second = second_registry.catalog(group)
            keys = [
                key.value
                for key in first.keys
                if second.coerce_key(key.value) is not None
            ]
            languages = sorted(
                language for language in first.languages if second.has_language(language)
            )
            for key in keys:
                for lang_a, lang_b in combinations(languages, 2):
                    first_a = first.view(lang_a, lang_a).get(key)
                    first_b = first.view(lang_b, lang_b).get(key)
                    second_a = second.view(lang_a, lang_a).get(key)
                    second_b = second.view(lang_b, lang_b).get(key)
                    if None in (first_a, first_b, second_a, second_b):
                        continue
                    if first_a != first_b and first_a == second_b and first_b == second_a:
                        conflicts.append(
                            TranslationConflict(
                                group=group,
                                key=key,
                                first_surface=first_surface.value,
                                second_surface=second_surface.value,
                                first_language=lang_a,
                                second_language=lang_b,
                                first_text=first_a,
                                second_text=first_b,
                            )
                        )
    return conflicts


def log_catalog_audit(
    registries: Mapping[Surface, CatalogRegistry], languages: Collection[str]
) -> None:
    """Log translation conflicts as warnings and gaps at info level."""
    for conflict in find_translation_conflicts(registries):
        logger.warning(
            "Catalog %s.%s: %s/%s translations are swapped between %s and %s "
            "(%r vs %r)",
            conflict.group,
            conflict.key,
            conflict.first_language,
            conflict.second_language,
            conflict.first_surface,
            conflict.second_surface,
            conflict.first_text,
            conflict.second_text,
        )
    for surface, registry in registries.items():
        for missing in find_missing_translations(registry, languages):
            logger.info(
                "Catalog %s (%s) lacks %d %s translation(s)%s",
                missing.group,
                surface.value,
                len(missing.keys),
                missing.language,
                "" if missing.has_table else ", default language served",
            )
