#!/usr/bin/env python3
"""Validate string catalogs against the configured languages."""

import sys
from pathlib import Path


def validate() -> bool:
    """Register every catalog and print the translation audit.

    Returns:
        True if every catalog can be served, False otherwise.
    """
    # Import here to ensure proper path
    sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

    from bookcars_locale.config.settings import get_settings
    from bookcars_locale.lang import create_registries
    from bookcars_locale.services.audit import (
        find_missing_translations,
        find_translation_conflicts,
    )
    from bookcars_locale.services.catalog import CatalogConfigurationError

    settings = get_settings()

    try:
        registries = create_registries(settings.default_language, settings)
    except CatalogConfigurationError as err:
        print(f"ERROR: {err}")
        return False

    conflicts = find_translation_conflicts(registries)
    if conflicts:
        print("WARNING: Translations swapped between surfaces:")
        for conflict in conflicts:
            print(
                f"  - {conflict.group}.{conflict.key} "
                f"[{conflict.first_language}/{conflict.second_language}] "
                f"{conflict.first_surface}={conflict.first_text!r} "
                f"{conflict.second_surface}={conflict.second_text!r}"
            )

    for surface, registry in registries.items():
        missing = find_missing_translations(registry, settings.languages)
        if not missing:
            continue
        print(f"WARNING: Missing {surface.value} translations:")
        for entry in missing:
            keys = ", ".join(entry.keys) if entry.has_table else "(no table)"
            print(f"  - {entry.group} [{entry.language}]: {keys}")

    total = sum(len(registry) for registry in registries.values())
    print(f"SUCCESS: {total} catalogs define default language {settings.default_language!r}")
    return True


def main() -> None:
    """Main entry point."""
    if not validate():
        sys.exit(1)


if __name__ == "__main__":
    main()
