"""Validate the artifact and skin upgrade cost tables."""

from __future__ import annotations

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from tools.tables import configured_table_path
from upgrades.artifacts import calculate_artifact_upgrade
from upgrades.errors import UpgradeTableError
from upgrades.skins import calculate_skin_upgrade
from upgrades.tables import SkinType, load_artifact_table, load_skin_table


class Command(BaseCommand):
    """Load each table through the schema validator and report a summary."""

    help = "Validate the upgrade cost tables (configured paths unless overridden)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--artifact",
            default=None,
            help="Path to an artifact-upgrades JSON file (default: settings.UPGRADE_TABLES['artifact']).",
        )
        parser.add_argument(
            "--skin",
            default=None,
            help="Path to a skin-upgrades JSON file (default: settings.UPGRADE_TABLES['skin']).",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        artifact_path = Path(options["artifact"]) if options["artifact"] else configured_table_path("artifact")
        skin_path = Path(options["skin"]) if options["skin"] else configured_table_path("skin")

        failures: list[str] = []

        try:
            artifact_table = load_artifact_table(artifact_path)
        except UpgradeTableError as exc:
            failures.extend(f"artifact: {error}" for error in exc.errors)
        else:
            full = calculate_artifact_upgrade(1, table=artifact_table)
            tiers = ", ".join(
                f"{tier.tier.value}={tier.start}-{tier.end}/{tier.chest_yield}" for tier in artifact_table
            )
            self.stdout.write(
                f"[OK] artifact {artifact_path}: {tiers}; level 1 -> 100 needs {full.total_chests} chests"
            )

        try:
            skin_table = load_skin_table(skin_path)
        except UpgradeTableError as exc:
            failures.extend(f"skin: {error}" for error in exc.errors)
        else:
            totals = ", ".join(
                f"{skin.value}={calculate_skin_upgrade(skin, 1, table=skin_table).stones}" for skin in SkinType
            )
            self.stdout.write(
                f"[OK] skin {skin_path}: level 1 -> 60 stones {totals}; "
                f"{len(skin_table.other_skin_names)} other skins"
            )

        if failures:
            joined = "\n".join(f"- {failure}" for failure in failures)
            raise CommandError(f"Upgrade table validation failed:\n{joined}")
        return None
