"""
Tests unitaires pour le service de tri.

Ce module teste la construction du motif de recherche, la creation paresseuse
des repertoires de destination et la gestion "best-effort" des echecs, avec
un mock de IFileSystem.
"""

import re
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest

from syoboi_sorting.core.entities import CatalogEntry
from syoboi_sorting.core.errors import (
    DirectoryCreateError,
    DirectoryReadError,
    FileMoveError,
    PatternCompileError,
)
from syoboi_sorting.services.sorter import (
    DIRECTORY_MODE,
    MoveOperation,
    MoveStatus,
    SorterService,
    build_title_pattern,
)

ROOT = Path("/records")


@pytest.fixture
def sorter(mock_file_system: MagicMock) -> SorterService:
    return SorterService(file_system=mock_file_system)


# ====================
# Tests build_title_pattern
# ====================


class TestBuildTitlePattern:
    """Tests pour le motif "-[tags]Titre #"."""

    @pytest.mark.parametrize(
        "filename",
        [
            "-TitleA #01.mkv",
            "-[XY]TitleA #01.mkv",
            "-[字]TitleA #01.ts",
            "-[新][字]TitleA #12 「サブタイトル」.ts",
            "201004031800-[字][デ]TitleA #1.m2ts",
            "prefix -TitleA # suffix",
        ],
    )
    def test_matches_convention(self, filename: str):
        assert build_title_pattern("TitleA").search(filename)

    @pytest.mark.parametrize(
        "filename",
        [
            "randomfile.txt",
            "TitleA #01.mkv",  # pas de tiret
            "-TitleA#01.mkv",  # pas d'espace avant #
            "-TitleA 01.mkv",  # pas de marqueur
            "- TitleA #01.mkv",  # espace apres le tiret
            "-[XY] TitleA #01.mkv",
            "-TitleB #01.mkv",
            "-titlea #01.mkv",  # sensible a la casse
            "-TitleAB #01.mkv",
        ],
    )
    def test_rejects_other_names(self, filename: str):
        assert not build_title_pattern("TitleA").search(filename)

    @pytest.mark.parametrize(
        "title",
        [
            "けいおん!",
            "Re:ゼロから始める異世界生活",
            "C++ (1.0) [test] *?",
            "a.b",
            "$^|\\",
        ],
    )
    def test_title_is_literal(self, title: str):
        """Les metacaracteres du titre sont compares litteralement."""
        pattern = build_title_pattern(title)
        assert pattern.search(f"-[字]{title} #01.ts")

    def test_dot_in_title_does_not_match_any_character(self):
        assert not build_title_pattern("a.b").search("-axb #01.ts")

    def test_substring_match_is_not_anchored(self):
        pattern = build_title_pattern("TitleA")
        assert pattern.search("xx-TitleA #01yy")
        assert not pattern.fullmatch("xx-TitleA #01yy")

    def test_compile_failure_raises_pattern_error(self):
        with patch("syoboi_sorting.services.sorter.re.compile") as mock_compile:
            mock_compile.side_effect = re.error("boom")
            with pytest.raises(PatternCompileError) as exc_info:
                build_title_pattern("TitleA")
        assert exc_info.value.title == "TitleA"


# ====================
# Tests SorterService.sort
# ====================


class TestSortMoves:
    """Tests pour les deplacements."""

    def test_matching_file_is_moved_into_entry_directory(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = ["-[XY]TitleA #01.mkv"]

        report = sorter.sort(ROOT, [entry_a])

        mock_file_system.list_entries.assert_called_once_with(ROOT)
        mock_file_system.make_directory.assert_called_once_with(
            ROOT / "1234 TitleA", mode=DIRECTORY_MODE
        )
        mock_file_system.rename.assert_called_once_with(
            ROOT / "-[XY]TitleA #01.mkv", ROOT / "1234 TitleA" / "-[XY]TitleA #01.mkv"
        )
        assert report.moved_count == 1
        assert report.outcomes[0].status == MoveStatus.MOVED

    def test_non_matching_file_is_not_moved(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry, entry_b
    ):
        mock_file_system.list_entries.return_value = ["randomfile.txt"]

        report = sorter.sort(ROOT, [entry_a, entry_b])

        mock_file_system.make_directory.assert_not_called()
        mock_file_system.rename.assert_not_called()
        assert report.outcomes == []

    def test_existing_directory_is_not_recreated(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = ["-TitleA #01.mkv"]
        mock_file_system.is_directory.return_value = True

        sorter.sort(ROOT, [entry_a])

        mock_file_system.make_directory.assert_not_called()
        mock_file_system.rename.assert_called_once()

    def test_directory_created_once_for_several_matches(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = [
            "-TitleA #01.mkv",
            "-TitleA #02.mkv",
            "-[字]TitleA #03.ts",
        ]

        report = sorter.sort(ROOT, [entry_a])

        assert mock_file_system.make_directory.call_count == 1
        assert mock_file_system.rename.call_count == 3
        assert report.moved_count == 3

    def test_listing_taken_once_for_all_entries(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a, entry_b
    ):
        mock_file_system.list_entries.return_value = []

        sorter.sort(ROOT, [entry_a, entry_b, CatalogEntry(tid="9", title="X")])

        mock_file_system.list_entries.assert_called_once()

    def test_entries_processed_in_tid_order(
        self, sorter: SorterService, mock_file_system: MagicMock
    ):
        mock_file_system.list_entries.return_value = ["-B #1.ts", "-A #1.ts"]
        entries = [CatalogEntry(tid="2", title="B"), CatalogEntry(tid="1", title="A")]

        sorter.sort(ROOT, entries)

        assert mock_file_system.rename.call_args_list == [
            call(ROOT / "-A #1.ts", ROOT / "1 A" / "-A #1.ts"),
            call(ROOT / "-B #1.ts", ROOT / "2 B" / "-B #1.ts"),
        ]

    def test_overlapping_titles_move_file_once(
        self, sorter: SorterService, mock_file_system: MagicMock
    ):
        """Un fichier deplace n'est plus propose aux entrees suivantes."""
        mock_file_system.list_entries.return_value = ["-[字]Foo #01.ts"]
        # "Foo" et "[字]Foo" reconnaissent tous deux le fichier
        entries = [CatalogEntry(tid="20", title="[字]Foo"), CatalogEntry(tid="10", title="Foo")]

        report = sorter.sort(ROOT, entries)

        mock_file_system.rename.assert_called_once_with(
            ROOT / "-[字]Foo #01.ts", ROOT / "10 Foo" / "-[字]Foo #01.ts"
        )
        assert len(report.outcomes) == 1

    def test_on_move_called_before_each_move(
        self, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = ["-TitleA #01.mkv"]
        seen: list[MoveOperation] = []
        sorter = SorterService(file_system=mock_file_system, on_move=seen.append)

        sorter.sort(ROOT, [entry_a])

        assert seen == [
            MoveOperation(
                source=ROOT / "-TitleA #01.mkv",
                destination_dir=ROOT / "1234 TitleA",
                destination=ROOT / "1234 TitleA" / "-TitleA #01.mkv",
            )
        ]

    def test_accepts_any_iterable(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = ["-TitleA #01.mkv"]

        report = sorter.sort(ROOT, iter([entry_a]))

        assert report.moved_count == 1


class TestSortFailures:
    """Tests pour la gestion best-effort des erreurs."""

    def test_unreadable_directory_aborts_silently(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.side_effect = DirectoryReadError(ROOT)

        report = sorter.sort(ROOT, [entry_a])

        assert report.aborted
        assert report.abort_reason
        assert report.outcomes == []
        mock_file_system.make_directory.assert_not_called()
        mock_file_system.rename.assert_not_called()

    def test_directory_creation_failure_still_attempts_move(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = ["-TitleA #01.mkv"]
        mock_file_system.make_directory.side_effect = DirectoryCreateError(
            ROOT / "1234 TitleA"
        )

        report = sorter.sort(ROOT, [entry_a])

        mock_file_system.rename.assert_called_once()
        assert report.directory_errors == [str(ROOT / "1234 TitleA")]

    def test_move_failure_recorded_and_processing_continues(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a, entry_b
    ):
        mock_file_system.list_entries.return_value = [
            "-TitleA #01.mkv",
            "-TitleA #02.mkv",
            "-けいおん! #01.mkv",
        ]
        mock_file_system.rename.side_effect = [
            FileMoveError(ROOT / "a", ROOT / "b"),
            None,
            None,
        ]

        report = sorter.sort(ROOT, [entry_a, entry_b])

        assert mock_file_system.rename.call_count == 3
        assert report.failed_count == 1
        assert report.moved_count == 2
        failed = [o for o in report.outcomes if o.status == MoveStatus.FAILED]
        assert failed[0].operation.source == ROOT / "-TitleA #01.mkv"
        assert failed[0].error

    def test_pattern_error_skips_entry_only(
        self, sorter: SorterService, mock_file_system: MagicMock, entry_a, entry_b
    ):
        mock_file_system.list_entries.return_value = ["-TitleA #01.mkv", "-けいおん! #01.mkv"]

        real_build = build_title_pattern

        def fake_build(title: str):
            if title == "TitleA":
                raise PatternCompileError(title)
            return real_build(title)

        with patch("syoboi_sorting.services.sorter.build_title_pattern", side_effect=fake_build):
            report = sorter.sort(ROOT, [entry_a, entry_b])

        assert report.pattern_errors == ["TitleA"]
        mock_file_system.rename.assert_called_once_with(
            ROOT / "-けいおん! #01.mkv", ROOT / "5678 けいおん!" / "-けいおん! #01.mkv"
        )


class TestSortDryRun:
    def test_dry_run_changes_nothing(
        self, mock_file_system: MagicMock, entry_a: CatalogEntry
    ):
        mock_file_system.list_entries.return_value = ["-TitleA #01.mkv"]
        seen: list[MoveOperation] = []
        sorter = SorterService(file_system=mock_file_system, on_move=seen.append)

        report = sorter.sort(ROOT, [entry_a], dry_run=True)

        mock_file_system.make_directory.assert_not_called()
        mock_file_system.rename.assert_not_called()
        assert len(seen) == 1
        assert report.planned_count == 1
        assert report.moved_count == 0
