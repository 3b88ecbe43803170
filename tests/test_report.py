"""
Tests for the text export.
"""

from pathlib import Path

import pytest

from image_duplicate_detector.config import BANNER
from image_duplicate_detector.report import read_report, write_report

GROUPS = [
    [Path('photos/a.png'), Path('photos/a copy.png')],
    [Path('photos/b.jpg'), Path('photos/sub/b.jpg'), Path('photos/b2.jpg')],
]


class TestWriteReport:
    def test_format(self, tmp_path):
        report = tmp_path / 'report.txt'
        write_report(GROUPS, report)

        lines = report.read_text(encoding='utf-8').splitlines()
        assert lines == [
            BANNER,
            '=== GROUP 0 ===',
            str(Path('photos/a.png')),
            str(Path('photos/a copy.png')),
            '=== GROUP 1 ===',
            str(Path('photos/b.jpg')),
            str(Path('photos/sub/b.jpg')),
            str(Path('photos/b2.jpg')),
        ]

    def test_existing_file_is_not_overwritten(self, tmp_path):
        report = tmp_path / 'report.txt'
        report.write_text('keep me', encoding='utf-8')

        with pytest.raises(FileExistsError):
            write_report(GROUPS, report)
        assert report.read_text(encoding='utf-8') == 'keep me'

    def test_no_groups_writes_header_only(self, tmp_path):
        report = tmp_path / 'report.txt'
        write_report([], report)
        assert report.read_text(encoding='utf-8') == f"{BANNER}\n"


class TestReadReport:
    def test_reads_back_written_groups(self, tmp_path):
        report = tmp_path / 'report.txt'
        write_report(GROUPS, report)
        assert read_report(report) == GROUPS
