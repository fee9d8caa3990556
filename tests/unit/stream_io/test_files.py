"""Tests for caller-side roster file helpers."""

from __future__ import annotations

import pytest

from rollcall.core.exceptions import StreamOpenError
from rollcall.io.files import load_roster, open_roster, save_roster
from rollcall.models.student import Gender, Student
from tests.fakes import MemoryDiagnostics

LERA = Student(name="Lera", form=10, gender=Gender.GIRL)
VASEA = Student(name="Vasea", form=12, gender=Gender.BOY)


class TestSaveRoster:
    def test_writes_file(self, tmp_path):
        path = tmp_path / "data.csv"
        assert save_roster(path, [LERA, VASEA]) == 2
        assert path.read_text(encoding="utf-8") == "Lera,10,G,\nVasea,12,B,\n"

    def test_overwrites_by_default(self, tmp_path):
        path = tmp_path / "data.csv"
        save_roster(path, [LERA])
        save_roster(path, [VASEA])
        assert path.read_text(encoding="utf-8") == "Vasea,12,B,\n"

    def test_append(self, tmp_path):
        path = tmp_path / "data.csv"
        save_roster(path, [LERA])
        save_roster(path, [VASEA], append=True)
        assert load_roster(path) == [LERA, VASEA]

    def test_missing_directory_raises_open_error(self, tmp_path):
        with pytest.raises(StreamOpenError) as info:
            save_roster(tmp_path / "nope" / "data.csv", [LERA])
        assert info.value.mode == "w"


class TestLoadRoster:
    def test_reads_back(self, tmp_path):
        path = tmp_path / "data.csv"
        save_roster(path, [LERA, VASEA])
        assert load_roster(path) == [LERA, VASEA]

    def test_empty_file_is_empty_list(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert load_roster(path) == []

    def test_missing_file_raises_open_error(self, tmp_path):
        with pytest.raises(StreamOpenError) as info:
            load_roster(tmp_path / "missing.csv")
        assert "missing.csv" in str(info.value)

    def test_reports_bad_lines(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("Lera,10,G,\nOnlyOneField\nVasea,12,B,\n", encoding="utf-8")
        diagnostics = MemoryDiagnostics()
        assert load_roster(path, diagnostics=diagnostics) == [LERA, VASEA]
        assert len(diagnostics) == 1


class TestOpenRoster:
    def test_closes_file(self, tmp_path):
        path = tmp_path / "data.csv"
        with open_roster(path, "w") as fh:
            fh.write("x")
        assert fh.closed
