"""
Unit tests for the command-line runner.
"""
import json

import run_extraction
from contact_extraction.entity_extraction.ner_adapter import NerModelHandle


class TestRunExtraction:

    def test_prints_camel_case_json(self, fake_ner, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr(
            run_extraction,
            "NerModelHandle",
            lambda: NerModelHandle(loader=lambda: fake_ner([("Sara", "B-PER")]), model_name="fake"),
        )
        source = tmp_path / "card.txt"
        source.write_text("Sara 09123456789 sara@example.com", encoding="utf-8")

        exit_code = run_extraction.main(["run_extraction.py", str(source)])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["firstName"] == "Sara"
        assert data["phoneNumbers"][0]["number"] == "09123456789"
        assert data["emailAddresses"][0]["address"] == "sara@example.com"
        assert data["notes"] == ""

    def test_failed_extraction_exits_nonzero(self, monkeypatch, tmp_path, capsys):
        def loader():
            raise OSError("no model")

        monkeypatch.setattr(
            run_extraction,
            "NerModelHandle",
            lambda: NerModelHandle(loader=loader, model_name="missing"),
        )
        source = tmp_path / "card.txt"
        source.write_text("Sara 09123456789", encoding="utf-8")

        exit_code = run_extraction.main(["run_extraction.py", str(source)])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert data["notes"] == "Sara 09123456789"
