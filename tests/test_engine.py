"""
Tests for the record loader, result formatter, search engine and CLI.
"""

import pytest

import config
import main
from ngram_search import FuzzySearchEngine, InvertedIndex, MergedIndex, RecordLoader, ResultFormatter


class TestRecordLoader:
    def test_parse_line(self):
        loader = RecordLoader(config)
        assert loader.parse_line("k\t some text ") == ("k", "some text")
        assert loader.parse_line("no delimiter") == ("no delimiter", "no delimiter")

    def test_load_records_skips_blank_lines(self, records_file):
        records = RecordLoader(config).load_records(records_file)
        assert records == [
            ("pleased", "pleased"),
            ("blazed", "blazed"),
            ("foobar", "foobar"),
            ("just a line", "just a line"),
            ("renee", "Renée François"),
        ]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RecordLoader(config).load_records(tmp_path / "missing.tsv")


class TestResultFormatter:
    def test_edit_distance_uses_normalized_text(self):
        formatter = ResultFormatter(config)
        assert formatter.edit_distance("RENEE", "renee") == 0
        assert formatter.edit_distance("Renée", "renee") == 1

    def test_clip(self):
        formatter = ResultFormatter(config)
        assert formatter.clip("short", max_chars=10) == "short"
        assert formatter.clip("abcdefghij", max_chars=5) == "abcd…"
        assert formatter.clip("a\nb", max_chars=5) == "a b"

    def test_build_rows(self):
        headers, rows = ResultFormatter(config).build_rows([("k", 4)], {"k": "kitten"}, "sitting")
        assert headers == ["#", "Key", "Score", "Dist", "Text"]
        assert rows == [["1", "k", "4", "3", "kitten"]]

    def test_print_empty(self, capsys):
        ResultFormatter(config).print_results_table([], {}, "q")
        assert "No matching records found." in capsys.readouterr().out

    def test_render_table_aligns_columns(self):
        lines = ResultFormatter(config).render_table(["#", "Key"], [["1", "longer key"], ["2", "k"]])
        assert lines == [
            "# | Key       ",
            "--+-----------",
            "1 | longer key",
            "2 | k         ",
        ]

    def test_long_keys_are_clipped(self):
        _, rows = ResultFormatter(config).build_rows([("k" * 50, 1)], {}, "q")
        assert rows[0][1] == "k" * (config.KEY_CHARS - 1) + "…"

    def test_print_table(self, capsys):
        ResultFormatter(config).print_results_table([("k", 4)], {"k": "kitten"}, "sitting")
        out = capsys.readouterr().out
        assert "=== Top Results ===" in out
        assert "kitten" in out


class TestFuzzySearchEngine:
    @pytest.mark.parametrize("index_type,index_cls", [("inverted", InvertedIndex), ("merged", MergedIndex)])
    def test_build_and_search(self, records_file, index_type, index_cls):
        engine = FuzzySearchEngine(corpus_file=str(records_file), config_dict={"INDEX_TYPE": index_type})
        engine.build_index()
        assert isinstance(engine.index, index_cls)
        assert engine.search("pleased")[0][0] == "pleased"
        assert engine.search("renee francois", top_k=1)[0][0] == "renee"

    def test_search_before_build(self, records_file):
        engine = FuzzySearchEngine(corpus_file=str(records_file))
        with pytest.raises(RuntimeError):
            engine.search("pleased")
        assert engine.get_stats() == {"error": "Index not built"}

    def test_unknown_index_type(self):
        with pytest.raises(ValueError):
            FuzzySearchEngine(config_dict={"INDEX_TYPE": "btree"})

    def test_add_without_corpus(self):
        engine = FuzzySearchEngine(config_dict={"BOUNDED": False, "NGRAM_DEPTH": 3})
        engine.add(69, "boof")
        engine.add(420, "foob")
        assert engine.search("oof") == [(69, 3), (420, 1)]

    def test_repeated_keys_accumulate(self, tmp_path):
        path = tmp_path / "dup.tsv"
        path.write_text("k\tfoo\nk\tbar\n", encoding="utf-8")
        engine = FuzzySearchEngine(corpus_file=str(path), config_dict={"INDEX_TYPE": "merged"})
        engine.build_index()
        assert [key for key, _ in engine.search("foo")] == ["k"]
        assert [key for key, _ in engine.search("bar")] == ["k"]
        assert engine.records == {"k": "foo; bar"}

    def test_convert_keeps_results(self, records_file):
        engine = FuzzySearchEngine(corpus_file=str(records_file))
        engine.build_index()
        before = engine.search("blaze")
        engine.convert()
        assert isinstance(engine.index, MergedIndex)
        assert engine.search("blaze") == before
        engine.convert()
        assert isinstance(engine.index, InvertedIndex)
        assert engine.search("blaze") == before

    def test_stats(self, records_file):
        engine = FuzzySearchEngine(corpus_file=str(records_file))
        engine.build_index()
        stats = engine.get_stats()
        assert stats["index_type"] == "InvertedIndex"
        assert stats["num_records"] == 5
        assert stats["depth"] == config.NGRAM_DEPTH
        assert stats["num_keys"] == 5

    def test_build_twice_is_noop(self, records_file):
        engine = FuzzySearchEngine(corpus_file=str(records_file))
        engine.build_index()
        index = engine.index
        engine.build_index()
        assert engine.index is index
        engine.build_index(force_rebuild=True)
        assert engine.index is not index


class TestCli:
    def test_single_query(self, records_file, capsys):
        main.main(["--corpus-file", str(records_file), "--query", "pleased", "--top-k", "1"])
        out = capsys.readouterr().out
        assert "=== Top Results ===" in out
        assert "pleased" in out

    def test_stats_build_only(self, records_file, capsys):
        main.main(["--corpus-file", str(records_file), "--index-type", "merged", "--stats", "--build-only"])
        out = capsys.readouterr().out
        assert "index_type: MergedIndex" in out
        assert "Index building complete." in out

    def test_missing_corpus_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["--corpus-file", str(tmp_path / "missing.tsv"), "--query", "x"])
        assert exc.value.code == 1
        assert "Error building index" in capsys.readouterr().out


class TestEngineState:
    def test_interactive_search_keeps_added_records(self, tmp_path, monkeypatch, capsys):
        engine = FuzzySearchEngine(corpus_file=str(tmp_path / "missing.tsv"))
        engine.add("mine", "pineapple")
        answers = iter(["pineapple", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        engine.interactive_search()

        assert engine.records == {"mine": "pineapple"}
        out = capsys.readouterr().out
        assert "Building index first" not in out
        assert "mine" in out

    def test_repeated_identical_text_not_duplicated(self):
        engine = FuzzySearchEngine()
        engine.add("k", "foo")
        engine.add("k", "foo")
        engine.add("k", "bar")
        assert engine.records == {"k": "foo; bar"}

    def test_rebuild_keeps_converted_representation(self, records_file):
        engine = FuzzySearchEngine(corpus_file=str(records_file))
        engine.build_index()
        engine.convert()
        assert engine.index_type == "merged"

        engine.build_index(force_rebuild=True)
        assert isinstance(engine.index, MergedIndex)
        assert engine.get_stats()["representation"] == "merged"
        assert engine.search("pleased")[0][0] == "pleased"
